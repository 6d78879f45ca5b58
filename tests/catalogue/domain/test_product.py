"""Tests for the Product aggregate."""

import pytest
from protean.exceptions import ValidationError

from storefront.catalogue.events import ProductCreated, ProductDeleted
from storefront.catalogue.product import Product


def _product():
    return Product.create(name="Linen Camp Shirt", slug="linen-camp-shirt", brand="Tabako")


class TestProductCreation:
    def test_create(self):
        product = _product()
        assert product.name == "Linen Camp Shirt"
        assert product.is_deleted is False
        assert isinstance(product._events[0], ProductCreated)

    def test_slug_required(self):
        with pytest.raises(ValidationError):
            Product.create(name="No Slug", slug=None)


class TestProductImages:
    def test_primary_image_is_first_added(self):
        product = _product()
        product.add_image("https://cdn.example.com/front.jpg", alt_text="Front")
        product.add_image("https://cdn.example.com/back.jpg", alt_text="Back")

        assert product.primary_image().url == "https://cdn.example.com/front.jpg"

    def test_no_images(self):
        assert _product().primary_image() is None


class TestSoftDelete:
    def test_soft_delete_sets_timestamp(self):
        product = _product()
        product.soft_delete()

        assert product.is_deleted
        assert isinstance(product._events[-1], ProductDeleted)

    def test_cannot_delete_twice(self):
        product = _product()
        product.soft_delete()
        with pytest.raises(ValidationError):
            product.soft_delete()
