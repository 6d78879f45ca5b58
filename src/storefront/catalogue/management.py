"""Catalogue management: commands and handlers used by staff tooling."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.catalogue.variant import ProductVariant
from storefront.domain import storefront
from storefront.inventory.ledger import record_stock_movement
from storefront.inventory.log import MovementType


@storefront.command(part_of="Product")
class CreateProduct:
    name = String(required=True, max_length=255)
    slug = String(required=True, max_length=255)
    brand = String(max_length=100)
    description = Text()
    is_featured = Boolean(default=False)
    image_urls = Text()  # JSON: list of image URLs, first is the display image


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id = Identifier(required=True)


@storefront.command(part_of="ProductVariant")
class AddVariant:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    sku = String(required=True, max_length=100)
    price = Float(required=True, min_value=0.0)
    compare_at_price = Float(min_value=0.0)
    initial_inventory = Integer(default=0, min_value=0)
    size = String(max_length=50)
    color = String(max_length=50)
    is_default = Boolean(default=False)
    added_by = String(max_length=255)


@storefront.command(part_of="ProductVariant")
class UpdateVariantPrice:
    variant_id = Identifier(required=True)
    price = Float(required=True, min_value=0.0)
    compare_at_price = Float(min_value=0.0)


@storefront.command_handler(part_of=Product)
class ManageProductsHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        if current_domain.repository_for(Product).by_slug(command.slug) is not None:
            raise ValidationError({"slug": ["A product with this slug already exists"]})

        product = Product.create(
            name=command.name,
            slug=command.slug,
            brand=command.brand,
            description=command.description,
            is_featured=command.is_featured or False,
        )

        image_urls = json.loads(command.image_urls) if command.image_urls else []
        for url in image_urls:
            product.add_image(url, alt_text=command.name)

        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(DeleteProduct)
    def delete_product(self, command):
        """Soft-delete the product and take its variants off sale."""
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.soft_delete()
        repo.add(product)

        variant_repo = current_domain.repository_for(ProductVariant)
        for variant in variant_repo.for_product(str(product.id)):
            variant.deactivate()
            variant_repo.add(variant)


@storefront.command_handler(part_of=ProductVariant)
class ManageVariantsHandler:
    @handle(AddVariant)
    def add_variant(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)
        if product.is_deleted:
            raise ValidationError({"product_id": ["Cannot add variants to a deleted product"]})

        variant = ProductVariant.create(
            product_id=str(product.id),
            name=command.name,
            sku=command.sku,
            price=command.price,
            compare_at_price=command.compare_at_price,
            size=command.size,
            color=command.color,
            is_default=command.is_default or False,
        )

        if command.initial_inventory:
            record_stock_movement(
                variant,
                delta=command.initial_inventory,
                movement_type=MovementType.INITIAL,
                reason="Opening stock",
                reference=str(product.id),
                recorded_by=command.added_by,
            )
        else:
            current_domain.repository_for(ProductVariant).add(variant)

        return str(variant.id)

    @handle(UpdateVariantPrice)
    def update_variant_price(self, command):
        repo = current_domain.repository_for(ProductVariant)
        variant = repo.get(command.variant_id)
        variant.change_price(command.price, compare_at_price=command.compare_at_price)
        repo.add(variant)
