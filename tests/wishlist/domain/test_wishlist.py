"""Tests for the Wishlist aggregate."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.wishlist.events import WishlistItemAdded, WishlistItemRemoved
from storefront.wishlist.wishlist import Wishlist


def test_add_product():
    wishlist = Wishlist.create("cust-001")
    wishlist.add_product("prod-001")

    assert wishlist.contains("prod-001")
    assert isinstance(wishlist._events[-1], WishlistItemAdded)


def test_same_product_twice_is_rejected():
    wishlist = Wishlist.create("cust-001")
    wishlist.add_product("prod-001")

    with pytest.raises(ValidationError) as exc:
        wishlist.add_product("prod-001")
    assert exc.value.messages["product_id"] == ["Item already in wishlist"]
    assert len(wishlist.items) == 1


def test_remove_product():
    wishlist = Wishlist.create("cust-001")
    wishlist.add_product("prod-001")
    wishlist.add_product("prod-002")

    wishlist.remove_product("prod-001")

    assert not wishlist.contains("prod-001")
    assert wishlist.contains("prod-002")
    assert isinstance(wishlist._events[-1], WishlistItemRemoved)


def test_remove_missing_product():
    with pytest.raises(ObjectNotFoundError):
        Wishlist.create("cust-001").remove_product("prod-404")
