"""Application tests for the cart actions."""

from protean import current_domain

from storefront.actions.cart import (
    add_to_cart,
    get_cart_count,
    get_cart_items,
    remove_from_cart,
    update_cart_quantity,
)
from storefront.cart.cart import ShoppingCart
from storefront.shared.result import Err, ErrorKind, Ok


def _cart_of(customer_id):
    return current_domain.repository_for(ShoppingCart).for_customer(customer_id)


class TestAddToCart:
    def test_first_add_creates_cart(self, customer, make_variant, page_cache):
        variant_id = make_variant()

        result = add_to_cart(customer, variant_id, 2)

        assert isinstance(result, Ok)
        cart = _cart_of(customer.id)
        assert cart.items[0].quantity == 2
        assert str(cart.items[0].id) == result.value["item_id"]
        assert page_cache.revalidated == ["/cart"]

    def test_adding_twice_upserts(self, customer, make_variant):
        variant_id = make_variant()
        add_to_cart(customer, variant_id, 1)
        add_to_cart(customer, variant_id, 2)

        cart = _cart_of(customer.id)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 3

    def test_quantity_not_bounded_by_stock(self, customer, make_variant):
        variant_id = make_variant(inventory=1)
        assert add_to_cart(customer, variant_id, 5).is_ok

    def test_unknown_variant(self, customer):
        result = add_to_cart(customer, "no-such-variant", 1)
        assert isinstance(result, Err)
        assert result.kind == ErrorKind.NOT_FOUND

    def test_zero_quantity_rejected(self, customer, make_variant):
        result = add_to_cart(customer, make_variant(), 0)
        assert result.kind == ErrorKind.VALIDATION
        assert "quantity" in result.errors

    def test_unauthenticated(self, make_variant, page_cache):
        result = add_to_cart(None, make_variant(), 1)
        assert result.kind == ErrorKind.UNAUTHENTICATED
        assert page_cache.revalidated == []


class TestUpdateAndRemove:
    def test_update_overwrites_quantity(self, customer, make_variant):
        item_id = add_to_cart(customer, make_variant(), 1).value["item_id"]

        assert update_cart_quantity(customer, item_id, 4).is_ok
        assert _cart_of(customer.id).items[0].quantity == 4

    def test_negative_quantity_removes(self, customer, make_variant):
        item_id = add_to_cart(customer, make_variant(), 1).value["item_id"]

        assert update_cart_quantity(customer, item_id, -1).is_ok
        assert _cart_of(customer.id).items == []

    def test_remove(self, customer, make_variant):
        item_id = add_to_cart(customer, make_variant(), 1).value["item_id"]

        assert remove_from_cart(customer, item_id).is_ok
        assert _cart_of(customer.id).items == []

    def test_cannot_touch_another_customers_item(self, customer, other_customer, make_variant):
        item_id = add_to_cart(customer, make_variant(), 1).value["item_id"]

        result = remove_from_cart(other_customer, item_id)
        assert result.kind == ErrorKind.NOT_FOUND
        assert result.message == "Cart item not found"
        assert update_cart_quantity(other_customer, item_id, 9).kind == ErrorKind.NOT_FOUND
        assert _cart_of(customer.id).items[0].quantity == 1


class TestReads:
    def test_items_carry_variant_and_product_details(self, customer, make_product, make_variant):
        product_id = make_product(name="Habi Tote", brand="Habi")
        variant_id = make_variant(product_id=product_id, price=650.0, name="One Size / Natural")
        add_to_cart(customer, variant_id, 2)

        rows = get_cart_items(customer).value

        assert len(rows) == 1
        row = rows[0]
        assert row["variant"]["price"] == 650.0
        assert row["product"]["name"] == "Habi Tote"
        assert row["product"]["brand"] == "Habi"
        assert row["product"]["image_url"] == "https://cdn.example.com/shirt.jpg"
        assert row["line_total"] == 1300.0

    def test_items_newest_first(self, customer, make_variant):
        first = make_variant(name="S / Black")
        second = make_variant(name="L / Black")
        add_to_cart(customer, first, 1)
        add_to_cart(customer, second, 1)

        rows = get_cart_items(customer).value
        assert [row["variant"]["id"] for row in rows] == [second, first]

    def test_count_sums_quantities(self, customer, make_variant):
        add_to_cart(customer, make_variant(), 2)
        add_to_cart(customer, make_variant(), 3)
        assert get_cart_count(customer).value == 5

    def test_anonymous_reads_are_empty(self):
        assert get_cart_items(None).value == []
        assert get_cart_count(None).value == 0
