"""Application tests for order reads and staff status changes."""

from protean import current_domain

from storefront.actions.admin import update_order_status
from storefront.actions.cart import add_to_cart
from storefront.actions.orders import create_order, get_order, list_orders
from storefront.order.order import Order
from storefront.shared.result import ErrorKind


def _place(user, make_variant, checkout_input, price=1000.0):
    add_to_cart(user, make_variant(price=price), 1)
    return create_order(user, checkout_input).value["order_id"]


class TestGetOrder:
    def test_own_order_with_items(self, customer, make_variant, checkout_input):
        order_id = _place(customer, make_variant, checkout_input)

        details = get_order(customer, order_id).value

        assert details["id"] == order_id
        assert len(details["items"]) == 1
        assert details["total"] == 1000.0 + 150.0 + 120.0

    def test_other_customers_order_is_not_found(self, customer, other_customer, make_variant, checkout_input):
        order_id = _place(customer, make_variant, checkout_input)
        assert get_order(other_customer, order_id).kind == ErrorKind.NOT_FOUND


class TestListOrders:
    def test_newest_first_and_scoped_to_customer(
        self, customer, other_customer, make_variant, checkout_input, checkout_for
    ):
        first = _place(customer, make_variant, checkout_input)
        second = _place(customer, make_variant, checkout_input)
        _place(other_customer, make_variant, checkout_for(other_customer))

        summaries = list_orders(customer).value

        assert [s["id"] for s in summaries] == [second, first]


class TestUpdateOrderStatus:
    def test_admin_moves_order_forward(self, customer, admin, make_variant, checkout_input, page_cache):
        order_id = _place(customer, make_variant, checkout_input)

        result = update_order_status(admin, order_id, "CONFIRMED")

        assert result.value == {"status": "CONFIRMED"}
        assert current_domain.repository_for(Order).get(order_id).status == "CONFIRMED"
        assert "/admin/orders" in page_cache.revalidated

    def test_backwards_move_rejected(self, customer, admin, make_variant, checkout_input):
        order_id = _place(customer, make_variant, checkout_input)
        for status in ("PROCESSING", "SHIPPED", "DELIVERED"):
            assert update_order_status(admin, order_id, status).is_ok

        result = update_order_status(admin, order_id, "PENDING")

        assert result.kind == ErrorKind.VALIDATION
        assert current_domain.repository_for(Order).get(order_id).status == "DELIVERED"

    def test_unknown_status_is_validation_error(self, customer, admin, make_variant, checkout_input):
        order_id = _place(customer, make_variant, checkout_input)
        assert update_order_status(admin, order_id, "LOST").kind == ErrorKind.VALIDATION

    def test_customer_cannot_change_status(self, customer, make_variant, checkout_input):
        order_id = _place(customer, make_variant, checkout_input)
        assert update_order_status(customer, order_id, "CONFIRMED").kind == ErrorKind.FORBIDDEN

    def test_missing_order(self, admin):
        assert update_order_status(admin, "no-such-order", "CONFIRMED").kind == ErrorKind.NOT_FOUND
