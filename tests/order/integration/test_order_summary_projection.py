"""The order summary projection follows placement and status changes."""

from protean import current_domain

from storefront.actions.admin import update_order_status
from storefront.actions.cart import add_to_cart
from storefront.actions.orders import create_order
from storefront.projections.order_summary import OrderSummary, order_summaries


def test_summary_row_written_on_placement(customer, make_variant, checkout_input):
    add_to_cart(customer, make_variant(price=400.0), 3)
    placed = create_order(customer, checkout_input).value

    summary = current_domain.repository_for(OrderSummary).get(placed["order_id"])

    assert summary.order_number == placed["order_number"]
    assert summary.customer_id == customer.id
    assert summary.status == "PENDING"
    assert summary.item_count == 3
    assert summary.total == 1200.0 + 150.0 + 144.0


def test_summary_follows_status(customer, admin, make_variant, checkout_input):
    add_to_cart(customer, make_variant(), 1)
    order_id = create_order(customer, checkout_input).value["order_id"]

    update_order_status(admin, order_id, "CANCELLED")

    assert current_domain.repository_for(OrderSummary).get(order_id).status == "CANCELLED"


def test_all_customers_when_unscoped(customer, other_customer, make_variant, checkout_for):
    for user in (customer, other_customer):
        add_to_cart(user, make_variant(), 1)
        create_order(user, checkout_for(user))

    assert len(order_summaries()) == 2
    assert len(order_summaries(limit=1)) == 1
