"""Checkout and order history actions."""

from protean.utils.globals import current_domain

from storefront.actions.boundary import action, require_user, revalidate
from storefront.order.placement import PlaceOrder
from storefront.order.queries import customer_order
from storefront.projections.order_summary import order_summaries


@action("Failed to create order")
def create_order(user, data: dict):
    """Check out the user's cart.

    ``data`` holds shipping_address_id, billing_address_id, shipping_method
    and payment_method. Returns ``{"order_id", "order_number"}``.
    """
    require_user(user)
    command = PlaceOrder(
        customer_id=user.id,
        email=user.email,
        phone=user.phone,
        shipping_address_id=data.get("shipping_address_id"),
        billing_address_id=data.get("billing_address_id"),
        shipping_method=data.get("shipping_method"),
        payment_method=data.get("payment_method"),
    )
    placed = current_domain.process(command, asynchronous=False)
    revalidate("/cart", "/account/orders")
    return placed


@action("Failed to load order")
def get_order(user, order_id):
    require_user(user)
    return customer_order(user.id, order_id)


@action("Failed to load orders")
def list_orders(user):
    require_user(user)
    return order_summaries(customer_id=user.id)
