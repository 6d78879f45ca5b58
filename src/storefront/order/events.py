"""Domain events for the Order aggregate.

Both events feed the ``OrderSummary`` projection used by the account and
admin order listings.
"""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A cart was checked out into a new order."""

    __version__ = 1

    order_id = Identifier(required=True)
    order_number = String(required=True)
    customer_id = Identifier(required=True)
    email = String()
    status = String(required=True)
    payment_status = String(required=True)
    fulfillment_status = String(required=True)
    shipping_method = String(required=True)
    payment_method = String(required=True)
    item_count = Integer(required=True)
    subtotal = Float(required=True)
    shipping = Float(required=True)
    tax = Float(required=True)
    total = Float(required=True)
    currency = String(required=True)
    placed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    """Staff moved an order along its lifecycle."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    payment_status = String(required=True)
    fulfillment_status = String(required=True)
    changed_by = String()
    changed_at = DateTime(required=True)
