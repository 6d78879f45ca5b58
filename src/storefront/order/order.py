"""Order aggregate (CQRS): the record a checkout leaves behind.

Line items carry snapshots of name, SKU and unit price taken at checkout, so
later catalogue changes never alter an existing order.

State Machine:
    PENDING → CONFIRMED → PROCESSING → SHIPPED → DELIVERED → REFUNDED
    PENDING → PROCESSING
    PENDING/CONFIRMED/PROCESSING → CANCELLED → REFUNDED
"""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change
from protean.exceptions import ValidationError
from protean.fields import (
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    Text,
    ValueObject,
)

from storefront.domain import storefront
from storefront.order.events import OrderPlaced, OrderStatusChanged


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"


class PaymentStatus(Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class FulfillmentStatus(Enum):
    UNFULFILLED = "UNFULFILLED"
    PARTIALLY_FULFILLED = "PARTIALLY_FULFILLED"
    FULFILLED = "FULFILLED"


class ShippingMethod(Enum):
    STANDARD = "standard"
    EXPRESS = "express"


class PaymentMethod(Enum):
    CARD = "card"
    GCASH = "gcash"
    PAYMAYA = "paymaya"
    COD = "cod"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: {OrderStatus.REFUNDED},
    OrderStatus.CANCELLED: {OrderStatus.REFUNDED},
    OrderStatus.REFUNDED: set(),  # Terminal
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@storefront.value_object(part_of="Order")
class OrderPricing:
    """Amounts computed once at checkout and stored as-is."""

    subtotal = Float(required=True, min_value=0.0)
    shipping = Float(required=True, min_value=0.0)
    tax = Float(required=True, min_value=0.0)
    discount = Float(default=0.0, min_value=0.0)
    total = Float(required=True, min_value=0.0)
    currency = String(max_length=3, default="PHP")


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderItem:
    variant_id = Identifier(required=True)
    product_id = Identifier(required=True)
    name = Text(required=True)  # "<product> - <variant>" at checkout
    sku = String(required=True, max_length=100)  # Same bound as ProductVariant.sku
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)
    total_price = Float(required=True, min_value=0.0)


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    order_number = String(required=True, max_length=50, unique=True)
    customer_id = Identifier(required=True)
    email = String(max_length=254)
    phone = String(max_length=30)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    fulfillment_status = String(choices=FulfillmentStatus, default=FulfillmentStatus.UNFULFILLED.value)
    pricing = ValueObject(OrderPricing)
    shipping_address_id = Identifier(required=True)
    billing_address_id = Identifier(required=True)
    shipping_method = String(required=True, choices=ShippingMethod)
    payment_method = String(required=True, choices=PaymentMethod)
    items = HasMany(OrderItem)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        order_number,
        customer_id,
        lines,
        pricing,
        shipping_address_id,
        billing_address_id,
        shipping_method,
        payment_method,
        email=None,
        phone=None,
    ):
        """Create a PENDING order from priced lines.

        Args:
            lines: dicts with variant_id, product_id, name, sku, quantity and unit_price.
        """
        if not lines:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = datetime.now(UTC)
        order = cls(
            order_number=order_number,
            customer_id=customer_id,
            email=email,
            phone=phone,
            status=OrderStatus.PENDING.value,
            payment_status=PaymentStatus.PENDING.value,
            fulfillment_status=FulfillmentStatus.UNFULFILLED.value,
            pricing=pricing,
            shipping_address_id=shipping_address_id,
            billing_address_id=billing_address_id,
            shipping_method=shipping_method,
            payment_method=payment_method,
            created_at=now,
            updated_at=now,
        )

        for line in lines:
            order.add_items(
                OrderItem(
                    variant_id=line["variant_id"],
                    product_id=line["product_id"],
                    name=line["name"],
                    sku=line["sku"],
                    quantity=line["quantity"],
                    unit_price=line["unit_price"],
                    total_price=round(line["unit_price"] * line["quantity"], 2),
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_number=order.order_number,
                customer_id=str(customer_id),
                email=email,
                status=order.status,
                payment_status=order.payment_status,
                fulfillment_status=order.fulfillment_status,
                shipping_method=shipping_method,
                payment_method=payment_method,
                item_count=sum(line["quantity"] for line in lines),
                subtotal=pricing.subtotal,
                shipping=pricing.shipping,
                tax=pricing.tax,
                total=pricing.total,
                currency=pricing.currency,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def change_status(self, new_status, changed_by=None):
        """Move the order to ``new_status`` if the transition map allows it.

        Shipping or delivering marks the order fulfilled. Delivering a cash on
        delivery order marks it paid. Refunding marks the payment refunded.
        """
        target = OrderStatus(new_status)
        current = OrderStatus(self.status)
        if target not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})

        now = datetime.now(UTC)
        with atomic_change(self):
            self.status = target.value
            if target in (OrderStatus.SHIPPED, OrderStatus.DELIVERED):
                self.fulfillment_status = FulfillmentStatus.FULFILLED.value
            if target == OrderStatus.DELIVERED and self.payment_method == PaymentMethod.COD.value:
                self.payment_status = PaymentStatus.PAID.value
            if target == OrderStatus.REFUNDED:
                self.payment_status = PaymentStatus.REFUNDED.value
            self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=current.value,
                new_status=target.value,
                payment_status=self.payment_status,
                fulfillment_status=self.fulfillment_status,
                changed_by=changed_by,
                changed_at=now,
            )
        )

    @property
    def item_count(self):
        return sum(item.quantity for item in self.items)
