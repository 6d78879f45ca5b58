"""Checkout: turn a customer's cart into an order in a single unit of work.

The handler reads the cart, checks that both addresses are the customer's
own, checks stock for every line, prices the lines at current prices,
creates the order, books a SALE movement per line through the inventory
ledger and removes the ordered lines from the cart. Any exception rolls
back every step.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.address.address import Address
from storefront.cart.cart import ShoppingCart
from storefront.catalogue.product import Product
from storefront.catalogue.variant import ProductVariant
from storefront.domain import storefront
from storefront.inventory.ledger import record_stock_movement
from storefront.inventory.log import MovementType
from storefront.order.order import Order, PaymentMethod, ShippingMethod
from storefront.order.pricing import calculate_pricing, generate_order_number
from storefront.shared.errors import EmptyCartError, InsufficientStockError

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier(required=True)
    email = String(max_length=254)
    phone = String(max_length=30)
    shipping_address_id = Identifier(required=True)
    billing_address_id = Identifier(required=True)
    shipping_method = String(required=True, choices=ShippingMethod)
    payment_method = String(required=True, choices=PaymentMethod)


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart_repo = current_domain.repository_for(ShoppingCart)
        cart = cart_repo.for_customer(command.customer_id)
        if cart is None or not cart.items:
            raise EmptyCartError({"cart": ["Cart is empty"]})

        addresses = current_domain.repository_for(Address)
        for field in ("shipping_address_id", "billing_address_id"):
            if addresses.owned_by(getattr(command, field), command.customer_id) is None:
                raise ValidationError({field: ["Address not found"]})

        variant_repo = current_domain.repository_for(ProductVariant)
        product_repo = current_domain.repository_for(Product)

        # Check every line before touching anything
        lines = []
        shortages = {}
        for item in cart.items:
            variant = variant_repo.get(item.variant_id)
            if not variant.can_fulfil(item.quantity):
                available = variant.inventory if variant.is_active else 0
                shortages[variant.sku] = [f"Only {available} available, {item.quantity} requested"]
                continue
            lines.append((item, variant, product_repo.get(variant.product_id)))

        if shortages:
            raise InsufficientStockError(shortages)

        subtotal = sum(variant.price * item.quantity for item, variant, _ in lines)
        pricing = calculate_pricing(subtotal, command.shipping_method)

        order = Order.place(
            order_number=generate_order_number(),
            customer_id=command.customer_id,
            email=command.email,
            phone=command.phone,
            lines=[
                {
                    "variant_id": str(variant.id),
                    "product_id": str(product.id),
                    "name": f"{product.name} - {variant.name}",
                    "sku": variant.sku,
                    "quantity": item.quantity,
                    "unit_price": variant.price,
                }
                for item, variant, product in lines
            ],
            pricing=pricing,
            shipping_address_id=command.shipping_address_id,
            billing_address_id=command.billing_address_id,
            shipping_method=command.shipping_method,
            payment_method=command.payment_method,
        )
        current_domain.repository_for(Order).add(order)

        for item, variant, _ in lines:
            record_stock_movement(
                variant,
                delta=-item.quantity,
                movement_type=MovementType.SALE,
                reason=f"Order {order.order_number}",
                reference=str(order.id),
                recorded_by=str(command.customer_id),
            )

        cart.check_out([item.id for item, _, _ in lines], order_id=order.id)
        cart_repo.add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            order_number=order.order_number,
            customer_id=str(command.customer_id),
            line_count=len(lines),
            total=pricing.total,
        )
        return {"order_id": str(order.id), "order_number": order.order_number}
