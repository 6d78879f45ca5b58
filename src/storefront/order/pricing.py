"""Checkout pricing rules and order number generation."""

import secrets
import string
import time

from storefront.order.order import OrderPricing, ShippingMethod

CURRENCY = "PHP"
TAX_RATE = 0.12
EXPRESS_SHIPPING = 200.0
STANDARD_SHIPPING = 150.0
FREE_SHIPPING_THRESHOLD = 2500.0  # Standard shipping is free strictly above this subtotal

ORDER_NUMBER_PREFIX = "TBK"
_ORDER_NUMBER_ALPHABET = string.digits + string.ascii_uppercase
_ORDER_NUMBER_SUFFIX_LENGTH = 6


def shipping_cost(subtotal: float, shipping_method: str) -> float:
    if ShippingMethod(shipping_method) == ShippingMethod.EXPRESS:
        return EXPRESS_SHIPPING
    return 0.0 if subtotal > FREE_SHIPPING_THRESHOLD else STANDARD_SHIPPING


def calculate_pricing(subtotal: float, shipping_method: str) -> OrderPricing:
    """Price a cart subtotal: shipping by method and threshold, 12% tax, no discount."""
    subtotal = round(subtotal, 2)
    shipping = shipping_cost(subtotal, shipping_method)
    tax = round(subtotal * TAX_RATE, 2)
    return OrderPricing(
        subtotal=subtotal,
        shipping=shipping,
        tax=tax,
        discount=0.0,
        total=round(subtotal + shipping + tax, 2),
        currency=CURRENCY,
    )


def generate_order_number(now_ms: int | None = None) -> str:
    """``TBK-<epoch millis>-<6 random base36 chars>``, e.g. ``TBK-1718000000000-4QZ7XK``."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_ORDER_NUMBER_ALPHABET) for _ in range(_ORDER_NUMBER_SUFFIX_LENGTH))
    return f"{ORDER_NUMBER_PREFIX}-{now_ms}-{suffix}"
