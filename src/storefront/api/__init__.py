"""Storefront API package."""

from storefront.api.routes import (
    address_router,
    admin_router,
    cart_router,
    order_router,
    product_router,
    wishlist_router,
)

__all__ = ["address_router", "admin_router", "cart_router", "order_router", "product_router", "wishlist_router"]
