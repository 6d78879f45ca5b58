"""FastAPI routes for the storefront.

Handlers call the actions layer and translate its ``Result`` into HTTP:
``Ok`` values become the JSON body and each ``ErrorKind`` maps to one status.
"""

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from storefront.actions import addresses as address_actions
from storefront.actions import admin as admin_actions
from storefront.actions import cart as cart_actions
from storefront.actions import orders as order_actions
from storefront.actions import wishlist as wishlist_actions
from storefront.actions.boundary import action
from storefront.api.identity import current_user
from storefront.api.schemas import (
    AddressRequest,
    AddToCartRequest,
    AddVariantRequest,
    CreateOrderRequest,
    CreateProductRequest,
    RestockRequest,
    SetStockRequest,
    UpdateCartQuantityRequest,
    UpdateOrderStatusRequest,
    UpdateVariantPriceRequest,
    WishlistRequest,
)
from storefront.catalogue.queries import featured_products, list_products, product_by_slug
from storefront.shared.result import ErrorKind, Ok

_STATUS_FOR_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.EMPTY_CART: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.OUT_OF_STOCK: 409,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INFRASTRUCTURE: 500,
}


def respond(result, status_code=200):
    if isinstance(result, Ok):
        content = result.value if result.value is not None else {"status": "ok"}
        return JSONResponse(status_code=status_code, content=jsonable_encoder(content))
    return JSONResponse(
        status_code=_STATUS_FOR_KIND[result.kind],
        content={"error": result.message, "kind": result.kind.value, "errors": result.errors},
    )


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("")
async def get_cart(user=Depends(current_user)):
    return respond(cart_actions.get_cart_items(user))


@cart_router.get("/count")
async def get_cart_count(user=Depends(current_user)):
    result = cart_actions.get_cart_count(user)
    if isinstance(result, Ok):
        result = Ok({"count": result.value})
    return respond(result)


@cart_router.post("/items", status_code=201)
async def add_to_cart(body: AddToCartRequest, user=Depends(current_user)):
    return respond(cart_actions.add_to_cart(user, body.variant_id, body.quantity), status_code=201)


@cart_router.patch("/items/{item_id}")
async def update_cart_quantity(item_id: str, body: UpdateCartQuantityRequest, user=Depends(current_user)):
    return respond(cart_actions.update_cart_quantity(user, item_id, body.quantity))


@cart_router.delete("/items/{item_id}")
async def remove_from_cart(item_id: str, user=Depends(current_user)):
    return respond(cart_actions.remove_from_cart(user, item_id))


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201)
async def create_order(body: CreateOrderRequest, user=Depends(current_user)):
    return respond(order_actions.create_order(user, body.model_dump()), status_code=201)


@order_router.get("")
async def list_orders(user=Depends(current_user)):
    return respond(order_actions.list_orders(user))


@order_router.get("/{order_id}")
async def get_order(order_id: str, user=Depends(current_user)):
    return respond(order_actions.get_order(user, order_id))


# ---------------------------------------------------------------------------
# Admin Router
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/admin", tags=["admin"])


@admin_router.get("/dashboard")
async def dashboard(user=Depends(current_user)):
    return respond(admin_actions.get_dashboard_stats(user))


@admin_router.get("/orders")
async def admin_orders(offset: int = 0, limit: int = 50, user=Depends(current_user)):
    return respond(admin_actions.get_admin_orders(user, offset=offset, limit=limit))


@admin_router.put("/orders/{order_id}/status")
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest, user=Depends(current_user)):
    return respond(admin_actions.update_order_status(user, order_id, body.status))


@admin_router.get("/low-stock")
async def low_stock(user=Depends(current_user)):
    return respond(admin_actions.get_low_stock_products(user))


@admin_router.post("/products", status_code=201)
async def create_product(body: CreateProductRequest, user=Depends(current_user)):
    return respond(admin_actions.create_product(user, body.model_dump()), status_code=201)


@admin_router.delete("/products/{product_id}")
async def delete_product(product_id: str, user=Depends(current_user)):
    return respond(admin_actions.delete_product(user, product_id))


@admin_router.post("/products/{product_id}/variants", status_code=201)
async def add_variant(product_id: str, body: AddVariantRequest, user=Depends(current_user)):
    return respond(admin_actions.add_variant(user, product_id, body.model_dump()), status_code=201)


@admin_router.put("/variants/{variant_id}/stock")
async def set_stock(variant_id: str, body: SetStockRequest, user=Depends(current_user)):
    return respond(admin_actions.update_product_stock(user, variant_id, body.stock, reason=body.reason))


@admin_router.post("/variants/{variant_id}/restock")
async def restock(variant_id: str, body: RestockRequest, user=Depends(current_user)):
    return respond(admin_actions.restock_variant(user, variant_id, body.quantity, reference=body.reference))


@admin_router.put("/variants/{variant_id}/price")
async def update_price(variant_id: str, body: UpdateVariantPriceRequest, user=Depends(current_user)):
    return respond(
        admin_actions.update_variant_price(user, variant_id, body.price, compare_at_price=body.compare_at_price)
    )


# ---------------------------------------------------------------------------
# Wishlist Router
# ---------------------------------------------------------------------------
wishlist_router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@wishlist_router.get("")
async def get_wishlist(user=Depends(current_user)):
    return respond(wishlist_actions.get_wishlist_items(user))


@wishlist_router.post("", status_code=201)
async def add_to_wishlist(body: WishlistRequest, user=Depends(current_user)):
    return respond(wishlist_actions.add_to_wishlist(user, body.product_id), status_code=201)


@wishlist_router.get("/{product_id}")
async def is_in_wishlist(product_id: str, user=Depends(current_user)):
    result = wishlist_actions.is_in_wishlist(user, product_id)
    if isinstance(result, Ok):
        result = Ok({"in_wishlist": result.value})
    return respond(result)


@wishlist_router.delete("/{product_id}")
async def remove_from_wishlist(product_id: str, user=Depends(current_user)):
    return respond(wishlist_actions.remove_from_wishlist(user, product_id))


# ---------------------------------------------------------------------------
# Address Router
# ---------------------------------------------------------------------------
address_router = APIRouter(prefix="/account/addresses", tags=["addresses"])


@address_router.get("")
async def get_addresses(user=Depends(current_user)):
    return respond(address_actions.get_user_addresses(user))


@address_router.post("", status_code=201)
async def add_address(body: AddressRequest, user=Depends(current_user)):
    return respond(address_actions.add_address(user, body.model_dump(exclude_none=True)), status_code=201)


@address_router.put("/{address_id}")
async def update_address(address_id: str, body: AddressRequest, user=Depends(current_user)):
    return respond(address_actions.update_address(user, address_id, body.model_dump(exclude_none=True)))


@address_router.delete("/{address_id}")
async def delete_address(address_id: str, user=Depends(current_user)):
    return respond(address_actions.delete_address(user, address_id))


# ---------------------------------------------------------------------------
# Product Router (public catalogue reads)
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@action("Failed to load products")
def _list_products(_user, offset, limit, featured):
    if featured:
        return featured_products(limit=limit)
    return list_products(offset=offset, limit=limit)


@action("Failed to load product")
def _product_detail(_user, slug):
    return product_by_slug(slug)


@product_router.get("")
async def products(offset: int = 0, limit: int = 24, featured: bool = False):
    """Newest products first. ``featured=true`` lists the featured ones only."""
    return respond(_list_products(None, offset, limit, featured))


@product_router.get("/{slug}")
async def product_detail(slug: str):
    return respond(_product_detail(None, slug))
