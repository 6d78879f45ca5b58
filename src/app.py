"""Storefront FastAPI application.

Processes commands synchronously via HTTP. Every request runs inside the
storefront domain context and carries a request id in its log context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from storefront.domain import storefront
from storefront.utils.logging import add_context, clear_context

# PROTEAN_ENV selects the config overlay from domain.toml
storefront.init()

app = FastAPI(
    title="Storefront API",
    description="Catalogue, cart, checkout, inventory ledger and admin tooling",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and bind request-scoped log context."""
    clear_context()
    add_context(request_id=request.headers.get("X-Request-ID") or uuid4().hex, path=request.url.path)
    with storefront.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from storefront.api import (  # noqa: E402
    address_router,
    admin_router,
    cart_router,
    order_router,
    product_router,
    wishlist_router,
)

app.include_router(cart_router)
app.include_router(order_router)
app.include_router(admin_router)
app.include_router(wishlist_router)
app.include_router(address_router)
app.include_router(product_router)


@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": storefront.name})
