"""Pydantic request schemas for the storefront API.

Enum-valued fields are plain strings here; the domain commands validate them
so that bad values come back as field errors with the domain's messages.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class AddToCartRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"variant_id": "var-001", "quantity": 2}]}}

    variant_id: str
    quantity: int = 1


class UpdateCartQuantityRequest(BaseModel):
    quantity: int = Field(..., description="Zero or less removes the item")


class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shipping_address_id": "addr-home",
                    "billing_address_id": "addr-home",
                    "shipping_method": "standard",
                    "payment_method": "gcash",
                }
            ]
        }
    }

    shipping_address_id: str | None = None
    billing_address_id: str | None = None
    shipping_method: str | None = None
    payment_method: str | None = None


class UpdateOrderStatusRequest(BaseModel):
    status: str


class SetStockRequest(BaseModel):
    stock: int
    reason: str | None = Field(None, max_length=255)


class RestockRequest(BaseModel):
    quantity: int
    reference: str | None = Field(None, max_length=255)


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Linen Camp Shirt",
                    "slug": "linen-camp-shirt",
                    "brand": "Tabako",
                    "description": "Relaxed short-sleeve shirt in washed linen.",
                    "image_urls": ["https://cdn.example.com/linen-camp-shirt.jpg"],
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    slug: str = Field(..., max_length=255)
    brand: str | None = Field(None, max_length=100)
    description: str | None = None
    is_featured: bool = False
    image_urls: list[str] = Field(default_factory=list)


class AddVariantRequest(BaseModel):
    name: str = Field(..., max_length=255)
    sku: str = Field(..., max_length=100)
    price: float
    compare_at_price: float | None = None
    initial_inventory: int = 0
    size: str | None = Field(None, max_length=50)
    color: str | None = Field(None, max_length=50)
    is_default: bool = False


class UpdateVariantPriceRequest(BaseModel):
    price: float
    compare_at_price: float | None = None


class WishlistRequest(BaseModel):
    product_id: str


class AddressRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "address_type": "BOTH",
                    "first_name": "Ana",
                    "last_name": "Reyes",
                    "address_line1": "12 Mabini St.",
                    "city": "Makati",
                    "state": "Metro Manila",
                    "zip_code": "1210",
                    "country": "PH",
                    "is_default": True,
                }
            ]
        }
    }

    address_type: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    phone: str | None = None
    is_default: bool | None = None
