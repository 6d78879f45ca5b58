"""Faker-based data generators for Locust load test scenarios.

Payloads match the field names of the storefront API's Pydantic request
schemas. Identity travels in the X-User-* headers the upstream auth layer
would normally set.
"""

import random
import uuid

from faker import Faker

fake = Faker()

# ---------- Identity ----------


def shopper_headers() -> dict:
    """Headers for a fresh signed-in customer."""
    return {
        "X-User-Id": f"cust-lt-{uuid.uuid4().hex[:10]}",
        "X-User-Email": f"{fake.user_name()[:20]}.{uuid.uuid4().hex[:4]}@{fake.free_email_domain()}",
        "X-User-Phone": f"+63 9{random.randint(10, 99)} {random.randint(100, 999)} {random.randint(1000, 9999)}",
    }


def staff_headers() -> dict:
    return {"X-User-Id": f"staff-lt-{uuid.uuid4().hex[:8]}", "X-User-Role": "ADMIN"}


# ---------- Catalogue ----------


def valid_sku(prefix: str = "LT") -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8].upper()}"


def product_data() -> dict:
    """Generate CreateProductRequest payload."""
    name = f"{fake.color_name()} {fake.word().capitalize()} {random.choice(['Shirt', 'Tote', 'Sandal', 'Cap'])}"
    return {
        "name": name[:255],
        "slug": f"{fake.slug()}-{uuid.uuid4().hex[:6]}",
        "brand": fake.company()[:100],
        "description": fake.paragraph(nb_sentences=3),
        "image_urls": [f"https://cdn.example.com/lt/{uuid.uuid4().hex[:12]}.jpg"],
    }


def variant_data(initial_inventory: int | None = None) -> dict:
    """Generate AddVariantRequest payload priced in whole pesos."""
    return {
        "name": f"{random.choice(['S', 'M', 'L', 'XL'])} / {fake.color_name()}"[:255],
        "sku": valid_sku("VAR"),
        "price": float(random.choice([350, 499, 750, 1200, 1800, 2600])),
        "initial_inventory": initial_inventory if initial_inventory is not None else random.randint(20, 200),
    }


# ---------- Address book ----------


def address_data() -> dict:
    """Generate AddressRequest payload."""
    return {
        "address_type": "BOTH",
        "first_name": fake.first_name()[:100],
        "last_name": fake.last_name()[:100],
        "address_line1": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state()[:100],
        "zip_code": fake.postcode()[:20],
        "country": "PH",
        "is_default": True,
    }


# ---------- Checkout ----------


def checkout_data(address_id: str) -> dict:
    """Generate CreateOrderRequest payload against a saved address."""
    return {
        "shipping_address_id": address_id,
        "billing_address_id": address_id,
        "shipping_method": random.choices(["standard", "express"], weights=[4, 1])[0],
        "payment_method": random.choice(["card", "gcash", "paymaya", "cod"]),
    }
