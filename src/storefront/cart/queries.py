"""Read helpers for the cart page and the header badge."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.catalogue.product import Product
from storefront.catalogue.variant import ProductVariant


def cart_items(customer_id: str) -> list[dict]:
    """Cart lines joined with variant, product, brand and first image, newest first."""
    cart = current_domain.repository_for(ShoppingCart).for_customer(customer_id)
    if cart is None:
        return []

    variants = current_domain.repository_for(ProductVariant)
    products = current_domain.repository_for(Product)

    rows = []
    for item in cart.items:
        try:
            variant = variants.get(item.variant_id)
            product = products.get(variant.product_id)
        except ObjectNotFoundError:
            # Catalogue rows are soft-deleted, so this only happens on bad data
            continue

        image = product.primary_image()
        rows.append(
            {
                "id": str(item.id),
                "quantity": item.quantity,
                "added_at": item.added_at,
                "variant": {
                    "id": str(variant.id),
                    "name": variant.name,
                    "sku": variant.sku,
                    "price": variant.price,
                    "compare_at_price": variant.compare_at_price,
                    "inventory": variant.inventory,
                    "size": variant.size,
                    "color": variant.color,
                    "is_active": variant.is_active,
                },
                "product": {
                    "id": str(product.id),
                    "name": product.name,
                    "slug": product.slug,
                    "brand": product.brand,
                    "image_url": image.url if image else None,
                },
                "line_total": round(variant.price * item.quantity, 2),
            }
        )

    rows.sort(key=lambda row: row["added_at"], reverse=True)
    return rows


def cart_count(customer_id: str) -> int:
    cart = current_domain.repository_for(ShoppingCart).for_customer(customer_id)
    return cart.item_count if cart else 0
