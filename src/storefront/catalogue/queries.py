"""Catalogue reads for product listing and detail pages."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.catalogue.variant import ProductVariant


def _variant_row(variant):
    return {
        "id": str(variant.id),
        "name": variant.name,
        "sku": variant.sku,
        "price": variant.price,
        "compare_at_price": variant.compare_at_price,
        "is_on_sale": variant.is_on_sale,
        "inventory": variant.inventory,
        "size": variant.size,
        "color": variant.color,
        "is_default": variant.is_default,
    }


def product_card(product):
    variants = [
        v for v in current_domain.repository_for(ProductVariant).for_product(product.id) if v.is_active
    ]
    variants.sort(key=lambda v: not v.is_default)
    image = product.primary_image()
    return {
        "id": str(product.id),
        "name": product.name,
        "slug": product.slug,
        "brand": product.brand,
        "description": product.description,
        "is_featured": product.is_featured,
        "image_url": image.url if image else None,
        "images": [
            {"url": i.url, "alt_text": i.alt_text} for i in sorted(product.images, key=lambda i: i.sort_order or 0)
        ],
        "variants": [_variant_row(v) for v in variants],
    }


def list_products(offset=0, limit=24):
    products = current_domain.repository_for(Product).listed(offset=offset, limit=limit)
    return [product_card(product) for product in products]


def featured_products(limit=8):
    """Home page row: the newest featured products."""
    return [product_card(product) for product in current_domain.repository_for(Product).featured(limit=limit)]


def product_by_slug(slug):
    product = current_domain.repository_for(Product).by_slug(slug)
    if product is None or product.is_deleted:
        raise ObjectNotFoundError({"slug": f"Product `{slug}` not found"})
    return product_card(product)
