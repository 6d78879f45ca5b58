"""Staff actions: stock overrides, order status, product removal and dashboard reads."""

import json

from protean.utils.globals import current_domain

from storefront.actions.boundary import action, require_admin, revalidate
from storefront.admin.dashboard import admin_orders, dashboard_stats, low_stock_variants
from storefront.catalogue.management import AddVariant, CreateProduct, DeleteProduct, UpdateVariantPrice
from storefront.inventory.adjustment import RestockVariant, SetVariantStock
from storefront.order.status import UpdateOrderStatus


@action("Failed to update stock")
def update_product_stock(user, variant_id, new_stock, reason=None):
    """Set a variant's stock to an absolute value, booked as an ADJUSTMENT."""
    require_admin(user)
    current_domain.process(
        SetVariantStock(variant_id=variant_id, new_stock=new_stock, set_by=user.id, reason=reason),
        asynchronous=False,
    )
    revalidate("/admin/products")


@action("Failed to update order status")
def update_order_status(user, order_id, status):
    require_admin(user)
    new_status = current_domain.process(
        UpdateOrderStatus(order_id=order_id, status=status, changed_by=user.id),
        asynchronous=False,
    )
    revalidate("/admin/orders")
    return {"status": new_status}


@action("Failed to delete product")
def delete_product(user, product_id):
    require_admin(user)
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    revalidate("/admin/products")


@action("Failed to load dashboard")
def get_dashboard_stats(user):
    require_admin(user)
    return dashboard_stats()


@action("Failed to load orders")
def get_admin_orders(user, offset=0, limit=50):
    require_admin(user)
    return admin_orders(offset=offset, limit=limit)


@action("Failed to load low stock products")
def get_low_stock_products(user):
    require_admin(user)
    return low_stock_variants()


@action("Failed to create product")
def create_product(user, data: dict):
    require_admin(user)
    product_id = current_domain.process(
        CreateProduct(
            name=data.get("name"),
            slug=data.get("slug"),
            brand=data.get("brand"),
            description=data.get("description"),
            is_featured=data.get("is_featured", False),
            image_urls=json.dumps(data.get("image_urls") or []),
        ),
        asynchronous=False,
    )
    revalidate("/admin/products")
    return {"product_id": product_id}


@action("Failed to add variant")
def add_variant(user, product_id, data: dict):
    """Add a variant; opening stock is booked as an INITIAL ledger entry."""
    require_admin(user)
    variant_id = current_domain.process(
        AddVariant(
            product_id=product_id,
            name=data.get("name"),
            sku=data.get("sku"),
            price=data.get("price"),
            compare_at_price=data.get("compare_at_price"),
            initial_inventory=data.get("initial_inventory", 0),
            size=data.get("size"),
            color=data.get("color"),
            is_default=data.get("is_default", False),
            added_by=user.id,
        ),
        asynchronous=False,
    )
    revalidate("/admin/products")
    return {"variant_id": variant_id}


@action("Failed to update price")
def update_variant_price(user, variant_id, price, compare_at_price=None):
    require_admin(user)
    current_domain.process(
        UpdateVariantPrice(variant_id=variant_id, price=price, compare_at_price=compare_at_price),
        asynchronous=False,
    )
    revalidate("/admin/products")


@action("Failed to restock variant")
def restock_variant(user, variant_id, quantity, reference=None):
    require_admin(user)
    current_domain.process(
        RestockVariant(variant_id=variant_id, quantity=quantity, received_by=user.id, reference=reference),
        asynchronous=False,
    )
    revalidate("/admin/products")
