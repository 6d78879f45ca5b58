"""Admin dashboard reads: headline counts, revenue, recent orders and low stock."""

from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.catalogue.product import Product
from storefront.catalogue.variant import LOW_STOCK_THRESHOLD, ProductVariant
from storefront.order.order import Order, OrderStatus
from storefront.order.queries import order_details
from storefront.projections.order_summary import order_summaries

RECENT_ORDER_COUNT = 5
LOW_STOCK_LISTING_SIZE = 10
_PAGE_SIZE = 100


def _count(aggregate_cls):
    return current_domain.repository_for(aggregate_cls)._dao.query.all().total


def delivered_revenue():
    """Sum of order totals over DELIVERED orders, read page by page."""
    orders = current_domain.repository_for(Order)
    revenue = 0.0
    offset = 0
    while True:
        page = orders.with_status(OrderStatus.DELIVERED.value, offset=offset, limit=_PAGE_SIZE)
        revenue += sum(order.pricing.total for order in page.items)
        offset += _PAGE_SIZE
        if offset >= page.total:
            break
    return round(revenue, 2)


def low_stock_variants(threshold=LOW_STOCK_THRESHOLD, limit=LOW_STOCK_LISTING_SIZE):
    products = current_domain.repository_for(Product)
    rows = []
    for variant in current_domain.repository_for(ProductVariant).low_stock(threshold, limit=limit):
        product = products.get(variant.product_id)
        rows.append(
            {
                "id": str(variant.id),
                "sku": variant.sku,
                "name": variant.name,
                "inventory": variant.inventory,
                "price": variant.price,
                "product": {"id": str(product.id), "name": product.name},
            }
        )
    return rows


def dashboard_stats():
    return {
        "total_products": _count(Product),
        "total_orders": _count(Order),
        # A cart is opened on a customer's first add, so this counts active shoppers
        "total_customers": _count(ShoppingCart),
        "total_revenue": delivered_revenue(),
        "recent_orders": order_summaries(limit=RECENT_ORDER_COUNT),
        "low_stock_products": low_stock_variants(),
    }


def admin_orders(offset=0, limit=50):
    """Full order records for the admin table, newest first."""
    orders = (
        current_domain.repository_for(Order)
        ._dao.query.order_by("-created_at")
        .offset(offset)
        .limit(limit)
        .all()
        .items
    )
    return [order_details(order) for order in orders]
