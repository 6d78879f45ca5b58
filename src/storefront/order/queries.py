"""Order detail reads for the account pages."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.order.order import Order


def order_details(order: Order) -> dict:
    pricing = order.pricing
    return {
        "id": str(order.id),
        "order_number": order.order_number,
        "customer_id": str(order.customer_id),
        "email": order.email,
        "phone": order.phone,
        "status": order.status,
        "payment_status": order.payment_status,
        "fulfillment_status": order.fulfillment_status,
        "shipping_method": order.shipping_method,
        "payment_method": order.payment_method,
        "shipping_address_id": str(order.shipping_address_id),
        "billing_address_id": str(order.billing_address_id),
        "subtotal": pricing.subtotal,
        "shipping": pricing.shipping,
        "tax": pricing.tax,
        "discount": pricing.discount,
        "total": pricing.total,
        "currency": pricing.currency,
        "items": [
            {
                "id": str(item.id),
                "variant_id": str(item.variant_id),
                "product_id": str(item.product_id),
                "name": item.name,
                "sku": item.sku,
                "quantity": item.quantity,
                "unit_price": item.unit_price,
                "total_price": item.total_price,
            }
            for item in order.items
        ],
        "created_at": order.created_at,
        "updated_at": order.updated_at,
    }


def customer_order(customer_id: str, order_id: str) -> dict:
    """A customer's own order. Other customers' orders are reported as missing."""
    order = current_domain.repository_for(Order).owned_by(order_id, customer_id)
    if order is None:
        raise ObjectNotFoundError({"order_id": "Order not found"})
    return order_details(order)
