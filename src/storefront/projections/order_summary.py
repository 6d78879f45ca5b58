"""Order summary: the listing row shown in account history and the admin order table."""

from protean.core.projector import on
from protean.fields import DateTime, Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.events import OrderPlaced, OrderStatusChanged
from storefront.order.order import Order


@storefront.projection
class OrderSummary:
    order_id = Identifier(identifier=True, required=True)
    order_number = String(required=True, max_length=50)
    customer_id = Identifier(required=True)
    email = String(max_length=254)
    status = String(required=True, max_length=20)
    payment_status = String(max_length=20)
    fulfillment_status = String(max_length=30)
    item_count = Integer(default=0)
    total = Float(default=0.0)
    currency = String(default="PHP", max_length=3)
    created_at = DateTime()
    updated_at = DateTime()


@storefront.projector(projector_for=OrderSummary, aggregates=[Order])
class OrderSummaryProjector:
    @on(OrderPlaced)
    def on_order_placed(self, event):
        current_domain.repository_for(OrderSummary).add(
            OrderSummary(
                order_id=event.order_id,
                order_number=event.order_number,
                customer_id=event.customer_id,
                email=event.email,
                status=event.status,
                payment_status=event.payment_status,
                fulfillment_status=event.fulfillment_status,
                item_count=event.item_count,
                total=event.total,
                currency=event.currency,
                created_at=event.placed_at,
                updated_at=event.placed_at,
            )
        )

    @on(OrderStatusChanged)
    def on_order_status_changed(self, event):
        repo = current_domain.repository_for(OrderSummary)
        summary = repo.get(event.order_id)
        summary.status = event.new_status
        summary.payment_status = event.payment_status
        summary.fulfillment_status = event.fulfillment_status
        summary.updated_at = event.changed_at
        repo.add(summary)


def _as_dict(summary):
    return {
        "id": str(summary.order_id),
        "order_number": summary.order_number,
        "customer_id": str(summary.customer_id),
        "email": summary.email,
        "status": summary.status,
        "payment_status": summary.payment_status,
        "fulfillment_status": summary.fulfillment_status,
        "item_count": summary.item_count,
        "total": summary.total,
        "currency": summary.currency,
        "created_at": summary.created_at,
    }


def order_summaries(customer_id=None, limit=100):
    """Summaries newest first, optionally for one customer only."""
    query = current_domain.repository_for(OrderSummary)._dao.query
    if customer_id is not None:
        query = query.filter(customer_id=str(customer_id))
    summaries = query.order_by("-created_at").limit(limit).all().items
    return [_as_dict(summary) for summary in summaries]
