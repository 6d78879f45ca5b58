from storefront.domain import storefront
from storefront.order.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    def owned_by(self, order_id: str, customer_id: str) -> Order | None:
        """The order, only if it belongs to the customer."""
        orders = self._dao.query.filter(id=str(order_id), customer_id=str(customer_id)).all().items
        return orders[0] if orders else None

    def with_status(self, status: str, offset: int = 0, limit: int = 100):
        """One page of orders in ``status``; the result carries ``items`` and ``total``."""
        return self._dao.query.filter(status=status).offset(offset).limit(limit).all()
