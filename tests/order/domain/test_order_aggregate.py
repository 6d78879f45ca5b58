"""Tests for the Order aggregate: placement and the status state machine."""

import pytest
from protean.exceptions import ValidationError

from storefront.order.events import OrderPlaced, OrderStatusChanged
from storefront.order.order import (
    FulfillmentStatus,
    Order,
    OrderStatus,
    PaymentStatus,
)
from storefront.order.pricing import calculate_pricing


def _order(payment_method="card", **overrides):
    defaults = {
        "order_number": "TBK-1718000000000-ABC123",
        "customer_id": "cust-001",
        "lines": [
            {
                "variant_id": "var-001",
                "product_id": "prod-001",
                "name": "Linen Camp Shirt - M / Black",
                "sku": "LCS-M-BLK",
                "quantity": 2,
                "unit_price": 1000.0,
            }
        ],
        "pricing": calculate_pricing(2000.0, "standard"),
        "shipping_address_id": "addr-home",
        "billing_address_id": "addr-home",
        "shipping_method": "standard",
        "payment_method": payment_method,
    }
    defaults.update(overrides)
    return Order.place(**defaults)


def _advance(order, *statuses):
    for status in statuses:
        order.change_status(status.value)


class TestPlace:
    def test_initial_statuses(self):
        order = _order()
        assert order.status == OrderStatus.PENDING.value
        assert order.payment_status == PaymentStatus.PENDING.value
        assert order.fulfillment_status == FulfillmentStatus.UNFULFILLED.value

    def test_items_snapshot_prices(self):
        item = _order().items[0]
        assert item.unit_price == 1000.0
        assert item.total_price == 2000.0
        assert item.sku == "LCS-M-BLK"

    def test_raises_order_placed(self):
        order = _order()
        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.total == 2390.0
        assert event.item_count == 2

    def test_needs_items(self):
        with pytest.raises(ValidationError):
            _order(lines=[])

    def test_rejects_unknown_shipping_method(self):
        with pytest.raises(ValidationError):
            _order(shipping_method="drone")


class TestStatusTransitions:
    @pytest.mark.parametrize(
        "path",
        [
            [OrderStatus.CONFIRMED, OrderStatus.PROCESSING, OrderStatus.SHIPPED, OrderStatus.DELIVERED],
            [OrderStatus.PROCESSING, OrderStatus.SHIPPED],
            [OrderStatus.CANCELLED, OrderStatus.REFUNDED],
            [OrderStatus.CONFIRMED, OrderStatus.CANCELLED],
        ],
    )
    def test_allowed_paths(self, path):
        order = _order()
        _advance(order, *path)
        assert order.status == path[-1].value

    def test_delivered_to_pending_rejected(self):
        order = _order()
        _advance(order, OrderStatus.PROCESSING, OrderStatus.SHIPPED, OrderStatus.DELIVERED)

        with pytest.raises(ValidationError) as exc:
            order.change_status(OrderStatus.PENDING.value)
        assert "status" in exc.value.messages
        assert order.status == OrderStatus.DELIVERED.value

    def test_cannot_skip_shipping(self):
        order = _order()
        with pytest.raises(ValidationError):
            order.change_status(OrderStatus.DELIVERED.value)

    def test_refunded_is_terminal(self):
        order = _order()
        _advance(order, OrderStatus.CANCELLED, OrderStatus.REFUNDED)
        with pytest.raises(ValidationError):
            order.change_status(OrderStatus.PENDING.value)

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            _order().change_status("LOST")


class TestStatusSideEffects:
    def test_shipping_marks_fulfilled(self):
        order = _order()
        _advance(order, OrderStatus.PROCESSING, OrderStatus.SHIPPED)
        assert order.fulfillment_status == FulfillmentStatus.FULFILLED.value

    def test_delivering_cod_marks_paid(self):
        order = _order(payment_method="cod")
        _advance(order, OrderStatus.PROCESSING, OrderStatus.SHIPPED, OrderStatus.DELIVERED)
        assert order.payment_status == PaymentStatus.PAID.value

    def test_delivering_card_leaves_payment_alone(self):
        order = _order(payment_method="card")
        _advance(order, OrderStatus.PROCESSING, OrderStatus.SHIPPED, OrderStatus.DELIVERED)
        assert order.payment_status == PaymentStatus.PENDING.value

    def test_refund_marks_payment_refunded(self):
        order = _order()
        _advance(order, OrderStatus.CANCELLED, OrderStatus.REFUNDED)
        assert order.payment_status == PaymentStatus.REFUNDED.value

    def test_raises_status_changed(self):
        order = _order()
        order.change_status(OrderStatus.CONFIRMED.value, changed_by="admin-001")
        event = order._events[-1]
        assert isinstance(event, OrderStatusChanged)
        assert event.previous_status == "PENDING"
        assert event.new_status == "CONFIRMED"
        assert event.changed_by == "admin-001"
