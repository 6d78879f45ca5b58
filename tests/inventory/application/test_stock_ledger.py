"""Application tests for the inventory ledger and stock commands."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from storefront.catalogue.variant import ProductVariant
from storefront.inventory.adjustment import RestockVariant, SetVariantStock
from storefront.inventory.ledger import ledger_balance, movements_for, record_stock_movement
from storefront.inventory.log import InventoryLog, MovementType
from storefront.shared.errors import InsufficientStockError


def _variant(variant_id):
    return current_domain.repository_for(ProductVariant).get(variant_id)


class TestRecordStockMovement:
    def test_writes_variant_and_log_row(self, make_variant):
        variant_id = make_variant(inventory=10)

        entry = record_stock_movement(
            _variant(variant_id),
            delta=-3,
            movement_type=MovementType.SALE,
            reason="Order TBK-1-ABCDEF",
            reference="ord-001",
        )

        assert _variant(variant_id).inventory == 7
        stored = current_domain.repository_for(InventoryLog).get(entry.id)
        assert stored.previous_stock == 10
        assert stored.new_stock == 7
        assert stored.quantity == -3
        assert stored.reference == "ord-001"

    def test_rejects_movement_below_zero(self, make_variant):
        variant_id = make_variant(inventory=2)

        with pytest.raises(InsufficientStockError):
            record_stock_movement(_variant(variant_id), delta=-5, movement_type=MovementType.SALE)

        assert _variant(variant_id).inventory == 2
        assert len(movements_for(variant_id)) == 1

    def test_rejects_zero_delta(self, make_variant):
        variant_id = make_variant(inventory=2)
        with pytest.raises(ValidationError):
            record_stock_movement(_variant(variant_id), delta=0, movement_type=MovementType.ADJUSTMENT)


class TestSetVariantStock:
    def test_absolute_set_recorded_as_adjustment(self, make_variant):
        variant_id = make_variant(inventory=10)

        current_domain.process(
            SetVariantStock(variant_id=variant_id, new_stock=4, set_by="admin-001", reason="Cycle count"),
            asynchronous=False,
        )

        assert _variant(variant_id).inventory == 4
        adjustment = movements_for(variant_id)[-1]
        assert adjustment.movement_type == MovementType.ADJUSTMENT.value
        assert adjustment.quantity == -6
        assert adjustment.recorded_by == "admin-001"
        assert adjustment.reason == "Cycle count"

    def test_same_value_writes_nothing(self, make_variant):
        variant_id = make_variant(inventory=10)
        current_domain.process(
            SetVariantStock(variant_id=variant_id, new_stock=10, set_by="admin-001"),
            asynchronous=False,
        )
        assert len(movements_for(variant_id)) == 1

    def test_negative_value_rejected(self, make_variant):
        variant_id = make_variant(inventory=10)
        with pytest.raises(ValidationError):
            current_domain.process(
                SetVariantStock(variant_id=variant_id, new_stock=-1, set_by="admin-001"),
                asynchronous=False,
            )
        assert _variant(variant_id).inventory == 10


class TestRestockVariant:
    def test_restock_adds_units(self, make_variant):
        variant_id = make_variant(inventory=3)
        current_domain.process(
            RestockVariant(variant_id=variant_id, quantity=12, received_by="admin-001", reference="PO-1042"),
            asynchronous=False,
        )

        assert _variant(variant_id).inventory == 15
        assert movements_for(variant_id)[-1].movement_type == MovementType.RESTOCK.value


class TestLedgerBalance:
    def test_balance_matches_counter_after_mixed_movements(self, make_variant):
        variant_id = make_variant(inventory=20)
        current_domain.process(
            SetVariantStock(variant_id=variant_id, new_stock=14, set_by="admin-001"),
            asynchronous=False,
        )
        current_domain.process(
            RestockVariant(variant_id=variant_id, quantity=6, received_by="admin-001"),
            asynchronous=False,
        )
        record_stock_movement(_variant(variant_id), delta=-5, movement_type=MovementType.SALE)

        assert _variant(variant_id).inventory == 15
        assert ledger_balance(variant_id) == 15
        assert [m.movement_type for m in movements_for(variant_id)] == [
            MovementType.INITIAL.value,
            MovementType.ADJUSTMENT.value,
            MovementType.RESTOCK.value,
            MovementType.SALE.value,
        ]
