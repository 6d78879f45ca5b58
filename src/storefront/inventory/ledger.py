"""Inventory ledger: the single code path for every stock change.

Checkout decrements, admin overrides and opening stock all call
``record_stock_movement``, which adjusts the variant and appends the matching
``InventoryLog`` row in the caller's unit of work.
"""

from datetime import UTC, datetime

import structlog
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.catalogue.variant import ProductVariant
from storefront.domain import storefront
from storefront.inventory.log import InventoryLog, MovementType

logger = structlog.get_logger(__name__)


@storefront.repository(part_of=InventoryLog)
class InventoryLogRepository:
    def for_variant(self, variant_id: str) -> list[InventoryLog]:
        entries = self._dao.query.filter(variant_id=variant_id).all().items
        return sorted(entries, key=lambda entry: entry.recorded_at)


def record_stock_movement(
    variant: ProductVariant,
    delta: int,
    movement_type: MovementType,
    reason: str | None = None,
    reference: str | None = None,
    recorded_by: str | None = None,
) -> InventoryLog:
    """Apply ``delta`` to the variant's stock and append a ledger row.

    Raises ``InsufficientStockError`` when the movement would take stock below
    zero; nothing is persisted in that case.
    """
    if delta == 0:
        raise ValidationError({"quantity": ["Stock movement must change the quantity"]})

    previous_stock, new_stock = variant.adjust_inventory(delta)

    entry = InventoryLog(
        variant_id=str(variant.id),
        movement_type=movement_type.value,
        quantity=delta,
        previous_stock=previous_stock,
        new_stock=new_stock,
        reason=reason,
        reference=reference,
        recorded_by=recorded_by,
        recorded_at=datetime.now(UTC),
    )

    current_domain.repository_for(ProductVariant).add(variant)
    current_domain.repository_for(InventoryLog).add(entry)

    logger.info(
        "Stock movement recorded",
        variant_id=str(variant.id),
        movement_type=movement_type.value,
        delta=delta,
        previous_stock=previous_stock,
        new_stock=new_stock,
        reference=reference,
    )
    return entry


def movements_for(variant_id: str) -> list[InventoryLog]:
    """All ledger rows for a variant, oldest first."""
    return current_domain.repository_for(InventoryLog).for_variant(str(variant_id))


def ledger_balance(variant_id: str) -> int:
    """Stock level reconstructed from the ledger alone."""
    return sum(entry.quantity for entry in movements_for(variant_id))
