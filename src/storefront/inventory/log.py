"""InventoryLog aggregate: one append-only row per stock movement.

Rows are written by ``storefront.inventory.ledger`` only and never mutated.
Summing ``quantity`` over a variant's rows reproduces its live stock counter.
"""

from enum import Enum

from protean.fields import DateTime, Identifier, Integer, String

from storefront.domain import storefront


class MovementType(Enum):
    INITIAL = "Initial"
    SALE = "Sale"
    ADJUSTMENT = "Adjustment"
    RESTOCK = "Restock"


@storefront.aggregate
class InventoryLog:
    variant_id = Identifier(required=True)
    movement_type = String(required=True, choices=MovementType)
    quantity = Integer(required=True)  # Signed delta
    previous_stock = Integer(required=True, min_value=0)
    new_stock = Integer(required=True, min_value=0)
    reason = String(max_length=255)
    reference = String(max_length=255)
    recorded_by = String(max_length=255)
    recorded_at = DateTime(required=True)
