"""Admin stock override: sets an absolute stock level through the ledger."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.variant import ProductVariant
from storefront.domain import storefront
from storefront.inventory.ledger import record_stock_movement
from storefront.inventory.log import MovementType


@storefront.command(part_of="ProductVariant")
class SetVariantStock:
    """Overwrite a variant's stock with a counted value."""

    variant_id = Identifier(required=True)
    new_stock = Integer(required=True, min_value=0)
    set_by = String(required=True, max_length=255)
    reason = String(max_length=255)


@storefront.command(part_of="ProductVariant")
class RestockVariant:
    """Book incoming units against a variant."""

    variant_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    received_by = String(required=True, max_length=255)
    reference = String(max_length=255)


@storefront.command_handler(part_of=ProductVariant)
class StockAdjustmentHandler:
    @handle(SetVariantStock)
    def set_variant_stock(self, command):
        variant = current_domain.repository_for(ProductVariant).get(command.variant_id)

        delta = command.new_stock - (variant.inventory or 0)
        if delta == 0:
            return None

        entry = record_stock_movement(
            variant,
            delta=delta,
            movement_type=MovementType.ADJUSTMENT,
            reason=command.reason or "Manual stock override",
            reference=str(variant.id),
            recorded_by=command.set_by,
        )
        return str(entry.id)

    @handle(RestockVariant)
    def restock_variant(self, command):
        variant = current_domain.repository_for(ProductVariant).get(command.variant_id)
        if not variant.is_active:
            raise ValidationError({"variant_id": ["Cannot restock an inactive variant"]})

        entry = record_stock_movement(
            variant,
            delta=command.quantity,
            movement_type=MovementType.RESTOCK,
            reason="Stock received",
            reference=command.reference,
            recorded_by=command.received_by,
        )
        return str(entry.id)
