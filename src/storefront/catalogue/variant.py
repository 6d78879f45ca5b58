"""ProductVariant aggregate: a purchasable SKU with its own price and stock counter.

The stock counter is only ever moved through ``adjust_inventory``, which
refuses to go below zero. Callers outside the inventory ledger should not
invoke it directly; ``storefront.inventory.ledger.record_stock_movement``
pairs every adjustment with an ``InventoryLog`` entry.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String

from storefront.catalogue.events import (
    InventoryAdjusted,
    LowStockDetected,
    VariantAdded,
    VariantDeactivated,
    VariantPriceChanged,
)
from storefront.domain import storefront
from storefront.shared.errors import InsufficientStockError

LOW_STOCK_THRESHOLD = 10


@storefront.aggregate
class ProductVariant:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    sku = String(required=True, max_length=100, unique=True)
    price = Float(required=True, min_value=0.0)
    compare_at_price = Float(min_value=0.0)
    inventory = Integer(default=0, min_value=0)
    size = String(max_length=50)
    color = String(max_length=50)
    is_active = Boolean(default=True)
    is_default = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def compare_at_price_must_exceed_price(self):
        if self.compare_at_price is not None and self.compare_at_price <= self.price:
            raise ValidationError({"compare_at_price": ["Compare-at price must be greater than price"]})

    @classmethod
    def create(
        cls,
        product_id,
        name,
        sku,
        price,
        compare_at_price=None,
        size=None,
        color=None,
        is_default=False,
    ):
        """Create a variant with an empty stock counter.

        Opening stock is booked through the inventory ledger so the log
        accounts for every unit.
        """
        now = datetime.now(UTC)
        variant = cls(
            product_id=product_id,
            name=name,
            sku=sku,
            price=price,
            compare_at_price=compare_at_price,
            inventory=0,
            size=size,
            color=color,
            is_default=is_default,
            created_at=now,
            updated_at=now,
        )
        variant.raise_(
            VariantAdded(
                variant_id=str(variant.id),
                product_id=str(product_id),
                sku=sku,
                price=price,
                created_at=now,
            )
        )
        return variant

    @property
    def is_on_sale(self):
        return self.compare_at_price is not None and self.compare_at_price > self.price

    def can_fulfil(self, quantity):
        return bool(self.is_active) and self.inventory >= quantity

    def change_price(self, new_price, compare_at_price=None):
        previous_price = self.price

        with atomic_change(self):
            self.price = new_price
            self.compare_at_price = compare_at_price
            self.updated_at = datetime.now(UTC)

        self.raise_(
            VariantPriceChanged(
                variant_id=str(self.id),
                product_id=str(self.product_id),
                previous_price=previous_price,
                new_price=new_price,
                compare_at_price=compare_at_price,
            )
        )

    def adjust_inventory(self, delta):
        """Move the stock counter by ``delta`` and return ``(previous, new)``.

        Decrements are conditional: the counter never drops below zero.
        """
        previous_stock = self.inventory or 0
        new_stock = previous_stock + delta
        if new_stock < 0:
            raise InsufficientStockError(
                {"inventory": [f"Insufficient stock for {self.sku}: {previous_stock} available, {-delta} requested"]}
            )

        now = datetime.now(UTC)
        self.inventory = new_stock
        self.updated_at = now

        self.raise_(
            InventoryAdjusted(
                variant_id=str(self.id),
                delta=delta,
                previous_stock=previous_stock,
                new_stock=new_stock,
                adjusted_at=now,
            )
        )

        if new_stock <= LOW_STOCK_THRESHOLD < previous_stock:
            self.raise_(
                LowStockDetected(
                    variant_id=str(self.id),
                    product_id=str(self.product_id),
                    sku=self.sku,
                    current_stock=new_stock,
                    threshold=LOW_STOCK_THRESHOLD,
                    detected_at=now,
                )
            )

        return previous_stock, new_stock

    def deactivate(self):
        if not self.is_active:
            return

        self.is_active = False
        self.updated_at = datetime.now(UTC)

        self.raise_(
            VariantDeactivated(
                variant_id=str(self.id),
                product_id=str(self.product_id),
            )
        )
