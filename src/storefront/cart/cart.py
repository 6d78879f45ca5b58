"""Shopping Cart aggregate (CQRS): one cart per customer, one line per variant.

Lines are keyed by variant, so adding a variant that is already in the cart
increases its quantity instead of creating a second line. Quantities are not
checked against stock here; checkout does that.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, HasMany, Identifier, Integer

from storefront.cart.events import (
    CartItemAdded,
    CartItemRemoved,
    CartItemsCheckedOut,
    CartQuantityUpdated,
)
from storefront.domain import storefront


@storefront.entity(part_of="ShoppingCart")
class CartItem:
    variant_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@storefront.aggregate
class ShoppingCart:
    customer_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, customer_id):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def find_item(self, item_id):
        return next((i for i in self.items if str(i.id) == str(item_id)), None)

    def item_for_variant(self, variant_id):
        return next((i for i in self.items if str(i.variant_id) == str(variant_id)), None)

    @property
    def item_count(self):
        return sum(i.quantity for i in self.items)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, variant_id, quantity=1):
        """Add a variant, or increase its quantity if already present. Returns the line."""
        now = datetime.now(UTC)

        item = self.item_for_variant(variant_id)
        if item:
            item.quantity += quantity
        else:
            item = CartItem(variant_id=variant_id, quantity=quantity, added_at=now)
            self.add_items(item)

        self.updated_at = now
        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                customer_id=str(self.customer_id),
                item_id=str(item.id),
                variant_id=str(variant_id),
                quantity=quantity,
            )
        )
        return item

    def update_item_quantity(self, item_id, new_quantity):
        """Overwrite a line's quantity. Zero or less removes the line."""
        if new_quantity <= 0:
            self.remove_item(item_id)
            return

        item = self._require_item(item_id)
        previous_quantity = item.quantity
        item.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                item_id=str(item_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def remove_item(self, item_id):
        item = self._require_item(item_id)
        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                item_id=str(item_id),
                variant_id=str(item.variant_id),
            )
        )

    def check_out(self, item_ids, order_id):
        """Drop the lines that were priced into an order; leave everything else."""
        ordered = {str(item_id) for item_id in item_ids}
        for item in [i for i in self.items if str(i.id) in ordered]:
            self.remove_items(item)

        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartItemsCheckedOut(
                cart_id=str(self.id),
                order_id=str(order_id),
                item_ids=json.dumps(sorted(ordered)),
            )
        )

    def _require_item(self, item_id):
        item = self.find_item(item_id)
        if item is None:
            raise ObjectNotFoundError({"item_id": "Cart item not found"})
        return item
