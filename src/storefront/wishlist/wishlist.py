"""Wishlist aggregate: products a customer saved for later, at most once each."""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, HasMany, Identifier

from storefront.domain import storefront
from storefront.wishlist.events import WishlistItemAdded, WishlistItemRemoved


@storefront.entity(part_of="Wishlist")
class WishlistItem:
    product_id = Identifier(required=True)
    added_at = DateTime()


@storefront.aggregate
class Wishlist:
    customer_id = Identifier(required=True, unique=True)
    items = HasMany(WishlistItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, customer_id):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, created_at=now, updated_at=now)

    def find_item(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def contains(self, product_id):
        return self.find_item(product_id) is not None

    def add_product(self, product_id):
        if self.contains(product_id):
            raise ValidationError({"product_id": ["Item already in wishlist"]})

        now = datetime.now(UTC)
        self.add_items(WishlistItem(product_id=product_id, added_at=now))
        self.updated_at = now

        self.raise_(
            WishlistItemAdded(
                wishlist_id=str(self.id),
                customer_id=str(self.customer_id),
                product_id=str(product_id),
                added_at=now,
            )
        )

    def remove_product(self, product_id):
        item = self.find_item(product_id)
        if item is None:
            raise ObjectNotFoundError({"product_id": "Item not in wishlist"})

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            WishlistItemRemoved(
                wishlist_id=str(self.id),
                customer_id=str(self.customer_id),
                product_id=str(product_id),
            )
        )
