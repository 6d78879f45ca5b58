"""Wishlist commands, handler, repository and reads."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.catalogue.variant import ProductVariant
from storefront.domain import storefront
from storefront.wishlist.wishlist import Wishlist


@storefront.repository(part_of=Wishlist)
class WishlistRepository:
    def for_customer(self, customer_id: str) -> Wishlist | None:
        wishlists = self._dao.query.filter(customer_id=str(customer_id)).all().items
        return wishlists[0] if wishlists else None


@storefront.command(part_of="Wishlist")
class AddToWishlist:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command(part_of="Wishlist")
class RemoveFromWishlist:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Wishlist)
class ManageWishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)
        if product.is_deleted:
            raise ValidationError({"product_id": ["This product is no longer available"]})

        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.for_customer(command.customer_id) or Wishlist.create(command.customer_id)
        wishlist.add_product(command.product_id)
        repo.add(wishlist)

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.for_customer(command.customer_id)
        if wishlist is None:
            raise ObjectNotFoundError({"product_id": "Item not in wishlist"})
        wishlist.remove_product(command.product_id)
        repo.add(wishlist)


def wishlist_items(customer_id: str) -> list[dict]:
    """Saved products with their active variants (default first), newest first."""
    wishlist = current_domain.repository_for(Wishlist).for_customer(customer_id)
    if wishlist is None:
        return []

    products = current_domain.repository_for(Product)
    variants = current_domain.repository_for(ProductVariant)

    rows = []
    for item in wishlist.items:
        try:
            product = products.get(item.product_id)
        except ObjectNotFoundError:
            continue

        image = product.primary_image()
        active = [v for v in variants.for_product(product.id) if v.is_active]
        active.sort(key=lambda v: not v.is_default)
        rows.append(
            {
                "id": str(item.id),
                "added_at": item.added_at,
                "product": {
                    "id": str(product.id),
                    "name": product.name,
                    "slug": product.slug,
                    "brand": product.brand,
                    "image_url": image.url if image else None,
                    "variants": [
                        {
                            "id": str(v.id),
                            "price": v.price,
                            "compare_at_price": v.compare_at_price,
                            "inventory": v.inventory,
                            "is_default": v.is_default,
                        }
                        for v in active
                    ],
                },
            }
        )

    rows.sort(key=lambda row: row["added_at"], reverse=True)
    return rows


def in_wishlist(customer_id: str, product_id: str) -> bool:
    wishlist = current_domain.repository_for(Wishlist).for_customer(customer_id)
    return wishlist is not None and wishlist.contains(product_id)
