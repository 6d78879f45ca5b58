"""Wishlist actions."""

from protean.utils.globals import current_domain

from storefront.actions.boundary import action, require_user, revalidate
from storefront.wishlist.management import AddToWishlist, RemoveFromWishlist, in_wishlist, wishlist_items


@action("Failed to add to wishlist")
def add_to_wishlist(user, product_id):
    require_user(user)
    current_domain.process(AddToWishlist(customer_id=user.id, product_id=product_id), asynchronous=False)
    revalidate("/wishlist")


@action("Failed to remove from wishlist")
def remove_from_wishlist(user, product_id):
    require_user(user)
    current_domain.process(RemoveFromWishlist(customer_id=user.id, product_id=product_id), asynchronous=False)
    revalidate("/wishlist")


@action("Failed to load wishlist")
def get_wishlist_items(user):
    if user is None:
        return []
    return wishlist_items(user.id)


@action("Failed to check wishlist")
def is_in_wishlist(user, product_id):
    if user is None:
        return False
    return in_wishlist(user.id, product_id)
