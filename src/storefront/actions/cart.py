"""Cart actions for the signed-in customer."""

from protean.utils.globals import current_domain

from storefront.actions.boundary import action, require_user, revalidate
from storefront.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from storefront.cart.queries import cart_count, cart_items


@action("Failed to add item to cart")
def add_to_cart(user, variant_id, quantity=1):
    require_user(user)
    item_id = current_domain.process(
        AddToCart(customer_id=user.id, variant_id=variant_id, quantity=quantity),
        asynchronous=False,
    )
    revalidate("/cart")
    return {"item_id": item_id}


@action("Failed to update cart item")
def update_cart_quantity(user, item_id, quantity):
    require_user(user)
    if quantity <= 0:
        return remove_from_cart(user, item_id)

    current_domain.process(
        UpdateCartQuantity(customer_id=user.id, item_id=item_id, quantity=quantity),
        asynchronous=False,
    )
    revalidate("/cart")


@action("Failed to remove item from cart")
def remove_from_cart(user, item_id):
    require_user(user)
    current_domain.process(RemoveFromCart(customer_id=user.id, item_id=item_id), asynchronous=False)
    revalidate("/cart")


@action("Failed to load cart")
def get_cart_items(user):
    if user is None:
        return []
    return cart_items(user.id)


@action("Failed to count cart items")
def get_cart_count(user):
    if user is None:
        return 0
    return cart_count(user.id)
