from storefront.cart.cart import ShoppingCart
from storefront.domain import storefront


@storefront.repository(part_of=ShoppingCart)
class ShoppingCartRepository:
    def for_customer(self, customer_id: str) -> ShoppingCart | None:
        """The customer's cart, or None if they never added anything."""
        carts = self._dao.query.filter(customer_id=str(customer_id)).all().items
        return carts[0] if carts else None

    def get_or_create(self, customer_id: str) -> ShoppingCart:
        return self.for_customer(customer_id) or ShoppingCart.create(customer_id=str(customer_id))
