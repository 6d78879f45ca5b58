from storefront.catalogue.product import Product
from storefront.catalogue.variant import ProductVariant
from storefront.domain import storefront


@storefront.repository(part_of=ProductVariant)
class ProductVariantRepository:
    def for_product(self, product_id: str) -> list[ProductVariant]:
        return self._dao.query.filter(product_id=str(product_id)).all().items

    def low_stock(self, threshold: int, limit: int = 10) -> list[ProductVariant]:
        """Active variants at or below ``threshold`` units, scarcest first."""
        return (
            self._dao.query.filter(is_active=True, inventory__lte=threshold)
            .order_by("inventory")
            .limit(limit)
            .all()
            .items
        )


@storefront.repository(part_of=Product)
class ProductRepository:
    def by_slug(self, slug: str) -> Product | None:
        products = self._dao.query.filter(slug=slug).all().items
        return products[0] if products else None

    def listed(self, offset: int = 0, limit: int = 24) -> list[Product]:
        """Products that are not soft-deleted, newest first."""
        results = self._dao.query.order_by("-created_at").all().items
        visible = [p for p in results if not p.is_deleted]
        return visible[offset : offset + limit]

    def featured(self, limit: int = 8) -> list[Product]:
        """Featured products that are not soft-deleted, newest first."""
        results = self._dao.query.filter(is_featured=True).order_by("-created_at").all().items
        return [p for p in results if not p.is_deleted][:limit]
