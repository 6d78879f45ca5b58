"""Product aggregate: the catalogue entry that groups purchasable variants."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, Integer, String, Text

from storefront.catalogue.events import ProductCreated, ProductDeleted
from storefront.domain import storefront


@storefront.entity(part_of="Product")
class ProductImage:
    url = String(required=True, max_length=500)
    alt_text = String(max_length=255)
    sort_order = Integer(default=0)


@storefront.aggregate
class Product:
    name = String(required=True, max_length=255)
    slug = String(required=True, max_length=255, unique=True)
    description = Text()
    brand = String(max_length=100)
    is_featured = Boolean(default=False)
    images = HasMany(ProductImage)
    deleted_at = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, name, slug, brand=None, description=None, is_featured=False):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            slug=slug,
            brand=brand,
            description=description,
            is_featured=is_featured,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=str(product.id),
                name=name,
                slug=slug,
                brand=brand,
                created_at=now,
            )
        )
        return product

    @property
    def is_deleted(self):
        return self.deleted_at is not None

    def add_image(self, url, alt_text=None):
        """Append an image; the first image (lowest sort order) is the display image."""
        self.add_images(ProductImage(url=url, alt_text=alt_text, sort_order=len(self.images)))
        self.updated_at = datetime.now(UTC)

    def primary_image(self):
        if not self.images:
            return None
        return min(self.images, key=lambda image: image.sort_order or 0)

    def soft_delete(self):
        if self.is_deleted:
            raise ValidationError({"product": ["Product is already deleted"]})

        now = datetime.now(UTC)
        self.deleted_at = now
        self.updated_at = now

        self.raise_(ProductDeleted(product_id=str(self.id), deleted_at=now))
