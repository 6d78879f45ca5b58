"""Domain events for the Product and ProductVariant aggregates."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    slug = String(required=True)
    brand = String()
    created_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductDeleted:
    """A product was soft-deleted by staff."""

    __version__ = 1

    product_id = Identifier(required=True)
    deleted_at = DateTime(required=True)


@storefront.event(part_of="ProductVariant")
class VariantAdded:
    """A purchasable variant was added to a product."""

    __version__ = 1

    variant_id = Identifier(required=True)
    product_id = Identifier(required=True)
    sku = String(required=True)
    price = Float(required=True)
    created_at = DateTime(required=True)


@storefront.event(part_of="ProductVariant")
class VariantPriceChanged:
    """A variant's selling price was updated."""

    __version__ = 1

    variant_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_price = Float(required=True)
    new_price = Float(required=True)
    compare_at_price = Float()


@storefront.event(part_of="ProductVariant")
class InventoryAdjusted:
    """A variant's stock counter moved by ``delta`` units."""

    __version__ = 1

    variant_id = Identifier(required=True)
    delta = Integer(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer(required=True)
    adjusted_at = DateTime(required=True)


@storefront.event(part_of="ProductVariant")
class LowStockDetected:
    """A variant's stock dropped to or below the low-stock threshold."""

    __version__ = 1

    variant_id = Identifier(required=True)
    product_id = Identifier(required=True)
    sku = String(required=True)
    current_stock = Integer(required=True)
    threshold = Integer(required=True)
    detected_at = DateTime(required=True)


@storefront.event(part_of="ProductVariant")
class VariantDeactivated:
    """A variant stopped being purchasable."""

    __version__ = 1

    variant_id = Identifier(required=True)
    product_id = Identifier(required=True)
