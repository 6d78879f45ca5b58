"""Address aggregate: a customer's saved shipping and billing addresses.

Addresses are soft-deleted so that orders placed against them keep a valid
reference. At most one live address per customer is the default; the
handler clears the previous default when another address takes it.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Boolean, DateTime, Identifier, String

from storefront.domain import storefront


class AddressType(Enum):
    SHIPPING = "SHIPPING"
    BILLING = "BILLING"
    BOTH = "BOTH"


ADDRESS_FIELDS = (
    "address_type",
    "first_name",
    "last_name",
    "company",
    "address_line1",
    "address_line2",
    "city",
    "state",
    "zip_code",
    "country",
    "phone",
)


@storefront.aggregate
class Address:
    customer_id = Identifier(required=True)
    address_type = String(required=True, choices=AddressType, default=AddressType.SHIPPING.value)
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    company = String(max_length=255)
    address_line1 = String(required=True, max_length=255)
    address_line2 = String(max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100, default="PH")
    phone = String(max_length=30)
    is_default = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()
    deleted_at = DateTime()

    @classmethod
    def create(cls, customer_id, **fields):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, created_at=now, updated_at=now, **fields)

    @property
    def is_deleted(self):
        return self.deleted_at is not None

    def belongs_to(self, customer_id):
        return not self.is_deleted and str(self.customer_id) == str(customer_id)

    def update(self, **changes):
        """Apply the given field values; ``None`` leaves a field as it is."""
        for field in ADDRESS_FIELDS:
            value = changes.get(field)
            if value is not None:
                setattr(self, field, value)
        self.updated_at = datetime.now(UTC)

    def set_default(self, is_default=True):
        self.is_default = is_default
        self.updated_at = datetime.now(UTC)

    def soft_delete(self):
        now = datetime.now(UTC)
        self.deleted_at = now
        self.is_default = False
        self.updated_at = now
