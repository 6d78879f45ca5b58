"""Request-scoped identity passed explicitly into every storefront action."""

from dataclasses import dataclass
from enum import Enum


class UserRole(Enum):
    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"
    MODERATOR = "MODERATOR"
    VENDOR = "VENDOR"


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated caller, as resolved by the upstream auth layer."""

    id: str
    email: str | None = None
    phone: str | None = None
    role: str = UserRole.CUSTOMER.value

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value
