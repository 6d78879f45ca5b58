"""Tagged results returned by the storefront actions.

Every action is a boundary: domain and infrastructure failures are converted
into an ``Err`` carrying an ``ErrorKind`` so callers branch on the kind
instead of matching message strings.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    VALIDATION = "Validation"
    UNAUTHENTICATED = "Unauthenticated"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "Not_Found"
    EMPTY_CART = "Empty_Cart"
    OUT_OF_STOCK = "Out_Of_Stock"
    CONFLICT = "Conflict"
    INFRASTRUCTURE = "Infrastructure"


@dataclass(frozen=True)
class Ok:
    """Successful outcome, optionally carrying a value."""

    value: Any = None

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome.

    ``errors`` holds the field-level message map for validation failures.
    """

    kind: ErrorKind
    message: str
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_ok(self) -> bool:
        return False


Result = Ok | Err
