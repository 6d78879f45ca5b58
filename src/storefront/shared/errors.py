"""Domain exceptions that callers need to tell apart from plain validation failures."""

from protean.exceptions import ValidationError


class InsufficientStockError(ValidationError):
    """A variant holds fewer units than requested."""


class EmptyCartError(ValidationError):
    """Checkout was attempted with nothing in the cart."""


class AuthenticationRequired(Exception):
    """The request carries no user identity."""


class PermissionDenied(Exception):
    """The user is known but lacks the role the operation needs."""
