"""Request boundary shared by every storefront action.

``@action`` runs the wrapped function with the caller's identity bound into
the log context and converts whatever it raises into an ``Err``. Nothing
escapes an action except its ``Result``.
"""

import functools

import structlog
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, TransactionError, ValidationError
from sqlalchemy.exc import IntegrityError

from storefront.revalidation import get_page_cache
from storefront.shared.errors import (
    AuthenticationRequired,
    EmptyCartError,
    InsufficientStockError,
    PermissionDenied,
)
from storefront.shared.identity import CurrentUser
from storefront.shared.result import Err, ErrorKind, Ok

logger = structlog.get_logger(__name__)


def require_user(user: CurrentUser | None) -> CurrentUser:
    if user is None or not user.id:
        raise AuthenticationRequired("User not authenticated")
    return user


def require_admin(user: CurrentUser | None) -> CurrentUser:
    user = require_user(user)
    if not user.is_admin:
        raise PermissionDenied("Admin access required")
    return user


def revalidate(*paths: str) -> None:
    """Signal stale pages. Runs after the change has committed, so failures are only logged."""
    try:
        page_cache = get_page_cache()
        for path in paths:
            page_cache.revalidate(path)
    except Exception as exc:
        logger.warning("Page revalidation skipped", paths=list(paths), error=str(exc))


def _first_message(messages) -> str:
    if isinstance(messages, dict):
        for value in messages.values():
            if isinstance(value, list | tuple) and value:
                return str(value[0])
            if value:
                return str(value)
    return str(messages)


def _field_errors(messages) -> dict[str, list[str]]:
    if not isinstance(messages, dict):
        return {}
    return {
        str(key): [str(v) for v in value] if isinstance(value, list | tuple) else [str(value)]
        for key, value in messages.items()
    }


_CONFLICT_CAUSES = {"IntegrityError", "StaleDataError", "ExpectedVersionError"}


def _is_write_conflict(exc: Exception) -> bool:
    """Optimistic version clash, or a unique/integrity violation raised at commit."""
    if isinstance(exc, ExpectedVersionError | IntegrityError):
        return True
    if isinstance(exc, TransactionError):
        extra_info = getattr(exc, "extra_info", None) or {}
        return extra_info.get("original_exception") in _CONFLICT_CAUSES
    return False


def to_err(exc: Exception, failure_message: str) -> Err:
    """Classify an exception raised inside an action."""
    # Subclasses of ValidationError first
    if isinstance(exc, EmptyCartError):
        return Err(ErrorKind.EMPTY_CART, _first_message(exc.messages), _field_errors(exc.messages))
    if isinstance(exc, InsufficientStockError):
        return Err(ErrorKind.OUT_OF_STOCK, _first_message(exc.messages), _field_errors(exc.messages))
    if isinstance(exc, ValidationError):
        return Err(ErrorKind.VALIDATION, _first_message(exc.messages), _field_errors(exc.messages))
    if isinstance(exc, ObjectNotFoundError):
        # Carries its message map in args, not in `messages`
        return Err(ErrorKind.NOT_FOUND, _first_message(exc.args[0] if exc.args else str(exc)))
    if isinstance(exc, AuthenticationRequired):
        return Err(ErrorKind.UNAUTHENTICATED, str(exc))
    if isinstance(exc, PermissionDenied):
        return Err(ErrorKind.FORBIDDEN, str(exc))
    if _is_write_conflict(exc):
        return Err(ErrorKind.CONFLICT, "The record was changed by another request, please retry")
    return Err(ErrorKind.INFRASTRUCTURE, failure_message)


def action(failure_message: str):
    """Turn a function taking ``user`` as first argument into a Result-returning action."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(user, *args, **kwargs):
            user_id = user.id if user is not None else None
            with structlog.contextvars.bound_contextvars(action=func.__name__, user_id=user_id):
                try:
                    value = func(user, *args, **kwargs)
                except Exception as exc:
                    err = to_err(exc, failure_message)
                    if err.kind == ErrorKind.INFRASTRUCTURE:
                        logger.exception(failure_message)
                    else:
                        logger.info("Action rejected", kind=err.kind.value, reason=err.message)
                    return err
                return value if isinstance(value, Ok | Err) else Ok(value)

        return wrapper

    return decorator
