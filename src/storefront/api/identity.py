"""Resolve the caller's identity from headers set by the upstream auth layer."""

from fastapi import Header

from storefront.shared.identity import CurrentUser, UserRole


def current_user(
    x_user_id: str | None = Header(None),
    x_user_email: str | None = Header(None),
    x_user_phone: str | None = Header(None),
    x_user_role: str | None = Header(None),
) -> CurrentUser | None:
    """``None`` when the request is anonymous."""
    if not x_user_id:
        return None
    return CurrentUser(
        id=x_user_id,
        email=x_user_email,
        phone=x_user_phone,
        role=(x_user_role or UserRole.CUSTOMER.value).upper(),
    )
