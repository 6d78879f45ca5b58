"""Response error extraction for load test observability.

Handles the two error shapes the storefront API returns:

- Pydantic validation (422): {"detail": [{"loc": [...], "msg": "...", "type": "..."}]}
- Action errors (400/401/403/404/409/500): {"error": "msg", "kind": "...", "errors": {"field": ["msg"]}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Compact, human-readable error message for Locust failures and log lines."""
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if "detail" in body and isinstance(body["detail"], list):
        parts = []
        for err in body["detail"]:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    if "error" in body:
        detail = f"{body.get('kind', 'Error')}: {body['error']}"
        field_errors = body.get("errors") or {}
        if field_errors:
            detail += " (" + " | ".join(f"{k}: {', '.join(v)}" for k, v in field_errors.items()) + ")"
        return detail

    return str(body)[:300]


def error_kind(response: Response) -> str | None:
    """The ``kind`` of an action error, or None for other bodies."""
    try:
        return response.json().get("kind")
    except (ValueError, AttributeError):
        return None
