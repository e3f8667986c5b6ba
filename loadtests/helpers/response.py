"""Compact error messages for failed storefront API calls.

Response shapes seen from the API:

- Pydantic validation (422): {"detail": [{"loc": [...], "msg": "..."}]}
- Gateway auth (401/403):    {"detail": "Not authorized as an admin"}
- Domain errors (400/404):   {"error": {"stock": ["Insufficient stock for ..."]}} or {"error": "..."}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response

_MAX_LENGTH = 300


def _join_field_errors(errors: dict) -> str:
    parts = []
    for field, messages in errors.items():
        if isinstance(messages, list):
            messages = "; ".join(str(m) for m in messages)
        parts.append(f"{field}: {messages}")
    return " | ".join(parts)


def extract_error_detail(response: Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return (getattr(response, "text", "") or "(empty response body)")[:_MAX_LENGTH]

    if not isinstance(body, dict):
        return str(body)[:_MAX_LENGTH]

    detail = body.get("detail")
    if isinstance(detail, list):
        return " | ".join(
            f"{'.'.join(str(p) for p in err.get('loc', []))}: {err.get('msg', err)}" for err in detail
        )
    if isinstance(detail, str):
        return detail

    error = body.get("error")
    if isinstance(error, dict):
        return _join_field_errors(error)
    if error is not None:
        return str(error)

    return str(body)[:_MAX_LENGTH]
