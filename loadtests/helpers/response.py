"""Turn storefront error responses into short log lines.

Two body shapes come back from the API:

- request validation (422): ``{"detail": [{"loc": [...], "msg": "..."}]}``
- storefront errors (400/401/404/409/422): ``{"error": "msg"}`` or
  ``{"error": {"field": ["msg", ...]}}``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response

_MAX_LENGTH = 300


def _from_validation(detail: list) -> str:
    return " | ".join(
        f"{'.'.join(str(p) for p in item.get('loc', []))}: {item.get('msg', item)}" for item in detail
    )


def _from_error(error) -> str:
    if not isinstance(error, dict):
        return str(error)

    parts = []
    for name, messages in error.items():
        if isinstance(messages, list):
            messages = ", ".join(str(m) for m in messages)
        parts.append(f"{name}: {messages}")
    return " | ".join(parts)


def extract_error_detail(response: Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return (getattr(response, "text", "") or "(empty response body)")[:_MAX_LENGTH]

    if isinstance(body, dict) and isinstance(body.get("detail"), list):
        return _from_validation(body["detail"])
    if isinstance(body, dict) and "error" in body:
        return _from_error(body["error"])
    return str(body)[:_MAX_LENGTH]
