"""Helpers shared by the service modules."""

from typing import Any


def unwrap(payload: Any) -> Any:
    """Return the `data` member of a `{"data": ...}` envelope, or the payload itself."""
    if isinstance(payload, dict) and "data" in payload and "meta" not in payload:
        return payload["data"]
    return payload


def clean_params(params: dict | None) -> dict:
    """Drop unset filters so they are not sent as empty query strings."""
    return {k: v for k, v in (params or {}).items() if v is not None and v != ""}
