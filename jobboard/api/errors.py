"""API error types."""

from typing import Any

import httpx


class ApiError(Exception):
    """Non-2xx response from the backend."""

    def __init__(self, status_code: int, message: str | None = None, payload: Any = None):
        self.status_code = status_code
        self.message = message
        self.payload = payload
        super().__init__(message or f"HTTP {status_code}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        """Build an error from a response, reading `message` from a JSON body."""
        payload: Any = None
        message = None
        try:
            payload = response.json()
        except ValueError:
            payload = response.text or None
        if isinstance(payload, dict):
            message = payload.get("message") or payload.get("detail")
            if not isinstance(message, str):
                message = None
        return cls(response.status_code, message, payload)


class SessionExpiredError(ApiError):
    """Credential refresh failed; the session is over."""


def error_message(exc: BaseException, default: str) -> str:
    """Human-readable message for a failed request.

    Only backend-supplied messages are shown; anything else falls back to `default`.
    """
    if isinstance(exc, ApiError) and exc.message:
        return exc.message
    return default
