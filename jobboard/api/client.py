"""
HTTP client for the job board backend.

Thin wrapper over httpx.AsyncClient: JSON in, JSON out, ApiError for
non-2xx responses, bearer/refresh handled by BearerRefreshAuth.
"""

import logging
from collections.abc import Callable
from typing import Any

import httpx

from jobboard.api.auth import REFRESH_PATH, BearerRefreshAuth
from jobboard.api.credentials import CredentialStore
from jobboard.api.errors import ApiError
from jobboard.config import settings

logger = logging.getLogger(__name__)


class ApiClient:
    """Async JSON client bound to one credential store."""

    def __init__(
        self,
        store: CredentialStore,
        base_url: str | None = None,
        timeout: float | None = None,
        on_session_expired: Callable[[], None] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.store = store
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.auth = BearerRefreshAuth(
            store,
            refresh_url=self.base_url + REFRESH_PATH,
            on_session_expired=on_session_expired,
        )
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            auth=self.auth,
            headers={"Accept": "application/json"},
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
        )

    async def request(self, method: str, path: str, **kwargs) -> Any:
        """Send a request and return the decoded JSON body (None when empty)."""
        response = await self._client.request(method, path, **kwargs)
        if response.is_error:
            error = ApiError.from_response(response)
            logger.debug(f"{method} {path} failed: {error.status_code} {error.message}")
            raise error
        if not response.content:
            return None
        return response.json()

    async def get(self, path: str, params: dict | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None, **kwargs) -> Any:
        return await self.request("POST", path, json=json, **kwargs)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
