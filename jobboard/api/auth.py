"""
Bearer authentication with a single transparent token refresh.

Attaches the stored token to each request. When a request that carried a
token comes back 401, the token is refreshed once and the request is retried
once. If the refresh fails, stored credentials are cleared and the session is
reported as expired.
"""

import logging
from collections.abc import Callable, Generator

import httpx

from jobboard.api.credentials import CredentialStore
from jobboard.api.errors import ApiError, SessionExpiredError

logger = logging.getLogger(__name__)

REFRESH_PATH = "/auth/refresh"


class BearerRefreshAuth(httpx.Auth):
    """httpx auth flow implementing the refresh-once policy."""

    requires_response_body = True

    def __init__(
        self,
        store: CredentialStore,
        refresh_url: str,
        on_session_expired: Callable[[], None] | None = None,
    ):
        self.store = store
        self.refresh_url = refresh_url
        self.on_session_expired = on_session_expired

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self.store.token
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

        response = yield request

        if response.status_code != 401 or not token:
            return

        logger.info(f"401 from {request.method} {request.url.path}, refreshing token")
        refresh_response = yield self._build_refresh_request(token)

        new_token = self._extract_token(refresh_response)
        if new_token is None:
            logger.info("Token refresh failed, clearing credentials")
            self.store.clear()
            if self.on_session_expired is not None:
                self.on_session_expired()
            raise SessionExpiredError(
                refresh_response.status_code,
                "Your session has expired. Please log in again.",
            )

        self.store.save(new_token)
        request.headers["Authorization"] = f"Bearer {new_token}"
        # Retried exactly once; a second 401 goes back to the caller as-is.
        yield request

    def _build_refresh_request(self, token: str) -> httpx.Request:
        return httpx.Request(
            "POST",
            self.refresh_url,
            headers={"Authorization": f"Bearer {token}", "Accept": "application/json"},
            json={},
        )

    @staticmethod
    def _extract_token(response: httpx.Response) -> str | None:
        if response.is_error:
            logger.debug(f"Refresh rejected: {ApiError.from_response(response)}")
            return None
        try:
            data = response.json()
        except ValueError:
            return None
        token = data.get("token") if isinstance(data, dict) else None
        return token if isinstance(token, str) and token else None
