"""Test helpers shared across modules."""

import httpx

from jobboard.api.client import ApiClient

BASE_URL = "http://testserver/api"


def make_client(transport, store, on_session_expired=None) -> ApiClient:
    return ApiClient(store, base_url=BASE_URL, on_session_expired=on_session_expired, transport=transport)


def page_response(items, current_page=1, last_page=1, total=None) -> dict:
    """Fetch-function response shaped like the backend's paged endpoints."""
    return {
        "data": list(items),
        "meta": {
            "current_page": current_page,
            "last_page": last_page,
            "total": len(items) if total is None else total,
        },
    }


class OfflineTransport(httpx.AsyncBaseTransport):
    """Forwards to another transport but fails with ConnectError for the given paths."""

    def __init__(self, inner: httpx.AsyncBaseTransport, *paths: str):
        self.inner = inner
        self.paths = set(paths)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        if request.url.path in self.paths:
            raise httpx.ConnectError("offline", request=request)
        return await self.inner.handle_async_request(request)
