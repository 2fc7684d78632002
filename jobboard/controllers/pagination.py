"""
Paginated list controller.

Mediates between a list screen and a paged endpoint. Every page or filter
change issues a fetch of `{**query_params, "page": current_page}`; only the
most recently issued fetch may update the visible state, so a slow response
for superseded parameters never overwrites a newer one.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any

from jobboard.api.errors import error_message
from jobboard.api.schemas import Page

logger = logging.getLogger(__name__)

FetchFunction = Callable[[dict[str, Any]], Awaitable[Page | dict]]


class ListStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class PaginatedListController:
    """Page cursor, filters and fetch status for one list screen.

    Methods that trigger a fetch return the scheduled task (or None when
    they are a no-op). Use as an async context manager to mount on entry
    and dispose on exit.
    """

    def __init__(self, fetch: FetchFunction, initial_params: dict[str, Any] | None = None):
        self.fetch = fetch

        self.items: list[Any] = []
        self.current_page = 1
        self.total_pages = 0
        self.total_items = 0
        self.query_params: dict[str, Any] = dict(initial_params or {})
        self.is_loading = False
        self.error: str | None = None
        self.status = ListStatus.IDLE

        self._generation = 0
        self._latest: asyncio.Task | None = None
        self._tasks: set[asyncio.Task] = set()
        self._disposed = False

    # Navigation
    def mount(self) -> asyncio.Task:
        return self._schedule_fetch()

    def go_to_page(self, page: int) -> asyncio.Task | None:
        if page < 1 or page > self.total_pages or page == self.current_page:
            return None
        self.current_page = page
        return self._schedule_fetch()

    def next_page(self) -> asyncio.Task | None:
        if self.current_page < self.total_pages:
            return self.go_to_page(self.current_page + 1)
        return None

    def prev_page(self) -> asyncio.Task | None:
        if self.current_page > 1:
            return self.go_to_page(self.current_page - 1)
        return None

    def update_params(self, params: dict[str, Any]) -> asyncio.Task:
        """Merge new filters and restart from page 1."""
        self.query_params = {**self.query_params, **params}
        # Must happen before the fetch is scheduled
        self.current_page = 1
        return self._schedule_fetch()

    def refresh(self) -> asyncio.Task:
        """Re-fetch the current page, e.g. after a delete."""
        return self._schedule_fetch()

    async def wait(self) -> None:
        """Wait for the most recently issued fetch to finish."""
        if self._latest is not None and not self._latest.done():
            await self._latest

    # Lifecycle
    async def dispose(self) -> None:
        """Cancel in-flight fetches; nothing is applied after this returns."""
        self._disposed = True
        pending = list(self._tasks)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    async def __aenter__(self) -> "PaginatedListController":
        self.mount()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.dispose()

    # Fetching
    def _schedule_fetch(self) -> asyncio.Task:
        if self._disposed:
            raise RuntimeError("PaginatedListController has been disposed")

        self._generation += 1
        params = {**self.query_params, "page": self.current_page}
        self.is_loading = True
        self.error = None
        self.status = ListStatus.LOADING
        logger.debug(f"Fetch #{self._generation}: {params}")

        task = asyncio.create_task(self._run_fetch(self._generation, params))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        self._latest = task
        return task

    def _is_current(self, generation: int) -> bool:
        return not self._disposed and generation == self._generation

    async def _run_fetch(self, generation: int, params: dict[str, Any]) -> None:
        try:
            response = await self.fetch(params)
            page = response if isinstance(response, Page) else Page.model_validate(response)
        except Exception as e:
            if not self._is_current(generation):
                logger.debug(f"Discarding failure of superseded fetch #{generation}: {e}")
                return
            logger.warning(f"Fetch #{generation} failed: {e}")
            self.error = error_message(e, "Failed to fetch data")
            self.is_loading = False
            self.status = ListStatus.FAILED
            return

        if not self._is_current(generation):
            logger.debug(f"Discarding stale response of fetch #{generation}")
            return

        self.items = list(page.data)
        self.current_page = page.meta.current_page
        self.total_pages = page.meta.last_page
        self.total_items = page.meta.total
        self.is_loading = False
        self.status = ListStatus.LOADED
