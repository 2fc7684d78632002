"""Request state tracker for one-off API calls (load a job, submit a form)."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from jobboard.api.errors import error_message

logger = logging.getLogger(__name__)


@dataclass
class RequestResult:
    success: bool
    data: Any = None
    error: str | None = None


class RequestTracker:
    """Loading/error/data state around an async API function."""

    def __init__(self, api_function: Callable[..., Awaitable[Any]]):
        self.api_function = api_function
        self.data: Any = None
        self.is_loading = False
        self.error: str | None = None

    async def execute(self, *args, **kwargs) -> RequestResult:
        """Call the API function; failures become state instead of exceptions."""
        self.is_loading = True
        self.error = None
        try:
            result = await self.api_function(*args, **kwargs)
        except Exception as e:
            logger.warning(f"{getattr(self.api_function, '__name__', 'request')} failed: {e}")
            self.error = error_message(e, "An error occurred")
            self.is_loading = False
            return RequestResult(success=False, error=self.error)

        self.data = result
        self.is_loading = False
        return RequestResult(success=True, data=result)

    def reset(self) -> None:
        self.data = None
        self.error = None
        self.is_loading = False
