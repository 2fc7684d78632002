"""
Notification center.

Keeps the notification list and unread count for the signed-in user and
polls the unread count on a fixed interval. The poller runs only while a
user is authenticated and is cancelled on logout and on shutdown.
"""

import asyncio
import contextlib
import logging
from datetime import UTC, datetime

import httpx

from jobboard.api.errors import ApiError
from jobboard.api.schemas import Notification, User
from jobboard.config import settings
from jobboard.services.notifications import NotificationService
from jobboard.session.session import Session

logger = logging.getLogger(__name__)


class NotificationCenter:
    """Notification list, unread counter and the polling task."""

    def __init__(self, service: NotificationService, poll_interval: float | None = None):
        self.service = service
        self.poll_interval = poll_interval if poll_interval is not None else settings.notification_poll_interval
        self.notifications: list[Notification] = []
        self.unread_count = 0
        self.is_loading = False
        self._poller: asyncio.Task | None = None

    @property
    def is_polling(self) -> bool:
        return self._poller is not None and not self._poller.done()

    def bind(self, session: Session):
        """Follow the session: poll while authenticated, stop and clear otherwise."""
        return session.add_listener(self._on_auth_change)

    def start(self) -> asyncio.Task:
        if self.is_polling:
            return self._poller
        self._poller = asyncio.create_task(self._poll())
        return self._poller

    async def stop(self) -> None:
        poller = self._cancel()
        if poller is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await poller
        self._clear()

    async def refresh_notifications(self) -> None:
        self.is_loading = True
        try:
            self.notifications = await self.service.get_notifications()
        except (ApiError, httpx.HTTPError) as e:
            logger.error(f"Error fetching notifications: {e}")
        finally:
            self.is_loading = False

    async def refresh_unread_count(self) -> None:
        try:
            self.unread_count = await self.service.get_unread_count()
        except (ApiError, httpx.HTTPError) as e:
            logger.error(f"Error fetching unread count: {e}")

    async def mark_as_read(self, notification_id: int | str) -> None:
        try:
            await self.service.mark_as_read(notification_id)
        except (ApiError, httpx.HTTPError) as e:
            logger.error(f"Error marking notification {notification_id} as read: {e}")
            return

        now = datetime.now(UTC)
        self.notifications = [
            n.model_copy(update={"read_at": now}) if n.id == notification_id else n
            for n in self.notifications
        ]
        await self.refresh_unread_count()

    async def _poll(self) -> None:
        await self.refresh_notifications()
        await self.refresh_unread_count()
        while True:
            await asyncio.sleep(self.poll_interval)
            await self.refresh_unread_count()

    def _on_auth_change(self, user: User | None) -> None:
        if user is not None:
            self.start()
        else:
            self._cancel()
            self._clear()

    def _cancel(self) -> asyncio.Task | None:
        poller, self._poller = self._poller, None
        if poller is not None and not poller.done():
            poller.cancel()
        return poller

    def _clear(self) -> None:
        self.notifications = []
        self.unread_count = 0
        self.is_loading = False
