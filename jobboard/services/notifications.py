"""Notification endpoints."""

from jobboard.api.client import ApiClient
from jobboard.api.schemas import Notification, NotificationList, UnreadCount


class NotificationService:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_notifications(self) -> list[Notification]:
        payload = await self.client.get("/notifications")
        return NotificationList.model_validate(payload).data

    async def get_unread_count(self) -> int:
        payload = await self.client.get("/notifications/unread-count")
        return UnreadCount.model_validate(payload).count

    async def mark_as_read(self, notification_id: int | str) -> None:
        await self.client.put(f"/notifications/{notification_id}/read")
