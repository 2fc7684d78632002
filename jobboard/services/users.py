"""User profile and statistics endpoints."""

from typing import Any

from jobboard.api.client import ApiClient
from jobboard.api.schemas import ProfileUpdate, User
from jobboard.services.base import unwrap


class UserService:
    def __init__(self, client: ApiClient):
        self.client = client

    async def get_profile(self) -> User:
        return User.model_validate(unwrap(await self.client.get("/users/profile")))

    async def update_profile(self, profile: ProfileUpdate) -> User:
        """Update the profile, sending only the fields that were set."""
        payload = await self.client.put("/users/profile", json=profile.model_dump(exclude_none=True))
        return User.model_validate(unwrap(payload))

    async def delete_user(self, user_id: int) -> Any:
        """Delete a user (admin only)."""
        return await self.client.delete(f"/users/{user_id}")

    async def get_recruiter_stats(self) -> dict:
        return unwrap(await self.client.get("/stats/recruiter"))

    async def get_global_stats(self) -> dict:
        """Site-wide statistics (admin only)."""
        return unwrap(await self.client.get("/stats/global"))
