"""Authentication endpoints."""

import logging

import httpx

from jobboard.api.client import ApiClient
from jobboard.api.errors import ApiError
from jobboard.api.schemas import AuthResponse, User

logger = logging.getLogger(__name__)


class AuthService:
    """Login, registration and logout against /auth."""

    def __init__(self, client: ApiClient):
        self.client = client

    async def login(self, credentials: dict) -> AuthResponse:
        """
        Log in and store the returned token and user.

        Args:
            credentials: Mapping with `email` and `password`

        Returns:
            The token and the authenticated user
        """
        data = AuthResponse.model_validate(await self.client.post("/auth/login", json=credentials))
        self.client.store.save(data.token, data.user)
        return data

    async def register(self, user_data: dict) -> AuthResponse:
        """Create an account and store the returned credentials."""
        data = AuthResponse.model_validate(await self.client.post("/auth/register", json=user_data))
        self.client.store.save(data.token, data.user)
        return data

    async def logout(self) -> None:
        """Invalidate the token server-side, then forget it locally."""
        try:
            if self.client.store.token:
                await self.client.post("/auth/logout")
        except ApiError as e:
            logger.warning(f"Server logout failed ({e.status_code}), clearing local credentials anyway")
        except httpx.HTTPError as e:
            logger.warning(f"Server logout failed ({e}), clearing local credentials anyway")
        finally:
            self.client.store.clear()

    def get_current_user(self) -> User | None:
        return self.client.store.user
