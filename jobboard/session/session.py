"""
Authenticated session.

Owns the current user and notifies listeners whenever the user logs in,
logs out or the session expires. Created once per application run by
`jobboard.app.open_app` and passed to whatever needs it.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from jobboard.api.errors import ApiError, error_message
from jobboard.api.schemas import User
from jobboard.services.auth import AuthService
from jobboard.session.routing import LOGIN_PATH, ROLE_HOME

logger = logging.getLogger(__name__)

AuthListener = Callable[[User | None], None]


@dataclass
class AuthResult:
    success: bool
    message: str | None = None


class Session:
    """Current user plus login/register/logout with role-based redirects."""

    def __init__(self, auth: AuthService, navigate: Callable[[str], None] | None = None):
        self.auth = auth
        self.navigate = navigate or (lambda path: None)
        self.current_user: User | None = None
        self.is_loading = True
        self._listeners: list[AuthListener] = []

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    @property
    def user_role(self) -> str | None:
        return self.current_user.role if self.current_user else None

    def add_listener(self, listener: AuthListener) -> Callable[[], None]:
        """Register a callback for auth changes; returns a function that removes it."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def restore(self) -> None:
        """Pick up a user left in the credential store by a previous run."""
        self._set_user(self.auth.get_current_user())
        self.is_loading = False

    async def login(self, credentials: dict) -> AuthResult:
        try:
            data = await self.auth.login(credentials)
        except (ApiError, httpx.HTTPError, ValidationError) as e:
            logger.info(f"Login failed: {e}")
            return AuthResult(success=False, message=error_message(e, "Login failed"))

        self._set_user(data.user)
        logger.info(f"Logged in as {data.user.email} ({data.user.role})")
        if data.user.role in ROLE_HOME:
            self.navigate(ROLE_HOME[data.user.role])
        return AuthResult(success=True)

    async def register(self, user_data: dict) -> AuthResult:
        try:
            data = await self.auth.register(user_data)
        except (ApiError, httpx.HTTPError, ValidationError) as e:
            logger.info(f"Registration failed: {e}")
            return AuthResult(success=False, message=error_message(e, "Registration failed"))

        self._set_user(data.user)
        # Admin accounts are never self-registered
        if data.user.role in ("recruiter", "candidate"):
            self.navigate(ROLE_HOME[data.user.role])
        return AuthResult(success=True)

    async def logout(self) -> None:
        """End the session locally even if the server call fails."""
        try:
            await self.auth.logout()
        finally:
            self._set_user(None)
            logger.info("Logged out")
            self.navigate(LOGIN_PATH)

    def expire(self) -> None:
        """Called when the token could not be refreshed; credentials are already cleared."""
        logger.info("Session expired")
        self._set_user(None)
        self.navigate(LOGIN_PATH)

    def _set_user(self, user: User | None) -> None:
        self.current_user = user
        for listener in list(self._listeners):
            listener(user)
