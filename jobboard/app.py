"""
Application wiring.

`open_app()` builds the credential store, HTTP client, session, services and
notification center for one run, and tears them down on exit.
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx

from jobboard.api.client import ApiClient
from jobboard.api.credentials import CredentialStore
from jobboard.config import settings
from jobboard.notifications import NotificationCenter
from jobboard.services import AuthService, JobService, NotificationService, UserService
from jobboard.session.session import Session

logger = logging.getLogger(__name__)


@dataclass
class App:
    store: CredentialStore
    client: ApiClient
    session: Session
    notifications: NotificationCenter
    jobs: JobService
    users: UserService


@asynccontextmanager
async def open_app(
    navigate: Callable[[str], None] | None = None,
    base_url: str | None = None,
    credentials_file: str | None = None,
    poll_interval: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[App]:
    """Create the client-side services; the notification poller and HTTP client are always closed on exit."""
    store = CredentialStore(credentials_file if credentials_file is not None else settings.credentials_file or None)

    session: Session | None = None

    def on_session_expired() -> None:
        if session is not None:
            session.expire()

    client = ApiClient(store, base_url=base_url, on_session_expired=on_session_expired, transport=transport)
    session = Session(AuthService(client), navigate=navigate)
    notifications = NotificationCenter(NotificationService(client), poll_interval=poll_interval)
    notifications.bind(session)

    app = App(
        store=store,
        client=client,
        session=session,
        notifications=notifications,
        jobs=JobService(client),
        users=UserService(client),
    )
    logger.debug(f"Client ready for {client.base_url}")

    try:
        session.restore()
        yield app
    finally:
        await notifications.stop()
        await client.aclose()
