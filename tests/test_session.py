"""Tests for the session lifecycle and its notification poller."""

import asyncio

import pytest

from jobboard.api.credentials import CredentialStore
from jobboard.api.errors import SessionExpiredError
from jobboard.api.schemas import User
from jobboard.app import open_app
from tests.fake_backend import CANDIDATE
from tests.helpers import BASE_URL, OfflineTransport


async def wait_for(predicate, timeout=2.0):
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not reached in time")
        await asyncio.sleep(0.005)


def app_for(transport, paths, **kwargs):
    kwargs.setdefault("credentials_file", "")
    kwargs.setdefault("poll_interval", 60.0)
    return open_app(navigate=paths.append, base_url=BASE_URL, transport=transport, **kwargs)


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_routes_by_role_and_starts_polling(self, transport):
        paths = []
        async with app_for(transport, paths) as app:
            assert app.session.is_authenticated is False

            result = await app.session.login({"email": "ada@example.com", "password": "secret123"})

            assert result.success is True
            assert app.session.user_role == "candidate"
            assert paths == ["/candidate/dashboard"]
            assert app.notifications.is_polling
            await wait_for(lambda: app.notifications.unread_count == 2)
            assert len(app.notifications.notifications) == 2

    @pytest.mark.asyncio
    async def test_failed_login_reports_message(self, transport):
        paths = []
        async with app_for(transport, paths) as app:
            result = await app.session.login({"email": "ada@example.com", "password": "wrong"})

            assert result.success is False
            assert result.message == "Invalid email or password"
            assert app.session.is_authenticated is False
            assert app.notifications.is_polling is False
            assert paths == []

    @pytest.mark.asyncio
    async def test_register_recruiter(self, transport):
        paths = []
        async with app_for(transport, paths) as app:
            result = await app.session.register(
                {
                    "name": "New Recruiter",
                    "email": "new@example.com",
                    "password": "longenough",
                    "password_confirmation": "longenough",
                    "role": "recruiter",
                }
            )
            assert result.success is True
            assert paths == ["/recruiter/dashboard"]

    @pytest.mark.asyncio
    async def test_duplicate_registration(self, transport):
        async with app_for(transport, []) as app:
            result = await app.session.register(
                {"name": "Ada", "email": "ada@example.com", "password": "x" * 8, "role": "candidate"}
            )
            assert result.success is False
            assert result.message == "The email has already been taken."


class TestLogout:
    @pytest.mark.asyncio
    async def test_logout_stops_polling_and_clears_state(self, transport, backend_state):
        paths = []
        async with app_for(transport, paths) as app:
            await app.session.login({"email": "ada@example.com", "password": "secret123"})
            await wait_for(lambda: app.notifications.unread_count == 2)

            await app.session.logout()
            await asyncio.sleep(0)

            assert paths[-1] == "/login"
            assert app.notifications.is_polling is False
            assert app.notifications.unread_count == 0
            assert app.notifications.notifications == []
            assert app.store.token is None
            assert backend_state.calls["logout"] == 1

    @pytest.mark.asyncio
    async def test_logout_while_offline_still_ends_session(self, transport):
        paths = []
        offline = OfflineTransport(transport, "/api/auth/logout")
        async with app_for(offline, paths) as app:
            await app.session.login({"email": "ada@example.com", "password": "secret123"})
            await wait_for(lambda: app.notifications.unread_count == 2)

            await app.session.logout()
            await asyncio.sleep(0)

            assert app.store.token is None
            assert app.session.is_authenticated is False
            assert app.notifications.is_polling is False
            assert paths[-1] == "/login"

    @pytest.mark.asyncio
    async def test_teardown_cancels_poller(self, transport):
        async with app_for(transport, []) as app:
            await app.session.login({"email": "ada@example.com", "password": "secret123"})
            poller = app.notifications.start()
            assert not poller.done()
        assert poller.done()

    @pytest.mark.asyncio
    async def test_teardown_on_error_cancels_poller(self, transport):
        with pytest.raises(RuntimeError):
            async with app_for(transport, []) as app:
                await app.session.login({"email": "ada@example.com", "password": "secret123"})
                poller = app.notifications.start()
                raise RuntimeError("view crashed")
        assert poller.done()


class TestExpiry:
    @pytest.mark.asyncio
    async def test_failed_refresh_ends_session(self, transport, backend_state):
        paths = []
        async with app_for(transport, paths) as app:
            await app.session.login({"email": "ada@example.com", "password": "secret123"})
            await wait_for(lambda: app.notifications.unread_count == 2)
            backend_state.tokens.clear()
            backend_state.refresh_ok = False

            with pytest.raises(SessionExpiredError):
                await app.jobs.get_all_jobs({"page": 1})

            assert app.session.is_authenticated is False
            assert paths[-1] == "/login"
            assert app.notifications.is_polling is False
            assert app.store.token is None


class TestRestore:
    @pytest.mark.asyncio
    async def test_restores_stored_user(self, transport, backend_state, tmp_path):
        path = tmp_path / "credentials.json"
        CredentialStore(path).save(backend_state.issue_token(CANDIDATE), User.model_validate(CANDIDATE))

        async with app_for(transport, [], credentials_file=str(path)) as app:
            assert app.session.is_authenticated is True
            assert app.session.is_loading is False
            assert app.notifications.is_polling
            await wait_for(lambda: app.notifications.unread_count == 2)


class TestPolling:
    @pytest.mark.asyncio
    async def test_unread_count_is_polled(self, transport, backend_state):
        async with app_for(transport, [], poll_interval=0.01) as app:
            await app.session.login({"email": "ada@example.com", "password": "secret123"})
            await wait_for(lambda: backend_state.calls["unread_count"] >= 3)

            backend_state.notifications.append({"id": 3, "message": "New message", "read_at": None})
            await wait_for(lambda: app.notifications.unread_count == 3)

            await app.session.logout()
            calls = backend_state.calls["unread_count"]
            await asyncio.sleep(0.05)
            assert backend_state.calls["unread_count"] == calls

    @pytest.mark.asyncio
    async def test_mark_as_read(self, transport):
        async with app_for(transport, []) as app:
            await app.session.login({"email": "ada@example.com", "password": "secret123"})
            await wait_for(lambda: app.notifications.unread_count == 2)

            await app.notifications.mark_as_read(1)

            assert app.notifications.unread_count == 1
            read = {n.id: n.read_at is not None for n in app.notifications.notifications}
            assert read == {1: True, 2: False}
