"""
Shared fixtures.

HTTP-level tests talk to an in-process FastAPI backend through
httpx.ASGITransport, so no network or real server is involved.
"""

import os

import httpx
import pytest

# Keep a developer's .env from leaking into tests
os.environ["CREDENTIALS_FILE"] = ""
os.environ["API_URL"] = "http://testserver/api"

from jobboard.api.credentials import CredentialStore  # noqa: E402
from tests.fake_backend import BackendState, create_backend  # noqa: E402


@pytest.fixture
def backend_state():
    return BackendState()


@pytest.fixture
def backend(backend_state):
    return create_backend(backend_state)


@pytest.fixture
def transport(backend):
    return httpx.ASGITransport(app=backend)


@pytest.fixture
def store():
    return CredentialStore()
