"""
Credential storage.

Holds the bearer token and the current user between requests, optionally
persisted to a JSON file so a restarted client resumes its session.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

from jobboard.api.schemas import User

logger = logging.getLogger(__name__)


class StoredCredentials(BaseModel):
    token: str | None = None
    user: User | None = None


class CredentialStore:
    """Token and user storage, in memory or backed by a JSON file."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path else None
        self._data = StoredCredentials()
        if self.path is not None:
            self._load()

    @property
    def token(self) -> str | None:
        return self._data.token

    @property
    def user(self) -> User | None:
        return self._data.user

    def save(self, token: str, user: User | None = None) -> None:
        """Store a token, keeping the current user unless a new one is given."""
        self._data = StoredCredentials(token=token, user=user or self._data.user)
        self._write()

    def clear(self) -> None:
        self._data = StoredCredentials()
        if self.path is not None and self.path.exists():
            self.path.unlink()

    def _load(self) -> None:
        if not self.path.exists():
            return
        try:
            self._data = StoredCredentials.model_validate_json(self.path.read_bytes())
        except (ValidationError, OSError) as e:
            logger.warning(f"Ignoring unreadable credentials file {self.path}: {e}")

    def _write(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self._data.model_dump_json(), encoding="utf-8")
