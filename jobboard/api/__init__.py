"""HTTP layer: client, auth flow, errors and schemas."""

from jobboard.api.client import ApiClient
from jobboard.api.credentials import CredentialStore
from jobboard.api.errors import ApiError, SessionExpiredError, error_message

__all__ = ["ApiClient", "CredentialStore", "ApiError", "SessionExpiredError", "error_message"]
