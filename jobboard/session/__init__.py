"""Authenticated session and role-based routing."""

from jobboard.session.routing import home_path, resolve_route
from jobboard.session.session import AuthResult, Session

__all__ = ["Session", "AuthResult", "home_path", "resolve_route"]
