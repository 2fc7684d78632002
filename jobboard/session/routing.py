"""
Role-based routing.

Maps each screen path to the role allowed to see it and resolves where a
user actually lands: anonymous users go to /login, users on another role's
screen go to their own dashboard, and signed-in users are kept off the
login and register screens.
"""

import re

LOGIN_PATH = "/login"
REGISTER_PATH = "/register"

ROLE_HOME = {
    "recruiter": "/recruiter/dashboard",
    "candidate": "/candidate/dashboard",
    "admin": "/admin/dashboard",
}

PUBLIC_ROUTES = (LOGIN_PATH, REGISTER_PATH)

# (pattern, required role)
PROTECTED_ROUTES = [
    (r"/recruiter/dashboard", "recruiter"),
    (r"/recruiter/jobs", "recruiter"),
    (r"/candidate/dashboard", "candidate"),
    (r"/candidate/jobs", "candidate"),
    (r"/candidate/jobs/\d+", "candidate"),
    (r"/candidate/jobs/\d+/apply", "candidate"),
    (r"/candidate/applications", "candidate"),
]


def home_path(role: str | None) -> str:
    """Dashboard for a role; /login for anonymous or unknown roles."""
    return ROLE_HOME.get(role or "", LOGIN_PATH)


def required_role(path: str) -> str | None:
    for pattern, role in PROTECTED_ROUTES:
        if re.fullmatch(pattern, path):
            return role
    return None


def resolve_route(path: str, role: str | None) -> str:
    """
    Resolve the path a user is sent to when navigating to `path`.

    Args:
        path: Requested path
        role: Current user's role, None when not authenticated

    Returns:
        The path to display (equal to `path` when access is allowed)
    """
    path = path.rstrip("/") or "/"

    if path in PUBLIC_ROUTES:
        if role in ROLE_HOME:
            return ROLE_HOME[role]
        return path

    needed = required_role(path)
    if needed is None:
        # "/" and unknown paths fall back to the login screen
        return resolve_route(LOGIN_PATH, role)

    if role is None:
        return LOGIN_PATH
    if role != needed:
        return home_path(role)
    return path
