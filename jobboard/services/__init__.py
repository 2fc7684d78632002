"""
Backend services.

- auth: Login, registration, logout
- jobs: Job listings and applications
- notifications: Notification list and unread count
- users: Profile and statistics
"""

from jobboard.services.auth import AuthService
from jobboard.services.jobs import JobService
from jobboard.services.notifications import NotificationService
from jobboard.services.users import UserService

__all__ = ["AuthService", "JobService", "NotificationService", "UserService"]
