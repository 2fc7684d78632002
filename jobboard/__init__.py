"""
Job Board Client.

Core components:
- api: HTTP client, bearer/refresh auth, response schemas
- services: Job listings, applications, notifications, users
- controllers: Form, paginated list and request state machines
- session: Authenticated session and role routing
- notifications: Unread-count polling
"""
