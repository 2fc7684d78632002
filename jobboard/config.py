"""
Configuration management for the Job Board client.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Backend
    api_url: str = "http://localhost:8000/api"
    request_timeout: float = 30.0

    # Session
    credentials_file: str = ""  # empty keeps credentials in memory only

    # Notifications
    notification_poll_interval: float = 60.0

    # Lists
    page_size: int = 10

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()
