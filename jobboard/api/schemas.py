"""API request/response schemas."""

from datetime import date, datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


# Pagination
class PageMeta(BaseModel):
    current_page: int
    last_page: int
    total: int


class Page(BaseModel, Generic[T]):
    data: list[T] = []
    meta: PageMeta


# User schemas
class User(BaseModel):
    id: int
    name: str
    email: str
    role: str
    phone: str | None = None
    about: str | None = None

    class Config:
        extra = "ignore"


class AuthResponse(BaseModel):
    token: str
    user: User


class ProfileUpdate(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    about: str | None = None


# Job listing schemas
class JobListing(BaseModel):
    id: int
    title: str
    description: str = ""
    company: str
    location: str
    employment_type: str | None = None
    experience_level: str | None = None
    salary_min: int | None = None
    salary_max: int | None = None
    closing_date: date | None = None
    is_active: bool = True
    created_at: datetime | None = None

    class Config:
        extra = "ignore"


class JobListingCreate(BaseModel):
    title: str
    description: str
    company: str
    location: str
    employment_type: str
    experience_level: str
    salary_min: int = Field(ge=0)
    salary_max: int = Field(ge=0)
    closing_date: date
    is_active: bool = True


# Application schemas
class ApplicationJob(BaseModel):
    id: int | None = None
    title: str = ""
    company: str = ""
    location: str = ""


class ApplicationUser(BaseModel):
    id: int | None = None
    name: str = ""


class Application(BaseModel):
    id: int
    job_listing_id: int
    status: str
    notes: str | None = None
    created_at: datetime | None = None
    job_listing: ApplicationJob | None = None
    user: ApplicationUser | None = None

    class Config:
        extra = "ignore"


class StatusUpdate(BaseModel):
    status: str = Field(description="applied/reviewing/interview/offered/rejected/withdrawn")


# Notification schemas
class Notification(BaseModel):
    id: int | str
    message: str = ""
    data: dict[str, Any] = {}
    read_at: datetime | None = None
    created_at: datetime | None = None

    class Config:
        extra = "ignore"


class NotificationList(BaseModel):
    data: list[Notification]


class UnreadCount(BaseModel):
    count: int
