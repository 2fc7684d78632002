"""Convert validated form values into request payloads."""

from datetime import date
from typing import Any

from jobboard.api.schemas import JobListingCreate, ProfileUpdate
from jobboard.controllers.values import FieldValue, FileRef, text_of
from jobboard.forms.validators import is_checked

JOB_FORM_DEFAULTS = {
    "title": "",
    "description": "",
    "location": "",
    "company": "",
    "employment_type": "",
    "experience_level": "",
    "salary_min": "",
    "salary_max": "",
    "closing_date": "",
    "is_active": True,
}

APPLICATION_FORM_DEFAULTS = {"notes": "", "cv": None, "cover_letter": None}

LOGIN_FORM_DEFAULTS = {"email": "", "password": ""}

REGISTER_FORM_DEFAULTS = {"name": "", "email": "", "password": "", "password_confirmation": "", "role": ""}


def job_payload(values: dict[str, FieldValue]) -> JobListingCreate:
    """Salaries become ints and is_active a bool; everything else is sent as typed."""
    return JobListingCreate(
        title=text_of(values["title"]),
        description=text_of(values["description"]),
        company=text_of(values["company"]),
        location=text_of(values["location"]),
        employment_type=text_of(values["employment_type"]),
        experience_level=text_of(values["experience_level"]),
        salary_min=int(text_of(values["salary_min"])),
        salary_max=int(text_of(values["salary_max"])),
        closing_date=date.fromisoformat(text_of(values["closing_date"])),
        is_active=is_checked(values, "is_active"),
    )


def application_payload(values: dict[str, FieldValue], job_listing_id: int) -> dict[str, Any]:
    """Keyword arguments for JobService.apply_for_job."""

    def handle(name: str) -> Any:
        value = values.get(name)
        return value.handle if isinstance(value, FileRef) else None

    return {
        "job_listing_id": job_listing_id,
        "cv": handle("cv"),
        "cover_letter": handle("cover_letter"),
        "notes": text_of(values["notes"]) if "notes" in values else None,
    }


def profile_payload(values: dict[str, FieldValue]) -> ProfileUpdate:
    return ProfileUpdate(**{name: text_of(values[name]) for name in ("name", "email", "phone", "about") if name in values})
