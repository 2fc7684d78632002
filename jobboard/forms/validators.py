"""
Validators for the job board forms.

Each validator receives all field values and returns a complete
field -> message map (empty when the form is valid).
"""

import re
from datetime import date

from jobboard.controllers.values import EMPTY, FieldValue, FileRef, Flag, is_blank, text_of

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
PHONE_PATTERN = re.compile(r"^[+]?[(]?[0-9]{3}[)]?[-\s.]?[0-9]{3}[-\s.]?[0-9]{4,6}$", re.IGNORECASE | re.MULTILINE)

MIN_PASSWORD_LENGTH = 8


def _blank(values: dict[str, FieldValue], name: str) -> bool:
    value = values.get(name)
    return value is None or is_blank(value)


def _check_email(values: dict[str, FieldValue], errors: dict[str, str]) -> None:
    if _blank(values, "email"):
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.search(text_of(values["email"])):
        errors["email"] = "Email is invalid"


def _parse_int(value: FieldValue | None) -> int | None:
    try:
        return int(text_of(value)) if value is not None else None
    except ValueError:
        return None


def validate_login(values: dict[str, FieldValue]) -> dict[str, str]:
    errors: dict[str, str] = {}
    _check_email(values, errors)
    if _blank(values, "password"):
        errors["password"] = "Password is required"
    return errors


def validate_register(values: dict[str, FieldValue]) -> dict[str, str]:
    errors: dict[str, str] = {}

    if _blank(values, "name"):
        errors["name"] = "Name is required"

    _check_email(values, errors)

    password = text_of(values.get("password", EMPTY))
    if not password:
        errors["password"] = "Password is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"

    if _blank(values, "password_confirmation"):
        errors["password_confirmation"] = "Password confirmation is required"
    elif text_of(values["password_confirmation"]) != password:
        errors["password_confirmation"] = "Passwords do not match"

    if _blank(values, "role"):
        errors["role"] = "Please select a role"

    return errors


def validate_profile(values: dict[str, FieldValue]) -> dict[str, str]:
    errors: dict[str, str] = {}

    if _blank(values, "name"):
        errors["name"] = "Name is required"

    _check_email(values, errors)

    phone = text_of(values.get("phone", EMPTY))
    if phone and not PHONE_PATTERN.search(phone):
        errors["phone"] = "Phone number is invalid"

    return errors


def validate_application(values: dict[str, FieldValue]) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not isinstance(values.get("cv"), FileRef):
        errors["cv"] = "Resume/CV is required"
    return errors


def validate_job(values: dict[str, FieldValue], today: date | None = None) -> dict[str, str]:
    """Job listing form. `today` is injectable so closing-date checks are testable."""
    errors: dict[str, str] = {}

    required = {
        "title": "Job title is required",
        "description": "Job description is required",
        "location": "Location is required",
        "company": "Company name is required",
        "employment_type": "Employment type is required",
        "experience_level": "Experience level is required",
    }
    for name, message in required.items():
        if _blank(values, name):
            errors[name] = message

    salary_min = _parse_int(values.get("salary_min"))
    salary_max = _parse_int(values.get("salary_max"))

    if _blank(values, "salary_min"):
        errors["salary_min"] = "Minimum salary is required"
    elif salary_min is None or salary_min < 0:
        errors["salary_min"] = "Minimum salary must be a positive number"

    if _blank(values, "salary_max"):
        errors["salary_max"] = "Maximum salary is required"
    elif salary_max is None or salary_max < 0:
        errors["salary_max"] = "Maximum salary must be a positive number"

    if salary_min is not None and salary_max is not None and salary_min > salary_max:
        errors["salary_max"] = "Maximum salary must be greater than minimum salary"

    if _blank(values, "closing_date"):
        errors["closing_date"] = "Closing date is required"
    else:
        try:
            closing = date.fromisoformat(text_of(values["closing_date"]))
        except ValueError:
            errors["closing_date"] = "Closing date is invalid"
        else:
            if closing < (today or date.today()):
                errors["closing_date"] = "Closing date cannot be in the past"

    return errors


def is_checked(values: dict[str, FieldValue], name: str) -> bool:
    value = values.get(name)
    return isinstance(value, Flag) and value.value
