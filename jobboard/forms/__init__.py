"""Validators, default values and payload builders for the job board forms."""

from jobboard.forms.payloads import (
    APPLICATION_FORM_DEFAULTS,
    JOB_FORM_DEFAULTS,
    LOGIN_FORM_DEFAULTS,
    REGISTER_FORM_DEFAULTS,
    application_payload,
    job_payload,
    profile_payload,
)
from jobboard.forms.validators import (
    validate_application,
    validate_job,
    validate_login,
    validate_profile,
    validate_register,
)

__all__ = [
    "APPLICATION_FORM_DEFAULTS",
    "JOB_FORM_DEFAULTS",
    "LOGIN_FORM_DEFAULTS",
    "REGISTER_FORM_DEFAULTS",
    "application_payload",
    "job_payload",
    "profile_payload",
    "validate_application",
    "validate_job",
    "validate_login",
    "validate_profile",
    "validate_register",
]
