"""Utility modules."""

from .formatting import format_application_status, format_currency, format_job_status, truncate_text

__all__ = ["format_currency", "format_job_status", "format_application_status", "truncate_text"]
