"""
Display formatting for job listings and applications.

Status formatters return a (label, color) pair used by the terminal views.
"""

CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£"}

JOB_STATUSES = {
    "active": ("Active", "green"),
    "closed": ("Closed", "red"),
    "draft": ("Draft", "gray"),
}

APPLICATION_STATUSES = {
    "applied": ("Applied", "blue"),
    "reviewing": ("Reviewing", "yellow"),
    "interview": ("Interview", "purple"),
    "offered": ("Offered", "green"),
    "rejected": ("Rejected", "red"),
    "withdrawn": ("Withdrawn", "gray"),
}


def format_currency(amount: float | None, currency: str = "USD") -> str:
    """Whole-unit amount with thousands separators, e.g. 85000 -> '$85,000'."""
    if amount is None:
        return ""
    symbol = CURRENCY_SYMBOLS.get(currency)
    number = f"{abs(amount):,.0f}"
    text = f"{symbol}{number}" if symbol else f"{currency} {number}"
    return f"-{text}" if amount < 0 else text


def _format_status(status: str | None, known: dict[str, tuple[str, str]]) -> tuple[str, str]:
    if not status:
        return ("Unknown", "gray")
    return known.get(status.lower(), (status[0].upper() + status[1:], "gray"))


def format_job_status(status: str | None) -> tuple[str, str]:
    return _format_status(status, JOB_STATUSES)


def format_application_status(status: str | None) -> tuple[str, str]:
    return _format_status(status, APPLICATION_STATUSES)


def truncate_text(text: str | None, length: int = 100) -> str:
    if not text:
        return ""
    return text[:length] + "..." if len(text) > length else text
