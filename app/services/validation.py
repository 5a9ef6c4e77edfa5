import re
from datetime import date, datetime, time, timezone
from typing import Optional

from app.models.booking_models import BookingRequest, ContactRequest, ValidationResult

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[\d\s\-+()]{10,20}$", re.ASCII)
XSS_PATTERN = re.compile(r"<script|javascript:|on\w+\s*=", re.IGNORECASE)

JAVASCRIPT_SCHEME = re.compile(r"javascript:", re.IGNORECASE)
EVENT_HANDLER = re.compile(r"on\w+\s*=", re.IGNORECASE)
ANGLE_BRACKETS = re.compile(r"[<>]")

MAX_FIELD_LENGTH = 1000

# Emails are always English, whatever LC_TIME the host runs with
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def parse_preferred_date(value: str) -> datetime:
    """
    Parses an ISO calendar date (or full ISO datetime) into an aware UTC datetime.
    A bare date means midnight UTC of that day.
    Raises ValueError if the string is not a valid date.
    """
    value = value.strip()
    try:
        return datetime.combine(date.fromisoformat(value), time.min, tzinfo=timezone.utc)
    except ValueError:
        pass

    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_long_date(value: str) -> str:
    """'2026-10-16' -> 'Friday, October 16, 2026'"""
    dt = parse_preferred_date(value)
    return f"{WEEKDAYS[dt.weekday()]}, {MONTHS[dt.month - 1]} {dt.day}, {dt.year}"


def _is_blank(value: Optional[str]) -> bool:
    return not value


def validate_booking(data: BookingRequest, now: Optional[datetime] = None) -> ValidationResult:
    """
    Checks every field independently and collects all violations.
    Nothing is short-circuited, so a bad name and a bad email give two entries.
    """
    now = now or datetime.now(timezone.utc)
    errors = []

    if _is_blank(data.name) or len(data.name.strip()) < 2:
        errors.append("Name must be at least 2 characters long")

    if _is_blank(data.email) or not EMAIL_PATTERN.fullmatch(data.email):
        errors.append("Valid email address is required")

    if _is_blank(data.serviceType):
        errors.append("Service type is required")

    if _is_blank(data.preferredDate):
        errors.append("Preferred date is required")
    else:
        try:
            if parse_preferred_date(data.preferredDate) < now:
                errors.append("Valid future date is required")
        except ValueError:
            errors.append("Valid future date is required")

    if _is_blank(data.preferredTime):
        errors.append("Preferred time is required")

    if data.phone and not PHONE_PATTERN.fullmatch(data.phone):
        errors.append("Phone number format is invalid")

    scanned = (data.name or "", data.message or "", data.serviceType or "")
    if any(XSS_PATTERN.search(text) for text in scanned):
        errors.append("Invalid characters detected")

    return ValidationResult(errors=errors)


def validate_contact(data: ContactRequest) -> ValidationResult:
    errors = []
    if _is_blank(data.name) or _is_blank(data.email) or _is_blank(data.message):
        errors.append("Please fill all required fields.")
    return ValidationResult(errors=errors)


def sanitize_input(text: Optional[str]) -> str:
    """
    Strips markup from free text before it goes into an email body.
    Validation only flags, this actually removes.
    """
    if not text:
        return ""
    # Removing one token can join the pieces of another, so repeat until stable
    previous = None
    while text != previous:
        previous = text
        text = ANGLE_BRACKETS.sub("", text)
        text = JAVASCRIPT_SCHEME.sub("", text)
        text = EVENT_HANDLER.sub("", text)
    return text.strip()[:MAX_FIELD_LENGTH]
