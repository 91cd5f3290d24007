"""Permit evaluator: pure, deterministic permit classification and activation rules.

Dates are compared as calendar dates only. Any datetime passed in is truncated to its
date part so a time-of-day or timezone never shifts a boundary by one day.
"""
from datetime import date, datetime

from app.exceptions import InvalidPermitDate
from app.models.boarding_house import PermitStatus

NEAR_EXPIRY_DAYS = 30


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def days_until_expiry(expiry_date: date | datetime, today: date | datetime) -> int:
    """Whole days from today to expiry. Same-day expiry is 0, yesterday is -1."""
    return (_as_date(expiry_date) - _as_date(today)).days


def evaluate_permit_status(
    issue_date: date | datetime | None,
    expiry_date: date | datetime,
    today: date | datetime,
    *,
    window_days: int = NEAR_EXPIRY_DAYS,
) -> PermitStatus:
    """Classify a permit as expired, near-expiry (0..window_days left, inclusive) or valid.

    issue_date does not take part in the classification; registration-time policy
    on it lives in validate_permit_dates.
    """
    remaining = days_until_expiry(expiry_date, today)
    if remaining < 0:
        return PermitStatus.expired
    if remaining <= window_days:
        return PermitStatus.near_expiry
    return PermitStatus.valid


def can_activate(permit_status: PermitStatus | str, latitude: float | None, longitude: float | None) -> bool:
    """A listing may be active only with a valid permit and a pinned location."""
    return PermitStatus(permit_status) == PermitStatus.valid and latitude is not None and longitude is not None


def activation_blocker(permit_status: PermitStatus | str, latitude: float | None, longitude: float | None) -> str | None:
    """Reason shown to the admin when a house cannot be active, or None."""
    if latitude is None or longitude is None:
        return "Location not pinned on map"
    if PermitStatus(permit_status) != PermitStatus.valid:
        return "Permit not valid"
    return None


def parse_calendar_date(value: date | datetime | str | None, field: str = "date") -> date:
    """Accept a date, a datetime (truncated) or a YYYY-MM-DD string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            pass
    raise InvalidPermitDate(f"{field} must be a calendar date in YYYY-MM-DD format")


def validate_permit_dates(issue_date: date, expiry_date: date, today: date) -> None:
    """Registration policy: the permit must not already be expired and must be issued before it expires."""
    if expiry_date <= today:
        raise InvalidPermitDate("Permit expiry date must be in the future")
    if issue_date > expiry_date:
        raise InvalidPermitDate("Permit issue date must be before the expiry date")
