from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator, Optional

from ..core.constants import REST_WEEKDAY, WEEKDAY_NAMES
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_date_or_none(value: Optional[str], field_name: str) -> Optional[date]:
    """Boundary parser: empty -> None, malformed -> ValidationError."""
    if value is None:
        return None
    if isinstance(value, date):
        return value
    value = str(value).strip()
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date, got {value!r}") from None


def to_iso(day: date) -> str:
    return day.strftime("%Y-%m-%d")


def weekday_name(day: date) -> str:
    return WEEKDAY_NAMES[day.weekday()]


def is_rest_day(day: date) -> bool:
    return day.weekday() == REST_WEEKDAY


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day in [start, end], ascending."""
    current = start
    step = timedelta(days=1)
    while current <= end:
        yield current
        current += step


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it; callers sample it once per computation.
    """
    return datetime.now().date()
