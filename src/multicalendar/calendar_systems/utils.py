"""Calendar utility functions."""

from datetime import date, datetime, timezone
from typing import Any

from multicalendar.core.exceptions import InvalidDateError
from multicalendar.utils.logging import get_logger

from .types import CalendarDateResult, CalendarType

logger = get_logger(__name__)

# date.toordinal() of 0001-01-01 is 1; its Julian Day Number is 1721426
ORDINAL_TO_JDN = 1721425


def floor_mod(n: int, m: int) -> int:
    """Modulo that stays in ``[0, m)`` for negative ``n``."""
    return ((n % m) + m) % m


def amod(n: int, m: int) -> int:
    """Adjusted modulo returning values in ``[1, m]``."""
    return floor_mod(n - 1, m) + 1


def to_jdn(day: date) -> int:
    """Integer Julian Day Number of a proleptic Gregorian date (noon-based)."""
    return day.toordinal() + ORDINAL_TO_JDN


def from_jdn(jdn: int) -> date:
    """Proleptic Gregorian date for an integer Julian Day Number."""
    return date.fromordinal(jdn - ORDINAL_TO_JDN)


def to_civil_date(moment: Any) -> date:
    """
    Resolve an instant to its civil date in UTC.

    Naive datetimes are taken as UTC; aware ones are converted first.
    Plain ``date`` objects are returned unchanged.
    """
    if isinstance(moment, datetime):
        if moment.tzinfo is not None and moment.utcoffset() is not None:
            moment = moment.astimezone(timezone.utc)
        return moment.date()
    if isinstance(moment, date):
        return moment
    raise InvalidDateError(f"Cannot resolve {type(moment).__name__} to a date")


def unavailable_result(
    calendar_type: CalendarType, day: date, supported: str
) -> CalendarDateResult:
    """Partial result for dates outside a calendar's supported range."""
    logger.warning(
        "date_out_of_range",
        calendar_type=calendar_type.value,
        date=day.isoformat(),
        supported=supported,
    )
    full_date = f"Unavailable ({day.isoformat()} outside {supported})"
    return CalendarDateResult(
        type=calendar_type,
        day=0,
        month="Unavailable",
        year=day.year,
        full_date=full_date,
        full_date_native=full_date,
    )

