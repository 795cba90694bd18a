"""Core modules for the calendar engine."""

from multicalendar.core.exceptions import (
    CalendarError,
    ConfigurationError,
    InvalidDateError,
    UnsupportedCalendarError,
)

__all__ = [
    "CalendarError",
    "ConfigurationError",
    "InvalidDateError",
    "UnsupportedCalendarError",
]
