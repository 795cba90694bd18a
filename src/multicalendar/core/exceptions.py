"""Core Exceptions Module.

This module defines the exceptions raised by the calendar engine.
"""


class CalendarError(Exception):
    """Base exception for all calendar engine errors."""


class InvalidDateError(CalendarError, ValueError):
    """Raised when a value cannot be resolved to a valid Gregorian instant."""


class UnsupportedCalendarError(CalendarError, ValueError):
    """Raised when a calendar identifier is not a registered calendar type."""


class ConfigurationError(CalendarError):
    """Raised when the converter or metadata registries are inconsistent."""
