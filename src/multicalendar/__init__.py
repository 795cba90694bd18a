"""Multi-calendar date conversion engine.

Converts Gregorian instants into twelve calendar systems (lunar, lunisolar,
solar and cycle-based), with native-script rendering, holiday lookup and
native month boundaries for calendar grids.
"""

__version__ = "1.0.0"

from multicalendar.calendar_systems import (
    CALENDAR_META,
    CalendarDateResult,
    CalendarManager,
    CalendarType,
    convert_date,
    get_holiday,
    get_native_month_boundaries,
    to_native_numerals,
)

__all__ = [
    "__version__",
    "CALENDAR_META",
    "CalendarDateResult",
    "CalendarManager",
    "CalendarType",
    "convert_date",
    "get_holiday",
    "get_native_month_boundaries",
    "to_native_numerals",
]
