"""Calendar systems supported by the conversion engine.

Each calendar has its own converter module; :class:`CalendarManager`
dispatches to them and resolves native month boundaries and grids.
"""

from .holidays import HOLIDAY_REGISTRY, get_holiday, list_holidays
from .manager import (
    CALENDAR_META,
    CalendarManager,
    build_month_grid,
    calendar_manager,
    convert_date,
    get_holidays_for_date,
    get_native_month_boundaries,
    parse_calendar_type,
)
from .numerals import NumberSystem, to_gematria, to_native_numerals
from .types import (
    CalendarDateResult,
    CalendarMeta,
    CalendarType,
    CivilNative,
    CycleNative,
    GridCell,
    HolidayDef,
    LongCountNative,
    MonthBoundaries,
    MonthGrid,
)

__all__ = [
    "CalendarType",
    "CalendarDateResult",
    "CalendarMeta",
    "CivilNative",
    "CycleNative",
    "LongCountNative",
    "HolidayDef",
    "MonthBoundaries",
    "GridCell",
    "MonthGrid",
    "CALENDAR_META",
    "HOLIDAY_REGISTRY",
    "CalendarManager",
    "calendar_manager",
    "convert_date",
    "get_native_month_boundaries",
    "build_month_grid",
    "get_holidays_for_date",
    "parse_calendar_type",
    "get_holiday",
    "list_holidays",
    "NumberSystem",
    "to_gematria",
    "to_native_numerals",
]
