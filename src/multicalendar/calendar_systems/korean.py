"""Korean Dangi calendar: the Chinese lunisolar months with the Gojoseon year count."""

from datetime import date

from .chinese import SUPPORTED_YEARS, lunisolar_parts, month_label
from .holidays import get_holiday
from .types import CalendarDateResult, CalendarType, CivilNative
from .utils import unavailable_result

# Dangi 1 = 2333 BCE
DANGI_YEAR_OFFSET = 2333


def convert_korean(day: date) -> CalendarDateResult:
    """Convert a Gregorian date to the Korean Dangi calendar."""
    lunar = lunisolar_parts(day)
    if lunar is None:
        return unavailable_result(CalendarType.KOREAN, day, SUPPORTED_YEARS)

    year = lunar.year + DANGI_YEAR_OFFSET
    label = month_label(lunar.month, lunar.leap)
    month_native = f"{'윤' if lunar.leap else ''}{lunar.month}월"

    return CalendarDateResult(
        type=CalendarType.KOREAN,
        day=lunar.day,
        month=label,
        year=year,
        full_date=f"Dangi {year}, {label} {lunar.day}",
        full_date_native=f"단기 {year}년 {month_native} {lunar.day}일",
        month_native=month_native,
        year_native=f"단기 {year}년",
        holiday=get_holiday(CalendarType.KOREAN, label, lunar.day),
        native=CivilNative(
            year=year,
            month=lunar.month,
            day=lunar.day,
            era="Dangi",
            leap_month=lunar.leap,
        ),
    )
