"""Persian (Solar Hijri) calendar conversion backed by jdatetime."""

from datetime import date

import jdatetime

from .holidays import get_holiday
from .numerals import NumberSystem, convert_digits
from .types import CalendarDateResult, CalendarType, CivilNative
from .utils import unavailable_result

MONTH_NAMES = [
    "Farvardin",
    "Ordibehesht",
    "Khordad",
    "Tir",
    "Mordad",
    "Shahrivar",
    "Mehr",
    "Aban",
    "Azar",
    "Dey",
    "Bahman",
    "Esfand",
]

MONTH_NAMES_NATIVE = [
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
]


def convert_persian(day: date) -> CalendarDateResult:
    """Convert a Gregorian date to the Solar Hijri calendar."""
    try:
        jalali = jdatetime.date.fromgregorian(date=day)
    except ValueError:
        # jdatetime starts at 1 AP (March 622 CE)
        return unavailable_result(CalendarType.PERSIAN, day, "1 AP onwards")

    label = MONTH_NAMES[jalali.month - 1]
    month_native = MONTH_NAMES_NATIVE[jalali.month - 1]
    year_native = convert_digits(jalali.year, NumberSystem.PERSIAN)

    return CalendarDateResult(
        type=CalendarType.PERSIAN,
        day=jalali.day,
        month=label,
        year=f"AP {jalali.year}",
        full_date=f"{label} {jalali.day}, {jalali.year} AP",
        full_date_native=(
            f"{convert_digits(jalali.day, NumberSystem.PERSIAN)} {month_native} {year_native}"
        ),
        month_native=month_native,
        year_native=year_native,
        holiday=get_holiday(CalendarType.PERSIAN, label, jalali.day),
        native=CivilNative(year=jalali.year, month=jalali.month, day=jalali.day, era="AP"),
    )
