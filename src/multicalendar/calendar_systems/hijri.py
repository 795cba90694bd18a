"""Islamic (Hijri) calendar conversion.

Umm al-Qura dates come from ``hijri_converter``. Its table covers
1343-1500 AH (1924-2077 CE); outside that window the tabular 30-year
cycle calendar is used instead.
"""

import math
from datetime import date
from typing import Tuple

from hijri_converter import Gregorian

from multicalendar.utils.logging import get_logger

from .holidays import get_holiday
from .numerals import NumberSystem, convert_digits
from .types import CalendarDateResult, CalendarType, CivilNative
from .utils import to_jdn

logger = get_logger(__name__)

HIJRI_MONTHS_EN = [
    "Muharram",
    "Safar",
    "Rabi' al-Awwal",
    "Rabi' al-Thani",
    "Jumada al-Awwal",
    "Jumada al-Thani",
    "Rajab",
    "Sha'ban",
    "Ramadan",
    "Shawwal",
    "Dhu al-Qi'dah",
    "Dhu al-Hijjah",
]

HIJRI_MONTHS_AR = [
    "محرم",
    "صفر",
    "ربيع الأول",
    "ربيع الآخر",
    "جمادى الأولى",
    "جمادى الآخرة",
    "رجب",
    "شعبان",
    "رمضان",
    "شوال",
    "ذو القعدة",
    "ذو الحجة",
]

HIJRI_ERA_SUFFIX = "هـ"


class TabularIslamicCalendar:
    """Arithmetic Islamic calendar (civil epoch, 30-year leap cycle)."""

    EPOCH_JDN = 1948440  # 1 Muharram 1 AH, Julian 622-07-16

    @staticmethod
    def to_jdn(year: int, month: int, day: int) -> int:
        return (
            day
            + math.ceil(29.5 * (month - 1))
            + (year - 1) * 354
            + (3 + 11 * year) // 30
            + TabularIslamicCalendar.EPOCH_JDN
            - 1
        )

    @staticmethod
    def from_jdn(jdn: int) -> Tuple[int, int, int]:
        year = (30 * (jdn - TabularIslamicCalendar.EPOCH_JDN) + 10646) // 10631
        first_day = TabularIslamicCalendar.to_jdn(year, 1, 1)
        month = min(12, math.ceil((jdn - (29 + first_day)) / 29.5) + 1)
        day = jdn - TabularIslamicCalendar.to_jdn(year, month, 1) + 1
        return year, month, day


def hijri_parts(day: date) -> Tuple[int, int, int]:
    """Return ``(year, month, day)`` in the Umm al-Qura calendar."""
    try:
        hijri = Gregorian(day.year, day.month, day.day).to_hijri()
        return hijri.year, hijri.month, hijri.day
    except (OverflowError, ValueError) as e:
        logger.warning(
            "hijri_out_of_range", date=day.isoformat(), fallback="tabular", error=str(e)
        )
        return TabularIslamicCalendar.from_jdn(to_jdn(day))


def convert_hijri(day: date) -> CalendarDateResult:
    """Convert a Gregorian date to the Islamic calendar."""
    year, month, hijri_day = hijri_parts(day)
    month_label = HIJRI_MONTHS_EN[month - 1]
    full_date = f"{hijri_day} {month_label} {year}"

    month_native = HIJRI_MONTHS_AR[month - 1]
    year_native = convert_digits(year, NumberSystem.ARABIC_INDIC)
    full_date_native = (
        f"{convert_digits(hijri_day, NumberSystem.ARABIC_INDIC)} "
        f"{month_native} {year_native} {HIJRI_ERA_SUFFIX}"
    )

    return CalendarDateResult(
        type=CalendarType.HIJRI,
        day=hijri_day,
        month=month_label,
        year=year,
        full_date=full_date,
        full_date_native=full_date_native,
        month_native=month_native,
        year_native=year_native,
        holiday=get_holiday(CalendarType.HIJRI, month_label, hijri_day),
        native=CivilNative(year=year, month=month, day=hijri_day, era="AH"),
    )
