"""Chinese lunisolar calendar conversion.

Lunar dates come from ``zhdate``, whose tables cover lunar years 1900-2100.
The Korean Dangi calendar reuses :func:`lunisolar_parts`.
"""

from datetime import date, datetime
from typing import NamedTuple, Optional

from zhdate import ZhDate

from multicalendar.utils.logging import get_logger

from .holidays import get_holiday
from .types import CalendarDateResult, CalendarType, CivilNative
from .utils import unavailable_result

logger = get_logger(__name__)

SUPPORTED_RANGE = (date(1900, 1, 31), date(2100, 12, 31))
SUPPORTED_YEARS = "1900-2100"

MONTH_ORDINALS = [
    "First",
    "Second",
    "Third",
    "Fourth",
    "Fifth",
    "Sixth",
    "Seventh",
    "Eighth",
    "Ninth",
    "Tenth",
    "Eleventh",
    "Twelfth",
]

HEAVENLY_STEMS = ["jia", "yi", "bing", "ding", "wu", "ji", "geng", "xin", "ren", "gui"]
EARTHLY_BRANCHES = [
    "zi",
    "chou",
    "yin",
    "mao",
    "chen",
    "si",
    "wu",
    "wei",
    "shen",
    "you",
    "xu",
    "hai",
]
HEAVENLY_STEMS_ZH = "甲乙丙丁戊己庚辛壬癸"
EARTHLY_BRANCHES_ZH = "子丑寅卯辰巳午未申酉戌亥"

MONTHS_ZH = ["正", "二", "三", "四", "五", "六", "七", "八", "九", "十", "冬", "腊"]
DIGITS_ZH = "一二三四五六七八九十"


class LunarDate(NamedTuple):
    year: int  # related Gregorian year
    month: int
    day: int
    leap: bool


def lunisolar_parts(day: date) -> Optional[LunarDate]:
    """Return the lunisolar date, or ``None`` outside the supported tables."""
    if not SUPPORTED_RANGE[0] <= day <= SUPPORTED_RANGE[1]:
        return None
    try:
        lunar = ZhDate.from_datetime(datetime(day.year, day.month, day.day))
    except (IndexError, ValueError) as e:
        logger.warning("lunisolar_conversion_failed", date=day.isoformat(), error=str(e))
        return None
    return LunarDate(lunar.lunar_year, lunar.lunar_month, lunar.lunar_day, lunar.leap_month)


def month_label(month: int, leap: bool = False) -> str:
    """Latin month label, e.g. ``"First Month"`` or ``"Leap Fourth Month"``."""
    label = f"{MONTH_ORDINALS[month - 1]} Month"
    return f"Leap {label}" if leap else label


def sexagenary_year(year: int) -> str:
    """Stem-branch name of a lunisolar year, e.g. 2024 -> ``"jia-chen"``."""
    return f"{HEAVENLY_STEMS[(year - 4) % 10]}-{EARTHLY_BRANCHES[(year - 4) % 12]}"


def sexagenary_year_zh(year: int) -> str:
    return HEAVENLY_STEMS_ZH[(year - 4) % 10] + EARTHLY_BRANCHES_ZH[(year - 4) % 12]


def day_name_zh(day: int) -> str:
    """Traditional day numbering: 初一 ... 初十, 十一 ... 二十, 廿一 ... 三十."""
    if day <= 10:
        return "初" + DIGITS_ZH[day - 1]
    if day < 20:
        return "十" + DIGITS_ZH[day - 11]
    if day == 20:
        return "二十"
    if day < 30:
        return "廿" + DIGITS_ZH[day - 21]
    return "三十"


def month_name_zh(month: int, leap: bool = False) -> str:
    return ("闰" if leap else "") + MONTHS_ZH[month - 1] + "月"


def convert_chinese(day: date) -> CalendarDateResult:
    """Convert a Gregorian date to the Chinese lunisolar calendar."""
    lunar = lunisolar_parts(day)
    if lunar is None:
        return unavailable_result(CalendarType.CHINESE, day, SUPPORTED_YEARS)

    label = month_label(lunar.month, lunar.leap)
    cycle = sexagenary_year(lunar.year)
    full_date = f"{label} {lunar.day}, {lunar.year} ({cycle})"

    month_native = month_name_zh(lunar.month, lunar.leap)
    year_native = f"{sexagenary_year_zh(lunar.year)}年"
    full_date_native = f"{lunar.year}{year_native}{month_native}{day_name_zh(lunar.day)}"

    return CalendarDateResult(
        type=CalendarType.CHINESE,
        day=lunar.day,
        month=label,
        year=lunar.year,
        full_date=full_date,
        full_date_native=full_date_native,
        month_native=month_native,
        year_native=year_native,
        cycle=cycle,
        holiday=get_holiday(CalendarType.CHINESE, label, lunar.day),
        native=CivilNative(
            year=lunar.year, month=lunar.month, day=lunar.day, leap_month=lunar.leap
        ),
    )
