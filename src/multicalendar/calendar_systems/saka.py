"""Indian national (Saka) calendar conversion."""

import calendar
from datetime import date
from typing import List, Tuple

from .holidays import get_holiday
from .numerals import NumberSystem, convert_digits
from .types import CalendarDateResult, CalendarType, CivilNative
from .utils import unavailable_result


class SakaCalendarConverter:
    """Saka era arithmetic.

    The Saka year starts on 1 Chaitra, which falls on 22 March (21 March
    in Gregorian leap years). Years are numbered from 78 CE.
    """

    INDIAN_ERA_START = 78

    MONTH_NAMES = [
        "Chaitra",
        "Vaishakha",
        "Jyaishtha",
        "Ashadha",
        "Shravana",
        "Bhadra",
        "Ashvin",
        "Kartika",
        "Agrahayana",
        "Pausha",
        "Magha",
        "Phalguna",
    ]

    MONTH_NAMES_NATIVE = [
        "चैत्र",
        "वैशाख",
        "ज्येष्ठ",
        "आषाढ़",
        "श्रावण",
        "भाद्र",
        "आश्विन",
        "कार्तिक",
        "अग्रहायण",
        "पौष",
        "माघ",
        "फाल्गुन",
    ]

    @staticmethod
    def year_start(gregorian_year: int) -> date:
        """Gregorian date of 1 Chaitra in the given Gregorian year."""
        return date(gregorian_year, 3, 21 if calendar.isleap(gregorian_year) else 22)

    @staticmethod
    def month_lengths(gregorian_year: int) -> List[int]:
        chaitra = 31 if calendar.isleap(gregorian_year) else 30
        return [chaitra] + [31] * 5 + [30] * 6

    @classmethod
    def from_gregorian(cls, day: date) -> Tuple[int, int, int]:
        """Return ``(year, month, day)`` in the Saka calendar."""
        gregorian_year = day.year
        if day < cls.year_start(gregorian_year):
            gregorian_year -= 1

        offset = (day - cls.year_start(gregorian_year)).days
        for month, length in enumerate(cls.month_lengths(gregorian_year), start=1):
            if offset < length:
                return gregorian_year - cls.INDIAN_ERA_START, month, offset + 1
            offset -= length

        raise ValueError(f"Day offset beyond Saka year for {day.isoformat()}")


def convert_saka(day: date) -> CalendarDateResult:
    """Convert a Gregorian date to the Saka calendar."""
    if day < SakaCalendarConverter.year_start(1):
        return unavailable_result(CalendarType.SAKA, day, "22 March 1 CE onwards")

    year, month, saka_day = SakaCalendarConverter.from_gregorian(day)
    label = SakaCalendarConverter.MONTH_NAMES[month - 1]
    month_native = SakaCalendarConverter.MONTH_NAMES_NATIVE[month - 1]
    year_native = convert_digits(year, NumberSystem.DEVANAGARI)

    return CalendarDateResult(
        type=CalendarType.SAKA,
        day=saka_day,
        month=label,
        year=f"Saka {year}",
        full_date=f"{saka_day} {label}, Saka {year}",
        full_date_native=(
            f"{convert_digits(saka_day, NumberSystem.DEVANAGARI)} {month_native} "
            f"शक {year_native}"
        ),
        month_native=month_native,
        year_native=year_native,
        holiday=get_holiday(CalendarType.SAKA, label, saka_day),
        native=CivilNative(year=year, month=month, day=saka_day, era="Saka"),
    )
