"""Thai solar calendar counted in the Buddhist Era."""

from datetime import date

from .holidays import get_holiday
from .numerals import NumberSystem, convert_digits
from .types import CalendarDateResult, CalendarType, CivilNative

BUDDHIST_ERA_OFFSET = 543

THAI_MONTHS_LATIN = [
    "Mokkarakhom",
    "Kumphaphan",
    "Minakhom",
    "Mesayon",
    "Pruetsaphakhom",
    "Mithunayon",
    "Karakadakhom",
    "Singhakhom",
    "Kanyayon",
    "Tulakhom",
    "Pruetsajikayon",
    "Thanwakhom",
]

THAI_MONTHS = [
    "มกราคม",
    "กุมภาพันธ์",
    "มีนาคม",
    "เมษายน",
    "พฤษภาคม",
    "มิถุนายน",
    "กรกฎาคม",
    "สิงหาคม",
    "กันยายน",
    "ตุลาคม",
    "พฤศจิกายน",
    "ธันวาคม",
]


def convert_buddhist(day: date) -> CalendarDateResult:
    """Convert a Gregorian date to the Thai Buddhist Era calendar."""
    year = day.year + BUDDHIST_ERA_OFFSET
    label = THAI_MONTHS_LATIN[day.month - 1]
    month_native = THAI_MONTHS[day.month - 1]

    return CalendarDateResult(
        type=CalendarType.BUDDHIST,
        day=day.day,
        month=label,
        year=f"BE {year}",
        full_date=f"{day.day} {label} BE {year}",
        full_date_native=f"{day.day} {month_native} พ.ศ. {year}",
        month_native=month_native,
        year_native=f"พ.ศ. {convert_digits(year, NumberSystem.THAI)}",
        holiday=get_holiday(CalendarType.BUDDHIST, label, day.day),
        native=CivilNative(year=year, month=day.month, day=day.day, era="BE"),
    )
