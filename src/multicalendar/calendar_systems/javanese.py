"""Javanese calendar: Pasaran market week plus the Sultan Agung lunar year."""

from datetime import date

from .gregorian import weekday_name
from .hijri import hijri_parts
from .holidays import get_holiday
from .types import CalendarDateResult, CalendarType, CycleNative
from .utils import floor_mod

PASARAN = ["Legi", "Pahing", "Pon", "Wage", "Kliwon"]
PASARAN_NATIVE = ["ꦊꦒꦶ", "ꦥꦲꦶꦁ", "ꦥꦺꦴꦤ꧀", "ꦮꦒꦺ", "ꦏ꧀ꦭꦶꦮꦺꦴꦤ꧀"]

# Sunday first
DAYS_NATIVE = [
    "ꦄꦲꦢ꧀",
    "ꦱꦼꦤꦺꦤ꧀",
    "ꦱꦼꦭꦱ",
    "ꦉꦧꦺꦴ",
    "ꦏꦩꦶꦱ꧀",
    "ꦗꦸꦩꦸꦮꦃ",
    "ꦱꦼꦠꦸ",
]

JAVANESE_MONTHS = [
    "Sura",
    "Sapar",
    "Mulud",
    "Bakda Mulud",
    "Jumadil Awal",
    "Jumadil Akhir",
    "Rejeb",
    "Ruwah",
    "Pasa",
    "Sawal",
    "Sela",
    "Besar",
]

JAVANESE_MONTHS_NATIVE = [
    "ꦱꦸꦫ",
    "ꦱꦥꦂ",
    "ꦩꦸꦭꦸꦢ꧀",
    "ꦧꦏ꧀ꦢꦩꦸꦭꦸꦢ꧀",
    "ꦗꦸꦩꦢꦶꦭ꧀ꦄꦮꦭ꧀",
    "ꦗꦸꦩꦢꦶꦭ꧀ꦄꦑꦶꦂ",
    "ꦉꦗꦼꦧ꧀",
    "ꦫꦸꦮꦃ",
    "ꦥꦱ",
    "ꦱꦮꦭ꧀",
    "ꦱꦼꦭ",
    "ꦧꦼꦱꦂ",
]

PASARAN_ANCHOR = date(2000, 1, 1)  # Saturday Pahing
PASARAN_ANCHOR_INDEX = 1

# Sultan Agung's 1633 reform kept the Saka year count on a lunar basis
HIJRI_YEAR_OFFSET = 512


def pasaran_index(day: date) -> int:
    return floor_mod(PASARAN_ANCHOR_INDEX + (day - PASARAN_ANCHOR).days, 5)


def convert_javanese(day: date) -> CalendarDateResult:
    """Convert a Gregorian date to the Javanese calendar."""
    index = pasaran_index(day)
    pasaran = PASARAN[index]
    weekday = weekday_name(day)

    hijri_year, hijri_month, hijri_day = hijri_parts(day)
    year = hijri_year + HIJRI_YEAR_OFFSET
    month_label = JAVANESE_MONTHS[hijri_month - 1]
    month_native = JAVANESE_MONTHS_NATIVE[hijri_month - 1]
    day_native = DAYS_NATIVE[(day.weekday() + 1) % 7]

    return CalendarDateResult(
        type=CalendarType.JAVANESE,
        day=hijri_day,
        month=month_label,
        year=year,
        full_date=f"{weekday} {pasaran}, {hijri_day} {month_label} {year}",
        full_date_native=(
            f"{day_native} {PASARAN_NATIVE[index]}, {hijri_day} {month_native} {year}"
        ),
        month_native=month_native,
        cycle=pasaran,
        holiday=get_holiday(CalendarType.JAVANESE, month_label, hijri_day),
        native=CycleNative(pancawara=pasaran, weekday=weekday),
    )
