"""Hebrew calendar conversion backed by pyluach."""

from datetime import date

from pyluach import dates, hebrewcal

from .holidays import get_holiday
from .numerals import to_gematria
from .types import CalendarDateResult, CalendarType, CivilNative

# pyluach numbers months from Nisan (1) to Adar (12), Adar II is 13
MONTH_NAMES = {
    1: "Nisan",
    2: "Iyar",
    3: "Sivan",
    4: "Tamuz",
    5: "Av",
    6: "Elul",
    7: "Tishri",
    8: "Heshvan",
    9: "Kislev",
    10: "Tevet",
    11: "Shevat",
    12: "Adar",
    13: "Adar II",
}

MONTH_NAMES_NATIVE = {
    1: "ניסן",
    2: "אייר",
    3: "סיון",
    4: "תמוז",
    5: "אב",
    6: "אלול",
    7: "תשרי",
    8: "חשון",
    9: "כסלו",
    10: "טבת",
    11: "שבט",
    12: "אדר",
    13: "אדר ב׳",
}


def month_label(year: int, month: int) -> str:
    """Latin month label; Adar becomes Adar I in leap years."""
    if month == 12 and hebrewcal.Year(year).leap:
        return "Adar I"
    return MONTH_NAMES[month]


def month_label_native(year: int, month: int) -> str:
    if month == 12 and hebrewcal.Year(year).leap:
        return "אדר א׳"
    return MONTH_NAMES_NATIVE[month]


def convert_hebrew(day: date) -> CalendarDateResult:
    """Convert a Gregorian date to the Hebrew calendar."""
    hebrew = dates.GregorianDate(day.year, day.month, day.day).to_heb()
    label = month_label(hebrew.year, hebrew.month)
    full_date = f"{hebrew.day} {label} {hebrew.year}"

    month_native = month_label_native(hebrew.year, hebrew.month)
    year_native = to_gematria(hebrew.year, punctuate=True)
    full_date_native = (
        f"{to_gematria(hebrew.day, punctuate=True)} {month_native} {year_native}"
    )

    return CalendarDateResult(
        type=CalendarType.HEBREW,
        day=hebrew.day,
        month=label,
        year=hebrew.year,
        full_date=full_date,
        full_date_native=full_date_native,
        month_native=month_native,
        year_native=year_native,
        holiday=get_holiday(CalendarType.HEBREW, label, hebrew.day),
        native=CivilNative(year=hebrew.year, month=hebrew.month, day=hebrew.day, era="AM"),
    )
