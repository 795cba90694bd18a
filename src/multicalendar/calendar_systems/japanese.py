"""Japanese imperial era (wareki) dates."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from .gregorian import month_name
from .holidays import get_holiday
from .types import CalendarDateResult, CalendarType, CivilNative
from .utils import unavailable_result


@dataclass(frozen=True)
class EraDefinition:
    """An imperial era and the Gregorian day it began."""

    name: str
    native_name: str
    start: date


# Newest first
ERA_DEFINITIONS: List[EraDefinition] = [
    EraDefinition(name="Reiwa", native_name="令和", start=date(2019, 5, 1)),
    EraDefinition(name="Heisei", native_name="平成", start=date(1989, 1, 8)),
    EraDefinition(name="Showa", native_name="昭和", start=date(1926, 12, 25)),
    EraDefinition(name="Taisho", native_name="大正", start=date(1912, 7, 30)),
    EraDefinition(name="Meiji", native_name="明治", start=date(1868, 9, 8)),
]


def era_for(day: date) -> Optional[EraDefinition]:
    for era in ERA_DEFINITIONS:
        if day >= era.start:
            return era
    return None


def native_year(era: EraDefinition, era_year: int) -> str:
    """Era year in kanji form; the first year of an era is 元年."""
    return f"{era.native_name}{'元' if era_year == 1 else era_year}年"


def convert_japanese(day: date) -> CalendarDateResult:
    """Convert a Gregorian date to its Japanese era rendering."""
    era = era_for(day)
    if era is None:
        return unavailable_result(
            CalendarType.JAPANESE, day, f"{ERA_DEFINITIONS[-1].start.isoformat()} onwards"
        )

    era_year = day.year - era.start.year + 1
    label = month_name(day.month)
    year_native = native_year(era, era_year)

    return CalendarDateResult(
        type=CalendarType.JAPANESE,
        day=day.day,
        month=label,
        year=f"{era.name} {era_year}",
        full_date=f"{label} {day.day}, {era_year} {era.name}",
        full_date_native=f"{year_native}{day.month}月{day.day}日",
        month_native=f"{day.month}月",
        year_native=year_native,
        holiday=get_holiday(CalendarType.JAPANESE, label, day.day),
        native=CivilNative(year=era_year, month=day.month, day=day.day, era=era.name),
    )
