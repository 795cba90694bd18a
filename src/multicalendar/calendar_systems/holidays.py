"""Fixed holidays per calendar system.

Entries use the same Latin month labels the converters emit, so a lookup
with a converted date's ``month`` and ``day`` finds them. Holidays recur
every native year.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from .types import CalendarType, HolidayDef

HOLIDAY_REGISTRY: Mapping[CalendarType, Tuple[HolidayDef, ...]] = MappingProxyType(
    {
        CalendarType.GREGORIAN: (
            HolidayDef("January", 1, "New Year's Day"),
            HolidayDef("February", 14, "Valentine's Day"),
            HolidayDef("March", 17, "St. Patrick's Day"),
            HolidayDef("May", 1, "Labor Day"),
            HolidayDef("December", 25, "Christmas Day"),
        ),
        CalendarType.HIJRI: (
            HolidayDef("Muharram", 1, "Islamic New Year"),
            HolidayDef("Muharram", 10, "Ashura"),
            HolidayDef("Rabi' al-Awwal", 12, "Mawlid al-Nabi"),
            HolidayDef("Ramadan", 1, "Start of Ramadan"),
            HolidayDef("Shawwal", 1, "Eid al-Fitr"),
            HolidayDef("Dhu al-Hijjah", 10, "Eid al-Adha"),
        ),
        CalendarType.JAVANESE: (HolidayDef("Sura", 1, "Satu Sura"),),
        CalendarType.CHINESE: (
            HolidayDef("First Month", 1, "Lunar New Year"),
            HolidayDef("First Month", 15, "Lantern Festival"),
            HolidayDef("Fifth Month", 5, "Dragon Boat Festival"),
            HolidayDef("Seventh Month", 7, "Qixi Festival"),
            HolidayDef("Eighth Month", 15, "Mid-Autumn Festival"),
            HolidayDef("Ninth Month", 9, "Double Ninth Festival"),
        ),
        CalendarType.SAKA: (HolidayDef("Chaitra", 1, "Saka New Year"),),
        CalendarType.BALINESE: (
            # day is the Saptawara position, 4 = Buda, 7 = Saniscara
            HolidayDef("Sinta", 4, "Pagerwesi"),
            HolidayDef("Dungulan", 4, "Galungan"),
            HolidayDef("Kuningan", 7, "Kuningan"),
            HolidayDef("Watugunung", 7, "Saraswati"),
        ),
        CalendarType.HEBREW: (
            HolidayDef("Tishri", 1, "Rosh Hashanah"),
            HolidayDef("Tishri", 2, "Rosh Hashanah"),
            HolidayDef("Tishri", 10, "Yom Kippur"),
            HolidayDef("Tishri", 15, "Sukkot"),
            HolidayDef("Kislev", 25, "Hanukkah"),
            HolidayDef("Nisan", 15, "Passover"),
            HolidayDef("Sivan", 6, "Shavuot"),
        ),
        CalendarType.PERSIAN: (
            HolidayDef("Farvardin", 1, "Nowruz"),
            HolidayDef("Farvardin", 13, "Sizdah Bedar"),
            HolidayDef("Azar", 30, "Yalda Night"),
        ),
        CalendarType.BUDDHIST: (
            HolidayDef("Mesayon", 13, "Songkran"),
            HolidayDef("Mesayon", 14, "Songkran"),
            HolidayDef("Mesayon", 15, "Songkran"),
        ),
        CalendarType.JAPANESE: (
            HolidayDef("January", 1, "Gantan (New Year's)"),
            HolidayDef("February", 11, "Foundation Day"),
            HolidayDef("February", 23, "Emperor's Birthday"),
            HolidayDef("April", 29, "Showa Day"),
            HolidayDef("May", 3, "Constitution Memorial Day"),
            HolidayDef("May", 4, "Greenery Day"),
            HolidayDef("May", 5, "Children's Day"),
            HolidayDef("August", 11, "Mountain Day"),
            HolidayDef("November", 3, "Culture Day"),
            HolidayDef("November", 23, "Labor Thanksgiving Day"),
        ),
        CalendarType.KOREAN: (
            HolidayDef("First Month", 1, "Seollal"),
            HolidayDef("Fifth Month", 5, "Dano"),
            HolidayDef("Eighth Month", 15, "Chuseok"),
        ),
    }
)


def get_holiday(calendar_type: CalendarType, month: str, day: int) -> Optional[str]:
    """Return the holiday registered for a native month label and day, if any."""
    entries = HOLIDAY_REGISTRY.get(CalendarType(calendar_type), ())
    wanted = month.strip().lower()
    for holiday in entries:
        if holiday.month.lower() == wanted and holiday.day == day:
            return holiday.name
    return None


def list_holidays(calendar_type: CalendarType) -> List[HolidayDef]:
    """All holidays registered for a calendar, in registry order."""
    return list(HOLIDAY_REGISTRY.get(CalendarType(calendar_type), ()))
