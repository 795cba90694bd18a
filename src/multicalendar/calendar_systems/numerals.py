"""Numeral systems used by the native-script renderings."""

from enum import Enum
from typing import Dict, List, Tuple, Union

from .types import CalendarType


class NumberSystem(str, Enum):
    """Digit systems used for native renderings."""

    WESTERN = "western"  # 0123456789
    ARABIC_INDIC = "arabic_indic"  # ٠١٢٣٤٥٦٧٨٩
    PERSIAN = "persian"  # ۰۱۲۳۴۵۶۷۸۹
    DEVANAGARI = "devanagari"  # ०१२३४५६७८९
    THAI = "thai"  # ๐๑๒๓๔๕๖๗๘๙
    HEBREW = "hebrew"  # gematria letters


DIGIT_MAPS: Dict[NumberSystem, str] = {
    NumberSystem.WESTERN: "0123456789",
    NumberSystem.ARABIC_INDIC: "٠١٢٣٤٥٦٧٨٩",
    NumberSystem.PERSIAN: "۰۱۲۳۴۵۶۷۸۹",
    NumberSystem.DEVANAGARI: "०१२३४५६७८९",
    NumberSystem.THAI: "๐๑๒๓๔๕๖๗๘๙",
}

CALENDAR_NUMBER_SYSTEMS: Dict[CalendarType, NumberSystem] = {
    CalendarType.HIJRI: NumberSystem.ARABIC_INDIC,
    CalendarType.PERSIAN: NumberSystem.PERSIAN,
    CalendarType.HEBREW: NumberSystem.HEBREW,
}

GEMATRIA_VALUES: List[Tuple[int, str]] = [
    (400, "ת"),
    (300, "ש"),
    (200, "ר"),
    (100, "ק"),
    (90, "צ"),
    (80, "פ"),
    (70, "ע"),
    (60, "ס"),
    (50, "נ"),
    (40, "מ"),
    (30, "ל"),
    (20, "כ"),
    (10, "י"),
    (9, "ט"),
    (8, "ח"),
    (7, "ז"),
    (6, "ו"),
    (5, "ה"),
    (4, "ד"),
    (3, "ג"),
    (2, "ב"),
    (1, "א"),
]

GERESH = "׳"
GERSHAYIM = "״"


def convert_digits(value: Union[int, str], system: NumberSystem) -> str:
    """Replace ASCII digits in ``value`` with the digits of ``system``."""
    text = str(value)
    if system in (NumberSystem.WESTERN, NumberSystem.HEBREW):
        return text
    digits = DIGIT_MAPS[system]
    return "".join(digits[int(ch)] if ch.isdigit() else ch for ch in text)


def _gematria_hundreds(number: int) -> str:
    letters = []
    remaining = number
    for value, letter in GEMATRIA_VALUES:
        while remaining >= value:
            letters.append(letter)
            remaining -= value
    result = "".join(letters)
    # 15 and 16 avoid spelling the divine name
    return result.replace("יה", "טו").replace("יו", "טז")


def to_gematria(number: int, punctuate: bool = False) -> str:
    """
    Render a positive integer in Hebrew gematria.

    Thousands are written as a single leading letter (5786 -> ה'תשפו).
    With ``punctuate`` a geresh marks single letters and a gershayim is
    placed before the last letter of longer groups, as in printed dates.
    """
    if number <= 0:
        return str(number)

    thousands, rest = divmod(number, 1000)
    body = _gematria_hundreds(rest)
    if punctuate and body:
        if len(body) == 1:
            body += GERESH
        else:
            body = body[:-1] + GERSHAYIM + body[-1]
    if thousands:
        return _gematria_hundreds(thousands) + GERESH + body
    return body


def to_native_numerals(number: int, calendar_type: CalendarType) -> str:
    """Format a number the way the calendar writes it natively."""
    system = CALENDAR_NUMBER_SYSTEMS.get(CalendarType(calendar_type), NumberSystem.WESTERN)
    if system == NumberSystem.HEBREW:
        return to_gematria(number)
    return convert_digits(number, system)
