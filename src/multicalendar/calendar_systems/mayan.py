"""Mayan Long Count and Calendar Round, GMT correlation (584283)."""

from datetime import date

from .holidays import get_holiday
from .types import CalendarDateResult, CalendarType, LongCountNative
from .utils import amod, floor_mod, to_jdn

GMT_CORRELATION = 584283  # Goodman-Martinez-Thompson

TZOLKIN_NAMES = (
    "Imix",
    "Ik'",
    "Ak'b'al",
    "K'an",
    "Chikchan",
    "Kimi",
    "Manik'",
    "Lamat",
    "Muluk",
    "Ok",
    "Chuwen",
    "Eb",
    "B'en",
    "Ix",
    "Men",
    "K'ib",
    "Kab'an",
    "Etz'nab",
    "Kawak",
    "Ajaw",
)

HAAB_MONTHS = (
    "Pop",
    "Wo",
    "Sip",
    "Sotz'",
    "Sek",
    "Xul",
    "Yaxk'in",
    "Mol",
    "Ch'en",
    "Yax",
    "Sak",
    "Keh",
    "Mak",
    "K'ank'in",
    "Muwan",
    "Pax",
    "K'ayab",
    "Kumk'u",
    "Wayeb",
)

# Place values of baktun, katun, tun, uinal
PLACE_VALUES = (144000, 7200, 360, 20)


def long_count_from_jdn(jdn: int) -> LongCountNative:
    """
    Decompose a Julian Day Number into Long Count places.

    The creation date 0.0.0.0.0 fell on 4 Ajaw 8 Kumk'u, which anchors
    the Tzolk'in and Haab positions.
    """
    days = jdn - GMT_CORRELATION

    places = []
    remainder = days
    for value in PLACE_VALUES:
        count, remainder = divmod(remainder, value)
        places.append(count)
    baktun, katun, tun, uinal = places

    tzolkin = f"{amod(days + 4, 13)} {TZOLKIN_NAMES[amod(days + 20, 20) - 1]}"
    haab_position = floor_mod(days + 348, 365)
    haab = f"{haab_position % 20} {HAAB_MONTHS[haab_position // 20]}"

    return LongCountNative(
        baktun=baktun,
        katun=katun,
        tun=tun,
        uinal=uinal,
        kin=remainder,
        tzolkin=tzolkin,
        haab=haab,
    )


def format_long_count(long_count: LongCountNative) -> str:
    return (
        f"{long_count.baktun}.{long_count.katun}.{long_count.tun}."
        f"{long_count.uinal}.{long_count.kin}"
    )


def convert_mayan(day: date) -> CalendarDateResult:
    """Convert a Gregorian date to the Long Count."""
    long_count = long_count_from_jdn(to_jdn(day))
    rendered = format_long_count(long_count)
    month = f"Uinal {long_count.uinal}"

    return CalendarDateResult(
        type=CalendarType.MAYAN,
        day=long_count.kin,
        month=month,
        year=f"Baktun {long_count.baktun}",
        full_date=f"Long Count: {rendered}",
        full_date_native=rendered,
        cycle=f"Katun {long_count.katun}",
        holiday=get_holiday(CalendarType.MAYAN, month, long_count.kin),
        native=long_count,
    )
