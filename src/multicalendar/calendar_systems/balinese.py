"""Balinese Pawukon: three coupled day cycles over a 210-day year."""

from datetime import date
from typing import Tuple

from .holidays import get_holiday
from .types import CalendarDateResult, CalendarType, CycleNative
from .utils import floor_mod

WUKU = [
    "Sinta",
    "Landep",
    "Ukir",
    "Kulantir",
    "Tolu",
    "Gumbreg",
    "Wariga",
    "Warigadean",
    "Julungwangi",
    "Sungsang",
    "Dungulan",
    "Kuningan",
    "Langkir",
    "Medangsia",
    "Pujut",
    "Pahang",
    "Krulut",
    "Merakih",
    "Tambir",
    "Medangkungan",
    "Matal",
    "Uye",
    "Menail",
    "Prangbakat",
    "Bala",
    "Ugu",
    "Wayang",
    "Klawu",
    "Dukut",
    "Watugunung",
]

PANCAWARA = ["Umanis", "Paing", "Pon", "Wage", "Kliwon"]

# Redite is Sunday; each Wuku week starts on Redite
SAPTAWARA = ["Redite", "Coma", "Anggara", "Buda", "Wraspati", "Sukra", "Saniscara"]

# Galungan 2024: Buda Kliwon, Wuku Dungulan
ANCHOR_DATE = date(2024, 2, 28)
ANCHOR_SAPTAWARA = 3
ANCHOR_PANCAWARA = 4
ANCHOR_WUKU = 10


def pawukon_indices(day: date) -> Tuple[int, int, int]:
    """Return ``(saptawara, pancawara, wuku)`` indices for a date."""
    diff = (day - ANCHOR_DATE).days
    saptawara = floor_mod(ANCHOR_SAPTAWARA + diff, 7)
    pancawara = floor_mod(ANCHOR_PANCAWARA + diff, 5)
    # Count whole weeks from the Redite that opened the anchor's Wuku
    wuku = floor_mod(ANCHOR_WUKU + (diff + ANCHOR_SAPTAWARA) // 7, 30)
    return saptawara, pancawara, wuku


def convert_balinese(day: date) -> CalendarDateResult:
    """Place a Gregorian date in the Pawukon cycle."""
    saptawara_idx, pancawara_idx, wuku_idx = pawukon_indices(day)
    saptawara = SAPTAWARA[saptawara_idx]
    pancawara = PANCAWARA[pancawara_idx]
    wuku = WUKU[wuku_idx]
    full_date = f"{saptawara} {pancawara}, Wuku {wuku}"

    return CalendarDateResult(
        type=CalendarType.BALINESE,
        day=saptawara_idx + 1,
        month=wuku,
        year="Pawukon",
        full_date=full_date,
        full_date_native=full_date,
        cycle=f"{saptawara} {pancawara}",
        holiday=get_holiday(CalendarType.BALINESE, wuku, saptawara_idx + 1),
        native=CycleNative(saptawara=saptawara, pancawara=pancawara, wuku=wuku),
    )
