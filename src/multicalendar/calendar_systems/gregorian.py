"""Gregorian calendar rendering with localized month and weekday names."""

from datetime import date
from typing import Dict, List, Optional

from multicalendar.config import get_settings
from multicalendar.utils.logging import get_logger

from .holidays import get_holiday
from .types import CalendarDateResult, CalendarType, CivilNative

logger = get_logger(__name__)

# Weekday lists start on Monday to line up with date.weekday()
MONTH_NAMES: Dict[str, List[str]] = {
    "en": [
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ],
    "zh": [f"{n}月" for n in range(1, 13)],
    "ja": [f"{n}月" for n in range(1, 13)],
    "ko": [f"{n}월" for n in range(1, 13)],
    "id": [
        "Januari",
        "Februari",
        "Maret",
        "April",
        "Mei",
        "Juni",
        "Juli",
        "Agustus",
        "September",
        "Oktober",
        "November",
        "Desember",
    ],
    "ar": [
        "يناير",
        "فبراير",
        "مارس",
        "أبريل",
        "مايو",
        "يونيو",
        "يوليو",
        "أغسطس",
        "سبتمبر",
        "أكتوبر",
        "نوفمبر",
        "ديسمبر",
    ],
    "fa": [
        "ژانویه",
        "فوریه",
        "مارس",
        "آوریل",
        "مه",
        "ژوئن",
        "ژوئیه",
        "اوت",
        "سپتامبر",
        "اکتبر",
        "نوامبر",
        "دسامبر",
    ],
    "he": [
        "ינואר",
        "פברואר",
        "מרץ",
        "אפריל",
        "מאי",
        "יוני",
        "יולי",
        "אוגוסט",
        "ספטמבר",
        "אוקטובר",
        "נובמבר",
        "דצמבר",
    ],
    "th": [
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
    ],
}

DAY_NAMES: Dict[str, List[str]] = {
    "en": [
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
        "Sunday",
    ],
    "zh": ["星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期日"],
    "ja": ["月曜日", "火曜日", "水曜日", "木曜日", "金曜日", "土曜日", "日曜日"],
    "ko": ["월요일", "화요일", "수요일", "목요일", "금요일", "토요일", "일요일"],
    "id": ["Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu"],
    "ar": ["الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت", "الأحد"],
    "fa": ["دوشنبه", "سه‌شنبه", "چهارشنبه", "پنجشنبه", "جمعه", "شنبه", "یکشنبه"],
    "he": ["יום שני", "יום שלישי", "יום רביעי", "יום חמישי", "יום שישי", "שבת", "יום ראשון"],
    "th": ["วันจันทร์", "วันอังคาร", "วันพุธ", "วันพฤหัสบดี", "วันศุกร์", "วันเสาร์", "วันอาทิตย์"],
}

SUPPORTED_LOCALES = tuple(MONTH_NAMES)


def resolve_locale(locale: Optional[str]) -> str:
    """
    Map a locale tag to one of the supported language codes.

    Region subtags are dropped ("en-US" -> "en"). Unknown languages fall
    back to the configured default locale, then to English.
    """
    if not locale:
        locale = get_settings().default_locale
    language = locale.replace("_", "-").split("-")[0].lower()
    if language in MONTH_NAMES:
        return language

    logger.warning("unsupported_locale", locale=locale)
    default = get_settings().default_locale.split("-")[0].lower()
    return default if default in MONTH_NAMES else "en"


def month_name(month: int, locale: str = "en") -> str:
    return MONTH_NAMES[locale][month - 1]


def weekday_name(day: date, locale: str = "en") -> str:
    return DAY_NAMES[locale][day.weekday()]


def format_full_date(day: date, locale: str = "en") -> str:
    """Render ``EEEE, d MMMM yyyy`` in the given supported locale."""
    return f"{weekday_name(day, locale)}, {day.day} {month_name(day.month, locale)} {day.year}"


def convert_gregorian(day: date, locale: Optional[str] = None) -> CalendarDateResult:
    """Render a Gregorian date, localizing the month label and full date."""
    language = resolve_locale(locale)
    full_date = format_full_date(day, language)

    return CalendarDateResult(
        type=CalendarType.GREGORIAN,
        day=day.day,
        month=month_name(day.month, language),
        year=day.year,
        full_date=full_date,
        full_date_native=full_date,
        # Registry labels are English whatever the display locale
        holiday=get_holiday(CalendarType.GREGORIAN, month_name(day.month), day.day),
        native=CivilNative(year=day.year, month=day.month, day=day.day),
    )
