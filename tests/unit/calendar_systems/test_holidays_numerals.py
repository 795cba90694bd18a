"""Tests for the holiday registry and numeral helpers."""

import pytest

from multicalendar.calendar_systems import (
    HOLIDAY_REGISTRY,
    CalendarType,
    get_holiday,
    list_holidays,
    to_gematria,
    to_native_numerals,
)
from multicalendar.calendar_systems import (
    balinese,
    buddhist,
    chinese,
    gregorian,
    hebrew,
    hijri,
    javanese,
    persian,
    saka,
)

EMITTED_MONTH_LABELS = {
    CalendarType.GREGORIAN: gregorian.MONTH_NAMES["en"],
    CalendarType.JAPANESE: gregorian.MONTH_NAMES["en"],
    CalendarType.HIJRI: hijri.HIJRI_MONTHS_EN,
    CalendarType.JAVANESE: javanese.JAVANESE_MONTHS,
    CalendarType.CHINESE: [chinese.month_label(m) for m in range(1, 13)],
    CalendarType.KOREAN: [chinese.month_label(m) for m in range(1, 13)],
    CalendarType.SAKA: saka.SakaCalendarConverter.MONTH_NAMES,
    CalendarType.BALINESE: balinese.WUKU,
    CalendarType.HEBREW: list(hebrew.MONTH_NAMES.values()) + ["Adar I"],
    CalendarType.PERSIAN: persian.MONTH_NAMES,
    CalendarType.BUDDHIST: buddhist.THAI_MONTHS_LATIN,
}


class TestHolidayRegistry:
    """Test holiday lookup."""

    def test_case_insensitive(self):
        """Month labels match regardless of case and surrounding spaces."""
        assert get_holiday(CalendarType.HIJRI, "shawwal", 1) == "Eid al-Fitr"
        assert get_holiday(CalendarType.HIJRI, "Shawwal", 1) == "Eid al-Fitr"
        assert get_holiday(CalendarType.HIJRI, "  SHAWWAL ", 1) == "Eid al-Fitr"

    def test_string_calendar_type(self):
        assert get_holiday("gregorian", "December", 25) == "Christmas Day"

    def test_miss_returns_none(self):
        assert get_holiday(CalendarType.GREGORIAN, "December", 24) is None
        assert get_holiday(CalendarType.MAYAN, "Uinal 0", 0) is None

    def test_list_holidays(self):
        assert len(list_holidays(CalendarType.GREGORIAN)) == 5
        assert list_holidays(CalendarType.MAYAN) == []

    def test_registry_is_immutable(self):
        with pytest.raises(TypeError):
            HOLIDAY_REGISTRY[CalendarType.MAYAN] = ()  # type: ignore[index]

    @pytest.mark.parametrize("calendar_type", list(EMITTED_MONTH_LABELS))
    def test_labels_match_converters(self, calendar_type):
        """Every registry month is a label the converter emits."""
        labels = set(EMITTED_MONTH_LABELS[calendar_type])
        for holiday in list_holidays(calendar_type):
            assert holiday.month in labels, holiday

    def test_short_lists(self):
        for entries in HOLIDAY_REGISTRY.values():
            assert len(entries) < 15


class TestNumerals:
    """Test native numeral rendering."""

    def test_arabic_indic(self):
        assert to_native_numerals(1446, CalendarType.HIJRI) == "١٤٤٦"

    def test_persian(self):
        assert to_native_numerals(1404, CalendarType.PERSIAN) == "۱۴۰۴"

    def test_hebrew_days(self):
        assert to_native_numerals(1, CalendarType.HEBREW) == "א"
        assert to_native_numerals(15, CalendarType.HEBREW) == "טו"
        assert to_native_numerals(16, CalendarType.HEBREW) == "טז"
        assert to_native_numerals(31, CalendarType.HEBREW) == "לא"

    def test_other_calendars_use_ascii(self):
        assert to_native_numerals(42, CalendarType.GREGORIAN) == "42"
        assert to_native_numerals(2568, "buddhist") == "2568"

    def test_gematria_years(self):
        assert to_gematria(5786) == "ה׳תשפו"
        assert to_gematria(5786, punctuate=True) == "ה׳תשפ״ו"
        assert to_gematria(5, punctuate=True) == "ה׳"
