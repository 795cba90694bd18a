"""Tests for the library-backed civil calendar converters."""

from datetime import date

from multicalendar.calendar_systems import CalendarType, CivilNative
from multicalendar.calendar_systems.buddhist import convert_buddhist
from multicalendar.calendar_systems.chinese import (
    convert_chinese,
    lunisolar_parts,
    sexagenary_year,
)
from multicalendar.calendar_systems.gregorian import convert_gregorian, resolve_locale
from multicalendar.calendar_systems.hebrew import convert_hebrew
from multicalendar.calendar_systems.hijri import (
    TabularIslamicCalendar,
    convert_hijri,
    hijri_parts,
)
from multicalendar.calendar_systems.japanese import convert_japanese
from multicalendar.calendar_systems.korean import convert_korean
from multicalendar.calendar_systems.persian import convert_persian
from multicalendar.calendar_systems.saka import SakaCalendarConverter, convert_saka
from multicalendar.calendar_systems.utils import to_jdn


class TestGregorian:
    """Test Gregorian rendering and localization."""

    def test_christmas(self, christmas_2025):
        """Christmas 2025 carries its holiday."""
        result = convert_gregorian(christmas_2025)

        assert result.day == 25
        assert result.month == "December"
        assert result.year == 2025
        assert result.holiday == "Christmas Day"
        assert result.full_date == "Thursday, 25 December 2025"

    def test_localized_month_keeps_holiday(self, christmas_2025):
        """Holiday lookup uses English labels whatever the display locale."""
        result = convert_gregorian(christmas_2025, "id-ID")

        assert result.month == "Desember"
        assert result.full_date == "Kamis, 25 Desember 2025"
        assert result.holiday == "Christmas Day"

    def test_locale_resolution(self):
        """Region subtags are dropped and unknown languages fall back."""
        assert resolve_locale("en-US") == "en"
        assert resolve_locale("zh_CN") == "zh"
        assert resolve_locale("xx") == "en"
        assert resolve_locale(None) == "en"

    def test_default_locale_setting(self, monkeypatch):
        """The configured default locale applies when none is given."""
        monkeypatch.setenv("DEFAULT_LOCALE", "ja")

        result = convert_gregorian(date(2025, 12, 25))

        assert result.month == "12月"


class TestHijri:
    """Test Islamic calendar conversion."""

    def test_islamic_new_year(self):
        """1 Muharram 1446 fell on 7 July 2024."""
        result = convert_hijri(date(2024, 7, 7))

        assert result.type == CalendarType.HIJRI
        assert (result.day, result.month, result.year) == (1, "Muharram", 1446)
        assert result.holiday == "Islamic New Year"
        assert result.year_native == "١٤٤٦"
        assert result.month_native == "محرم"
        assert result.full_date_native.endswith("هـ")

    def test_eid_al_adha(self):
        """Registry labels match the emitted month labels."""
        result = convert_hijri(date(2024, 6, 16))

        assert result.month == "Dhu al-Hijjah"
        assert result.holiday == "Eid al-Adha"

    def test_tabular_epoch(self):
        """The tabular calendar starts at 1 Muharram 1 AH."""
        assert TabularIslamicCalendar.from_jdn(TabularIslamicCalendar.EPOCH_JDN) == (1, 1, 1)

    def test_tabular_round_trip(self):
        """Tabular dates convert back to the same day number."""
        for jdn in range(2451545, 2451545 + 400, 7):
            year, month, day = TabularIslamicCalendar.from_jdn(jdn)
            assert 1 <= month <= 12
            assert 1 <= day <= 30
            assert TabularIslamicCalendar.to_jdn(year, month, day) == jdn

    def test_out_of_range_falls_back(self):
        """Dates outside the Umm al-Qura table still convert."""
        year, month, day = hijri_parts(date(1800, 1, 1))
        assert 1210 <= year <= 1220

        result = convert_hijri(date(1800, 1, 1))
        assert result.year == year
        assert result.native == CivilNative(year=year, month=month, day=day, era="AH")


class TestChineseAndKorean:
    """Test the lunisolar converters."""

    def test_lunar_new_year(self):
        """10 February 2024 opened the year of the Dragon."""
        result = convert_chinese(date(2024, 2, 10))

        assert (result.day, result.month, result.year) == (1, "First Month", 2024)
        assert result.cycle == "jia-chen"
        assert result.holiday == "Lunar New Year"
        assert result.full_date_native == "2024甲辰年正月初一"

    def test_leap_month(self):
        """2023 had a leap second month."""
        result = convert_chinese(date(2023, 4, 1))

        assert result.month == "Leap Second Month"
        assert result.native.leap_month is True
        assert result.holiday is None

    def test_sexagenary_year(self):
        assert sexagenary_year(1984) == "jia-zi"
        assert sexagenary_year(2025) == "yi-si"

    def test_korean_offset(self):
        """Dangi years run 2333 ahead of the lunisolar related year."""
        for day in (date(2024, 2, 9), date(2024, 2, 10), date(2025, 10, 6)):
            assert convert_korean(day).year == lunisolar_parts(day).year + 2333

    def test_seollal(self):
        result = convert_korean(date(2024, 2, 10))

        assert result.year == 4357
        assert result.full_date == "Dangi 4357, First Month 1"
        assert result.holiday == "Seollal"

    def test_out_of_range(self):
        """Dates beyond the lunisolar tables degrade to a partial result."""
        result = convert_chinese(date(1800, 1, 1))

        assert result.month == "Unavailable"
        assert result.day == 0
        assert result.full_date == result.full_date_native


class TestSaka:
    """Test Indian national calendar arithmetic."""

    def test_new_year(self):
        result = convert_saka(date(2025, 3, 22))

        assert (result.day, result.month, result.year) == (1, "Chaitra", "Saka 1947")
        assert result.holiday == "Saka New Year"

    def test_leap_year_start(self):
        """Chaitra starts on 21 March in Gregorian leap years."""
        assert SakaCalendarConverter.from_gregorian(date(2024, 3, 21)) == (1946, 1, 1)
        assert SakaCalendarConverter.from_gregorian(date(2025, 3, 21)) == (1946, 12, 30)

    def test_january(self):
        assert SakaCalendarConverter.from_gregorian(date(2025, 1, 1)) == (1946, 10, 11)

    def test_before_first_year(self):
        """Dates before 1 Chaitra of 1 CE have no Saka year."""
        result = convert_saka(date(1, 2, 1))

        assert (result.day, result.month, result.year) == (0, "Unavailable", 1)
        assert result.native is None

    def test_first_year_start(self):
        result = convert_saka(date(1, 3, 22))

        assert result.month == "Chaitra"
        assert result.day == 1


class TestHebrew:
    """Test Hebrew calendar conversion."""

    def test_rosh_hashanah(self):
        result = convert_hebrew(date(2025, 9, 23))

        assert (result.day, result.month, result.year) == (1, "Tishri", 5786)
        assert result.holiday == "Rosh Hashanah"
        assert result.year_native == "ה׳תשפ״ו"
        assert result.full_date_native == "א׳ תשרי ה׳תשפ״ו"

    def test_adar_labels(self):
        """Leap years split Adar into Adar I and Adar II."""
        assert convert_hebrew(date(2024, 2, 20)).month == "Adar I"
        assert convert_hebrew(date(2024, 3, 24)).month == "Adar II"
        assert convert_hebrew(date(2025, 3, 14)).month == "Adar"


class TestPersianBuddhistJapanese:
    """Test the solar civil calendars."""

    def test_nowruz(self):
        result = convert_persian(date(2025, 3, 21))

        assert (result.day, result.month, result.year) == (1, "Farvardin", "AP 1404")
        assert result.year_native == "۱۴۰۴"
        assert result.holiday == "Nowruz"

    def test_buddhist_era(self):
        result = convert_buddhist(date(2025, 4, 13))

        assert result.year == "BE 2568"
        assert result.month == "Mesayon"
        assert result.holiday == "Songkran"

    def test_reiwa(self, christmas_2025):
        result = convert_japanese(christmas_2025)

        assert result.year == "Reiwa 7"
        assert result.full_date == "December 25, 7 Reiwa"
        assert result.full_date_native == "令和7年12月25日"

    def test_first_era_year(self):
        """The first year of an era is written 元年."""
        assert convert_japanese(date(2019, 5, 1)).full_date_native == "令和元年5月1日"
        assert convert_japanese(date(2019, 4, 30)).year == "Heisei 31"

    def test_before_meiji(self):
        assert convert_japanese(date(1800, 1, 1)).month == "Unavailable"


def test_julian_day_number():
    """Integer JDN of 1 January 2000 is 2451545."""
    assert to_jdn(date(2000, 1, 1)) == 2451545
