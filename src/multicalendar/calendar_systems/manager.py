"""Calendar system manager implementation."""

import calendar
from datetime import date, timedelta
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from multicalendar.config import get_settings
from multicalendar.core.exceptions import ConfigurationError, UnsupportedCalendarError
from multicalendar.utils.logging import get_logger

from .balinese import convert_balinese
from .buddhist import convert_buddhist
from .chinese import convert_chinese
from .gregorian import convert_gregorian
from .hebrew import convert_hebrew
from .hijri import convert_hijri
from .japanese import convert_japanese
from .javanese import convert_javanese
from .korean import convert_korean
from .mayan import convert_mayan
from .persian import convert_persian
from .saka import convert_saka
from .types import (
    CalendarDateResult,
    CalendarMeta,
    CalendarType,
    GridCell,
    MonthBoundaries,
    MonthGrid,
)
from .utils import to_civil_date

logger = get_logger(__name__)

Converter = Callable[[date], CalendarDateResult]

CALENDAR_META: Mapping[CalendarType, CalendarMeta] = MappingProxyType(
    {
        CalendarType.GREGORIAN: CalendarMeta("Gregorian", "International standard"),
        CalendarType.HIJRI: CalendarMeta("Islamic (Hijri)", "Lunar calendar"),
        CalendarType.JAVANESE: CalendarMeta("Javanese", "Pasaran cycle"),
        CalendarType.CHINESE: CalendarMeta("Chinese", "Lunisolar"),
        CalendarType.SAKA: CalendarMeta("Saka", "Hindu/Indian"),
        CalendarType.BALINESE: CalendarMeta("Balinese Pawukon", "210-day cycle"),
        CalendarType.HEBREW: CalendarMeta("Hebrew", "Biblical"),
        CalendarType.PERSIAN: CalendarMeta("Persian", "Solar Hijri"),
        CalendarType.BUDDHIST: CalendarMeta("Buddhist", "BE Era"),
        CalendarType.MAYAN: CalendarMeta("Mayan", "Long Count"),
        CalendarType.JAPANESE: CalendarMeta("Japanese Era", "Imperial Eras (Reiwa)"),
        CalendarType.KOREAN: CalendarMeta("Korean (Dangi)", "Traditional Lunisolar"),
    }
)


def parse_calendar_type(value: Union[CalendarType, str]) -> CalendarType:
    """Resolve a calendar identifier, raising for unknown values."""
    try:
        return CalendarType(value)
    except ValueError:
        raise UnsupportedCalendarError(f"Unsupported calendar type: {value!r}") from None


class CalendarManager:
    """Dispatches conversions and resolves native month layouts."""

    def __init__(self) -> None:
        """Initialize calendar manager."""
        self.converters = self._init_converters()
        self._check_registry()

    def _init_converters(self) -> Dict[CalendarType, Converter]:
        """Initialize calendar converters."""
        return {
            CalendarType.HIJRI: convert_hijri,
            CalendarType.JAVANESE: convert_javanese,
            CalendarType.CHINESE: convert_chinese,
            CalendarType.SAKA: convert_saka,
            CalendarType.BALINESE: convert_balinese,
            CalendarType.HEBREW: convert_hebrew,
            CalendarType.PERSIAN: convert_persian,
            CalendarType.BUDDHIST: convert_buddhist,
            CalendarType.MAYAN: convert_mayan,
            CalendarType.JAPANESE: convert_japanese,
            CalendarType.KOREAN: convert_korean,
        }

    def _check_registry(self) -> None:
        # Gregorian is dispatched separately because it takes a locale
        covered = set(self.converters) | {CalendarType.GREGORIAN}
        missing_converters = [t.value for t in CalendarType if t not in covered]
        missing_meta = [t.value for t in CalendarType if t not in CALENDAR_META]
        if missing_converters or missing_meta:
            raise ConfigurationError(
                f"Calendar registry incomplete: converters missing for "
                f"{missing_converters}, metadata missing for {missing_meta}"
            )

    @staticmethod
    def calendar_types() -> List[CalendarType]:
        """All calendar types in registry order."""
        return list(CalendarType)

    def convert_date(
        self,
        moment: Any,
        calendar_type: Union[CalendarType, str],
        locale: Optional[str] = None,
    ) -> CalendarDateResult:
        """
        Convert an instant to a calendar system.

        Args:
            moment: ``datetime`` (naive values are UTC) or ``date``
            calendar_type: Target calendar system or its identifier
            locale: Locale tag for Gregorian month and weekday names

        Returns:
            The date rendered in the target calendar

        Raises:
            InvalidDateError: If ``moment`` is not a date or datetime
            UnsupportedCalendarError: If ``calendar_type`` is unknown
        """
        target = parse_calendar_type(calendar_type)
        day = to_civil_date(moment)

        if target == CalendarType.GREGORIAN:
            return convert_gregorian(day, locale)
        return self.converters[target](day)

    def convert_all(self, moment: Any, locale: Optional[str] = None) -> List[CalendarDateResult]:
        """Convert an instant to every calendar, in registry order."""
        return [self.convert_date(moment, t, locale) for t in self.calendar_types()]

    def get_native_month_boundaries(
        self,
        moment: Any,
        calendar_type: Union[CalendarType, str],
        locale: Optional[str] = None,
    ) -> MonthBoundaries:
        """
        Find the first and last Gregorian days of the native month containing ``moment``.

        Gregorian months are computed directly. Other calendars are scanned
        day by day in both directions while the native month label stays
        the same, up to ``boundary_scan_limit`` days each way.
        """
        target = parse_calendar_type(calendar_type)
        day = to_civil_date(moment)

        if target == CalendarType.GREGORIAN:
            last_day = calendar.monthrange(day.year, day.month)[1]
            return MonthBoundaries(start=day.replace(day=1), end=day.replace(day=last_day))

        label = self.convert_date(day, target, locale).month
        limit = get_settings().boundary_scan_limit
        start = self._scan(day, target, label, -1, limit, locale)
        end = self._scan(day, target, label, 1, limit, locale)
        return MonthBoundaries(start=start, end=end)

    def _scan(
        self,
        day: date,
        calendar_type: CalendarType,
        label: str,
        step: int,
        limit: int,
        locale: Optional[str],
    ) -> date:
        edge = day
        for _ in range(limit):
            try:
                candidate = edge + timedelta(days=step)
            except OverflowError:
                break
            if self.convert_date(candidate, calendar_type, locale).month != label:
                return edge
            edge = candidate

        logger.warning(
            "boundary_scan_limit_reached",
            calendar_type=calendar_type.value,
            date=day.isoformat(),
            direction="backward" if step < 0 else "forward",
            limit=limit,
        )
        return edge

    def get_holidays_for_date(
        self,
        moment: Any,
        calendar_types: Iterable[Union[CalendarType, str]],
    ) -> List[str]:
        """Holiday names observed on a date across calendars, in request order."""
        holidays = []
        for calendar_type in calendar_types:
            result = self.convert_date(moment, calendar_type)
            if result.holiday:
                holidays.append(result.holiday)
        return holidays

    def build_month_grid(
        self,
        moment: Any,
        calendar_types: Iterable[Union[CalendarType, str]],
        primary: Union[CalendarType, str] = CalendarType.GREGORIAN,
        locale: Optional[str] = None,
    ) -> MonthGrid:
        """
        Lay out the native month of ``primary`` that contains ``moment`` as week rows.

        Rows run Sunday to Saturday; padding days outside the month are
        included with ``in_month`` set to False.
        """
        primary_type = parse_calendar_type(primary)
        requested: List[CalendarType] = []
        for calendar_type in calendar_types:
            parsed = parse_calendar_type(calendar_type)
            if parsed not in requested:
                requested.append(parsed)

        day = to_civil_date(moment)
        boundaries = self.get_native_month_boundaries(day, primary_type, locale)

        # date.weekday() is Monday-based; shift so rows start on Sunday
        first = boundaries.start - timedelta(days=(boundaries.start.weekday() + 1) % 7)
        last = boundaries.end + timedelta(days=(5 - boundaries.end.weekday()) % 7)

        weeks: List[List[GridCell]] = []
        current = first
        while current <= last:
            conversions = {
                calendar_type: self.convert_date(current, calendar_type, locale)
                for calendar_type in requested
            }
            cell = GridCell(
                date=current,
                in_month=boundaries.start <= current <= boundaries.end,
                conversions=conversions,
                holidays=[r.holiday for r in conversions.values() if r.holiday],
            )
            if not weeks or len(weeks[-1]) == 7:
                weeks.append([])
            weeks[-1].append(cell)
            current += timedelta(days=1)

        return MonthGrid(
            primary=primary_type,
            boundaries=boundaries,
            header=self.convert_date(day, primary_type, locale),
            weeks=weeks,
        )


calendar_manager = CalendarManager()


def convert_date(
    moment: Any,
    calendar_type: Union[CalendarType, str],
    locale: Optional[str] = None,
) -> CalendarDateResult:
    """Convert an instant using the shared manager."""
    return calendar_manager.convert_date(moment, calendar_type, locale)


def get_native_month_boundaries(
    moment: Any,
    calendar_type: Union[CalendarType, str],
    locale: Optional[str] = None,
) -> MonthBoundaries:
    """Native month boundaries using the shared manager."""
    return calendar_manager.get_native_month_boundaries(moment, calendar_type, locale)


def build_month_grid(
    moment: Any,
    calendar_types: Iterable[Union[CalendarType, str]],
    primary: Union[CalendarType, str] = CalendarType.GREGORIAN,
    locale: Optional[str] = None,
) -> MonthGrid:
    """Month grid using the shared manager."""
    return calendar_manager.build_month_grid(moment, calendar_types, primary, locale)


def get_holidays_for_date(
    moment: Any, calendar_types: Iterable[Union[CalendarType, str]]
) -> List[str]:
    """Holidays for a date using the shared manager."""
    return calendar_manager.get_holidays_for_date(moment, calendar_types)
