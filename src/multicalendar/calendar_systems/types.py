"""Calendar system types and data classes."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class CalendarType(str, Enum):
    """Supported calendar systems, in registry declaration order."""

    GREGORIAN = "gregorian"
    HIJRI = "hijri"  # Islamic, Umm al-Qura
    JAVANESE = "javanese"  # Sultan Agung calendar + Pasaran
    CHINESE = "chinese"  # Lunisolar
    SAKA = "saka"  # Indian national calendar
    BALINESE = "balinese"  # Pawukon
    HEBREW = "hebrew"
    PERSIAN = "persian"  # Solar Hijri / Jalali
    BUDDHIST = "buddhist"  # Thai Buddhist Era
    MAYAN = "mayan"  # Long Count
    JAPANESE = "japanese"  # Imperial eras
    KOREAN = "korean"  # Dangi


@dataclass(frozen=True)
class CalendarMeta:
    """Display metadata for a calendar system."""

    name: str
    description: str


@dataclass(frozen=True)
class CivilNative:
    """Numeric date parts for lunar, lunisolar and solar civil calendars."""

    year: int
    month: int
    day: int
    era: Optional[str] = None
    leap_month: bool = False

    kind = "civil"


@dataclass(frozen=True)
class CycleNative:
    """Position inside the Balinese Pawukon or the Javanese Pasaran cycles."""

    pancawara: str
    saptawara: Optional[str] = None
    wuku: Optional[str] = None
    weekday: Optional[str] = None

    kind = "cycle"


@dataclass(frozen=True)
class LongCountNative:
    """Mayan Long Count place values plus the matching Calendar Round."""

    baktun: int
    katun: int
    tun: int
    uinal: int
    kin: int
    tzolkin: str
    haab: str

    kind = "long_count"

    def total_days(self) -> int:
        return (
            self.baktun * 144000
            + self.katun * 7200
            + self.tun * 360
            + self.uinal * 20
            + self.kin
        )


NativeData = Union[CivilNative, CycleNative, LongCountNative]


@dataclass(frozen=True)
class CalendarDateResult:
    """
    A Gregorian day rendered in one calendar system.

    Attributes:
        type: Calendar system the date was converted to
        day: Native day-of-unit number (not comparable across calendars)
        month: Latin label of the native month or cycle unit
        year: Numeric year, or an era/cycle string such as "BE 2568"
        full_date: Latin rendering of the whole date
        full_date_native: Rendering in the calendar's own script
        month_native: Native-script month label
        year_native: Native-script year
        cycle: Auxiliary cycle label (Pasaran, Pawukon days, Katun...)
        holiday: Registered holiday name for this native date
        native: Typed calendar-specific parts
    """

    type: CalendarType
    day: int
    month: str
    year: Union[int, str]
    full_date: str
    full_date_native: Optional[str] = None
    month_native: Optional[str] = None
    year_native: Optional[str] = None
    cycle: Optional[str] = None
    holiday: Optional[str] = None
    native: Optional[NativeData] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the wire shape, omitting empty optional fields."""
        data: Dict[str, Any] = {
            "type": self.type.value,
            "day": self.day,
            "month": self.month,
            "year": self.year,
            "fullDate": self.full_date,
        }
        optional = {
            "fullDateNative": self.full_date_native,
            "monthNative": self.month_native,
            "yearNative": self.year_native,
            "cycle": self.cycle,
            "holiday": self.holiday,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        if self.native is not None:
            native = {
                key: value
                for key, value in self.native.__dict__.items()
                if value is not None
            }
            data["nativeData"] = {"kind": self.native.kind, **native}
        return data


@dataclass(frozen=True)
class HolidayDef:
    """A fixed holiday inside a native calendar year."""

    month: str
    day: int
    name: str


@dataclass(frozen=True)
class MonthBoundaries:
    """First and last Gregorian day of a native month."""

    start: date
    end: date

    def days(self) -> int:
        return (self.end - self.start).days + 1


@dataclass
class GridCell:
    """One Gregorian day cell of a month grid."""

    date: date
    in_month: bool
    conversions: Dict[CalendarType, CalendarDateResult] = field(default_factory=dict)
    holidays: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "inMonth": self.in_month,
            "conversions": {
                calendar_type.value: result.to_dict()
                for calendar_type, result in self.conversions.items()
            },
            "holidays": self.holidays,
        }


@dataclass
class MonthGrid:
    """Week rows (Sunday first) covering one native month of the primary calendar."""

    primary: CalendarType
    boundaries: MonthBoundaries
    header: CalendarDateResult
    weeks: List[List[GridCell]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primary": self.primary.value,
            "start": self.boundaries.start.isoformat(),
            "end": self.boundaries.end.isoformat(),
            "header": self.header.to_dict(),
            "weeks": [[cell.to_dict() for cell in week] for week in self.weeks],
        }
