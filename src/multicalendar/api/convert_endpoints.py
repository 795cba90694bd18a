"""Calendar conversion API endpoints.

The conversion endpoint keeps a stable wire contract: client errors
are ``{"error": message}`` with status 400, single-type responses are
``{"data": result}`` and all-type responses add a ``meta`` block.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil import parser
from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from multicalendar.api.exceptions import (
    InvalidCalendarTypeError,
    InvalidDateFormatError,
    MissingDateError,
)
from multicalendar.calendar_systems import (
    CALENDAR_META,
    CalendarType,
    calendar_manager,
    list_holidays,
)
from multicalendar.config import get_settings
from multicalendar.utils.logging import get_logger

router = APIRouter(tags=["calendars"])
logger = get_logger(__name__)

API_VERSION = "v1"

# Query parameter dependencies
query_date_dependency = Query(None, description="Date or timestamp to convert")
query_type_dependency = Query(None, description="Target calendar type")
query_locale_dependency = Query(None, description="Locale tag for Gregorian names")
query_primary_dependency = Query(None, description="Calendar whose month defines the grid")
query_types_dependency = Query(None, description="Comma-separated calendar types")

# Missing date fields resolve to the first month and day, never to today
PARSE_DEFAULT = datetime(2000, 1, 1)


def parse_date_param(value: Optional[str]) -> datetime:
    """Parse a date query parameter into an aware UTC datetime."""
    if not value:
        raise MissingDateError()
    try:
        parsed = parser.parse(value, default=PARSE_DEFAULT)
    except (parser.ParserError, ValueError, OverflowError) as e:
        logger.debug("date_parse_failed", value=value, error=str(e))
        raise InvalidDateFormatError() from e

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as e:
        raise InvalidDateFormatError() from e


def parse_type_param(value: str) -> CalendarType:
    try:
        return CalendarType(value)
    except ValueError:
        raise InvalidCalendarTypeError() from None


def to_iso_utc(moment: datetime) -> str:
    """ISO-8601 with millisecond precision and a ``Z`` suffix."""
    naive = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return naive.isoformat(timespec="milliseconds") + "Z"


def cached_response(content: Dict[str, Any]) -> JSONResponse:
    """JSON response that clients and CDNs may cache; results never change."""
    max_age = get_settings().cache_max_age
    return JSONResponse(
        content=content,
        headers={"Cache-Control": f"public, max-age={max_age}"},
    )


@router.get("/convert")
async def convert(
    date: Optional[str] = query_date_dependency,
    type: Optional[str] = query_type_dependency,  # noqa: A002
    locale: Optional[str] = query_locale_dependency,
) -> JSONResponse:
    """Convert a date to one calendar, or to every calendar when no type is given."""
    moment = parse_date_param(date)

    if type:
        calendar_type = parse_type_param(type)
        result = calendar_manager.convert_date(moment, calendar_type, locale)
        return cached_response({"data": result.to_dict()})

    results = calendar_manager.convert_all(moment, locale)
    return cached_response(
        {
            "meta": {"sourceDate": to_iso_utc(moment), "apiVersion": API_VERSION},
            "data": [result.to_dict() for result in results],
        }
    )


@router.get("/calendars")
async def calendars() -> JSONResponse:
    """List the registered calendar systems in registry order."""
    return cached_response(
        {
            "data": [
                {
                    "type": calendar_type.value,
                    "name": CALENDAR_META[calendar_type].name,
                    "description": CALENDAR_META[calendar_type].description,
                }
                for calendar_type in CalendarType
            ]
        }
    )


@router.get("/boundaries")
async def boundaries(
    date: Optional[str] = query_date_dependency,
    type: Optional[str] = query_type_dependency,  # noqa: A002
    locale: Optional[str] = query_locale_dependency,
) -> JSONResponse:
    """First and last Gregorian days of the native month containing a date."""
    moment = parse_date_param(date)
    calendar_type = parse_type_param(type or CalendarType.GREGORIAN.value)

    result = calendar_manager.get_native_month_boundaries(moment, calendar_type, locale)
    return cached_response(
        {"data": {"start": result.start.isoformat(), "end": result.end.isoformat()}}
    )


@router.get("/holidays")
async def holidays(
    type: Optional[str] = query_type_dependency,  # noqa: A002
) -> JSONResponse:
    """Fixed holidays registered for a calendar."""
    calendar_type = parse_type_param(type or "")
    return cached_response(
        {
            "data": [
                {"month": h.month, "day": h.day, "name": h.name}
                for h in list_holidays(calendar_type)
            ]
        }
    )


@router.get("/month-grid")
async def month_grid(
    date: Optional[str] = query_date_dependency,
    primary: Optional[str] = query_primary_dependency,
    types: Optional[str] = query_types_dependency,
    locale: Optional[str] = query_locale_dependency,
) -> JSONResponse:
    """Week rows for the primary calendar's month, with conversions per cell."""
    moment = parse_date_param(date)
    primary_type = parse_type_param(primary or CalendarType.GREGORIAN.value)

    requested: List[CalendarType] = [primary_type]
    if types:
        requested = [parse_type_param(t.strip()) for t in types.split(",") if t.strip()]

    grid = calendar_manager.build_month_grid(moment, requested, primary_type, locale)
    return cached_response({"data": grid.to_dict()})
