"""Custom exceptions for the conversion API.

Every client error is rendered as ``{"error": <detail>}`` by
:func:`api_exception_handler`.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse


class BaseAPIException(HTTPException):
    """Base exception for all API exceptions."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        headers: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        """Initialize base API exception."""
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code or self.__class__.__name__


class MissingDateError(BaseAPIException):
    """Raised when the date query parameter is absent or empty."""

    def __init__(self) -> None:
        """Initialize missing date error."""
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing date parameter",
            error_code="MISSING_DATE",
        )


class InvalidDateFormatError(BaseAPIException):
    """Raised when the date query parameter cannot be parsed."""

    def __init__(self) -> None:
        """Initialize invalid date format error."""
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid date format",
            error_code="INVALID_DATE_FORMAT",
        )


class InvalidCalendarTypeError(BaseAPIException):
    """Raised when a calendar type is not registered."""

    def __init__(self) -> None:
        """Initialize invalid calendar type error."""
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid calendar type",
            error_code="INVALID_CALENDAR_TYPE",
        )


async def api_exception_handler(request: Request, exc: BaseAPIException) -> JSONResponse:
    """Render API exceptions with the ``{"error": detail}`` body."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )
