"""Structured logging for the multi-calendar service.

Converters log range fallbacks as warnings with the calendar and date
attached; the API logs one event per request. Native month names and
numerals (Arabic, Hebrew, Devanagari, CJK) are rendered unescaped.
"""

import logging
import sys
from typing import Any, Dict, List

import structlog
from structlog.stdlib import BoundLogger, LoggerFactory
from structlog.types import EventDict, Processor, WrappedLogger

from multicalendar.config import get_settings

# Requests are already logged by the API middleware
QUIET_LOGGERS = ("uvicorn.access",)


def add_service_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every event with the service version and environment."""
    settings = get_settings()
    event_dict.setdefault("service_version", settings.app_version)
    event_dict.setdefault("environment", settings.environment)
    return event_dict


def shared_processors() -> List[Processor]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def setup_logging() -> None:
    """Route structlog through stdlib logging at the configured level."""
    settings = get_settings()
    level = getattr(logging, settings.log_level)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[*shared_processors(), render_processor()],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )


def render_processor() -> Processor:
    """JSON lines for log shippers, colored console output on a terminal."""
    if get_settings().log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def get_logger(name: str) -> BoundLogger:
    """Get a configured logger instance."""
    bound_logger: BoundLogger = structlog.get_logger(name)
    return bound_logger


class RequestLogger:
    """Logs HTTP requests and their outcome."""

    def __init__(self) -> None:
        """Initialize request logger."""
        self.logger = get_logger(__name__)

    def log_request(self, request: Any) -> Dict[str, Any]:
        """Log incoming request details."""
        request_data = {
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client_host": request.client.host if request.client else None,
        }

        self.logger.debug("request_received", **request_data)
        return request_data

    def log_response(
        self, request_data: Dict[str, Any], status_code: int, duration: float
    ) -> None:
        """Log response details."""
        response_data = {
            **request_data,
            "status_code": status_code,
            "duration_ms": round(duration * 1000, 2),
        }

        if status_code >= 400:
            self.logger.warning("request_rejected", **response_data)
        else:
            self.logger.info("request_completed", **response_data)


request_logger = RequestLogger()
