"""Test logging helpers."""

import logging
from types import SimpleNamespace
from unittest.mock import MagicMock

from multicalendar.utils.logging import (
    RequestLogger,
    add_service_context,
    get_logger,
    render_processor,
    setup_logging,
)


def make_request(path: str = "/api/v1/convert"):
    return SimpleNamespace(
        method="GET",
        url=SimpleNamespace(path=path),
        query_params={"date": "2025-01-01"},
        client=SimpleNamespace(host="127.0.0.1"),
    )


class TestRequestLogger:
    """Test request logging."""

    def setup_method(self):
        """Set up a request logger with a captured logger."""
        self.request_logger = RequestLogger()
        self.request_logger.logger = MagicMock()

    def test_log_request(self):
        data = self.request_logger.log_request(make_request())

        assert data == {
            "method": "GET",
            "path": "/api/v1/convert",
            "query_params": {"date": "2025-01-01"},
            "client_host": "127.0.0.1",
        }

    def test_rejected_requests_are_warnings(self):
        data = self.request_logger.log_request(make_request())

        self.request_logger.log_response(data, 400, 0.0123)

        self.request_logger.logger.warning.assert_called_once()
        kwargs = self.request_logger.logger.warning.call_args.kwargs
        assert kwargs["status_code"] == 400
        assert kwargs["duration_ms"] == 12.3

    def test_completed_requests_are_info(self):
        data = self.request_logger.log_request(make_request())

        self.request_logger.log_response(data, 200, 0.001)

        self.request_logger.logger.info.assert_called_once()
        self.request_logger.logger.warning.assert_not_called()


def test_render_processor_follows_settings(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "json")

    assert type(render_processor()).__name__ == "JSONRenderer"


def test_get_logger():
    assert get_logger(__name__) is not None


def test_json_keeps_native_script(monkeypatch):
    """Native month names are written as-is, not as escapes."""
    monkeypatch.setenv("LOG_FORMAT", "json")

    rendered = render_processor()(None, "info", {"event": "converted", "month": "رمضان"})

    assert "رمضان" in rendered


def test_service_context(monkeypatch):
    monkeypatch.setenv("APP_VERSION", "2.3.4")

    event = add_service_context(None, "info", {"event": "converted"})

    assert event["service_version"] == "2.3.4"
    assert event["environment"] == "testing"


def test_setup_logging_quiets_access_log(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    setup_logging()

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
