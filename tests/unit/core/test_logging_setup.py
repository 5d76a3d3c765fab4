"""Unit tests for logging configuration."""

import logging

import pytest

import laakhay.slack  # noqa: F401  (attaches the NullHandler)
from laakhay.slack.core.logging import LIBRARY_LOGGER, ExtraFieldsFormatter, configure_logging
from laakhay.slack.web import telemetry


@pytest.fixture
def library_logger():
    logger = logging.getLogger(LIBRARY_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def test_library_is_silent_by_default():
    handlers = logging.getLogger(LIBRARY_LOGGER).handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


def test_configure_logging(library_logger):
    logger = configure_logging("debug")
    assert logger is library_logger
    assert logger.level == logging.DEBUG
    stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    assert len(stream_handlers) == 1


def test_configure_logging_is_idempotent(library_logger):
    configure_logging("INFO")
    configure_logging("INFO")
    stream_handlers = [h for h in library_logger.handlers if type(h) is logging.StreamHandler]
    assert len(stream_handlers) == 1


def test_invalid_level():
    with pytest.raises(ValueError, match="Invalid log level"):
        configure_logging("LOUD")


def test_extra_fields_rendered():
    formatter = ExtraFieldsFormatter("%(message)s")
    record = logging.LogRecord("laakhay.slack.web", logging.INFO, __file__, 1, "page_fetched", (), None)
    record.api_method = "users.list"
    record.page = 2
    assert formatter.format(record) == "page_fetched api_method=users.list page=2"


def test_retry_event_is_structured(caplog):
    with caplog.at_level(logging.WARNING, logger=telemetry.logger.name):
        telemetry.log_retry_scheduled(
            label="chat.postMessage",
            attempt=1,
            max_attempts=3,
            delay=1.0,
            error_type="RateLimitedError",
            status_code=429,
        )
    record = caplog.records[-1]
    assert record.getMessage() == "retry_scheduled"
    assert record.delay_seconds == 1.0
    assert record.status_code == 429
