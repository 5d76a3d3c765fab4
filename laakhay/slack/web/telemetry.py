"""Structured logging for API calls, retries and pagination.

Every event is a fixed event name with its details in ``extra`` so log
pipelines can index them. Tokens and request bodies are never logged.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_api_call(
    *,
    api_method: str,
    http_verb: str,
    status_code: int,
    ok: bool,
    error: str | None = None,
    latency_ms: float | None = None,
) -> None:
    """Log one completed HTTP round trip.

    Args:
        api_method: API method name (e.g. ``chat.postMessage``)
        http_verb: HTTP verb used
        status_code: HTTP status code received
        ok: The payload's ``ok`` flag
        error: The payload's ``error`` code, if any
        latency_ms: Round-trip latency in milliseconds
    """
    logger.debug(
        "api_call_completed",
        extra={
            "api_method": api_method,
            "http_verb": http_verb,
            "status_code": status_code,
            "ok": ok,
            "error": error,
            "latency_ms": latency_ms,
        },
    )


def log_api_call_failed(*, api_method: str, error_type: str, error_message: str) -> None:
    """Log a transport failure (no response received)."""
    logger.warning(
        "api_call_failed",
        extra={
            "api_method": api_method,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_retry_scheduled(
    *,
    label: str,
    attempt: int,
    max_attempts: int,
    delay: float,
    error_type: str,
    status_code: int | None = None,
) -> None:
    """Log a retry decision.

    Args:
        label: What is being retried (usually the API method)
        attempt: Attempt number that just failed (1-based)
        max_attempts: Attempt budget
        delay: Seconds until the next attempt
        error_type: Exception class of the failure
        status_code: HTTP status of the failure, if any
    """
    logger.warning(
        "retry_scheduled",
        extra={
            "label": label,
            "attempt": attempt,
            "max_attempts": max_attempts,
            "delay_seconds": delay,
            "error_type": error_type,
            "status_code": status_code,
        },
    )


def log_retries_exhausted(
    *,
    label: str,
    attempts: int,
    waited: float,
    error_type: str,
    status_code: int | None = None,
) -> None:
    logger.error(
        "retries_exhausted",
        extra={
            "label": label,
            "attempts": attempts,
            "waited_seconds": waited,
            "error_type": error_type,
            "status_code": status_code,
        },
    )


def log_page_fetched(*, api_method: str, page: int, has_next: bool) -> None:
    logger.debug(
        "page_fetched",
        extra={"api_method": api_method, "page": page, "has_next": has_next},
    )


def log_pagination_complete(*, api_method: str, pages: int) -> None:
    logger.info(
        "pagination_complete",
        extra={"api_method": api_method, "pages": pages},
    )
