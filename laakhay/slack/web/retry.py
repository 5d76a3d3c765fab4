"""Retry/backoff policy for API calls.

Architecture:
    ``RetryPolicy`` wraps one logical call. The decision logic (is this
    failure transient, how long to wait, are attempts exhausted) is shared;
    only the call itself and the sleep primitive differ between ``call()``
    (blocking, ``time.sleep``) and ``acall()`` (``asyncio.sleep``).

    Transient: ``TransportError``, ``ServerError`` (5xx) and
    ``RateLimitedError`` (429). Everything else is raised after one attempt.

    Wait: the server's retry-after hint when present, otherwise
    ``base * multiplier ** (attempt - 1)`` capped at ``max_interval``.

    Exhaustion: after ``max_attempts`` transient failures the last one is
    wrapped in ``RetriesExhaustedError``.

Cancellation:
    In ``acall()`` an ``asyncio.CancelledError`` raised during the call or
    the wait propagates unchanged.
"""

from __future__ import annotations

import asyncio
import random
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TypeVar

from ..core import constants as c
from ..core.exceptions import CallError, RetriesExhaustedError
from .telemetry import log_retries_exhausted, log_retry_scheduled

T = TypeVar("T")


def is_transient(error: BaseException) -> bool:
    """Whether a failure is likely to succeed on retry."""
    return isinstance(error, CallError) and error.transient


@dataclass(frozen=True)
class BackoffCalculator:
    """Exponential backoff interval calculator.

    Attributes:
        base: Interval after the first failure (seconds)
        multiplier: Growth factor per subsequent failure
        max_interval: Cap for a single interval (None disables the cap)
        jitter: Up to this fraction of the interval is added at random
    """

    base: float = c.BACKOFF_BASE
    multiplier: float = c.BACKOFF_MULTIPLIER
    max_interval: float | None = c.BACKOFF_MAX
    jitter: float = 0.0

    def __post_init__(self) -> None:
        """Validate backoff configuration."""
        if self.base < 0:
            raise ValueError("base must be non-negative")
        if self.multiplier < 1:
            raise ValueError("multiplier must be >= 1")
        if self.max_interval is not None and self.max_interval < 0:
            raise ValueError("max_interval must be non-negative")
        if not 0 <= self.jitter <= 1:
            raise ValueError("jitter must be within [0, 1]")

    def interval(self, failures: int) -> float:
        """Seconds to wait after ``failures`` consecutive failed attempts."""
        if failures <= 0:
            return 0.0
        delay = self.base * self.multiplier ** (failures - 1)
        if self.max_interval is not None:
            delay = min(delay, self.max_interval)
        if self.jitter:
            delay += delay * self.jitter * random.random()
        return delay


@dataclass
class RetryState:
    """Progress of one retried call."""

    attempt: int = 0
    waited: float = 0.0
    delays: list[float] = field(default_factory=list)
    last_error: CallError | None = None

    def record(self, error: CallError, delay: float) -> None:
        self.last_error = error
        self.delays.append(delay)
        self.waited += delay


class RetryPolicy:
    """Bounded retry of transient failures.

    Args:
        max_attempts: Total attempts including the first (default 3)
        backoff: Interval calculator used when no retry-after hint is given
        sleep: Blocking sleep used by ``call()``
        async_sleep: Awaitable sleep used by ``acall()``
    """

    def __init__(
        self,
        max_attempts: int = c.DEFAULT_MAX_ATTEMPTS,
        backoff: BackoffCalculator | None = None,
        sleep: Callable[[float], None] = time.sleep,
        async_sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.backoff = backoff or BackoffCalculator()
        self._sleep = sleep
        self._async_sleep = async_sleep

    def delay_for(self, error: CallError, failures: int) -> float:
        """Wait before the next attempt: the hint if any, else backoff."""
        hint = getattr(error, "retry_after", None)
        if hint is not None:
            return max(float(hint), 0.0)
        return self.backoff.interval(failures)

    def _next_delay(self, state: RetryState, error: CallError, label: str) -> float | None:
        """Return the wait before retrying, ``None`` to re-raise as is.

        Raises:
            RetriesExhaustedError: The failure was transient but no attempts remain
        """
        if not is_transient(error):
            state.last_error = error
            return None
        if state.attempt >= self.max_attempts:
            state.last_error = error
            log_retries_exhausted(
                label=label,
                attempts=state.attempt,
                waited=state.waited,
                error_type=type(error).__name__,
                status_code=error.status_code,
            )
            raise RetriesExhaustedError(error, state.attempt) from error
        delay = self.delay_for(error, state.attempt)
        state.record(error, delay)
        log_retry_scheduled(
            label=label,
            attempt=state.attempt,
            max_attempts=self.max_attempts,
            delay=delay,
            error_type=type(error).__name__,
            status_code=error.status_code,
        )
        return delay

    def call(self, fn: Callable[[], T], *, label: str = "call", state: RetryState | None = None) -> T:
        """Run ``fn`` until it succeeds, fails non-transiently, or attempts run out."""
        state = state if state is not None else RetryState()
        while True:
            state.attempt += 1
            try:
                return fn()
            except CallError as exc:
                delay = self._next_delay(state, exc, label)
                if delay is None:
                    raise
            self._sleep(delay)

    async def acall(
        self,
        fn: Callable[[], Awaitable[T]],
        *,
        label: str = "call",
        state: RetryState | None = None,
    ) -> T:
        """Async counterpart of ``call()``; the wait is a cancellable ``asyncio.sleep``."""
        state = state if state is not None else RetryState()
        while True:
            state.attempt += 1
            try:
                return await fn()
            except CallError as exc:
                delay = self._next_delay(state, exc, label)
                if delay is None:
                    raise
            await self._async_sleep(delay)
