"""Client configuration.

``ClientConfig`` is an immutable bundle of everything a web client needs
besides the transport. It can be built directly or read from the
environment:

    >>> config = ClientConfig.from_env()
    >>> client = WebClient(config=config)

Environment variables (prefix configurable, default ``SLACK_``):
    SLACK_BOT_TOKEN, SLACK_API_URL, SLACK_TIMEOUT, SLACK_MAX_ATTEMPTS
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from . import constants as c

if TYPE_CHECKING:
    from ..web.retry import RetryPolicy


@dataclass(frozen=True)
class ClientConfig:
    """Web client settings.

    Attributes:
        token: Bot or user token sent as a bearer credential
        base_url: API root, joined with method names
        timeout: Per-request timeout in seconds
        max_attempts: Attempts per call, including the first
        backoff_base: First exponential backoff interval in seconds
        backoff_multiplier: Growth factor between attempts
        backoff_max: Upper bound for a single backoff interval
        jitter: Fraction of each interval randomized (0 disables)
        user_agent_prefix: Prepended to the User-Agent header
        user_agent_suffix: Appended to the User-Agent header
        headers: Extra headers sent with every request
    """

    token: str | None = None
    base_url: str = c.BASE_URL
    timeout: float = c.DEFAULT_TIMEOUT
    max_attempts: int = c.DEFAULT_MAX_ATTEMPTS
    backoff_base: float = c.BACKOFF_BASE
    backoff_multiplier: float = c.BACKOFF_MULTIPLIER
    backoff_max: float = c.BACKOFF_MAX
    jitter: float = 0.0
    user_agent_prefix: str | None = None
    user_agent_suffix: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.backoff_base < 0 or self.backoff_max < 0:
            raise ValueError("backoff intervals must be non-negative")
        if self.backoff_multiplier < 1:
            raise ValueError("backoff_multiplier must be >= 1")
        if not 0 <= self.jitter <= 1:
            raise ValueError("jitter must be within [0, 1]")

    @classmethod
    def from_env(
        cls,
        prefix: str = "SLACK_",
        environ: Mapping[str, str] | None = None,
    ) -> ClientConfig:
        """Build a config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        def read(name: str) -> str | None:
            value = env.get(f"{prefix}{name}")
            return value if value else None

        kwargs: dict[str, object] = {}
        token = read("BOT_TOKEN") or read("TOKEN")
        if token:
            kwargs["token"] = token
        base_url = read("API_URL")
        if base_url:
            kwargs["base_url"] = base_url
        timeout = read("TIMEOUT")
        if timeout:
            kwargs["timeout"] = _parse(float, f"{prefix}TIMEOUT", timeout)
        attempts = read("MAX_ATTEMPTS")
        if attempts:
            kwargs["max_attempts"] = _parse(int, f"{prefix}MAX_ATTEMPTS", attempts)
        return cls(**kwargs)  # type: ignore[arg-type]

    def retry_policy(self) -> RetryPolicy:
        """Retry policy described by this config."""
        from ..web.retry import BackoffCalculator, RetryPolicy

        return RetryPolicy(
            max_attempts=self.max_attempts,
            backoff=BackoffCalculator(
                base=self.backoff_base,
                multiplier=self.backoff_multiplier,
                max_interval=self.backoff_max,
                jitter=self.jitter,
            ),
        )


def _parse(kind: type, name: str, raw: str):
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"{name} must be a {kind.__name__}, got {raw!r}") from None
