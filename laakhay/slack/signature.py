"""Request signature verification for events, interactions and slash commands.

Slack signs each request with ``v0=`` + hex HMAC-SHA256 of
``v0:{timestamp}:{raw body}`` keyed by the app's signing secret. Requests
older than five minutes are rejected to limit replay.
"""

from __future__ import annotations

import hashlib
import hmac
import time
from collections.abc import Callable, Mapping

from .core import constants as c
from .core.exceptions import SignatureVerificationError


class SignatureVerifier:
    """Verify ``x-slack-signature`` headers.

    Args:
        signing_secret: The app's signing secret
        clock: Returns the current Unix time; injectable for tests
    """

    def __init__(self, signing_secret: str, clock: Callable[[], float] = time.time) -> None:
        if not signing_secret:
            raise ValueError("signing_secret must not be empty")
        self.signing_secret = signing_secret
        self.clock = clock

    def generate_signature(self, *, timestamp: str, body: str | bytes) -> str:
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        base = f"{c.SIGNATURE_VERSION}:{timestamp}:{body}"
        digest = hmac.new(self.signing_secret.encode("utf-8"), base.encode("utf-8"), hashlib.sha256)
        return f"{c.SIGNATURE_PREFIX}{digest.hexdigest()}"

    def is_valid(self, body: str | bytes, timestamp: str | None, signature: str | None) -> bool:
        """Whether ``signature`` matches ``body`` and ``timestamp`` is fresh."""
        if not timestamp or not signature:
            return False
        try:
            sent_at = int(timestamp)
        except ValueError:
            return False
        if abs(self.clock() - sent_at) > c.MAX_REQUEST_AGE_SECONDS:
            return False
        expected = self.generate_signature(timestamp=timestamp, body=body)
        return hmac.compare_digest(expected, signature)

    def is_valid_request(self, body: str | bytes, headers: Mapping[str, str]) -> bool:
        """``is_valid`` with the timestamp and signature read from ``headers``."""
        lowered = {k.lower(): v for k, v in headers.items()}
        return self.is_valid(
            body,
            lowered.get(c.HEADER_REQUEST_TIMESTAMP),
            lowered.get(c.HEADER_SIGNATURE),
        )

    def verify_request(self, body: str | bytes, headers: Mapping[str, str]) -> None:
        """Raise unless ``is_valid_request`` holds.

        Raises:
            SignatureVerificationError: Missing, stale or mismatched signature
        """
        if not self.is_valid_request(body, headers):
            raise SignatureVerificationError("Request signature verification failed")
