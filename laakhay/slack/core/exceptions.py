"""Custom exception hierarchy.

Three families of failure exist:

- ``ValidationError``: local, pre-flight. A payload violates a structural
  constraint and never reaches the network.
- ``UnknownVariantError``: decode-time. A ``"type"`` discriminant is missing or
  not one of the known kinds.
- ``CallError``: anything that happened while talking to the API. Each carries
  a ``transient`` flag consumed by the retry policy.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class SlackError(Exception):
    """Base exception for all library errors."""

    pass


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class ValidationError(SlackError):
    """A model or builder value violates a structural constraint.

    Attributes:
        field: Dotted path of the offending field (e.g. ``elements.0.text``)
        constraint: Short machine-readable constraint name
    """

    constraint = "invalid"

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field}: {self.constraint}")

    def prefixed(self, prefix: str) -> ValidationError:
        """Return the same error with ``prefix`` prepended to the field path."""
        if not prefix:
            return self
        clone = _copy_error(self)
        clone.field = f"{prefix}.{self.field}" if self.field else prefix
        clone.args = (_rewrite_message(str(self), self.field, clone.field),)
        return clone


class RequiredFieldError(ValidationError):
    """A required field is missing or empty."""

    constraint = "required"

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(field, message or f"{field} is required")


class LengthExceededError(ValidationError):
    """A text value is longer than its kind allows."""

    constraint = "max_length"

    def __init__(self, field: str, limit: int, actual: int) -> None:
        self.limit = limit
        self.actual = actual
        super().__init__(field, f"{field} exceeds {limit} characters (got {actual})")


class CountOutOfRangeError(ValidationError):
    """A collection holds fewer or more items than allowed."""

    constraint = "count"

    def __init__(
        self,
        field: str,
        actual: int,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> None:
        self.actual = actual
        self.minimum = minimum
        self.maximum = maximum
        if maximum is not None and actual > maximum:
            detail = f"at most {maximum}"
        else:
            detail = f"at least {minimum}"
        super().__init__(field, f"{field} must contain {detail} items (got {actual})")


class MutuallyExclusiveError(ValidationError):
    """Two or more fields that cannot be combined were all set."""

    constraint = "mutually_exclusive"

    def __init__(self, fields: Sequence[str]) -> None:
        self.fields = tuple(fields)
        super().__init__(
            self.fields[0],
            f"{' and '.join(self.fields)} are mutually exclusive",
        )


class IncompatibleOptionError(ValidationError):
    """An option or option value is not legal for this kind."""

    constraint = "incompatible_option"

    def __init__(self, field: str, option: Any = None, kind: str | None = None) -> None:
        self.option = option
        self.kind = kind
        where = f" for {kind}" if kind else ""
        shown = f" {option!r}" if option is not None else ""
        super().__init__(field, f"{field}{shown} is not allowed{where}")


class InvalidFormatError(ValidationError):
    """A value does not match the expected format (date, time, ...)."""

    constraint = "format"

    def __init__(self, field: str, expected: str, value: Any = None) -> None:
        self.expected = expected
        self.value = value
        super().__init__(field, f"{field} must match {expected} (got {value!r})")


class DuplicateValueError(ValidationError):
    """A value that must be unique appears more than once."""

    constraint = "unique"

    def __init__(self, field: str, value: Any) -> None:
        self.value = value
        super().__init__(field, f"{field} {value!r} is not unique")


def _copy_error(error: ValidationError) -> ValidationError:
    clone = error.__class__.__new__(error.__class__)
    clone.__dict__.update(error.__dict__)
    return clone


def _rewrite_message(message: str, old: str, new: str) -> str:
    if old and message.startswith(old):
        return new + message[len(old) :]
    return f"{new}: {message}"


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class UnknownVariantError(SlackError):
    """A discriminated payload carries a missing or unrecognized ``type``."""

    def __init__(self, family: str, tag: Any, field: str | None = None) -> None:
        self.family = family
        self.tag = tag
        self.field = field
        where = f" at {field}" if field else ""
        if tag is None:
            message = f"{family} payload{where} has no 'type' discriminant"
        else:
            message = f"unknown {family} type {tag!r}{where}"
        super().__init__(message)


# ---------------------------------------------------------------------------
# Calls
# ---------------------------------------------------------------------------


class CallError(SlackError):
    """Failure while performing an API call."""

    transient = False

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(CallError):
    """Network-level failure: connection refused, timeout, broken body."""

    transient = True


class SlackApiError(CallError):
    """The API answered but reported a failure.

    Attributes:
        error_code: The ``error`` field of the payload (e.g. ``channel_not_found``)
        response: The ``SlackResponse`` that carried the failure
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        response: Any = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.error_code = error_code
        self.response = response


class AuthError(SlackApiError):
    """Token is missing, invalid, revoked or lacks a scope."""

    pass


class RateLimitedError(SlackApiError):
    """HTTP 429 from the API."""

    transient = True

    def __init__(
        self,
        message: str,
        retry_after: float | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message, error_code="ratelimited", response=response, status_code=429)
        self.retry_after = retry_after


class ServerError(SlackApiError):
    """HTTP 5xx from the API."""

    transient = True


class RetriesExhaustedError(CallError):
    """Every attempt allowed by the retry policy failed transiently.

    Attributes:
        last_error: The failure observed on the final attempt
        attempts: Number of attempts made
    """

    def __init__(self, last_error: CallError, attempts: int) -> None:
        super().__init__(
            f"giving up after {attempts} attempts: {last_error}",
            status_code=last_error.status_code,
        )
        self.last_error = last_error
        self.attempts = attempts


class PaginationError(CallError):
    """Continuation could not proceed (no cursor, no client, repeated cursor)."""

    pass


# ---------------------------------------------------------------------------
# Request signing
# ---------------------------------------------------------------------------


class SignatureVerificationError(SlackError):
    """An inbound request failed signature verification."""

    pass
