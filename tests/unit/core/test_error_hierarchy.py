"""Unit tests for the exception hierarchy."""

from laakhay.slack.core.exceptions import (
    AuthError,
    CallError,
    CountOutOfRangeError,
    LengthExceededError,
    MutuallyExclusiveError,
    RateLimitedError,
    RetriesExhaustedError,
    ServerError,
    SlackApiError,
    SlackError,
    TransportError,
    UnknownVariantError,
    ValidationError,
)


def test_validation_errors_are_not_call_errors():
    error = LengthExceededError("value", 2000, 2001)
    assert isinstance(error, ValidationError)
    assert isinstance(error, SlackError)
    assert not isinstance(error, CallError)
    assert error.constraint == "max_length"
    assert str(error) == "value exceeds 2000 characters (got 2001)"


def test_prefixed_keeps_type_and_details():
    error = CountOutOfRangeError("elements", 26, minimum=1, maximum=25)
    nested = error.prefixed("blocks.3")
    assert isinstance(nested, CountOutOfRangeError)
    assert nested.field == "blocks.3.elements"
    assert nested.maximum == 25
    assert str(nested).startswith("blocks.3.elements must contain at most 25")
    assert error.field == "elements"


def test_mutually_exclusive_names_every_field():
    error = MutuallyExclusiveError(["url", "confirm"])
    assert error.fields == ("url", "confirm")
    assert error.field == "url"
    assert "url and confirm" in str(error)


def test_unknown_variant_message():
    assert "no 'type'" in str(UnknownVariantError("block", None))
    error = UnknownVariantError("element", "carousel", field="elements.0")
    assert "'carousel'" in str(error)
    assert "elements.0" in str(error)


def test_transient_flags():
    assert TransportError("reset").transient
    assert ServerError("down", status_code=500).transient
    assert RateLimitedError("slow down", retry_after=3).transient
    assert not SlackApiError("nope").transient
    assert not AuthError("bad").transient


def test_rate_limited_error():
    error = RateLimitedError("slow down", retry_after=30)
    assert error.status_code == 429
    assert error.retry_after == 30
    assert error.error_code == "ratelimited"
    assert isinstance(error, SlackApiError)


def test_retries_exhausted_wraps_last_error():
    last = ServerError("down", status_code=502)
    error = RetriesExhaustedError(last, 3)
    assert error.last_error is last
    assert error.attempts == 3
    assert error.status_code == 502
    assert not error.transient
