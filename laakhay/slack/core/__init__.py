"""Core types: exceptions, enums, constants, configuration."""

from .config import ClientConfig
from .enums import ButtonStyle, ConversationType, CursorState, TriggerAction
from .exceptions import (
    AuthError,
    CallError,
    CountOutOfRangeError,
    DuplicateValueError,
    IncompatibleOptionError,
    InvalidFormatError,
    LengthExceededError,
    MutuallyExclusiveError,
    PaginationError,
    RateLimitedError,
    RequiredFieldError,
    RetriesExhaustedError,
    ServerError,
    SignatureVerificationError,
    SlackApiError,
    SlackError,
    TransportError,
    UnknownVariantError,
    ValidationError,
)
from .logging import configure_logging

__all__ = [
    "ClientConfig",
    "configure_logging",
    # Enums
    "ButtonStyle",
    "ConversationType",
    "CursorState",
    "TriggerAction",
    # Exceptions
    "SlackError",
    "ValidationError",
    "RequiredFieldError",
    "LengthExceededError",
    "CountOutOfRangeError",
    "MutuallyExclusiveError",
    "IncompatibleOptionError",
    "InvalidFormatError",
    "DuplicateValueError",
    "UnknownVariantError",
    "CallError",
    "TransportError",
    "SlackApiError",
    "AuthError",
    "RateLimitedError",
    "ServerError",
    "RetriesExhaustedError",
    "PaginationError",
    "SignatureVerificationError",
]
