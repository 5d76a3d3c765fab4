"""laakhay-slack: typed Block Kit payloads and Slack Web API clients.

Example:
    >>> from laakhay.slack import WebClient
    >>> from laakhay.slack.builders import button, actions, section
    >>> with WebClient(token="xoxb-...") as client:
    ...     client.chat_post_message(
    ...         channel="C123",
    ...         text="Deploy?",
    ...         blocks=[section("Deploy *v2.3*?"), actions(button("Ship it", "ship"))],
    ...     )
"""

import logging

from .core.config import ClientConfig
from .core.constants import VERSION
from .core.exceptions import (
    CallError,
    PaginationError,
    RetriesExhaustedError,
    SlackApiError,
    SlackError,
    UnknownVariantError,
    ValidationError,
)
from .core.logging import LIBRARY_LOGGER, configure_logging
from .signature import SignatureVerifier
from .web import AsyncWebClient, RetryPolicy, SlackRequest, SlackResponse, WebClient
from .webhook import AsyncWebhookClient, WebhookClient, WebhookResponse

__version__ = VERSION

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "AsyncWebClient",
    "AsyncWebhookClient",
    "CallError",
    "ClientConfig",
    "PaginationError",
    "RetriesExhaustedError",
    "RetryPolicy",
    "SignatureVerifier",
    "SlackApiError",
    "SlackError",
    "SlackRequest",
    "SlackResponse",
    "UnknownVariantError",
    "ValidationError",
    "WebClient",
    "WebhookClient",
    "WebhookResponse",
    "configure_logging",
]
