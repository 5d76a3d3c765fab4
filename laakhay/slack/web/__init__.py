"""Web API clients, responses, pagination and retries."""

from .async_client import AsyncWebClient
from .base_client import BaseClient
from .client import WebClient
from .pagination import AsyncPager, CursorPaginator, SyncPager
from .request import SlackRequest
from .response import SlackResponse
from .retry import BackoffCalculator, RetryPolicy, RetryState, is_transient
from .transport import AiohttpTransport, RequestsTransport, TransportResponse

__all__ = [
    "AiohttpTransport",
    "AsyncPager",
    "AsyncWebClient",
    "BackoffCalculator",
    "BaseClient",
    "CursorPaginator",
    "RequestsTransport",
    "RetryPolicy",
    "RetryState",
    "SlackRequest",
    "SlackResponse",
    "SyncPager",
    "TransportResponse",
    "WebClient",
    "is_transient",
]
