"""Logic shared by ``WebClient`` and ``AsyncWebClient``.

Architecture:
    Both clients are ``BaseClient`` subclasses and differ only in the
    transport they own and in whether ``send()`` blocks or awaits::

        api_call(method, params)
            -> build_request()          (shared: URL, headers, serialization)
            -> send(request)            (per-mode: RetryPolicy.call / acall)
                 -> transport.perform()
                 -> _to_response()      (shared: decode, log, classify)

Design Decisions:
    - ``raise_on_error=True`` (default) raises ``SlackApiError`` for
      ``ok: false`` payloads. With ``False`` only HTTP-level failures raise
      and ``ok: false`` responses are returned for the caller to inspect.
    - GET requests carry params in the query string with booleans as 0/1.
      Everything else is a JSON POST.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..builders.base import Builder
from ..core.config import ClientConfig
from ..core.exceptions import TransportError
from ..models.base import SlackModel
from .internal_utils import (
    convert_bool_to_0_or_1,
    get_headers,
    get_url,
    get_user_agent,
    remove_none_values,
)
from .request import SlackRequest
from .response import SlackResponse
from .retry import RetryPolicy
from .telemetry import log_api_call
from .transport import TransportResponse


def serialize(value: Any) -> Any:
    """Turn models and builders (also inside lists and dicts) into JSON data."""
    if isinstance(value, Builder):
        return value.build().to_dict()
    if isinstance(value, SlackModel):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {k: serialize(v) for k, v in value.items() if v is not None}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return [serialize(v) for v in value]
    return value


class BaseClient:
    """Configuration, request building and response interpretation.

    Args:
        token: Bearer token; overrides ``config.token``
        config: Client settings (defaults to ``ClientConfig()``)
        retry_policy: Overrides the policy derived from ``config``
        raise_on_error: Raise ``SlackApiError`` for ``ok: false`` payloads
        base_url: Overrides ``config.base_url``
        timeout: Overrides ``config.timeout``
        headers: Extra headers merged over ``config.headers``
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        config: ClientConfig | None = None,
        retry_policy: RetryPolicy | None = None,
        raise_on_error: bool = True,
        base_url: str | None = None,
        timeout: float | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        config = config or ClientConfig()
        self.config = config
        self.token = token or config.token
        self.base_url = base_url or config.base_url
        self.timeout = timeout if timeout is not None else config.timeout
        self.headers = {**config.headers, **(headers or {})}
        self.retry_policy = retry_policy or config.retry_policy()
        self.raise_on_error = raise_on_error
        self._user_agent = get_user_agent(config.user_agent_prefix, config.user_agent_suffix)

    def build_request(
        self,
        api_method: str,
        params: Mapping[str, Any] | None = None,
        *,
        http_verb: str = "POST",
        headers: Mapping[str, str] | None = None,
    ) -> SlackRequest:
        """Assemble the logical request for ``api_method``."""
        verb = http_verb.upper()
        body = serialize(remove_none_values(params or {}))
        if verb == "GET":
            body = convert_bool_to_0_or_1(body)
        return SlackRequest(
            api_method=api_method,
            url=get_url(self.base_url, api_method),
            http_verb=verb,
            params=body,
            headers=get_headers(
                token=self.token,
                has_json=verb != "GET",
                extra={**self.headers, **(headers or {})},
                user_agent=self._user_agent,
            ),
        )

    def _perform_kwargs(self, request: SlackRequest) -> dict[str, Any]:
        if request.is_json:
            return {"headers": request.headers, "json_body": dict(request.params)}
        return {"headers": request.headers, "params": request.params}

    def _to_response(
        self,
        request: SlackRequest,
        raw: TransportResponse,
        latency_ms: float | None = None,
    ) -> SlackResponse:
        """Decode a transport result and raise for failures.

        Raises:
            TransportError: A 200 response whose body is not JSON
            CallError: Any failure ``SlackResponse.validate`` reports
        """
        try:
            data = raw.json()
        except ValueError as exc:
            if raw.status_code == 200:
                raise TransportError(
                    f"Received a response in a non-JSON format from {request.url}",
                    status_code=raw.status_code,
                ) from exc
            data = {}
        if not isinstance(data, dict):
            data = {}
        response = SlackResponse(
            data,
            status_code=raw.status_code,
            headers=raw.headers,
            request=request,
            client=self,
        )
        log_api_call(
            api_method=request.api_method,
            http_verb=request.http_verb,
            status_code=raw.status_code,
            ok=response.ok,
            error=response.error,
            latency_ms=latency_ms,
        )
        if self.raise_on_error:
            return response.validate()
        return response.raise_for_status()
