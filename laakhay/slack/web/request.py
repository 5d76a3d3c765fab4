"""The logical request a response and its continuation pages derive from."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class SlackRequest:
    """One logical API request.

    ``params`` is the JSON body for POST requests and the query string for
    GET requests. Continuation pages reuse every field and replace only
    ``params["cursor"]``.
    """

    api_method: str
    url: str
    http_verb: str = "POST"
    params: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "http_verb", self.http_verb.upper())
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def cursor(self) -> str | None:
        return self.params.get("cursor")

    @property
    def is_json(self) -> bool:
        return self.http_verb != "GET"

    def with_cursor(self, cursor: str) -> SlackRequest:
        """Same request with only the cursor replaced."""
        return replace(self, params={**self.params, "cursor": cursor})
