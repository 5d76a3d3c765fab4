"""Request-building helpers shared by the sync and async clients."""

from __future__ import annotations

import platform
import sys
from collections.abc import Iterable, Mapping
from typing import Any

from ..core import constants as c


def get_url(base_url: str, api_method: str) -> str:
    """Join ``base_url`` and ``api_method`` with exactly one slash.

    Absolute URLs are returned unchanged.
    """
    if api_method.startswith(("http://", "https://")):
        return api_method
    return f"{base_url.rstrip('/')}/{api_method.lstrip('/')}"


def get_user_agent(prefix: str | None = None, suffix: str | None = None) -> str:
    python = ".".join(str(part) for part in sys.version_info[:3])
    parts = [
        f"{c.USER_AGENT_NAME}/{c.VERSION}",
        f"Python/{python}",
        f"{platform.system()}/{platform.release()}",
    ]
    if prefix:
        parts.insert(0, prefix)
    if suffix:
        parts.append(suffix)
    return " ".join(parts)


def get_headers(
    token: str | None = None,
    has_json: bool = True,
    extra: Mapping[str, str] | None = None,
    user_agent: str | None = None,
) -> dict[str, str]:
    """Default headers for an API request; ``extra`` wins on conflicts."""
    headers = {
        c.HEADER_USER_AGENT: user_agent or get_user_agent(),
        c.HEADER_CONTENT_TYPE: c.JSON_CONTENT_TYPE if has_json else c.FORM_CONTENT_TYPE,
    }
    if token:
        headers[c.HEADER_AUTHORIZATION] = f"Bearer {token}"
    if extra:
        headers.update(extra)
    return headers


def convert_bool_to_0_or_1(params: Mapping[str, Any]) -> dict[str, Any]:
    """Query strings carry booleans as ``1`` / ``0``."""
    return {k: int(v) if isinstance(v, bool) else v for k, v in params.items()}


def remove_none_values(params: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}


def join_values(values: str | Iterable[Any] | None) -> str | None:
    """Render list parameters (``types``, ``users`` ...) as comma-separated strings."""
    if values is None or isinstance(values, str):
        return values
    return ",".join(str(getattr(v, "value", v)) for v in values)
