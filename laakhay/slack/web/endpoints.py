"""Typed conveniences for frequently used API methods.

Each method only shapes parameters and delegates to ``api_call``, so on
``WebClient`` it returns a ``SlackResponse`` and on ``AsyncWebClient`` an
awaitable of one. ``blocks`` and ``view`` accept models, builders or plain
dicts.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .internal_utils import join_values


class EndpointsMixin:
    """Endpoint methods for any class that defines ``api_call(method, params, *, http_verb)``."""

    api_call: Callable[..., Any]

    # -- auth ---------------------------------------------------------------

    def auth_test(self, **kwargs: Any) -> Any:
        """Check the token and return the identity it belongs to."""
        return self.api_call("auth.test", kwargs)

    # -- chat ---------------------------------------------------------------

    def chat_post_message(
        self,
        *,
        channel: str,
        text: str | None = None,
        blocks: Iterable[Any] | None = None,
        thread_ts: str | None = None,
        **kwargs: Any,
    ) -> Any:
        params = {"channel": channel, "text": text, "blocks": _listed(blocks), "thread_ts": thread_ts}
        return self.api_call("chat.postMessage", {**params, **kwargs})

    def chat_update(
        self,
        *,
        channel: str,
        ts: str,
        text: str | None = None,
        blocks: Iterable[Any] | None = None,
        **kwargs: Any,
    ) -> Any:
        params = {"channel": channel, "ts": ts, "text": text, "blocks": _listed(blocks)}
        return self.api_call("chat.update", {**params, **kwargs})

    # -- conversations ------------------------------------------------------

    def conversations_list(
        self,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        exclude_archived: bool | None = None,
        types: str | Iterable[Any] | None = None,
        **kwargs: Any,
    ) -> Any:
        """List conversations; ``types`` is a list such as ``["public_channel", "im"]``."""
        params = {
            "cursor": cursor,
            "limit": limit,
            "exclude_archived": exclude_archived,
            "types": join_values(types),
        }
        return self.api_call("conversations.list", {**params, **kwargs}, http_verb="GET")

    def conversations_history(
        self,
        *,
        channel: str,
        cursor: str | None = None,
        limit: int | None = None,
        oldest: str | None = None,
        latest: str | None = None,
        inclusive: bool | None = None,
        **kwargs: Any,
    ) -> Any:
        params = {
            "channel": channel,
            "cursor": cursor,
            "limit": limit,
            "oldest": oldest,
            "latest": latest,
            "inclusive": inclusive,
        }
        return self.api_call("conversations.history", {**params, **kwargs}, http_verb="GET")

    # -- users --------------------------------------------------------------

    def users_list(
        self,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        include_locale: bool | None = None,
        **kwargs: Any,
    ) -> Any:
        params = {"cursor": cursor, "limit": limit, "include_locale": include_locale}
        return self.api_call("users.list", {**params, **kwargs}, http_verb="GET")

    # -- views --------------------------------------------------------------

    def views_open(self, *, trigger_id: str, view: Any, **kwargs: Any) -> Any:
        return self.api_call("views.open", {"trigger_id": trigger_id, "view": view, **kwargs})

    def views_push(self, *, trigger_id: str, view: Any, **kwargs: Any) -> Any:
        return self.api_call("views.push", {"trigger_id": trigger_id, "view": view, **kwargs})

    def views_update(
        self,
        *,
        view: Any,
        external_id: str | None = None,
        view_id: str | None = None,
        hash: str | None = None,
        **kwargs: Any,
    ) -> Any:
        """Replace an open view, addressed by exactly one of ``view_id`` / ``external_id``."""
        if (view_id is None) == (external_id is None):
            raise ValueError("Either view_id or external_id is required, but not both")
        params = {"view": view, "view_id": view_id, "external_id": external_id, "hash": hash}
        return self.api_call("views.update", {**params, **kwargs})

    def views_publish(self, *, user_id: str, view: Any, hash: str | None = None, **kwargs: Any) -> Any:
        """Publish a Home tab for ``user_id``."""
        params = {"user_id": user_id, "view": view, "hash": hash}
        return self.api_call("views.publish", {**params, **kwargs})


def _listed(blocks: Iterable[Any] | None) -> list[Any] | None:
    return None if blocks is None else list(blocks)
