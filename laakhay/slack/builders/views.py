"""Builders for modal and home views."""

from __future__ import annotations

from typing import Any, TypeVar

from ..models import views as v
from .base import Builder

B = TypeVar("B", bound=Builder[Any])


class _View(Builder[Any]):
    def blocks(self: B, *blocks: Any) -> B:
        """Append blocks (models or block builders)."""
        return self._append("blocks", *blocks)

    def callback_id(self: B, callback_id: str) -> B:
        return self._set(callback_id=callback_id)

    def external_id(self: B, external_id: str) -> B:
        return self._set(external_id=external_id)

    def private_metadata(self: B, metadata: str) -> B:
        return self._set(private_metadata=metadata)


class ModalBuilder(_View):
    model = v.ModalView
    plain_fields = frozenset({"title", "submit", "close"})

    def submit(self, label: Any) -> ModalBuilder:
        return self._set(submit=label)

    def close(self, label: Any) -> ModalBuilder:
        return self._set(close=label)

    def clear_on_close(self, enabled: bool = True) -> ModalBuilder:
        return self._set(clear_on_close=enabled)

    def notify_on_close(self, enabled: bool = True) -> ModalBuilder:
        return self._set(notify_on_close=enabled)

    def submit_disabled(self, disabled: bool = True) -> ModalBuilder:
        return self._set(submit_disabled=disabled)


class HomeBuilder(_View):
    model = v.HomeView


def modal(title: Any, *blocks: Any) -> ModalBuilder:
    return ModalBuilder(title=title, blocks=blocks or None)


def home(*blocks: Any) -> HomeBuilder:
    return HomeBuilder(blocks=blocks or None)
