"""Builders for composition objects."""

from __future__ import annotations

from typing import Any

from ..core.enums import ButtonStyle
from ..models.objects import ConfirmObject, Option, OptionGroup
from .base import Builder


class OptionBuilder(Builder[Option]):
    model = Option
    plain_fields = frozenset({"text", "description"})

    def description(self, description: Any) -> OptionBuilder:
        return self._set(description=description)

    def url(self, url: str) -> OptionBuilder:
        return self._set(url=url)


class OptionGroupBuilder(Builder[OptionGroup]):
    model = OptionGroup
    plain_fields = frozenset({"label"})

    def options(self, *options: Any) -> OptionGroupBuilder:
        return self._append("options", *options)


class ConfirmBuilder(Builder[ConfirmObject]):
    model = ConfirmObject
    plain_fields = frozenset({"title", "confirm", "deny"})
    mrkdwn_fields = frozenset({"text"})

    def confirm_text(self, text: Any) -> ConfirmBuilder:
        return self._set(confirm=text)

    def deny_text(self, text: Any) -> ConfirmBuilder:
        return self._set(deny=text)

    def style(self, style: ButtonStyle | str) -> ConfirmBuilder:
        return self._set(style=style)


def option(text: Any, value: str, description: Any = None, url: str | None = None) -> OptionBuilder:
    return OptionBuilder(text=text, value=value, description=description, url=url)


def option_group(label: Any, *options: Any) -> OptionGroupBuilder:
    return OptionGroupBuilder(label=label, options=options or None)


def confirm(title: Any, text: Any) -> ConfirmBuilder:
    """Confirmation dialog with the default ``Confirm`` / ``Cancel`` buttons."""
    return ConfirmBuilder(title=title, text=text)
