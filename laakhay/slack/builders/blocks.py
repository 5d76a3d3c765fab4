"""Builders for layout blocks."""

from __future__ import annotations

from typing import Any, TypeVar

from ..models import blocks as b
from .base import Builder

B = TypeVar("B", bound=Builder[Any])


class _Block(Builder[Any]):
    def block_id(self: B, block_id: str) -> B:
        return self._set(block_id=block_id)


class SectionBuilder(_Block):
    model = b.SectionBlock
    mrkdwn_fields = frozenset({"text", "fields"})

    def text(self, text: Any) -> SectionBuilder:
        """Section text; plain strings become ``mrkdwn``."""
        return self._set(text=text)

    def fields(self, *fields: Any) -> SectionBuilder:
        return self._append("fields", *fields)

    def accessory(self, element: Any) -> SectionBuilder:
        return self._set(accessory=element)


class DividerBuilder(_Block):
    model = b.DividerBlock


class HeaderBuilder(_Block):
    model = b.HeaderBlock
    plain_fields = frozenset({"text"})


class ActionsBuilder(_Block):
    model = b.ActionsBlock

    def elements(self, *elements: Any) -> ActionsBuilder:
        return self._append("elements", *elements)


class ContextBuilder(_Block):
    model = b.ContextBlock
    mrkdwn_fields = frozenset({"elements"})

    def elements(self, *elements: Any) -> ContextBuilder:
        """Append image elements or text; plain strings become ``mrkdwn``."""
        return self._append("elements", *elements)


class InputBuilder(_Block):
    model = b.InputBlock
    plain_fields = frozenset({"label", "hint"})

    def element(self, element: Any) -> InputBuilder:
        return self._set(element=element)

    def hint(self, hint: Any) -> InputBuilder:
        return self._set(hint=hint)

    def optional(self, optional: bool = True) -> InputBuilder:
        return self._set(optional=optional)

    def dispatch_action(self, dispatch: bool = True) -> InputBuilder:
        return self._set(dispatch_action=dispatch)


class ImageBlockBuilder(_Block):
    model = b.ImageBlock
    plain_fields = frozenset({"title"})

    def title(self, title: Any) -> ImageBlockBuilder:
        return self._set(title=title)

    def slack_file(self, slack_file: dict[str, Any]) -> ImageBlockBuilder:
        return self._set(slack_file=slack_file)


def section(text: Any = None) -> SectionBuilder:
    return SectionBuilder(text=text)


def divider() -> DividerBuilder:
    return DividerBuilder()


def header(text: Any) -> HeaderBuilder:
    return HeaderBuilder(text=text)


def actions(*elements: Any) -> ActionsBuilder:
    return ActionsBuilder(elements=elements or None)


def context(*elements: Any) -> ContextBuilder:
    return ContextBuilder(elements=elements or None)


def input_block(label: Any, element: Any = None) -> InputBuilder:
    return InputBuilder(label=label, element=element)


def image_block(image_url: str | None, alt_text: str) -> ImageBlockBuilder:
    return ImageBlockBuilder(image_url=image_url, alt_text=alt_text)
