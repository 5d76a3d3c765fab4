"""Block Kit layout blocks."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import Discriminator, Field, model_validator

from ..core import constants as c
from .base import (
    SlackModel,
    check_count,
    check_exactly_one,
    check_text,
    unknown_variant_type,
    violation,
)
from .elements import (
    ACCESSORY_ELEMENT_TYPES,
    ACTIONS_ELEMENT_TYPES,
    INPUT_ELEMENT_TYPES,
    AnyElement,
    ImageElement,
)
from .objects import Markdown, PlainText, TextObject


class Block(SlackModel):
    """Base for all blocks."""

    type: str
    block_id: str | None = Field(None, min_length=1, max_length=c.MAX_BLOCK_ID_LENGTH)

    family: ClassVar[str] = "block"


def _check_kinds(field: str, elements: Any, allowed: frozenset[str], kind: str) -> None:
    for index, element in enumerate(elements):
        if element.type not in allowed:
            where = f"{field}.{index}" if isinstance(elements, tuple) else field
            raise violation("incompatible_option", where, option=element.type, kind=kind)


class SectionBlock(Block):
    type: Literal["section"] = "section"
    text: TextObject | None = None
    fields: tuple[TextObject, ...] | None = None
    accessory: AnyElement | None = None

    @model_validator(mode="after")
    def _check(self) -> SectionBlock:
        if self.text is None and not self.fields:
            raise violation("required", "text", message="section requires text or fields")
        check_count("fields", self.fields, 1, c.MAX_SECTION_FIELDS)
        for index, item in enumerate(self.fields or ()):
            check_text(f"fields.{index}", item, c.MAX_SECTION_FIELD_LENGTH)
        if self.accessory is not None:
            _check_kinds("accessory", [self.accessory], ACCESSORY_ELEMENT_TYPES, "section accessory")
        return self


class DividerBlock(Block):
    type: Literal["divider"] = "divider"


class HeaderBlock(Block):
    type: Literal["header"] = "header"
    text: PlainText

    @model_validator(mode="after")
    def _check(self) -> HeaderBlock:
        check_text("text", self.text, c.MAX_HEADER_TEXT_LENGTH)
        return self


class ActionsBlock(Block):
    type: Literal["actions"] = "actions"
    elements: tuple[AnyElement, ...]

    @model_validator(mode="after")
    def _check(self) -> ActionsBlock:
        check_count("elements", self.elements, 1, c.MAX_ACTIONS_ELEMENTS)
        _check_kinds("elements", self.elements, ACTIONS_ELEMENT_TYPES, "actions")
        return self


ContextElement = Annotated[
    Union[ImageElement, PlainText, Markdown],
    Discriminator(
        "type",
        custom_error_type=unknown_variant_type("context element"),
        custom_error_message="unknown context element type",
    ),
]


class ContextBlock(Block):
    type: Literal["context"] = "context"
    elements: tuple[ContextElement, ...]

    @model_validator(mode="after")
    def _check(self) -> ContextBlock:
        check_count("elements", self.elements, 1, c.MAX_CONTEXT_ELEMENTS)
        return self


class InputBlock(Block):
    type: Literal["input"] = "input"
    label: PlainText
    element: AnyElement
    dispatch_action: bool | None = None
    hint: PlainText | None = None
    optional: bool | None = None

    @model_validator(mode="after")
    def _check(self) -> InputBlock:
        check_text("label", self.label, c.MAX_INPUT_LABEL_LENGTH)
        check_text("hint", self.hint, c.MAX_INPUT_HINT_LENGTH)
        _check_kinds("element", [self.element], INPUT_ELEMENT_TYPES, "input")
        return self


class ImageBlock(Block):
    type: Literal["image"] = "image"
    alt_text: str = Field(..., min_length=1, max_length=c.MAX_ALT_TEXT_LENGTH)
    image_url: str | None = Field(None, min_length=1, max_length=c.MAX_URL_LENGTH)
    slack_file: dict[str, Any] | None = None
    title: PlainText | None = None

    @model_validator(mode="after")
    def _check(self) -> ImageBlock:
        check_exactly_one(self, "image_url", "slack_file")
        check_text("title", self.title, c.MAX_IMAGE_TITLE_LENGTH)
        return self


BLOCK_TYPES: tuple[type[Block], ...] = (
    SectionBlock,
    DividerBlock,
    HeaderBlock,
    ActionsBlock,
    ContextBlock,
    InputBlock,
    ImageBlock,
)

AnyBlock = Annotated[
    Union[BLOCK_TYPES],  # type: ignore[valid-type]
    Discriminator(
        "type",
        custom_error_type=unknown_variant_type("block"),
        custom_error_message="unknown block type",
    ),
]
