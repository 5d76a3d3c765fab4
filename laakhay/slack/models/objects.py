"""Composition objects: text, options, option groups, confirmation dialogs."""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Union

from pydantic import Discriminator, Field, model_validator

from ..core import constants as c
from ..core.enums import ButtonStyle, TriggerAction
from .base import SlackModel, check_count, check_text, unknown_variant_type


class PlainText(SlackModel):
    """Plain text object, optionally rendering emoji shortcodes."""

    type: Literal["plain_text"] = "plain_text"
    text: str = Field(..., min_length=1, max_length=c.MAX_TEXT_LENGTH)
    emoji: bool | None = None

    family: ClassVar[str] = "text"


class Markdown(SlackModel):
    """``mrkdwn`` text object."""

    type: Literal["mrkdwn"] = "mrkdwn"
    text: str = Field(..., min_length=1, max_length=c.MAX_TEXT_LENGTH)
    verbatim: bool | None = None

    family: ClassVar[str] = "text"


TextObject = Annotated[
    Union[PlainText, Markdown],
    Discriminator(
        "type",
        custom_error_type=unknown_variant_type("text"),
        custom_error_message="unknown text object type",
    ),
]


class Option(SlackModel):
    """A selectable item for selects, overflow menus, checkboxes and radios."""

    text: TextObject
    value: str = Field(..., min_length=1, max_length=c.MAX_OPTION_VALUE_LENGTH)
    description: TextObject | None = None
    url: str | None = Field(None, max_length=c.MAX_URL_LENGTH)

    @model_validator(mode="after")
    def _check(self) -> Option:
        check_text("text", self.text, c.MAX_OPTION_TEXT_LENGTH)
        check_text("description", self.description, c.MAX_OPTION_DESCRIPTION_LENGTH)
        return self


class OptionGroup(SlackModel):
    label: PlainText
    options: tuple[Option, ...]

    @model_validator(mode="after")
    def _check(self) -> OptionGroup:
        check_text("label", self.label, c.MAX_OPTION_GROUP_LABEL_LENGTH)
        check_count("options", self.options, 1, c.MAX_SELECT_OPTIONS)
        return self


class ConfirmObject(SlackModel):
    """Confirmation dialog shown before an interactive element fires."""

    title: PlainText
    text: TextObject
    confirm: PlainText = PlainText(text="Confirm")
    deny: PlainText = PlainText(text="Cancel")
    style: ButtonStyle | None = None

    @model_validator(mode="after")
    def _check(self) -> ConfirmObject:
        check_text("title", self.title, c.MAX_CONFIRM_TITLE_LENGTH)
        check_text("text", self.text, c.MAX_CONFIRM_TEXT_LENGTH)
        check_text("confirm", self.confirm, c.MAX_CONFIRM_BUTTON_LENGTH)
        check_text("deny", self.deny, c.MAX_CONFIRM_BUTTON_LENGTH)
        return self


class DispatchActionConfig(SlackModel):
    trigger_actions_on: tuple[TriggerAction, ...] | None = None
