"""Block Kit interactive elements.

Every element is tagged by ``type``. Fields a kind does not define are
rejected, so e.g. ``style`` on an overflow menu raises
``IncompatibleOptionError``.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import Discriminator, Field, field_validator, model_validator

from ..core import constants as c
from ..core.enums import ButtonStyle, ConversationType
from .base import (
    SlackModel,
    check_count,
    check_exactly_one,
    check_exclusive,
    check_text,
    unknown_variant_type,
    violation,
)
from .objects import ConfirmObject, DispatchActionConfig, Option, OptionGroup, PlainText

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class Element(SlackModel):
    """Base for all elements."""

    type: str
    family: ClassVar[str] = "element"


class InteractiveElement(Element):
    """Element that emits block actions identified by ``action_id``."""

    action_id: str | None = Field(None, min_length=1, max_length=c.MAX_ACTION_ID_LENGTH)


class ButtonElement(InteractiveElement):
    type: Literal["button"] = "button"
    text: PlainText
    value: str | None = Field(None, max_length=c.MAX_BUTTON_VALUE_LENGTH)
    url: str | None = Field(None, min_length=1, max_length=c.MAX_URL_LENGTH)
    style: ButtonStyle | None = None
    confirm: ConfirmObject | None = None
    accessibility_label: str | None = Field(None, max_length=c.MAX_ACCESSIBILITY_LABEL_LENGTH)

    @model_validator(mode="after")
    def _check(self) -> ButtonElement:
        check_text("text", self.text, c.MAX_BUTTON_TEXT_LENGTH)
        check_exclusive(self, "url", "confirm")
        return self


class ImageElement(Element):
    type: Literal["image"] = "image"
    alt_text: str = Field(..., min_length=1, max_length=c.MAX_ALT_TEXT_LENGTH)
    image_url: str | None = Field(None, min_length=1, max_length=c.MAX_URL_LENGTH)
    slack_file: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _check(self) -> ImageElement:
        check_exactly_one(self, "image_url", "slack_file")
        return self


class PlainTextInputElement(InteractiveElement):
    type: Literal["plain_text_input"] = "plain_text_input"
    placeholder: PlainText | None = None
    initial_value: str | None = Field(None, max_length=c.MAX_INPUT_VALUE_LENGTH)
    multiline: bool | None = None
    min_length: int | None = Field(None, ge=0, le=c.MAX_INPUT_VALUE_LENGTH)
    max_length: int | None = Field(None, ge=1, le=c.MAX_INPUT_VALUE_LENGTH)
    dispatch_action_config: DispatchActionConfig | None = None
    focus_on_load: bool | None = None

    @model_validator(mode="after")
    def _check(self) -> PlainTextInputElement:
        check_text("placeholder", self.placeholder, c.MAX_PLACEHOLDER_LENGTH)
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise violation(
                "incompatible_option",
                "min_length",
                message=f"min_length {self.min_length} exceeds max_length {self.max_length}",
                option=self.min_length,
            )
        return self


# ---------------------------------------------------------------------------
# Selects
# ---------------------------------------------------------------------------


class _Select(InteractiveElement):
    placeholder: PlainText | None = None
    confirm: ConfirmObject | None = None
    focus_on_load: bool | None = None

    @model_validator(mode="after")
    def _check_placeholder(self) -> _Select:
        check_text("placeholder", self.placeholder, c.MAX_PLACEHOLDER_LENGTH)
        return self


class _MultiSelect(_Select):
    max_selected_items: int | None = Field(None, ge=1)


def _check_option_source(model: Any) -> None:
    check_exactly_one(model, "options", "option_groups")
    check_count("options", model.options, 1, c.MAX_SELECT_OPTIONS)
    check_count("option_groups", model.option_groups, 1, c.MAX_SELECT_OPTION_GROUPS)


def _all_options(model: Any) -> list[Option]:
    if model.options is not None:
        return list(model.options)
    return [option for group in model.option_groups or () for option in group.options]


def _check_initial(field: str, chosen: Any, available: list[Option]) -> None:
    """Initial selections must be drawn from the element's own options."""
    many = isinstance(chosen, tuple)
    for index, option in enumerate(chosen if many else (chosen,)):
        if option not in available:
            where = f"{field}.{index}" if many else field
            raise violation(
                "incompatible_option",
                where,
                message=f"{where} is not one of the available options",
                option=option.value,
            )


class StaticSelectElement(_Select):
    type: Literal["static_select"] = "static_select"
    options: tuple[Option, ...] | None = None
    option_groups: tuple[OptionGroup, ...] | None = None
    initial_option: Option | None = None

    @model_validator(mode="after")
    def _check(self) -> StaticSelectElement:
        _check_option_source(self)
        if self.initial_option is not None:
            _check_initial("initial_option", self.initial_option, _all_options(self))
        return self


class MultiStaticSelectElement(_MultiSelect):
    type: Literal["multi_static_select"] = "multi_static_select"
    options: tuple[Option, ...] | None = None
    option_groups: tuple[OptionGroup, ...] | None = None
    initial_options: tuple[Option, ...] | None = None

    @model_validator(mode="after")
    def _check(self) -> MultiStaticSelectElement:
        _check_option_source(self)
        check_count("initial_options", self.initial_options, 1, c.MAX_INITIAL_OPTIONS)
        if self.initial_options:
            _check_initial("initial_options", self.initial_options, _all_options(self))
        return self


class UsersSelectElement(_Select):
    type: Literal["users_select"] = "users_select"
    initial_user: str | None = Field(None, min_length=1)


class MultiUsersSelectElement(_MultiSelect):
    type: Literal["multi_users_select"] = "multi_users_select"
    initial_users: tuple[str, ...] | None = None


class ConversationFilter(SlackModel):
    include: tuple[ConversationType, ...] | None = None
    exclude_external_shared_channels: bool | None = None
    exclude_bot_users: bool | None = None


class ConversationsSelectElement(_Select):
    type: Literal["conversations_select"] = "conversations_select"
    initial_conversation: str | None = Field(None, min_length=1)
    default_to_current_conversation: bool | None = None
    response_url_enabled: bool | None = None
    filter: ConversationFilter | None = None


class MultiConversationsSelectElement(_MultiSelect):
    type: Literal["multi_conversations_select"] = "multi_conversations_select"
    initial_conversations: tuple[str, ...] | None = None
    default_to_current_conversation: bool | None = None
    filter: ConversationFilter | None = None


class ChannelsSelectElement(_Select):
    type: Literal["channels_select"] = "channels_select"
    initial_channel: str | None = Field(None, min_length=1)
    response_url_enabled: bool | None = None


class MultiChannelsSelectElement(_MultiSelect):
    type: Literal["multi_channels_select"] = "multi_channels_select"
    initial_channels: tuple[str, ...] | None = None


class ExternalSelectElement(_Select):
    type: Literal["external_select"] = "external_select"
    initial_option: Option | None = None
    min_query_length: int | None = Field(None, ge=0)


class MultiExternalSelectElement(_MultiSelect):
    type: Literal["multi_external_select"] = "multi_external_select"
    initial_options: tuple[Option, ...] | None = None
    min_query_length: int | None = Field(None, ge=0)


# ---------------------------------------------------------------------------
# Pickers
# ---------------------------------------------------------------------------


class DatePickerElement(_Select):
    type: Literal["datepicker"] = "datepicker"
    initial_date: str | None = None

    @field_validator("initial_date")
    @classmethod
    def validate_initial_date(cls, v: str | None) -> str | None:
        """Validate initial_date is a real YYYY-MM-DD calendar date."""
        if v is None:
            return v
        try:
            parsed = datetime.strptime(v, "%Y-%m-%d").strftime("%Y-%m-%d")
        except ValueError:
            parsed = None
        if parsed != v:
            raise violation("format", expected="YYYY-MM-DD", value=v)
        return v


class TimePickerElement(_Select):
    type: Literal["timepicker"] = "timepicker"
    initial_time: str | None = None
    timezone: str | None = None

    @field_validator("initial_time")
    @classmethod
    def validate_initial_time(cls, v: str | None) -> str | None:
        """Validate initial_time is a 24-hour HH:mm value."""
        if v is not None and not _TIME_RE.match(v):
            raise violation("format", expected="HH:mm", value=v)
        return v


class DateTimePickerElement(InteractiveElement):
    type: Literal["datetimepicker"] = "datetimepicker"
    initial_date_time: int | None = Field(None, ge=0)
    confirm: ConfirmObject | None = None
    focus_on_load: bool | None = None


# ---------------------------------------------------------------------------
# Option lists
# ---------------------------------------------------------------------------


class CheckboxesElement(InteractiveElement):
    type: Literal["checkboxes"] = "checkboxes"
    options: tuple[Option, ...]
    initial_options: tuple[Option, ...] | None = None
    confirm: ConfirmObject | None = None
    focus_on_load: bool | None = None

    @model_validator(mode="after")
    def _check(self) -> CheckboxesElement:
        check_count("options", self.options, 1, c.MAX_CHECKBOX_OPTIONS)
        if self.initial_options:
            _check_initial("initial_options", self.initial_options, list(self.options))
        return self


class RadioButtonsElement(InteractiveElement):
    type: Literal["radio_buttons"] = "radio_buttons"
    options: tuple[Option, ...]
    initial_option: Option | None = None
    confirm: ConfirmObject | None = None
    focus_on_load: bool | None = None

    @model_validator(mode="after")
    def _check(self) -> RadioButtonsElement:
        check_count("options", self.options, 1, c.MAX_RADIO_OPTIONS)
        if self.initial_option is not None:
            _check_initial("initial_option", self.initial_option, list(self.options))
        return self


class OverflowElement(InteractiveElement):
    type: Literal["overflow"] = "overflow"
    options: tuple[Option, ...]
    confirm: ConfirmObject | None = None

    @model_validator(mode="after")
    def _check(self) -> OverflowElement:
        check_count("options", self.options, c.MIN_OVERFLOW_OPTIONS, c.MAX_OVERFLOW_OPTIONS)
        return self


def _element_union(*kinds: type[Element], family: str = "element") -> Any:
    return Annotated[
        Union[kinds],  # type: ignore[valid-type]
        Discriminator(
            "type",
            custom_error_type=unknown_variant_type(family),
            custom_error_message=f"unknown {family} type",
        ),
    ]


ELEMENT_TYPES: tuple[type[Element], ...] = (
    ButtonElement,
    ImageElement,
    PlainTextInputElement,
    StaticSelectElement,
    MultiStaticSelectElement,
    UsersSelectElement,
    MultiUsersSelectElement,
    ConversationsSelectElement,
    MultiConversationsSelectElement,
    ChannelsSelectElement,
    MultiChannelsSelectElement,
    ExternalSelectElement,
    MultiExternalSelectElement,
    DatePickerElement,
    TimePickerElement,
    DateTimePickerElement,
    CheckboxesElement,
    RadioButtonsElement,
    OverflowElement,
)

AnyElement = _element_union(*ELEMENT_TYPES)

# Which element kinds each containing block accepts
ACTIONS_ELEMENT_TYPES = frozenset(
    {
        "button",
        "static_select",
        "multi_static_select",
        "users_select",
        "multi_users_select",
        "conversations_select",
        "multi_conversations_select",
        "channels_select",
        "multi_channels_select",
        "external_select",
        "multi_external_select",
        "datepicker",
        "timepicker",
        "datetimepicker",
        "checkboxes",
        "radio_buttons",
        "overflow",
    }
)
INPUT_ELEMENT_TYPES = frozenset(
    (ACTIONS_ELEMENT_TYPES - {"button", "overflow"}) | {"plain_text_input"}
)
ACCESSORY_ELEMENT_TYPES = frozenset((ACTIONS_ELEMENT_TYPES - {"datetimepicker"}) | {"image"})
