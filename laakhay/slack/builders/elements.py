"""Builders for interactive elements.

Factory functions (``button(...)``, ``static_select(...)`` ...) take the
fields each kind requires; optional fields are staged through chained calls.
"""

from __future__ import annotations

from typing import Any, TypeVar

from ..core.enums import ButtonStyle, TriggerAction
from ..models import elements as e
from .base import Builder

B = TypeVar("B", bound=Builder[Any])


# ---------------------------------------------------------------------------
# Shared chain steps
# ---------------------------------------------------------------------------


class _Interactive(Builder[Any]):
    def action_id(self: B, action_id: str) -> B:
        return self._set(action_id=action_id)


class _Confirmable(_Interactive):
    def confirm(self: B, confirm: Any) -> B:
        return self._set(confirm=confirm)

    def focus_on_load(self: B, focus: bool = True) -> B:
        return self._set(focus_on_load=focus)


class _Placeholder(_Confirmable):
    plain_fields = frozenset({"placeholder"})

    def placeholder(self: B, placeholder: Any) -> B:
        return self._set(placeholder=placeholder)


class _Multi(_Placeholder):
    def max_selected_items(self: B, count: int) -> B:
        return self._set(max_selected_items=count)


class _WithOptions(Builder[Any]):
    def options(self: B, *options: Any) -> B:
        """Append options (models or ``option(...)`` builders)."""
        return self._append("options", *options)


class _WithOptionGroups(_WithOptions):
    def option_groups(self: B, *groups: Any) -> B:
        return self._append("option_groups", *groups)


# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------


class ButtonBuilder(_Interactive):
    model = e.ButtonElement
    plain_fields = frozenset({"text"})

    def value(self, value: str) -> ButtonBuilder:
        return self._set(value=value)

    def url(self, url: str) -> ButtonBuilder:
        return self._set(url=url)

    def style(self, style: ButtonStyle | str) -> ButtonBuilder:
        return self._set(style=style)

    def confirm(self, confirm: Any) -> ButtonBuilder:
        return self._set(confirm=confirm)

    def accessibility_label(self, label: str) -> ButtonBuilder:
        return self._set(accessibility_label=label)


class ImageElementBuilder(Builder[e.ImageElement]):
    model = e.ImageElement

    def slack_file(self, slack_file: dict[str, Any]) -> ImageElementBuilder:
        return self._set(slack_file=slack_file)


class PlainTextInputBuilder(_Interactive):
    model = e.PlainTextInputElement
    plain_fields = frozenset({"placeholder"})

    def placeholder(self, placeholder: Any) -> PlainTextInputBuilder:
        return self._set(placeholder=placeholder)

    def initial_value(self, value: str) -> PlainTextInputBuilder:
        return self._set(initial_value=value)

    def multiline(self, multiline: bool = True) -> PlainTextInputBuilder:
        return self._set(multiline=multiline)

    def length(self, min_length: int | None = None, max_length: int | None = None) -> PlainTextInputBuilder:
        return self._set(min_length=min_length, max_length=max_length)

    def dispatch_on(self, *triggers: TriggerAction | str) -> PlainTextInputBuilder:
        return self._set(dispatch_action_config={"trigger_actions_on": tuple(triggers)})

    def focus_on_load(self, focus: bool = True) -> PlainTextInputBuilder:
        return self._set(focus_on_load=focus)


class StaticSelectBuilder(_Placeholder, _WithOptionGroups):
    model = e.StaticSelectElement

    def initial_option(self, option: Any) -> StaticSelectBuilder:
        return self._set(initial_option=option)


class MultiStaticSelectBuilder(_Multi, _WithOptionGroups):
    model = e.MultiStaticSelectElement

    def initial_options(self, *options: Any) -> MultiStaticSelectBuilder:
        return self._append("initial_options", *options)


class UsersSelectBuilder(_Placeholder):
    model = e.UsersSelectElement

    def initial_user(self, user_id: str) -> UsersSelectBuilder:
        return self._set(initial_user=user_id)


class MultiUsersSelectBuilder(_Multi):
    model = e.MultiUsersSelectElement

    def initial_users(self, *user_ids: str) -> MultiUsersSelectBuilder:
        return self._append("initial_users", *user_ids)


class ConversationsSelectBuilder(_Placeholder):
    model = e.ConversationsSelectElement

    def initial_conversation(self, conversation_id: str) -> ConversationsSelectBuilder:
        return self._set(initial_conversation=conversation_id)

    def default_to_current_conversation(self, enabled: bool = True) -> ConversationsSelectBuilder:
        return self._set(default_to_current_conversation=enabled)

    def filter(self, **conversation_filter: Any) -> ConversationsSelectBuilder:
        return self._set(filter=conversation_filter)


class MultiConversationsSelectBuilder(_Multi):
    model = e.MultiConversationsSelectElement

    def initial_conversations(self, *conversation_ids: str) -> MultiConversationsSelectBuilder:
        return self._append("initial_conversations", *conversation_ids)

    def default_to_current_conversation(self, enabled: bool = True) -> MultiConversationsSelectBuilder:
        return self._set(default_to_current_conversation=enabled)

    def filter(self, **conversation_filter: Any) -> MultiConversationsSelectBuilder:
        return self._set(filter=conversation_filter)


class ChannelsSelectBuilder(_Placeholder):
    model = e.ChannelsSelectElement

    def initial_channel(self, channel_id: str) -> ChannelsSelectBuilder:
        return self._set(initial_channel=channel_id)


class MultiChannelsSelectBuilder(_Multi):
    model = e.MultiChannelsSelectElement

    def initial_channels(self, *channel_ids: str) -> MultiChannelsSelectBuilder:
        return self._append("initial_channels", *channel_ids)


class ExternalSelectBuilder(_Placeholder):
    model = e.ExternalSelectElement

    def initial_option(self, option: Any) -> ExternalSelectBuilder:
        return self._set(initial_option=option)

    def min_query_length(self, length: int) -> ExternalSelectBuilder:
        return self._set(min_query_length=length)


class MultiExternalSelectBuilder(_Multi):
    model = e.MultiExternalSelectElement

    def initial_options(self, *options: Any) -> MultiExternalSelectBuilder:
        return self._append("initial_options", *options)

    def min_query_length(self, length: int) -> MultiExternalSelectBuilder:
        return self._set(min_query_length=length)


class DatePickerBuilder(_Placeholder):
    model = e.DatePickerElement

    def initial_date(self, date: str) -> DatePickerBuilder:
        return self._set(initial_date=date)


class TimePickerBuilder(_Placeholder):
    model = e.TimePickerElement

    def initial_time(self, time: str) -> TimePickerBuilder:
        return self._set(initial_time=time)

    def timezone(self, timezone: str) -> TimePickerBuilder:
        return self._set(timezone=timezone)


class DateTimePickerBuilder(_Confirmable):
    model = e.DateTimePickerElement

    def initial_date_time(self, timestamp: int) -> DateTimePickerBuilder:
        return self._set(initial_date_time=timestamp)


class CheckboxesBuilder(_Confirmable, _WithOptions):
    model = e.CheckboxesElement

    def initial_options(self, *options: Any) -> CheckboxesBuilder:
        return self._append("initial_options", *options)


class RadioButtonsBuilder(_Confirmable, _WithOptions):
    model = e.RadioButtonsElement

    def initial_option(self, option: Any) -> RadioButtonsBuilder:
        return self._set(initial_option=option)


class OverflowBuilder(_Interactive, _WithOptions):
    model = e.OverflowElement

    def confirm(self, confirm: Any) -> OverflowBuilder:
        return self._set(confirm=confirm)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def button(text: Any, action_id: str | None = None) -> ButtonBuilder:
    return ButtonBuilder(text=text, action_id=action_id)


def image(image_url: str | None, alt_text: str) -> ImageElementBuilder:
    return ImageElementBuilder(image_url=image_url, alt_text=alt_text)


def plain_text_input(action_id: str | None = None) -> PlainTextInputBuilder:
    return PlainTextInputBuilder(action_id=action_id)


def static_select(action_id: str | None = None, placeholder: Any = None) -> StaticSelectBuilder:
    return StaticSelectBuilder(action_id=action_id, placeholder=placeholder)


def multi_static_select(action_id: str | None = None, placeholder: Any = None) -> MultiStaticSelectBuilder:
    return MultiStaticSelectBuilder(action_id=action_id, placeholder=placeholder)


def users_select(action_id: str | None = None, placeholder: Any = None) -> UsersSelectBuilder:
    return UsersSelectBuilder(action_id=action_id, placeholder=placeholder)


def multi_users_select(action_id: str | None = None, placeholder: Any = None) -> MultiUsersSelectBuilder:
    return MultiUsersSelectBuilder(action_id=action_id, placeholder=placeholder)


def conversations_select(
    action_id: str | None = None, placeholder: Any = None
) -> ConversationsSelectBuilder:
    return ConversationsSelectBuilder(action_id=action_id, placeholder=placeholder)


def multi_conversations_select(
    action_id: str | None = None, placeholder: Any = None
) -> MultiConversationsSelectBuilder:
    return MultiConversationsSelectBuilder(action_id=action_id, placeholder=placeholder)


def channels_select(action_id: str | None = None, placeholder: Any = None) -> ChannelsSelectBuilder:
    return ChannelsSelectBuilder(action_id=action_id, placeholder=placeholder)


def multi_channels_select(
    action_id: str | None = None, placeholder: Any = None
) -> MultiChannelsSelectBuilder:
    return MultiChannelsSelectBuilder(action_id=action_id, placeholder=placeholder)


def external_select(action_id: str | None = None, placeholder: Any = None) -> ExternalSelectBuilder:
    return ExternalSelectBuilder(action_id=action_id, placeholder=placeholder)


def multi_external_select(
    action_id: str | None = None, placeholder: Any = None
) -> MultiExternalSelectBuilder:
    return MultiExternalSelectBuilder(action_id=action_id, placeholder=placeholder)


def datepicker(action_id: str | None = None) -> DatePickerBuilder:
    return DatePickerBuilder(action_id=action_id)


def timepicker(action_id: str | None = None) -> TimePickerBuilder:
    return TimePickerBuilder(action_id=action_id)


def datetimepicker(action_id: str | None = None) -> DateTimePickerBuilder:
    return DateTimePickerBuilder(action_id=action_id)


def checkboxes(action_id: str | None = None, *options: Any) -> CheckboxesBuilder:
    return CheckboxesBuilder(action_id=action_id, options=options or None)


def radio_buttons(action_id: str | None = None, *options: Any) -> RadioButtonsBuilder:
    return RadioButtonsBuilder(action_id=action_id, options=options or None)


def overflow(action_id: str | None = None, *options: Any) -> OverflowBuilder:
    return OverflowBuilder(action_id=action_id, options=options or None)
