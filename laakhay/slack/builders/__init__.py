"""Staged immutable builders for Block Kit payloads.

Example:
    >>> from laakhay.slack.builders import actions, button, modal, section
    >>> view = (
    ...     modal("Deploy")
    ...     .blocks(
    ...         section("Ship *v2.3* to production?"),
    ...         actions(button("Ship it", "ship").style("primary")),
    ...     )
    ...     .build()
    ... )
"""

from .base import Builder, mrkdwn, plain_text, resolve
from .blocks import (
    ActionsBuilder,
    ContextBuilder,
    DividerBuilder,
    HeaderBuilder,
    ImageBlockBuilder,
    InputBuilder,
    SectionBuilder,
    actions,
    context,
    divider,
    header,
    image_block,
    input_block,
    section,
)
from .elements import (
    ButtonBuilder,
    ChannelsSelectBuilder,
    CheckboxesBuilder,
    ConversationsSelectBuilder,
    DatePickerBuilder,
    DateTimePickerBuilder,
    ExternalSelectBuilder,
    ImageElementBuilder,
    MultiChannelsSelectBuilder,
    MultiConversationsSelectBuilder,
    MultiExternalSelectBuilder,
    MultiStaticSelectBuilder,
    MultiUsersSelectBuilder,
    OverflowBuilder,
    PlainTextInputBuilder,
    RadioButtonsBuilder,
    StaticSelectBuilder,
    TimePickerBuilder,
    UsersSelectBuilder,
    button,
    channels_select,
    checkboxes,
    conversations_select,
    datepicker,
    datetimepicker,
    external_select,
    image,
    multi_channels_select,
    multi_conversations_select,
    multi_external_select,
    multi_static_select,
    multi_users_select,
    overflow,
    plain_text_input,
    radio_buttons,
    static_select,
    timepicker,
    users_select,
)
from .objects import (
    ConfirmBuilder,
    OptionBuilder,
    OptionGroupBuilder,
    confirm,
    option,
    option_group,
)
from .views import HomeBuilder, ModalBuilder, home, modal

__all__ = [
    "Builder",
    "plain_text",
    "mrkdwn",
    "resolve",
    # Composition objects
    "option",
    "option_group",
    "confirm",
    "OptionBuilder",
    "OptionGroupBuilder",
    "ConfirmBuilder",
    # Elements
    "button",
    "image",
    "plain_text_input",
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
    "ButtonBuilder",
    "ImageElementBuilder",
    "PlainTextInputBuilder",
    "StaticSelectBuilder",
    "MultiStaticSelectBuilder",
    "UsersSelectBuilder",
    "MultiUsersSelectBuilder",
    "ConversationsSelectBuilder",
    "MultiConversationsSelectBuilder",
    "ChannelsSelectBuilder",
    "MultiChannelsSelectBuilder",
    "ExternalSelectBuilder",
    "MultiExternalSelectBuilder",
    "DatePickerBuilder",
    "TimePickerBuilder",
    "DateTimePickerBuilder",
    "CheckboxesBuilder",
    "RadioButtonsBuilder",
    "OverflowBuilder",
    # Blocks
    "section",
    "divider",
    "header",
    "actions",
    "context",
    "input_block",
    "image_block",
    "SectionBuilder",
    "DividerBuilder",
    "HeaderBuilder",
    "ActionsBuilder",
    "ContextBuilder",
    "InputBuilder",
    "ImageBlockBuilder",
    # Views
    "modal",
    "home",
    "ModalBuilder",
    "HomeBuilder",
]
