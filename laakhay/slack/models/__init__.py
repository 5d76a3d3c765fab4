"""Validated Block Kit models."""

from .base import SlackModel
from .blocks import (
    BLOCK_TYPES,
    ActionsBlock,
    AnyBlock,
    Block,
    ContextBlock,
    ContextElement,
    DividerBlock,
    HeaderBlock,
    ImageBlock,
    InputBlock,
    SectionBlock,
)
from .elements import (
    ELEMENT_TYPES,
    AnyElement,
    ButtonElement,
    ChannelsSelectElement,
    CheckboxesElement,
    ConversationFilter,
    ConversationsSelectElement,
    DatePickerElement,
    DateTimePickerElement,
    Element,
    ExternalSelectElement,
    ImageElement,
    InteractiveElement,
    MultiChannelsSelectElement,
    MultiConversationsSelectElement,
    MultiExternalSelectElement,
    MultiStaticSelectElement,
    MultiUsersSelectElement,
    OverflowElement,
    PlainTextInputElement,
    RadioButtonsElement,
    StaticSelectElement,
    TimePickerElement,
    UsersSelectElement,
)
from .objects import (
    ConfirmObject,
    DispatchActionConfig,
    Markdown,
    Option,
    OptionGroup,
    PlainText,
    TextObject,
)
from .union import (
    decode_block,
    decode_blocks,
    decode_element,
    decode_text,
    decode_view,
    encode,
    encode_all,
)
from .views import AnyView, HomeView, ModalView, View, ViewState, ViewStateValue

__all__ = [
    "SlackModel",
    # Text and composition objects
    "PlainText",
    "Markdown",
    "TextObject",
    "Option",
    "OptionGroup",
    "ConfirmObject",
    "DispatchActionConfig",
    # Elements
    "Element",
    "InteractiveElement",
    "AnyElement",
    "ELEMENT_TYPES",
    "ButtonElement",
    "ImageElement",
    "PlainTextInputElement",
    "StaticSelectElement",
    "MultiStaticSelectElement",
    "UsersSelectElement",
    "MultiUsersSelectElement",
    "ConversationFilter",
    "ConversationsSelectElement",
    "MultiConversationsSelectElement",
    "ChannelsSelectElement",
    "MultiChannelsSelectElement",
    "ExternalSelectElement",
    "MultiExternalSelectElement",
    "DatePickerElement",
    "TimePickerElement",
    "DateTimePickerElement",
    "CheckboxesElement",
    "RadioButtonsElement",
    "OverflowElement",
    # Blocks
    "Block",
    "AnyBlock",
    "BLOCK_TYPES",
    "ContextElement",
    "SectionBlock",
    "DividerBlock",
    "HeaderBlock",
    "ActionsBlock",
    "ContextBlock",
    "InputBlock",
    "ImageBlock",
    # Views
    "View",
    "AnyView",
    "ModalView",
    "HomeView",
    "ViewState",
    "ViewStateValue",
    # Dispatch
    "decode_element",
    "decode_block",
    "decode_blocks",
    "decode_view",
    "decode_text",
    "encode",
    "encode_all",
]
