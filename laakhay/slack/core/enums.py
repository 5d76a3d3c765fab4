"""Core enumerations.

String enums so values serialize directly onto the wire.
"""

from enum import Enum


class ButtonStyle(str, Enum):
    """Visual emphasis for buttons and confirmation dialogs."""

    PRIMARY = "primary"
    DANGER = "danger"


class TriggerAction(str, Enum):
    """When a plain-text input dispatches a block action."""

    ON_ENTER_PRESSED = "on_enter_pressed"
    ON_CHARACTER_ENTERED = "on_character_entered"


class ConversationType(str, Enum):
    """Conversation kinds accepted by conversation select filters."""

    IM = "im"
    MPIM = "mpim"
    PRIVATE = "private"
    PUBLIC = "public"


class CursorState(str, Enum):
    """Pagination protocol state.

    ``START -> HAS_CURSOR -> {HAS_CURSOR, EXHAUSTED}``; ``START`` may also go
    straight to ``EXHAUSTED`` when the first page carries no cursor.
    """

    START = "start"
    HAS_CURSOR = "has_cursor"
    EXHAUSTED = "exhausted"
