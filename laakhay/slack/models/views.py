"""Views: modals and the App Home tab.

A view is valid only when every contained block is valid and the aggregate
bounds (block count, unique ``block_id`` values, modal submit rules) hold.
Views returned by the API carry server-assigned fields (``id``, ``hash``,
``state`` ...); those are modelled so responses decode cleanly.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import ConfigDict, Discriminator, Field, model_validator

from ..core import constants as c
from .base import (
    SlackModel,
    check_count,
    check_text,
    check_unique,
    unknown_variant_type,
    violation,
)
from .blocks import AnyBlock
from .objects import Option, PlainText


class ViewStateValue(SlackModel):
    """Current value of one input element inside a submitted view."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str
    value: str | None = None
    selected_option: Option | None = None
    selected_options: tuple[Option, ...] | None = None
    selected_date: str | None = None
    selected_time: str | None = None
    selected_date_time: int | None = None
    selected_user: str | None = None
    selected_users: tuple[str, ...] | None = None
    selected_conversation: str | None = None
    selected_conversations: tuple[str, ...] | None = None
    selected_channel: str | None = None
    selected_channels: tuple[str, ...] | None = None

    @property
    def selected(self) -> Any:
        """Return whichever value field the element type populates."""
        for name in type(self).model_fields:
            if name == "type":
                continue
            current = getattr(self, name)
            if current is not None:
                return current
        return None


class ViewState(SlackModel):
    """``state.values`` keyed by ``block_id`` then ``action_id``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    values: dict[str, dict[str, ViewStateValue]] = Field(default_factory=dict)

    def get(self, block_id: str, action_id: str) -> ViewStateValue | None:
        return self.values.get(block_id, {}).get(action_id)


class View(SlackModel):
    """Fields shared by modal and home views."""

    type: str
    blocks: tuple[AnyBlock, ...]
    callback_id: str | None = Field(None, max_length=c.MAX_CALLBACK_ID_LENGTH)
    external_id: str | None = Field(None, max_length=c.MAX_EXTERNAL_ID_LENGTH)
    private_metadata: str | None = Field(None, max_length=c.MAX_PRIVATE_METADATA_LENGTH)

    # Assigned by the API
    id: str | None = None
    hash: str | None = None
    state: ViewState | None = None
    team_id: str | None = None
    app_id: str | None = None
    bot_id: str | None = None
    app_installed_team_id: str | None = None
    root_view_id: str | None = None
    previous_view_id: str | None = None

    family: ClassVar[str] = "view"

    @model_validator(mode="after")
    def _check_blocks(self) -> View:
        check_count("blocks", self.blocks, 1, c.MAX_VIEW_BLOCKS)
        check_unique("blocks.block_id", (block.block_id for block in self.blocks))
        return self


class ModalView(View):
    type: Literal["modal"] = "modal"
    title: PlainText
    submit: PlainText | None = None
    close: PlainText | None = None
    clear_on_close: bool | None = None
    notify_on_close: bool | None = None
    submit_disabled: bool | None = None

    @model_validator(mode="after")
    def _check(self) -> ModalView:
        check_text("title", self.title, c.MAX_VIEW_TITLE_LENGTH)
        check_text("submit", self.submit, c.MAX_VIEW_BUTTON_LENGTH)
        check_text("close", self.close, c.MAX_VIEW_BUTTON_LENGTH)
        if self.submit is None and any(block.type == "input" for block in self.blocks):
            raise violation(
                "required", "submit", message="submit is required when a modal has input blocks"
            )
        return self


class HomeView(View):
    type: Literal["home"] = "home"


AnyView = Annotated[
    Union[ModalView, HomeView],
    Discriminator(
        "type",
        custom_error_type=unknown_variant_type("view"),
        custom_error_message="unknown view type",
    ),
]
