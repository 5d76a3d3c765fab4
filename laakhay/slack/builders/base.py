"""Staged immutable builder base.

Architecture:
    A builder is an immutable bag of not-yet-validated field values. Every
    chained call returns a new builder, so a partially configured builder can
    be reused as a template:

        >>> base = button("Approve").style("primary")
        >>> a = base.action_id("approve_1").build()
        >>> b = base.action_id("approve_2").build()

    Nothing is validated while chaining. ``build()`` turns the builder (and
    any nested builders) into one payload and validates it in a single pass
    through the target model, so the first violated invariant is reported
    with its full field path and nothing is truncated or auto-corrected.

Design Decisions:
    - Strings given for text fields are wrapped as ``plain_text`` or
      ``mrkdwn`` objects depending on the field
    - ``None`` means "unset": it clears a previously staged value
    - ``set(**fields)`` stages arbitrary fields; fields the kind does not
      define fail at ``build()`` with ``IncompatibleOptionError``
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from ..models.base import SlackModel

M = TypeVar("M", bound=SlackModel)
B = TypeVar("B", bound="Builder[Any]")


def plain_text(text: str, emoji: bool | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"type": "plain_text", "text": text}
    if emoji is not None:
        payload["emoji"] = emoji
    return payload


def mrkdwn(text: str, verbatim: bool | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"type": "mrkdwn", "text": text}
    if verbatim is not None:
        payload["verbatim"] = verbatim
    return payload


class Builder(Generic[M]):
    """Immutable staged builder for one model kind."""

    model: ClassVar[type[SlackModel]]
    # Fields whose plain string values become plain_text / mrkdwn objects
    plain_fields: ClassVar[frozenset[str]] = frozenset()
    mrkdwn_fields: ClassVar[frozenset[str]] = frozenset()

    __slots__ = ("_fields",)

    def __init__(self, **fields: Any) -> None:
        self._fields: dict[str, Any] = {k: v for k, v in fields.items() if v is not None}

    def _set(self: B, **changes: Any) -> B:
        staged = dict(self._fields)
        for name, value in changes.items():
            if value is None:
                staged.pop(name, None)
            else:
                staged[name] = value
        clone = self.__class__.__new__(self.__class__)
        clone._fields = staged
        return clone

    def _append(self: B, name: str, *items: Any) -> B:
        return self._set(**{name: (*self._fields.get(name, ()), *items)})

    def set(self: B, **fields: Any) -> B:
        """Stage arbitrary fields by wire name."""
        return self._set(**fields)

    def get(self, name: str, default: Any = None) -> Any:
        """Return a staged value (unvalidated)."""
        return self._fields.get(name, default)

    def payload(self) -> dict[str, Any]:
        """Unvalidated wire payload, nested builders expanded."""
        data: dict[str, Any] = {}
        tag = self.model.model_fields.get("type")
        if tag is not None and isinstance(tag.default, str):
            data["type"] = tag.default
        for name, value in self._fields.items():
            data[name] = self._resolve(name, value)
        return data

    def build(self) -> M:
        """Validate everything staged and return the immutable model.

        Raises:
            ValidationError: First violated invariant, naming the field
            UnknownVariantError: A nested payload carries an unknown ``type``
        """
        return self.model(**self.payload())  # type: ignore[return-value]

    def _resolve(self, name: str, value: Any) -> Any:
        if isinstance(value, Builder):
            return value.payload()
        if isinstance(value, (tuple, list)):
            return tuple(self._resolve(name, item) for item in value)
        if isinstance(value, str):
            if name in self.plain_fields:
                return plain_text(value)
            if name in self.mrkdwn_fields:
                return mrkdwn(value)
        return value

    def __repr__(self) -> str:
        staged = ", ".join(f"{k}={v!r}" for k, v in self._fields.items())
        return f"{self.__class__.__name__}({staged})"


def resolve(value: Any) -> Any:
    """Return a model for ``value``, building it first if it is a builder."""
    if isinstance(value, Builder):
        return value.build()
    return value
