"""Single decode/encode dispatch point for the closed Block Kit unions.

Decoding reads the ``"type"`` discriminant first and dispatches to the
matching kind. A missing or unrecognized discriminant raises
``UnknownVariantError``; there is no fallback kind and no raw pass-through.

Adding a kind means adding its model to ``ELEMENT_TYPES`` / ``BLOCK_TYPES``;
call sites stay unchanged.

Example:
    >>> block = decode_block({"type": "divider"})
    >>> encode(block)
    {'type': 'divider'}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import UnknownVariantError, ValidationError
from .base import SlackModel, translate_error
from .blocks import AnyBlock, Block
from .elements import AnyElement, Element
from .objects import Markdown, PlainText, TextObject
from .views import AnyView, View

__all__ = [
    "decode_block",
    "decode_blocks",
    "decode_element",
    "decode_text",
    "decode_view",
    "encode",
    "encode_all",
]

_ELEMENT_ADAPTER: TypeAdapter[Element] = TypeAdapter(AnyElement)
_BLOCK_ADAPTER: TypeAdapter[Block] = TypeAdapter(AnyBlock)
_VIEW_ADAPTER: TypeAdapter[View] = TypeAdapter(AnyView)
_TEXT_ADAPTER: TypeAdapter[PlainText | Markdown] = TypeAdapter(TextObject)


def _decode(adapter: TypeAdapter[Any], family: str, payload: Any) -> Any:
    if isinstance(payload, SlackModel):
        payload = payload.to_dict()
    if not isinstance(payload, Mapping):
        raise UnknownVariantError(family, None)
    try:
        return adapter.validate_python(dict(payload))
    except PydanticValidationError as exc:
        raise translate_error(exc, family) from None


def decode_element(payload: Mapping[str, Any]) -> Element:
    return _decode(_ELEMENT_ADAPTER, "element", payload)


def decode_block(payload: Mapping[str, Any]) -> Block:
    return _decode(_BLOCK_ADAPTER, "block", payload)


def decode_blocks(payloads: Iterable[Mapping[str, Any]]) -> list[Block]:
    """Decode a list of blocks, reporting failures with their list index."""
    decoded = []
    for index, payload in enumerate(payloads):
        try:
            decoded.append(decode_block(payload))
        except UnknownVariantError as exc:
            raise UnknownVariantError(exc.family, exc.tag, field=_join(index, exc.field)) from None
        except ValidationError as exc:
            raise exc.prefixed(str(index)) from None
    return decoded


def decode_view(payload: Mapping[str, Any]) -> View:
    return _decode(_VIEW_ADAPTER, "view", payload)


def decode_text(payload: Mapping[str, Any]) -> PlainText | Markdown:
    return _decode(_TEXT_ADAPTER, "text", payload)


def encode(value: SlackModel) -> dict[str, Any]:
    """Serialize any model to its wire dict; the ``type`` key is always present."""
    return value.to_dict()


def encode_all(values: Iterable[SlackModel]) -> list[dict[str, Any]]:
    return [encode(value) for value in values]


def _join(index: int, field: str | None) -> str:
    return f"{index}.{field}" if field else str(index)
