"""Base model for every Block Kit payload type.

Architecture:
    All payload types are frozen pydantic models. Field-level rules
    (string lengths, required fields, enumerations) are expressed as pydantic
    field constraints; cross-field rules live in ``@model_validator(mode="after")``
    hooks and are raised through ``violation()``.

    pydantic collects failures with their location; ``translate_error()``
    turns the first one into the matching ``ValidationError`` subclass (or
    ``UnknownVariantError``) with a dotted field path such as
    ``blocks.2.elements.0.text``. Translation happens only at public entry
    points (``__init__``, ``from_dict``, ``replace``), so nested models report
    paths relative to the outermost value.

Design Decisions:
    - Frozen + tuples: a constructed value cannot drift into an invalid state
    - ``extra="forbid"``: a field that a kind does not define is an
      incompatible option, not silently dropped
    - First failure wins: only ``errors()[0]`` is reported
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from ..core.exceptions import (
    CountOutOfRangeError,
    DuplicateValueError,
    IncompatibleOptionError,
    InvalidFormatError,
    LengthExceededError,
    MutuallyExclusiveError,
    RequiredFieldError,
    SlackError,
    UnknownVariantError,
    ValidationError,
)

M = TypeVar("M", bound="SlackModel")

# Discriminant values of every registered kind; pydantic inserts the tag into
# error locations of tagged unions and these are stripped from field paths.
_VARIANT_TAGS: set[str] = set()

UNKNOWN_VARIANT = "unknown_variant"


def unknown_variant_type(family: str) -> str:
    """Error type for a discriminated union; the family travels in the name."""
    return f"{UNKNOWN_VARIANT}:{family}"


class SlackModel(BaseModel):
    """Frozen pydantic model with library-level validation errors."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    family: ClassVar[str] = "object"

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise translate_error(exc, self.family) from None

    # Nested models are validated by pydantic directly, so failures keep their
    # full location until the outermost model translates them.
    __init__.__pydantic_base_init__ = True  # type: ignore[attr-defined]

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        field = cls.model_fields.get("type")
        if field is not None and isinstance(field.default, str):
            _VARIANT_TAGS.add(field.default)

    @classmethod
    def from_dict(cls: type[M], payload: Any) -> M:
        """Decode a JSON-like payload into this model."""
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as exc:
            raise translate_error(exc, cls.family) from None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict, omitting unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)

    def replace(self: M, **changes: Any) -> M:
        """Return a copy with ``changes`` applied and every invariant rechecked."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        return type(self)(**data)


# ---------------------------------------------------------------------------
# Raising violations from validators
# ---------------------------------------------------------------------------


def violation(kind: str, field: str = "", /, message: str | None = None, **context: Any):
    """Build a pydantic error that ``translate_error`` maps back to ``kind``."""
    text = message or f"{field or 'value'}: {kind}"
    # Braces would be read as template placeholders by pydantic
    text = text.replace("{", "(").replace("}", ")")
    return PydanticCustomError(kind, text, {"field": field, **context})


def check_length(field: str, value: str | None, limit: int) -> None:
    if value is not None and len(value) > limit:
        raise violation("max_length", field, limit=limit, actual=len(value))


def check_text(field: str, text: Any, limit: int, *, plain: bool = False) -> None:
    """Check a nested text object's length and, optionally, that it is plain text."""
    if text is None:
        return
    if plain and text.type != "plain_text":
        raise violation("incompatible_option", field, option=text.type, kind="plain_text only")
    check_length(f"{field}.text" if field else "text", text.text, limit)


def check_count(
    field: str,
    items: Sequence[Any] | None,
    minimum: int | None = None,
    maximum: int | None = None,
) -> None:
    if items is None:
        return
    count = len(items)
    if (minimum is not None and count < minimum) or (maximum is not None and count > maximum):
        raise violation("count", field, actual=count, minimum=minimum, maximum=maximum)


def check_exclusive(model: BaseModel, *fields: str) -> None:
    present = [name for name in fields if getattr(model, name) is not None]
    if len(present) > 1:
        raise violation("mutually_exclusive", present[0], fields=tuple(present))


def check_exactly_one(model: BaseModel, *fields: str) -> None:
    if all(getattr(model, name) is None for name in fields):
        raise violation(
            "required", fields[0], message=f"one of {', '.join(fields)} is required"
        )
    check_exclusive(model, *fields)


def check_unique(field: str, values: Iterable[Any]) -> None:
    seen: set[Any] = set()
    for value in values:
        if value is None:
            continue
        if value in seen:
            raise violation("unique", field, value=value)
        seen.add(value)


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------


def _path(loc: Sequence[Any], extra: str = "") -> str:
    parts = [str(part) for part in loc if not (isinstance(part, str) and part in _VARIANT_TAGS)]
    if extra:
        parts.append(extra)
    return ".".join(parts)


def _prefix_all(loc: Sequence[Any], fields: Sequence[str]) -> tuple[str, ...]:
    return tuple(_path(loc, name) for name in fields)


def translate_error(exc: PydanticValidationError, family: str = "object") -> SlackError:
    """Map the first pydantic error onto the library exception hierarchy."""
    error = exc.errors()[0]
    kind = error["type"]
    loc = error.get("loc", ())
    ctx = error.get("ctx") or {}
    value = error.get("input")

    if kind.startswith(UNKNOWN_VARIANT) or kind in ("union_tag_invalid", "union_tag_not_found"):
        family = kind.partition(":")[2] or family
        tag = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
        return UnknownVariantError(family, tag, field=_path(loc) or None)

    field = _path(loc, ctx.get("field", ""))

    if kind in ("missing", "required"):
        return RequiredFieldError(field, error["msg"] if kind == "required" else None)
    if kind == "string_too_short":
        return RequiredFieldError(field)
    if kind == "string_too_long":
        actual = len(value) if isinstance(value, str) else -1
        return LengthExceededError(field, int(ctx["max_length"]), actual)
    if kind == "max_length":
        return LengthExceededError(field, ctx["limit"], ctx["actual"])
    if kind in ("count", "too_short", "too_long"):
        return CountOutOfRangeError(
            field,
            ctx.get("actual", ctx.get("actual_length", -1)),
            minimum=ctx.get("minimum", ctx.get("min_length")),
            maximum=ctx.get("maximum", ctx.get("max_length")),
        )
    if kind == "mutually_exclusive":
        return MutuallyExclusiveError(_prefix_all(loc, ctx["fields"]))
    if kind in ("incompatible_option", "extra_forbidden", "literal_error", "enum"):
        option = ctx.get("option", value)
        return IncompatibleOptionError(field, option if _is_scalar(option) else None, ctx.get("kind"))
    if kind in ("format", "string_pattern_mismatch"):
        return InvalidFormatError(field, ctx.get("expected", ctx.get("pattern", "?")), value=ctx.get("value", value))
    if kind == "unique":
        return DuplicateValueError(field, ctx["value"])

    generic = ValidationError(field, f"{field}: {error['msg']}")
    generic.constraint = kind
    return generic


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))
