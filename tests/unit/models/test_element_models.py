"""Unit tests for composition objects and interactive elements."""

import pytest

from laakhay.slack.core.enums import ButtonStyle
from laakhay.slack.core.exceptions import (
    CountOutOfRangeError,
    IncompatibleOptionError,
    InvalidFormatError,
    LengthExceededError,
    MutuallyExclusiveError,
    RequiredFieldError,
    UnknownVariantError,
)
from laakhay.slack.models import (
    ButtonElement,
    CheckboxesElement,
    ConfirmObject,
    DatePickerElement,
    ImageElement,
    Markdown,
    Option,
    OverflowElement,
    PlainText,
    PlainTextInputElement,
    StaticSelectElement,
    TimePickerElement,
)


def _option(value: str) -> Option:
    return Option(text=PlainText(text=value.title()), value=value)


class TestTextObjects:
    def test_empty_text_is_required(self):
        """Empty text reports the field as missing."""
        with pytest.raises(RequiredFieldError) as exc_info:
            PlainText(text="")
        assert exc_info.value.field == "text"

    def test_text_limit(self):
        PlainText(text="x" * 3000)
        with pytest.raises(LengthExceededError) as exc_info:
            Markdown(text="x" * 3001)
        assert exc_info.value.limit == 3000
        assert exc_info.value.actual == 3001

    def test_unknown_text_type_in_nested_field(self):
        """A nested text object with an unknown type is an unknown variant."""
        with pytest.raises(UnknownVariantError) as exc_info:
            Option.from_dict({"text": {"type": "rich_text", "text": "hi"}, "value": "a"})
        assert exc_info.value.family == "text"
        assert exc_info.value.tag == "rich_text"


class TestButton:
    def test_minimal_button(self):
        button = ButtonElement(text=PlainText(text="Go"), action_id="go")
        assert button.to_dict() == {
            "type": "button",
            "text": {"type": "plain_text", "text": "Go"},
            "action_id": "go",
        }

    def test_value_boundary(self):
        """2000 characters are accepted, 2001 rejected naming the field."""
        ButtonElement(text=PlainText(text="Go"), value="v" * 2000)
        with pytest.raises(LengthExceededError) as exc_info:
            ButtonElement(text=PlainText(text="Go"), value="v" * 2001)
        assert exc_info.value.field == "value"
        assert exc_info.value.limit == 2000

    def test_text_limit_is_kind_specific(self):
        with pytest.raises(LengthExceededError) as exc_info:
            ButtonElement(text=PlainText(text="x" * 76))
        assert exc_info.value.field == "text.text"
        assert exc_info.value.limit == 75

    def test_url_and_confirm_are_exclusive(self):
        confirm = ConfirmObject(title=PlainText(text="Sure?"), text=Markdown(text="Really?"))
        with pytest.raises(MutuallyExclusiveError) as exc_info:
            ButtonElement(text=PlainText(text="Go"), url="https://example.com", confirm=confirm)
        assert exc_info.value.fields == ("url", "confirm")

    def test_unknown_style_is_incompatible(self):
        with pytest.raises(IncompatibleOptionError) as exc_info:
            ButtonElement(text=PlainText(text="Go"), style="secondary")
        assert exc_info.value.field == "style"

    def test_style_serializes_as_string(self):
        button = ButtonElement(text=PlainText(text="Go"), style=ButtonStyle.DANGER)
        assert button.to_dict()["style"] == "danger"

    def test_action_id_limit(self):
        with pytest.raises(LengthExceededError):
            ButtonElement(text=PlainText(text="Go"), action_id="a" * 256)

    def test_frozen(self):
        button = ButtonElement(text=PlainText(text="Go"))
        with pytest.raises(Exception):
            button.value = "changed"

    def test_replace_revalidates(self):
        button = ButtonElement(text=PlainText(text="Go"), url="https://example.com")
        assert button.replace(value="v").value == "v"
        with pytest.raises(MutuallyExclusiveError):
            button.replace(
                confirm=ConfirmObject(title=PlainText(text="Sure?"), text=PlainText(text="Really?"))
            )


class TestOtherElements:
    def test_image_requires_exactly_one_source(self):
        with pytest.raises(RequiredFieldError):
            ImageElement(alt_text="logo")
        with pytest.raises(MutuallyExclusiveError):
            ImageElement(alt_text="logo", image_url="https://x/y.png", slack_file={"id": "F1"})
        assert ImageElement(alt_text="logo", image_url="https://x/y.png").image_url == "https://x/y.png"

    def test_input_min_length_must_not_exceed_max_length(self):
        with pytest.raises(IncompatibleOptionError) as exc_info:
            PlainTextInputElement(min_length=10, max_length=5)
        assert exc_info.value.field == "min_length"

    def test_static_select_needs_options_or_groups(self):
        with pytest.raises(RequiredFieldError):
            StaticSelectElement(action_id="pick")

    def test_static_select_initial_option_must_be_available(self):
        options = (_option("a"), _option("b"))
        StaticSelectElement(options=options, initial_option=options[1])
        with pytest.raises(IncompatibleOptionError) as exc_info:
            StaticSelectElement(options=options, initial_option=_option("c"))
        assert exc_info.value.field == "initial_option"

    def test_checkbox_count_bounds(self):
        with pytest.raises(CountOutOfRangeError) as exc_info:
            CheckboxesElement(options=tuple(_option(f"o{i}") for i in range(11)))
        assert exc_info.value.maximum == 10
        assert exc_info.value.actual == 11

    def test_overflow_needs_two_options(self):
        with pytest.raises(CountOutOfRangeError) as exc_info:
            OverflowElement(options=(_option("a"),))
        assert exc_info.value.minimum == 2

    def test_overflow_rejects_style(self):
        """Fields the kind does not define are incompatible options."""
        with pytest.raises(IncompatibleOptionError) as exc_info:
            OverflowElement(options=(_option("a"), _option("b")), style="primary")
        assert exc_info.value.field == "style"

    @pytest.mark.parametrize("value", ["2024-02-30", "2024-1-5", "tomorrow"])
    def test_datepicker_rejects_invalid_dates(self, value):
        with pytest.raises(InvalidFormatError) as exc_info:
            DatePickerElement(initial_date=value)
        assert exc_info.value.field == "initial_date"
        assert exc_info.value.expected == "YYYY-MM-DD"

    def test_datepicker_accepts_leap_day(self):
        assert DatePickerElement(initial_date="2024-02-29").initial_date == "2024-02-29"

    @pytest.mark.parametrize("value", ["24:00", "9:30", "12:60"])
    def test_timepicker_rejects_invalid_times(self, value):
        with pytest.raises(InvalidFormatError):
            TimePickerElement(initial_time=value)

    def test_confirm_defaults(self):
        confirm = ConfirmObject(title=PlainText(text="Sure?"), text=PlainText(text="Really?"))
        assert confirm.confirm.text == "Confirm"
        assert confirm.deny.text == "Cancel"

    def test_confirm_button_label_limit(self):
        with pytest.raises(LengthExceededError) as exc_info:
            ConfirmObject(
                title=PlainText(text="Sure?"),
                text=PlainText(text="Really?"),
                confirm=PlainText(text="x" * 31),
            )
        assert exc_info.value.field == "confirm.text"
