"""Error class hierarchy tests."""

import pytest
from lark.exceptions import LarkError

from clockduration import ClockDuration, parse
from clockduration._errors import (
    ERR_MSG_DIVIDE_BY_ZERO,
    ERR_MSG_INVALID_FIELD,
    ClockDurationError,
    DivideByZeroError,
    DurationParseError,
    InvalidDurationError,
    InvalidScalarError,
)


class TestRaisedErrors:
    def test_parse_error_wraps_lark_error(self):
        with pytest.raises(DurationParseError) as exc_info:
            parse("1h1h")
        err = exc_info.value
        assert isinstance(err.wrapped, LarkError)
        assert err.__cause__ is err.wrapped
        assert "'1h1h'" in err.internal()

    def test_divide_by_zero_messages(self):
        with pytest.raises(DivideByZeroError) as exc_info:
            ClockDuration(1, 23, 45) / 0
        assert str(exc_info.value) == ERR_MSG_DIVIDE_BY_ZERO
        assert exc_info.value.internal() == "scalar divisor is 0"
        assert exc_info.value.wrapped is None

    def test_zero_duration_divisor_names_operand(self):
        with pytest.raises(DivideByZeroError) as exc_info:
            ClockDuration(1) / ClockDuration()
        assert "ClockDuration(hour=0, minute=0, second=0)" in exc_info.value.internal()

    def test_invalid_field_hides_value_from_user_message(self):
        with pytest.raises(InvalidDurationError) as exc_info:
            ClockDuration(0, 0, -7)
        assert str(exc_info.value) == ERR_MSG_INVALID_FIELD
        assert "-7" in exc_info.value.internal()

    def test_internal_defaults_to_user_message(self):
        err = ClockDurationError("same message")
        assert err.internal() == "same message"


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [
        DivideByZeroError,
        InvalidDurationError,
        InvalidScalarError,
        DurationParseError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_base(self, cls):
        assert issubclass(cls, ClockDurationError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_instantiation(self, cls):
        err = cls("test message", "internal detail")
        assert str(err) == "test message"
        assert err.internal() == "internal detail"

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_catchable_as_base(self, cls):
        with pytest.raises(ClockDurationError):
            raise cls("test")

    def test_divide_by_zero_is_builtin(self):
        assert issubclass(DivideByZeroError, ZeroDivisionError)

    @pytest.mark.parametrize(
        "cls", [InvalidDurationError, InvalidScalarError, DurationParseError]
    )
    def test_value_errors(self, cls):
        assert issubclass(cls, ValueError)
