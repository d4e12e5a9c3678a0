"""ClockDuration value type - hour/minute/second magnitudes with arithmetic."""

from __future__ import annotations

import datetime
import functools
from typing import Any

from clockduration._constants import (
    MIN_FIELD_WIDTH,
    MINUTES_PER_HOUR,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from clockduration._errors import (
    ERR_MSG_DIVIDE_BY_ZERO,
    ERR_MSG_INVALID_FIELD,
    ERR_MSG_INVALID_SCALAR,
    DivideByZeroError,
    InvalidDurationError,
    InvalidScalarError,
)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_field(name: str, value: Any) -> None:
    if not _is_scalar(value):
        raise InvalidDurationError(
            ERR_MSG_INVALID_FIELD,
            f"{name} must be an int, got {type(value).__name__}",
        )
    if value < 0:
        raise InvalidDurationError(
            ERR_MSG_INVALID_FIELD,
            f"{name} must be non-negative, got {value}",
        )


def _validate_scalar(value: int) -> None:
    if value < 0:
        raise InvalidScalarError(
            ERR_MSG_INVALID_SCALAR,
            f"scalar must be non-negative, got {value}",
        )


def _validate_divisor(value: int) -> None:
    if value == 0:
        raise DivideByZeroError(
            ERR_MSG_DIVIDE_BY_ZERO,
            "scalar divisor is 0",
        )
    _validate_scalar(value)


@functools.total_ordering
class ClockDuration:
    """A duration held as raw hour, minute and second magnitudes.

    Fields are stored as given and are only folded into the canonical
    ``HH:MM:SS`` shape by :meth:`normalize`. Equality, ordering and all
    arithmetic go through :meth:`total_seconds`, so ``ClockDuration(second=5025)``
    equals ``ClockDuration(1, 23, 45)`` even though they render differently.

    Pure operators (``+ - * /``) return new, normalized values. Augmented
    operators (``+= -= *= /=``) mutate the left operand in place.
    """

    __slots__ = ("_hour", "_minute", "_second")

    # Mutable value with value-based equality.
    __hash__ = None

    def __init__(self, hour: int = 0, minute: int = 0, second: int = 0) -> None:
        self.hour = hour
        self.minute = minute
        self.second = second

    # Every write, including those from normalize() and the in-place
    # operators, goes through the validating setters.

    @property
    def hour(self) -> int:
        return self._hour

    @hour.setter
    def hour(self, value: int) -> None:
        _validate_field("hour", value)
        self._hour = value

    @property
    def minute(self) -> int:
        return self._minute

    @minute.setter
    def minute(self, value: int) -> None:
        _validate_field("minute", value)
        self._minute = value

    @property
    def second(self) -> int:
        return self._second

    @second.setter
    def second(self, value: int) -> None:
        _validate_field("second", value)
        self._second = value

    @classmethod
    def from_seconds(cls, seconds: int) -> ClockDuration:
        """Build a normalized duration from a total number of seconds."""
        result = cls(0, 0, seconds)
        result.normalize()
        return result

    @classmethod
    def from_timedelta(cls, delta: datetime.timedelta) -> ClockDuration:
        """Build a normalized duration from a whole-second, non-negative timedelta."""
        if delta.days < 0:
            raise InvalidDurationError(
                ERR_MSG_INVALID_FIELD,
                f"timedelta must be non-negative, got {delta!r}",
            )
        if delta.microseconds:
            raise InvalidDurationError(
                ERR_MSG_INVALID_FIELD,
                f"timedelta must be a whole number of seconds, got {delta!r}",
            )
        return cls.from_seconds(delta.days * 24 * SECONDS_PER_HOUR + delta.seconds)

    @classmethod
    def parse(cls, text: str) -> ClockDuration:
        """Parse an ``HH:MM:SS`` or ``1h23m45s`` literal. See :func:`clockduration.parse`."""
        from clockduration._parser import parse_duration

        return parse_duration(text, cls)

    def total_seconds(self) -> int:
        return self.hour * SECONDS_PER_HOUR + self.minute * SECONDS_PER_MINUTE + self.second

    def normalize(self) -> None:
        """Carry seconds into minutes, then minutes into hours, in place."""
        self.minute += self.second // SECONDS_PER_MINUTE
        self.second %= SECONDS_PER_MINUTE
        self.hour += self.minute // MINUTES_PER_HOUR
        self.minute %= MINUTES_PER_HOUR

    def copy(self) -> ClockDuration:
        return type(self)(self.hour, self.minute, self.second)

    def to_timedelta(self) -> datetime.timedelta:
        return datetime.timedelta(seconds=self.total_seconds())

    # ---- Comparison ----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClockDuration):
            return NotImplemented
        return self.total_seconds() == other.total_seconds()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ClockDuration):
            return NotImplemented
        return self.total_seconds() < other.total_seconds()

    def __bool__(self) -> bool:
        return self.total_seconds() != 0

    # ---- Rendering ----

    def __str__(self) -> str:
        # Raw fields, never normalized: second=5025 renders as 00:00:5025.
        w = MIN_FIELD_WIDTH
        return f"{self.hour:0{w}d}:{self.minute:0{w}d}:{self.second:0{w}d}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(hour={self.hour}, "
            f"minute={self.minute}, second={self.second})"
        )

    # ---- Addition / subtraction ----

    def __add__(self, other: object) -> ClockDuration:
        if not isinstance(other, ClockDuration):
            return NotImplemented
        return self.from_seconds(self.total_seconds() + other.total_seconds())

    def __iadd__(self, other: object) -> ClockDuration:
        if not isinstance(other, ClockDuration):
            return NotImplemented
        self.second += other.total_seconds()
        self.normalize()
        return self

    def __sub__(self, other: object) -> ClockDuration:
        """Absolute difference: ``a - b == b - a``."""
        if not isinstance(other, ClockDuration):
            return NotImplemented
        return self.from_seconds(abs(self.total_seconds() - other.total_seconds()))

    def __isub__(self, other: object) -> ClockDuration:
        if not isinstance(other, ClockDuration):
            return NotImplemented
        self._reset(abs(self.total_seconds() - other.total_seconds()))
        return self

    # ---- Scalar multiplication ----

    def __mul__(self, other: object) -> ClockDuration:
        if not _is_scalar(other):
            return NotImplemented
        _validate_scalar(other)
        return self.from_seconds(self.total_seconds() * other)

    __rmul__ = __mul__

    def __imul__(self, other: object) -> ClockDuration:
        if not _is_scalar(other):
            return NotImplemented
        _validate_scalar(other)
        self.hour *= other
        self.minute *= other
        self.second *= other
        self.normalize()
        return self

    # ---- Division ----

    def __truediv__(self, other: object) -> ClockDuration | float:
        """Divide by an int (floor, returns a duration) or by a duration (returns a ratio).

        Raises:
            DivideByZeroError: If the divisor is 0 or a zero-valued duration.
            InvalidScalarError: If an int divisor is negative.
        """
        if isinstance(other, ClockDuration):
            divisor = other.total_seconds()
            if divisor == 0:
                raise DivideByZeroError(
                    ERR_MSG_DIVIDE_BY_ZERO,
                    f"divisor duration {other!r} has zero total seconds",
                )
            return self.total_seconds() / divisor
        if not _is_scalar(other):
            return NotImplemented
        _validate_divisor(other)
        return self.from_seconds(self.total_seconds() // other)

    def __itruediv__(self, other: object) -> ClockDuration:
        if not _is_scalar(other):
            return NotImplemented
        _validate_divisor(other)
        self._reset(self.total_seconds() // other)
        return self

    def _reset(self, seconds: int) -> None:
        self.hour = 0
        self.minute = 0
        self.second = seconds
        self.normalize()
