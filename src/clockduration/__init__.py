"""clockduration - Hour/minute/second durations with normalizing arithmetic."""

from __future__ import annotations

import logging

from clockduration._duration import ClockDuration
from clockduration._errors import (
    ClockDurationError,
    DivideByZeroError,
    DurationParseError,
    InvalidDurationError,
    InvalidScalarError,
)
from clockduration._parser import parse_duration
from clockduration._version import __version__

__all__ = [
    "parse",
    "ClockDuration",
    "ClockDurationError",
    "DivideByZeroError",
    "DurationParseError",
    "InvalidDurationError",
    "InvalidScalarError",
    "__version__",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def parse(text: str) -> ClockDuration:
    """Parse a duration literal into a ClockDuration.

    Args:
        text: Clock form ``HH:MM:SS`` (fields kept exactly as written, so
            ``parse(str(d))`` restores ``d``) or unit form such as
            ``1h23m45s`` (normalized).

    Returns:
        The parsed ClockDuration.

    Raises:
        DurationParseError: If the text matches neither form.
    """
    return parse_duration(text, ClockDuration)
