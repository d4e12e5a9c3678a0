"""Duration literal parsing - Lark grammar for clock and unit forms."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from clockduration._constants import MAX_LITERAL_LENGTH
from clockduration._errors import (
    ERR_MSG_INVALID_LITERAL,
    ERR_MSG_LITERAL_TOO_LONG,
    DurationParseError,
)

if TYPE_CHECKING:
    from clockduration._duration import ClockDuration

logger = logging.getLogger(__name__)

# Clock form keeps raw field values so that "00:00:5025" parses back to
# second=5025; unit form ("1h23m45s") components must appear in h, m, s order.
GRAMMAR = r"""
?start: clock
      | units

clock: INT ":" INT ":" INT

units: hours minutes? seconds?
     | minutes seconds?
     | seconds

hours: INT "h"
minutes: INT "m"
seconds: INT "s"

%import common.INT
%import common.WS
%ignore WS
"""

_parser = Lark(GRAMMAR, parser="lalr")


class _DurationBuilder(Transformer):
    """Builds a ClockDuration (or subclass) from a parsed literal tree."""

    def __init__(self, duration_cls: type[ClockDuration]) -> None:
        super().__init__()
        self._cls = duration_cls

    def clock(self, items: list[Token]) -> ClockDuration:
        hour, minute, second = (int(tok) for tok in items)
        return self._cls(hour, minute, second)

    def hours(self, items: list[Token]) -> tuple[str, int]:
        return "hour", int(items[0])

    def minutes(self, items: list[Token]) -> tuple[str, int]:
        return "minute", int(items[0])

    def seconds(self, items: list[Token]) -> tuple[str, int]:
        return "second", int(items[0])

    def units(self, items: list[tuple[str, int]]) -> ClockDuration:
        result = self._cls(**dict(items))
        result.normalize()
        return result


def parse_duration(text: str, duration_cls: type[ClockDuration] | None = None) -> ClockDuration:
    """Parse a duration literal.

    Args:
        text: Either clock form ``H:MM:SS`` (fields kept as written) or
            unit form such as ``1h23m45s``, ``90m`` or ``5025s`` (normalized).
        duration_cls: Class to build. Defaults to ClockDuration.

    Returns:
        The parsed duration.

    Raises:
        DurationParseError: If the literal is not a string, is too long,
            or matches neither form.
    """
    if duration_cls is None:
        from clockduration._duration import ClockDuration

        duration_cls = ClockDuration

    if not isinstance(text, str):
        raise DurationParseError(
            ERR_MSG_INVALID_LITERAL,
            f"expected str, got {type(text).__name__}",
        )
    if len(text) > MAX_LITERAL_LENGTH:
        raise DurationParseError(
            ERR_MSG_LITERAL_TOO_LONG,
            f"literal length {len(text)} exceeds limit {MAX_LITERAL_LENGTH}",
        )

    try:
        tree = _parser.parse(text)
    except LarkError as exc:
        err = DurationParseError(
            ERR_MSG_INVALID_LITERAL,
            f"cannot parse duration literal {text!r}: {exc}",
            wrapped=exc,
        )
        logger.debug("%s", err.internal())
        raise err from exc

    return _DurationBuilder(duration_cls).transform(tree)
