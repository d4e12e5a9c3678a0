"""Exception hierarchy for clock duration arithmetic and parsing."""


class ClockDurationError(Exception):
    """Base exception for clock duration errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class DivideByZeroError(ClockDurationError, ZeroDivisionError):
    """Raised when a duration is divided by zero or by a zero-valued duration."""


class InvalidDurationError(ClockDurationError, ValueError):
    """Raised when a duration field is negative or not an integer."""


class InvalidScalarError(ClockDurationError, ValueError):
    """Raised when a scalar multiplier or divisor is negative."""


class DurationParseError(ClockDurationError, ValueError):
    """Raised when a duration literal cannot be parsed."""


# Sanitized user-facing error message constants
ERR_MSG_DIVIDE_BY_ZERO = "cannot divide a duration by zero"
ERR_MSG_INVALID_FIELD = "duration fields must be non-negative integers"
ERR_MSG_INVALID_SCALAR = "scalar must be a non-negative integer"
ERR_MSG_INVALID_LITERAL = "invalid duration literal"
ERR_MSG_LITERAL_TOO_LONG = "duration literal too long"
