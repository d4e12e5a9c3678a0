"""Unit and limit constants for clock durations."""

SECONDS_PER_MINUTE = 60
"""Carry threshold from seconds into minutes."""

MINUTES_PER_HOUR = 60
"""Carry threshold from minutes into hours."""

SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR

MIN_FIELD_WIDTH = 2
"""Minimum zero-padded width of each rendered field. Wider values are not clamped."""

MAX_LITERAL_LENGTH = 64
"""Maximum accepted length of a duration literal passed to ``parse``."""
