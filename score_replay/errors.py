"""Error types raised while building a playback timeline."""

from __future__ import annotations


class TimelineGenerationError(Exception):
    """Raised when timeline generation fails."""


class InvalidPeriodError(TimelineGenerationError, ValueError):
    """Raised for a period identifier the score provider should never send."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unrecognized period identifier: {value!r}")
        self.value = value


class ProgressParseError(TimelineGenerationError, ValueError):
    """Raised when a live game's time remaining cannot be parsed."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unparseable period time remaining: {value!r}")
        self.value = value


class TimelineInvariantError(TimelineGenerationError):
    """Raised when timeline construction hits a logic defect."""
