"""Entries of a playback timeline.

A timeline is a flat, fully materialized tuple of these values. The animation
driver steps through it at a fixed cadence; repeated entries hold the display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from ..models import Period


@dataclass(frozen=True)
class ClockState:
    """Time remaining in a period.

    ``tenth_of_second`` is only set in the last minute of regulation.
    The shootout tick has no clock, so ``minute`` and ``second`` are None there.
    """

    period: Period
    minute: int | None = None
    second: int | None = None
    tenth_of_second: int | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"period": self.period.label}
        if self.minute is not None:
            payload["minute"] = self.minute
            payload["second"] = self.second
        if self.tenth_of_second is not None:
            payload["tenthOfSecond"] = self.tenth_of_second
        return payload


@dataclass(frozen=True)
class StartMarker:
    def as_dict(self) -> dict[str, Any]:
        return {"start": True}


@dataclass(frozen=True)
class PeriodEndMarker:
    period: Period

    def as_dict(self) -> dict[str, Any]:
        return {"period": self.period.label, "end": True}


@dataclass(frozen=True)
class EndMarker:
    """Last entry of every timeline. ``in_progress`` when some game is still live."""

    in_progress: bool = False

    def as_dict(self) -> dict[str, Any]:
        if self.in_progress:
            return {"end": True, "inProgress": True}
        return {"end": True}


TimelineEntry = Union[ClockState, StartMarker, PeriodEndMarker, EndMarker]
Timeline = tuple[TimelineEntry, ...]
