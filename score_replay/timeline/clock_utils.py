"""
Game clock utilities for timeline generation.

Converts between time remaining and time elapsed within a period and works
out where a live game currently is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..errors import TimelineGenerationError
from ..models import Game, Period


class PeriodClock(Protocol):
    period: Period
    minute: int | None
    second: int | None


@dataclass(frozen=True)
class PeriodTime:
    """A minute/second point within a period, either elapsed or remaining."""

    period: Period
    minute: int
    second: int


# =============================================================================
# REMAINING <-> ELAPSED
# =============================================================================


def remaining_to_elapsed(time: PeriodClock) -> PeriodTime:
    """
    Convert time remaining in a period to time elapsed since the period started.

    Missing minute/second count as zero, i.e. the end of the period.
    """
    period_seconds = 60 * time.period.length_minutes
    seconds = 60 * (time.minute or 0) + (time.second or 0)
    if seconds > period_seconds:
        raise TimelineGenerationError(
            f"{seconds // 60}:{seconds % 60:02d} does not fit in period {time.period}"
        )
    converted = period_seconds - seconds
    return PeriodTime(time.period, converted // 60, converted % 60)


def elapsed_to_remaining(time: PeriodClock) -> PeriodTime:
    """Inverse of remaining_to_elapsed; both subtract from the period length."""
    return remaining_to_elapsed(time)


# =============================================================================
# LIVE PROGRESS
# =============================================================================


def progress_period(game: Game) -> Period | None:
    """
    The period a live game is in, as the timeline numbers periods.

    Regular-season feeds number overtime and shootout as periods 4 and 5 but
    label them "OT"/"SO"; the label wins there. Playoff overtimes stay numbered.
    """
    progress = getattr(game.status, "progress", None)
    if progress is None:
        return None
    ordinal = (progress.ordinal or "").strip().upper()
    if not game.is_playoff and ordinal in ("OT", "SO"):
        return Period.parse(ordinal)
    return progress.current_period


def progress_time_remaining(game: Game) -> PeriodTime | None:
    """Time remaining in a live game's current period; end of period is 0:00."""
    period = progress_period(game)
    if period is None:
        return None
    minute, second = game.status.progress.remaining_time()
    return PeriodTime(period, minute, second)
