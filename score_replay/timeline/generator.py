"""
Playback timeline assembly.

Builds the single timeline that replays all of the day's games in lockstep:

1. Resolve the horizon (the most advanced point any game has reached)
2. Sort every game's scoreboard goals into one list
3. Generate clock ticks for each period up to the horizon, pausing on goals
4. Join the periods with period-end pauses between start and end markers

A timeline is regenerated from scratch for every new score snapshot.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from ..config import PacingConfig, settings
from ..logging import get_logger
from ..models import Game, Period, PeriodKind
from ..normalization import normalize_games
from .entries import (
    ClockState,
    EndMarker,
    PeriodEndMarker,
    StartMarker,
    Timeline,
    TimelineEntry,
)
from .goals import GoalKey, goal_keys, goal_scoring_times
from .horizon import Horizon, resolve_horizon
from .period_events import period_events

logger = get_logger(__name__)

REGULATION_PERIODS = 3

PeriodSequence = tuple[Period, list[ClockState]]


def build_timeline(games: Sequence[Game], pacing: PacingConfig | None = None) -> Timeline:
    """
    Build the playback timeline for ``games``.

    The result always starts with start markers and ends with one end marker.
    With no horizon (nothing has been played) there is nothing in between.
    """
    pacing = pacing or settings.pacing
    start = [StartMarker()] * pacing.start_multiplier

    horizon = resolve_horizon(games)
    if horizon is None:
        logger.info("timeline_horizon_missing", games=len(games))
        return tuple([*start, EndMarker()])

    keys = goal_keys(goal_scoring_times(games))
    sequences = _all_period_events(horizon, keys, pacing)

    completed = sequences[:-1] if horizon.in_progress else sequences
    ended_periods = {period for period, _ in completed}

    entries: list[TimelineEntry] = list(start)
    for period, events in sequences:
        entries.extend(events)
        if period in ended_periods:
            entries.extend([PeriodEndMarker(period)] * pacing.period_end_multiplier)
    entries.append(EndMarker(in_progress=horizon.in_progress))

    logger.debug(
        "timeline_generated",
        games=len(games),
        goals=len(keys),
        entries=len(entries),
        horizon_period=str(horizon.period),
        in_progress=horizon.in_progress,
    )
    return tuple(entries)


def build_timeline_from_records(
    records: Iterable[dict[str, Any]], pacing: PacingConfig | None = None
) -> Timeline:
    """Build a timeline straight from score provider records."""
    return build_timeline(normalize_games(records), pacing)


# =============================================================================
# PERIODS
# =============================================================================


def _all_period_events(
    horizon: Horizon, keys: Sequence[GoalKey], pacing: PacingConfig
) -> list[PeriodSequence]:
    return [
        *_numbered_period_events(horizon, keys, pacing),
        *_overtime_events(horizon, keys, pacing),
        *_shootout_events(horizon),
    ]


def _numbered_period_events(
    horizon: Horizon, keys: Sequence[GoalKey], pacing: PacingConfig
) -> list[PeriodSequence]:
    """Regulation periods plus any numbered playoff overtimes."""
    if horizon.period.is_numbered:
        last_period = horizon.period.number
        partial = not horizon.is_period_complete
    else:
        last_period = REGULATION_PERIODS
        partial = False

    sequences = []
    for number in range(1, last_period + 1):
        period = Period.numbered(number)
        cutoff = horizon if partial and number == last_period else None
        events = period_events(
            period, period.length_minutes, cutoff, keys, pacing.goal_multiplier, pacing.clock_step
        )
        sequences.append((period, events))
    return sequences


def _overtime_events(
    horizon: Horizon, keys: Sequence[GoalKey], pacing: PacingConfig
) -> list[PeriodSequence]:
    """Single regular-season overtime, played whenever the horizon got past it."""
    overtime = Period.overtime()
    if horizon.period != overtime and horizon.period.kind is not PeriodKind.SHOOTOUT:
        return []
    partial = horizon.period == overtime and not horizon.is_period_complete
    cutoff = horizon if partial else None
    events = period_events(
        overtime, overtime.length_minutes, cutoff, keys, pacing.goal_multiplier, pacing.clock_step
    )
    return [(overtime, events)]


def _shootout_events(horizon: Horizon) -> list[PeriodSequence]:
    if horizon.period.kind is not PeriodKind.SHOOTOUT:
        return []
    shootout = Period.shootout()
    # Shootouts have no game clock
    return [(shootout, [ClockState(shootout)])]
