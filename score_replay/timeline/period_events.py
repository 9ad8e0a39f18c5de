"""
Clock ticks for one period of playback.

The clock counts down from the full period length in steps of a few seconds.
In the last minute of the 3rd period it switches to tenths of a second so the
end of regulation plays out slower. Ticks at which goals were scored are
repeated to hold the display on the scoring moment.
"""

from __future__ import annotations

from typing import Sequence

from ..errors import TimelineInvariantError
from ..models import Period
from .entries import ClockState
from .goals import GoalKey, goals_passed_count
from .horizon import Horizon

DEFAULT_CLOCK_STEP = 3


def period_clock_ticks(
    period: Period,
    duration_minutes: int,
    cutoff: Horizon | None = None,
    step: int = DEFAULT_CLOCK_STEP,
) -> list[ClockState]:
    """
    Clock states from the start of ``period`` down to its end or ``cutoff``.

    ``cutoff`` is the horizon when the period has only been partially played;
    a horizon covering the whole period is the same as no cutoff.
    """
    if cutoff is not None and cutoff.is_period_complete:
        cutoff = None
    last_minute = cutoff.minute if cutoff is not None else -1
    last_second = cutoff.second if cutoff is not None else -1

    def second_range(minute: int) -> range:
        range_end = last_second - 1 if minute == last_minute else -1
        return range(59, range_end, -step)

    second_ticks = [
        ClockState(period, minute, second)
        for minute in range(duration_minutes - 1, max(last_minute - 1, -1), -1)
        for second in second_range(minute)
    ]

    tenth_ticks: list[ClockState] = []
    if period.is_final_regulation:
        # The last minute of regulation runs in tenths of a second instead
        while second_ticks and second_ticks[-1].minute == 0:
            second_ticks.pop()
        if last_minute < 1:
            tenth_ticks = [
                ClockState(period, 0, second, tenth)
                for second in second_range(0)
                for tenth in range(9, -1, -step)
            ]

    period_start = ClockState(period, duration_minutes, 0)
    return [period_start, *second_ticks, *tenth_ticks]


def expand_goal_ticks(
    ticks: Sequence[ClockState],
    keys: Sequence[GoalKey],
    goal_multiplier: int,
) -> list[ClockState]:
    """
    Repeat each tick once more per goal scored since the previous tick, times
    ``goal_multiplier``. The first tick is always emitted once.
    """
    if not ticks:
        return []
    expanded = [ticks[0]]
    previous_count = goals_passed_count(ticks[0], keys)
    for tick in ticks[1:]:
        count = goals_passed_count(tick, keys)
        scored = count - previous_count
        if scored < 0:
            raise TimelineInvariantError(
                f"Clock went backwards at {tick}: goal count {previous_count} -> {count}"
            )
        expanded.extend([tick] * (1 + scored * goal_multiplier))
        previous_count = count
    return expanded


def period_events(
    period: Period,
    duration_minutes: int,
    cutoff: Horizon | None,
    keys: Sequence[GoalKey],
    goal_multiplier: int,
    step: int = DEFAULT_CLOCK_STEP,
) -> list[ClockState]:
    """Clock ticks of one period with goal pauses applied."""
    ticks = period_clock_ticks(period, duration_minutes, cutoff, step)
    return expand_goal_ticks(ticks, keys, goal_multiplier)
