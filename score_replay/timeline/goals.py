"""
Goal ordering and "has the clock passed this" queries.

All comparisons use a sort key of (period rank, elapsed minute, elapsed second).
A clock state is converted to elapsed time first, so a goal has been scored at
a clock state exactly when its key is less than or equal to the clock's key.
"""

from __future__ import annotations

from bisect import bisect_right
from collections import Counter
from typing import Iterable, Sequence

from ..errors import TimelineInvariantError
from ..models import Game, Goal, PeriodKind
from .clock_utils import PeriodClock, progress_time_remaining, remaining_to_elapsed
from .entries import ClockState, EndMarker, PeriodEndMarker, TimelineEntry

GoalKey = tuple[int, int, int]


def elapsed_key(time: PeriodClock) -> GoalKey:
    return (time.period.rank, time.minute or 0, time.second or 0)


def clock_key(clock: PeriodClock) -> GoalKey:
    return elapsed_key(remaining_to_elapsed(clock))


def has_elapsed_time_passed(clock: PeriodClock, elapsed_time: PeriodClock) -> bool:
    """True if the event at ``elapsed_time`` happened at or before ``clock``."""
    return elapsed_key(elapsed_time) <= clock_key(clock)


def has_goal_been_scored(clock: PeriodClock, goal: Goal) -> bool:
    return has_elapsed_time_passed(clock, goal)


# =============================================================================
# SHOOTOUTS
# =============================================================================


def decisive_shootout_goal(game: Game) -> Goal | None:
    """The last shootout goal of the side that won the shootout.

    Returns None when the game had no shootout or it is still level.
    """
    shootout_goals = [goal for goal in game.goals if goal.period.kind is PeriodKind.SHOOTOUT]
    if not shootout_goals:
        return None
    counts = Counter(goal.team for goal in shootout_goals)
    away, home = counts[game.away], counts[game.home]
    if away == home:
        return None
    winner = game.away if away > home else game.home
    return [goal for goal in shootout_goals if goal.team == winner][-1]


def scoring_goals(game: Game) -> list[Goal]:
    """Goals that count on the scoreboard: a shootout adds a single goal."""
    goals = [goal for goal in game.goals if goal.period.kind is not PeriodKind.SHOOTOUT]
    decisive = decisive_shootout_goal(game)
    if decisive is not None:
        goals.append(decisive)
    return goals


def goal_scoring_times(games: Iterable[Game]) -> list[Goal]:
    """All scoreboard goals of all games, in the order they were scored."""
    goals = [goal for game in games for goal in scoring_goals(game)]
    return sorted(goals, key=elapsed_key)


def goal_keys(goals_sorted: Sequence[Goal]) -> list[GoalKey]:
    keys = [elapsed_key(goal) for goal in goals_sorted]
    if any(later < earlier for earlier, later in zip(keys, keys[1:])):
        raise TimelineInvariantError("Goal scoring times are not in order")
    return keys


def goals_passed_count(clock: PeriodClock, keys: Sequence[GoalKey]) -> int:
    """Number of goals in ``keys`` (sorted) scored at or before ``clock``."""
    return bisect_right(keys, clock_key(clock))


# =============================================================================
# CLOCK QUERIES
# =============================================================================


def current_goals(entry: TimelineEntry | None, game: Game) -> list[Goal]:
    """Goals of ``game`` on the scoreboard when playback shows ``entry``."""
    if isinstance(entry, EndMarker):
        return scoring_goals(game)
    if not isinstance(entry, (ClockState, PeriodEndMarker)):
        return []
    if entry.period.kind is PeriodKind.SHOOTOUT:
        return scoring_goals(game)
    clock = _as_clock(entry)
    return [goal for goal in game.goals if has_goal_been_scored(clock, goal)]


def has_clock_passed_progress(entry: TimelineEntry | None, game: Game) -> bool:
    """True once playback has caught up with where a live game currently is."""
    if not isinstance(entry, (ClockState, PeriodEndMarker)):
        return False
    progress_time = progress_time_remaining(game)
    if progress_time is None:
        return False
    return has_elapsed_time_passed(_as_clock(entry), remaining_to_elapsed(progress_time))


def _as_clock(entry: ClockState | PeriodEndMarker) -> ClockState:
    if isinstance(entry, PeriodEndMarker):
        return ClockState(entry.period, 0, 0)
    return entry
