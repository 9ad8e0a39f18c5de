"""
Horizon resolution: how far into game time the playback timeline reaches.

Each game contributes the furthest point it is known to have reached. Live
games report their progress; finished games are bounded by their last goal.
The timeline runs up to the most advanced of these points.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..logging import get_logger
from ..models import Game, GameState, Goal, Period, PeriodKind
from .clock_utils import elapsed_to_remaining, progress_period
from .goals import elapsed_key

logger = get_logger(__name__)


@dataclass(frozen=True)
class Horizon:
    """End point of the timeline, as time remaining in ``period``.

    ``minute``/``second`` are None when the whole period has been played.
    ``in_progress`` marks a horizon coming from a game that is still live.
    """

    period: Period
    minute: int | None = None
    second: int | None = None
    in_progress: bool = False

    @property
    def is_period_complete(self) -> bool:
        return self.minute is None

    def sort_key(self) -> tuple[int, int, int, bool]:
        # Less time remaining is later; a completed period counts as 0:00.
        # Ties go to the live game so the timeline is flagged as in progress.
        minute = 0 if self.minute is None else -self.minute
        second = 0 if self.second is None else -self.second
        return (self.period.rank, minute, second, self.in_progress)


def horizon_from_progress(game: Game) -> Horizon | None:
    period = progress_period(game)
    if period is None:
        logger.warning("live_game_without_progress", away=game.away, home=game.home)
        return None
    progress = game.status.progress
    if progress.is_period_end:
        return Horizon(period, in_progress=True)
    return Horizon(period, progress.minute, progress.second, in_progress=True)


def horizon_from_goals(goals: Iterable[Goal]) -> Horizon | None:
    last_goal = max(goals, key=elapsed_key, default=None)
    if last_goal is None:
        return None
    if last_goal.period.kind is PeriodKind.SHOOTOUT:
        return Horizon(Period.shootout())
    if last_goal.period.kind is PeriodKind.OVERTIME:
        remaining = elapsed_to_remaining(last_goal)
        return Horizon(remaining.period, remaining.minute, remaining.second)
    # Decided in regulation: the game ran to the end of the 3rd
    return Horizon(Period.regulation(3))


def game_horizon(game: Game) -> Horizon | None:
    """The furthest point ``game`` is known to have reached, or None."""
    if game.status.state == GameState.LIVE:
        return horizon_from_progress(game)
    # Every recorded goal counts here, including non-decisive shootout attempts
    return horizon_from_goals(game.goals)


def resolve_horizon(games: Iterable[Game]) -> Horizon | None:
    """The most advanced game horizon; None when no game has any."""
    horizons = [horizon for horizon in map(game_horizon, games) if horizon is not None]
    return max(horizons, key=Horizon.sort_key, default=None)
