"""Typed models shared across the timeline modules."""

from .schemas import (
    FinishedStatus,
    Game,
    GameState,
    Goal,
    LiveStatus,
    NotStartedStatus,
    Period,
    PeriodKind,
    Progress,
    Status,
)

__all__ = [
    "FinishedStatus",
    "Game",
    "GameState",
    "Goal",
    "LiveStatus",
    "NotStartedStatus",
    "Period",
    "PeriodKind",
    "Progress",
    "Status",
]
