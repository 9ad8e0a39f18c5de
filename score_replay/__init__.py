"""Playback timelines for replaying a day of hockey scores."""

from .config import PacingConfig, Settings, get_settings
from .errors import (
    InvalidPeriodError,
    ProgressParseError,
    TimelineGenerationError,
    TimelineInvariantError,
)
from .models import Game, Goal, Period, Progress
from .timeline import Timeline, build_timeline, build_timeline_from_records

__all__ = [
    "Game",
    "Goal",
    "InvalidPeriodError",
    "PacingConfig",
    "Period",
    "Progress",
    "ProgressParseError",
    "Settings",
    "Timeline",
    "TimelineGenerationError",
    "TimelineInvariantError",
    "build_timeline",
    "build_timeline_from_records",
    "get_settings",
]
