"""
Playback timeline package.

Public API:
- build_timeline: Timeline for a list of games
- build_timeline_from_records: Timeline straight from score provider records
- resolve_horizon: Furthest point any game has reached
- current_goals / has_clock_passed_progress: Queries for a timeline entry

Modules:
- generator.py: Timeline assembly
- period_events.py: Per-period clock ticks and goal pauses
- horizon.py: Horizon resolution
- goals.py: Goal ordering and clock comparisons
- clock_utils.py: Remaining/elapsed time conversion
- entries.py: Timeline entry types
"""

from .clock_utils import PeriodTime, elapsed_to_remaining, remaining_to_elapsed
from .entries import (
    ClockState,
    EndMarker,
    PeriodEndMarker,
    StartMarker,
    Timeline,
    TimelineEntry,
)
from .generator import build_timeline, build_timeline_from_records
from .goals import (
    current_goals,
    decisive_shootout_goal,
    goal_scoring_times,
    goals_passed_count,
    has_clock_passed_progress,
    has_elapsed_time_passed,
    has_goal_been_scored,
)
from .horizon import Horizon, game_horizon, resolve_horizon
from .period_events import expand_goal_ticks, period_clock_ticks, period_events

__all__ = [
    # Main API
    "build_timeline",
    "build_timeline_from_records",
    # Entries
    "ClockState",
    "EndMarker",
    "PeriodEndMarker",
    "StartMarker",
    "Timeline",
    "TimelineEntry",
    # Horizon
    "Horizon",
    "game_horizon",
    "resolve_horizon",
    # Periods
    "expand_goal_ticks",
    "period_clock_ticks",
    "period_events",
    # Goals
    "current_goals",
    "decisive_shootout_goal",
    "goal_scoring_times",
    "goals_passed_count",
    "has_clock_passed_progress",
    "has_elapsed_time_passed",
    "has_goal_been_scored",
    # Clock
    "PeriodTime",
    "elapsed_to_remaining",
    "remaining_to_elapsed",
]
