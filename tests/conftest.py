"""Shared pytest fixtures and configuration."""

from __future__ import annotations

import os

import pytest

# Set environment before the package configures settings and logging
os.environ.setdefault("ENVIRONMENT", "development")

from score_replay.config import PacingConfig  # noqa: E402
from score_replay.models import (  # noqa: E402
    FinishedStatus,
    Game,
    Goal,
    LiveStatus,
    NotStartedStatus,
    Progress,
)


def make_goal(team: str, period, minute: int, second: int) -> Goal:
    return Goal(team=team, period=period, minute=minute, second=second)


def finished_game(*goals: Goal, away: str = "BOS", home: str = "NYR", playoff: bool = False) -> Game:
    return Game(away=away, home=home, status=FinishedStatus(), goals=goals, is_playoff=playoff)


def live_game(
    period,
    minute: int | None,
    second: int | None,
    *goals: Goal,
    ordinal: str | None = None,
    away: str = "TOR",
    home: str = "MTL",
    playoff: bool = False,
) -> Game:
    progress = Progress(current_period=period, ordinal=ordinal, minute=minute, second=second)
    return Game(
        away=away,
        home=home,
        status=LiveStatus(progress=progress),
        goals=goals,
        is_playoff=playoff,
    )


def not_started_game(away: str = "EDM", home: str = "CGY") -> Game:
    return Game(away=away, home=home, status=NotStartedStatus())


@pytest.fixture
def unit_pacing() -> PacingConfig:
    """Every pause lasts a single entry."""
    return PacingConfig(start_multiplier=1, period_end_multiplier=1, goal_multiplier=1, clock_step=3)


@pytest.fixture
def sample_live_record() -> dict:
    """Sample score provider record for a live game."""
    return {
        "teams": {"away": {"abbreviation": "BOS"}, "home": {"abbreviation": "NYR"}},
        "status": {
            "state": "LIVE",
            "progress": {
                "currentPeriod": 2,
                "currentPeriodOrdinal": "2nd",
                "currentPeriodTimeRemaining": {"pretty": "08:42", "min": 8, "sec": 42},
            },
        },
        "goals": [
            {
                "team": "NYR",
                "period": "1",
                "min": 11,
                "sec": 16,
                "scorer": {"player": "Chris Kreider", "seasonTotal": 12},
                "assist1": {"player": "Mika Zibanejad", "seasonTotal": 20},
                "strength": "PPG",
            },
            {"team": "BOS", "period": 2, "min": 3, "sec": 7, "scorer": "David Pastrnak", "emptyNet": False},
        ],
        "preGameStats": {},
    }
