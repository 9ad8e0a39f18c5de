"""Normalization of score provider records into typed game models.

The provider sends one record per game with camelCase keys, goal times as
elapsed minutes/seconds and live progress as time remaining. Malformed records
fail fast: they mean the provider broke its data contract.
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from ..errors import ProgressParseError, TimelineGenerationError
from ..models import FinishedStatus, Game, Goal, LiveStatus, NotStartedStatus, Progress

# Provider game states mapped onto the three states the timeline cares about
PROVIDER_STATES = {
    "FINAL": "finished",
    "LIVE": "live",
    "PREVIEW": "not_started",
    "POSTPONED": "not_started",
}

END_OF_PERIOD = "END"
# "08:42", "8:42", ":42"
_TIME_REMAINING_RE = re.compile(r"^(\d+)?:(\d+)$")


def map_game_state(state: str | None) -> str:
    """Map a provider game state to not_started / live / finished."""
    if not state:
        return "not_started"
    try:
        return PROVIDER_STATES[state.strip().upper()]
    except KeyError:
        raise TimelineGenerationError(f"Unknown game state: {state!r}") from None


def parse_time_remaining(value: Any) -> tuple[int, int] | None:
    """
    Parse a live feed's time remaining into (minute, second).

    Accepts {"min": 8, "sec": 42}, "08:42" or "END". Returns None for the
    end of the period and raises ProgressParseError for anything else.
    """
    if isinstance(value, dict):
        try:
            return int(value["min"]), int(value["sec"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ProgressParseError(value) from exc
    if isinstance(value, str):
        text = value.strip()
        if text.upper() == END_OF_PERIOD:
            return None
        match = _TIME_REMAINING_RE.match(text)
        if match:
            return int(match.group(1) or 0), int(match.group(2))
    raise ProgressParseError(value)


def team_id(team: Any) -> str:
    """Teams come either as plain abbreviations or as {"abbreviation": ...}."""
    if isinstance(team, dict):
        team = team.get("abbreviation")
    if not team:
        raise TimelineGenerationError("Game record is missing a team")
    return str(team)


def normalize_progress(progress: dict[str, Any] | None) -> Progress | None:
    if not progress:
        return None
    remaining = parse_time_remaining(progress.get("currentPeriodTimeRemaining"))
    minute, second = remaining if remaining is not None else (None, None)
    return Progress(
        current_period=progress.get("currentPeriod"),
        ordinal=progress.get("currentPeriodOrdinal"),
        minute=minute,
        second=second,
    )


def normalize_status(status: dict[str, Any] | None) -> LiveStatus | FinishedStatus | NotStartedStatus:
    status = status or {}
    state = map_game_state(status.get("state"))
    if state == "live":
        return LiveStatus(progress=normalize_progress(status.get("progress")))
    if state == "finished":
        return FinishedStatus()
    return NotStartedStatus()


def normalize_goal(goal: dict[str, Any]) -> Goal:
    assists = tuple(
        name
        for name in (_player_name(goal.get("assist1")), _player_name(goal.get("assist2")))
        if name
    )
    return Goal(
        team=team_id(goal.get("team")),
        period=goal.get("period"),
        minute=goal.get("min", 0),
        second=goal.get("sec", 0),
        scorer=_player_name(goal.get("scorer")),
        assists=assists,
        strength=goal.get("strength"),
        empty_net=bool(goal.get("emptyNet", False)),
    )


def normalize_game(record: dict[str, Any]) -> Game:
    teams = record.get("teams") or {}
    pre_game_stats = record.get("preGameStats") or {}
    return Game(
        away=team_id(teams.get("away")),
        home=team_id(teams.get("home")),
        status=normalize_status(record.get("status")),
        goals=tuple(normalize_goal(goal) for goal in record.get("goals") or ()),
        is_playoff=bool(pre_game_stats.get("playoffSeries")),
    )


def normalize_games(records: Iterable[dict[str, Any]]) -> list[Game]:
    return [normalize_game(record) for record in records]


def _player_name(player: Any) -> str | None:
    # Scorer and assists are either names or {"player": name, "seasonTotal": n}
    if isinstance(player, dict):
        return player.get("player")
    return player
