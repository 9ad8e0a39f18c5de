"""Tests for score_replay.timeline.period_events."""

from __future__ import annotations

import pytest

from conftest import make_goal
from score_replay.errors import TimelineInvariantError
from score_replay.models import Period
from score_replay.timeline.entries import ClockState
from score_replay.timeline.goals import goal_keys
from score_replay.timeline.horizon import Horizon
from score_replay.timeline.period_events import (
    expand_goal_ticks,
    period_clock_ticks,
    period_events,
)

P1 = Period.regulation(1)
P2 = Period.regulation(2)
P3 = Period.regulation(3)
OT = Period.overtime()


class TestPeriodClockTicks:
    def test_full_period(self):
        ticks = period_clock_ticks(P1, 20)
        assert len(ticks) == 401
        assert ticks[0] == ClockState(P1, 20, 0)
        assert ticks[1] == ClockState(P1, 19, 59)
        assert ticks[2] == ClockState(P1, 19, 56)
        assert ticks[-1] == ClockState(P1, 0, 2)

    def test_overtime_period(self):
        ticks = period_clock_ticks(OT, 5)
        assert len(ticks) == 101
        assert ticks[0] == ClockState(OT, 5, 0)
        assert ticks[-1] == ClockState(OT, 0, 2)
        assert all(tick.tenth_of_second is None for tick in ticks)

    def test_third_period_last_minute_in_tenths(self):
        ticks = period_clock_ticks(P3, 20)
        assert len(ticks) == 1 + 380 + 80
        assert ticks[-81] == ClockState(P3, 1, 2)
        assert ticks[-80] == ClockState(P3, 0, 59, 9)
        assert ticks[-79] == ClockState(P3, 0, 59, 6)
        assert ticks[-1] == ClockState(P3, 0, 2, 0)
        assert not [tick for tick in ticks if tick.minute == 0 and tick.tenth_of_second is None]

    def test_numbered_overtime_has_no_tenths(self):
        ticks = period_clock_ticks(Period.overtime(4), 20)
        assert len(ticks) == 401
        assert ticks[-1] == ClockState(Period.overtime(4), 0, 2)

    def test_cutoff_mid_period(self):
        ticks = period_clock_ticks(P2, 20, Horizon(P2, 10, 30, in_progress=True))
        assert ticks[-1] == ClockState(P2, 10, 32)
        assert ClockState(P2, 10, 29) not in ticks

    def test_cutoff_aligned_with_step(self):
        ticks = period_clock_ticks(OT, 5, Horizon(OT, 2, 5))
        assert ticks[-1] == ClockState(OT, 2, 5)

    def test_complete_period_cutoff_is_ignored(self):
        ticks = period_clock_ticks(P2, 20, Horizon(P2, in_progress=True))
        assert ticks == period_clock_ticks(P2, 20)

    def test_cutoff_in_last_minute_of_regulation(self):
        ticks = period_clock_ticks(P3, 20, Horizon(P3, 0, 53, in_progress=True))
        assert ticks[-12:] == [
            ClockState(P3, 0, second, tenth) for second in (59, 56, 53) for tenth in (9, 6, 3, 0)
        ]

    def test_cutoff_before_last_minute_of_regulation(self):
        ticks = period_clock_ticks(P3, 20, Horizon(P3, 5, 20, in_progress=True))
        assert ticks[-1] == ClockState(P3, 5, 20)
        assert [tick.second for tick in ticks if tick.minute == 5] == list(range(59, 19, -3))
        assert all(tick.tenth_of_second is None for tick in ticks)

    def test_custom_step(self):
        ticks = period_clock_ticks(OT, 5, step=10)
        assert ticks[1:7] == [ClockState(OT, 4, second) for second in (59, 49, 39, 29, 19, 9)]


class TestExpandGoalTicks:
    def test_goal_tick_repeated(self):
        ticks = period_clock_ticks(P1, 20)
        keys = goal_keys([make_goal("BOS", 1, 0, 4)])
        expanded = expand_goal_ticks(ticks, keys, goal_multiplier=5)
        assert len(expanded) == len(ticks) + 5
        assert expanded.count(ClockState(P1, 19, 56)) == 6
        assert expanded.count(ClockState(P1, 19, 59)) == 1

    def test_goals_between_ticks_counted_once_each(self):
        ticks = period_clock_ticks(P1, 20)
        keys = goal_keys([make_goal("BOS", 1, 0, 2), make_goal("NYR", 1, 0, 3)])
        expanded = expand_goal_ticks(ticks, keys, goal_multiplier=2)
        assert expanded.count(ClockState(P1, 19, 56)) == 5

    def test_zero_multiplier(self):
        ticks = period_clock_ticks(P1, 20)
        keys = goal_keys([make_goal("BOS", 1, 0, 4)])
        assert expand_goal_ticks(ticks, keys, goal_multiplier=0) == ticks

    def test_earlier_period_goals_do_not_expand(self):
        ticks = period_clock_ticks(P2, 20)
        keys = goal_keys([make_goal("BOS", 1, 10, 0), make_goal("NYR", 1, 19, 59)])
        assert expand_goal_ticks(ticks, keys, goal_multiplier=5) == ticks

    def test_first_tick_never_expanded(self):
        ticks = [ClockState(P2, 20, 0), ClockState(P2, 19, 59)]
        keys = goal_keys([make_goal("BOS", 2, 0, 0)])
        assert expand_goal_ticks(ticks, keys, goal_multiplier=5) == ticks

    def test_no_ticks(self):
        assert expand_goal_ticks([], [], goal_multiplier=5) == []

    def test_clock_going_backwards_fails(self):
        ticks = [ClockState(P1, 10, 0), ClockState(P1, 15, 0)]
        keys = goal_keys([make_goal("BOS", 1, 7, 0)])
        with pytest.raises(TimelineInvariantError):
            expand_goal_ticks(ticks, keys, goal_multiplier=1)


class TestPeriodEvents:
    def test_combines_ticks_and_goal_pauses(self):
        keys = goal_keys([make_goal("BOS", "OT", 2, 55)])
        events = period_events(OT, 5, Horizon(OT, 2, 5), keys, goal_multiplier=3)
        assert events[-4:] == [ClockState(OT, 2, 5)] * 4
        assert events[0] == ClockState(OT, 5, 0)
