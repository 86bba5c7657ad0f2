"""Tests for commit timestamp scheduling."""

import os
import time
from datetime import date, timedelta, timezone

import pytest

from contribwriter.config import INTENSITY_LEVELS
from contribwriter.grid import Grid, compose
from contribwriter.schedule import (RandomJitter, active_dates, even_jitter, expand_day,
                                    hour_for, schedule)

START = date(2026, 1, 4)


def single_cell(day=0, week=0, width=1):
    rows = [[0] * width for _ in range(7)]
    rows[day][week] = 1
    return Grid(rows=tuple(tuple(r) for r in rows))


class TestActiveDates:
    def test_day_and_week_offsets(self):
        grid = single_cell(day=3, week=2, width=3)
        assert active_dates(grid, START) == [START + timedelta(days=17)]

    def test_sorted(self):
        dates = active_dates(compose("AI"), START)
        assert dates == sorted(dates)
        assert len(dates) == compose("AI").active_count


class TestSchedule:
    def test_ultra_with_eleven_cells_gives_275(self):
        grid = compose("L")
        assert grid.active_count == 11
        commits = schedule(grid, START, INTENSITY_LEVELS['ultra'], use_utc=True, jitter=RandomJitter(1))
        assert len(commits) == 275

    @pytest.mark.parametrize("per_day", [1, 3, 24, 25, 30])
    def test_length_and_order(self, per_day):
        grid = compose("AWS")
        commits = schedule(grid, START, per_day, use_utc=True, jitter=RandomJitter(7))
        assert len(commits) == grid.active_count * per_day
        stamps = [c.timestamp for c in commits]
        assert stamps == sorted(stamps)
        assert [c.index for c in commits] == list(range(1, len(commits) + 1))

    def test_hours_follow_spread_formula(self):
        commits = schedule(single_cell(), START, 25, use_utc=True, jitter=even_jitter)
        assert [c.timestamp.hour for c in commits] == [i * 24 // 25 for i in range(25)]

    def test_timestamps_stay_on_their_day(self):
        grid = compose("HI")
        commits = schedule(grid, START, 30, use_utc=True, jitter=RandomJitter(3))
        days = set(active_dates(grid, START))
        assert {c.timestamp.date() for c in commits} == days

    def test_utc_semantics(self):
        commits = schedule(single_cell(), START, 3, use_utc=True, jitter=even_jitter)
        assert all(c.timestamp.tzinfo is timezone.utc for c in commits)

    def test_local_semantics(self):
        commits = schedule(single_cell(), START, 3, use_utc=False, jitter=even_jitter)
        for c in commits:
            assert c.timestamp.tzinfo is not None
            assert c.timestamp.date() == START

    def test_seeded_jitter_is_reproducible(self):
        a = schedule(compose("AI"), START, 5, use_utc=True, jitter=RandomJitter(42))
        b = schedule(compose("AI"), START, 5, use_utc=True, jitter=RandomJitter(42))
        assert a == b

    def test_empty_grid_gives_empty_schedule(self):
        assert schedule(compose(""), START, 25) == []
        assert schedule(compose("   "), START, 25) == []

    def test_rejects_zero_commits(self):
        with pytest.raises(ValueError):
            schedule(single_cell(), START, 0)


class TestJitter:
    def test_even_jitter_within_hour(self):
        for n in (1, 7, 24, 25, 30):
            for i in range(n):
                minute, second = even_jitter(i, n)
                assert 0 <= minute < 60 and 0 <= second < 60

    def test_random_jitter_range(self):
        jitter = RandomJitter(0)
        for i in range(100):
            minute, second = jitter(i, 25)
            assert 0 <= minute < 60 and 0 <= second < 60

    def test_hour_for(self):
        assert hour_for(0, 25) == 0
        assert hour_for(24, 25) == 23
        assert hour_for(1, 3) == 8
        assert hour_for(2, 3) == 16

    def test_expand_day(self):
        stamps = expand_day(START, 4, use_utc=True, jitter=even_jitter)
        assert [s.hour for s in stamps] == [0, 6, 12, 18]


@pytest.fixture
def eastern_time():
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available")
    saved = os.environ.get("TZ")
    os.environ["TZ"] = "EST5EDT,M3.2.0,M11.1.0"
    time.tzset()
    yield
    if saved is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = saved
    time.tzset()


class TestDaylightSaving:
    SPRING_FORWARD = date(2026, 3, 8)

    def test_skipped_hour_moves_forward_on_same_day(self, eastern_time):
        stamps = expand_day(self.SPRING_FORWARD, 24, use_utc=False, jitter=even_jitter)
        assert [s.hour for s in stamps] == [0, 1, 3] + list(range(3, 24))
        assert all(s.date() == self.SPRING_FORWARD for s in stamps)
        assert stamps[2] == stamps[3]

    def test_schedule_stays_ordered_across_the_jump(self, eastern_time):
        commits = schedule(single_cell(), self.SPRING_FORWARD, 24, use_utc=False, jitter=even_jitter)
        stamps = [c.timestamp for c in commits]
        assert stamps == sorted(stamps)
        assert {s.utcoffset() for s in stamps} == {timedelta(hours=-5), timedelta(hours=-4)}
