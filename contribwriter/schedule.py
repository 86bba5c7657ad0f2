"""
Turn the on cells of a grid into an ordered list of commit timestamps.

Each active day receives `commits_per_day` commits spread over its 24
hours: commit i lands in hour floor(i * 24 / commits_per_day). The minute
and second inside that hour come from a jitter callable so tests can swap
randomness for a fixed rule.
"""

import random
from datetime import date, datetime, timedelta, timezone
from typing import Callable, List, NamedTuple, Optional, Tuple

from .config import DAYS_PER_WEEK
from .grid import Grid

SECONDS_PER_DAY = 24 * 60 * 60

Jitter = Callable[[int, int], Tuple[int, int]]


class ScheduledCommit(NamedTuple):
    timestamp: datetime
    index: int


class RandomJitter:
    """Random minute/second inside the hour, reproducible with a seed."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def __call__(self, index: int, commits_per_day: int) -> Tuple[int, int]:
        return self.rng.randrange(60), self.rng.randrange(60)


def even_jitter(index: int, commits_per_day: int) -> Tuple[int, int]:
    """Space commits evenly over the day; deterministic."""
    offset = (index * SECONDS_PER_DAY // commits_per_day) % 3600
    return divmod(offset, 60)


def hour_for(index: int, commits_per_day: int) -> int:
    return (index * 24 // commits_per_day) % 24


def active_dates(grid: Grid, start_date: date) -> List[date]:
    """Calendar date of every on cell, in ascending order."""
    return sorted(
        start_date + timedelta(days=week * DAYS_PER_WEEK + day)
        for week, day in grid.active_cells()
    )


def expand_day(day: date, commits_per_day: int, use_utc: bool = False,
               jitter: Optional[Jitter] = None) -> List[datetime]:
    """
    Timestamps for one active day. Local wall times that a daylight saving
    jump skips do not exist; they are moved forward by the size of the gap
    (02:30 becomes 03:30), the way the clock reads at that instant.
    """
    jitter = jitter or RandomJitter()
    stamps = []
    for i in range(commits_per_day):
        minute, second = jitter(i, commits_per_day)
        ts = datetime(day.year, day.month, day.day, hour_for(i, commits_per_day), minute, second)
        if use_utc:
            stamps.append(ts.replace(tzinfo=timezone.utc))
        else:
            stamps.append(to_local(ts))
    return stamps


def to_local(ts: datetime) -> datetime:
    """
    Attach the local offset to naive `ts`. fold=0 reads a skipped wall time
    with the offset in force before the jump, which lands after it, and
    picks the first of two repeated wall times.
    """
    return ts.replace(fold=0).astimezone()


def schedule(grid: Grid, start_date: date, commits_per_day: int,
             use_utc: bool = False, jitter: Optional[Jitter] = None) -> List[ScheduledCommit]:
    """
    Build the full commit schedule for `grid` placed at `start_date`.

    The result is sorted by timestamp so history is created in chronological
    order; `index` is the 1-based position in that order.
    """
    if commits_per_day < 1:
        raise ValueError(f"commits_per_day must be >= 1, got {commits_per_day}")
    jitter = jitter or RandomJitter()
    stamps = []
    for day in active_dates(grid, start_date):
        stamps.extend(expand_day(day, commits_per_day, use_utc, jitter))
    stamps.sort()
    return [ScheduledCommit(ts, i) for i, ts in enumerate(stamps, 1)]
