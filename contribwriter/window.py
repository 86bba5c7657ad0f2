"""The rolling 53-week window of the activity graph and message placement."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

from .config import DAYS_PER_WEEK, WINDOW_WEEKS
from .errors import ConfigurationError

WINDOW_DAYS = WINDOW_WEEKS * DAYS_PER_WEEK


def sunday_on_or_before(d: date) -> date:
    # Python weekday: Mon=0..Sun=6. We want the prior or same Sunday.
    return d - timedelta(days=(d.weekday() + 1) % 7)


def _as_date(now: Union[date, datetime, None]) -> date:
    if now is None:
        return date.today()
    if isinstance(now, datetime):
        return now.date()
    return now


@dataclass(frozen=True)
class Window:
    """
    Calendar span [start, end) shown by the graph.

    `start` is always a Sunday and the span is exactly 53 whole weeks.
    """

    start: date
    end: date

    def contains(self, d: date) -> bool:
        return self.start <= d < self.end

    def week_of(self, d: date) -> int:
        return (d - self.start).days // DAYS_PER_WEEK

    def cell_date(self, week: int, day: int) -> date:
        return self.start + timedelta(days=week * DAYS_PER_WEEK + day)


def current_window(now: Union[date, datetime, None] = None) -> Window:
    """
    Window as of `now`: count 53 weeks back from tomorrow, then step back
    to the preceding Sunday.
    """
    tomorrow = _as_date(now) + timedelta(days=1)
    start = sunday_on_or_before(tomorrow - timedelta(days=WINDOW_DAYS))
    return Window(start=start, end=start + timedelta(days=WINDOW_DAYS))


def check_width(width: int, allow_overflow: bool = False) -> bool:
    """
    True when `width` fits the window. Raises ConfigurationError for an
    oversized message unless `allow_overflow` is set.
    """
    if width <= WINDOW_WEEKS:
        return True
    if not allow_overflow:
        raise ConfigurationError(
            f"Message is too wide ({width} weeks, the graph shows {WINDOW_WEEKS}). "
            f"Use --force-replace to override or shorten the message."
        )
    return False


def centered_offset(width: int) -> int:
    return (WINDOW_WEEKS - width) // 2


def place_centered(window: Window, width: int, allow_overflow: bool = False) -> date:
    """Start date that centers a `width`-week grid inside `window`."""
    if not check_width(width, allow_overflow):
        return window.start
    return window.start + timedelta(weeks=centered_offset(width))


def place_left_aligned(window: Window) -> date:
    return window.start


def place(window: Window, width: int, center: bool = True,
          allow_overflow: bool = False, start_date: Optional[date] = None) -> date:
    """
    Resolve the placement for one run: an explicit start date wins (moved
    back to its Sunday), then centering, then the left edge.
    """
    if start_date is not None:
        check_width(width, allow_overflow)
        return sunday_on_or_before(start_date)
    if center:
        return place_centered(window, width, allow_overflow)
    check_width(width, allow_overflow)
    return place_left_aligned(window)
