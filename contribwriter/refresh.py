"""Dates at which a keep-in-view pattern should be regenerated."""

from datetime import date, datetime, timedelta
from typing import List, Union

from .config import DAYS_PER_WEEK, REFRESH_COUNT, REFRESH_INTERVAL_WEEKS


def first_refresh(start_date: date, width: int) -> date:
    """Six weeks before the message's last column."""
    return start_date + timedelta(days=(width - REFRESH_INTERVAL_WEEKS) * DAYS_PER_WEEK)


def refresh_schedule(start_date: date, width: int, now: Union[date, datetime, None] = None,
                     count: int = REFRESH_COUNT) -> List[date]:
    """
    `count` refresh dates spaced six weeks apart, none earlier than today.

    Triggers that already passed are rolled forward by whole intervals so
    the sequence keeps its phase relative to the placement.
    """
    today = now.date() if isinstance(now, datetime) else (now or date.today())
    step = timedelta(weeks=REFRESH_INTERVAL_WEEKS)
    nxt = first_refresh(start_date, width)
    if nxt < today:
        behind = (today - nxt).days
        intervals = -(-behind // step.days)
        nxt += step * intervals
    return [nxt + step * i for i in range(count)]
