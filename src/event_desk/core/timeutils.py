from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..domain import Event

EVENT_DURATION_MINUTES = 60
MINUTES_PER_DAY = 24 * 60


def to_minutes(time: str) -> int:
    """Minute of day for a validated ``HH:MM`` string."""
    return int(time[0:2]) * 60 + int(time[3:5])


def from_minutes(minutes: int) -> str:
    if minutes < 0:
        minutes = 0
    minutes %= MINUTES_PER_DAY
    hours, remainder = divmod(minutes, 60)
    return f"{hours:02d}:{remainder:02d}"


def occupied_interval(event: Event) -> tuple[int, int]:
    start = to_minutes(event.time)
    return start, start + EVENT_DURATION_MINUTES


def overlaps(first: Event, second: Event) -> bool:
    if first.date != second.date:
        return False
    start_a, end_a = occupied_interval(first)
    start_b, end_b = occupied_interval(second)
    return start_a < end_b and start_b < end_a


def date_sort_key(date: str) -> str:
    """``DD-MM-YYYY`` to ``YYYYMMDD`` so string order follows the calendar."""
    return date[6:10] + date[3:5] + date[0:2]


def today(now: Optional[datetime] = None) -> str:
    return (now or datetime.now()).strftime("%d-%m-%Y")


__all__ = [
    "EVENT_DURATION_MINUTES",
    "MINUTES_PER_DAY",
    "date_sort_key",
    "from_minutes",
    "occupied_interval",
    "overlaps",
    "to_minutes",
    "today",
]
