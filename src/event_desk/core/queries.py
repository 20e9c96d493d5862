from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ..domain import Event
from .timeutils import date_sort_key, to_minutes
from .timeutils import today as current_date

TOP_DATES_LIMIT = 5


@dataclass(frozen=True)
class EventStatistics:
    total: int
    by_type: Dict[str, int] = field(default_factory=dict)
    top_dates: List[Tuple[str, int]] = field(default_factory=list)


def list_all(events: Iterable[Event]) -> List[Event]:
    return sorted(events, key=lambda event: (date_sort_key(event.date), to_minutes(event.time)))


def day_view(events: Iterable[Event], date: str) -> List[Event]:
    return sorted((event for event in events if event.date == date), key=lambda event: to_minutes(event.time))


def todays_events(events: Iterable[Event], today: Optional[str] = None) -> List[Event]:
    return day_view(events, today or current_date())


def search(events: Iterable[Event], keyword: str) -> List[Event]:
    """Events whose name or type contains ``keyword``, ignoring case, by id."""

    needle = keyword.lower()
    matches = [event for event in events if needle in event.name.lower() or needle in event.event_type.lower()]
    return sorted(matches, key=lambda event: event.id)


def statistics(events: Iterable[Event]) -> EventStatistics:
    by_type: Counter[str] = Counter()
    by_date: Counter[str] = Counter()
    total = 0
    for event in events:
        total += 1
        by_type[event.event_type] += 1
        by_date[event.date] += 1
    # ties fall back to ascending date string
    ranked = sorted(by_date.items(), key=lambda item: (-item[1], item[0]))
    return EventStatistics(total=total, by_type=dict(by_type), top_dates=ranked[:TOP_DATES_LIMIT])


__all__ = ["EventStatistics", "TOP_DATES_LIMIT", "day_view", "list_all", "search", "statistics", "todays_events"]
