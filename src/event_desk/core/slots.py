from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from ..domain import Event
from .timeutils import EVENT_DURATION_MINUTES, from_minutes, occupied_interval

WORKDAY_START = 8 * 60
WORKDAY_END = 20 * 60
SLOT_STEP_MINUTES = 30
MAX_SUGGESTIONS = 5


@dataclass(frozen=True, slots=True)
class Slot:
    start: int
    end: int

    @property
    def start_time(self) -> str:
        return from_minutes(self.start)

    @property
    def end_time(self) -> str:
        return from_minutes(self.end)

    def __str__(self) -> str:
        return f"{self.start_time}-{self.end_time}"


def suggest_slots(events: Iterable[Event], date: str, duration: int = EVENT_DURATION_MINUTES) -> List[Slot]:
    """Greedy scan of the working window for free slots on ``date``.

    Candidates start at 08:00 and advance in 30 minute steps; a candidate is
    kept when ``[t, t + duration)`` misses every booked interval and ends by
    20:00. At most five slots are returned, earliest first. An empty list
    means the day has no room.
    """

    if duration <= 0:
        raise ValueError("duration must be a positive number of minutes")

    booked = sorted(occupied_interval(event) for event in events if event.date == date)
    suggestions: list[Slot] = []
    start = WORKDAY_START
    while start + duration <= WORKDAY_END and len(suggestions) < MAX_SUGGESTIONS:
        end = start + duration
        if all(end <= busy_start or start >= busy_end for busy_start, busy_end in booked):
            suggestions.append(Slot(start=start, end=end))
        start += SLOT_STEP_MINUTES
    return suggestions


__all__ = ["MAX_SUGGESTIONS", "SLOT_STEP_MINUTES", "Slot", "WORKDAY_END", "WORKDAY_START", "suggest_slots"]
