from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from ..domain import Event, EventDraft, EventUpdate, Rejection, RejectionReason, StoreResult
from .slots import Slot, suggest_slots
from .timeutils import EVENT_DURATION_MINUTES, overlaps
from .validation import validate_date, validate_time

logger = logging.getLogger(__name__)


class EventStore:
    """Ordered in-memory collection of events.

    The store owns every record and hands out immutable ``Event`` values, so
    callers can never observe a half-applied change. Access must be
    serialized by the caller.
    """

    def __init__(self, events: Iterable[Event] = (), next_id: Optional[int] = None) -> None:
        self._events: List[Event] = list(events)
        highest = max((event.id for event in self._events), default=0)
        self._next_id = max(next_id or 1, highest + 1)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(tuple(self._events))

    @property
    def events(self) -> tuple[Event, ...]:
        return tuple(self._events)

    @property
    def next_id(self) -> int:
        return self._next_id

    def get(self, event_id: int) -> Optional[Event]:
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    def is_duplicate(self, name: str, date: str, time: str, *, exclude_id: Optional[int] = None) -> bool:
        lowered = name.lower()
        return any(
            event.id != exclude_id and event.name.lower() == lowered and event.date == date and event.time == time
            for event in self._events
        )

    def find_conflict(self, candidate: Event, *, exclude_id: Optional[int] = None) -> Optional[Event]:
        for event in self._events:
            if event.id != exclude_id and overlaps(candidate, event):
                return event
        return None

    def _check(self, candidate: Event, *, exclude_id: Optional[int] = None) -> Optional[Rejection]:
        if not validate_date(candidate.date):
            return Rejection(RejectionReason.INVALID_DATE)
        if not validate_time(candidate.time):
            return Rejection(RejectionReason.INVALID_TIME)
        if not candidate.name.strip():
            return Rejection(RejectionReason.EMPTY_NAME)
        if self.is_duplicate(candidate.name, candidate.date, candidate.time, exclude_id=exclude_id):
            return Rejection(RejectionReason.DUPLICATE)
        conflict = self.find_conflict(candidate, exclude_id=exclude_id)
        if conflict is not None:
            return Rejection(RejectionReason.CONFLICT, conflicting_id=conflict.id)
        return None

    def add(self, draft: EventDraft) -> StoreResult:
        candidate = draft.with_id(self._next_id)
        rejection = self._check(candidate)
        if rejection is not None:
            logger.debug("Rejected new event %r: %s", draft.name, rejection.reason.value)
            return StoreResult(rejection=rejection)
        self._events.append(candidate)
        self._next_id += 1
        logger.debug("Added event %s (%s %s)", candidate.id, candidate.date, candidate.time)
        return StoreResult.accepted(candidate.id)

    def edit(self, event_id: int, update: EventUpdate) -> StoreResult:
        for index, current in enumerate(self._events):
            if current.id == event_id:
                break
        else:
            return StoreResult.rejected(RejectionReason.NOT_FOUND)

        candidate = current.apply(update)
        rejection = self._check(candidate, exclude_id=event_id)
        if rejection is not None:
            logger.debug("Rejected edit of event %s: %s", event_id, rejection.reason.value)
            return StoreResult(rejection=rejection)
        self._events[index] = candidate
        logger.debug("Updated event %s", event_id)
        return StoreResult.accepted(event_id)

    def delete_by_id(self, event_id: int) -> bool:
        remaining = [event for event in self._events if event.id != event_id]
        if len(remaining) == len(self._events):
            return False
        self._events = remaining
        return True

    def delete_by_name(self, name: str) -> bool:
        remaining = [event for event in self._events if not event.matches_name(name)]
        if len(remaining) == len(self._events):
            return False
        logger.debug("Deleted %d event(s) named %r", len(self._events) - len(remaining), name)
        self._events = remaining
        return True

    def suggest_slots(self, date: str, duration: int = EVENT_DURATION_MINUTES) -> List[Slot]:
        return suggest_slots(self._events, date, duration)

    def replace_all(self, events: Iterable[Event], next_id: int) -> None:
        self._events = list(events)
        self._next_id = next_id


__all__ = ["EventStore"]
