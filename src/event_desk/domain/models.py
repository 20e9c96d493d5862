from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional

TBA_LOCATION = "TBA"


@dataclass(frozen=True, slots=True)
class Event:
    id: int
    name: str
    date: str
    time: str
    event_type: str = ""
    location: str = ""

    @property
    def display_location(self) -> str:
        return self.location or TBA_LOCATION

    def matches_name(self, name: str) -> bool:
        return self.name.lower() == name.lower()

    def apply(self, update: "EventUpdate") -> "Event":
        """Return a copy with the fields present in ``update`` applied."""

        changes = {key: value for key, value in update.to_changes().items() if value is not None}
        return replace(self, **changes)


@dataclass(frozen=True, slots=True)
class EventDraft:
    name: str
    date: str
    time: str
    event_type: str = ""
    location: str = ""

    def with_id(self, event_id: int) -> Event:
        return Event(
            id=event_id,
            name=self.name,
            date=self.date,
            time=self.time,
            event_type=self.event_type,
            location=self.location,
        )


@dataclass(frozen=True, slots=True)
class EventUpdate:
    """Partial edit of an event. ``None`` keeps the current value."""

    name: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    event_type: Optional[str] = None
    location: Optional[str] = None

    def to_changes(self) -> Dict[str, Optional[str]]:
        return {
            "name": self.name,
            "date": self.date,
            "time": self.time,
            "event_type": self.event_type,
            "location": self.location,
        }
