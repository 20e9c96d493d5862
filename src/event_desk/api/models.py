from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core import EventStatistics, ReminderMessage, Slot, SnapshotImport
from ..domain import Event, Rejection


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    date: str
    time: str
    event_type: str = Field(default="", alias="type")
    location: str = Field(default="")
    display_location: str = Field(default="")

    @classmethod
    def from_domain(cls, event: Event) -> "EventPayload":
        return cls(
            id=event.id,
            name=event.name,
            date=event.date,
            time=event.time,
            event_type=event.event_type,
            location=event.location,
            display_location=event.display_location,
        )


class SlotPayload(BaseModel):
    start: str
    end: str

    @classmethod
    def from_domain(cls, slot: Slot) -> "SlotPayload":
        return cls(start=slot.start_time, end=slot.end_time)


class RejectionPayload(BaseModel):
    reason: str
    message: str
    conflicting_id: Optional[int] = Field(default=None)

    @classmethod
    def from_domain(cls, rejection: Rejection) -> "RejectionPayload":
        return cls(reason=rejection.reason.value, message=rejection.message, conflicting_id=rejection.conflicting_id)


class DateCount(BaseModel):
    date: str
    count: int


class StatisticsPayload(BaseModel):
    total: int
    by_type: Dict[str, int] = Field(default_factory=dict)
    top_dates: List[DateCount] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, stats: EventStatistics) -> "StatisticsPayload":
        return cls(
            total=stats.total,
            by_type=dict(stats.by_type),
            top_dates=[DateCount(date=date, count=count) for date, count in stats.top_dates],
        )


class SnapshotImportPayload(BaseModel):
    imported: int
    skipped: int
    next_id: Optional[int] = Field(default=None)

    @classmethod
    def from_domain(cls, result: SnapshotImport) -> "SnapshotImportPayload":
        return cls(imported=len(result.events), skipped=result.skipped, next_id=result.next_id)


class ReminderPayload(BaseModel):
    date: str
    subject: str
    body: str
    recipients: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, message: ReminderMessage) -> "ReminderPayload":
        return cls(date=message.date, subject=message.subject, body=message.body, recipients=list(message.recipients))
