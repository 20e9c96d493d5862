from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..core import EventStatistics, ReminderMessage, Slot, SnapshotImport
from ..domain import Event, Rejection
from .models import (
    EventPayload,
    RejectionPayload,
    ReminderPayload,
    SlotPayload,
    SnapshotImportPayload,
    StatisticsPayload,
)


def serialize_event(event: Event) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(by_alias=True)


def serialize_events(events: Iterable[Event]) -> List[Dict[str, Any]]:
    return [serialize_event(event) for event in events]


def serialize_slots(slots: Iterable[Slot]) -> List[Dict[str, Any]]:
    return [SlotPayload.from_domain(slot).model_dump() for slot in slots]


def serialize_rejection(rejection: Rejection) -> Dict[str, Any]:
    return RejectionPayload.from_domain(rejection).model_dump()


def serialize_statistics(stats: EventStatistics) -> Dict[str, Any]:
    return StatisticsPayload.from_domain(stats).model_dump()


def serialize_import(result: SnapshotImport) -> Dict[str, Any]:
    return SnapshotImportPayload.from_domain(result).model_dump()


def serialize_reminder(message: ReminderMessage) -> Dict[str, Any]:
    return ReminderPayload.from_domain(message).model_dump()
