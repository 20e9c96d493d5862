from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..core import (
    EVENT_DURATION_MINUTES,
    EventStatistics,
    EventStore,
    ReminderMessage,
    Slot,
    SnapshotImport,
    build_reminder,
    day_view,
    import_snapshot,
    list_all,
    parse_attendee_emails,
    search,
    serialize,
    statistics,
    todays_events,
    validate_date,
)
from ..domain import Event, EventDraft, EventUpdate, RejectionReason, StoreResult
from .auth import AuthContext
from .context import ServiceContext

logger = logging.getLogger(__name__)


def _require_date(date: str) -> str:
    if not validate_date(date):
        raise ValueError(f"Invalid date {date!r}. Use DD-MM-YYYY.")
    return date


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext

    @property
    def store(self) -> EventStore:
        return self.context.store

    def list_events(self) -> List[Event]:
        return list_all(self.store)

    def day_view(self, date: str) -> List[Event]:
        return day_view(self.store, _require_date(date))

    def todays_events(self, today: Optional[str] = None) -> List[Event]:
        return todays_events(self.store, today)

    def search(self, keyword: str) -> List[Event]:
        return search(self.store, keyword)

    def get_event(self, event_id: int) -> Optional[Event]:
        return self.store.get(event_id)

    def suggest_slots(self, date: str, duration: int = EVENT_DURATION_MINUTES) -> List[Slot]:
        return self.store.suggest_slots(_require_date(date), duration)

    def suggestions_for(self, result: StoreResult, date: str) -> List[Slot]:
        """Free slots to offer after a conflicting add or edit."""

        if result.rejection is None or result.rejection.reason is not RejectionReason.CONFLICT:
            return []
        return self.store.suggest_slots(date)

    def add_event(self, auth: AuthContext, draft: EventDraft) -> StoreResult:
        auth.require_admin("add event")
        result = self.store.add(draft)
        if result.ok:
            logger.info("%s added event %s (%s)", auth.username, result.event_id, draft.name)
        else:
            logger.info("%s could not add %r: %s", auth.username, draft.name, result.rejection.message)
        return result

    def edit_event(self, auth: AuthContext, event_id: int, update: EventUpdate) -> StoreResult:
        auth.require_admin("edit event")
        result = self.store.edit(event_id, update)
        if result.ok:
            logger.info("%s updated event %s", auth.username, event_id)
        else:
            logger.info("%s could not update event %s: %s", auth.username, event_id, result.rejection.message)
        return result

    def delete_event(self, auth: AuthContext, event_id: int) -> bool:
        auth.require_admin("delete event")
        deleted = self.store.delete_by_id(event_id)
        if deleted:
            logger.info("%s deleted event %s", auth.username, event_id)
        return deleted

    def delete_events_named(self, auth: AuthContext, name: str) -> bool:
        auth.require_admin("delete events by name")
        deleted = self.store.delete_by_name(name)
        if deleted:
            logger.info("%s deleted events named %r", auth.username, name)
        return deleted

    def statistics(self, auth: AuthContext) -> EventStatistics:
        auth.require_admin("statistics")
        return statistics(self.store)

    def export_snapshot(self, auth: AuthContext) -> str:
        auth.require_admin("export snapshot")
        return serialize(self.store)

    def import_snapshot(self, auth: AuthContext, text: str) -> SnapshotImport:
        auth.require_admin("import snapshot")
        return import_snapshot(self.store, text)

    def load_attendees(self, auth: AuthContext, text: str) -> List[str]:
        auth.require_admin("load attendees")
        self.context.attendees = parse_attendee_emails(text)
        logger.info("Loaded %d attendee email(s)", len(self.context.attendees))
        return list(self.context.attendees)

    def send_reminders(self, auth: AuthContext, date: str) -> Optional[ReminderMessage]:
        """Compose the reminder for ``date`` and simulate sending it.

        Returns ``None`` when there is nothing to send on that date. Raises
        ``ValueError`` when no attendees have been loaded.
        """

        auth.require_admin("send reminders")
        _require_date(date)
        if not day_view(self.store, date):
            return None
        if not self.context.attendees:
            raise ValueError("No attendee emails loaded. Load attendees first.")
        message = build_reminder(self.store, date, self.context.attendees)
        logger.info("[SIMULATED EMAIL SEND] %r to %d recipient(s)", message.subject, len(message.recipients))
        return message
