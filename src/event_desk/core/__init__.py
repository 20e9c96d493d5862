"""Event engine: validation, time arithmetic, store, queries, slots and snapshots."""

from .queries import EventStatistics, day_view, list_all, search, statistics, todays_events
from .reminders import ReminderMessage, build_reminder, parse_attendee_emails
from .slots import Slot, suggest_slots
from .snapshot import SNAPSHOT_HEADER, SnapshotImport, deserialize, import_snapshot, serialize
from .store import EventStore
from .timeutils import EVENT_DURATION_MINUTES, date_sort_key, from_minutes, overlaps, to_minutes, today
from .validation import is_leap_year, validate_date, validate_time

__all__ = [
    "EVENT_DURATION_MINUTES",
    "SNAPSHOT_HEADER",
    "EventStatistics",
    "EventStore",
    "ReminderMessage",
    "Slot",
    "SnapshotImport",
    "build_reminder",
    "date_sort_key",
    "day_view",
    "deserialize",
    "from_minutes",
    "import_snapshot",
    "is_leap_year",
    "list_all",
    "overlaps",
    "parse_attendee_emails",
    "search",
    "serialize",
    "statistics",
    "suggest_slots",
    "to_minutes",
    "today",
    "todays_events",
    "validate_date",
    "validate_time",
]
