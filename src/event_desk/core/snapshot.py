"""Plain-text snapshot of the event store.

The format is a header line followed by one comma-joined row per event::

    id,name,date,time,type,location
    1,Opening Talk,05-03-2025,09:00,Talk,Main Hall

Values are written verbatim. Commas inside a value are not escaped, so such
values do not survive a round trip; this keeps snapshots byte-compatible with
the ones users already have saved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..domain import Event
from .store import EventStore
from .validation import validate_date, validate_time

logger = logging.getLogger(__name__)

SNAPSHOT_HEADER = "id,name,date,time,type,location"
SNAPSHOT_FIELDS = SNAPSHOT_HEADER.split(",")


@dataclass
class SnapshotImport:
    events: List[Event] = field(default_factory=list)
    next_id: Optional[int] = None
    skipped: int = 0

    @property
    def imported(self) -> bool:
        return bool(self.events)


def _row(event: Event) -> str:
    values = [str(event.id), event.name, event.date, event.time, event.event_type, event.location]
    if any("," in value for value in values[1:]):
        logger.warning("Event %s contains a comma and will not restore cleanly from a snapshot", event.id)
    return ",".join(values)


def serialize(events: Iterable[Event]) -> str:
    lines = [SNAPSHOT_HEADER]
    lines.extend(_row(event) for event in events)
    return "".join(f"{line}\n" for line in lines)


def _parse_id(token: str) -> int:
    try:
        return int(token.strip())
    except ValueError:
        return 0


def _parse_row(line: str) -> Optional[Event]:
    tokens = line.split(",")[: len(SNAPSHOT_FIELDS)]
    tokens += [""] * (len(SNAPSHOT_FIELDS) - len(tokens))
    raw_id, name, date, time, event_type, location = tokens
    event_id = _parse_id(raw_id)
    if event_id <= 0 or not name.strip() or not validate_date(date) or not validate_time(time):
        return None
    return Event(id=event_id, name=name, date=date, time=time, event_type=event_type, location=location)


def deserialize(text: str) -> SnapshotImport:
    """Parse snapshot text, dropping rows that fail validation."""

    result = SnapshotImport()
    seen_ids: set[int] = set()
    for raw_line in text.split("\n"):
        line = raw_line.rstrip("\r")
        if not line.strip() or "," not in line:
            continue
        if line.strip().lower() == SNAPSHOT_HEADER:
            continue
        event = _parse_row(line)
        if event is None or event.id in seen_ids:
            result.skipped += 1
            continue
        seen_ids.add(event.id)
        result.events.append(event)
    if result.events:
        result.next_id = max(seen_ids) + 1
    return result


def import_snapshot(store: EventStore, text: str) -> SnapshotImport:
    """Replace the store contents with the valid rows of ``text``.

    The store is left untouched when no row survives validation.
    """

    result = deserialize(text)
    if not result.imported:
        logger.info("Snapshot import found no valid rows (%d skipped)", result.skipped)
        return result
    assert result.next_id is not None
    store.replace_all(result.events, result.next_id)
    logger.info(
        "Imported %d event(s) from snapshot, %d skipped, next id %d",
        len(result.events),
        result.skipped,
        result.next_id,
    )
    return result


__all__ = ["SNAPSHOT_HEADER", "SnapshotImport", "deserialize", "import_snapshot", "serialize"]
