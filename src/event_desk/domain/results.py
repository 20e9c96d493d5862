from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import RejectionReason

_MESSAGES = {
    RejectionReason.INVALID_DATE: "Invalid date. Use DD-MM-YYYY.",
    RejectionReason.INVALID_TIME: "Invalid time. Use HH:MM (24h).",
    RejectionReason.EMPTY_NAME: "Event name must not be empty.",
    RejectionReason.DUPLICATE: "Duplicate event exists.",
    RejectionReason.NOT_FOUND: "Event not found.",
}


@dataclass(frozen=True, slots=True)
class Rejection:
    reason: RejectionReason
    conflicting_id: Optional[int] = None

    @property
    def message(self) -> str:
        if self.reason is RejectionReason.CONFLICT:
            return f"Conflict with event ID {self.conflicting_id}."
        return _MESSAGES[self.reason]


@dataclass(frozen=True, slots=True)
class StoreResult:
    """Outcome of a store mutation: an event id or a rejection."""

    event_id: Optional[int] = None
    rejection: Optional[Rejection] = None

    @property
    def ok(self) -> bool:
        return self.rejection is None

    @classmethod
    def accepted(cls, event_id: int) -> "StoreResult":
        return cls(event_id=event_id)

    @classmethod
    def rejected(cls, reason: RejectionReason, conflicting_id: Optional[int] = None) -> "StoreResult":
        return cls(rejection=Rejection(reason=reason, conflicting_id=conflicting_id))
