"""Domain records for the event desk."""

from __future__ import annotations

from .enums import RejectionReason
from .models import TBA_LOCATION, Event, EventDraft, EventUpdate
from .results import Rejection, StoreResult

__all__ = [
    "Event",
    "EventDraft",
    "EventUpdate",
    "Rejection",
    "RejectionReason",
    "StoreResult",
    "TBA_LOCATION",
]
