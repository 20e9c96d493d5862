from __future__ import annotations

from enum import Enum


class RejectionReason(str, Enum):
    INVALID_DATE = "invalid_date"
    INVALID_TIME = "invalid_time"
    EMPTY_NAME = "empty_name"
    DUPLICATE = "duplicate"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
