from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List

from ..domain import Event
from .queries import day_view

_SEPARATORS = re.compile(r"[\s,;]+")


@dataclass(frozen=True)
class ReminderMessage:
    date: str
    subject: str
    body: str
    recipients: List[str] = field(default_factory=list)


def looks_like_email(token: str) -> bool:
    return "@" in token and "." in token


def parse_attendee_emails(text: str) -> List[str]:
    """Pull addresses out of pasted text, keeping first-seen order."""

    emails: list[str] = []
    for token in _SEPARATORS.split(text):
        if token and looks_like_email(token) and token not in emails:
            emails.append(token)
    return emails


def build_reminder(events: Iterable[Event], date: str, recipients: Iterable[str]) -> ReminderMessage:
    lines = [f"Upcoming events on {date}:", ""]
    for event in day_view(events, date):
        lines.append(f"- {event.time} | {event.name} ({event.event_type}) @ {event.display_location}")
    return ReminderMessage(
        date=date,
        subject=f"Reminder: Events on {date}",
        body="\n".join(lines) + "\n",
        recipients=list(recipients),
    )


__all__ = ["ReminderMessage", "build_reminder", "looks_like_email", "parse_attendee_emails"]
