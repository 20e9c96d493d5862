"""Event Desk: an in-memory calendar of one-hour events."""

from __future__ import annotations

from .core import EventStore
from .domain import Event, EventDraft, EventUpdate

__all__ = ["Event", "EventDraft", "EventStore", "EventUpdate", "main"]


def main() -> None:
    from .cli import main as cli_main

    cli_main()
