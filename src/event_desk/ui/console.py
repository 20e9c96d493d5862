"""Interactive menu shell over the calendar service."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from ..core import SNAPSHOT_HEADER
from ..domain import Event, EventDraft, EventUpdate, StoreResult
from ..services import VIEWER, AuthContext, AuthService, CalendarService, ServiceContext

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

COLUMNS = (("ID", 5), ("Name", 22), ("Date", 12), ("Time", 8), ("Type", 14), ("Location", 18))
TABLE_WIDTH = 79

VIEWER_OPTIONS = (
    ("1", "List all events"),
    ("2", "Day view (pick date)"),
    ("3", "Today's events"),
    ("4", "Search events"),
)
ADMIN_OPTIONS = (
    ("5", "Add event"),
    ("6", "Edit event by ID"),
    ("7", "Delete event by ID"),
    ("8", "Delete event by name"),
    ("9", "Load attendees (paste emails)"),
    ("10", "Send reminders"),
    ("11", "Statistics"),
    ("12", "Export snapshot CSV"),
    ("13", "Import snapshot CSV"),
)


def truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 1] + "…"


def format_table(events: Iterable[Event]) -> List[str]:
    header = "".join(title.ljust(width) for title, width in COLUMNS)
    lines = [header, "-" * TABLE_WIDTH]
    for event in events:
        cells = (
            str(event.id),
            truncate(event.name, 20),
            event.date,
            event.time,
            truncate(event.event_type, 12),
            truncate(event.location, 16),
        )
        lines.append("".join(cell.ljust(width) for cell, (_, width) in zip(cells, COLUMNS)))
    return lines


class ConsoleApp:
    def __init__(
        self,
        calendar: Optional[CalendarService] = None,
        auth_service: Optional[AuthService] = None,
        *,
        reader: Reader = input,
        writer: Writer = print,
    ) -> None:
        context = calendar.context if calendar else ServiceContext()
        self.calendar = calendar or CalendarService(context)
        self.auth_service = auth_service or AuthService(context.settings.admin)
        self.auth: AuthContext = VIEWER
        self._read = reader
        self._write = writer
        self.closed = False

    def prompt(self, label: str) -> str:
        try:
            return self._read(label).strip("\r\n")
        except EOFError:
            self.closed = True
            return ""

    def say(self, text: str = "") -> None:
        self._write(text)

    def read_block(self, instructions: str) -> str:
        """Collect pasted lines until a blank line."""

        self.say(instructions)
        lines: list[str] = []
        while True:
            line = self.prompt("")
            if not line or self.closed:
                return "\n".join(lines)
            lines.append(line)

    def show(self, events: List[Event], empty_message: str) -> None:
        if not events:
            self.say(empty_message)
            return
        for line in format_table(events):
            self.say(line)

    def login(self) -> None:
        self.say("== Admin Login ==")
        username = self.prompt("Username: ")
        password = self.prompt("Password: ")
        self.auth = self.auth_service.login(username, password)
        if self.auth.is_admin:
            self.say("Logged in as admin.")
        else:
            self.say("Invalid credentials. Continuing as viewer.")

    def menu(self) -> None:
        self.say("")
        self.say("====== Event Desk ======")
        options = VIEWER_OPTIONS + (ADMIN_OPTIONS if self.auth.is_admin else ())
        for key, label in options:
            suffix = " (admin)" if self.auth.is_admin and int(key) >= 5 else ""
            self.say(f"{key}) {label}{suffix}")
        self.say("0) Exit")

    def run(self) -> None:
        answer = self.prompt("Login as admin? (y/N): ")
        if answer in ("y", "Y"):
            self.login()
        while True:
            self.menu()
            choice = self.prompt("Select: ")
            if choice == "0" or self.closed:
                break
            self.dispatch(choice)
        self.say("Goodbye!")

    def dispatch(self, choice: str) -> None:
        handlers = {
            "1": self.list_events,
            "2": self.day_view,
            "3": self.todays_events,
            "4": self.search,
        }
        if self.auth.is_admin:
            handlers.update(
                {
                    "5": self.add_event,
                    "6": self.edit_event,
                    "7": self.delete_by_id,
                    "8": self.delete_by_name,
                    "9": self.load_attendees,
                    "10": self.send_reminders,
                    "11": self.statistics,
                    "12": self.export_snapshot,
                    "13": self.import_snapshot,
                }
            )
        handler = handlers.get(choice)
        if handler is None:
            self.say(f"Invalid choice. Try 0-{13 if self.auth.is_admin else 4}.")
            return
        handler()

    def list_events(self) -> None:
        self.show(self.calendar.list_events(), "No events.")

    def day_view(self) -> None:
        date = self.prompt("Enter date (DD-MM-YYYY): ")
        try:
            events = self.calendar.day_view(date)
        except ValueError:
            self.say("Invalid date.")
            return
        self.show(events, "No events on this date.")

    def todays_events(self) -> None:
        self.show(self.calendar.todays_events(), "No events on this date.")

    def search(self) -> None:
        keyword = self.prompt("Keyword (name/type): ")
        self.show(self.calendar.search(keyword), "No matches.")

    def _report(self, result: StoreResult, date: str, success: str) -> None:
        if result.ok:
            self.say(success)
            return
        assert result.rejection is not None
        self.say(result.rejection.message)
        suggestions = self.calendar.suggestions_for(result, date)
        if result.rejection.conflicting_id is not None:
            self.say(f"Suggested available slots on {date}:")
            if not suggestions:
                self.say("  (No free 1-hour slots found in working window)")
            for slot in suggestions:
                self.say(f"  - {slot.start_time} to {slot.end_time}")

    def add_event(self) -> None:
        draft = EventDraft(
            name=self.prompt("Name: "),
            date=self.prompt("Date (DD-MM-YYYY): "),
            time=self.prompt("Time (HH:MM 24h): "),
            event_type=self.prompt("Type: "),
            location=self.prompt("Location (optional): "),
        )
        result = self.calendar.add_event(self.auth, draft)
        self._report(result, draft.date, f"Event added with ID: {result.event_id}")

    def _read_id(self, label: str) -> Optional[int]:
        raw = self.prompt(label)
        if not raw.isdigit():
            self.say("Invalid ID.")
            return None
        return int(raw)

    def edit_event(self) -> None:
        event_id = self._read_id("ID to edit: ")
        if event_id is None:
            return
        current = self.calendar.get_event(event_id)
        if current is None:
            self.say("Event not found.")
            return
        self.say("Editing Event (leave blank to keep current)")
        update = EventUpdate(
            name=self.prompt(f"Name [{current.name}]: ") or None,
            date=self.prompt(f"Date [{current.date}]: ") or None,
            time=self.prompt(f"Time [{current.time}]: ") or None,
            event_type=self.prompt(f"Type [{current.event_type}]: ") or None,
            location=self.prompt(f"Location [{current.location}]: ") or None,
        )
        result = self.calendar.edit_event(self.auth, event_id, update)
        self._report(result, update.date or current.date, "Event updated.")

    def delete_by_id(self) -> None:
        event_id = self._read_id("ID to delete: ")
        if event_id is None:
            return
        deleted = self.calendar.delete_event(self.auth, event_id)
        self.say("Deleted." if deleted else "No event with that ID.")

    def delete_by_name(self) -> None:
        name = self.prompt("Name to delete: ")
        deleted = self.calendar.delete_events_named(self.auth, name)
        self.say("Deleted." if deleted else "No event with that name.")

    def load_attendees(self) -> None:
        text = self.read_block("Paste emails (comma/space/newline separated). End with a blank line.")
        emails = self.calendar.load_attendees(self.auth, text)
        self.say(f"Loaded {len(emails)} attendee emails.")

    def send_reminders(self) -> None:
        date = self.prompt("Send reminders for date (DD-MM-YYYY): ")
        try:
            message = self.calendar.send_reminders(self.auth, date)
        except ValueError as exc:
            self.say(str(exc))
            return
        if message is None:
            self.say("No events on this date.")
            return
        self.say(f"[SIMULATED EMAIL SEND] To {len(message.recipients)} recipients.")
        self.say(f"Subject: {message.subject}")
        self.say("")
        for line in message.body.splitlines():
            self.say(line)
        self.say("(Emails are not actually sent.)")

    def statistics(self) -> None:
        stats = self.calendar.statistics(self.auth)
        self.say(f"Total events: {stats.total}")
        self.say("By type:")
        for event_type, count in stats.by_type.items():
            self.say(f"  {event_type}: {count}")
        self.say("Top 5 dates by count:")
        for date, count in stats.top_dates:
            self.say(f"  {date}: {count}")

    def export_snapshot(self) -> None:
        for line in self.calendar.export_snapshot(self.auth).rstrip("\n").split("\n"):
            self.say(line)
        self.say("(Copy the above lines to save. Import with the menu option.)")

    def import_snapshot(self) -> None:
        text = self.read_block(f"Paste CSV lines (header '{SNAPSHOT_HEADER}' optional). End with a blank line.")
        result = self.calendar.import_snapshot(self.auth, text)
        if not result.imported:
            self.say("Nothing imported.")
            return
        self.say(f"Imported {len(result.events)} events. Next ID: {result.next_id}")


def run_console() -> None:
    logger.info("Starting interactive console")
    ConsoleApp().run()
