from __future__ import annotations

from typing import Any, Dict, Optional

from ..domain import EventDraft, EventUpdate, StoreResult
from .registry import register_api
from .serializers import (
    serialize_event,
    serialize_events,
    serialize_import,
    serialize_rejection,
    serialize_reminder,
    serialize_slots,
    serialize_statistics,
)
from .state import api_state


def _require_text(**values: Any) -> None:
    for key, value in values.items():
        if not isinstance(value, str):
            raise TypeError(f"'{key}' must be a string.")


def _optional_text(**values: Any) -> None:
    _require_text(**{key: value for key, value in values.items() if value is not None})


def _mutation_response(result: StoreResult, date: Optional[str]) -> Dict[str, Any]:
    if result.ok:
        event = api_state.calendar.get_event(result.event_id)
        return {"ok": True, "event": serialize_event(event) if event else None}
    assert result.rejection is not None
    response: Dict[str, Any] = {"ok": False, "rejection": serialize_rejection(result.rejection)}
    if date is not None:
        response["suggestions"] = serialize_slots(api_state.calendar.suggestions_for(result, date))
    return response


@register_api(
    "login",
    description="Log in. Admin credentials return a session token for write tools; anything else returns an empty viewer token.",
    category="accounts",
    tags=("auth",),
)
def login(username: str, password: str) -> Dict[str, Any]:
    _require_text(username=username, password=password)
    auth = api_state.auth.login(username, password)
    token = api_state.open_session(auth)
    return {"token": token, "username": auth.username, "is_admin": auth.is_admin}


@register_api(
    "logout",
    description="Close a session opened with login.",
    category="accounts",
    tags=("auth",),
)
def logout(token: str) -> Dict[str, Any]:
    return {"closed": api_state.close_session(token)}


@register_api(
    "list_events",
    description="List every event ordered by date and time.",
    category="events",
    tags=("read",),
)
def list_events() -> Dict[str, Any]:
    return {"events": serialize_events(api_state.calendar.list_events())}


@register_api(
    "events_for_day",
    description="Return the events on a DD-MM-YYYY date ordered by time.",
    category="events",
    tags=("read",),
)
def events_for_day(date: str) -> Dict[str, Any]:
    return {"date": date, "events": serialize_events(api_state.calendar.day_view(date))}


@register_api(
    "events_for_today",
    description="Return today's events ordered by time.",
    category="events",
    tags=("read",),
)
def events_for_today() -> Dict[str, Any]:
    return {"events": serialize_events(api_state.calendar.todays_events())}


@register_api(
    "search_events",
    description="Find events whose name or type contains the keyword, ignoring case.",
    category="events",
    tags=("read", "search"),
)
def search_events(keyword: str) -> Dict[str, Any]:
    _require_text(keyword=keyword)
    return {"keyword": keyword, "events": serialize_events(api_state.calendar.search(keyword))}


@register_api(
    "suggest_slots",
    description="Suggest up to five free slots between 08:00 and 20:00 on a date.",
    category="events",
    tags=("read", "slots"),
)
def suggest_slots(date: str, duration: int = 60) -> Dict[str, Any]:
    return {"date": date, "slots": serialize_slots(api_state.calendar.suggest_slots(date, duration))}


@register_api(
    "add_event",
    description="Add a one-hour event. Conflicting requests return suggested free slots.",
    category="events",
    tags=("write",),
)
def add_event(
    *,
    token: str,
    name: str,
    date: str,
    time: str,
    event_type: str = "",
    location: str = "",
) -> Dict[str, Any]:
    _require_text(name=name, date=date, time=time, event_type=event_type, location=location)
    draft = EventDraft(name=name, date=date, time=time, event_type=event_type, location=location)
    result = api_state.calendar.add_event(api_state.resolve(token), draft)
    return _mutation_response(result, date)


@register_api(
    "edit_event",
    description="Edit an event; omitted fields keep their value. Failed edits leave the event unchanged.",
    category="events",
    tags=("write",),
)
def edit_event(
    *,
    token: str,
    event_id: int,
    name: Optional[str] = None,
    date: Optional[str] = None,
    time: Optional[str] = None,
    event_type: Optional[str] = None,
    location: Optional[str] = None,
) -> Dict[str, Any]:
    _optional_text(name=name, date=date, time=time, event_type=event_type, location=location)
    update = EventUpdate(name=name, date=date, time=time, event_type=event_type, location=location)
    auth = api_state.resolve(token)
    current = api_state.calendar.get_event(event_id)
    result = api_state.calendar.edit_event(auth, event_id, update)
    target_date = date or (current.date if current else None)
    return _mutation_response(result, target_date)


@register_api(
    "delete_event",
    description="Delete the event with the given id.",
    category="events",
    tags=("write",),
)
def delete_event(token: str, event_id: int) -> Dict[str, Any]:
    deleted = api_state.calendar.delete_event(api_state.resolve(token), event_id)
    return {"deleted": deleted, "event_id": event_id}


@register_api(
    "delete_events_by_name",
    description="Delete every event whose name matches, ignoring case.",
    category="events",
    tags=("write",),
)
def delete_events_by_name(token: str, name: str) -> Dict[str, Any]:
    _require_text(name=name)
    deleted = api_state.calendar.delete_events_named(api_state.resolve(token), name)
    return {"deleted": deleted, "name": name}


@register_api(
    "event_statistics",
    description="Totals by type and the five busiest dates.",
    category="reports",
    tags=("read", "admin"),
)
def event_statistics(token: str) -> Dict[str, Any]:
    return serialize_statistics(api_state.calendar.statistics(api_state.resolve(token)))


@register_api(
    "export_snapshot",
    description="Export all events as snapshot text for manual saving.",
    category="snapshots",
    tags=("admin", "snapshot"),
)
def export_snapshot(token: str) -> Dict[str, Any]:
    return {"snapshot": api_state.calendar.export_snapshot(api_state.resolve(token))}


@register_api(
    "import_snapshot",
    description="Replace all events with the valid rows of snapshot text.",
    category="snapshots",
    tags=("admin", "snapshot"),
)
def import_snapshot(token: str, snapshot: str) -> Dict[str, Any]:
    _require_text(snapshot=snapshot)
    result = api_state.calendar.import_snapshot(api_state.resolve(token), snapshot)
    return serialize_import(result)


@register_api(
    "load_attendees",
    description="Load attendee email addresses from pasted text.",
    category="reminders",
    tags=("admin", "reminders"),
)
def load_attendees(token: str, text: str) -> Dict[str, Any]:
    _require_text(text=text)
    emails = api_state.calendar.load_attendees(api_state.resolve(token), text)
    return {"count": len(emails), "attendees": emails}


@register_api(
    "send_reminders",
    description="Compose the reminder for a date and simulate sending it to loaded attendees.",
    category="reminders",
    tags=("admin", "reminders"),
)
def send_reminders(token: str, date: str) -> Dict[str, Any]:
    message = api_state.calendar.send_reminders(api_state.resolve(token), date)
    return {"sent": message is not None, "reminder": serialize_reminder(message) if message else None}
