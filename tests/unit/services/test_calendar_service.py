"""Tests for the calendar service: gating, reminders and snapshots."""

import pytest

from event_desk.domain import EventDraft, EventUpdate, RejectionReason
from event_desk.services import AuthorizationError


class TestReadAccess:
    def test_viewer_can_read(self, calendar):
        assert len(calendar.list_events()) == 4
        assert [event.name for event in calendar.search("retro")] == ["Retro"]
        assert len(calendar.day_view("05-03-2025")) == 3
        assert [event.name for event in calendar.todays_events(today="06-03-2025")] == ["Keynote"]

    def test_day_view_rejects_bad_date(self, calendar):
        with pytest.raises(ValueError, match="DD-MM-YYYY"):
            calendar.day_view("2025-03-05")


class TestWriteAccess:
    @pytest.mark.parametrize(
        "call",
        [
            lambda svc, auth: svc.add_event(auth, EventDraft("X", "05-03-2025", "18:00")),
            lambda svc, auth: svc.edit_event(auth, 1, EventUpdate(name="Y")),
            lambda svc, auth: svc.delete_event(auth, 1),
            lambda svc, auth: svc.delete_events_named(auth, "Retro"),
            lambda svc, auth: svc.statistics(auth),
            lambda svc, auth: svc.export_snapshot(auth),
            lambda svc, auth: svc.import_snapshot(auth, ""),
            lambda svc, auth: svc.load_attendees(auth, "a@b.co"),
            lambda svc, auth: svc.send_reminders(auth, "05-03-2025"),
        ],
    )
    def test_viewer_is_refused(self, calendar, viewer, call):
        before = calendar.store.events

        with pytest.raises(AuthorizationError):
            call(calendar, viewer)

        assert calendar.store.events == before

    def test_admin_add_and_suggestions_on_conflict(self, calendar, admin):
        result = calendar.add_event(admin, EventDraft("Clash", "05-03-2025", "10:30"))

        assert result.rejection.reason is RejectionReason.CONFLICT
        suggestions = calendar.suggestions_for(result, "05-03-2025")
        assert [slot.start_time for slot in suggestions] == ["09:00", "11:00", "11:30", "12:00", "12:30"]

    def test_no_suggestions_for_other_rejections(self, calendar, admin):
        result = calendar.add_event(admin, EventDraft("Keynote", "06-03-2025", "09:00"))

        assert result.rejection.reason is RejectionReason.DUPLICATE
        assert calendar.suggestions_for(result, "06-03-2025") == []

    def test_admin_delete(self, calendar, admin):
        assert calendar.delete_event(admin, 1) is True
        assert calendar.delete_events_named(admin, "retro") is True
        assert [event.id for event in calendar.list_events()] == [3, 2]

    def test_export_import_round_trip(self, calendar, admin):
        text = calendar.export_snapshot(admin)
        calendar.delete_event(admin, 1)

        result = calendar.import_snapshot(admin, text)

        assert len(result.events) == 4
        assert calendar.get_event(1).name == "Keynote"


class TestReminders:
    def test_requires_loaded_attendees(self, calendar, admin):
        with pytest.raises(ValueError, match="attendee"):
            calendar.send_reminders(admin, "05-03-2025")

    def test_nothing_to_send_on_empty_day(self, calendar, admin):
        calendar.load_attendees(admin, "ana@example.com")

        assert calendar.send_reminders(admin, "01-01-2026") is None

    def test_sends_to_loaded_attendees(self, calendar, admin, caplog):
        calendar.load_attendees(admin, "ana@example.com bo@example.org")

        with caplog.at_level("INFO", logger="event_desk.services.calendar"):
            message = calendar.send_reminders(admin, "06-03-2025")

        assert message.recipients == ["ana@example.com", "bo@example.org"]
        assert "- 09:00 | Keynote (Talk) @ Main Hall" in message.body
        assert "SIMULATED EMAIL SEND" in caplog.text
