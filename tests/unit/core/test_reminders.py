"""Tests for attendee parsing and reminder text."""

from event_desk.core import build_reminder, parse_attendee_emails


class TestParseAttendees:
    def test_splits_on_commas_spaces_and_newlines(self):
        text = "ana@example.com, bo@example.org;cy@example.net\n  dee@example.com"

        assert parse_attendee_emails(text) == [
            "ana@example.com",
            "bo@example.org",
            "cy@example.net",
            "dee@example.com",
        ]

    def test_ignores_non_addresses_and_repeats(self):
        text = "ana@example.com not-an-email ana@example.com user@localhost"

        assert parse_attendee_emails(text) == ["ana@example.com"]


class TestBuildReminder:
    def test_lists_day_events_by_time_with_tba(self, seeded_store):
        message = build_reminder(seeded_store, "05-03-2025", ["ana@example.com"])

        assert message.subject == "Reminder: Events on 05-03-2025"
        assert message.body == (
            "Upcoming events on 05-03-2025:\n"
            "\n"
            "- 08:00 | Lightning Talks (Talk) @ Room B\n"
            "- 10:00 | Standup (Meeting) @ TBA\n"
            "- 14:30 | Retro (Meeting) @ Room A\n"
        )
        assert message.recipients == ["ana@example.com"]
