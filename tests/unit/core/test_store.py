"""Tests for the event store: ids, duplicates, conflicts, edits and deletes."""

from event_desk.core import EventStore
from event_desk.domain import EventDraft, EventUpdate, RejectionReason


def _draft(name="Standup", date="05-03-2025", time="10:00", event_type="Meeting", location=""):
    return EventDraft(name=name, date=date, time=time, event_type=event_type, location=location)


# ─────────────────────────────────────────────────────────────────────────────
# Adding events
# ─────────────────────────────────────────────────────────────────────────────


class TestAdd:
    def test_assigns_increasing_ids(self, store):
        first = store.add(_draft(time="09:00"))
        second = store.add(_draft(name="Review", time="11:00"))

        assert first.ok and second.ok
        assert (first.event_id, second.event_id) == (1, 2)
        assert store.next_id == 3

    def test_rejects_invalid_date_before_time(self, store):
        result = store.add(_draft(date="30-02-2025", time="99:99"))

        assert not result.ok
        assert result.rejection.reason is RejectionReason.INVALID_DATE

    def test_rejects_invalid_time(self, store):
        result = store.add(_draft(time="7:30"))

        assert result.rejection.reason is RejectionReason.INVALID_TIME

    def test_rejects_blank_name(self, store):
        result = store.add(_draft(name="   "))

        assert result.rejection.reason is RejectionReason.EMPTY_NAME

    def test_duplicate_ignores_name_case_in_either_order(self):
        for first_name, second_name in (("Standup", "STANDUP"), ("STANDUP", "standup")):
            store = EventStore()
            assert store.add(_draft(name=first_name)).ok

            result = store.add(_draft(name=second_name))

            assert result.rejection.reason is RejectionReason.DUPLICATE
            assert len(store) == 1

    def test_conflict_reports_the_other_event(self, store):
        store.add(_draft(name="Standup", time="10:00"))

        result = store.add(_draft(name="Design review", time="10:30"))

        assert result.rejection.reason is RejectionReason.CONFLICT
        assert result.rejection.conflicting_id == 1

    def test_back_to_back_events_are_allowed(self, store):
        assert store.add(_draft(name="Standup", time="10:00")).ok
        assert store.add(_draft(name="Review", time="11:00")).ok
        assert store.add(_draft(name="Prep", time="09:00")).ok

    def test_same_time_on_another_day_is_allowed(self, store):
        assert store.add(_draft(date="05-03-2025")).ok
        assert store.add(_draft(date="06-03-2025")).ok

    def test_rejected_candidates_do_not_consume_ids(self, store):
        store.add(_draft(time="10:00"))
        store.add(_draft(name="Clash", time="10:15"))
        store.add(_draft(date="bad"))

        result = store.add(_draft(name="Later", time="12:00"))

        assert result.event_id == 2

    def test_ids_are_not_reused_after_delete(self, store):
        store.add(_draft(time="10:00"))
        store.add(_draft(name="Review", time="12:00"))
        store.delete_by_id(2)

        result = store.add(_draft(name="Another", time="14:00"))

        assert result.event_id == 3


# ─────────────────────────────────────────────────────────────────────────────
# Editing events
# ─────────────────────────────────────────────────────────────────────────────


class TestEdit:
    def test_applies_only_present_fields(self, seeded_store):
        result = seeded_store.edit(2, EventUpdate(location="Room C"))

        assert result.ok
        edited = seeded_store.get(2)
        assert edited.location == "Room C"
        assert (edited.name, edited.date, edited.time, edited.event_type) == (
            "Standup",
            "05-03-2025",
            "10:00",
            "Meeting",
        )

    def test_keeps_position_in_store(self, seeded_store):
        seeded_store.edit(2, EventUpdate(name="Daily sync"))

        assert [event.id for event in seeded_store] == [1, 2, 3, 4]

    def test_moving_within_own_slot_is_not_a_conflict(self, seeded_store):
        result = seeded_store.edit(2, EventUpdate(time="10:30"))

        assert result.ok
        assert seeded_store.get(2).time == "10:30"

    def test_unchanged_event_is_not_its_own_duplicate(self, seeded_store):
        assert seeded_store.edit(2, EventUpdate(name="standup")).ok

    def test_collision_with_another_event_leaves_store_unchanged(self, seeded_store):
        before = seeded_store.events

        result = seeded_store.edit(
            4, EventUpdate(name="lightning talks", time="08:00", location="Somewhere else")
        )

        assert result.rejection.reason is RejectionReason.DUPLICATE
        assert seeded_store.events == before

    def test_conflicting_edit_is_reverted(self, seeded_store):
        before = seeded_store.get(4)

        result = seeded_store.edit(4, EventUpdate(time="10:45", event_type="Workshop"))

        assert result.rejection.reason is RejectionReason.CONFLICT
        assert result.rejection.conflicting_id == 2
        assert seeded_store.get(4) == before

    def test_invalid_fields_are_rejected(self, seeded_store):
        assert seeded_store.edit(1, EventUpdate(date="31-11-2025")).rejection.reason is RejectionReason.INVALID_DATE
        assert seeded_store.edit(1, EventUpdate(time="25:00")).rejection.reason is RejectionReason.INVALID_TIME
        assert seeded_store.get(1).date == "06-03-2025"

    def test_unknown_id_is_not_found(self, seeded_store):
        result = seeded_store.edit(99, EventUpdate(name="Ghost"))

        assert result.rejection.reason is RejectionReason.NOT_FOUND


# ─────────────────────────────────────────────────────────────────────────────
# Deleting events
# ─────────────────────────────────────────────────────────────────────────────


class TestDelete:
    def test_delete_by_id(self, seeded_store):
        assert seeded_store.delete_by_id(3) is True
        assert seeded_store.get(3) is None
        assert seeded_store.delete_by_id(3) is False

    def test_delete_by_name_removes_every_match(self, store):
        store.add(_draft(name="Standup", date="05-03-2025"))
        store.add(_draft(name="STANDUP", date="06-03-2025"))
        store.add(_draft(name="Standup extended", date="07-03-2025"))

        assert store.delete_by_name("standup") is True
        assert [event.name for event in store] == ["Standup extended"]

    def test_delete_by_name_without_match(self, seeded_store):
        assert seeded_store.delete_by_name("Nope") is False
        assert len(seeded_store) == 4


class TestStoreViews:
    def test_events_is_a_copy(self, seeded_store):
        events = seeded_store.events
        seeded_store.delete_by_id(1)

        assert len(events) == 4
        assert len(seeded_store.events) == 3

    def test_is_duplicate(self, seeded_store):
        assert seeded_store.is_duplicate("KEYNOTE", "06-03-2025", "09:00")
        assert not seeded_store.is_duplicate("Keynote", "06-03-2025", "09:30")
        assert not seeded_store.is_duplicate("Keynote", "06-03-2025", "09:00", exclude_id=1)

    def test_initial_events_set_next_id(self, seeded_store):
        copy = EventStore(seeded_store.events)

        assert copy.next_id == 5
