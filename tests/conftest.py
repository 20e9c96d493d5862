"""Shared fixtures for Event Desk tests.

Settings are built explicitly so a developer's ``.env`` never changes the
admin credentials the tests log in with.
"""

from pathlib import Path

import pytest

from event_desk.config import AdminSettings, AppSettings, LoggingSettings, ServerSettings
from event_desk.core import EventStore
from event_desk.domain import EventDraft
from event_desk.services import AuthContext, AuthService, CalendarService, ServiceContext


# ─────────────────────────────────────────────────────────────────────────────
# Settings and auth
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def app_settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        admin=AdminSettings(usernames=("admin", "ACMadmin"), password="admin123"),
        logging=LoggingSettings(level="DEBUG", directory=tmp_path / "logs"),
        server=ServerSettings(api_host="127.0.0.1", api_port=8000, mcp_host="127.0.0.1", mcp_port=8765),
    )


@pytest.fixture
def admin() -> AuthContext:
    return AuthContext(username="admin", is_admin=True)


@pytest.fixture
def viewer() -> AuthContext:
    return AuthContext(username="guest", is_admin=False)


@pytest.fixture
def auth_service(app_settings: AppSettings) -> AuthService:
    return AuthService(app_settings.admin)


# ─────────────────────────────────────────────────────────────────────────────
# Store and services
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def store() -> EventStore:
    return EventStore()


@pytest.fixture
def seeded_store() -> EventStore:
    """Store with four events over two days, added out of date order."""

    store = EventStore()
    for draft in (
        EventDraft("Keynote", "06-03-2025", "09:00", "Talk", "Main Hall"),
        EventDraft("Standup", "05-03-2025", "10:00", "Meeting", ""),
        EventDraft("Lightning Talks", "05-03-2025", "08:00", "Talk", "Room B"),
        EventDraft("Retro", "05-03-2025", "14:30", "Meeting", "Room A"),
    ):
        assert store.add(draft).ok
    return store


@pytest.fixture
def service_context(app_settings: AppSettings, seeded_store: EventStore) -> ServiceContext:
    return ServiceContext(settings=app_settings, store=seeded_store)


@pytest.fixture
def calendar(service_context: ServiceContext) -> CalendarService:
    return CalendarService(service_context)
