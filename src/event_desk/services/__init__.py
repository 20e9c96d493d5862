"""Application services orchestrating the event store and authorization."""

from __future__ import annotations

from .auth import VIEWER, AuthContext, AuthorizationError, AuthService
from .calendar import CalendarService
from .context import ServiceContext

__all__ = ["VIEWER", "AuthContext", "AuthService", "AuthorizationError", "CalendarService", "ServiceContext"]
