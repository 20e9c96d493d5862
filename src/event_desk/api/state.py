from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..config import AppSettings
from ..services import VIEWER, AuthContext, AuthService, CalendarService, ServiceContext


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)
    auth: AuthService = field(init=False)
    calendar: CalendarService = field(init=False)
    sessions: Dict[str, AuthContext] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.auth = AuthService(self.context.settings.admin)
        self.calendar = CalendarService(self.context)

    def open_session(self, auth: AuthContext) -> str:
        """Token for an admin session; viewers need none and get an empty token."""
        if not auth.is_admin:
            return ""
        token = secrets.token_urlsafe(24)
        self.sessions[token] = auth
        return token

    def resolve(self, token: str) -> AuthContext:
        """Auth context for ``token``; unknown tokens are treated as viewers."""
        return self.sessions.get(token, VIEWER)

    def close_session(self, token: str) -> bool:
        return self.sessions.pop(token, None) is not None

    def reset(self, settings: Optional[AppSettings] = None) -> None:
        self.context = ServiceContext(settings=settings or self.context.settings)
        self.auth = AuthService(self.context.settings.admin)
        self.calendar = CalendarService(self.context)
        self.sessions.clear()


api_state = ApiState()
