from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from ..config import AdminSettings

logger = logging.getLogger(__name__)


class AuthorizationError(PermissionError):
    """Raised when a viewer attempts an admin-only operation."""


@dataclass(frozen=True, slots=True)
class AuthContext:
    username: str
    is_admin: bool = False

    def require_admin(self, action: str) -> None:
        if not self.is_admin:
            raise AuthorizationError(f"'{action}' requires an admin session.")


VIEWER = AuthContext(username="viewer", is_admin=False)


@dataclass(slots=True)
class AuthService:
    settings: AdminSettings

    def login(self, username: str, password: str) -> AuthContext:
        """Return an admin context for valid credentials, a viewer context otherwise."""

        known_user = username in self.settings.usernames
        password_ok = hmac.compare_digest(password.encode("utf-8"), self.settings.password.encode("utf-8"))
        if known_user and password_ok and self.settings.is_configured:
            logger.info("Admin login for %s", username)
            return AuthContext(username=username, is_admin=True)
        logger.warning("Rejected admin login for %r; continuing as viewer", username)
        return AuthContext(username=username or VIEWER.username, is_admin=False)
