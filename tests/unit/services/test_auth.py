"""Tests for admin login and authorization contexts."""

import pytest

from event_desk.config import AdminSettings
from event_desk.services import AuthContext, AuthorizationError, AuthService


class TestLogin:
    @pytest.mark.parametrize("username", ["admin", "ACMadmin"])
    def test_configured_admins_get_admin_context(self, auth_service, username):
        auth = auth_service.login(username, "admin123")

        assert auth == AuthContext(username=username, is_admin=True)

    def test_wrong_password_falls_back_to_viewer(self, auth_service):
        auth = auth_service.login("admin", "hunter2")

        assert auth.is_admin is False

    def test_unknown_user_is_viewer(self, auth_service):
        assert auth_service.login("mallory", "admin123").is_admin is False

    def test_blank_username_keeps_viewer_name(self, auth_service):
        assert auth_service.login("", "").username == "viewer"

    def test_empty_configured_password_never_grants_admin(self):
        service = AuthService(AdminSettings(usernames=("admin",), password=""))

        assert service.login("admin", "").is_admin is False


class TestRequireAdmin:
    def test_viewer_is_refused(self, viewer):
        with pytest.raises(AuthorizationError, match="add event"):
            viewer.require_admin("add event")

    def test_authorization_error_is_permission_error(self):
        assert issubclass(AuthorizationError, PermissionError)

    def test_admin_passes(self, admin):
        admin.require_admin("add event")
