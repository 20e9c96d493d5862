"""Configuration models and helpers."""

from __future__ import annotations

from .settings import DATA_DIR, AdminSettings, AppSettings, LoggingSettings, ServerSettings, get_settings

__all__ = ["DATA_DIR", "AdminSettings", "AppSettings", "LoggingSettings", "ServerSettings", "get_settings"]
