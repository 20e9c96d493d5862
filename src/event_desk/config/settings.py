from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_data_dir

load_dotenv()

APP_NAME = "Event Desk"
APP_AUTHOR = "EventDesk"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))


@dataclass(frozen=True)
class AdminSettings:
    usernames: tuple[str, ...]
    password: str

    @property
    def is_configured(self) -> bool:
        return bool(self.usernames and self.password)


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path

    @property
    def log_file(self) -> Path:
        return self.directory / "event_desk.log"


@dataclass(frozen=True)
class ServerSettings:
    api_host: str
    api_port: int
    mcp_host: str
    mcp_port: int


@dataclass(frozen=True)
class AppSettings:
    admin: AdminSettings
    logging: LoggingSettings
    server: ServerSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _names_from_env(name: str, default: str) -> tuple[str, ...]:
    raw: Optional[str] = os.getenv(name) or default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    admin = AdminSettings(
        usernames=_names_from_env("EVENT_DESK_ADMIN_USERS", "admin,ACMadmin"),
        password=os.getenv("EVENT_DESK_ADMIN_PASSWORD", "admin123"),
    )

    logging_settings = LoggingSettings(
        level=os.getenv("EVENT_DESK_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("EVENT_DESK_LOG_DIR") or DATA_DIR / "logs"),
    )

    server = ServerSettings(
        api_host=os.getenv("EVENT_DESK_API_HOST", "127.0.0.1"),
        api_port=_int_from_env("EVENT_DESK_API_PORT", 8000),
        mcp_host=os.getenv("EVENT_DESK_MCP_HOST", "127.0.0.1"),
        mcp_port=_int_from_env("EVENT_DESK_MCP_PORT", 8765),
    )

    return AppSettings(admin=admin, logging=logging_settings, server=server)
