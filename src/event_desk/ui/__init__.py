"""Interactive console front end."""

from __future__ import annotations

from .console import ConsoleApp, format_table, run_console

__all__ = ["ConsoleApp", "format_table", "run_console"]
