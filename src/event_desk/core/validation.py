from __future__ import annotations

from typing import Any

MIN_YEAR = 1900
MAX_YEAR = 3000

_DIGITS = frozenset("0123456789")
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _digits_except(text: str, separators: dict[int, str]) -> bool:
    for index, char in enumerate(text):
        expected = separators.get(index)
        if expected is not None:
            if char != expected:
                return False
        elif char not in _DIGITS:
            return False
    return True


def days_in_month(month: int, year: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def validate_date(text: Any) -> bool:
    """Return whether ``text`` is a real ``DD-MM-YYYY`` date within the supported years."""

    if not isinstance(text, str) or len(text) != 10:
        return False
    if not _digits_except(text, {2: "-", 5: "-"}):
        return False
    day, month, year = int(text[0:2]), int(text[3:5]), int(text[6:10])
    if year < MIN_YEAR or year > MAX_YEAR:
        return False
    if month < 1 or month > 12:
        return False
    return 1 <= day <= days_in_month(month, year)


def validate_time(text: Any) -> bool:
    """Return whether ``text`` is a 24-hour ``HH:MM`` wall-clock time."""

    if not isinstance(text, str) or len(text) != 5:
        return False
    if not _digits_except(text, {2: ":"}):
        return False
    hour, minute = int(text[0:2]), int(text[3:5])
    return 0 <= hour <= 23 and 0 <= minute <= 59


__all__ = ["MAX_YEAR", "MIN_YEAR", "days_in_month", "is_leap_year", "validate_date", "validate_time"]
