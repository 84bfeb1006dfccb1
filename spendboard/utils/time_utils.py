"""
Date utility helpers.

Expense dates carry no time of day and are parsed and serialised as
ISO ``"YYYY-MM-DD"`` (the Python format string ``"%Y-%m-%d"``).
"""

from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Tuple

DATE_FORMAT = "%Y-%m-%d"

MonthKey = Tuple[int, int]


def parse_date(raw: str) -> date:
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except (ValueError, TypeError) as exc:
        raise ValueError(
            f"Invalid date {raw!r}. Expected format: YYYY-MM-DD"
        ) from exc


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def format_display_date(d: date) -> str:
    """``date(2024, 3, 1)`` → ``"Mar 1, 2024"``."""
    return f"{calendar.month_abbr[d.month]} {d.day}, {d.year}"


def month_key(d: date) -> MonthKey:
    """Bucket key shared by every month view: ``(year, month)``."""
    return (d.year, d.month)


def month_label(key: MonthKey) -> str:
    """``(2024, 3)`` → ``"March 2024"``."""
    year, month = key
    return f"{calendar.month_name[month]} {year:04d}"
