from __future__ import annotations

import time
from typing import Any

from ..core.constants import MONTH_ABBREVIATIONS


def now_millis() -> int:
    """Current wall-clock time in milliseconds.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return time.time_ns() // 1_000_000


def format_start_date(day: Any, month: Any, year: Any) -> str:
    """Format form parts as e.g. ``"5 Jan 2024"``; empty string if incomplete."""
    if not day or not month or not year:
        return ""
    try:
        month_index = int(month)
    except (TypeError, ValueError):
        return ""
    if not 1 <= month_index <= 12:
        return ""
    return f"{str(day).strip()} {MONTH_ABBREVIATIONS[month_index - 1]} {str(year).strip()}"
