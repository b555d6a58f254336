"""Lookback window selection."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, List, Optional

from habit_analytics.models import HabitEntry
from habit_analytics.validation import validate_days


def entries_in_window(
    entries: Iterable[HabitEntry],
    days: int,
    end: Optional[date] = None,
) -> List[HabitEntry]:
    """Keep entries dated from ``end - days`` through ``end``, both inclusive.

    Args:
        entries: Completion records in any order
        days: Window length in days
        end: Last day of the window (defaults to the current date)

    Raises:
        InvalidInputError: If ``days`` is not a positive integer
    """
    validate_days(days)
    end = end or date.today()
    start = end - timedelta(days=days)
    return [entry for entry in entries if start <= entry.date <= end]
