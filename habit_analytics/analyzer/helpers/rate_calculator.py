"""Completion rate helpers shared by the analyzers."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence

from habit_analytics.models import HabitEntry


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(62.4)
        62
    """
    return int(math.floor(value + 0.5))


def sort_chronologically(entries: Iterable[HabitEntry], newest_first: bool = False) -> List[HabitEntry]:
    """Return entries ordered by date.

    Ties on the same date are broken on ``completed`` so the order never
    depends on how the caller supplied the entries.
    """
    return sorted(entries, key=lambda entry: (entry.date, entry.completed), reverse=newest_first)


def count_completed(entries: Iterable[HabitEntry]) -> int:
    return sum(1 for entry in entries if entry.is_completed)


def completion_fraction(entries: Sequence[HabitEntry]) -> float:
    """Fraction of the given entries that were completed (0.0 when empty)."""
    if not entries:
        return 0.0
    return count_completed(entries) / len(entries)


def completion_rate(entries: Sequence[HabitEntry], days: int) -> int:
    """Percentage of a ``days``-long window that was completed.

    Days without an entry count against the window. The result is clamped
    to 0-100 so a list longer than the window cannot exceed 100.
    """
    if not entries:
        return 0
    rate = round_half_up(count_completed(entries) * 100 / days)
    return max(0, min(rate, 100))
