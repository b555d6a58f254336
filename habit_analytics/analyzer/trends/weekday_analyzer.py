"""Weekend versus weekday completion patterns."""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Optional

from habit_analytics.constants import WEEKEND_DAYS
from habit_analytics.models import HabitEntry

from ..helpers import count_completed


def _percent_completed(entries: List[HabitEntry]) -> Optional[float]:
    if not entries:
        return None
    return count_completed(entries) * 100 / len(entries)


class WeekdaySplit(NamedTuple):
    """Completion percentage for weekend and weekday entries.

    A rate is ``None`` when its bucket has no entries.
    """
    weekend_rate: Optional[float]
    weekday_rate: Optional[float]


class WeekdayPatternAnalyzer:
    """Compare how a habit fares on weekends (Sat, Sun) against weekdays."""

    WEEKEND = "weekend"
    WEEKDAY = "weekday"

    @staticmethod
    def split_rates(entries: Iterable[HabitEntry]) -> WeekdaySplit:
        """Compute the completion percentage of each day-of-week bucket."""
        weekend: List[HabitEntry] = []
        weekday: List[HabitEntry] = []
        for entry in entries:
            if entry.date.weekday() in WEEKEND_DAYS:
                weekend.append(entry)
            else:
                weekday.append(entry)

        return WeekdaySplit(
            weekend_rate=_percent_completed(weekend),
            weekday_rate=_percent_completed(weekday),
        )

    @staticmethod
    def find_struggle(entries: Iterable[HabitEntry], gap_points: float) -> Optional[str]:
        """Return which bucket lags the other by more than ``gap_points``.

        Args:
            entries: Completion records in any order
            gap_points: Percentage-point gap that must be exceeded

        Returns:
            ``"weekend"``, ``"weekday"`` or None when the gap is within
            ``gap_points`` or either bucket is empty
        """
        split = WeekdayPatternAnalyzer.split_rates(entries)
        if split.weekend_rate is None or split.weekday_rate is None:
            return None

        if split.weekend_rate < split.weekday_rate - gap_points:
            return WeekdayPatternAnalyzer.WEEKEND
        if split.weekday_rate < split.weekend_rate - gap_points:
            return WeekdayPatternAnalyzer.WEEKDAY
        return None
