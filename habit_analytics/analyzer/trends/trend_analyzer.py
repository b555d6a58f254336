"""Trend analysis for habit completion records."""

from __future__ import annotations

from typing import Iterable, Optional

from habit_analytics.models import AnalysisThresholds, HabitEntry, Trend

from ..helpers import completion_fraction, sort_chronologically


class TrendAnalyzer:
    """Classify whether a habit is improving, declining or holding steady."""

    @staticmethod
    def calculate_trend(
        entries: Iterable[HabitEntry],
        thresholds: Optional[AnalysisThresholds] = None,
    ) -> Trend:
        """Calculate trend direction from completion records.

        Algorithm:
        1. Requires a minimum number of entries (``trend_min_entries``)
        2. Splits the chronological entries into two halves; with an odd
           count the extra entry goes to the recent half
        3. Compares the completion fraction of each half
        4. Returns IMPROVING if recent - early > ``trend_delta``
        5. Returns DECLINING if recent - early < -``trend_delta``
        6. Returns STABLE otherwise

        Args:
            entries: Completion records in any order
            thresholds: Optional override of the default thresholds

        Returns:
            One of Trend.IMPROVING, Trend.DECLINING or Trend.STABLE
        """
        thresholds = thresholds or AnalysisThresholds()
        ordered = sort_chronologically(entries)

        if len(ordered) < thresholds.trend_min_entries:
            return Trend.STABLE

        midpoint = len(ordered) // 2
        early_half = ordered[:midpoint]
        recent_half = ordered[midpoint:]

        difference = completion_fraction(recent_half) - completion_fraction(early_half)

        if difference > thresholds.trend_delta:
            return Trend.IMPROVING
        if difference < -thresholds.trend_delta:
            return Trend.DECLINING
        return Trend.STABLE
