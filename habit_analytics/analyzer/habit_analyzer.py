"""Habit analysis orchestrator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from habit_analytics.constants import DEFAULT_LOOKBACK_DAYS
from habit_analytics.models import AnalysisResult, AnalysisThresholds, HabitEntry
from habit_analytics.validation import validate_days

from .builders import InsightsBuilder, RecommendationsBuilder
from .helpers import completion_rate
from .trends import StreakAnalyzer, TrendAnalyzer

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HabitAnalyzer:
    """Transform one habit's completion records into an AnalysisResult.

    The analyzer holds no per-call state, so a single instance can be shared
    between callers.
    """

    thresholds: AnalysisThresholds = field(default_factory=AnalysisThresholds)

    def analyze(self, entries: Iterable[HabitEntry], days: int = DEFAULT_LOOKBACK_DAYS) -> AnalysisResult:
        """Compute derived metrics for a single habit.

        Args:
            entries: Completion records for one habit, in any order
            days: Lookback window used as the completion rate denominator

        Returns:
            A fresh AnalysisResult

        Raises:
            InvalidInputError: If ``days`` is not a positive integer
        """
        validate_days(days)

        entries = list(entries)
        logger.debug("Analyzing %d entries over a %d-day window", len(entries), days)

        rate = completion_rate(entries, days)
        streaks = StreakAnalyzer.analyze(entries)
        trend = TrendAnalyzer.calculate_trend(entries, self.thresholds)

        insights = InsightsBuilder.build(rate, streaks, entries, self.thresholds)
        recommendations = RecommendationsBuilder.build(rate, streaks, trend, self.thresholds)

        logger.debug(
            "Computed rate=%d current=%d longest=%d trend=%s",
            rate, streaks.current, streaks.longest, trend.value,
        )

        return AnalysisResult(
            completion_rate=rate,
            current_streak=streaks.current,
            longest_streak=streaks.longest,
            trend=trend,
            insights=tuple(insights),
            recommendations=tuple(recommendations),
        )


def analyze(
    entries: Iterable[HabitEntry],
    days: int = DEFAULT_LOOKBACK_DAYS,
    thresholds: Optional[AnalysisThresholds] = None,
) -> AnalysisResult:
    """Analyze one habit's entries with default or supplied thresholds."""
    analyzer = HabitAnalyzer(thresholds) if thresholds else HabitAnalyzer()
    return analyzer.analyze(entries, days)
