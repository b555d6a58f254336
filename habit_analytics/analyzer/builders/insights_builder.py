"""Build human-readable insights from computed habit metrics."""

from __future__ import annotations

from typing import Iterable, List, Optional

from habit_analytics.constants import INSIGHT_MESSAGES
from habit_analytics.models import AnalysisThresholds, HabitEntry, StreakSummary

from ..trends import WeekdayPatternAnalyzer


class InsightsBuilder:
    """Generate ordered observations about a habit.

    Every applicable insight is included; the order is rate tier, streak,
    past capability, then the weekend/weekday pattern.
    """

    @staticmethod
    def build(
        completion_rate: int,
        streaks: StreakSummary,
        entries: Iterable[HabitEntry],
        thresholds: Optional[AnalysisThresholds] = None,
    ) -> List[str]:
        """Generate insights for one habit."""
        thresholds = thresholds or AnalysisThresholds()
        insights = [
            InsightsBuilder._completion_rate_insight(completion_rate, thresholds),
            InsightsBuilder._streak_insight(streaks.current, thresholds),
        ]

        if streaks.longest > streaks.current * thresholds.longest_streak_multiplier:
            insights.append(INSIGHT_MESSAGES['past_capability'].format(longest=streaks.longest))

        struggle = WeekdayPatternAnalyzer.find_struggle(entries, thresholds.weekend_gap_points)
        if struggle == WeekdayPatternAnalyzer.WEEKEND:
            insights.append(INSIGHT_MESSAGES['weekend_struggle'])
        elif struggle == WeekdayPatternAnalyzer.WEEKDAY:
            insights.append(INSIGHT_MESSAGES['weekday_struggle'])

        return insights

    @staticmethod
    def _completion_rate_insight(completion_rate: int, thresholds: AnalysisThresholds) -> str:
        if completion_rate >= thresholds.high_completion_rate:
            return INSIGHT_MESSAGES['high_consistency']
        if completion_rate >= thresholds.moderate_completion_rate:
            return INSIGHT_MESSAGES['moderate_progress']
        return INSIGHT_MESSAGES['needs_attention']

    @staticmethod
    def _streak_insight(current_streak: int, thresholds: AnalysisThresholds) -> str:
        if current_streak >= thresholds.momentum_streak:
            return INSIGHT_MESSAGES['momentum'].format(streak=current_streak)
        if current_streak > 0:
            return INSIGHT_MESSAGES['building_streak'].format(streak=current_streak)
        return INSIGHT_MESSAGES['fresh_start']
