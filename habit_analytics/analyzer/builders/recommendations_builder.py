"""Build actionable recommendations from computed habit metrics."""

from __future__ import annotations

from typing import List, Optional

from habit_analytics.constants import RECOMMENDATION_MESSAGES
from habit_analytics.models import AnalysisThresholds, StreakSummary, Trend


class RecommendationsBuilder:
    """Generate ordered, cumulative suggestions for a habit."""

    # Trend -> recommendation keys, in display order
    TREND_RECOMMENDATIONS = {
        Trend.DECLINING: ('identify_changes', 'adjust_difficulty'),
        Trend.IMPROVING: ('increase_difficulty',),
        Trend.STABLE: ('maintain_consistency',),
    }

    @staticmethod
    def build(
        completion_rate: int,
        streaks: StreakSummary,
        trend: Trend,
        thresholds: Optional[AnalysisThresholds] = None,
    ) -> List[str]:
        """Generate recommendations for one habit.

        Args:
            completion_rate: Window completion rate (percent)
            streaks: Current and longest streak
            trend: Trend classification
            thresholds: Optional override of the default thresholds

        Returns:
            Recommendations ordered as rate tier, streak, trend, then the
            closing general recommendation
        """
        thresholds = thresholds or AnalysisThresholds()
        keys: List[str] = []

        if completion_rate < thresholds.low_completion_rate:
            keys.extend(('make_smaller', 'environmental_cues'))
        elif completion_rate < thresholds.high_completion_rate:
            keys.extend(('habit_stacking', 'visual_tracking'))

        if streaks.current == 0:
            keys.append('rebuild_momentum')
        elif streaks.current < thresholds.momentum_streak:
            keys.append('reach_milestone')

        keys.extend(RecommendationsBuilder.TREND_RECOMMENDATIONS[trend])
        keys.append('review_regularly')

        return [RECOMMENDATION_MESSAGES[key] for key in keys]
