"""Constants and configuration values for the habit analytics toolkit.

This package organizes constants into logical modules:
- analysis_thresholds: Threshold values for streaks, trends and insights
- messages: Insight, recommendation and CLI messages
- ui_styles: Console styles and table configuration
"""

from __future__ import annotations

from habit_analytics.constants.analysis_thresholds import (
    COMPLETION_RATE_THRESHOLDS,
    DEFAULT_LOOKBACK_DAYS,
    STREAK_THRESHOLDS,
    TREND_THRESHOLDS,
    WEEKDAY_PATTERN_THRESHOLDS,
    WEEKEND_DAYS,
)
from habit_analytics.constants.messages import (
    ERROR_MESSAGES,
    INFO_MESSAGES,
    INSIGHT_MESSAGES,
    RECOMMENDATION_MESSAGES,
    SUCCESS_MESSAGES,
)
from habit_analytics.constants.ui_styles import (
    RATE_STYLES,
    TABLE_CONFIG,
    THEME_STYLES,
)

__all__ = [
    "COMPLETION_RATE_THRESHOLDS",
    "DEFAULT_LOOKBACK_DAYS",
    "STREAK_THRESHOLDS",
    "TREND_THRESHOLDS",
    "WEEKDAY_PATTERN_THRESHOLDS",
    "WEEKEND_DAYS",
    "ERROR_MESSAGES",
    "INFO_MESSAGES",
    "INSIGHT_MESSAGES",
    "RECOMMENDATION_MESSAGES",
    "SUCCESS_MESSAGES",
    "RATE_STYLES",
    "TABLE_CONFIG",
    "THEME_STYLES",
]
