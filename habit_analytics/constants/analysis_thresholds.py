"""Analysis thresholds and scoring constants."""

from __future__ import annotations

# =============================================================================
# Analysis Window
# =============================================================================

DEFAULT_LOOKBACK_DAYS = 30

# =============================================================================
# Analysis Thresholds
# =============================================================================

# Completion rate tiers (percent) for insights and recommendations
COMPLETION_RATE_THRESHOLDS = {
    'high': 80,  # At or above this is consistent
    'moderate': 60,  # At or above this is moderate progress
    'low': 50,  # Below this the habit should be made easier
}

# Streak thresholds
STREAK_THRESHOLDS = {
    'momentum_days': 7,  # A streak this long counts as momentum
    'longest_multiplier': 2,  # Longest > current * this cites past capability
}

# Trend analysis thresholds
TREND_THRESHOLDS = {
    'minimum_entries_for_trend': 14,  # Need at least 2 weeks for trend analysis
    'rate_delta': 0.10,  # Half-over-half completion fraction change
}

# Weekend vs weekday comparison
WEEKDAY_PATTERN_THRESHOLDS = {
    'gap_points': 20,  # Percentage-point gap between buckets
}

# date.weekday() values for Saturday and Sunday
WEEKEND_DAYS = frozenset({5, 6})
