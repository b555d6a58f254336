"""Trends analysis modules."""

from .streak_analyzer import StreakAnalyzer
from .trend_analyzer import TrendAnalyzer
from .weekday_analyzer import WeekdayPatternAnalyzer, WeekdaySplit

__all__ = [
    "StreakAnalyzer",
    "TrendAnalyzer",
    "WeekdayPatternAnalyzer",
    "WeekdaySplit",
]
