"""Domain models shared across the habit analytics toolkit."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .constants import (
    COMPLETION_RATE_THRESHOLDS,
    STREAK_THRESHOLDS,
    TREND_THRESHOLDS,
    WEEKDAY_PATTERN_THRESHOLDS,
)


class Trend(str, Enum):
    """Direction of completion-rate change across the analysed history."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


@dataclass(frozen=True, slots=True)
class HabitEntry:
    """One day's completion record for a habit."""

    date: date
    completed: int  # 1 for completed, 0 for missed
    reason: Optional[str] = None  # Only meaningful for missed days
    habit_name: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.completed == 1

    def to_dict(self) -> Dict[str, object]:
        """Serialise the entry using the storage record field names."""

        payload: Dict[str, object] = {
            "date": self.date.isoformat(),
            "completed": self.completed,
        }
        if self.reason:
            payload["reason"] = self.reason
        if self.habit_name:
            payload["habitName"] = self.habit_name
        return payload


@dataclass(frozen=True, slots=True)
class AnalysisThresholds:
    """Tunable constants used by the habit analyzer."""

    trend_min_entries: int = TREND_THRESHOLDS['minimum_entries_for_trend']
    trend_delta: float = TREND_THRESHOLDS['rate_delta']
    weekend_gap_points: float = WEEKDAY_PATTERN_THRESHOLDS['gap_points']
    high_completion_rate: int = COMPLETION_RATE_THRESHOLDS['high']
    moderate_completion_rate: int = COMPLETION_RATE_THRESHOLDS['moderate']
    low_completion_rate: int = COMPLETION_RATE_THRESHOLDS['low']
    momentum_streak: int = STREAK_THRESHOLDS['momentum_days']
    longest_streak_multiplier: int = STREAK_THRESHOLDS['longest_multiplier']


@dataclass(frozen=True, slots=True)
class StreakSummary:
    """Current and longest streak for a single habit."""

    current: int = 0
    longest: int = 0


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Derived metrics for one habit's entries over a lookback window."""

    completion_rate: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    trend: Trend = Trend.STABLE
    insights: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        """Serialise the result for a presentation layer."""

        return {
            "completionRate": self.completion_rate,
            "currentStreak": self.current_streak,
            "longestStreak": self.longest_streak,
            "trend": self.trend.value,
            "insights": list(self.insights),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True, slots=True)
class MissReason:
    """How often a reason was given for missing a habit."""

    reason: str
    count: int

    def to_dict(self) -> Dict[str, object]:
        return {"reason": self.reason, "count": self.count}


@dataclass(slots=True)
class HabitStats:
    """Completion statistics over the days that were actually logged."""

    total_days: int = 0
    completed_days: int = 0
    completion_rate: float = 0.0  # Percent of logged days
    current_streak: int = 0
    longest_streak: int = 0
    common_reasons: List[MissReason] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        """Serialise habit statistics."""
        return {
            "totalDays": self.total_days,
            "completedDays": self.completed_days,
            "completionRate": self.completion_rate,
            "streak": self.current_streak,
            "longestStreak": self.longest_streak,
            "commonReasons": [reason.to_dict() for reason in self.common_reasons],
        }


@dataclass(slots=True)
class HabitReport:
    """Analysis of one habit over a lookback window ending on ``analysis_date``."""

    habit_name: str
    analysis_date: date
    period_days: int
    analysis: AnalysisResult
    total_completions: int = 0
    total_missed: int = 0
    most_frequent_reason: Optional[str] = None
    common_reasons: List[MissReason] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        """Convert the report into a JSON serialisable structure."""

        return {
            "habitName": self.habit_name,
            "analysisDate": self.analysis_date.isoformat(),
            "periodDays": self.period_days,
            "completionRate": self.analysis.completion_rate,
            "streak": self.analysis.current_streak,
            "longestStreak": self.analysis.longest_streak,
            "totalCompletions": self.total_completions,
            "totalMissed": self.total_missed,
            "insights": list(self.analysis.insights),
            "recommendations": list(self.analysis.recommendations),
            "trend": self.analysis.trend.value,
            "mostFrequentReason": self.most_frequent_reason,
            "commonReasons": [reason.to_dict() for reason in self.common_reasons],
        }


@dataclass(slots=True)
class HabitsSummary:
    """Roll-up of statistics across several habits."""

    total_habits: int = 0
    avg_completion_rate: float = 0.0
    habits: Dict[str, HabitStats] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        """Serialise the summary."""
        return {
            "totalHabits": self.total_habits,
            "avgCompletionRate": self.avg_completion_rate,
            "habits": {name: stats.to_dict() for name, stats in self.habits.items()},
        }
