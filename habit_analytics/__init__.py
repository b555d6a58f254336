"""Habit completion analytics: streaks, trends, insights and recommendations."""

from __future__ import annotations

from .analyzer import (
    HabitAnalyzer,
    analyze,
    build_habit_report,
    compute_habit_stats,
    summarize_habits,
)
from .models import AnalysisResult, AnalysisThresholds, HabitEntry, Trend
from .validation import parse_entries

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "AnalysisThresholds",
    "HabitAnalyzer",
    "HabitEntry",
    "Trend",
    "analyze",
    "build_habit_report",
    "compute_habit_stats",
    "parse_entries",
    "summarize_habits",
]
