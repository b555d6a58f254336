"""Habit analytics: streaks, trends, insights and recommendations.

The HabitAnalyzer class acts as an orchestrator, delegating to specialized
analyzers (streaks, trend, weekday pattern) and builders (insights,
recommendations).
"""

from __future__ import annotations

from .habit_analyzer import HabitAnalyzer, analyze
from .helpers import entries_in_window
from .report import build_habit_report
from .stats import compute_habit_stats, most_frequent_reason, summarize_habits, tally_reasons

__all__ = [
    "HabitAnalyzer",
    "analyze",
    "build_habit_report",
    "compute_habit_stats",
    "entries_in_window",
    "most_frequent_reason",
    "summarize_habits",
    "tally_reasons",
]
