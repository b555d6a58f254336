"""Streak analysis for habit completion records."""

from __future__ import annotations

from typing import Iterable

from habit_analytics.models import HabitEntry, StreakSummary

from ..helpers import sort_chronologically


class StreakAnalyzer:
    """Analyzer for calculating current and longest completion streaks.

    Streaks are counted over logged entries only. A calendar day with no
    entry is skipped rather than treated as a miss.
    """

    @staticmethod
    def analyze(entries: Iterable[HabitEntry]) -> StreakSummary:
        """Analyze streak data for one habit.

        Args:
            entries: Completion records in any order

        Returns:
            StreakSummary with current and longest streak lengths
        """
        entries = list(entries)
        if not entries:
            return StreakSummary()

        return StreakSummary(
            current=StreakAnalyzer.calculate_current_streak(entries),
            longest=StreakAnalyzer.calculate_longest_streak(entries),
        )

    @staticmethod
    def calculate_current_streak(entries: Iterable[HabitEntry]) -> int:
        """Calculate the run of completed entries ending at the most recent one.

        Args:
            entries: Completion records in any order

        Returns:
            Number of consecutive completed entries counting back from the
            most recent entry, stopping at the first miss
        """
        streak = 0
        for entry in sort_chronologically(entries, newest_first=True):
            if not entry.is_completed:
                break
            streak += 1
        return streak

    @staticmethod
    def calculate_longest_streak(entries: Iterable[HabitEntry]) -> int:
        """Calculate the longest run of completed entries anywhere in the history.

        Args:
            entries: Completion records in any order

        Returns:
            Longest streak length
        """
        longest = 0
        current = 0

        for entry in sort_chronologically(entries):
            if entry.is_completed:
                current += 1
                longest = max(longest, current)
            else:
                current = 0

        return longest
