"""Completion statistics and multi-habit summaries."""

from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from typing import Iterable, List, Mapping, Optional

from habit_analytics.constants import DEFAULT_LOOKBACK_DAYS
from habit_analytics.models import HabitEntry, HabitsSummary, HabitStats, MissReason
from habit_analytics.validation import validate_days

from .helpers import count_completed, entries_in_window, sort_chronologically
from .trends import StreakAnalyzer

logger = logging.getLogger(__name__)


def tally_reasons(entries: Iterable[HabitEntry]) -> List[MissReason]:
    """Count the reasons given for missed days, most frequent first.

    Ties keep the chronological order in which each reason first appeared.
    """
    counts = Counter(
        entry.reason
        for entry in sort_chronologically(entries)
        if not entry.is_completed and entry.reason
    )
    return [MissReason(reason=reason, count=count) for reason, count in counts.most_common()]


def most_frequent_reason(entries: Iterable[HabitEntry]) -> Optional[str]:
    reasons = tally_reasons(entries)
    return reasons[0].reason if reasons else None


def compute_habit_stats(
    entries: Iterable[HabitEntry],
    days: int = DEFAULT_LOOKBACK_DAYS,
    today: Optional[date] = None,
) -> HabitStats:
    """Compute completion statistics over the days logged in a lookback window.

    Only entries dated ``today - days`` through ``today`` are counted. Unlike
    the analysis completion rate, the denominator is the number of logged
    entries in that window, so unlogged days do not count against the habit.

    Args:
        entries: All known entries for the habit, in any order
        days: Lookback window length
        today: End of the window (defaults to the current date)

    Raises:
        InvalidInputError: If ``days`` is not a positive integer
    """
    window = entries_in_window(entries, days, today)
    total_days = len(window)
    completed_days = count_completed(window)
    streaks = StreakAnalyzer.analyze(window)

    return HabitStats(
        total_days=total_days,
        completed_days=completed_days,
        completion_rate=completed_days * 100 / total_days if total_days > 0 else 0.0,
        current_streak=streaks.current,
        longest_streak=streaks.longest,
        common_reasons=tally_reasons(window),
    )


def summarize_habits(
    habits: Mapping[str, Iterable[HabitEntry]],
    days: int = DEFAULT_LOOKBACK_DAYS,
    today: Optional[date] = None,
) -> HabitsSummary:
    """Roll up windowed statistics for several habits.

    Args:
        habits: Mapping of habit name to that habit's entries
        days: Lookback window applied to every habit
        today: End of the window (defaults to the current date)

    Returns:
        HabitsSummary whose average completion rate is rounded to 2 decimals
    """
    validate_days(days)
    end = today or date.today()
    per_habit = {
        name: compute_habit_stats(entries, days, end) for name, entries in habits.items()
    }
    rates = [stats.completion_rate for stats in per_habit.values()]
    average = sum(rates) / len(rates) if rates else 0.0

    logger.debug("Summarized %d habits over %d days ending %s", len(per_habit), days, end)

    return HabitsSummary(
        total_habits=len(per_habit),
        avg_completion_rate=round(average, 2),
        habits=per_habit,
    )
