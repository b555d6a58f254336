"""Lookback-window report for a single habit."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from habit_analytics.constants import DEFAULT_LOOKBACK_DAYS
from habit_analytics.models import AnalysisThresholds, HabitEntry, HabitReport

from .habit_analyzer import analyze
from .helpers import count_completed, entries_in_window
from .stats import most_frequent_reason, tally_reasons

logger = logging.getLogger(__name__)


def build_habit_report(
    habit_name: str,
    entries: Iterable[HabitEntry],
    days: int = DEFAULT_LOOKBACK_DAYS,
    today: Optional[date] = None,
    thresholds: Optional[AnalysisThresholds] = None,
) -> HabitReport:
    """Analyze a habit over the ``days`` leading up to ``today``.

    Args:
        habit_name: Name of the habit the entries belong to
        entries: All known entries for the habit, in any order
        days: Lookback window length
        today: End of the window (defaults to the current date)
        thresholds: Optional override of the default thresholds

    Returns:
        HabitReport combining the analysis with completion counts and
        miss reasons for the window
    """
    analysis_date = today or date.today()
    window = entries_in_window(entries, days, analysis_date)
    logger.debug(
        "Building report for %s: %d entries in window ending %s",
        habit_name, len(window), analysis_date,
    )

    completions = count_completed(window)

    return HabitReport(
        habit_name=habit_name,
        analysis_date=analysis_date,
        period_days=days,
        analysis=analyze(window, days, thresholds),
        total_completions=completions,
        total_missed=len(window) - completions,
        most_frequent_reason=most_frequent_reason(window),
        common_reasons=tally_reasons(window),
    )
