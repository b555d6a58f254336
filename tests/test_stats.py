from datetime import date, timedelta

import pytest

from habit_analytics import build_habit_report, compute_habit_stats, summarize_habits
from habit_analytics.analyzer import entries_in_window, most_frequent_reason, tally_reasons
from habit_analytics.exceptions import InvalidInputError
from habit_analytics.models import AnalysisThresholds, HabitEntry, MissReason, Trend

TODAY = date(2024, 4, 30)


def days_ago(n: int) -> date:
    return TODAY - timedelta(days=n)


def test_tally_reasons_orders_by_frequency():
    entries = [
        HabitEntry(date(2024, 3, 1), 0, reason="travel"),
        HabitEntry(date(2024, 3, 2), 0, reason="sick"),
        HabitEntry(date(2024, 3, 3), 0, reason="sick"),
        HabitEntry(date(2024, 3, 4), 1),
        HabitEntry(date(2024, 3, 5), 0),
    ]

    assert tally_reasons(entries) == [MissReason("sick", 2), MissReason("travel", 1)]
    assert most_frequent_reason(entries) == "sick"


def test_tally_reasons_ties_keep_first_seen_order():
    entries = [
        HabitEntry(date(2024, 3, 2), 0, reason="busy"),
        HabitEntry(date(2024, 3, 1), 0, reason="tired"),
    ]

    assert [reason.reason for reason in tally_reasons(entries)] == ["tired", "busy"]


def test_most_frequent_reason_none_without_reasons():
    assert most_frequent_reason([HabitEntry(date(2024, 3, 1), 0)]) is None


def test_compute_habit_stats_uses_logged_days():
    entries = [
        HabitEntry(date(2024, 3, 1), 1),
        HabitEntry(date(2024, 3, 2), 0, reason="tired"),
        HabitEntry(date(2024, 3, 3), 1),
        HabitEntry(date(2024, 3, 4), 1),
    ]

    stats = compute_habit_stats(entries, today=date(2024, 3, 10))

    assert stats.total_days == 4
    assert stats.completed_days == 3
    assert stats.completion_rate == 75.0
    assert stats.current_streak == 2
    assert stats.longest_streak == 2
    assert stats.common_reasons == [MissReason("tired", 1)]


def test_compute_habit_stats_empty():
    stats = compute_habit_stats([], today=TODAY)

    assert stats.total_days == 0
    assert stats.completion_rate == 0.0
    assert stats.common_reasons == []


def test_summarize_habits_averages_rates():
    summary = summarize_habits(
        {
            "Read": [HabitEntry(date(2024, 3, 1), 1), HabitEntry(date(2024, 3, 2), 0)],
            "Run": [HabitEntry(date(2024, 3, 1), 1), HabitEntry(date(2024, 3, 2), 0), HabitEntry(date(2024, 3, 3), 0)],
        },
        today=date(2024, 3, 10),
    )

    assert summary.total_habits == 2
    assert summary.avg_completion_rate == pytest.approx(41.67)
    assert set(summary.habits) == {"Read", "Run"}
    assert summary.to_dict()["avgCompletionRate"] == summary.avg_completion_rate


def test_summarize_no_habits():
    summary = summarize_habits({}, today=TODAY)

    assert summary.total_habits == 0
    assert summary.avg_completion_rate == 0.0


def test_entries_in_window_is_inclusive():
    entries = [
        HabitEntry(days_ago(31), 1),
        HabitEntry(days_ago(30), 1),
        HabitEntry(days_ago(0), 1),
        HabitEntry(TODAY + timedelta(days=1), 1),
    ]

    kept = entries_in_window(entries, 30, TODAY)

    assert [entry.date for entry in kept] == [days_ago(30), days_ago(0)]


def test_entries_in_window_rejects_bad_days():
    with pytest.raises(InvalidInputError):
        entries_in_window([], 0, TODAY)


def test_entries_in_window_defaults_to_current_date():
    recent = HabitEntry(date.today(), 1)
    stale = HabitEntry(date.today() - timedelta(days=31), 1)

    assert entries_in_window([stale, recent], 30) == [recent]


def test_build_habit_report_counts_window_only():
    entries = [HabitEntry(days_ago(n), 1) for n in range(10)]
    entries.append(HabitEntry(days_ago(12), 0, reason="travel"))
    entries.append(HabitEntry(days_ago(45), 0, reason="ignored"))

    report = build_habit_report("Read", entries, days=30, today=TODAY)

    assert report.habit_name == "Read"
    assert report.analysis_date == TODAY
    assert report.period_days == 30
    assert report.total_completions == 10
    assert report.total_missed == 1
    assert report.most_frequent_reason == "travel"
    assert report.analysis.completion_rate == 33
    assert report.analysis.current_streak == 10
    assert report.analysis.longest_streak == 10
    assert report.analysis.trend is Trend.STABLE


def test_build_habit_report_passes_thresholds():
    entries = [HabitEntry(days_ago(n), 1 if n < 3 else 0) for n in range(6)]

    default = build_habit_report("Read", entries, days=7, today=TODAY)
    tuned = build_habit_report(
        "Read", entries, days=7, today=TODAY, thresholds=AnalysisThresholds(trend_min_entries=6)
    )

    assert default.analysis.trend is Trend.STABLE
    assert tuned.analysis.trend is Trend.IMPROVING


def test_report_to_dict_shape():
    entries = [HabitEntry(days_ago(1), 1), HabitEntry(days_ago(0), 0, reason="sick")]

    payload = build_habit_report("Read", entries, days=30, today=TODAY).to_dict()

    assert payload["habitName"] == "Read"
    assert payload["analysisDate"] == "2024-04-30"
    assert payload["periodDays"] == 30
    assert payload["completionRate"] == 3
    assert payload["streak"] == 0
    assert payload["longestStreak"] == 1
    assert payload["totalCompletions"] == 1
    assert payload["totalMissed"] == 1
    assert payload["trend"] == "stable"
    assert payload["mostFrequentReason"] == "sick"
    assert payload["commonReasons"] == [{"reason": "sick", "count": 1}]


def _old_misses_and_recent_completions():
    old = [HabitEntry(days_ago(n), 0, reason="old") for n in range(61, 91)]
    recent = [HabitEntry(days_ago(n), 1) for n in range(30)]
    return old + recent


def test_compute_habit_stats_ignores_entries_before_window():
    stats = compute_habit_stats(_old_misses_and_recent_completions(), today=TODAY)

    assert stats.total_days == 30
    assert stats.completed_days == 30
    assert stats.completion_rate == 100.0
    assert stats.current_streak == 30
    assert stats.longest_streak == 30
    assert stats.common_reasons == []


def test_compute_habit_stats_custom_window():
    entries = [HabitEntry(days_ago(n), 1 if n < 5 else 0, reason=None if n < 5 else "busy") for n in range(20)]

    stats = compute_habit_stats(entries, days=9, today=TODAY)

    assert stats.total_days == 10
    assert stats.completed_days == 5
    assert stats.completion_rate == 50.0
    assert stats.common_reasons == [MissReason("busy", 5)]


def test_summarize_habits_uses_window():
    summary = summarize_habits(
        {
            "Read": _old_misses_and_recent_completions(),
            "Run": [HabitEntry(days_ago(1), 1), HabitEntry(days_ago(0), 0)],
        },
        today=TODAY,
    )

    assert summary.habits["Read"].completion_rate == 100.0
    assert summary.habits["Read"].total_days == 30
    assert summary.avg_completion_rate == 75.0


@pytest.mark.parametrize("days", [0, -7])
def test_summarize_habits_rejects_bad_window(days):
    with pytest.raises(InvalidInputError):
        summarize_habits({}, days=days, today=TODAY)
