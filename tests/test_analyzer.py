from datetime import date, timedelta
from pathlib import Path
import random
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from habit_analytics import HabitAnalyzer, analyze
from habit_analytics.constants import INSIGHT_MESSAGES, RECOMMENDATION_MESSAGES
from habit_analytics.exceptions import InvalidInputError
from habit_analytics.models import AnalysisResult, HabitEntry, Trend

MONDAY = date(2024, 3, 4)


def make_entries(pattern, start=MONDAY):
    """One entry per consecutive day starting at ``start``."""
    return [
        HabitEntry(date=start + timedelta(days=offset), completed=completed)
        for offset, completed in enumerate(pattern)
    ]


def test_thirty_completed_days():
    result = analyze(make_entries([1] * 30))

    assert result.completion_rate == 100
    assert result.current_streak == 30
    assert result.longest_streak == 30
    assert result.trend is Trend.STABLE
    assert result.insights == (
        INSIGHT_MESSAGES['high_consistency'],
        "Great momentum! You're on a 30-day streak.",
    )
    assert result.recommendations == (
        RECOMMENDATION_MESSAGES['maintain_consistency'],
        RECOMMENDATION_MESSAGES['review_regularly'],
    )


def test_streak_ending_in_completed_run():
    result = analyze(make_entries([0, 0, 1, 1, 1]))

    assert result.current_streak == 3
    assert result.longest_streak == 3


def test_miss_before_latest_day_resets_current_streak():
    result = analyze(make_entries([1, 1, 0, 1]))

    assert result.current_streak == 1
    assert result.longest_streak == 2


def test_completed_then_missed_is_declining():
    result = analyze(make_entries([1] * 10 + [0] * 10))

    assert result.trend is Trend.DECLINING
    assert result.completion_rate == 33
    assert result.current_streak == 0
    assert result.longest_streak == 10
    assert result.insights == (
        INSIGHT_MESSAGES['needs_attention'],
        INSIGHT_MESSAGES['fresh_start'],
        "Your longest streak was 10 days - you've done it before, you can do it again!",
    )
    assert result.recommendations == (
        RECOMMENDATION_MESSAGES['make_smaller'],
        RECOMMENDATION_MESSAGES['environmental_cues'],
        RECOMMENDATION_MESSAGES['rebuild_momentum'],
        RECOMMENDATION_MESSAGES['identify_changes'],
        RECOMMENDATION_MESSAGES['adjust_difficulty'],
        RECOMMENDATION_MESSAGES['review_regularly'],
    )


def test_empty_entries_use_defaults():
    result = analyze([])

    assert result.completion_rate == 0
    assert result.current_streak == 0
    assert result.longest_streak == 0
    assert result.trend is Trend.STABLE
    assert result.insights == (
        INSIGHT_MESSAGES['needs_attention'],
        INSIGHT_MESSAGES['fresh_start'],
    )
    assert result.recommendations == (
        RECOMMENDATION_MESSAGES['make_smaller'],
        RECOMMENDATION_MESSAGES['environmental_cues'],
        RECOMMENDATION_MESSAGES['rebuild_momentum'],
        RECOMMENDATION_MESSAGES['maintain_consistency'],
        RECOMMENDATION_MESSAGES['review_regularly'],
    )


def test_completion_rate_uses_window_as_denominator():
    # 7 completions over a 30 day window, regardless of only 7 entries logged
    assert analyze(make_entries([1] * 7)).completion_rate == 23
    assert analyze(make_entries([1] * 7), days=7).completion_rate == 100


def test_completion_rate_rounds_half_up():
    assert analyze(make_entries([1]), days=8).completion_rate == 13


def test_completion_rate_is_capped_when_entries_exceed_window():
    result = analyze(make_entries([1] * 40), days=30)

    assert result.completion_rate == 100


def test_result_does_not_depend_on_input_order():
    entries = make_entries([1, 0, 1, 1, 0, 0, 1, 1, 1, 0, 1, 1, 1, 1, 0, 1, 1])
    shuffled = list(entries)
    random.Random(7).shuffle(shuffled)

    assert analyze(shuffled) == analyze(entries)
    assert analyze(list(reversed(entries))) == analyze(entries)


def test_gaps_are_not_misses():
    entries = [
        HabitEntry(date(2024, 3, 1), 1),
        HabitEntry(date(2024, 3, 5), 1),
        HabitEntry(date(2024, 3, 20), 1),
    ]

    result = analyze(entries)

    assert result.current_streak == 3
    assert result.longest_streak == 3


def test_earlier_miss_does_not_reduce_current_streak():
    recent = make_entries([1, 1, 1], start=date(2024, 3, 10))
    with_old_miss = recent + [HabitEntry(date(2024, 3, 1), 0, reason="travel")]

    assert analyze(with_old_miss).current_streak == analyze(recent).current_streak == 3


def test_invariants_hold_for_random_histories():
    rng = random.Random(42)
    for _ in range(50):
        pattern = [rng.randint(0, 1) for _ in range(rng.randint(0, 60))]
        result = analyze(make_entries(pattern), days=rng.randint(1, 60))

        assert 0 <= result.completion_rate <= 100
        assert result.current_streak <= result.longest_streak
        if len(pattern) < 14:
            assert result.trend is Trend.STABLE


@pytest.mark.parametrize("days", [0, -5, 2.5, True])
def test_invalid_window_is_rejected(days):
    with pytest.raises(InvalidInputError):
        analyze(make_entries([1, 1]), days=days)


def test_analyzer_instance_is_reusable():
    analyzer = HabitAnalyzer()
    first = analyzer.analyze(make_entries([1, 0, 1]))
    analyzer.analyze(make_entries([0] * 20))

    assert analyzer.analyze(make_entries([1, 0, 1])) == first


def test_result_to_dict_uses_presentation_keys():
    payload = analyze(make_entries([1, 1, 0, 1])).to_dict()

    assert payload["completionRate"] == 10
    assert payload["currentStreak"] == 1
    assert payload["longestStreak"] == 2
    assert payload["trend"] == "stable"
    assert isinstance(payload["insights"], list)
    assert isinstance(payload["recommendations"], list)


def test_result_is_immutable():
    result = analyze(make_entries([1]))

    with pytest.raises(AttributeError):
        result.completion_rate = 50  # type: ignore[misc]
    assert isinstance(result, AnalysisResult)
