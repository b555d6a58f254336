from datetime import date, timedelta
from pathlib import Path

import pytest

from habit_analytics.analyzer import analyze
from habit_analytics.config import Config
from habit_analytics.exceptions import ConfigurationError
from habit_analytics.models import AnalysisThresholds, HabitEntry, Trend


def test_load_missing_file_returns_defaults(tmp_path: Path):
    config = Config.load(tmp_path / "absent.toml")

    assert config.defaults.days == 30
    assert config.thresholds() == AnalysisThresholds()
    assert config.reporter.show_reasons is True


def test_dump_and_load_roundtrip(tmp_path: Path):
    path = tmp_path / "nested" / "config.toml"
    config = Config()
    config.set_value("defaults.days", "14")
    config.set_value("analysis.weekend_gap_points", "15")
    config.set_value("reporter.show_reasons", "no")

    config.dump(path)
    loaded = Config.load(path)

    assert loaded.defaults.days == 14
    assert loaded.analysis.weekend_gap_points == 15.0
    assert loaded.reporter.show_reasons is False


def test_dump_keeps_backup_of_existing_file(tmp_path: Path):
    path = tmp_path / "config.toml"
    Config().dump(path)
    Config().dump(path)

    assert list(tmp_path.glob("config.*.bak"))


def test_set_value_converts_types():
    config = Config()

    config.set_value("analysis.trend_delta", "0.25")
    config.set_value("analysis.trend_min_entries", "10")

    assert config.get_value("analysis.trend_delta") == 0.25
    assert config.get_value("analysis.trend_min_entries") == 10


@pytest.mark.parametrize(
    "key, value",
    [
        ("days", "7"),
        ("unknown.days", "7"),
        ("defaults.weeks", "7"),
        ("defaults.days", "seven"),
        ("defaults.days", "0"),
        ("analysis.trend_delta", "1.5"),
        ("analysis.moderate_completion_rate", "90"),
        ("reporter.max_insights", "0"),
    ],
)
def test_set_value_rejects_invalid_input(key, value):
    config = Config()

    with pytest.raises(ConfigurationError):
        config.set_value(key, value)

    assert config.defaults.days == 30
    assert config.analysis == Config().analysis


def test_get_value_rejects_unknown_key():
    with pytest.raises(ConfigurationError):
        Config().get_value("analysis.nope")


def test_load_rejects_corrupted_file(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text("[defaults\ndays = ", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        Config.load(path)


def test_load_rejects_invalid_values(tmp_path: Path):
    path = tmp_path / "config.toml"
    path.write_text("[defaults]\ndays = -3\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        Config.load(path)


def test_configured_thresholds_change_the_analysis():
    start = date(2024, 3, 4)
    entries = [HabitEntry(start + timedelta(days=i), 1 if i >= 4 else 0) for i in range(8)]
    config = Config()

    assert analyze(entries, 8, config.thresholds()).trend is Trend.STABLE

    config.set_value("analysis.trend_min_entries", "8")

    assert analyze(entries, 8, config.thresholds()).trend is Trend.IMPROVING
