"""Command line interface for the habit analytics toolkit."""

from __future__ import annotations

import json
import logging
import os
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Dict, Iterator, List, Optional

import typer

from .analyzer import build_habit_report, compute_habit_stats, summarize_habits
from .config import Config
from .console import Console
from .constants import ERROR_MESSAGES, SUCCESS_MESSAGES
from .exceptions import (
    ConfigurationError,
    EntrySourceError,
    HabitAnalyticsError,
    InvalidInputError,
    ValidationError,
)
from .loader import LoadedHabit, load_entries
from .models import HabitEntry
from .reporter import ConsoleReporter
from .validation import parse_iso_date, validate_days

app = typer.Typer(help="Analyze daily habit completion records.")
config_app = typer.Typer(help="Manage configuration settings")
app.add_typer(config_app, name="config")

console = Console()
logger = logging.getLogger(__name__)


def _load_config() -> Config:
    return Config.load()


@contextmanager
def _handle_errors() -> Iterator[None]:
    """Turn package errors into a red message and exit code 1."""
    try:
        yield
    except HabitAnalyticsError as exc:
        logger.debug("Command failed", exc_info=exc)
        console.print(f"[danger]{_error_title(exc)}:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _error_title(exc: HabitAnalyticsError) -> str:
    if isinstance(exc, ConfigurationError):
        return ERROR_MESSAGES['config_invalid']
    if isinstance(exc, EntrySourceError):
        return ERROR_MESSAGES['entries_unreadable']
    if isinstance(exc, ValidationError):
        return ERROR_MESSAGES['entries_invalid']
    return "Error"


def _load_habit(path: Path, habit: Optional[str]) -> LoadedHabit:
    loaded = load_entries(path, habit_name=habit)
    name = loaded.habit_name or path.stem
    console.log("Loaded entries", f"habit={name}", f"count={len(loaded.entries)}")
    return LoadedHabit(habit_name=name, entries=loaded.entries)


def _parse_today(today: Optional[str]) -> Optional[date]:
    if today is None:
        return None
    try:
        return parse_iso_date(today)
    except ValueError as exc:
        raise InvalidInputError(f"{ERROR_MESSAGES['date_invalid']}: {today}") from exc


def _window_days(days: Optional[int], config: Config) -> int:
    window = days if days is not None else config.defaults.days
    validate_days(window)
    return window


def _echo_json(payload: Dict) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


# ============================================================================
# Main Commands
# ============================================================================

HABIT_HELP = "Habit name; replaces the name stored in the file (default: stored name, then the file name)"
DAYS_HELP = "Lookback window in days (default: defaults.days from config)"
TODAY_HELP = "End of the lookback window as YYYY-MM-DD (default: current date)"


@app.command()
def analyze(
    entries_file: Path = typer.Argument(..., help="JSON file with the habit's entries"),
    habit: Optional[str] = typer.Option(None, "--habit", "-n", help=HABIT_HELP),
    days: Optional[int] = typer.Option(None, "--days", "-d", help=DAYS_HELP),
    today: Optional[str] = typer.Option(None, "--today", help=TODAY_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """Analyze one habit: completion rate, streaks, trend, insights and recommendations."""
    with _handle_errors():
        config = _load_config()
        window = _window_days(days, config)
        loaded = _load_habit(entries_file, habit)

        report = build_habit_report(
            loaded.habit_name,
            loaded.entries,
            days=window,
            today=_parse_today(today),
            thresholds=config.thresholds(),
        )

        if as_json:
            _echo_json(report.to_dict())
            return

        ConsoleReporter(console, config.reporter).render_report(report)
        console.log(SUCCESS_MESSAGES['analysis_complete'])


@app.command()
def stats(
    entries_file: Path = typer.Argument(..., help="JSON file with the habit's entries"),
    habit: Optional[str] = typer.Option(None, "--habit", "-n", help=HABIT_HELP),
    days: Optional[int] = typer.Option(None, "--days", "-d", help=DAYS_HELP),
    today: Optional[str] = typer.Option(None, "--today", help=TODAY_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print the statistics as JSON"),
) -> None:
    """Show completion statistics over the logged days of one habit's lookback window."""
    with _handle_errors():
        config = _load_config()
        window = _window_days(days, config)
        loaded = _load_habit(entries_file, habit)
        habit_stats = compute_habit_stats(loaded.entries, window, _parse_today(today))

        if as_json:
            _echo_json({"habitName": loaded.habit_name, **habit_stats.to_dict()})
            return

        ConsoleReporter(console, config.reporter).render_stats(
            loaded.habit_name, habit_stats, window
        )


@app.command()
def summary(
    entries_files: List[Path] = typer.Argument(..., help="One JSON entries file per habit"),
    days: Optional[int] = typer.Option(None, "--days", "-d", help=DAYS_HELP),
    today: Optional[str] = typer.Option(None, "--today", help=TODAY_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON"),
) -> None:
    """Summarize several habits and their average completion rate over a lookback window."""
    with _handle_errors():
        config = _load_config()
        window = _window_days(days, config)
        habits: Dict[str, List[HabitEntry]] = {}
        for path in entries_files:
            loaded = _load_habit(path, None)
            if loaded.habit_name in habits:
                raise InvalidInputError(f"Habit {loaded.habit_name!r} is given more than once")
            habits[loaded.habit_name] = loaded.entries

        result = summarize_habits(habits, window, _parse_today(today))

        if as_json:
            _echo_json(result.to_dict())
            return

        ConsoleReporter(console, config.reporter).render_summary(result, window)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output for debugging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-essential output",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """CLI entry-point callback for shared initialisation."""
    console.set_verbose(verbose)
    console.set_quiet(quiet)

    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if no_color:
        os.environ["NO_COLOR"] = "1"
        console.no_color = True


# ============================================================================
# Config Commands
# ============================================================================

@config_app.command("show")
def show_config() -> None:
    """Display current configuration settings."""
    with _handle_errors():
        config = _load_config()
        for section, values in config.to_display_dict().items():
            console.print(f"[heading]\\[{section}][/]")
            for key, value in values.items():
                console.print(f"  [label]{key}[/] = [value]{value}[/]")


@config_app.command("get")
def config_get(
    key: str = typer.Argument(..., help="Configuration key in dot notation (e.g. defaults.days)"),
) -> None:
    """Get a configuration value.

    Examples:
        habit-analytics config get defaults.days
        habit-analytics config get analysis.weekend_gap_points
    """
    with _handle_errors():
        config = _load_config()
        console.print(f"[label]{key}[/] = [value]{config.get_value(key)}[/]")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key in dot notation (e.g. defaults.days)"),
    value: str = typer.Argument(..., help="Value to set"),
) -> None:
    """Set a configuration value.

    Examples:
        habit-analytics config set defaults.days 14
        habit-analytics config set analysis.trend_delta 0.15
    """
    with _handle_errors():
        config = _load_config()
        config.set_value(key, value)
        config.dump()
        console.print(f"[success]{SUCCESS_MESSAGES['config_saved']}[/]: {key} = {value}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
