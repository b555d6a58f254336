"""Console rendering of habit reports and summaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import ReporterConfig
from .console import Console
from .constants import INFO_MESSAGES, RATE_STYLES, TABLE_CONFIG
from .models import HabitReport, HabitsSummary, HabitStats, MissReason


def rate_style(rate: float) -> str:
    """Pick the theme style for a completion percentage."""
    for lower_bound, style in RATE_STYLES:
        if rate >= lower_bound:
            return style
    return RATE_STYLES[-1][1]


def _table(title: str) -> Table:
    return Table(
        title=title,
        box=getattr(box, TABLE_CONFIG['box_style']),
        show_header=True,
        header_style=TABLE_CONFIG['header_style'],
    )


@dataclass(slots=True)
class ConsoleReporter:
    """Render analysis results through a themed rich console."""

    console: Console
    config: ReporterConfig = field(default_factory=ReporterConfig)

    def render_report(self, report: HabitReport) -> None:
        """Print the metrics, insights and recommendations of a habit report."""
        analysis = report.analysis
        trend = analysis.trend.value

        metrics = _table(f"[habit]{escape(report.habit_name)}[/] - last {report.period_days} days")
        metrics.add_column("Metric", style="label")
        metrics.add_column("Value", justify="right", style="value")
        metrics.add_row(
            "Completion rate",
            f"[{rate_style(analysis.completion_rate)}]{analysis.completion_rate}%[/]",
        )
        metrics.add_row("Current streak", f"[streak]{analysis.current_streak}[/] days")
        metrics.add_row("Longest streak", f"{analysis.longest_streak} days")
        metrics.add_row("Trend", f"[{trend}]{trend}[/]")
        metrics.add_row("Completed", str(report.total_completions))
        metrics.add_row("Missed", str(report.total_missed))
        metrics.add_row("Analysis date", report.analysis_date.isoformat())
        self.console.print(metrics)

        if not report.total_completions and not report.total_missed:
            self.console.note(INFO_MESSAGES['no_entries'])

        insights = list(analysis.insights)[: self.config.max_insights]
        self.console.print(self._bullet_panel("Insights", insights, "heading"))
        self.console.print(
            self._bullet_panel("Recommendations", list(analysis.recommendations), "streak")
        )

        if self.config.show_reasons:
            self.render_reasons(report.common_reasons)

    def render_reasons(self, reasons: List[MissReason]) -> None:
        if not reasons:
            self.console.note(f"Most frequent miss reason: {INFO_MESSAGES['no_reasons']}")
            return

        table = _table("Reasons for missed days")
        table.add_column("#", justify="right", style=TABLE_CONFIG['index_style'],
                         width=TABLE_CONFIG['index_width'])
        table.add_column("Reason", style="value")
        table.add_column("Count", justify="right", style="warning")
        for index, reason in enumerate(reasons, 1):
            table.add_row(str(index), escape(reason.reason), str(reason.count))
        self.console.print(table)

    def render_stats(self, habit_name: str, stats: HabitStats, days: int) -> None:
        """Print statistics over the logged days of one habit's window."""
        table = _table(f"[habit]{escape(habit_name)}[/] - logged days in the last {days} days")
        table.add_column("Logged", justify="right")
        table.add_column("Completed", justify="right", style="success")
        table.add_column("Rate", justify="right")
        table.add_column("Streak", justify="right")
        table.add_column("Longest", justify="right")
        table.add_row(
            str(stats.total_days),
            str(stats.completed_days),
            f"[{rate_style(stats.completion_rate)}]{stats.completion_rate:.1f}%[/]",
            str(stats.current_streak),
            str(stats.longest_streak),
        )
        self.console.print(table)
        if self.config.show_reasons:
            self.render_reasons(stats.common_reasons)

    def render_summary(self, summary: HabitsSummary, days: int) -> None:
        """Print one row per habit plus the average completion rate."""
        if not summary.habits:
            self.console.print("[warning]No habits to summarize.[/]")
            return

        table = _table(f"Habits - last {days} days")
        table.add_column("Habit", style="habit", no_wrap=True)
        table.add_column("Logged", justify="right")
        table.add_column("Rate", justify="right")
        table.add_column("Streak", justify="right")
        table.add_column("Longest", justify="right")
        for name, stats in summary.habits.items():
            table.add_row(
                escape(name),
                str(stats.total_days),
                f"[{rate_style(stats.completion_rate)}]{stats.completion_rate:.1f}%[/]",
                str(stats.current_streak),
                str(stats.longest_streak),
            )
        self.console.print(table)
        self.console.print(
            f"[label]Habits:[/] {summary.total_habits}  "
            f"[label]Average completion:[/] {summary.avg_completion_rate:.2f}%"
        )

    @staticmethod
    def _bullet_panel(title: str, lines: List[str], style: str) -> Panel:
        body = "\n".join(f"• {line}" for line in lines) if lines else "[note]-[/]"
        return Panel(body, title=f"[{style}]{title}[/]", border_style="border", expand=False)


__all__ = ["ConsoleReporter", "rate_style"]
