"""Themed rich console shared by the CLI and the reporter."""

from __future__ import annotations

from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.theme import Theme

from .constants import THEME_STYLES


class Console(RichConsole):
    """Rich console using the habit palette.

    ``quiet`` silences everything printed through :meth:`print`; ``log``
    output additionally requires ``verbose``.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:  # noqa: D401 - mirror rich API
        kwargs.setdefault("theme", Theme(THEME_STYLES))
        super().__init__(*args, **kwargs)
        self._verbose = False
        self._quiet = False

    def set_verbose(self, verbose: bool) -> None:
        self._verbose = verbose

    def set_quiet(self, quiet: bool) -> None:
        self._quiet = quiet

    def print(self, *args: Any, **kwargs: Any) -> None:
        if not self._quiet:
            super().print(*args, **kwargs)

    def log(self, *args: Any, **kwargs: Any) -> None:
        if self._verbose and not self._quiet:
            super().log(*args, **kwargs)

    def note(self, message: str) -> None:
        """Print a dimmed side remark; ``message`` is shown literally."""
        self.print(f"[note]{escape(message)}[/]")


__all__ = ["Console"]
