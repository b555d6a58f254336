"""Read habit entries exported as JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, List, NamedTuple, Optional

from .exceptions import EntrySourceError, InvalidEntryError
from .models import HabitEntry
from .validation import parse_entries

logger = logging.getLogger(__name__)


class LoadedHabit(NamedTuple):
    """Entries read from one file and the habit they belong to."""
    habit_name: Optional[str]
    entries: List[HabitEntry]


def load_entries(path: Path, habit_name: Optional[str] = None) -> LoadedHabit:
    """Load and validate the entries of a single habit from a JSON file.

    The file holds either a list of entry records or an object of the form
    ``{"habitName": "...", "entries": [...]}``.

    Args:
        path: JSON file to read
        habit_name: Habit name to use instead of the one stored in the file;
            every loaded entry is relabelled with it

    Returns:
        LoadedHabit with the habit name (if known) and validated entries

    Raises:
        EntrySourceError: If the file cannot be read or is not valid JSON.
        InvalidEntryError: If the document or any record is malformed.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            document: Any = json.load(handle)
    except OSError as exc:
        raise EntrySourceError(f"Failed to read {path}: {exc}", source=str(path)) from exc
    except json.JSONDecodeError as exc:
        raise EntrySourceError(f"Failed to parse {path}: {exc}", source=str(path)) from exc

    if isinstance(document, list):
        records = document
        stored_name = None
    elif isinstance(document, dict) and isinstance(document.get("entries"), list):
        records = document["entries"]
        stored_name = document.get("habitName")
        if stored_name is not None and not isinstance(stored_name, str):
            raise InvalidEntryError(f"{path}: habitName must be a string", field="habitName")
    else:
        raise InvalidEntryError(
            f"{path}: expected a list of entries or an object with an 'entries' list"
        )

    stored = parse_entries(records, habit_name=stored_name)
    if habit_name:
        entries = [replace(entry, habit_name=habit_name) for entry in stored]
    else:
        entries = stored
    resolved = habit_name or stored_name or next(
        (entry.habit_name for entry in entries if entry.habit_name), None
    )

    logger.debug("Loaded %d entries for %s from %s", len(entries), resolved, path)
    return LoadedHabit(habit_name=resolved, entries=entries)
