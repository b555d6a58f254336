"""Validation of raw habit entry records at the package boundary."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import InvalidEntryError, InvalidInputError
from .models import HabitEntry

__all__ = ["EntryRecord", "parse_entry", "parse_entries", "parse_iso_date", "validate_days"]

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string.

    Raises:
        ValueError: If the string is not a valid calendar date in that format.
    """
    if not ISO_DATE_PATTERN.match(value):
        raise ValueError(f"date must use YYYY-MM-DD format, got {value!r}")
    return date.fromisoformat(value)


def validate_days(days: int) -> None:
    """Validate a lookback window length.

    Raises:
        InvalidInputError: If days is not a positive integer.
    """
    if isinstance(days, bool) or not isinstance(days, int) or days <= 0:
        raise InvalidInputError(f"days must be a positive integer, got {days!r}")


class EntryRecord(BaseModel):
    """Shape of a stored habit entry record."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    entry_date: date = Field(alias="date")
    completed: int
    reason: Optional[str] = None
    habit_name: Optional[str] = Field(default=None, alias="habitName")

    @field_validator("entry_date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> date:
        """Accept ISO strings and plain dates only."""
        if isinstance(v, datetime):
            raise ValueError("date must be a calendar date, not a timestamp")
        if isinstance(v, date):
            return v
        if isinstance(v, str):
            return parse_iso_date(v.strip())
        raise ValueError(f"date must be a YYYY-MM-DD string, got {type(v).__name__}")

    @field_validator("completed", mode="before")
    @classmethod
    def validate_completed(cls, v: Any) -> int:
        """Validate that completed is 0 or 1 (booleans are coerced)."""
        if isinstance(v, bool):
            return int(v)
        if isinstance(v, int) and v in (0, 1):
            return v
        raise ValueError(f"completed must be 0 or 1, got {v!r}")

    @field_validator("reason", "habit_name", mode="before")
    @classmethod
    def validate_optional_text(cls, v: Any) -> Optional[str]:
        """Normalise optional text; blank strings become None."""
        if v is None:
            return None
        if not isinstance(v, str):
            raise ValueError(f"expected a string, got {type(v).__name__}")
        return v.strip() or None

    def to_entry(self, habit_name: Optional[str] = None) -> HabitEntry:
        return HabitEntry(
            date=self.entry_date,
            completed=self.completed,
            reason=self.reason,
            habit_name=self.habit_name or habit_name,
        )


def _describe(exc: ValidationError) -> tuple[str, Optional[str]]:
    """Flatten a pydantic error into a message and the first offending field."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in errors
    )
    field = str(errors[0]["loc"][0]) if errors and errors[0]["loc"] else None
    return message, field


def parse_entry(raw: Mapping[str, Any], index: Optional[int] = None) -> HabitEntry:
    """Validate a single raw record and convert it to a HabitEntry.

    Raises:
        InvalidEntryError: If the record is missing fields or has bad values.
    """
    where = f"entry {index}" if index is not None else "entry"
    if not isinstance(raw, Mapping):
        raise InvalidEntryError(f"{where}: expected an object, got {type(raw).__name__}", index=index)

    try:
        record = EntryRecord.model_validate(dict(raw))
    except ValidationError as exc:
        message, field = _describe(exc)
        raise InvalidEntryError(f"{where}: {message}", index=index, field=field) from exc

    if record.completed == 1 and record.reason:
        raise InvalidEntryError(
            f"{where}: reason is only allowed on missed days", index=index, field="reason"
        )

    return record.to_entry()


def parse_entries(
    raws: Iterable[Mapping[str, Any]],
    habit_name: Optional[str] = None,
) -> List[HabitEntry]:
    """Validate raw records for a single habit.

    Args:
        raws: Raw records as read from storage
        habit_name: Expected habit; records naming another habit are rejected

    Returns:
        HabitEntry values in input order, each tagged with the habit name

    Raises:
        InvalidEntryError: On malformed records, duplicate dates, or records
            belonging to more than one habit.
    """
    entries: List[HabitEntry] = []
    seen_dates: dict[date, int] = {}
    expected = habit_name

    for index, raw in enumerate(raws):
        entry = parse_entry(raw, index)

        if entry.date in seen_dates:
            raise InvalidEntryError(
                f"entry {index}: duplicate date {entry.date.isoformat()} "
                f"(already logged by entry {seen_dates[entry.date]})",
                index=index,
                field="date",
            )
        seen_dates[entry.date] = index

        if entry.habit_name is not None:
            if expected is None:
                expected = entry.habit_name
            elif entry.habit_name != expected:
                raise InvalidEntryError(
                    f"entry {index}: belongs to habit {entry.habit_name!r}, expected {expected!r}",
                    index=index,
                    field="habitName",
                )

        entries.append(entry)

    if expected is not None:
        entries = [
            entry if entry.habit_name else HabitEntry(entry.date, entry.completed, entry.reason, expected)
            for entry in entries
        ]
    return entries
