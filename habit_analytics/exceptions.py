"""Custom exceptions for the habit analytics toolkit."""

from __future__ import annotations


class HabitAnalyticsError(Exception):
    """Base exception for all habit analytics errors."""
    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(HabitAnalyticsError):
    """Raised when there's a configuration problem."""
    pass


# =============================================================================
# Entry Source Errors
# =============================================================================


class EntrySourceError(HabitAnalyticsError):
    """Raised when habit entries cannot be read from their source."""

    def __init__(self, message: str, source: str | None = None):
        """Initialize entry source error.

        Args:
            message: Error message
            source: Source of the entries (e.g., a file path)
        """
        super().__init__(message)
        self.source = source


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(HabitAnalyticsError):
    """Base exception for validation errors."""
    pass


class InvalidInputError(ValidationError):
    """Raised when caller input is invalid."""
    pass


class InvalidEntryError(InvalidInputError):
    """Raised when a habit entry record violates the entry contract."""

    def __init__(self, message: str, index: int | None = None, field: str | None = None):
        """Initialize invalid entry error.

        Args:
            message: Error message
            index: Position of the offending record in the input, if known
            field: Name of the offending field, if known
        """
        super().__init__(message)
        self.index = index
        self.field = field
