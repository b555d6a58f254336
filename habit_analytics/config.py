"""Configuration utilities for the habit analytics CLI."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

try:
    import tomllib as tomli  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - fallback for older runtimes
    import tomli  # type: ignore[no-redef]
from pydantic import BaseModel, ValidationError, field_validator, model_validator
from tomli_w import dump as toml_dump

from .constants import (
    COMPLETION_RATE_THRESHOLDS,
    DEFAULT_LOOKBACK_DAYS,
    STREAK_THRESHOLDS,
    TREND_THRESHOLDS,
    WEEKDAY_PATTERN_THRESHOLDS,
)
from .exceptions import ConfigurationError
from .models import AnalysisThresholds

CONFIG_DIR = Path.home() / ".config" / "habit_analytics"
CONFIG_FILE = CONFIG_DIR / "config.toml"
CONFIG_VERSION = "1.0.0"


class DefaultsConfig(BaseModel):
    """Default values used when running analyses."""

    days: int = DEFAULT_LOOKBACK_DAYS

    @field_validator("days")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate that days is positive."""
        if v <= 0:
            raise ValueError(f"days must be positive, got {v}")
        return v


class AnalysisConfig(BaseModel):
    """Thresholds used by the habit analyzer."""

    trend_min_entries: int = TREND_THRESHOLDS['minimum_entries_for_trend']
    trend_delta: float = TREND_THRESHOLDS['rate_delta']
    weekend_gap_points: float = WEEKDAY_PATTERN_THRESHOLDS['gap_points']
    high_completion_rate: int = COMPLETION_RATE_THRESHOLDS['high']
    moderate_completion_rate: int = COMPLETION_RATE_THRESHOLDS['moderate']
    low_completion_rate: int = COMPLETION_RATE_THRESHOLDS['low']
    momentum_streak: int = STREAK_THRESHOLDS['momentum_days']
    longest_streak_multiplier: int = STREAK_THRESHOLDS['longest_multiplier']

    @field_validator("trend_min_entries", "momentum_streak", "longest_streak_multiplier")
    @classmethod
    def validate_positive(cls, v: int, info) -> int:
        """Validate that count fields are positive."""
        if v <= 0:
            raise ValueError(f"{info.field_name} must be positive, got {v}")
        return v

    @field_validator("trend_delta")
    @classmethod
    def validate_fraction(cls, v: float) -> float:
        """Validate that the trend delta is a fraction."""
        if not 0 <= v < 1:
            raise ValueError(f"trend_delta must be between 0 and 1, got {v}")
        return v

    @field_validator(
        "weekend_gap_points", "high_completion_rate", "moderate_completion_rate", "low_completion_rate"
    )
    @classmethod
    def validate_percentage(cls, v: float, info) -> float:
        """Validate that percentage fields fall within 0-100."""
        if not 0 <= v <= 100:
            raise ValueError(f"{info.field_name} must be between 0 and 100, got {v}")
        return v

    @model_validator(mode="after")
    def validate_rate_tiers(self) -> "AnalysisConfig":
        """Validate that completion rate tiers are ordered."""
        if self.moderate_completion_rate > self.high_completion_rate:
            raise ValueError("moderate_completion_rate must not exceed high_completion_rate")
        if self.low_completion_rate > self.high_completion_rate:
            raise ValueError("low_completion_rate must not exceed high_completion_rate")
        return self

    def to_thresholds(self) -> AnalysisThresholds:
        return AnalysisThresholds(**self.model_dump())


class ReporterConfig(BaseModel):
    """Configuration for console reports."""

    max_insights: int = 10
    show_reasons: bool = True

    @field_validator("max_insights")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate that the insight cap is positive."""
        if v <= 0:
            raise ValueError(f"max_insights must be positive, got {v}")
        return v


@dataclass(slots=True)
class Config:
    """Top-level configuration container."""

    version: str = CONFIG_VERSION
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    reporter: ReporterConfig = field(default_factory=ReporterConfig)

    @classmethod
    def load(cls, path: Path = CONFIG_FILE) -> "Config":
        """Load configuration data from disk.

        Args:
            path: Optional override for the configuration file path.

        Returns:
            Config: The loaded configuration object, or defaults when the
            file does not exist.

        Raises:
            ConfigurationError: If configuration file is corrupted or invalid.
        """

        if not path.exists():
            return cls()

        try:
            with path.open("rb") as handle:
                raw: Dict[str, Any] = tomli.load(handle)
        except (OSError, tomli.TOMLDecodeError) as exc:
            raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

        version = raw.get("version", CONFIG_VERSION)

        try:
            defaults = DefaultsConfig(**raw.get("defaults", {}))
            analysis = AnalysisConfig(**raw.get("analysis", {}))
            reporter = ReporterConfig(**raw.get("reporter", {}))
        except (TypeError, ValidationError) as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc

        return cls(version=version, defaults=defaults, analysis=analysis, reporter=reporter)

    def dump(self, path: Path = CONFIG_FILE, backup: bool = True) -> None:
        """Persist the configuration to disk.

        Args:
            path: Path to save the configuration file.
            backup: If True and config file exists, create a backup before overwriting.
        """

        path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            backup_path = path.parent / f"{path.stem}.{timestamp}.bak"
            shutil.copy2(path, backup_path)

        payload: Dict[str, Any] = {
            "version": self.version,
            **self._sections_dump(),
        }

        with path.open("wb") as handle:
            toml_dump(payload, handle)

    def thresholds(self) -> AnalysisThresholds:
        """Return the analyzer thresholds described by this configuration."""
        return self.analysis.to_thresholds()

    def to_display_dict(self) -> Dict[str, Any]:
        """Return a serialisable representation for display purposes."""
        return self._sections_dump()

    def _sections(self) -> Dict[str, BaseModel]:
        return {
            "defaults": self.defaults,
            "analysis": self.analysis,
            "reporter": self.reporter,
        }

    def _sections_dump(self) -> Dict[str, Any]:
        return {name: section.model_dump() for name, section in self._sections().items()}

    def _resolve(self, key: str) -> tuple[BaseModel, str]:
        parts = key.split(".")
        if len(parts) != 2:
            raise ConfigurationError(f"Invalid key format '{key}'. Expected format: section.field")

        section, field_name = parts
        sections = self._sections()

        if section not in sections:
            valid_sections = ", ".join(sections.keys())
            raise ConfigurationError(f"Invalid section '{section}'. Valid sections: {valid_sections}")

        config_obj = sections[section]
        if field_name not in type(config_obj).model_fields:
            valid_fields = ", ".join(type(config_obj).model_fields.keys())
            raise ConfigurationError(
                f"Invalid field '{field_name}' for section '{section}'. Valid fields: {valid_fields}"
            )
        return config_obj, field_name

    def set_value(self, key: str, value: str) -> None:
        """Set a configuration value using dot notation.

        Args:
            key: Configuration key in dot notation (e.g., 'defaults.days')
            value: Value to set (will be converted to the field's type)

        Raises:
            ConfigurationError: If key is invalid or value cannot be converted
        """
        config_obj, field_name = self._resolve(key)
        field_type = type(config_obj).model_fields[field_name].annotation

        try:
            if field_type is int:
                converted_value: Any = int(value)
            elif field_type is float:
                converted_value = float(value)
            elif field_type is bool:
                converted_value = value.lower() in ("true", "1", "yes", "on")
            else:
                converted_value = value
        except ValueError as exc:
            raise ConfigurationError(f"Cannot convert '{value}' to {field_type} for {key}") from exc

        # Re-validate the whole section so model validators see the new value
        current_data = config_obj.model_dump()
        current_data[field_name] = converted_value
        try:
            validated_model = type(config_obj).model_validate(current_data)
        except ValidationError as exc:
            error_msg = "; ".join(
                f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in exc.errors()
            )
            raise ConfigurationError(f"Validation error for {key}: {error_msg}") from exc

        section = key.split(".")[0]
        setattr(self, section, validated_model)

    def get_value(self, key: str) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key in dot notation (e.g., 'analysis.trend_delta')

        Returns:
            The configuration value

        Raises:
            ConfigurationError: If key is invalid
        """
        config_obj, field_name = self._resolve(key)
        return getattr(config_obj, field_name)
