"""Helper functions for analyzer."""

from .rate_calculator import (
    completion_fraction,
    completion_rate,
    count_completed,
    round_half_up,
    sort_chronologically,
)
from .window import entries_in_window

__all__ = [
    "completion_fraction",
    "completion_rate",
    "count_completed",
    "entries_in_window",
    "round_half_up",
    "sort_chronologically",
]
