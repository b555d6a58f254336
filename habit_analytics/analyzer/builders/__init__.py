"""Builders for habit insights and recommendations."""

from .insights_builder import InsightsBuilder
from .recommendations_builder import RecommendationsBuilder

__all__ = [
    "InsightsBuilder",
    "RecommendationsBuilder",
]
