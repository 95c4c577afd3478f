"""
Data processing module for weather analytics.

Provides attribute extraction, aggregate query resolution and statistical aggregation.
"""

from .strategies import (
    AggregateStrategy,
    AggregationContext,
    STRATEGIES,
    get_selected_strategies,
    round_half_up,
)
from .extractor import AttributeExtractor, load_series
from .query import parse_aggregates, resolve_query
from .analytics import AnalyticsEngine

__all__ = [
    "AggregateStrategy",
    "AggregationContext",
    "STRATEGIES",
    "get_selected_strategies",
    "round_half_up",
    "AttributeExtractor",
    "load_series",
    "parse_aggregates",
    "resolve_query",
    "AnalyticsEngine",
]
