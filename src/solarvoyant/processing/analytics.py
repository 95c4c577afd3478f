"""
Analytics orchestration module.

Combines attribute extraction, query resolution and aggregate strategies
into the full series -> analytics transform.
"""

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from ..core import constants
from ..models import AnalyticsResult
from ..models.analytics import AnalyticsData
from .extractor import AttributeExtractor, SeriesInput, load_series
from .query import AggregateSelection, resolve_query
from .strategies import AggregationContext, get_selected_strategies


class AnalyticsEngine:
    """Compute requested aggregates for every requested attribute of a series."""

    def __init__(
        self,
        timezone: str = constants.ANALYTICS_TIMEZONE,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize analytics engine.

        Args:
            timezone: Timezone reported in result time ranges
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.extractor = AttributeExtractor(timezone=timezone, logger=logger)

    def analysis(
        self,
        data: Mapping[str, List[float]],
        resolved_query: Mapping[str, List[str]],
        units: Mapping[str, Optional[str]]
    ) -> Tuple[AnalyticsData, Dict[str, Optional[str]]]:
        """
        Apply the resolved aggregates to the extracted attribute series.

        Attributes present in the data but absent from the query are skipped,
        together with their units.

        Args:
            data: Attribute name -> numeric series
            resolved_query: Attribute name -> aggregate names
            units: Attribute name -> unit

        Returns:
            Tuple of (analytics, filtered_units)

        Raises:
            EmptySeriesForAggregate: If a requested attribute has no values
        """
        analytics: AnalyticsData = {}
        filtered_units: Dict[str, Optional[str]] = {}
        context = AggregationContext(logger=self.logger)

        for attribute, values in data.items():
            if attribute not in resolved_query:
                continue

            filtered_units[attribute] = units.get(attribute)
            analytics[attribute] = {}
            for strategy in get_selected_strategies(resolved_query[attribute]):
                context.set_strategy(strategy)
                analytics[attribute][strategy.name] = context.execute(values)

        return analytics, filtered_units

    def get_analytics(
        self,
        series: SeriesInput,
        query: Optional[Mapping[str, AggregateSelection]] = None,
        aggregates: AggregateSelection = None
    ) -> AnalyticsResult:
        """
        Run the full analytics transform.

        Args:
            series: Weather series (JSON string, dict or WeatherSeries)
            query: Per-attribute aggregate selection (selective mode)
            aggregates: Aggregates applied to every attribute (uniform mode)

        Returns:
            AnalyticsResult for the series

        Raises:
            EventsEmpty: If the series has no events
            InvalidAggregate: If an aggregate name is invalid
        """
        weather = load_series(series)
        extracted = self.extractor.extract(weather)
        resolved_query = resolve_query(extracted.attributes, query, aggregates)

        analytics, filtered_units = self.analysis(
            extracted.data, resolved_query, extracted.units
        )

        self.logger.debug(
            f"Analysed {len(analytics)} of {len(extracted.attributes)} attributes"
        )

        return AnalyticsResult(
            data_source=weather.data_source,
            dataset_type=weather.dataset_type,
            dataset_id=weather.dataset_id,
            time_object=extracted.time_range,
            location=extracted.location,
            units=filtered_units,
            analytics=analytics,
        )
