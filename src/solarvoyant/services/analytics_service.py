"""
Analytics service.

Wraps the analytics engine with request validation, store access and the
suburb heatmap reduction.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union, TYPE_CHECKING

from ..core import constants
from ..core.exceptions import InvalidCondition, InvalidRequest, SolarvoyantError
from ..models import AnalyticsResult
from ..processing import AnalyticsEngine
from ..processing.extractor import SeriesInput
from ..processing.query import AggregateSelection
from ..processing.strategies import AggregationContext, MeanStrategy

if TYPE_CHECKING:
    from ..api import SolarvoyantAPI
    from ..core.config import Config


Payload = Union[str, Mapping[str, Any]]


def _load_payload(payload: Payload) -> Mapping[str, Any]:
    """Parse a request body given as JSON text or as an already-parsed mapping."""
    if not payload:
        raise InvalidRequest("Request body is missing")

    body: Any = payload
    if isinstance(payload, str):
        try:
            body = json.loads(payload)
        except ValueError as e:
            raise InvalidRequest("Request body is not valid JSON") from e

    if not isinstance(body, Mapping):
        raise InvalidRequest("Request body must be a JSON object")
    return body


class AnalyticsService:
    """Serve analytics requests over supplied or stored weather series."""

    def __init__(
        self,
        api_client: Optional["SolarvoyantAPI"] = None,
        config: Optional["Config"] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize analytics service.

        Args:
            api_client: Store client (required only for analyse_key)
            config: Configuration object
            logger: Logger instance
        """
        self.api_client = api_client
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

        timezone = config.timezone if config else constants.ANALYTICS_TIMEZONE
        self.engine = AnalyticsEngine(timezone=timezone, logger=logger)

        if config:
            self.heatmap_conditions: Sequence[str] = config.heatmap_conditions
        else:
            self.heatmap_conditions = constants.HEATMAP_AVAILABLE_CONDITIONS

    def analyse(self, series: SeriesInput, aggregates: AggregateSelection = None) -> AnalyticsResult:
        """
        Apply the same aggregates to every attribute of a series.

        Args:
            series: Weather series (JSON string, dict or WeatherSeries)
            aggregates: Comma-separated aggregate names; empty selects all

        Returns:
            AnalyticsResult
        """
        try:
            result = self.engine.get_analytics(series, None, aggregates)
        except SolarvoyantError as e:
            self.logger.error(f"Analyse failed: {e.message}")
            raise

        self.logger.info(f"Analysed {len(result.analytics)} attributes")
        return result

    def summarise(self, payload: Payload) -> AnalyticsResult:
        """
        Analyse a caller-supplied series with a per-attribute query.

        Args:
            payload: Body with "weather" (the series) and "query" components

        Returns:
            AnalyticsResult

        Raises:
            InvalidRequest: If the body lacks weather or query
        """
        try:
            body = _load_payload(payload)
            if not body.get("weather") or not body.get("query"):
                raise InvalidRequest(
                    "This route requires weather and query components in the body"
                )
            result = self.engine.get_analytics(body["weather"], body["query"], None)
        except SolarvoyantError as e:
            self.logger.error(f"Summarise failed: {e.message}")
            raise

        self.logger.info(f"Summarised {len(result.analytics)} attributes")
        return result

    def analyse_selective(self, series: SeriesInput, payload: Payload) -> AnalyticsResult:
        """
        Analyse a series with a per-attribute query taken from a request body.

        Args:
            series: Weather series (JSON string, dict or WeatherSeries)
            payload: Body with a "query" component

        Returns:
            AnalyticsResult

        Raises:
            InvalidRequest: If the body lacks a query
        """
        try:
            body = _load_payload(payload)
            if not body.get("query"):
                raise InvalidRequest("This route requires a query component in the body")
            result = self.engine.get_analytics(series, body["query"], None)
        except SolarvoyantError as e:
            self.logger.error(f"Selective analyse failed: {e.message}")
            raise

        self.logger.info(f"Selectively analysed {len(result.analytics)} attributes")
        return result

    def analyse_key(self, key: str, aggregates: AggregateSelection = None) -> AnalyticsResult:
        """
        Fetch a stored series and analyse it.

        Args:
            key: Storage key of the series
            aggregates: Comma-separated aggregate names; empty selects all

        Returns:
            AnalyticsResult
        """
        if self.api_client is None:
            raise InvalidRequest("A store client is required to analyse stored series")

        try:
            series = self.api_client.fetch_series(key)
        except SolarvoyantError as e:
            self.logger.error(f"Could not fetch {key}: {e.message}")
            raise

        return self.analyse(series, aggregates)

    def heatmap(
        self,
        suburbs: Sequence[Mapping[str, Any]],
        condition: str
    ) -> List[Dict[str, Any]]:
        """
        Reduce each suburb's data points to the mean of one condition.

        Args:
            suburbs: Records like {"suburb": ..., "placeId": ..., "data": [points]}
                     where each point holds a timestamp and condition values
            condition: Condition to average

        Returns:
            Copies of the suburb records with "data" replaced by the rounded
            mean, or None for suburbs without values for the condition

        Raises:
            InvalidCondition: If the condition is not supported
        """
        if not condition or condition not in self.heatmap_conditions:
            self.logger.error(f"Invalid heatmap condition: {condition!r}")
            raise InvalidCondition("Invalid condition provided.")

        context = AggregationContext(MeanStrategy(), logger=self.logger)
        result = []
        for suburb in suburbs:
            values = [
                point.get(condition)
                for point in suburb.get("data") or []
                if isinstance(point.get(condition), (int, float))
                and not isinstance(point.get(condition), bool)
            ]

            mean = None
            if values:
                mean = context.execute(values)
            else:
                self.logger.warning(
                    f"No {condition} values for suburb {suburb.get('suburb')}"
                )

            result.append({**suburb, "data": mean})

        self.logger.info(f"Built {condition} heatmap for {len(result)} suburbs")
        return result
