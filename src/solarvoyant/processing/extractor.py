"""
Attribute extraction module.

Turns a weather series into per-attribute numeric series plus the series
time range, location and units.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Union

from ..core import constants
from ..core.exceptions import EventsEmpty, InvalidRequest
from ..models import ExtractedData, Location, TimeRange, WeatherSeries

SeriesInput = Union[str, Dict[str, Any], WeatherSeries]


def load_series(series: SeriesInput) -> WeatherSeries:
    """
    Build a WeatherSeries from a JSON string, a parsed dict, or a series.

    Strings are parsed as JSON first; anything that fails to parse is used as is.
    """
    if isinstance(series, WeatherSeries):
        return series

    raw = series
    try:
        raw = json.loads(series)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        pass

    if not isinstance(raw, dict):
        raise InvalidRequest("Weather series must be a JSON object")
    return WeatherSeries.from_dict(raw)


class AttributeExtractor:
    """Extract attribute series from weather events."""

    def __init__(
        self,
        timezone: str = constants.ANALYTICS_TIMEZONE,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize attribute extractor.

        Args:
            timezone: Timezone reported in the extracted time range
            logger: Logger instance
        """
        self.timezone = timezone
        self.logger = logger or logging.getLogger(__name__)

    def extract(self, series: SeriesInput) -> ExtractedData:
        """
        Extract per-attribute numeric series.

        Attributes are discovered from the events' units records (first unit
        seen wins). Values are appended in event order and only when numeric,
        so series lengths may differ between attributes.

        Args:
            series: Weather series (JSON string, dict or WeatherSeries)

        Returns:
            ExtractedData for the series

        Raises:
            EventsEmpty: If the series has no events
        """
        weather = load_series(series)
        events = weather.events
        if not events:
            raise EventsEmpty("Events array cannot be empty")

        first_event = events[0]
        time_range = TimeRange(
            start_timestamp=first_event.timestamp,
            end_timestamp=first_event.timestamp,
            timezone=self.timezone,
        )
        location = first_event.location or Location()

        units: Dict[str, str] = {}
        attributes: List[str] = []
        data: Dict[str, List[float]] = {}
        for event in events:
            for name, unit in event.units.items():
                if name == constants.UNITS_EXCLUDED_KEY or name in data:
                    continue
                units[name] = unit
                attributes.append(name)
                data[name] = []

        for attribute in attributes:
            for event in events:
                value = event.measurements.get(attribute)
                if value is not None:
                    data[attribute].append(value)

                # Fixed-width ISO-8601 timestamps order correctly as strings
                if event.timestamp < time_range.start_timestamp:
                    time_range.start_timestamp = event.timestamp
                if event.timestamp > time_range.end_timestamp:
                    time_range.end_timestamp = event.timestamp

        self.logger.debug(
            f"Extracted {len(attributes)} attributes from {len(events)} events "
            f"({time_range.start_timestamp} to {time_range.end_timestamp})"
        )

        return ExtractedData(
            data=data,
            attributes=attributes,
            time_range=time_range,
            location=location,
            units=units,
        )
