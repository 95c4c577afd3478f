"""
Weather data models.

Contains DTOs for weather events, series and the data extracted from them.
"""

import enum
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from ..core import constants


class AttributeKind(enum.Enum):
    """Kind of a raw event attribute."""

    LOCATION = "location"
    UNITS = "units"
    MEASUREMENT = "measurement"


def classify_attribute(name: str, value: Any) -> Optional[AttributeKind]:
    """
    Classify a raw event attribute.

    Returns None for values that are neither reserved records nor numbers
    (strings, nulls, booleans, nested objects under other keys).
    """
    if name == constants.LOCATION_KEY:
        return AttributeKind.LOCATION
    if name == constants.UNITS_KEY:
        return AttributeKind.UNITS
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return AttributeKind.MEASUREMENT
    return None


@dataclass
class Location:
    """Location of a weather series."""

    suburb: str = ""
    latitude: float = 0
    longitude: float = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Location":
        if not data:
            return cls()
        return cls(
            suburb=data.get("suburb", ""),
            latitude=data.get("latitude", 0),
            longitude=data.get("longitude", 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "suburb": self.suburb,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass
class EventTime:
    """Time window of a single event (or the nominal time of a series)."""

    timestamp: str
    duration: Optional[float] = None
    duration_unit: Optional[str] = None
    timezone: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventTime":
        return cls(
            timestamp=data.get("timestamp", ""),
            duration=data.get("duration"),
            duration_unit=data.get("duration_unit"),
            timezone=data.get("timezone"),
        )


@dataclass
class WeatherEvent:
    """One observation window with its classified attributes."""

    time_object: EventTime
    event_type: Optional[str] = None
    location: Optional[Location] = None
    units: Dict[str, str] = field(default_factory=dict)
    measurements: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeatherEvent":
        """Build an event, sorting raw attributes by kind."""
        location = None
        units: Dict[str, str] = {}
        measurements: Dict[str, float] = {}

        for name, value in (data.get("attributes") or {}).items():
            kind = classify_attribute(name, value)
            if kind is AttributeKind.LOCATION:
                location = Location.from_dict(value)
            elif kind is AttributeKind.UNITS:
                units = dict(value or {})
            elif kind is AttributeKind.MEASUREMENT:
                measurements[name] = value

        return cls(
            time_object=EventTime.from_dict(data.get("time_object") or {}),
            event_type=data.get("event_type"),
            location=location,
            units=units,
            measurements=measurements,
        )

    @property
    def timestamp(self) -> str:
        return self.time_object.timestamp


@dataclass
class WeatherSeries:
    """Ordered events sharing a data source and dataset identity."""

    data_source: Optional[str] = None
    dataset_type: Optional[str] = None
    dataset_id: Optional[str] = None
    time_object: Optional[Dict[str, Any]] = None
    events: List[WeatherEvent] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeatherSeries":
        return cls(
            data_source=data.get("data_source"),
            dataset_type=data.get("dataset_type"),
            dataset_id=data.get("dataset_id"),
            time_object=data.get("time_object"),
            events=[WeatherEvent.from_dict(event) for event in data.get("events") or []],
        )


@dataclass
class TimeRange:
    """Earliest and latest timestamps across a series."""

    start_timestamp: str
    end_timestamp: str
    timezone: str = constants.ANALYTICS_TIMEZONE
    units: str = constants.TIME_RANGE_UNITS

    def to_dict(self) -> Dict[str, str]:
        return {
            "start_timestamp": self.start_timestamp,
            "end_timestamp": self.end_timestamp,
            "timezone": self.timezone,
            "units": self.units,
        }


@dataclass
class ExtractedData:
    """Per-attribute numeric series extracted from a weather series."""

    data: Dict[str, List[float]]
    attributes: List[str]
    time_range: TimeRange
    location: Location
    units: Dict[str, str]
