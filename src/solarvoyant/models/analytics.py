"""
Analytics data models.

Contains DTOs for analytics results.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, List, Union, Any

from .weather import Location, TimeRange

AggregateValue = Union[float, List[float]]
AnalyticsData = Dict[str, Dict[str, AggregateValue]]


@dataclass
class AnalyticsResult:
    """Aggregated statistics for a weather series."""

    data_source: Optional[str]
    dataset_type: Optional[str]
    dataset_id: Optional[str]
    time_object: TimeRange
    location: Location
    units: Dict[str, str] = field(default_factory=dict)
    analytics: AnalyticsData = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON response shape."""
        return {
            "data_source": self.data_source,
            "dataset_type": self.dataset_type,
            "dataset_id": self.dataset_id,
            "time_object": self.time_object.to_dict(),
            "location": self.location.to_dict(),
            "units": dict(self.units),
            "analytics": {
                attribute: {
                    name: list(value) if isinstance(value, list) else value
                    for name, value in aggregates.items()
                }
                for attribute, aggregates in self.analytics.items()
            },
        }
