"""
Data models for the solarvoyant system.

Contains DTOs for weather series, analytics results, user coefficients and energy estimates.
"""

from .weather import (
    AttributeKind,
    Location,
    EventTime,
    WeatherEvent,
    WeatherSeries,
    TimeRange,
    ExtractedData,
)
from .analytics import AnalyticsResult
from .user import QuarterlyObservation, UserCoefficientProfile, Coefficients
from .energy import EnergyEstimate, SuburbEnergySummary, Notification, NotificationKind

__all__ = [
    "AttributeKind",
    "Location",
    "EventTime",
    "WeatherEvent",
    "WeatherSeries",
    "TimeRange",
    "ExtractedData",
    "AnalyticsResult",
    "QuarterlyObservation",
    "UserCoefficientProfile",
    "Coefficients",
    "EnergyEstimate",
    "SuburbEnergySummary",
    "Notification",
    "NotificationKind",
]
