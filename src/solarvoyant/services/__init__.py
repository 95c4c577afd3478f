"""
Business logic services for solarvoyant.

Services orchestrate store operations and provide higher-level functionality.
"""

from .analytics_service import AnalyticsService
from .coefficient_service import CoefficientService
from .energy_service import EnergyService
from .notification_service import NotificationService

__all__ = [
    "AnalyticsService",
    "CoefficientService",
    "EnergyService",
    "NotificationService",
]
