"""
Energy estimation data models.

Contains DTOs for production/consumption estimates and notifications.
"""

import enum
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List


@dataclass
class EnergyEstimate:
    """Hourly production and consumption estimates for a forecast."""

    production: List[float] = field(default_factory=list)  # W per step
    consumption: List[float] = field(default_factory=list)  # W per step

    def to_dict(self) -> Dict[str, List[float]]:
        return {
            "energy_production_hourly": list(self.production),
            "energy_consumption_hourly": list(self.consumption),
        }


@dataclass
class SuburbEnergySummary:
    """Forecast generation total and weather averages for a suburb."""

    energy_generation: float
    temperature_average: Optional[float] = None  # °C
    daylight_average: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "energyGeneration": self.energy_generation,
            "tempAverage": self.temperature_average,
            "dayLightAverage": self.daylight_average,
        }


class NotificationKind(enum.Enum):
    OVER_GENERATION = "over_generation"
    UNDER_GENERATION = "under_generation"


@dataclass
class Notification:
    """A threshold crossing between predicted production and consumption."""

    kind: NotificationKind
    message: str
    percent: float
    production: float
    consumption: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "percent": self.percent,
            "production": self.production,
            "consumption": self.consumption,
        }
