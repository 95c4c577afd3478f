"""
User coefficient data models.

Contains DTOs for the per-user quarterly history and the coefficients derived from it.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from ..core import constants


def parse_float(value: Any) -> Optional[float]:
    """Parse a stored number (user records keep most numbers as strings)."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def normalise_consumption_figures(value: Any) -> Optional[str]:
    """Comma-separated quarterly consumption as text, or None when blank."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (list, tuple)):
        value = ",".join(str(entry) for entry in value)
    value = str(value).strip()
    return value or None


@dataclass
class QuarterlyObservation:
    """One quarter of user history (record fields q{n}_w, q{n}_t, q{n}_d, q{n}_r)."""

    energy: Optional[float] = None  # observed output (W)
    temperature: Optional[float] = None  # °C
    daylight: Optional[float] = None  # daylight duration
    radiation: Optional[float] = None  # shortwave radiation

    @classmethod
    def from_record(cls, record: Dict[str, Any], quarter: int) -> "QuarterlyObservation":
        prefix = f"q{quarter}_"
        return cls(
            energy=parse_float(record.get(prefix + "w")),
            temperature=parse_float(record.get(prefix + "t")),
            daylight=parse_float(record.get(prefix + "d")),
            radiation=parse_float(record.get(prefix + "r")),
        )


@dataclass
class Coefficients:
    """Personalized consumption coefficients."""

    temp_coefficient: float
    daylight_coefficient: float

    @classmethod
    def default(cls) -> "Coefficients":
        return cls(constants.DEFAULT_TEMP_COEFFICIENT, constants.DEFAULT_DAYLIGHT_COEFFICIENT)


@dataclass
class UserCoefficientProfile:
    """A user record reduced to the fields the estimation core needs."""

    user_id: Optional[str] = None
    quarters: List[QuarterlyObservation] = field(default_factory=list)
    temp_coefficient: Optional[float] = None
    daylight_coefficient: Optional[float] = None
    production_coefficient: Optional[List[float]] = None
    surface_area: Optional[float] = None
    quarterly_energy_consumption: Optional[str] = None
    suburb: Optional[str] = None
    upper_limit: Optional[float] = None
    lower_limit: Optional[float] = None
    receive_emails: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "UserCoefficientProfile":
        production = record.get("production_coefficient")
        if production is not None:
            production = [parse_float(value) for value in production]

        receive_emails = record.get("receive_emails")
        if receive_emails is not None:
            receive_emails = str(receive_emails).lower()

        return cls(
            user_id=record.get("user_id"),
            quarters=[
                QuarterlyObservation.from_record(record, quarter)
                for quarter in range(1, constants.QUARTERS + 1)
            ],
            temp_coefficient=parse_float(record.get("temp_coefficient")),
            daylight_coefficient=parse_float(record.get("daylight_coefficient")),
            production_coefficient=production,
            surface_area=parse_float(record.get("surface_area")),
            quarterly_energy_consumption=normalise_consumption_figures(
                record.get("quarterly_energy_consumption")
            ),
            suburb=record.get("suburb") or None,
            upper_limit=parse_float(record.get("upper_limit")),
            lower_limit=parse_float(record.get("lower_limit")),
            receive_emails=receive_emails,
            email=record.get("email"),
        )

    @property
    def has_consumption_data(self) -> bool:
        """True when every quarter has energy, temperature and daylight values."""
        return len(self.quarters) == constants.QUARTERS and all(
            q.energy is not None and q.temperature is not None and q.daylight is not None
            for q in self.quarters
        )

    @property
    def has_production_data(self) -> bool:
        """True when every quarter has non-zero energy plus temperature and radiation values."""
        return len(self.quarters) == constants.QUARTERS and all(
            q.energy and q.temperature is not None and q.radiation is not None
            for q in self.quarters
        )

    @property
    def has_coefficients(self) -> bool:
        """Stored coefficients are usable only when both are set and non-zero."""
        return bool(self.temp_coefficient) and bool(self.daylight_coefficient)

    @property
    def needs_production_coefficients(self) -> bool:
        """The production coefficient list exists on the record but was never filled."""
        return self.production_coefficient is not None and len(self.production_coefficient) == 0

    @property
    def wants_notifications(self) -> bool:
        return self.receive_emails is not None and self.receive_emails != "false"

    @property
    def coefficients(self) -> Optional[Coefficients]:
        if not self.has_coefficients:
            return None
        return Coefficients(self.temp_coefficient, self.daylight_coefficient)
