"""
Solar production and household consumption estimation.

Production model:
    radiation_adj = radiation / 8
    production = surface_area * radiation_adj                    (T <= 25 °C)
    production = surface_area * radiation_adj * (1 - 0.004 (T - 25))  (T > 25 °C)
    production *= seasonal production coefficient

Consumption model:
    consumption = |temp_coef| * |T - 23.6| + daylight_coef * (daylight / 24) + offset
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..core import constants
from ..models import Coefficients, EnergyEstimate, SuburbEnergySummary, WeatherSeries
from ..models.user import normalise_consumption_figures, parse_float


class EnergyEstimator:
    """Estimate solar production and energy consumption from forecast weather."""

    def __init__(
        self,
        forecast_horizon: int = constants.FORECAST_HORIZON_HOURS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize energy estimator.

        Args:
            forecast_horizon: Maximum number of steps returned by estimate()
            logger: Logger instance
        """
        self.forecast_horizon = forecast_horizon
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def derated_generation(temperature: float, radiation: float, surface_area: float) -> float:
        """
        Panel output for the given radiation, derated 0.4 % per °C above 25 °C.

        Args:
            temperature: Air temperature (°C)
            radiation: Radiation already scaled to the step
            surface_area: Panel surface area (m²)

        Returns:
            Generated energy
        """
        if temperature > constants.DERATING_THRESHOLD:
            return surface_area * radiation * (
                1 - constants.DERATING_PER_DEGREE * (temperature - constants.DERATING_THRESHOLD)
            )
        return surface_area * radiation

    @staticmethod
    def production(
        temperature: float,
        radiation: float,
        surface_area: float,
        production_coefficient: float = 1.0
    ) -> float:
        """
        Production for one forecast step.

        Args:
            temperature: Air temperature (°C)
            radiation: Raw shortwave radiation for the period
            surface_area: Panel surface area (m²)
            production_coefficient: Seasonal production coefficient

        Returns:
            Estimated production (W)
        """
        radiation_adj = radiation / constants.RADIATION_DIVISOR
        return (
            EnergyEstimator.derated_generation(temperature, radiation_adj, surface_area)
            * production_coefficient
        )

    @staticmethod
    def consumption(
        temperature: float,
        daylight_duration: float,
        coefficients: Coefficients,
        offset: float = 0.0
    ) -> float:
        """
        Consumption for one forecast step.

        Args:
            temperature: Air temperature (°C)
            daylight_duration: Daylight duration for the day
            coefficients: Fitted temperature/daylight coefficients
            offset: Quarterly baseline offset

        Returns:
            Estimated consumption (W)
        """
        return (
            abs(coefficients.temp_coefficient) * abs(temperature - constants.COMFORT_TEMPERATURE)
            + coefficients.daylight_coefficient * (daylight_duration / constants.HOURS_PER_DAY)
            + offset
        )

    @staticmethod
    def baseline_offset(
        quarterly_energy_consumption: Any,
        default: float = constants.CALCULATION_OFFSET
    ) -> float:
        """
        Baseline consumption offset.

        Args:
            quarterly_energy_consumption: Comma-separated quarterly figures, or None
            default: Offset used when the user has no usable recorded consumption

        Returns:
            Sum of the quarterly figures divided by four, or the default when
            the field is blank or any entry is not a number
        """
        figures = normalise_consumption_figures(quarterly_energy_consumption)
        if figures is None:
            return default
        entries = [parse_float(entry) for entry in figures.split(",")]
        if any(entry is None for entry in entries):
            return default
        return sum(entries) / constants.QUARTERS

    @staticmethod
    def seasonal_production_coefficient(
        production_coefficient: Optional[Sequence[Optional[float]]],
        season: int
    ) -> float:
        """
        Production coefficient for a season.

        Args:
            production_coefficient: Four seasonal coefficients, or None/empty
            season: Season index (0=Summer, 1=Autumn, 2=Winter, 3=Spring)

        Returns:
            The seasonal coefficient, or 1 when none or fewer than four are recorded
        """
        if not production_coefficient or len(production_coefficient) < constants.QUARTERS:
            return 1.0
        value = production_coefficient[season]
        return 1.0 if value is None else float(value)

    def estimate(
        self,
        forecast: WeatherSeries,
        coefficients: Coefficients,
        surface_area: float = constants.DEFAULT_SURFACE_AREA,
        production_coefficient: float = 1.0,
        offset: float = constants.CALCULATION_OFFSET
    ) -> EnergyEstimate:
        """
        Estimate production and consumption for every forecast step.

        Temperature, radiation and daylight duration carry forward from the
        last event that reported them. Before the first reading each seeds to 1,
        with radiation seeded after the /8 adjustment.

        Args:
            forecast: Forecast weather series
            coefficients: Fitted consumption coefficients
            surface_area: Panel surface area (m²)
            production_coefficient: Coefficient for the current season
            offset: Quarterly baseline offset

        Returns:
            EnergyEstimate truncated to the forecast horizon
        """
        temperature = constants.FORECAST_SEED_VALUE
        radiation = constants.FORECAST_SEED_VALUE * constants.RADIATION_DIVISOR
        daylight = constants.FORECAST_SEED_VALUE

        estimate = EnergyEstimate()
        for event in forecast.events[:self.forecast_horizon]:
            values = event.measurements
            temperature = values.get(constants.TEMPERATURE_ATTRIBUTE, temperature)
            radiation = values.get(constants.RADIATION_ATTRIBUTE, radiation)
            daylight = values.get(constants.DAYLIGHT_ATTRIBUTE, daylight)

            estimate.production.append(
                self.production(temperature, radiation, surface_area, production_coefficient)
            )
            estimate.consumption.append(
                self.consumption(temperature, daylight, coefficients, offset)
            )

        self.logger.debug(f"Estimated energy for {len(estimate.production)} forecast steps")
        return estimate

    def summarise_suburb(
        self,
        forecast: WeatherSeries,
        surface_area: float,
        shortwave_ratio: float = constants.SHORTWAVE_RATIO
    ) -> SuburbEnergySummary:
        """
        Total forecast generation and weather averages for a suburb.

        Steps with a temperature of exactly 0 (missing readings) are excluded
        from generation and from the temperature average.

        Args:
            forecast: Forecast weather series for the suburb
            surface_area: Panel surface area (m²)
            shortwave_ratio: Scaling applied to the hourly radiation

        Returns:
            SuburbEnergySummary; averages are None when there are no samples
        """
        generation = 0.0
        temperatures: List[float] = []
        daylight_durations: List[float] = []

        for event in forecast.events:
            values: Dict[str, Any] = event.measurements
            temperature = values.get(constants.TEMPERATURE_ATTRIBUTE, 0)
            daylight = values.get(constants.DAYLIGHT_ATTRIBUTE, 0)
            radiation = (
                values.get(constants.RADIATION_ATTRIBUTE, 0)
                / constants.RADIATION_DIVISOR
                * shortwave_ratio
            )

            if daylight != 0:
                daylight_durations.append(daylight)

            if temperature == 0:
                continue
            generation += self.derated_generation(temperature, radiation, surface_area)
            temperatures.append(temperature)

        return SuburbEnergySummary(
            energy_generation=generation,
            temperature_average=sum(temperatures) / len(temperatures) if temperatures else None,
            daylight_average=(
                sum(daylight_durations) / len(daylight_durations) if daylight_durations else None
            ),
        )
