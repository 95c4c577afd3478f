"""
Energy estimation service.

Combines user coefficients with a suburb forecast into hourly production
and consumption estimates.
"""

import logging
from datetime import datetime
from typing import Optional, TYPE_CHECKING

from ..algorithms import EnergyEstimator
from ..api.helpers import forecast_key
from ..core import constants, DateUtils
from ..core.exceptions import InvalidRequest, SolarvoyantError
from ..models import Coefficients, EnergyEstimate, UserCoefficientProfile
from ..processing import load_series
from .coefficient_service import CoefficientService

if TYPE_CHECKING:
    from ..api import SolarvoyantAPI
    from ..core.config import Config


class EnergyService:
    """Estimate a user's hourly energy production and consumption."""

    def __init__(
        self,
        api_client: "SolarvoyantAPI",
        config: Optional["Config"] = None,
        coefficient_service: Optional[CoefficientService] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize energy service.

        Args:
            api_client: Store client
            config: Configuration object
            coefficient_service: Coefficient resolution service
            logger: Logger instance
        """
        self.api_client = api_client
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.coefficient_service = coefficient_service or CoefficientService.from_config(
            api_client, config, logger
        )
        self.date_utils = DateUtils(logger)

        horizon = config.forecast_horizon_hours if config else constants.FORECAST_HORIZON_HOURS
        self.estimator = EnergyEstimator(forecast_horizon=horizon, logger=logger)

    @property
    def timezone(self) -> str:
        return self.config.timezone if self.config else constants.ANALYTICS_TIMEZONE

    @property
    def default_surface_area(self) -> float:
        return self.config.default_surface_area if self.config else constants.DEFAULT_SURFACE_AREA

    @property
    def calculation_offset(self) -> float:
        return self.config.calculation_offset if self.config else constants.CALCULATION_OFFSET

    def estimate_for_user(
        self,
        user_id: str,
        reference_time: Optional[datetime] = None
    ) -> EnergyEstimate:
        """
        Estimate hourly production and consumption over the user's suburb forecast.

        Args:
            user_id: User ID
            reference_time: Time used to pick the season (defaults to now)

        Returns:
            EnergyEstimate

        Raises:
            InvalidRequest: If the user has no suburb
            UserNotFound: If the user does not exist
            SeriesNotFound: If the suburb has no forecast
        """
        try:
            profile = UserCoefficientProfile.from_record(self.api_client.get_user(user_id))
            if not profile.suburb:
                raise InvalidRequest(f"User {user_id} has no suburb")

            coefficients = self.coefficient_service.resolve_consumption_coefficients(
                profile, Coefficients.default()
            )
            forecast = load_series(self.api_client.fetch_series(forecast_key(profile.suburb)))
        except SolarvoyantError as e:
            self.logger.error(f"Energy estimate for user {user_id} failed: {e.message}")
            raise

        season = self.date_utils.current_season(self.timezone, reference_time)
        estimate = self.estimator.estimate(
            forecast,
            coefficients,
            surface_area=profile.surface_area or self.default_surface_area,
            production_coefficient=self.estimator.seasonal_production_coefficient(
                profile.production_coefficient, season
            ),
            offset=self.estimator.baseline_offset(
                profile.quarterly_energy_consumption, self.calculation_offset
            ),
        )

        self.logger.info(
            f"Estimated {len(estimate.production)} hours of energy for user {user_id}"
        )
        return estimate
