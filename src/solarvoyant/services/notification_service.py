"""
Notification service.

Compares a user's predicted generation with predicted consumption and
records a notification when it strays outside the user's limits.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, Mapping, Optional, Union, TYPE_CHECKING

from ..algorithms import EnergyEstimator, NotificationEvaluator
from ..api.helpers import forecast_key
from ..core import constants, DateUtils
from ..core.exceptions import SolarvoyantError
from ..models import Notification, UserCoefficientProfile
from ..processing import load_series
from .coefficient_service import CoefficientService

if TYPE_CHECKING:
    from ..api import SolarvoyantAPI
    from ..core.config import Config


UserInput = Union[Mapping[str, Any], UserCoefficientProfile]


class NotificationService:
    """Evaluate users' generation against their notification limits."""

    def __init__(
        self,
        api_client: "SolarvoyantAPI",
        config: Optional["Config"] = None,
        coefficient_service: Optional[CoefficientService] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize notification service.

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
        self.estimator = EnergyEstimator(logger=logger)
        self.evaluator = NotificationEvaluator(logger=logger)
        self.date_utils = DateUtils(logger)

    def _setting(self, name: str, default: Any) -> Any:
        return getattr(self.config, name) if self.config else default

    def process_user(
        self,
        user: UserInput,
        reference_time: Optional[datetime] = None
    ) -> Optional[Notification]:
        """
        Run the notification flow for one user.

        Steps: refresh production coefficients, skip users who opted out,
        resolve consumption coefficients (skip without history), summarise
        the suburb forecast, evaluate the limits and persist the message.

        Args:
            user: User record or profile
            reference_time: Time used to pick the season (defaults to now)

        Returns:
            The notification recorded for the user, or None
        """
        profile = user if isinstance(user, UserCoefficientProfile) else (
            UserCoefficientProfile.from_record(dict(user))
        )
        self.logger.info(f"Processing user: {profile.user_id}")

        surface_area = profile.surface_area or self._setting(
            "default_surface_area", constants.DEFAULT_SURFACE_AREA
        )

        try:
            self.coefficient_service.refresh_production_coefficients(profile, surface_area)

            if not profile.wants_notifications:
                self.logger.debug(f"User {profile.user_id} does not receive notifications")
                return None

            coefficients = self.coefficient_service.resolve_consumption_coefficients(profile)
            if coefficients is None:
                return None

            if not profile.suburb:
                self.logger.debug(f"User {profile.user_id} has no suburb")
                return None

            forecast = load_series(self.api_client.fetch_series(forecast_key(profile.suburb)))
        except SolarvoyantError as e:
            self.logger.error(f"Notification flow for user {profile.user_id} failed: {e.message}")
            raise

        summary = self.estimator.summarise_suburb(
            forecast,
            surface_area,
            self._setting("shortwave_ratio", constants.SHORTWAVE_RATIO),
        )
        if summary.temperature_average is None:
            self.logger.warning(f"No forecast temperatures for suburb {profile.suburb}")
            return None

        season = self.date_utils.current_season(
            self._setting("timezone", constants.ANALYTICS_TIMEZONE), reference_time
        )
        production = summary.energy_generation * self.estimator.seasonal_production_coefficient(
            profile.production_coefficient, season
        )
        consumption = self.estimator.consumption(
            summary.temperature_average,
            summary.daylight_average or 0.0,
            coefficients,
            self.estimator.baseline_offset(
                profile.quarterly_energy_consumption,
                self._setting("calculation_offset", constants.CALCULATION_OFFSET),
            ),
        )

        if profile.upper_limit is None or profile.lower_limit is None:
            self.logger.debug(f"User {profile.user_id} has no notification limits")
            return None

        notification = self.evaluator.evaluate(
            production, consumption, profile.upper_limit, profile.lower_limit
        )
        if notification is None:
            return None

        if profile.user_id:
            self.api_client.update_user_fields(
                profile.user_id, {"notifications": [notification.message]}
            )
        self.logger.info(f"User {profile.user_id}: {notification.message}")
        return notification

    def process_users(
        self,
        users: Optional[Iterable[UserInput]] = None,
        reference_time: Optional[datetime] = None
    ) -> Dict[str, Optional[Notification]]:
        """
        Run the notification flow for every user.

        Args:
            users: User records or profiles (defaults to every stored user)
            reference_time: Time used to pick the season (defaults to now)

        Returns:
            Mapping of user ID to the notification recorded, if any
        """
        if users is None:
            users = self.api_client.list_users()

        results: Dict[str, Optional[Notification]] = {}
        for user in users:
            notification = self.process_user(user, reference_time)
            user_id = user.user_id if isinstance(user, UserCoefficientProfile) else user.get("user_id")
            results[str(user_id)] = notification

        self.logger.info(
            f"Processed {len(results)} users, "
            f"{sum(1 for n in results.values() if n is not None)} notified"
        )
        return results
