"""
Coefficient resolution service.

Uses stored user coefficients when available, otherwise fits and persists them.
"""

import logging
from typing import List, Optional, TYPE_CHECKING

from ..algorithms import CoefficientFitter
from ..core.exceptions import MissingCoefficientData
from ..models import Coefficients, UserCoefficientProfile

if TYPE_CHECKING:
    from ..api import SolarvoyantAPI
    from ..core.config import Config


class CoefficientService:
    """Resolve and persist personalized coefficients."""

    def __init__(
        self,
        api_client: "SolarvoyantAPI",
        fitter: Optional[CoefficientFitter] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize coefficient service.

        Args:
            api_client: Store client used to persist fitted values
            fitter: Coefficient fitter
            logger: Logger instance
        """
        self.api_client = api_client
        self.fitter = fitter or CoefficientFitter(logger=logger)
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_config(
        cls,
        api_client: "SolarvoyantAPI",
        config: Optional["Config"] = None,
        logger: Optional[logging.Logger] = None
    ) -> "CoefficientService":
        """Build the service with a fitter using the configured sign convention."""
        fitter = CoefficientFitter(config.sign_convention, logger=logger) if config else None
        return cls(api_client, fitter=fitter, logger=logger)

    def resolve_consumption_coefficients(
        self,
        profile: UserCoefficientProfile,
        default: Optional[Coefficients] = None
    ) -> Optional[Coefficients]:
        """
        Get the user's consumption coefficients.

        Stored coefficients are used unless either is unset or zero. Otherwise
        they are fitted from the quarterly history and written back.

        Args:
            profile: User profile
            default: Returned when the history is incomplete

        Returns:
            Coefficients, or default when they cannot be fitted
        """
        stored = profile.coefficients
        if stored is not None:
            self.logger.debug(f"Using stored coefficients for user {profile.user_id}")
            return stored

        try:
            coefficients = self.fitter.fit_consumption(profile)
        except MissingCoefficientData as e:
            self.logger.info(f"{e.message}, using default coefficients {default}")
            return default

        if profile.user_id:
            self.api_client.update_user_fields(profile.user_id, {
                "temp_coefficient": str(coefficients.temp_coefficient),
                "daylight_coefficient": str(coefficients.daylight_coefficient),
            })
        profile.temp_coefficient = coefficients.temp_coefficient
        profile.daylight_coefficient = coefficients.daylight_coefficient

        self.logger.info(f"Calculated coefficients for user {profile.user_id}")
        return coefficients

    def refresh_production_coefficients(
        self,
        profile: UserCoefficientProfile,
        surface_area: float
    ) -> Optional[List[float]]:
        """
        Fit and persist the seasonal production coefficients.

        Only runs when the quarterly history is complete and the stored list
        exists but is empty.

        Args:
            profile: User profile
            surface_area: Panel surface area (m²)

        Returns:
            The new coefficients, or None when nothing was refreshed
        """
        if not (profile.has_production_data and profile.needs_production_coefficients):
            return None

        coefficients = self.fitter.fit_production(profile, surface_area)

        if profile.user_id:
            self.api_client.update_user_fields(
                profile.user_id, {"production_coefficient": coefficients}
            )
        profile.production_coefficient = coefficients

        self.logger.info(f"Calculated production coefficients for user {profile.user_id}")
        return coefficients
