"""
Generation versus consumption threshold evaluation.
"""

import logging
from typing import Optional

from ..models import Notification, NotificationKind
from ..processing.strategies import round_half_up

OVER_GENERATION_MESSAGE = "Energy generated has exceeded predicted consumption by {percent}%."
UNDER_GENERATION_MESSAGE = "Energy generated has fallen short of predicted consumption by {percent}%."


class NotificationEvaluator:
    """Decide whether predicted generation strays outside a user's limits."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def percent_difference(production: float, consumption: float) -> float:
        """|100 (consumption - production) / consumption| rounded to 2 decimals."""
        return round_half_up(abs(100 * (consumption - production) / consumption))

    def evaluate(
        self,
        production: float,
        consumption: float,
        upper_limit: float,
        lower_limit: float
    ) -> Optional[Notification]:
        """
        Compare the production/consumption ratio against the user's limits.

        Args:
            production: Predicted generation (W)
            consumption: Predicted consumption (W)
            upper_limit: Percentage above consumption that triggers an alert
            lower_limit: Percentage below consumption that triggers an alert

        Returns:
            A single Notification, or None when the ratio is within limits
        """
        if consumption <= 0:
            self.logger.warning(
                f"Predicted consumption {consumption} is not positive, skipping evaluation"
            )
            return None

        ratio = production / consumption
        upper = 1 + upper_limit / 100
        lower = 1 - lower_limit / 100

        if ratio >= upper:
            kind = NotificationKind.OVER_GENERATION
            template = OVER_GENERATION_MESSAGE
        elif ratio <= lower:
            kind = NotificationKind.UNDER_GENERATION
            template = UNDER_GENERATION_MESSAGE
        else:
            return None

        percent = self.percent_difference(production, consumption)
        return Notification(
            kind=kind,
            message=template.format(percent=f"{percent:.2f}"),
            percent=percent,
            production=production,
            consumption=consumption,
        )
