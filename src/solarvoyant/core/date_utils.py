"""
Date, timezone and season utilities.

Centralizes all date/time operations with proper timezone handling.
"""

import logging
from datetime import datetime
from typing import Optional

import pytz
from pytz.tzinfo import BaseTzInfo


# Southern Hemisphere seasons, indexed like the production coefficient array
SUMMER = 0  # Dec, Jan, Feb
AUTUMN = 1  # Mar, Apr, May
WINTER = 2  # Jun, Jul, Aug
SPRING = 3  # Sep, Oct, Nov

SEASON_NAMES = ("Summer", "Autumn", "Winter", "Spring")


def season_index(month: int) -> int:
    """
    Map a calendar month (1-12) to a season index.

    0=Summer (Dec-Feb), 1=Autumn (Mar-May), 2=Winter (Jun-Aug), 3=Spring (Sep-Nov)
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    if 3 <= month <= 5:
        return AUTUMN
    elif 6 <= month <= 8:
        return WINTER
    elif 9 <= month <= 11:
        return SPRING
    return SUMMER


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Australia/Sydney', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    def local_time(
        self,
        timezone_str: str,
        reference_time: Optional[datetime] = None
    ) -> datetime:
        """
        Get the reference time expressed in the given timezone.

        Args:
            timezone_str: Timezone string
            reference_time: Reference time (defaults to now in UTC, naive values are taken as UTC)

        Returns:
            Timezone-aware datetime in the target timezone
        """
        tz = self.parse_timezone(timezone_str)

        if reference_time is None:
            reference_time = datetime.now(pytz.UTC)
        elif reference_time.tzinfo is None:
            reference_time = pytz.UTC.localize(reference_time)

        return reference_time.astimezone(tz)

    def current_season(
        self,
        timezone_str: str,
        reference_time: Optional[datetime] = None
    ) -> int:
        """
        Get the season index for the reference time in the given timezone.

        Args:
            timezone_str: Timezone string
            reference_time: Reference time (defaults to now)

        Returns:
            Season index (0-3)
        """
        local = self.local_time(timezone_str, reference_time)
        season = season_index(local.month)
        self.logger.debug(
            f"Season for {local.isoformat()} in {timezone_str}: {SEASON_NAMES[season]}"
        )
        return season
