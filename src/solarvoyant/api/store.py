"""
Weather store operations.

Reads stored weather series (history and forecast files) by key.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests  # type: ignore

from ..core.exceptions import SeriesNotFound, StoreError
from .client import status_of


class WeatherStoreAPI:
    """Weather series store operations."""

    # Type hints for attributes provided by APIClient base class
    logger: logging.Logger

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def fetch_series(self, key: str) -> Dict[str, Any]:
        """
        Fetch a stored weather series.

        Args:
            key: Storage key, e.g. "weatherData/forecast/Panania.json"

        Returns:
            The series as a dictionary

        Raises:
            SeriesNotFound: If no series is stored under the key
            StoreError: On any other store failure
        """
        self.logger.info(f"Fetching weather series {key}")
        try:
            result = self.get(f"/objects/{quote(key)}")
        except requests.exceptions.RequestException as e:
            if status_of(e) == 404:
                raise SeriesNotFound(f"No weather series stored under {key}") from e
            raise StoreError(f"Error reading weather series {key}") from e

        if not isinstance(result, dict):
            raise StoreError(f"Weather series {key} is not a JSON object")
        return result
