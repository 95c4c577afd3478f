"""
API layer for the solarvoyant data stores.

Provides a low-level client for weather series and user record operations.
"""

import logging
from typing import Optional

from .client import APIClient
from .store import WeatherStoreAPI
from .users import UserStoreAPI
from . import helpers


class SolarvoyantAPI(APIClient, WeatherStoreAPI, UserStoreAPI):
    """
    Unified client for the solarvoyant stores.

    Combines weather series and user record operations.
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        max_retries: int = 3,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize unified API client.

        Args:
            base_url: Base URL of the store service
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            verify_ssl=verify_ssl,
            logger=logger
        )


__all__ = [
    "APIClient",
    "WeatherStoreAPI",
    "UserStoreAPI",
    "SolarvoyantAPI",
    "helpers",
]
