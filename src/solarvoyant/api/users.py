"""
User store operations.

Reads user records and writes back derived fields (coefficients, notifications).
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests  # type: ignore

from ..core.exceptions import StoreError, UserNotFound
from .client import status_of


class UserStoreAPI:
    """User record store operations."""

    # Type hints for attributes provided by APIClient base class
    logger: logging.Logger

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def patch(self, endpoint: str, data: Dict[str, Any]) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_user(self, user_id: str) -> Dict[str, Any]:
        """
        Get a user record.

        Args:
            user_id: User ID

        Returns:
            The user record

        Raises:
            UserNotFound: If the user does not exist
            StoreError: On any other store failure
        """
        self.logger.debug(f"Fetching user {user_id}")
        try:
            result = self.get(f"/users/{quote(user_id)}")
        except requests.exceptions.RequestException as e:
            if status_of(e) == 404:
                raise UserNotFound(f"User {user_id} not found") from e
            raise StoreError(f"Error reading user {user_id}") from e

        if not isinstance(result, dict):
            raise StoreError(f"User record {user_id} is not a JSON object")
        return result

    def list_users(self) -> list:
        """
        List every user record.

        Returns:
            List of user records

        Raises:
            StoreError: On store failure
        """
        try:
            result = self.get("/users")
        except requests.exceptions.RequestException as e:
            raise StoreError("Error listing users") from e

        if isinstance(result, list):
            return result
        return []

    def update_user_fields(self, user_id: str, fields: Dict[str, Any]) -> None:
        """
        Overwrite fields on an existing user record.

        Writes are last-write-wins.

        Args:
            user_id: User ID
            fields: Field name -> new value

        Raises:
            StoreError: If the update fails
        """
        self.logger.info(f"Updating user {user_id}: {', '.join(fields)}")
        try:
            self.patch(f"/users/{quote(user_id)}", data=fields)
        except requests.exceptions.RequestException as e:
            raise StoreError(f"Error updating fields of user {user_id}") from e
