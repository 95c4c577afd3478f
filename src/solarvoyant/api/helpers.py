"""
Helper functions for store operations.

Provides utility functions for building storage keys.
"""

from ..core import constants


def capitalise_suburb(suburb: str) -> str:
    """
    Capitalise a suburb name as a proper noun.

    Example: "surry HILLS" -> "Surry Hills". Repeated spaces are preserved.

    Args:
        suburb: Suburb name in any case

    Returns:
        Suburb name with each word capitalised
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in suburb.split(" "))


def forecast_key(suburb: str) -> str:
    """
    Build the storage key of a suburb's forecast series.

    Args:
        suburb: Suburb name in any case

    Returns:
        Key such as "weatherData/forecast/Panania.json"
    """
    return constants.FORECAST_KEY_TEMPLATE.format(suburb=capitalise_suburb(suburb))
