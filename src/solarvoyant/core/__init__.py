"""
Core utilities for the solarvoyant system.

Provides configuration management, logging, errors and date functionality.
"""

from .config import Config
from .logger import setup_logger, logger_from_config, LoggerContext
from . import constants
from . import exceptions
from .date_utils import DateUtils, season_index

__all__ = [
    "Config",
    "setup_logger",
    "logger_from_config",
    "LoggerContext",
    "constants",
    "exceptions",
    "DateUtils",
    "season_index",
]
