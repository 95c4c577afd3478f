"""
Logging setup for the solarvoyant CLI and services.

The console always receives INFO and above. A detailed DEBUG log file is
written when file logging is enabled in the ``logging`` config section.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

LOGGER_NAME = "solarvoyant"
DEFAULT_LOG_FILE = "logs/solarvoyant.log"

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(log_file: str) -> logging.FileHandler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logger(
    name: str = LOGGER_NAME,
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    file_logging: bool = True
) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        name: Logger name
        log_level: Logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path of the detailed log file (defaults to logs/solarvoyant.log)
        file_logging: Write the detailed log file at all

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, str(log_level).upper(), logging.INFO))
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if file_logging:
        logger.addHandler(_file_handler(log_file or DEFAULT_LOG_FILE))

    logger.propagate = False
    return logger


def logger_from_config(config: "Config", name: str = LOGGER_NAME) -> logging.Logger:
    """Configure the application logger from the ``logging`` config section."""
    return setup_logger(
        name=name,
        log_level=config.log_level,
        log_file=config.log_file,
        file_logging=config.log_to_file,
    )


class LoggerContext:
    """
    Log the start, duration and outcome of one CLI operation.

    Extra keyword arguments (user ID, storage key, ...) are appended to every
    message so a batch run can be followed per user.
    """

    def __init__(self, logger: logging.Logger, operation: str, **details: Any):
        self.logger = logger
        self.operation = operation
        self.details = details
        self.start_time: Optional[datetime] = None

    @property
    def label(self) -> str:
        if not self.details:
            return self.operation
        fields = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.operation} ({fields})"

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.info(f"Starting {self.label}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is not None:
            self.logger.error(
                f"Failed {self.label} after {duration:.2f}s: {exc_val}",
                exc_info=True
            )
            return False

        self.logger.info(f"Completed {self.label} in {duration:.2f}s")
        return True
