"""
Configuration module for weather analytics and solar estimation.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional, List
from pathlib import Path

from . import constants


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        # Store configuration
        if os.getenv("STORE_BASE_URL"):
            if "store" not in self.config:
                self.config["store"] = {}
            self.config["store"]["base_url"] = os.getenv("STORE_BASE_URL")

        # Processing
        if os.getenv("ANALYTICS_TIMEZONE"):
            if "processing" not in self.config:
                self.config["processing"] = {}
            self.config["processing"]["timezone"] = os.getenv("ANALYTICS_TIMEZONE")

        # Coefficients
        if os.getenv("SIGN_CONVENTION"):
            if "coefficients" not in self.config:
                self.config["coefficients"] = {}
            self.config["coefficients"]["sign_convention"] = os.getenv("SIGN_CONVENTION")

        # Logging
        for env_name, key in (("LOG_LEVEL", "level"), ("LOG_FILE", "file")):
            if os.getenv(env_name):
                if "logging" not in self.config:
                    self.config["logging"] = {}
                self.config["logging"][key] = os.getenv(env_name)

        # Environment
        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present."""
        required_config = {
            "processing": ["timezone"],
        }

        missing_sections = [
            section for section in required_config if section not in self.config
        ]
        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if key not in self.config[section]:
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        level = self.get("logging.level")
        if level is not None and str(level).upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid logging.level: {level}")

        convention = self.get("coefficients.sign_convention")
        if convention is not None and convention not in ("negative_daylight", "signed_daylight"):
            raise ValueError(
                f"Invalid coefficients.sign_convention: {convention} "
                "(expected 'negative_daylight' or 'signed_daylight')"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'store.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def store_base_url(self) -> str:
        """Get object/user store base URL."""
        base_url = self.get("store.base_url")
        if not base_url:
            raise ValueError("Missing required configuration: store.base_url")
        return base_url

    @property
    def store_timeout(self) -> int:
        """Get store request timeout in seconds."""
        return self.get("store.timeout", 30)

    @property
    def store_max_retries(self) -> int:
        """Get maximum store retry attempts."""
        return self.get("store.max_retries", 3)

    @property
    def store_verify_ssl(self) -> bool:
        """Get store SSL verification setting."""
        return self.get("store.verify_ssl", True)

    @property
    def timezone(self) -> str:
        """Get processing timezone."""
        return self.get("processing.timezone", constants.ANALYTICS_TIMEZONE)

    @property
    def forecast_horizon_hours(self) -> int:
        """Get number of hourly forecast steps returned by energy estimates."""
        return self.get("processing.forecast_horizon_hours", constants.FORECAST_HORIZON_HOURS)

    @property
    def calculation_offset(self) -> float:
        """Get baseline consumption offset for users without quarterly data."""
        return self.get("energy.calculation_offset", constants.CALCULATION_OFFSET)

    @property
    def shortwave_ratio(self) -> float:
        """Get suburb-level shortwave radiation ratio."""
        return self.get("energy.shortwave_ratio", constants.SHORTWAVE_RATIO)

    @property
    def default_surface_area(self) -> float:
        """Get panel surface area used when the user has none recorded."""
        return self.get("energy.default_surface_area", constants.DEFAULT_SURFACE_AREA)

    @property
    def sign_convention(self) -> str:
        """Get daylight coefficient sign convention name."""
        return self.get("coefficients.sign_convention", "negative_daylight")

    @property
    def heatmap_conditions(self) -> List[str]:
        """Get conditions the heatmap can be built for."""
        return list(
            self.get("analytics.heatmap_conditions", constants.HEATMAP_AVAILABLE_CONDITIONS)
        )

    @property
    def log_level(self) -> str:
        """Get application log level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> str:
        """Get path of the detailed log file."""
        return self.get("logging.file", "logs/solarvoyant.log")

    @property
    def log_to_file(self) -> bool:
        """Get whether the detailed log file is written."""
        return bool(self.get("logging.file_enabled", True))

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, env={self.get('environment')})"
