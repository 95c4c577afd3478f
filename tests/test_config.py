"""
Tests for configuration loading and environment overrides.
"""

import json

import pytest  # type: ignore
from src.solarvoyant.core import constants
from src.solarvoyant.core.config import Config


@pytest.fixture
def write_config(tmp_path):
    def _write(content):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "STORE_BASE_URL", "ANALYTICS_TIMEZONE", "SIGN_CONVENTION", "ENVIRONMENT",
        "LOG_LEVEL", "LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestConfig:

    def test_defaults(self, write_config):
        config = Config(write_config({"processing": {"timezone": "Australia/Sydney"}}))

        assert config.timezone == "Australia/Sydney"
        assert config.forecast_horizon_hours == constants.FORECAST_HORIZON_HOURS
        assert config.calculation_offset == 600
        assert config.shortwave_ratio == 0.02
        assert config.default_surface_area == 100
        assert config.sign_convention == "negative_daylight"
        assert config.heatmap_conditions == list(constants.HEATMAP_AVAILABLE_CONDITIONS)
        assert config.store_timeout == 30
        assert config.store_max_retries == 3
        assert config.store_verify_ssl is True
        assert config.log_level == "INFO"
        assert config.log_file == "logs/solarvoyant.log"
        assert config.log_to_file is True

    def test_values_from_file(self, write_config):
        config = Config(write_config({
            "store": {"base_url": "https://store.example.com", "timeout": 5},
            "processing": {"timezone": "UTC", "forecast_horizon_hours": 24},
            "energy": {"calculation_offset": 450},
            "coefficients": {"sign_convention": "signed_daylight"},
        }))

        assert config.store_base_url == "https://store.example.com"
        assert config.store_timeout == 5
        assert config.timezone == "UTC"
        assert config.forecast_horizon_hours == 24
        assert config.calculation_offset == 450
        assert config.sign_convention == "signed_daylight"
        assert config.get("store.timeout") == 5
        assert config.get("store.missing", "x") == "x"

    def test_environment_overrides(self, write_config, monkeypatch):
        monkeypatch.setenv("STORE_BASE_URL", "https://env.example.com")
        monkeypatch.setenv("ANALYTICS_TIMEZONE", "Australia/Perth")
        monkeypatch.setenv("SIGN_CONVENTION", "signed_daylight")
        monkeypatch.setenv("ENVIRONMENT", "test")

        config = Config(write_config({"processing": {"timezone": "UTC"}}))

        assert config.store_base_url == "https://env.example.com"
        assert config.timezone == "Australia/Perth"
        assert config.sign_convention == "signed_daylight"
        assert config.get("environment") == "test"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "nope.json"))

    def test_missing_processing_section(self, write_config):
        with pytest.raises(ValueError, match="processing"):
            Config(write_config({}))

    def test_missing_timezone(self, write_config):
        with pytest.raises(ValueError, match="processing.timezone"):
            Config(write_config({"processing": {}}))

    def test_invalid_sign_convention(self, write_config):
        with pytest.raises(ValueError, match="sign_convention"):
            Config(write_config({
                "processing": {"timezone": "UTC"},
                "coefficients": {"sign_convention": "positive"},
            }))

    def test_store_url_required_when_used(self, write_config):
        config = Config(write_config({"processing": {"timezone": "UTC"}}))
        with pytest.raises(ValueError, match="store.base_url"):
            config.store_base_url

    def test_logging_section(self, write_config):
        config = Config(write_config({
            "processing": {"timezone": "UTC"},
            "logging": {"level": "debug", "file": "/tmp/sv.log", "file_enabled": False},
        }))

        assert config.log_level == "debug"
        assert config.log_file == "/tmp/sv.log"
        assert config.log_to_file is False

    def test_logging_environment_overrides(self, write_config, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("LOG_FILE", "/var/log/solarvoyant.log")

        config = Config(write_config({
            "processing": {"timezone": "UTC"},
            "logging": {"level": "DEBUG"},
        }))

        assert config.log_level == "WARNING"
        assert config.log_file == "/var/log/solarvoyant.log"

    def test_invalid_log_level(self, write_config):
        with pytest.raises(ValueError, match="logging.level"):
            Config(write_config({
                "processing": {"timezone": "UTC"},
                "logging": {"level": "verbose"},
            }))
