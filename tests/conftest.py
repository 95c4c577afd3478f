"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


def _load(fixtures_dir, name):
    with open(fixtures_dir / name, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def weather_series(fixtures_dir):
    """Three-event history series with out-of-order timestamps."""
    return _load(fixtures_dir, "weather_series.json")


@pytest.fixture
def forecast_series(fixtures_dir):
    """Three-step forecast series with partially missing attributes."""
    return _load(fixtures_dir, "forecast_series.json")


@pytest.fixture
def user_record(fixtures_dir):
    """User record with four complete quarters of history."""
    return _load(fixtures_dir, "user_record.json")


@pytest.fixture
def heatmap_suburbs(fixtures_dir):
    """Raw heatmap records for two suburbs."""
    return _load(fixtures_dir, "heatmap_suburbs.json")


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring store access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
