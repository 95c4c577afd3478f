"""
Application-wide constants for weather analytics and solar estimation.

This module defines default values and constants used throughout the application.
Values that can be tuned per deployment are also exposed through Config.
"""

# Aggregate vocabulary (order matters: it is the default response order)
DEFAULT_AGGREGATES = (
    "sum",
    "mean",
    "median",
    "min",
    "max",
    "mode",
    "variance",
    "standard_deviation",
)

# Number of decimal places every aggregate result is rounded to
AGGREGATE_DECIMALS = 2

# Analytics time range metadata
ANALYTICS_TIMEZONE = "Australia/Sydney"
TIME_RANGE_UNITS = "iso8601"

# Reserved event attribute keys (never treated as measurable series)
LOCATION_KEY = "location"
UNITS_KEY = "units"
UNITS_EXCLUDED_KEY = "time"

# Conditions the heatmap can be built for
HEATMAP_AVAILABLE_CONDITIONS = (
    "temperature_2m",
    "shortwave_radiation",
    "cloud_cover",
    "sunshine_duration",
)

# Forecast attribute names used by the energy estimator
TEMPERATURE_ATTRIBUTE = "temperature_2m"
RADIATION_ATTRIBUTE = "shortwave_radiation"
DAYLIGHT_ATTRIBUTE = "daylight_duration"

# Solar production model
RADIATION_DIVISOR = 8  # period total -> hourly equivalent
DERATING_THRESHOLD = 25.0  # °C
DERATING_PER_DEGREE = 0.004  # 0.4 % per °C above threshold
SHORTWAVE_RATIO = 0.02  # suburb-level generation scaling
DEFAULT_SURFACE_AREA = 100.0  # m²

# Consumption model
COMFORT_TEMPERATURE = 23.6  # °C
CALCULATION_OFFSET = 600.0  # baseline when no quarterly consumption is recorded
HOURS_PER_DAY = 24
QUARTERS = 4

# Forecast horizon (one week of hourly steps)
FORECAST_HORIZON_HOURS = 168

# Carry-forward seed for forecast values missing from the first events
FORECAST_SEED_VALUE = 1.0

# Degraded coefficients for users without quarterly history
DEFAULT_TEMP_COEFFICIENT = 1.0
DEFAULT_DAYLIGHT_COEFFICIENT = 1.0

# Storage layout
FORECAST_KEY_TEMPLATE = "weatherData/forecast/{suburb}.json"
