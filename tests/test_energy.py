"""
Tests for energy estimation, seasons and notification thresholds.
"""

from datetime import datetime

import pytest  # type: ignore
import pytz
from src.solarvoyant.algorithms import EnergyEstimator, NotificationEvaluator
from src.solarvoyant.core import DateUtils, season_index
from src.solarvoyant.models import Coefficients, NotificationKind
from src.solarvoyant.processing import load_series


class TestSeasons:

    @pytest.mark.parametrize("month,expected", [
        (12, 0), (1, 0), (2, 0),
        (3, 1), (5, 1),
        (6, 2), (8, 2),
        (9, 3), (11, 3),
    ])
    def test_season_index(self, month, expected):
        assert season_index(month) == expected

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month):
        with pytest.raises(ValueError):
            season_index(month)

    def test_current_season_uses_local_time(self):
        # 29 Feb 14:00 UTC is already 1 March in Sydney
        reference = datetime(2024, 2, 29, 14, 0, tzinfo=pytz.UTC)
        assert DateUtils().current_season("Australia/Sydney", reference) == 1
        assert DateUtils().current_season("UTC", reference) == 0

    def test_invalid_timezone(self):
        with pytest.raises(ValueError):
            DateUtils.parse_timezone("Mars/Olympus_Mons")


class TestProductionAndConsumption:
    """Test the per-step formulas."""

    def test_production_without_derating(self):
        assert EnergyEstimator.production(25, 800, 10) == pytest.approx(1000)

    def test_production_with_derating(self):
        # 10 * 100 * (1 - 0.004 * 5)
        assert EnergyEstimator.production(30, 800, 10) == pytest.approx(980)

    def test_production_coefficient_applied(self):
        assert EnergyEstimator.production(20, 800, 10, 0.5) == pytest.approx(500)

    def test_consumption(self):
        value = EnergyEstimator.consumption(30, 43200, Coefficients(2, 0.5), 600)
        # 2 * 6.4 + 0.5 * 1800 + 600
        assert value == pytest.approx(1512.8)

    def test_consumption_uses_absolute_temp_coefficient(self):
        positive = EnergyEstimator.consumption(20, 0, Coefficients(2, 1))
        negative = EnergyEstimator.consumption(20, 0, Coefficients(-2, 1))
        assert positive == negative == pytest.approx(7.2)

    def test_baseline_offset(self):
        assert EnergyEstimator.baseline_offset(None) == 600
        assert EnergyEstimator.baseline_offset("400, 800,600 , 600") == 600
        assert EnergyEstimator.baseline_offset("100") == 25

    @pytest.mark.parametrize("figures", ["", "   ", "100, 200, abc, 300", "100,,200"])
    def test_baseline_offset_unusable_figures(self, figures):
        assert EnergyEstimator.baseline_offset(figures) == 600
        assert EnergyEstimator.baseline_offset(figures, default=450) == 450

    def test_baseline_offset_numeric_figures(self):
        assert EnergyEstimator.baseline_offset(2400) == 600
        assert EnergyEstimator.baseline_offset([400, "800", 600, 600]) == 600

    def test_seasonal_production_coefficient(self):
        values = [0.5, 0.6, 0.7, 0.8]
        assert EnergyEstimator.seasonal_production_coefficient(values, 2) == 0.7
        assert EnergyEstimator.seasonal_production_coefficient([], 2) == 1
        assert EnergyEstimator.seasonal_production_coefficient(None, 0) == 1

    def test_short_production_coefficient_list(self):
        assert EnergyEstimator.seasonal_production_coefficient([0.5, 0.6], 3) == 1
        assert EnergyEstimator.seasonal_production_coefficient([0.5, 0.6, 0.7], 0) == 1


class TestEstimate:
    """Test the forecast walk."""

    @pytest.fixture
    def estimator(self):
        return EnergyEstimator()

    def test_carries_values_forward(self, estimator, forecast_series):
        estimate = estimator.estimate(
            load_series(forecast_series),
            Coefficients(2, 0.5),
            surface_area=10,
            production_coefficient=1,
            offset=600,
        )

        assert estimate.production == pytest.approx([980, 1000, 500])
        assert estimate.consumption == pytest.approx([1512.8, 1507.2, 1397.2])

    def test_seed_values_before_first_reading(self, estimator, forecast_series):
        forecast_series["events"][0]["attributes"] = {}
        estimate = estimator.estimate(
            load_series(forecast_series), Coefficients(1, 1), surface_area=1, offset=0
        )

        # temperature, adjusted radiation and daylight all start at 1
        assert estimate.production[0] == pytest.approx(1)
        assert estimate.consumption[0] == pytest.approx(22.6 + 1 / 24)

    def test_truncated_to_horizon(self, forecast_series):
        event = forecast_series["events"][0]
        forecast_series["events"] = [event] * 200

        estimate = EnergyEstimator().estimate(load_series(forecast_series), Coefficients(1, 1))
        assert len(estimate.production) == 168
        assert len(estimate.consumption) == 168

        short = EnergyEstimator(forecast_horizon=2).estimate(
            load_series(forecast_series), Coefficients(1, 1)
        )
        assert len(short.production) == 2

    def test_output_shape(self, estimator, forecast_series):
        result = estimator.estimate(load_series(forecast_series), Coefficients(1, 1)).to_dict()
        assert set(result) == {"energy_production_hourly", "energy_consumption_hourly"}


class TestSummariseSuburb:

    def test_summary(self, forecast_series):
        summary = EnergyEstimator().summarise_suburb(load_series(forecast_series), 10)

        # only the first step has radiation: 10 * (800 / 8 * 0.02) * 0.98
        assert summary.energy_generation == pytest.approx(19.6)
        # the 0 °C step is excluded
        assert summary.temperature_average == pytest.approx(25)
        assert summary.daylight_average == pytest.approx(39600)

    def test_no_samples(self, forecast_series):
        for event in forecast_series["events"]:
            event["attributes"] = {"temperature_2m": 0}

        summary = EnergyEstimator().summarise_suburb(load_series(forecast_series), 10)

        assert summary.energy_generation == 0
        assert summary.temperature_average is None
        assert summary.daylight_average is None
        assert summary.to_dict() == {
            "energyGeneration": 0,
            "tempAverage": None,
            "dayLightAverage": None,
        }


class TestNotificationEvaluator:

    @pytest.fixture
    def evaluator(self):
        return NotificationEvaluator()

    def test_over_generation(self, evaluator):
        notification = evaluator.evaluate(1200, 1000, 10, 10)

        assert notification.kind is NotificationKind.OVER_GENERATION
        assert notification.percent == 20.0
        assert notification.message == (
            "Energy generated has exceeded predicted consumption by 20.00%."
        )

    def test_under_generation(self, evaluator):
        notification = evaluator.evaluate(850, 1000, 10, 10)

        assert notification.kind is NotificationKind.UNDER_GENERATION
        assert notification.message == (
            "Energy generated has fallen short of predicted consumption by 15.00%."
        )

    def test_boundaries_are_inclusive(self, evaluator):
        assert evaluator.evaluate(1100, 1000, 10, 10).kind is NotificationKind.OVER_GENERATION
        assert evaluator.evaluate(900, 1000, 10, 10).kind is NotificationKind.UNDER_GENERATION

    def test_within_limits(self, evaluator):
        assert evaluator.evaluate(1050, 1000, 10, 10) is None

    def test_zero_limits_always_alert(self, evaluator):
        assert evaluator.evaluate(1000, 1000, 0, 0).kind is NotificationKind.OVER_GENERATION

    @pytest.mark.parametrize("consumption", [0, -50])
    def test_non_positive_consumption(self, evaluator, consumption):
        assert evaluator.evaluate(100, consumption, 10, 10) is None
