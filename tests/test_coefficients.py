"""
Tests for the coefficient fitter.

Reference values come from the four-quarter example user record
(tests/fixtures/user_record.json).
"""

import numpy as np
import pytest  # type: ignore
from src.solarvoyant.algorithms import CoefficientFitter, SignConvention
from src.solarvoyant.core.exceptions import MissingCoefficientData
from src.solarvoyant.models import UserCoefficientProfile

RAW_TEMP = -242.47594890651987
RAW_DAYLIGHT = 0.13159545276933304


@pytest.fixture
def profile(user_record):
    return UserCoefficientProfile.from_record(user_record)


class TestSolve:
    """Test the SVD pseudo-inverse solution."""

    def test_reference_example(self, profile):
        matrix = [[q.temperature, q.daylight] for q in profile.quarters]
        observed = [q.energy for q in profile.quarters]

        x = CoefficientFitter.solve(matrix, observed)

        assert x[0] == pytest.approx(RAW_TEMP, rel=1e-9)
        assert x[1] == pytest.approx(RAW_DAYLIGHT, rel=1e-9)

    def test_consistent_system(self):
        x = CoefficientFitter.solve(
            [[2, 3], [5, 6], [8, 9], [11, 12]],
            [1, 4, 7, 10],
        )
        assert x == pytest.approx([2.0, -1.0], abs=1e-9)

    def test_matches_numpy_least_squares(self):
        matrix = [[1.0, 2.0], [3.0, 1.0], [0.5, 4.0], [2.0, 2.0]]
        observed = [3.0, 1.0, 2.0, 5.0]

        expected = np.linalg.lstsq(np.array(matrix), np.array(observed), rcond=None)[0]
        assert CoefficientFitter.solve(matrix, observed) == pytest.approx(expected)

    def test_zero_singular_values_are_dropped(self):
        x = CoefficientFitter.solve([[0, 0], [0, 0], [0, 0], [0, 0]], [1, 2, 3, 4])
        assert x == pytest.approx([0.0, 0.0])


class TestFitConsumption:

    def test_negative_daylight_convention(self, profile):
        coefficients = CoefficientFitter().fit_consumption(profile)

        assert coefficients.temp_coefficient == pytest.approx(-RAW_TEMP, rel=1e-9)
        assert coefficients.daylight_coefficient == pytest.approx(-RAW_DAYLIGHT, rel=1e-9)

    def test_signed_daylight_convention(self, profile):
        fitter = CoefficientFitter(SignConvention.SIGNED_DAYLIGHT)
        coefficients = fitter.fit_consumption(profile)

        assert coefficients.temp_coefficient == pytest.approx(-RAW_TEMP, rel=1e-9)
        assert coefficients.daylight_coefficient == pytest.approx(RAW_DAYLIGHT, rel=1e-9)

    def test_convention_accepts_config_string(self):
        assert CoefficientFitter("signed_daylight").sign_convention is SignConvention.SIGNED_DAYLIGHT

    def test_temp_coefficient_is_never_negative(self):
        fitter = CoefficientFitter()
        coefficients = fitter.apply_sign_convention([-3.0, -2.0])
        assert coefficients.temp_coefficient == 3.0
        assert coefficients.daylight_coefficient == -2.0

    @pytest.mark.parametrize("field", ["q1_w", "q2_t", "q4_d"])
    def test_missing_field_raises(self, user_record, field):
        del user_record[field]
        profile = UserCoefficientProfile.from_record(user_record)

        with pytest.raises(MissingCoefficientData):
            CoefficientFitter().fit_consumption(profile)

    def test_unparseable_field_is_missing(self, user_record):
        user_record["q3_d"] = "A"
        with pytest.raises(MissingCoefficientData):
            CoefficientFitter().fit_consumption(UserCoefficientProfile.from_record(user_record))

    def test_empty_record_raises(self):
        with pytest.raises(MissingCoefficientData):
            CoefficientFitter().fit_consumption(UserCoefficientProfile.from_record({}))


class TestFitProduction:

    def test_reference_example(self, profile):
        coefficients = CoefficientFitter().fit_production(profile, surface_area=10)

        assert coefficients == pytest.approx(
            [505.5578, 203.38635, 185.282035, 306.8756666666667]
        )

    def test_derating_above_25_degrees(self, user_record):
        user_record["q1_t"] = "35"
        profile = UserCoefficientProfile.from_record(user_record)

        coefficients = CoefficientFitter().fit_production(profile, surface_area=10)

        # 10 * 50555.78 * (1 - 0.004 * 10) / 1000
        assert coefficients[0] == pytest.approx(485.335488)

    def test_missing_radiation_raises(self, user_record):
        del user_record["q2_r"]
        with pytest.raises(MissingCoefficientData):
            CoefficientFitter().fit_production(
                UserCoefficientProfile.from_record(user_record), surface_area=10
            )

    @pytest.mark.parametrize("energy", ["0", 0, "0.0"])
    def test_zero_observed_output_raises(self, user_record, energy):
        user_record["q2_w"] = energy
        profile = UserCoefficientProfile.from_record(user_record)

        assert not profile.has_production_data
        with pytest.raises(MissingCoefficientData):
            CoefficientFitter().fit_production(profile, surface_area=100)


class TestProfile:
    """Test user profile parsing used by the fitter."""

    def test_needs_production_coefficients(self, user_record):
        assert UserCoefficientProfile.from_record(user_record).needs_production_coefficients

        user_record["production_coefficient"] = ["1", "2", "3", "4"]
        profile = UserCoefficientProfile.from_record(user_record)
        assert not profile.needs_production_coefficients
        assert profile.production_coefficient == [1.0, 2.0, 3.0, 4.0]

        del user_record["production_coefficient"]
        assert not UserCoefficientProfile.from_record(user_record).needs_production_coefficients

    @pytest.mark.parametrize("temp,daylight,expected", [
        ("2", "0.5", True),
        ("0", "0.5", False),
        (None, "0.5", False),
        ("2", "", False),
    ])
    def test_has_coefficients(self, temp, daylight, expected):
        profile = UserCoefficientProfile.from_record({
            "temp_coefficient": temp,
            "daylight_coefficient": daylight,
        })
        assert profile.has_coefficients is expected

    @pytest.mark.parametrize("stored,expected", [
        ("400, 800, 600, 600", "400, 800, 600, 600"),
        (2400, "2400"),
        (2400.5, "2400.5"),
        ([400, 800], "400,800"),
        ("", None),
        ("  ", None),
        (None, None),
    ])
    def test_quarterly_energy_consumption_normalised(self, stored, expected):
        profile = UserCoefficientProfile.from_record({"quarterly_energy_consumption": stored})
        assert profile.quarterly_energy_consumption == expected

    def test_receive_emails(self):
        assert UserCoefficientProfile.from_record({"receive_emails": "true"}).wants_notifications
        assert not UserCoefficientProfile.from_record({"receive_emails": "FALSE"}).wants_notifications
        assert not UserCoefficientProfile.from_record({}).wants_notifications
