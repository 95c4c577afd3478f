"""
Personalized consumption and production coefficient fitting.

Consumption coefficients solve the 4x2 least-squares system

    [t_q  d_q] . [temp_coef, daylight_coef]^T = w_q     (q = 1..4)

through the Moore-Penrose pseudo-inverse built from an SVD. Production
coefficients compare the derated panel output each quarter would predict
with the energy actually observed.
"""

import logging
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from ..core.exceptions import MissingCoefficientData
from ..models import Coefficients, UserCoefficientProfile
from .energy import EnergyEstimator


class SignConvention(str, Enum):
    """How the raw least-squares solution is mapped onto stored coefficients."""

    NEGATIVE_DAYLIGHT = "negative_daylight"  # temp = |x0|, daylight = -|x1|
    SIGNED_DAYLIGHT = "signed_daylight"  # temp = |x0|, daylight = x1


class CoefficientFitter:
    """Fit per-user coefficients from quarterly history."""

    def __init__(
        self,
        sign_convention: SignConvention = SignConvention.NEGATIVE_DAYLIGHT,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize coefficient fitter.

        Args:
            sign_convention: Mapping applied to the raw solution
            logger: Logger instance
        """
        self.sign_convention = SignConvention(sign_convention)
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def solve(matrix: Sequence[Sequence[float]], observed: Sequence[float]) -> np.ndarray:
        """
        Least-squares solution x = A+ b using the SVD pseudo-inverse.

        Singular values that are not strictly positive contribute 0 to S+.

        Args:
            matrix: Coefficient matrix A (m x n)
            observed: Observation vector b (m)

        Returns:
            Solution vector x (n)
        """
        a = np.asarray(matrix, dtype=float)
        b = np.asarray(observed, dtype=float)

        u, s, vt = np.linalg.svd(a, full_matrices=False)
        s_inv = np.array([1.0 / value if value > 0 else 0.0 for value in s])

        pseudo_inverse = vt.T @ np.diag(s_inv) @ u.T
        return pseudo_inverse @ b

    def apply_sign_convention(self, raw: Sequence[float]) -> Coefficients:
        """Map a raw (temp, daylight) solution onto stored coefficients."""
        temp_coefficient = abs(float(raw[0]))
        if self.sign_convention is SignConvention.NEGATIVE_DAYLIGHT:
            daylight_coefficient = -abs(float(raw[1]))
        else:
            daylight_coefficient = float(raw[1])
        return Coefficients(temp_coefficient, daylight_coefficient)

    def fit_consumption(self, profile: UserCoefficientProfile) -> Coefficients:
        """
        Fit temperature and daylight coefficients.

        Args:
            profile: User profile with four quarters of history

        Returns:
            Coefficients under the configured sign convention

        Raises:
            MissingCoefficientData: If any q{n}_w, q{n}_t or q{n}_d is absent
        """
        if not profile.has_consumption_data:
            raise MissingCoefficientData(
                f"User {profile.user_id} is missing quarterly consumption history"
            )

        matrix = [[q.temperature, q.daylight] for q in profile.quarters]
        observed = [q.energy for q in profile.quarters]

        raw = self.solve(matrix, observed)
        coefficients = self.apply_sign_convention(raw)

        self.logger.debug(
            f"Fitted coefficients for user {profile.user_id}: raw={raw.tolist()}, "
            f"temp={coefficients.temp_coefficient}, daylight={coefficients.daylight_coefficient}"
        )
        return coefficients

    def fit_production(self, profile: UserCoefficientProfile, surface_area: float) -> List[float]:
        """
        Fit the four seasonal production coefficients.

        Each coefficient is the derated output predicted from the quarter's
        radiation and temperature divided by the quarter's observed energy.

        Args:
            profile: User profile with four quarters of history
            surface_area: Panel surface area (m²)

        Returns:
            One coefficient per quarter

        Raises:
            MissingCoefficientData: If any q{n}_t or q{n}_r is absent, or a
                q{n}_w is absent or zero
        """
        if not profile.has_production_data:
            raise MissingCoefficientData(
                f"User {profile.user_id} is missing quarterly production history"
            )

        coefficients = [
            EnergyEstimator.derated_generation(q.temperature, q.radiation, surface_area) / q.energy
            for q in profile.quarters
        ]

        self.logger.debug(f"Fitted production coefficients for user {profile.user_id}: {coefficients}")
        return coefficients
