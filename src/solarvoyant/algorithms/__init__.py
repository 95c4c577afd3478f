"""
Estimation algorithms for solarvoyant.

Provides coefficient fitting, energy estimation and notification threshold evaluation.
"""

from .coefficients import CoefficientFitter, SignConvention
from .energy import EnergyEstimator
from .notification import NotificationEvaluator

__all__ = [
    "CoefficientFitter",
    "SignConvention",
    "EnergyEstimator",
    "NotificationEvaluator",
]
