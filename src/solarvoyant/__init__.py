"""
Solarvoyant Analytics and Solar Estimation

This package provides statistical summaries of weather series and
personalized solar production and household consumption estimates.
"""

__version__ = "0.1.0"
__description__ = "Weather analytics and solar energy estimation"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "SolarvoyantApp":
        from .main import SolarvoyantApp
        return SolarvoyantApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "SolarvoyantApp",
]
