"""Exception classes for analytics and solar estimation."""

from typing import Optional


class SolarvoyantError(Exception):
    """Base exception carrying a human-readable message and a status-like code."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class EventsEmpty(SolarvoyantError):
    """The weather series contains no events."""

    status_code = 400


class InvalidAggregate(SolarvoyantError):
    """An aggregate name outside the supported vocabulary was requested."""

    status_code = 400


class EmptySeriesForAggregate(SolarvoyantError):
    """An aggregate was requested for an attribute with no numeric observations."""

    status_code = 400


class MissingCoefficientData(SolarvoyantError):
    """The user record lacks the quarterly fields needed for a coefficient fit."""

    status_code = 400


class InvalidRequest(SolarvoyantError):
    """A request payload is missing required components."""

    status_code = 400


class InvalidCondition(SolarvoyantError):
    """The heatmap condition is not supported."""

    status_code = 400


class StoreError(SolarvoyantError):
    """An external store could not be read or written."""

    pass


class SeriesNotFound(StoreError):
    """No weather series exists under the requested key."""

    status_code = 404


class UserNotFound(StoreError):
    """No user record exists for the requested ID."""

    status_code = 404
