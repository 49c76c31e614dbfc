"""Exceptions raised by weather lookups.

Every error carries a ``message`` that is safe to show to the user as-is.
The CLI catches :class:`WeatherLookupError` at the top level and prints it.
"""

from __future__ import annotations


class WeatherLookupError(Exception):
    """Base class for all lookup failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidQueryError(WeatherLookupError):
    """The user's query cannot be sent (blank city, out-of-range coordinates)."""


class LocationNotFoundError(WeatherLookupError):
    """Current conditions could not be retrieved for the requested location."""


class ForecastUnavailableError(WeatherLookupError):
    """The forecast could not be retrieved for the requested location."""


class WeatherServiceError(WeatherLookupError):
    """Transport failure or a response we could not make sense of."""
