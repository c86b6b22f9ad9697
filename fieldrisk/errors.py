"""
Exceptions for field risk screening.
"""

import config


class FieldRiskError(Exception):
    """Base exception for field risk screening errors."""

    default_message = "Field risk screening failed."

    def __init__(self, message=None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return self.args[0]


class ProviderUnavailable(FieldRiskError):
    """Weather fetch failed or returned a malformed payload."""

    default_message = config.MSG_WEATHER_FAILED


class LocationNotFound(FieldRiskError):
    """Geocoding returned no results for the requested place."""

    default_message = config.MSG_CITY_NOT_FOUND
