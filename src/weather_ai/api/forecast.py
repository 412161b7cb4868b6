"""
Forecast operations for the Open-Meteo API.

Issues the single forecast request and decodes the response.
"""

import logging
from typing import Dict, Any, Optional

import requests  # type: ignore

from .client import APIClient
from ..core import constants
from ..errors import DecodeError, HttpError, NetworkError
from ..models.wire import ForecastResponse


class ForecastAPI(APIClient):
    """Client for the forecast endpoint."""

    def __init__(
        self,
        base_url: str = constants.DEFAULT_FORECAST_BASE_URL,
        timeout: int = constants.DEFAULT_FORECAST_TIMEOUT,
        current_fields: str = constants.DEFAULT_CURRENT_FIELDS,
        hourly_fields: str = constants.DEFAULT_HOURLY_FIELDS,
        daily_fields: str = constants.DEFAULT_DAILY_FIELDS,
        timezone: str = constants.DEFAULT_TIMEZONE,
        forecast_days: int = constants.DEFAULT_FORECAST_DAYS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize forecast API client.

        Args:
            base_url: Base URL for the forecast API
            timeout: Request timeout in seconds
            current_fields: Comma-separated fields for the current block
            hourly_fields: Comma-separated fields for the hourly block
            daily_fields: Comma-separated fields for the daily block
            timezone: Timezone resolution ('auto' resolves from coordinates)
            forecast_days: Forecast horizon in days
            logger: Logger instance
        """
        super().__init__(base_url=base_url, timeout=timeout, logger=logger)
        self.current_fields = current_fields
        self.hourly_fields = hourly_fields
        self.daily_fields = daily_fields
        self.timezone = timezone
        self.forecast_days = forecast_days

    def build_params(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Build query parameters for a forecast request."""
        return {
            "latitude": latitude,
            "longitude": longitude,
            "current": self.current_fields,
            "hourly": self.hourly_fields,
            "daily": self.daily_fields,
            "timezone": self.timezone,
            "forecast_days": self.forecast_days,
        }

    def get_forecast(self, latitude: float, longitude: float) -> ForecastResponse:
        """
        Fetch the forecast for one coordinate pair.

        Args:
            latitude: Latitude in degrees
            longitude: Longitude in degrees

        Returns:
            Decoded forecast response

        Raises:
            HttpError: On non-2xx responses
            DecodeError: If the body is not JSON or does not match the schema
            NetworkError: On transport failure
        """
        self.logger.info(f"Fetching forecast for lat={latitude}, lon={longitude}")
        params = self.build_params(latitude, longitude)

        try:
            payload = self.get(constants.FORECAST_ENDPOINT, params=params)
        except requests.exceptions.HTTPError as e:
            response = e.response
            status = response.status_code if response is not None else 0
            reason = response.reason if response is not None else None
            raise HttpError(status, reason) from e
        except ValueError as e:
            # requests' JSONDecodeError is a ValueError
            raise DecodeError(f"Forecast response is not valid JSON: {e}") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network error while fetching forecast: {e}") from e

        return ForecastResponse.from_dict(payload)
