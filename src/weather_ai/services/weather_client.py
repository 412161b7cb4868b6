"""
Weather client service.

Fetches the forecast for one coordinate pair and maps it to the domain model.
"""

import logging
from typing import Optional

from ..api.forecast import ForecastAPI
from ..core.logger import LoggerContext
from ..models.forecast import Coordinates, ForecastSnapshot
from ..processing.mapper import map_forecast


class WeatherClient:
    """Service that turns one forecast request into a ForecastSnapshot."""

    def __init__(
        self,
        forecast_api: ForecastAPI,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize weather client.

        Args:
            forecast_api: Forecast API client
            logger: Logger instance
        """
        self.forecast_api = forecast_api
        self.logger = logger or logging.getLogger(__name__)

    def fetch_forecast(self, coordinates: Coordinates) -> ForecastSnapshot:
        """
        Fetch and map the forecast. Not retried.

        Args:
            coordinates: Location to fetch

        Returns:
            Mapped forecast snapshot

        Raises:
            NetworkError, HttpError, DecodeError: On forecast failures
        """
        detail = f"({coordinates.latitude}, {coordinates.longitude})"
        with LoggerContext(self.logger, "forecast", detail):
            response = self.forecast_api.get_forecast(
                coordinates.latitude, coordinates.longitude
            )
            snapshot = map_forecast(response)

        if snapshot.hourly is not None and not snapshot.hourly.is_consistent:
            self.logger.warning("Hourly forecast arrays have mismatched lengths")
        if snapshot.daily is not None and not snapshot.daily.is_consistent:
            self.logger.warning("Daily forecast arrays have mismatched lengths")

        self.logger.debug(
            f"Forecast timezone {snapshot.timezone} ({snapshot.timezone_abbreviation}), "
            f"generated in {snapshot.generation_time_ms:.2f}ms"
        )
        return snapshot
