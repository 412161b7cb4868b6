"""
Forecast aggregation pipeline.

Sequences the weather client and the summary generator and reports each
step as a PipelineState. The forecast is essential, the summary is not:
only a forecast failure ends a run in Error.
"""

import asyncio
import logging
from typing import AsyncIterator, Callable, Optional

from ..core import constants
from ..errors import UnknownError, WeatherAIError
from ..models.forecast import Coordinates
from ..models.state import Error, Loading, PipelineState, Success, SummaryPending
from .summary_generator import SummaryGenerator
from .weather_client import WeatherClient


def _error_message(error: Exception) -> str:
    if isinstance(error, WeatherAIError):
        return error.message
    return UnknownError.from_exception(error).message


class ForecastPipeline:
    """Two-step forecast and summary pipeline. Holds no state between runs."""

    def __init__(
        self,
        weather_client: WeatherClient,
        summary_generator: SummaryGenerator,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize pipeline.

        Args:
            weather_client: Forecast fetching service
            summary_generator: Summary generation service
            logger: Logger instance
        """
        self.weather_client = weather_client
        self.summary_generator = summary_generator
        self.logger = logger or logging.getLogger(__name__)

    async def fetch_with_summary(self, coordinates: Coordinates) -> AsyncIterator[PipelineState]:
        """
        Run the pipeline, yielding every state transition in order.

        Yields Loading, then either Error (forecast failed) or SummaryPending
        followed by Success. A summary failure still yields Success, with
        the failure message in place of the summary.

        Args:
            coordinates: Location to fetch

        Yields:
            PipelineState values
        """
        yield Loading()

        try:
            snapshot = await asyncio.to_thread(self.weather_client.fetch_forecast, coordinates)
        except Exception as e:
            message = _error_message(e)
            self.logger.error(f"Forecast fetch failed: {message}")
            yield Error(message)
            return

        yield SummaryPending(snapshot)

        try:
            summary = await asyncio.to_thread(self.summary_generator.generate, snapshot)
        except Exception as e:
            message = _error_message(e)
            self.logger.warning(f"Summary generation failed, showing forecast only: {message}")
            yield Success(snapshot, f"{constants.SUMMARY_FAILURE_PREFIX}{message}")
            return

        yield Success(snapshot, summary)

    async def run(
        self,
        coordinates: Coordinates,
        on_state: Optional[Callable[[PipelineState], None]] = None
    ) -> PipelineState:
        """
        Run the pipeline to completion.

        Args:
            coordinates: Location to fetch
            on_state: Optional callback invoked for every state

        Returns:
            The final state (Success or Error)
        """
        state: PipelineState = Loading()
        async for state in self.fetch_with_summary(coordinates):
            if on_state is not None:
                on_state(state)
        return state
