"""
Presentation state holder.

Exposes the pipeline's states as an observable value for a UI layer.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from ..models.forecast import Coordinates
from ..models.state import Loading, PipelineState
from .pipeline import ForecastPipeline

StateCallback = Callable[[PipelineState], None]


class WeatherStateHolder:
    """
    Observable holder for the current PipelineState.

    Subscribers are called synchronously for every transition, in order.
    A new refresh cancels the one in flight; states from a superseded
    refresh are never published.
    """

    def __init__(
        self,
        pipeline: ForecastPipeline,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize state holder.

        Args:
            pipeline: Forecast pipeline
            logger: Logger instance
        """
        self.pipeline = pipeline
        self.logger = logger or logging.getLogger(__name__)
        self._state: PipelineState = Loading()
        self._subscribers: List[StateCallback] = []
        self._task: Optional[asyncio.Task] = None
        self._generation = 0

    @property
    def state(self) -> PipelineState:
        """Current state."""
        return self._state

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """
        Register a callback for state transitions.

        Args:
            callback: Called with each new state

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, state: PipelineState) -> None:
        self._state = state
        for callback in list(self._subscribers):
            callback(state)

    async def _run(self, coordinates: Coordinates, generation: int) -> PipelineState:
        states = self.pipeline.fetch_with_summary(coordinates)
        try:
            async for state in states:
                if generation != self._generation:
                    self.logger.debug(f"Discarding {type(state).__name__} from superseded refresh")
                    break
                self._publish(state)
        finally:
            await states.aclose()
        return self._state

    def refresh(self, coordinates: Coordinates) -> asyncio.Task:
        """
        Start a new fetch, cancelling any fetch in flight.

        Must be called from within a running event loop.

        Args:
            coordinates: Location to fetch

        Returns:
            Task resolving to the final state
        """
        if self._task is not None and not self._task.done():
            self.logger.info("Cancelling in-flight refresh")
            self._task.cancel()

        self._generation += 1
        self._task = asyncio.get_running_loop().create_task(
            self._run(coordinates, self._generation)
        )
        return self._task

    async def fetch(self, coordinates: Coordinates) -> PipelineState:
        """
        Refresh and wait for the outcome.

        Args:
            coordinates: Location to fetch

        Returns:
            The final state, or the current state if this refresh was superseded
        """
        task = self.refresh(coordinates)
        await asyncio.wait({task})
        if task.cancelled():
            return self._state
        return task.result()
