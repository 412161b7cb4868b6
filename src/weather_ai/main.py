"""
Main entry point for the weather AI summary application.

Wires the forecast and summary clients into the pipeline and renders the
resulting states to the terminal.
"""

import asyncio
import sys
from typing import Optional

from .api import ForecastAPI, GeminiAPI
from .core import Config, setup_logger
from .models.forecast import Coordinates
from .models.state import PipelineState, Success
from .presentation import ConsoleRenderer
from .services import ForecastPipeline, SummaryGenerator, WeatherClient, WeatherStateHolder


class WeatherApp:
    """Main application: one forecast with an AI summary for one location."""

    def __init__(self, config_file: Optional[str] = None, log_level: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            log_level: Overrides the configured logging level
        """
        # Load configuration
        self.config = Config(config_file)

        # Setup logger
        self.logger = setup_logger(
            log_file=self.config.log_file,
            log_level=log_level or self.config.log_level
        )
        self.logger.info("Weather AI Summary")
        self.logger.info(f"Configuration: {self.config}")

        # Initialize components (will be set in initialize_components)
        self.forecast_api: Optional[ForecastAPI] = None
        self.gemini_api: Optional[GeminiAPI] = None
        self.pipeline: Optional[ForecastPipeline] = None
        self.state_holder: Optional[WeatherStateHolder] = None

    def initialize_components(self) -> None:
        """Initialize all application components."""
        self.logger.info("Initializing components...")

        fields = self.config.forecast_fields
        self.forecast_api = ForecastAPI(
            base_url=self.config.forecast_base_url,
            timeout=self.config.forecast_timeout,
            current_fields=fields["current"],
            hourly_fields=fields["hourly"],
            daily_fields=fields["daily"],
            timezone=self.config.forecast_timezone,
            forecast_days=self.config.forecast_days,
            logger=self.logger
        )

        self.gemini_api = GeminiAPI(
            api_key=self.config.summary_api_key,
            base_url=self.config.summary_base_url,
            timeout=self.config.summary_timeout,
            logger=self.logger
        )

        self.pipeline = ForecastPipeline(
            weather_client=WeatherClient(self.forecast_api, logger=self.logger),
            summary_generator=SummaryGenerator(
                self.gemini_api,
                model=self.config.summary_model,
                language=self.config.summary_language,
                logger=self.logger
            ),
            logger=self.logger
        )

        self.state_holder = WeatherStateHolder(self.pipeline, logger=self.logger)
        self.logger.info("All components initialized successfully")

    def close(self) -> None:
        """Close HTTP sessions."""
        for client in (self.forecast_api, self.gemini_api):
            if client is not None:
                client.close()

    def run(self, coordinates: Optional[Coordinates] = None, renderer=None) -> PipelineState:
        """
        Fetch the forecast and summary, rendering every state.

        Args:
            coordinates: Location to fetch. If None, uses the configured location.
            renderer: State callback (defaults to a ConsoleRenderer on stdout)

        Returns:
            The final state
        """
        if coordinates is None:
            coordinates = Coordinates(self.config.default_latitude, self.config.default_longitude)

        try:
            self.initialize_components()
            if self.state_holder is None:
                raise RuntimeError("Components not properly initialized")

            unsubscribe = self.state_holder.subscribe(renderer or ConsoleRenderer(logger=self.logger))
            try:
                return asyncio.run(self.state_holder.fetch(coordinates))
            finally:
                unsubscribe()
        finally:
            self.close()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Weather forecast with an AI-generated summary"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--lat",
        type=float,
        default=None,
        help="Latitude in degrees. Default: configured location"
    )
    parser.add_argument(
        "--lon",
        type=float,
        default=None,
        help="Longitude in degrees. Default: configured location"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    args = parser.parse_args()

    if (args.lat is None) != (args.lon is None):
        print("Both --lat and --lon must be given together")
        sys.exit(1)

    # Run application
    try:
        app = WeatherApp(config_file=args.config, log_level=args.log_level)
        coordinates = None
        if args.lat is not None:
            coordinates = Coordinates(args.lat, args.lon)
        state = app.run(coordinates)
    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)

    sys.exit(0 if isinstance(state, Success) else 1)


if __name__ == "__main__":
    main()
