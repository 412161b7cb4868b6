"""
Business logic services for the weather AI summary application.

Services orchestrate API operations and expose the pipeline to a UI layer.
"""

from .weather_client import WeatherClient
from .summary_generator import SummaryGenerator
from .pipeline import ForecastPipeline
from .state_holder import WeatherStateHolder

__all__ = [
    "WeatherClient",
    "SummaryGenerator",
    "ForecastPipeline",
    "WeatherStateHolder",
]
