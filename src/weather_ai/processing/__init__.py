"""
Data processing module for the weather AI summary application.

Provides forecast mapping, weather code classification and prompt templating.
"""

from .mapper import map_forecast
from .weather_codes import describe_weather_code
from .prompt import build_summary_prompt

__all__ = [
    "map_forecast",
    "describe_weather_code",
    "build_summary_prompt",
]
