"""
Data models for the weather AI summary application.

Contains the forecast wire schema, the domain model and the pipeline states.
"""

from .forecast import (
    Coordinates,
    CurrentConditions,
    HourlySeries,
    HourlyEntry,
    DailySeries,
    DailyEntry,
    ForecastSnapshot,
)
from .wire import ForecastResponse, CurrentBlock, HourlyBlock, DailyBlock
from .state import PipelineState, Loading, SummaryPending, Success, Error

__all__ = [
    "Coordinates",
    "CurrentConditions",
    "HourlySeries",
    "HourlyEntry",
    "DailySeries",
    "DailyEntry",
    "ForecastSnapshot",
    "ForecastResponse",
    "CurrentBlock",
    "HourlyBlock",
    "DailyBlock",
    "PipelineState",
    "Loading",
    "SummaryPending",
    "Success",
    "Error",
]
