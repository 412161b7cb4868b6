"""
Forecast mapper.

Converts the forecast wire schema into the domain model. Pure and total:
absent blocks map to None, array lengths are passed through unchecked.
"""

from typing import Optional

from ..models.forecast import CurrentConditions, DailySeries, ForecastSnapshot, HourlySeries
from ..models.wire import CurrentBlock, DailyBlock, ForecastResponse, HourlyBlock


def map_current(block: Optional[CurrentBlock]) -> Optional[CurrentConditions]:
    if block is None:
        return None
    return CurrentConditions(
        time=block.time,
        temperature=block.temperature_2m,
        humidity=block.relative_humidity_2m,
        precipitation=block.precipitation,
        rain=block.rain,
        apparent_temperature=block.apparent_temperature,
        weather_code=block.weather_code,
    )


def map_hourly(block: Optional[HourlyBlock]) -> Optional[HourlySeries]:
    if block is None:
        return None
    return HourlySeries(
        time=tuple(block.time),
        temperature=tuple(block.temperature_2m),
        weather_code=tuple(block.weather_code),
    )


def map_daily(block: Optional[DailyBlock]) -> Optional[DailySeries]:
    if block is None:
        return None
    return DailySeries(
        time=tuple(block.time),
        weather_code=tuple(block.weather_code),
        sunrise=tuple(block.sunrise),
        sunset=tuple(block.sunset),
    )


def map_forecast(response: ForecastResponse) -> ForecastSnapshot:
    """
    Map a decoded forecast response to a snapshot.

    Args:
        response: Decoded wire payload

    Returns:
        ForecastSnapshot with the same values under domain names
    """
    return ForecastSnapshot(
        latitude=response.latitude,
        longitude=response.longitude,
        timezone=response.timezone,
        timezone_abbreviation=response.timezone_abbreviation,
        current=map_current(response.current),
        hourly=map_hourly(response.hourly),
        daily=map_daily(response.daily),
        utc_offset_seconds=response.utc_offset_seconds,
        generation_time_ms=response.generationtime_ms,
    )
