"""
Wire schema for the forecast API response.

Field names mirror the Open-Meteo JSON keys. Decoding checks types and
raises DecodeError when the payload does not match.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Tuple

from ..errors import DecodeError


def _number(data: Dict[str, Any], key: str, block: str, required: bool = False) -> Optional[float]:
    """Read a numeric field, rejecting booleans and non-numbers."""
    value = data.get(key)
    if value is None:
        if required:
            raise DecodeError(f"Missing required field '{block}{key}'")
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"Field '{block}{key}' must be a number, got {type(value).__name__}")
    return float(value)


def _integer(data: Dict[str, Any], key: str, block: str) -> Optional[int]:
    """Read an integer field (weather codes)."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Field '{block}{key}' must be an integer, got {type(value).__name__}")
    return value


def _string(data: Dict[str, Any], key: str, block: str, required: bool = False) -> Optional[str]:
    value = data.get(key)
    if value is None:
        if required:
            raise DecodeError(f"Missing required field '{block}{key}'")
        return None
    if not isinstance(value, str):
        raise DecodeError(f"Field '{block}{key}' must be a string, got {type(value).__name__}")
    return value


def _array(data: Dict[str, Any], key: str, block: str, item_type: str) -> Tuple[Any, ...]:
    """
    Read an array field. Missing arrays decode as empty.

    Args:
        data: Block dictionary
        key: Field name
        block: Block prefix for error messages
        item_type: One of 'number', 'integer', 'string'
    """
    values = data.get(key)
    if values is None:
        return ()
    if not isinstance(values, list):
        raise DecodeError(f"Field '{block}{key}' must be an array, got {type(values).__name__}")

    items: List[Any] = []
    for index, value in enumerate(values):
        item_block = f"{block}{key}[{index}]"
        wrapped = {"": value}
        if item_type == "number":
            items.append(_number(wrapped, "", item_block))
        elif item_type == "integer":
            items.append(_integer(wrapped, "", item_block))
        else:
            items.append(_string(wrapped, "", item_block))
    return tuple(items)


def _block(payload: Dict[str, Any], key: str) -> Optional[Dict[str, Any]]:
    block = payload.get(key)
    if block is None:
        return None
    if not isinstance(block, dict):
        raise DecodeError(f"Block '{key}' must be an object, got {type(block).__name__}")
    return block


@dataclass(frozen=True)
class CurrentBlock:
    """The 'current' block of the forecast response."""

    time: Optional[str] = None
    temperature_2m: Optional[float] = None
    relative_humidity_2m: Optional[float] = None
    precipitation: Optional[float] = None
    rain: Optional[float] = None
    apparent_temperature: Optional[float] = None
    weather_code: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CurrentBlock":
        block = "current."
        return cls(
            time=_string(data, "time", block),
            temperature_2m=_number(data, "temperature_2m", block),
            relative_humidity_2m=_number(data, "relative_humidity_2m", block),
            precipitation=_number(data, "precipitation", block),
            rain=_number(data, "rain", block),
            apparent_temperature=_number(data, "apparent_temperature", block),
            weather_code=_integer(data, "weather_code", block),
        )


@dataclass(frozen=True)
class HourlyBlock:
    """The 'hourly' block: parallel arrays indexed by hour."""

    time: Tuple[str, ...] = field(default_factory=tuple)
    temperature_2m: Tuple[float, ...] = field(default_factory=tuple)
    weather_code: Tuple[int, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HourlyBlock":
        block = "hourly."
        return cls(
            time=_array(data, "time", block, "string"),
            temperature_2m=_array(data, "temperature_2m", block, "number"),
            weather_code=_array(data, "weather_code", block, "integer"),
        )


@dataclass(frozen=True)
class DailyBlock:
    """The 'daily' block: parallel arrays indexed by day."""

    time: Tuple[str, ...] = field(default_factory=tuple)
    weather_code: Tuple[int, ...] = field(default_factory=tuple)
    sunrise: Tuple[str, ...] = field(default_factory=tuple)
    sunset: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyBlock":
        block = "daily."
        return cls(
            time=_array(data, "time", block, "string"),
            weather_code=_array(data, "weather_code", block, "integer"),
            sunrise=_array(data, "sunrise", block, "string"),
            sunset=_array(data, "sunset", block, "string"),
        )


@dataclass(frozen=True)
class ForecastResponse:
    """Top-level forecast API response."""

    latitude: float
    longitude: float
    timezone: str
    timezone_abbreviation: str
    generationtime_ms: float = 0.0
    utc_offset_seconds: int = 0
    current: Optional[CurrentBlock] = None
    hourly: Optional[HourlyBlock] = None
    daily: Optional[DailyBlock] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "ForecastResponse":
        """
        Decode a parsed JSON payload.

        Args:
            payload: Result of JSON decoding the response body

        Returns:
            ForecastResponse

        Raises:
            DecodeError: If the payload does not match the schema
        """
        if not isinstance(payload, dict):
            raise DecodeError(
                f"Forecast response must be a JSON object, got {type(payload).__name__}"
            )

        current = _block(payload, "current")
        hourly = _block(payload, "hourly")
        daily = _block(payload, "daily")
        offset = _number(payload, "utc_offset_seconds", "")
        generation_time = _number(payload, "generationtime_ms", "")

        return cls(
            latitude=_number(payload, "latitude", "", required=True),
            longitude=_number(payload, "longitude", "", required=True),
            timezone=_string(payload, "timezone", "", required=True),
            timezone_abbreviation=_string(payload, "timezone_abbreviation", "", required=True),
            generationtime_ms=generation_time if generation_time is not None else 0.0,
            utc_offset_seconds=int(offset) if offset is not None else 0,
            current=CurrentBlock.from_dict(current) if current is not None else None,
            hourly=HourlyBlock.from_dict(hourly) if hourly is not None else None,
            daily=DailyBlock.from_dict(daily) if daily is not None else None,
        )
