"""
Forecast domain models.

Immutable records produced once per fetch by the forecast mapper.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Iterator


@dataclass(frozen=True)
class Coordinates:
    """Geographic coordinates in degrees."""

    latitude: float
    longitude: float

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range [-90, 90]: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range [-180, 180]: {self.longitude}")


@dataclass(frozen=True)
class CurrentConditions:
    """Current observed conditions."""

    time: Optional[str] = None  # Local ISO timestamp
    temperature: Optional[float] = None  # °C
    humidity: Optional[float] = None  # Relative humidity (%)
    precipitation: Optional[float] = None  # mm
    rain: Optional[float] = None  # mm
    apparent_temperature: Optional[float] = None  # °C
    weather_code: Optional[int] = None


@dataclass(frozen=True)
class HourlyEntry:
    """One forecast hour."""

    time: Optional[str]
    temperature: Optional[float]
    weather_code: Optional[int]


@dataclass(frozen=True)
class DailyEntry:
    """One forecast day."""

    date: Optional[str]
    weather_code: Optional[int]
    sunrise: Optional[str]
    sunset: Optional[str]


@dataclass(frozen=True)
class HourlySeries:
    """
    Hourly forecast as parallel sequences.

    Index i across all sequences describes the same hour. Lengths are not
    validated on construction; iterate with entries() to stay within the
    shortest sequence.
    """

    time: Tuple[str, ...] = field(default_factory=tuple)
    temperature: Tuple[float, ...] = field(default_factory=tuple)
    weather_code: Tuple[int, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return min(len(self.time), len(self.temperature), len(self.weather_code))

    @property
    def is_consistent(self) -> bool:
        """True if all sequences have the same length."""
        return len(self.time) == len(self.temperature) == len(self.weather_code)

    def entries(self) -> Iterator[HourlyEntry]:
        for time, temperature, code in zip(self.time, self.temperature, self.weather_code):
            yield HourlyEntry(time=time, temperature=temperature, weather_code=code)


@dataclass(frozen=True)
class DailySeries:
    """Daily forecast as parallel sequences; same rules as HourlySeries."""

    time: Tuple[str, ...] = field(default_factory=tuple)
    weather_code: Tuple[int, ...] = field(default_factory=tuple)
    sunrise: Tuple[str, ...] = field(default_factory=tuple)
    sunset: Tuple[str, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return min(len(self.time), len(self.weather_code), len(self.sunrise), len(self.sunset))

    @property
    def is_consistent(self) -> bool:
        """True if all sequences have the same length."""
        return len(self.time) == len(self.weather_code) == len(self.sunrise) == len(self.sunset)

    def entries(self) -> Iterator[DailyEntry]:
        for day, code, sunrise, sunset in zip(self.time, self.weather_code, self.sunrise, self.sunset):
            yield DailyEntry(date=day, weather_code=code, sunrise=sunrise, sunset=sunset)


@dataclass(frozen=True)
class ForecastSnapshot:
    """One fetched and mapped forecast for a single coordinate pair."""

    latitude: float
    longitude: float
    timezone: str
    timezone_abbreviation: str
    current: Optional[CurrentConditions] = None
    hourly: Optional[HourlySeries] = None
    daily: Optional[DailySeries] = None
    utc_offset_seconds: int = 0
    generation_time_ms: float = 0.0
