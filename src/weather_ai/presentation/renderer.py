"""
Text renderer for pipeline states.

Turns each PipelineState into a block of text for a terminal.
"""

import logging
import sys
from datetime import datetime
from typing import List, Optional, TextIO

from ..core.date_utils import DateUtils
from ..models.forecast import ForecastSnapshot
from ..models.state import Error, Loading, PipelineState, Success, SummaryPending
from ..processing.weather_codes import describe_weather_code
from .formatting import day_name_from_index, format_value, upcoming_hours


class ConsoleRenderer:
    """Renders pipeline states as text and writes them to a stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        reference_time: Optional[datetime] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize renderer.

        Args:
            stream: Output stream (defaults to stdout)
            reference_time: Time used to resolve 'today' (defaults to now)
            logger: Logger instance
        """
        self.stream = stream or sys.stdout
        self.reference_time = reference_time
        self.logger = logger or logging.getLogger(__name__)
        self.date_utils = DateUtils(self.logger)

    def __call__(self, state: PipelineState) -> None:
        """Render and write a state; usable as a state holder subscriber."""
        self.stream.write(self.render(state) + "\n")
        self.stream.flush()

    def render(self, state: PipelineState) -> str:
        """
        Render a pipeline state as text.

        Args:
            state: Loading, Error, SummaryPending or Success

        Returns:
            Text for the state, without a trailing newline

        Raises:
            TypeError: For an unknown state type
        """
        if isinstance(state, Loading):
            return "Loading weather..."
        if isinstance(state, Error):
            return f"Error: {state.message}\nRun again to retry."
        if isinstance(state, (SummaryPending, Success)):
            return self.render_forecast(state.snapshot, state.summary)
        raise TypeError(f"Unknown state: {state!r}")

    def render_forecast(self, snapshot: ForecastSnapshot, summary: str) -> str:
        """
        Render the forecast view: current conditions, summary, hourly and daily lists.

        Args:
            snapshot: Forecast snapshot
            summary: Summary text, placeholder or failure message

        Returns:
            Forecast view text
        """
        lines: List[str] = ["Current Weather"]
        lines.extend(self._current_lines(snapshot))
        lines.append("")
        lines.append("AI Summary")
        lines.append(f"  {summary}")

        tz = self.date_utils.resolve_timezone(snapshot.timezone, snapshot.utc_offset_seconds)

        hourly = upcoming_hours(snapshot, self.date_utils)
        if hourly:
            lines.append("")
            lines.append(f"Hourly Forecast (Next {len(hourly)} Hours)")
            for entry in hourly:
                lines.append(
                    f"  {self._clock(entry.time, tz)}  {format_value(entry.temperature, '°C'):>8}  "
                    f"{describe_weather_code(entry.weather_code)}"
                )

        if snapshot.daily is not None and len(snapshot.daily) > 0:
            today = self.date_utils.today_in(tz, self.reference_time)
            lines.append("")
            lines.append(f"{len(snapshot.daily)}-Day Forecast")
            for index, entry in enumerate(snapshot.daily.entries()):
                sunrise = self._clock(entry.sunrise, tz)
                sunset = self._clock(entry.sunset, tz)
                lines.append(
                    f"  {day_name_from_index(index, today):<10} "
                    f"{describe_weather_code(entry.weather_code):<14} "
                    f"sunrise {sunrise}  sunset {sunset}"
                )

        return "\n".join(lines)

    def _clock(self, value: Optional[str], tz) -> str:
        """HH:MM of a local timestamp; unparseable values are shown as-is."""
        if not value:
            return "--"
        try:
            return self.date_utils.format_clock(self.date_utils.parse_local_timestamp(value, tz))
        except ValueError:
            return value

    def _current_lines(self, snapshot: ForecastSnapshot) -> List[str]:
        location = (
            f"  {snapshot.latitude:.2f}, {snapshot.longitude:.2f} "
            f"({snapshot.timezone_abbreviation})"
        )
        current = snapshot.current
        if current is None:
            return [location, "  No current conditions available"]

        return [
            location,
            f"  {describe_weather_code(current.weather_code)}",
            f"  Temperature: {format_value(current.temperature, '°C')} "
            f"(feels like {format_value(current.apparent_temperature, '°C')})",
            f"  Humidity: {format_value(current.humidity, '%')}",
            f"  Precipitation: {format_value(current.precipitation, ' mm')}, "
            f"rain: {format_value(current.rain, ' mm')}",
        ]
