"""
Formatting helpers for rendering forecasts as text.
"""

from datetime import date, timedelta
from typing import List, Optional

from ..core import constants
from ..core.date_utils import DateUtils
from ..models.forecast import ForecastSnapshot, HourlyEntry


def day_name_from_index(index: int, today: date) -> str:
    """
    Name a forecast day relative to today.

    Args:
        index: Day offset (0 = today)
        today: Local date of the forecast location

    Returns:
        'Today', 'Tomorrow' or the weekday name
    """
    if index == 0:
        return "Today"
    if index == 1:
        return "Tomorrow"
    return (today + timedelta(days=index)).strftime("%A")


def format_value(value: Optional[float], unit: str = "") -> str:
    """Format a measurement, showing '--' when it is missing."""
    if value is None:
        return "--"
    return f"{value:.1f}{unit}"


def upcoming_hours(
    snapshot: ForecastSnapshot,
    date_utils: DateUtils,
    hours: int = constants.HOURLY_DISPLAY_HOURS
) -> List[HourlyEntry]:
    """
    Select the hourly entries starting at the current observation hour.

    Falls back to the first entries when the current time is unknown or
    cannot be parsed.

    Args:
        snapshot: Forecast snapshot
        date_utils: Date utilities
        hours: Maximum number of entries

    Returns:
        Up to `hours` entries in forecast order
    """
    if snapshot.hourly is None:
        return []

    entries = list(snapshot.hourly.entries())
    current_time = snapshot.current.time if snapshot.current else None
    if not current_time:
        return entries[:hours]

    tz = date_utils.resolve_timezone(snapshot.timezone, snapshot.utc_offset_seconds)
    try:
        now = date_utils.parse_local_timestamp(current_time, tz)
        now = now.replace(minute=0, second=0, microsecond=0)
        upcoming = [
            entry for entry in entries
            if entry.time and date_utils.parse_local_timestamp(entry.time, tz) >= now
        ]
    except ValueError:
        return entries[:hours]

    return upcoming[:hours]
