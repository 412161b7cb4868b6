"""
Date and timezone utilities.

Centralizes parsing of the forecast API's local timestamps with proper
timezone handling.
"""

import logging
from datetime import datetime, date
from typing import Optional
import pytz
from pytz.tzinfo import BaseTzInfo


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Asia/Jakarta', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    def resolve_timezone(self, timezone_str: Optional[str], utc_offset_seconds: int = 0):
        """
        Resolve the forecast's timezone, falling back to its fixed UTC offset.

        Open-Meteo reports both an IANA name and the offset in seconds. Some
        names (e.g. 'GMT+7') are not in the tz database, in which case the
        offset is used instead.

        Args:
            timezone_str: Timezone name from the forecast payload
            utc_offset_seconds: Offset from UTC in seconds

        Returns:
            pytz timezone object
        """
        if timezone_str:
            try:
                return self.parse_timezone(timezone_str)
            except ValueError:
                self.logger.debug(
                    f"Unknown timezone {timezone_str!r}, using offset {utc_offset_seconds}s"
                )
        return pytz.FixedOffset(utc_offset_seconds // 60)

    @staticmethod
    def parse_local_timestamp(value: str, tz: BaseTzInfo) -> datetime:
        """
        Parse a local ISO timestamp without offset into an aware datetime.

        Args:
            value: Timestamp string (e.g., '2025-12-29T00:00')
            tz: Timezone the timestamp is expressed in

        Returns:
            Timezone-aware datetime

        Raises:
            ValueError: If the string is not an ISO timestamp
        """
        dt = datetime.fromisoformat(value)
        if dt.tzinfo is not None:
            return dt.astimezone(tz)
        return tz.localize(dt)

    @staticmethod
    def format_clock(dt: datetime) -> str:
        """Format a datetime as HH:MM."""
        return dt.strftime("%H:%M")

    @staticmethod
    def today_in(tz: BaseTzInfo, reference_time: Optional[datetime] = None) -> date:
        """
        Get the current date in the given timezone.

        Args:
            tz: Target timezone
            reference_time: Reference time (defaults to now in UTC)

        Returns:
            Local date
        """
        if reference_time is None:
            reference_time = datetime.now(pytz.UTC)
        elif reference_time.tzinfo is None:
            # Assume UTC if no timezone
            reference_time = pytz.UTC.localize(reference_time)

        return reference_time.astimezone(tz).date()
