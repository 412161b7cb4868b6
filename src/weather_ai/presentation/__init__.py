"""
Terminal presentation for the weather AI summary application.
"""

from .formatting import day_name_from_index, format_value, upcoming_hours
from .renderer import ConsoleRenderer

__all__ = [
    "day_name_from_index",
    "format_value",
    "upcoming_hours",
    "ConsoleRenderer",
]
