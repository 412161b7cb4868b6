"""
Weather condition code classification.

Maps the forecast API's integer condition codes to a fixed set of
human-readable descriptions.
"""

from typing import List, Optional

from ..core import constants


def describe_weather_code(code: Optional[int]) -> str:
    """
    Describe a weather condition code.

    Every input maps to exactly one description; unlisted codes and
    missing values map to 'Unknown'.

    Args:
        code: Weather condition code

    Returns:
        Description such as 'Clear sky' or 'Rain showers'
    """
    if code is None:
        return constants.UNKNOWN_WEATHER
    return constants.WEATHER_CODE_DESCRIPTIONS.get(code, constants.UNKNOWN_WEATHER)


def weather_categories() -> List[str]:
    """All distinct descriptions, including 'Unknown', in code order."""
    categories = []
    for description in constants.WEATHER_CODE_DESCRIPTIONS.values():
        if description not in categories:
            categories.append(description)
    categories.append(constants.UNKNOWN_WEATHER)
    return categories
