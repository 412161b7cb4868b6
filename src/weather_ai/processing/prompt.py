"""
Summary prompt templating.

Builds the natural-language prompt sent to the generative-text model.
"""

from ..core import constants
from ..models.forecast import ForecastSnapshot

PROMPT_TEMPLATE = """\
Write a summary of today's weather in {language}, at most 2-3 sentences.
Use a casual but informative tone.
Weather data:
- Temperature: {temperature}°C
- Humidity: {humidity}
- WeatherCode: {weather_code}
- Rain: {rain}
- Precipitation: {precipitation}
- Location: Lat {latitude}, Lon {longitude}

Example output:
"It's sunny today at 28°C, perfect for a walk!\""""


def build_summary_prompt(
    snapshot: ForecastSnapshot,
    language: str = constants.DEFAULT_SUMMARY_LANGUAGE
) -> str:
    """
    Build the summary prompt for a forecast snapshot.

    Values missing from the snapshot (including the whole current block)
    are rendered as 'None'.

    Args:
        snapshot: Forecast snapshot
        language: Target language of the summary

    Returns:
        Prompt text
    """
    current = snapshot.current
    return PROMPT_TEMPLATE.format(
        language=language,
        temperature=current.temperature if current else None,
        humidity=current.humidity if current else None,
        weather_code=current.weather_code if current else None,
        rain=current.rain if current else None,
        precipitation=current.precipitation if current else None,
        latitude=snapshot.latitude,
        longitude=snapshot.longitude,
    )
