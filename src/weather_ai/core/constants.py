"""
Application-wide constants for the weather AI summary application.

Defaults for the forecast request, the summary request, and the weather
condition code vocabulary shared between data and presentation.
"""

# Forecast API defaults (Open-Meteo)
DEFAULT_FORECAST_BASE_URL = "https://api.open-meteo.com"
FORECAST_ENDPOINT = "/v1/forecast"
DEFAULT_CURRENT_FIELDS = (
    "temperature_2m,relative_humidity_2m,precipitation,rain,"
    "apparent_temperature,weather_code"
)
DEFAULT_HOURLY_FIELDS = "temperature_2m,weather_code"
DEFAULT_DAILY_FIELDS = "weather_code,sunrise,sunset"
DEFAULT_TIMEZONE = "auto"
DEFAULT_FORECAST_DAYS = 7
DEFAULT_FORECAST_TIMEOUT = 30  # seconds

# Generative-text API defaults (Gemini REST)
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_SUMMARY_LANGUAGE = "Indonesian"
DEFAULT_SUMMARY_TIMEOUT = 60  # seconds

# Default location (Jakarta)
DEFAULT_LATITUDE = -6.2
DEFAULT_LONGITUDE = 106.8

# Presentation
SUMMARY_PLACEHOLDER = "Loading..."
SUMMARY_FAILURE_PREFIX = "generation failed: "
HOURLY_DISPLAY_HOURS = 24

# Weather condition codes (WMO subset used by Open-Meteo)
UNKNOWN_WEATHER = "Unknown"
WEATHER_CODE_DESCRIPTIONS = {
    0: "Clear sky",
    1: "Partly cloudy",
    2: "Partly cloudy",
    3: "Partly cloudy",
    45: "Fog",
    48: "Fog",
    51: "Drizzle",
    53: "Drizzle",
    55: "Drizzle",
    61: "Rain",
    63: "Rain",
    65: "Rain",
    71: "Snow",
    73: "Snow",
    75: "Snow",
    80: "Rain showers",
    81: "Rain showers",
    82: "Rain showers",
    95: "Thunderstorm",
    96: "Thunderstorm",
    99: "Thunderstorm",
}
