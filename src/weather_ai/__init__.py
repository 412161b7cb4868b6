"""
Weather AI Summary

This package fetches a weather forecast for one location and asks a
generative-text model to summarize it in a few natural-language sentences.
"""

__version__ = "0.1.0"
__description__ = "Weather forecast with an AI-generated summary"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "WeatherApp":
        from .main import WeatherApp
        return WeatherApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "WeatherApp",
]
