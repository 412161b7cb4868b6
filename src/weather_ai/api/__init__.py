"""
API layer for the forecast and generative-text services.

Provides low-level REST clients; errors are translated into the application
taxonomy by the service layer.
"""

from .client import APIClient
from .forecast import ForecastAPI
from .gemini import GeminiAPI

__all__ = [
    "APIClient",
    "ForecastAPI",
    "GeminiAPI",
]
