"""
Error taxonomy for the forecast and summary stages.

Forecast-stage errors are fatal to a pipeline run; summary-stage errors
are downgraded to a degraded success by the pipeline.
"""

from typing import Optional


class WeatherAIError(Exception):
    """Base class for all application errors, carrying a human-readable message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ForecastError(WeatherAIError):
    """Failure while fetching or decoding the forecast."""


class NetworkError(ForecastError):
    """Transport failure: connection refused, DNS failure, timeout."""


class HttpError(ForecastError):
    """Non-2xx response from the forecast API."""

    def __init__(self, status: int, reason: Optional[str] = None):
        message = f"HTTP {status}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
        self.status = status
        self.reason = reason


class DecodeError(ForecastError):
    """Response body could not be parsed into the expected schema."""


class SummaryError(WeatherAIError):
    """Failure while generating the natural-language summary."""


class EmptyResponseError(SummaryError):
    """The generative-text service returned no text content."""

    def __init__(self, message: str = "Empty response from generative model"):
        super().__init__(message)


class GenerationError(SummaryError):
    """Transport or service-level failure of the generative-text call."""


class UnknownError(WeatherAIError):
    """Catch-all for failures outside the known taxonomy."""

    @classmethod
    def from_exception(cls, error: BaseException) -> "UnknownError":
        """Wrap an arbitrary exception, keeping its message when it has one."""
        message = str(error) or type(error).__name__
        return cls(message)
