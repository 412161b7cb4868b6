"""
Summary generation service.

Asks the generative-text model for a short natural-language summary of a
forecast snapshot.
"""

import logging
from typing import Optional

import requests  # type: ignore

from ..api.gemini import GeminiAPI
from ..core import constants
from ..core.logger import LoggerContext
from ..errors import EmptyResponseError, GenerationError
from ..models.forecast import ForecastSnapshot
from ..processing.prompt import build_summary_prompt


class SummaryGenerator:
    """Generates a fresh summary for every call; nothing is cached."""

    def __init__(
        self,
        gemini_api: GeminiAPI,
        model: str = constants.DEFAULT_GEMINI_MODEL,
        language: str = constants.DEFAULT_SUMMARY_LANGUAGE,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize summary generator.

        Args:
            gemini_api: Generative-text API client
            model: Model identifier
            language: Target language of the summary
            logger: Logger instance
        """
        self.gemini_api = gemini_api
        self.model = model
        self.language = language
        self.logger = logger or logging.getLogger(__name__)

    def generate(self, snapshot: ForecastSnapshot) -> str:
        """
        Generate a summary for a forecast snapshot.

        Args:
            snapshot: Forecast snapshot

        Returns:
            Generated summary text

        Raises:
            EmptyResponseError: If the model returned no text
            GenerationError: On transport, HTTP or decoding failure
        """
        prompt = build_summary_prompt(snapshot, self.language)
        with LoggerContext(self.logger, "summary", self.model, failure_level=logging.WARNING):
            try:
                text = self.gemini_api.generate_content(prompt, self.model)
            except requests.exceptions.HTTPError as e:
                raise GenerationError(f"Summary request failed: {e}") from e
            except ValueError as e:
                raise GenerationError(f"Summary response is not valid JSON: {e}") from e
            except requests.exceptions.RequestException as e:
                raise GenerationError(f"Network error while generating summary: {e}") from e

            if text is None or not text.strip():
                raise EmptyResponseError()

        summary = text.strip()
        self.logger.info(f"Received summary ({len(summary)} chars)")
        return summary
