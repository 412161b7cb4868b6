"""
Text generation operations for the Gemini REST API.

Sends a single prompt to the generateContent endpoint and extracts the text.
"""

import logging
from typing import Dict, Any, Optional

from .client import APIClient
from ..core import constants


class GeminiAPI(APIClient):
    """Client for single-shot text generation."""

    def __init__(
        self,
        api_key: str,
        base_url: str = constants.DEFAULT_GEMINI_BASE_URL,
        timeout: int = constants.DEFAULT_SUMMARY_TIMEOUT,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize generative-text API client.

        Args:
            api_key: API key sent in the x-goog-api-key header
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            logger: Logger instance
        """
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            headers={"x-goog-api-key": api_key},
            logger=logger
        )

    @staticmethod
    def build_request(prompt: str) -> Dict[str, Any]:
        """Build the request body for a single text prompt."""
        return {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

    @staticmethod
    def extract_text(response: Dict[str, Any]) -> Optional[str]:
        """
        Extract generated text from a generateContent response.

        Concatenates the text parts of the first candidate. Bodies of the
        wrong shape are treated as carrying no text.

        Args:
            response: Decoded response body

        Returns:
            Generated text, or None if the response carries no text
        """
        if not isinstance(response, dict):
            return None

        candidates = response.get("candidates")
        if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
            return None

        content = candidates[0].get("content")
        if not isinstance(content, dict):
            return None

        parts = content.get("parts")
        if not isinstance(parts, list):
            return None

        texts = [
            part["text"] for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        ]
        if not texts:
            return None
        return "".join(texts)

    def generate_content(self, prompt: str, model: str) -> Optional[str]:
        """
        Generate text for a prompt.

        Args:
            prompt: Prompt text
            model: Model identifier (e.g., 'gemini-2.5-flash')

        Returns:
            Generated text, or None if the service returned no text

        Raises:
            requests.exceptions.RequestException: On transport or HTTP failure
            ValueError: If the response body is not JSON
        """
        self.logger.debug(f"Generating content with model {model} ({len(prompt)} chars)")
        endpoint = f"/v1beta/models/{model}:generateContent"
        response = self.post(endpoint, self.build_request(prompt))
        return self.extract_text(response)
