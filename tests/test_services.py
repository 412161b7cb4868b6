"""
Service layer tests.

Tests the weather client, the summary generator and prompt templating.
"""

import unittest
from unittest.mock import Mock

import requests  # type: ignore

from src.weather_ai.api import GeminiAPI
from src.weather_ai.errors import EmptyResponseError, GenerationError, HttpError, NetworkError, SummaryError
from src.weather_ai.models import (
    Coordinates,
    CurrentBlock,
    CurrentConditions,
    ForecastResponse,
    ForecastSnapshot,
    HourlyBlock,
)
from src.weather_ai.processing.prompt import build_summary_prompt
from src.weather_ai.services.summary_generator import SummaryGenerator
from src.weather_ai.services.weather_client import WeatherClient


def make_snapshot(current=True):
    """Build a small forecast snapshot."""
    return ForecastSnapshot(
        latitude=-6.25,
        longitude=106.75,
        timezone="Asia/Jakarta",
        timezone_abbreviation="GMT+7",
        current=CurrentConditions(
            time="2025-12-29T00:00",
            temperature=25.8,
            humidity=89.0,
            precipitation=0.1,
            rain=0.1,
            apparent_temperature=29.4,
            weather_code=3,
        ) if current else None,
    )


class TestWeatherClient(unittest.TestCase):
    """Test the weather client service."""

    def setUp(self):
        """Set up test fixtures."""
        self.forecast_api = Mock()
        self.forecast_api.get_forecast = Mock(return_value=ForecastResponse(
            latitude=-6.25,
            longitude=106.75,
            timezone="Asia/Jakarta",
            timezone_abbreviation="GMT+7",
            current=CurrentBlock(temperature_2m=25.8, weather_code=3),
            hourly=HourlyBlock(
                time=("2025-12-29T00:00", "2025-12-29T01:00"),
                temperature_2m=(25.8, 25.5),
                weather_code=(3, 3),
            ),
        ))
        self.logger = Mock()
        self.client = WeatherClient(self.forecast_api, logger=self.logger)

    def test_fetch_forecast_maps_response(self):
        """Test the API response is mapped into a snapshot."""
        snapshot = self.client.fetch_forecast(Coordinates(-6.2, 106.8))

        self.forecast_api.get_forecast.assert_called_once_with(-6.2, 106.8)
        self.assertEqual(snapshot.current.temperature, 25.8)
        self.assertEqual(snapshot.hourly.temperature, (25.8, 25.5))
        self.assertIsNone(snapshot.daily)

    def test_forecast_errors_propagate(self):
        """Test forecast errors are raised unchanged."""
        self.forecast_api.get_forecast.side_effect = HttpError(500, "Internal Server Error")

        with self.assertRaises(HttpError):
            self.client.fetch_forecast(Coordinates(-6.2, 106.8))

    def test_network_error_propagates(self):
        """Test network errors are raised unchanged."""
        self.forecast_api.get_forecast.side_effect = NetworkError("refused")

        with self.assertRaises(NetworkError):
            self.client.fetch_forecast(Coordinates(-6.2, 106.8))

    def test_warns_on_mismatched_hourly(self):
        """Test mismatched hourly arrays are logged, not rejected."""
        self.forecast_api.get_forecast.return_value = ForecastResponse(
            latitude=0.0,
            longitude=0.0,
            timezone="GMT",
            timezone_abbreviation="GMT",
            hourly=HourlyBlock(time=("2025-12-29T00:00",), temperature_2m=(1.0, 2.0), weather_code=(0,)),
        )

        snapshot = self.client.fetch_forecast(Coordinates(0.0, 0.0))

        self.assertEqual(len(snapshot.hourly), 1)
        self.logger.warning.assert_called_once()


class TestCoordinates(unittest.TestCase):
    """Test coordinate validation."""

    def test_valid_bounds(self):
        """Test boundary values are accepted."""
        Coordinates(90.0, 180.0)
        Coordinates(-90.0, -180.0)

    def test_invalid_latitude(self):
        """Test latitude outside [-90, 90] is rejected."""
        with self.assertRaises(ValueError):
            Coordinates(91.0, 0.0)

    def test_invalid_longitude(self):
        """Test longitude outside [-180, 180] is rejected."""
        with self.assertRaises(ValueError):
            Coordinates(0.0, -180.5)


class TestSummaryPrompt(unittest.TestCase):
    """Test prompt templating."""

    def test_prompt_contains_values(self):
        """Test every value and the instructions appear in the prompt."""
        prompt = build_summary_prompt(make_snapshot(), "Indonesian")

        self.assertIn("in Indonesian", prompt)
        self.assertIn("2-3 sentences", prompt)
        self.assertIn("casual but informative", prompt)
        self.assertIn("Temperature: 25.8°C", prompt)
        self.assertIn("Humidity: 89.0", prompt)
        self.assertIn("WeatherCode: 3", prompt)
        self.assertIn("Rain: 0.1", prompt)
        self.assertIn("Precipitation: 0.1", prompt)
        self.assertIn("Location: Lat -6.25, Lon 106.75", prompt)

    def test_missing_current_renders_none(self):
        """Test absent current conditions render as 'None'."""
        prompt = build_summary_prompt(make_snapshot(current=False), "English")

        self.assertIn("Temperature: None°C", prompt)
        self.assertIn("Humidity: None", prompt)
        self.assertIn("Location: Lat -6.25, Lon 106.75", prompt)

    def test_prompt_is_deterministic(self):
        """Test identical snapshots give identical prompts."""
        self.assertEqual(
            build_summary_prompt(make_snapshot(), "English"),
            build_summary_prompt(make_snapshot(), "English")
        )


class TestSummaryGenerator(unittest.TestCase):
    """Test the summary generator service."""

    def setUp(self):
        """Set up test fixtures."""
        self.gemini_api = Mock()
        self.gemini_api.generate_content = Mock(return_value="  Cloudy and humid today.\n")
        self.generator = SummaryGenerator(
            self.gemini_api,
            model="gemini-2.5-flash",
            language="English",
            logger=Mock()
        )

    def test_generate_returns_stripped_text(self):
        """Test generated text is returned without surrounding whitespace."""
        summary = self.generator.generate(make_snapshot())

        self.assertEqual(summary, "Cloudy and humid today.")
        prompt, model = self.gemini_api.generate_content.call_args.args
        self.assertEqual(model, "gemini-2.5-flash")
        self.assertIn("in English", prompt)

    def test_no_caching(self):
        """Test every call issues a fresh request."""
        snapshot = make_snapshot()
        self.generator.generate(snapshot)
        self.generator.generate(snapshot)

        self.assertEqual(self.gemini_api.generate_content.call_count, 2)

    def test_empty_response(self):
        """Test a missing text raises EmptyResponseError."""
        self.gemini_api.generate_content.return_value = None

        with self.assertRaises(EmptyResponseError):
            self.generator.generate(make_snapshot())

    def test_blank_response(self):
        """Test whitespace-only text raises EmptyResponseError."""
        self.gemini_api.generate_content.return_value = "   \n"

        with self.assertRaises(EmptyResponseError):
            self.generator.generate(make_snapshot())

    def test_http_error(self):
        """Test HTTP failures raise GenerationError."""
        self.gemini_api.generate_content.side_effect = requests.exceptions.HTTPError("503 Server Error")

        with self.assertRaises(GenerationError) as ctx:
            self.generator.generate(make_snapshot())

        self.assertIn("503", ctx.exception.message)

    def test_network_error(self):
        """Test transport failures raise GenerationError."""
        self.gemini_api.generate_content.side_effect = requests.exceptions.ConnectionError("refused")

        with self.assertRaises(GenerationError):
            self.generator.generate(make_snapshot())

    def test_invalid_json(self):
        """Test undecodable responses raise GenerationError."""
        self.gemini_api.generate_content.side_effect = ValueError("Expecting value")

        with self.assertRaises(GenerationError):
            self.generator.generate(make_snapshot())

    def test_malformed_body_raises_summary_error(self):
        """Test response bodies of the wrong shape end in a summary-stage error."""
        for body in ({"candidates": [{"content": ["x"]}]}, {"candidates": {"0": "Sunny"}}):
            with self.subTest(body=body):
                api = GeminiAPI(api_key="test-key", logger=Mock())
                api.post = Mock(return_value=body)
                generator = SummaryGenerator(api, model="gemini-2.5-flash", logger=Mock())

                with self.assertRaises(SummaryError):
                    generator.generate(make_snapshot())


if __name__ == "__main__":
    unittest.main()
