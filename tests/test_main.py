"""
Application wiring tests.

Runs the whole application with HTTP faked at the session level.
"""

import json
import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import requests  # type: ignore

from src.weather_ai.main import WeatherApp, main
from src.weather_ai.models import Coordinates, Error, Loading, Success, SummaryPending

FIXTURES = Path(__file__).parent / "fixtures"


def json_response(status_code, body, reason="OK"):
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = "https://example.test/"
    response._content = json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    return response


class TestWeatherApp(unittest.TestCase):
    """Test the application end to end."""

    def setUp(self):
        """Set up test fixtures."""
        self.tmp = TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.config_file = str(Path(self.tmp.name) / "config.json")
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump({
                "forecast": {"base_url": "https://api.open-meteo.com"},
                "summary": {"model": "gemini-2.5-flash", "api_key": "test-key", "language": "English"},
                "logging": {"level": "INFO", "file": str(Path(self.tmp.name) / "app.log")},
            }, f)

        with open(FIXTURES / "forecast_response.json", encoding="utf-8") as f:
            self.forecast_body = json.load(f)
        with open(FIXTURES / "gemini_response.json", encoding="utf-8") as f:
            self.gemini_body = json.load(f)

        env = patch.dict(os.environ)
        env.start()
        self.addCleanup(env.stop)
        for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "FORECAST_BASE_URL", "LOG_FILE", "LOG_LEVEL"):
            os.environ.pop(name, None)

    def fake_request(self, forecast_status=200, gemini_status=200):
        def request(session, method, url, **kwargs):
            if method == "GET":
                return json_response(forecast_status, self.forecast_body, reason="Status")
            return json_response(gemini_status, self.gemini_body, reason="Status")
        return request

    def test_run_success(self):
        """Test a full run renders every state and ends in Success."""
        seen = []
        app = WeatherApp(config_file=self.config_file)

        with patch("requests.Session.request", autospec=True, side_effect=self.fake_request()):
            final = app.run(Coordinates(-6.2, 106.8), renderer=seen.append)

        self.assertIsInstance(final, Success)
        self.assertEqual(
            [type(state) for state in seen],
            [Loading, SummaryPending, Success]
        )
        self.assertTrue(final.summary.startswith("Hari ini Jakarta berawan"))
        self.assertEqual(final.snapshot.timezone, "Asia/Jakarta")

    def test_run_forecast_failure(self):
        """Test a forecast HTTP failure ends in Error."""
        app = WeatherApp(config_file=self.config_file)

        with patch("requests.Session.request", autospec=True,
                   side_effect=self.fake_request(forecast_status=500)) as request:
            final = app.run(Coordinates(-6.2, 106.8), renderer=lambda state: None)

        self.assertIsInstance(final, Error)
        self.assertEqual(request.call_count, 1)

    def test_run_summary_failure(self):
        """Test a summary HTTP failure still ends in Success."""
        app = WeatherApp(config_file=self.config_file)

        with patch("requests.Session.request", autospec=True,
                   side_effect=self.fake_request(gemini_status=503)):
            final = app.run(Coordinates(-6.2, 106.8), renderer=lambda state: None)

        self.assertIsInstance(final, Success)
        self.assertTrue(final.is_degraded)

    def test_default_coordinates(self):
        """Test the configured location is used when none is given."""
        app = WeatherApp(config_file=self.config_file)

        with patch("requests.Session.request", autospec=True,
                   side_effect=self.fake_request()) as request:
            app.run(renderer=lambda state: None)

        forecast_call = request.call_args_list[0]
        self.assertEqual(forecast_call.kwargs["params"]["latitude"], -6.2)
        self.assertEqual(forecast_call.kwargs["params"]["longitude"], 106.8)

    def test_main_exit_codes(self):
        """Test the CLI exits 0 on success and 1 on failure."""
        argv = ["weather-ai", "--config", self.config_file, "--lat", "-6.2", "--lon", "106.8"]

        with patch("sys.argv", argv), \
                patch("requests.Session.request", autospec=True, side_effect=self.fake_request()), \
                patch("sys.stdout"):
            with self.assertRaises(SystemExit) as ctx:
                main()
        self.assertEqual(ctx.exception.code, 0)

        with patch("sys.argv", argv), \
                patch("requests.Session.request", autospec=True,
                      side_effect=self.fake_request(forecast_status=500)), \
                patch("sys.stdout"):
            with self.assertRaises(SystemExit) as ctx:
                main()
        self.assertEqual(ctx.exception.code, 1)

    def test_main_requires_both_coordinates(self):
        """Test --lat without --lon is rejected."""
        with patch("sys.argv", ["weather-ai", "--lat", "1.0"]), patch("builtins.print"):
            with self.assertRaises(SystemExit) as ctx:
                main()
        self.assertEqual(ctx.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
