"""
Configuration module for the weather AI summary application.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            try:
                self.config = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid configuration file {self.config_file}: {e}") from e

        if not isinstance(self.config, dict):
            raise ValueError(f"Configuration file {self.config_file} must contain a JSON object")

    def _set(self, section: str, key: str, value: Any) -> None:
        """Set a value in a configuration section, creating the section if needed."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        # Forecast API
        if os.getenv("FORECAST_BASE_URL"):
            self._set("forecast", "base_url", os.getenv("FORECAST_BASE_URL"))

        # Generative-text API
        if os.getenv("GEMINI_BASE_URL"):
            self._set("summary", "base_url", os.getenv("GEMINI_BASE_URL"))

        if os.getenv("GEMINI_API_KEY"):
            self._set("summary", "api_key", os.getenv("GEMINI_API_KEY"))

        if os.getenv("GEMINI_MODEL"):
            self._set("summary", "model", os.getenv("GEMINI_MODEL"))

        if os.getenv("SUMMARY_LANGUAGE"):
            self._set("summary", "language", os.getenv("SUMMARY_LANGUAGE"))

        # Logging
        if os.getenv("LOG_LEVEL"):
            self._set("logging", "level", os.getenv("LOG_LEVEL"))

        if os.getenv("LOG_FILE"):
            self._set("logging", "file", os.getenv("LOG_FILE"))

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present."""
        required_config = {
            "forecast": ["base_url"],
            "summary": ["model"],
        }

        # Validate required sections
        missing_sections = []
        for section in required_config.keys():
            if section not in self.config:
                missing_sections.append(section)

        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        # Validate required keys within sections
        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if key not in self.config[section]:
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        if not self.config["summary"].get("api_key"):
            raise ValueError(
                "Summary configuration must include 'api_key' (or set GEMINI_API_KEY)"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'forecast.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def forecast_base_url(self) -> str:
        """Get forecast API base URL."""
        return self.get("forecast.base_url", constants.DEFAULT_FORECAST_BASE_URL)

    @property
    def forecast_timeout(self) -> int:
        """Get forecast request timeout in seconds."""
        return self.get("forecast.timeout", constants.DEFAULT_FORECAST_TIMEOUT)

    @property
    def forecast_timezone(self) -> str:
        """Get forecast timezone resolution."""
        return self.get("forecast.timezone", constants.DEFAULT_TIMEZONE)

    @property
    def forecast_days(self) -> int:
        """Get forecast horizon in days."""
        return self.get("forecast.forecast_days", constants.DEFAULT_FORECAST_DAYS)

    @property
    def forecast_fields(self) -> Dict[str, str]:
        """Get requested field lists for the current, hourly and daily blocks."""
        return {
            "current": self.get("forecast.current", constants.DEFAULT_CURRENT_FIELDS),
            "hourly": self.get("forecast.hourly", constants.DEFAULT_HOURLY_FIELDS),
            "daily": self.get("forecast.daily", constants.DEFAULT_DAILY_FIELDS),
        }

    @property
    def summary_base_url(self) -> str:
        """Get generative-text API base URL."""
        return self.get("summary.base_url", constants.DEFAULT_GEMINI_BASE_URL)

    @property
    def summary_api_key(self) -> Optional[str]:
        """Get generative-text API key."""
        return self.get("summary.api_key")

    @property
    def summary_model(self) -> str:
        """Get generative-text model identifier."""
        return self.get("summary.model", constants.DEFAULT_GEMINI_MODEL)

    @property
    def summary_language(self) -> str:
        """Get target language for generated summaries."""
        return self.get("summary.language", constants.DEFAULT_SUMMARY_LANGUAGE)

    @property
    def summary_timeout(self) -> int:
        """Get summary request timeout in seconds."""
        return self.get("summary.timeout", constants.DEFAULT_SUMMARY_TIMEOUT)

    @property
    def default_latitude(self) -> float:
        """Get default latitude."""
        return self.get("location.latitude", constants.DEFAULT_LATITUDE)

    @property
    def default_longitude(self) -> float:
        """Get default longitude."""
        return self.get("location.longitude", constants.DEFAULT_LONGITUDE)

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path."""
        return self.get("logging.file")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, model={self.summary_model})"
