"""
Logging configuration for the weather AI summary application.

Log records go to stderr so they never interleave with the rendered
forecast on stdout. A file handler is added only when a log file is
configured.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

from ..errors import WeatherAIError

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "weather_ai",
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Set up the application logger.

    Args:
        name: Logger name
        log_file: Path to a log file; no file handler when None
        log_level: Logging level for the console (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured logger instance
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if log_file else level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    # The file keeps every stage's debug detail regardless of console level
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


class LoggerContext:
    """
    Logs one pipeline stage (forecast or summary) with its duration.

    Expected failures (WeatherAIError and subclasses) are logged as a one-line
    message at ``failure_level``; anything else is logged at ERROR with a
    traceback. Exceptions always propagate.
    """

    def __init__(
        self,
        logger: logging.Logger,
        stage: str,
        detail: Optional[str] = None,
        failure_level: int = logging.ERROR
    ):
        """
        Initialize stage context.

        Args:
            logger: Logger instance
            stage: Pipeline stage name, used as the log prefix
            detail: Extra context shown when the stage starts
            failure_level: Level for expected failures
        """
        self.logger = logger
        self.stage = stage
        self.detail = detail
        self.failure_level = failure_level
        self.duration: Optional[float] = None
        self._started: Optional[float] = None

    def __enter__(self):
        self._started = time.monotonic()
        suffix = f": {self.detail}" if self.detail else ""
        self.logger.info(f"[{self.stage}] started{suffix}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.monotonic() - self._started

        if exc_type is None:
            self.logger.info(f"[{self.stage}] completed in {self.duration:.2f}s")
        elif issubclass(exc_type, WeatherAIError):
            self.logger.log(
                self.failure_level,
                f"[{self.stage}] failed after {self.duration:.2f}s: {exc_val}"
            )
        else:
            self.logger.error(
                f"[{self.stage}] unexpected failure after {self.duration:.2f}s: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb)
            )
        return False
