"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def forecast_payload(fixtures_dir):
    """Load a recorded forecast API response."""
    with open(fixtures_dir / "forecast_response.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture(scope="session")
def gemini_payload(fixtures_dir):
    """Load a recorded generateContent response."""
    with open(fixtures_dir / "gemini_response.json", encoding="utf-8") as f:
        return json.load(f)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
