"""Root pytest configuration.

Pins the environment before any application module reads it.
"""

import os

os.environ["STORE_BACKEND"] = "memory"
os.environ["APP_ENV"] = "test"
os.environ["LOG_FORMAT"] = "text"


def pytest_configure(config):
    """Register custom markers used across test directories."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end flow through the HTTP API"
    )
