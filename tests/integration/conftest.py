"""Integration test fixtures.

Integration tests use httpx's real transport and may touch the network
(DNS resolution). Run with: pytest -m integration
"""

import pytest

from http_retry.logging_config import configure_logging


@pytest.fixture(autouse=True, scope="session")
def integration_logging():
    """Console logging so retry warnings show up in -s runs."""
    configure_logging(log_level="DEBUG", environment="development")
