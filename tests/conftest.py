"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import pytest

from http_retry.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.
    
    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.RETRY_LIMIT = 3
    """
    return Settings(
        # === Logging ===
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        
        # === Retry ===
        RETRY_LIMIT=1,
        RETRY_DELAY=0,
        RETRY_METHODS=["DELETE", "GET", "HEAD", "PATCH", "PUT"],
        DEFAULT_TIMEOUT=None,
        
        # === Monitoring ===
        PROMETHEUS_ENABLED=False,  # Disable metrics in tests unless explicitly needed
    )


@pytest.fixture
def base_url() -> str:
    """Base URL served by the mock transport."""
    return "http://testserver"
