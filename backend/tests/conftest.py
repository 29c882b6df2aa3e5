"""Shared test configuration and fixtures."""

from unittest.mock import AsyncMock, patch

import pytest

from api.router import limiter
from config import settings
from services import gemini_client


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the real Gemini or RemoteOK APIs (needs network and keys)"
    )


@pytest.fixture(autouse=True)
def _offline(monkeypatch):
    """Run every test without a Gemini key and without rate limits."""
    monkeypatch.setattr(settings, "gemini_api_key", "")
    monkeypatch.setattr(gemini_client, "_client", None)
    monkeypatch.setattr(limiter, "enabled", False)


@pytest.fixture
def mock_gemini():
    """Replace the Gemini JSON call; set ``return_value`` or ``side_effect`` per test."""
    with patch("services.gemini_client.generate_json", new_callable=AsyncMock) as mock:
        yield mock
