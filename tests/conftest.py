"""Pytest configuration and fixtures for maptiler_cloud tests."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))


def make_response(status: int = 200, body: bytes = b'') -> MagicMock:
    """Mock of an aiohttp response usable as ``async with client.get(...)``."""
    mock_response = MagicMock()
    mock_response.status = status
    mock_response.read = AsyncMock(return_value=body)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)
    return mock_response


@pytest.fixture
def mock_client():
    """Factory for a mocked ClientSession returning one canned response."""

    def _factory(status: int = 200, body: bytes = b'') -> MagicMock:
        client = MagicMock()
        client.get = MagicMock(return_value=make_response(status, body))
        return client

    return _factory


@pytest.fixture(autouse=True)
def _clear_api_key_env(monkeypatch):
    """Keep tests independent of keys in the developer's environment."""
    monkeypatch.delenv('MAPTILER_KEY', raising=False)
    monkeypatch.delenv('API_KEY', raising=False)
