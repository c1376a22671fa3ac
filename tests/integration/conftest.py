"""Fixtures for live MapTiler Cloud tests.

These tests send real requests; they are skipped unless a key is provided via
MAPTILER_KEY (or API_KEY) or a .secrets.env in the project root.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from dotenv import dotenv_values

# Captured at import time, before the autouse fixture clears the env
_ENV_KEY = os.environ.get('MAPTILER_KEY') or os.environ.get('API_KEY')


def _load_api_key() -> str | None:
    """Try to load the MapTiler key from the environment or .secrets.env."""
    key = _ENV_KEY
    if key:
        return key

    secrets_path = Path(__file__).resolve().parents[2] / '.secrets.env'
    if secrets_path.exists():
        values = dotenv_values(secrets_path)
        for name in ('MAPTILER_KEY', 'API_KEY'):
            if values.get(name):
                return values[name]
    return None


@pytest.fixture(scope='session')
def api_key() -> str:
    """Load MapTiler API key; skip if unavailable."""
    key = _load_api_key()
    if not key:
        pytest.skip('MapTiler API key not found (set MAPTILER_KEY or .secrets.env)')
    return key
