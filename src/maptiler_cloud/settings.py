"""Client settings for the command-line tool.

The library core reads no configuration; ``Maptiler`` only needs a key. This
module collects that key (and a couple of CLI options) from, in increasing
priority:

1. an optional TOML file::

       [maptiler]
       api_key = "..."

       [logging]
       level = "DEBUG"

       [output]
       dir = "tiles"

2. ``.env`` / ``.secrets.env`` in the working directory (never overriding
   variables that are already set);
3. ``MAPTILER_KEY`` or ``API_KEY`` in the environment.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import tomlkit
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator
from tomlkit.exceptions import TOMLKitError

from maptiler_cloud.domain.errors import ConfigurationError
from maptiler_cloud.shared.constants import (
    API_KEY_ENV_VARS,
    LOG_LEVEL_DEFAULT,
    SECRETS_ENV_FILES,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


class ClientSettings(BaseModel):
    model_config = {
        'extra': 'ignore',
    }

    api_key: str | None = None
    log_level: str = LOG_LEVEL_DEFAULT
    output_dir: Path = Path()

    @field_validator('api_key')
    @classmethod
    def validate_api_key(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            msg = f'Unknown log level {v!r}; expected one of {", ".join(_LOG_LEVELS)}'
            raise ValueError(msg)
        return level


# {section_name: {toml_key: flat_field_name}}
SECTION_MAP: dict[str, dict[str, str]] = {
    'maptiler': {'api_key': 'api_key'},
    'logging': {'level': 'log_level'},
    'output': {'dir': 'output_dir'},
}


def _sectioned_to_flat(doc: dict[str, Any], source: Path) -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for name, fields in SECTION_MAP.items():
        section = doc.get(name, {})
        if not isinstance(section, dict):
            msg = f'Section [{name}] in {source} must be a table'
            raise ConfigurationError(msg)
        for key, flat_name in fields.items():
            if key in section:
                flat[flat_name] = str(section[key])
    return flat


def read_settings_file(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    try:
        text = p.read_text(encoding='utf-8')
    except OSError as e:
        msg = f'Cannot read config file {p}: {e}'
        raise ConfigurationError(msg) from e
    try:
        doc = tomlkit.parse(text).unwrap()
    except TOMLKitError as e:
        msg = f'Malformed config file {p}: {e}'
        raise ConfigurationError(msg) from e
    return _sectioned_to_flat(doc, p)


def load_secrets_env(base_dir: str | Path | None = None) -> None:
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    for name in SECRETS_ENV_FILES:
        p = base / name
        if p.exists():
            logger.debug('Loading environment from %s', p)
            load_dotenv(p, override=False)


def api_key_from_env() -> str | None:
    for var in API_KEY_ENV_VARS:
        value = os.environ.get(var)
        if value and value.strip():
            return value.strip()
    return None


def load_settings(
    path: str | Path | None = None,
    *,
    env_dir: str | Path | None = None,
) -> ClientSettings:
    """Merge config file, secrets files and environment into settings."""
    data: dict[str, Any] = read_settings_file(path) if path is not None else {}
    load_secrets_env(env_dir)
    env_key = api_key_from_env()
    if env_key:
        data['api_key'] = env_key
    try:
        return ClientSettings.model_validate(data)
    except ValidationError as e:
        msg = f'Invalid settings: {e}'
        raise ConfigurationError(msg) from e


def require_api_key(settings: ClientSettings) -> str:
    if not settings.api_key:
        msg = (
            'API key not found. Set MAPTILER_KEY, add it to .env/.secrets.env '
            'or to [maptiler] api_key in the config file.'
        )
        raise ConfigurationError(msg)
    return settings.api_key
