from __future__ import annotations

import logging
import sys

from maptiler_cloud.shared.constants import (
    API_KEY_VISIBLE_PREFIX_LEN,
    LOG_FORMAT,
    LOG_LEVEL_DEFAULT,
)


def setup_logging(level: str = LOG_LEVEL_DEFAULT) -> None:
    """Configure root logging for command-line use.

    The library itself never calls this; it only emits through module loggers.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    # aiohttp is chatty at DEBUG
    logging.getLogger('aiohttp').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)


def mask_api_key(api_key: str) -> str:
    if len(api_key) <= API_KEY_VISIBLE_PREFIX_LEN:
        return '*' * len(api_key)
    return api_key[:API_KEY_VISIBLE_PREFIX_LEN] + '*' * (len(api_key) - API_KEY_VISIBLE_PREFIX_LEN)
