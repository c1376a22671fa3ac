from __future__ import annotations

import asyncio
import logging
import ssl

import aiohttp
import certifi

from maptiler_cloud.domain.errors import HttpStatusError, TransportError
from maptiler_cloud.shared.constants import (
    HTTP_OK,
    MAPTILER_KEY_PARAM,
    MAPTILER_TILES_BASE,
)
from maptiler_cloud.shared.logging_setup import mask_api_key

logger = logging.getLogger(__name__)


def make_http_session() -> aiohttp.ClientSession:
    """Create a session whose SSL context trusts the certifi CA bundle.

    No timeout is set here; aiohttp's defaults apply.
    """
    ssl_context = ssl.create_default_context(cafile=certifi.where())
    connector = aiohttp.TCPConnector(ssl=ssl_context)
    return aiohttp.ClientSession(connector=connector)


def build_tile_url(
    api_key: str,
    endpoint: str,
    zoom: int,
    x: int,
    y: int,
    extension: str,
) -> str:
    # https://api.maptiler.com/tiles/satellite/{z}/{x}/{y}.jpg?key=AAAAAAAA
    path = f'{MAPTILER_TILES_BASE}/{endpoint}/{zoom}/{x}/{y}.{extension}'
    return f'{path}?{MAPTILER_KEY_PARAM}={api_key}'


async def fetch_bytes(
    client: aiohttp.ClientSession,
    url: str,
    *,
    api_key: str = '',
) -> bytes:
    """GET ``url`` once and return the body if the server answered 200.

    ``api_key`` is only used to mask the key in log output.

    Raises:
        HttpStatusError: any status other than 200; the body is dropped.
        TransportError: connection, TLS, timeout or payload failure.
    """
    safe_url = url
    path, sep, _query = url.partition('?')
    if api_key and sep:
        safe_url = f'{path}?{MAPTILER_KEY_PARAM}={mask_api_key(api_key)}'
    logger.debug('GET %s', safe_url)
    try:
        async with client.get(url) as resp:
            sc = resp.status
            if sc != HTTP_OK:
                logger.debug('HTTP %s for %s', sc, safe_url)
                raise HttpStatusError(sc)
            data = await resp.read()
    except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
        reason = str(exc) or type(exc).__name__
        logger.debug('Transport failure for %s: %s', safe_url, reason)
        raise TransportError(reason) from exc
    logger.debug('Received %d bytes from %s', len(data), safe_url)
    return data
