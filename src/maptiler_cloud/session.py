"""MapTiler Cloud session and ready-to-run requests.

Usage:
    maptiler = Maptiler('your api key')
    tile_request = TileRequest.new(TileSet.SATELLITE, x=2, y=1, zoom=2)
    constructed = maptiler.create_request(tile_request)
    satellite_jpg = await constructed.execute()

Most callers then write the bytes to a file or hand them to an image decoder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from maptiler_cloud.domain.requests import RequestType, TileRequest
from maptiler_cloud.infrastructure.http.client import (
    build_tile_url,
    fetch_bytes,
    make_http_session,
)
from maptiler_cloud.shared.logging_setup import mask_api_key

if TYPE_CHECKING:
    import aiohttp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConstructedRequest:
    """A request bound to the API key of the session that created it.

    Every ``execute()`` issues a new HTTP call; nothing is cached.
    """

    api_key: str
    inner: RequestType

    def __repr__(self) -> str:
        return (
            f'ConstructedRequest(api_key={mask_api_key(self.api_key)!r}, '
            f'inner={self.inner!r})'
        )

    @property
    def url(self) -> str:
        if isinstance(self.inner, TileRequest):
            return self._tile_url(self.inner)
        msg = f'Unsupported request type: {type(self.inner).__name__}'
        raise TypeError(msg)

    def _tile_url(self, tile_request: TileRequest) -> str:
        tileset = tile_request.tileset
        return build_tile_url(
            self.api_key,
            tileset.endpoint,
            tile_request.zoom,
            tile_request.x,
            tile_request.y,
            tileset.file_extension,
        )

    async def execute(self, client: aiohttp.ClientSession | None = None) -> bytes:
        """Perform the API call and return the response body.

        Args:
            client: Session to send the request through. When omitted a
                session is opened for this call only and closed afterwards.

        Raises:
            HttpStatusError: the server answered with a non-200 status.
            TransportError: the request did not complete.
        """
        url = self.url
        if client is not None:
            return await fetch_bytes(client, url, api_key=self.api_key)
        async with make_http_session() as own_client:
            return await fetch_bytes(own_client, url, api_key=self.api_key)


class Maptiler:
    """A MapTiler Cloud "session": stores the API key and creates requests."""

    def __init__(self, api_key: str) -> None:
        self._api_key = str(api_key)
        logger.debug('Maptiler session created (key=%s)', mask_api_key(self._api_key))

    @property
    def api_key(self) -> str:
        return self._api_key

    def __repr__(self) -> str:
        return f'Maptiler(api_key={mask_api_key(self._api_key)!r})'

    def create_request(self, request: RequestType) -> ConstructedRequest:
        """Bind any supported request kind to this session's key."""
        if not isinstance(request, TileRequest):
            msg = f'Unsupported request type: {type(request).__name__}'
            raise TypeError(msg)
        return ConstructedRequest(api_key=self._api_key, inner=request)

    def create_tile_request(self, tile_request: TileRequest) -> ConstructedRequest:
        return ConstructedRequest(api_key=self._api_key, inner=tile_request)
