"""Python client for the MapTiler Cloud tiles API.

Build a validated ``TileRequest``, bind it to a ``Maptiler`` session and
await ``execute()`` to get the raw tile bytes.
"""
from maptiler_cloud.domain.errors import (
    ArgumentError,
    ConfigurationError,
    HttpStatusError,
    MaptilerError,
    NegativeValue,
    RequestError,
    TransportError,
    XTooLarge,
    YTooLarge,
    ZoomTooLarge,
    ZoomTooSmall,
)
from maptiler_cloud.domain.requests import RequestType, TileRequest
from maptiler_cloud.domain.tilesets import CustomTileSet, TileSet, parse_tileset
from maptiler_cloud.session import ConstructedRequest, Maptiler

__version__ = '0.2.0'

__all__ = [
    'ArgumentError',
    'ConfigurationError',
    'ConstructedRequest',
    'CustomTileSet',
    'HttpStatusError',
    'Maptiler',
    'MaptilerError',
    'NegativeValue',
    'RequestError',
    'RequestType',
    'TileRequest',
    'TileSet',
    'TransportError',
    'XTooLarge',
    'YTooLarge',
    'ZoomTooLarge',
    'ZoomTooSmall',
    'parse_tileset',
]
