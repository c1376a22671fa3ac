"""Domain layer - tileset catalog, validated requests, errors."""
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
from maptiler_cloud.domain.requests import (
    RequestType,
    TileRequest,
    max_coordinate_with_zoom,
)
from maptiler_cloud.domain.tilesets import (
    TILESET_INFO,
    AnyTileSet,
    CustomTileSet,
    TileSet,
    TileSetInfo,
    parse_tileset,
)

__all__ = [
    'TILESET_INFO',
    'AnyTileSet',
    'ArgumentError',
    'ConfigurationError',
    'CustomTileSet',
    'HttpStatusError',
    'MaptilerError',
    'NegativeValue',
    'RequestError',
    'RequestType',
    'TileRequest',
    'TileSet',
    'TileSetInfo',
    'TransportError',
    'XTooLarge',
    'YTooLarge',
    'ZoomTooLarge',
    'ZoomTooSmall',
    'max_coordinate_with_zoom',
    'parse_tileset',
]
