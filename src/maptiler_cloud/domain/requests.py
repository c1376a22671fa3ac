"""Validated request values.

A ``TileRequest`` can only exist with a zoom inside its tileset's range and
coordinates inside the grid of that zoom level; every construction path runs
the same checks.
"""

from __future__ import annotations

from dataclasses import dataclass

from maptiler_cloud.domain.errors import (
    NegativeValue,
    XTooLarge,
    YTooLarge,
    ZoomTooLarge,
    ZoomTooSmall,
)
from maptiler_cloud.domain.tilesets import AnyTileSet


def max_coordinate_with_zoom(zoom: int) -> int:
    """Largest accepted x or y at ``zoom``.

    Zoom 0 is a single tile, so the answer is 0. Above that the bound is
    ``2**zoom`` and is inclusive. A 2^z grid only has indices up to
    ``2**zoom - 1``, so this lets one extra row/column through; kept as is
    for compatibility with existing callers.
    """
    if zoom == 0:
        return 0
    return 1 << zoom


def _check_non_negative_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f'{name} must be an int, got {type(value).__name__}'
        raise TypeError(msg)
    if value < 0:
        raise NegativeValue(name, value)


@dataclass(frozen=True)
class TileRequest:
    """Arguments of one tile fetch in the Tiled Web Map scheme.

    See https://en.wikipedia.org/wiki/Tiled_web_map for the x/y/zoom
    convention. Use ``TileRequest.new(tileset, x, y, zoom)``; calling the
    constructor directly performs the same validation.
    """

    tileset: AnyTileSet
    zoom: int
    tile_x: int
    tile_y: int

    def __post_init__(self) -> None:
        _check_non_negative_int('zoom', self.zoom)
        _check_non_negative_int('x', self.tile_x)
        _check_non_negative_int('y', self.tile_y)

        max_zoom = self.tileset.max_zoom
        min_zoom = self.tileset.min_zoom
        if self.zoom > max_zoom:
            raise ZoomTooLarge(self.zoom, self.tileset, max_zoom)
        if self.zoom < min_zoom:
            raise ZoomTooSmall(self.zoom, self.tileset, min_zoom)

        max_coordinate = max_coordinate_with_zoom(self.zoom)
        if self.tile_x > max_coordinate:
            raise XTooLarge(self.tile_x, self.zoom, max_coordinate)
        if self.tile_y > max_coordinate:
            raise YTooLarge(self.tile_y, self.zoom, max_coordinate)

    @classmethod
    def new(cls, tileset: AnyTileSet, x: int, y: int, zoom: int) -> TileRequest:
        """Validate and build a request.

        Raises:
            ZoomTooLarge, ZoomTooSmall: zoom outside the tileset's range.
            XTooLarge, YTooLarge: coordinate outside the grid at ``zoom``.
            NegativeValue: a negative x, y or zoom.
        """
        return cls(tileset=tileset, zoom=zoom, tile_x=x, tile_y=y)

    @property
    def x(self) -> int:
        return self.tile_x

    @property
    def y(self) -> int:
        return self.tile_y


# Every request kind the executor knows how to run. Only tiles for now.
RequestType = TileRequest
