"""Catalog of MapTiler Cloud tilesets.

Built-in tilesets form a closed ``TileSet`` enum whose metadata lives in a
static lookup table. ``CustomTileSet`` is the open escape hatch for endpoints
the catalog does not know about; it exposes the same properties.

See https://cloud.maptiler.com/tiles/ for the service-side list.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict

from maptiler_cloud.shared.constants import CUSTOM_MAX_ZOOM, CUSTOM_MIN_ZOOM


@dataclass(frozen=True)
class TileSetInfo:
    """Static metadata of one built-in tileset."""

    endpoint: str
    extension: str
    min_zoom: int
    max_zoom: int
    display_name: str


class TileSet(str, Enum):
    CONTOURS = 'CONTOURS'  # contour lines, .pbf
    COUNTRIES = 'COUNTRIES'  # country borders (beta), .pbf
    HILLSHADING = 'HILLSHADING'  # transparent shaded relief, .png
    LAND = 'LAND'  # land vs. water, .pbf
    LANDCOVER = 'LANDCOVER'  # vegetation classes, .pbf
    MAPTILER_PLANET = 'MAPTILER_PLANET'  # general purpose, .pbf
    MAPTILER_PLANET_LITE = 'MAPTILER_PLANET_LITE'  # upper zooms only, .pbf
    OPENMAPTILES = 'OPENMAPTILES'  # OpenMapTiles schema, .pbf
    OPENMAPTILES_WGS84 = 'OPENMAPTILES_WGS84'  # same, EPSG:4326 grid, .pbf
    OUTDOOR = 'OUTDOOR'  # hiking/cycling, .pbf
    SATELLITE = 'SATELLITE'  # imagery, .jpg
    SATELLITE_MEDIUM_RES_2016 = 'SATELLITE_MEDIUM_RES_2016'  # .jpg
    SATELLITE_MEDIUM_RES_2018 = 'SATELLITE_MEDIUM_RES_2018'  # .jpg
    TERRAIN_3D = 'TERRAIN_3D'  # elevation as TIN, quantized mesh
    # height = -10000 + ((R * 256 * 256 + G * 256 + B) * 0.1)
    TERRAIN_RGB = 'TERRAIN_RGB'  # elevation encoded in RGB, .png

    @property
    def info(self) -> TileSetInfo:
        return TILESET_INFO[self]

    @property
    def endpoint(self) -> str:
        """Path segment of the tile URL, e.g. ``satellite``."""
        return self.info.endpoint

    @property
    def file_extension(self) -> str:
        """Suffix of the returned file, e.g. ``png``, ``jpg``, ``pbf``."""
        return self.info.extension

    @property
    def min_zoom(self) -> int:
        return self.info.min_zoom

    @property
    def max_zoom(self) -> int:
        return self.info.max_zoom

    @property
    def display_name(self) -> str:
        return self.info.display_name

    def __str__(self) -> str:
        return self.display_name

    def __format__(self, format_spec: str) -> str:
        return format(self.display_name, format_spec)


TILESET_INFO: dict[TileSet, TileSetInfo] = {
    TileSet.CONTOURS: TileSetInfo('contours', 'pbf', 9, 14, 'Contours'),
    TileSet.COUNTRIES: TileSetInfo('countries', 'pbf', 0, 11, 'Countries'),
    TileSet.HILLSHADING: TileSetInfo('hillshades', 'png', 0, 12, 'Hillshades'),
    TileSet.LAND: TileSetInfo('land', 'pbf', 0, 14, 'Land'),
    TileSet.LANDCOVER: TileSetInfo('landcover', 'pbf', 0, 9, 'Landcover'),
    TileSet.MAPTILER_PLANET: TileSetInfo('v3', 'pbf', 0, 14, 'MaptilerPlanet'),
    TileSet.MAPTILER_PLANET_LITE: TileSetInfo(
        'v3-lite', 'pbf', 0, 10, 'MaptilerPlanetLite'
    ),
    TileSet.OPENMAPTILES: TileSetInfo(
        'v3-openmaptiles', 'pbf', 0, 14, 'OpenMapTiles'
    ),
    TileSet.OPENMAPTILES_WGS84: TileSetInfo(
        'v3-4326', 'pbf', 0, 13, 'OpenMapTilesWGS84'
    ),
    TileSet.OUTDOOR: TileSetInfo('outdoor', 'pbf', 5, 14, 'Outdoor'),
    TileSet.SATELLITE: TileSetInfo('satellite', 'jpg', 0, 20, 'Satellite'),
    TileSet.SATELLITE_MEDIUM_RES_2016: TileSetInfo(
        'satellite-mediumres', 'jpg', 0, 13, 'SatelliteMediumRes2016'
    ),
    TileSet.SATELLITE_MEDIUM_RES_2018: TileSetInfo(
        'satellite-mediumres-2018', 'jpg', 0, 13, 'SatelliteMediumRes2018'
    ),
    TileSet.TERRAIN_3D: TileSetInfo(
        'terrain-quantized-mesh', 'quantized-mesh-1.0', 0, 13, 'Terrain3D'
    ),
    TileSet.TERRAIN_RGB: TileSetInfo('terrain-rgb', 'png', 0, 12, 'TerrainRGB'),
}


class CustomTileSet(BaseModel):
    """A tileset the catalog does not list.

    Endpoint and extension are taken as given. The zoom range is the widest
    the service supports (0-20); the real tileset may be narrower, in which
    case the server answers with an HTTP error instead of a local one.
    """

    model_config = ConfigDict(frozen=True)

    # Tile endpoint, e.g. 'satellite'
    endpoint: str
    # File extension returned by the endpoint, e.g. 'png'
    extension: str

    @property
    def file_extension(self) -> str:
        return self.extension

    @property
    def min_zoom(self) -> int:
        return CUSTOM_MIN_ZOOM

    @property
    def max_zoom(self) -> int:
        return CUSTOM_MAX_ZOOM

    @property
    def display_name(self) -> str:
        return self.endpoint

    def __str__(self) -> str:
        return self.display_name


AnyTileSet = TileSet | CustomTileSet


def parse_tileset(name: str) -> TileSet:
    """Resolve a member name, display name or endpoint to a built-in tileset.

    Matching is case-insensitive and treats '-' and '_' alike, so
    ``satellite``, ``Satellite``, ``SATELLITE`` and ``terrain-rgb`` all work.
    """
    key = name.strip().lower().replace('-', '_')
    for ts in TileSet:
        candidates = (
            ts.value.lower(),
            ts.display_name.lower(),
            ts.endpoint.replace('-', '_'),
        )
        if key in candidates:
            return ts
    msg = f'Unknown tileset: {name!r}'
    raise ValueError(msg)
