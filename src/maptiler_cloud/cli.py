"""Command-line entry point: fetch single tiles from MapTiler Cloud."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from maptiler_cloud.domain.errors import (
    ArgumentError,
    ConfigurationError,
    RequestError,
)
from maptiler_cloud.domain.requests import TileRequest
from maptiler_cloud.domain.tilesets import (
    AnyTileSet,
    CustomTileSet,
    TileSet,
    parse_tileset,
)
from maptiler_cloud.session import Maptiler
from maptiler_cloud.settings import ClientSettings, load_settings, require_api_key
from maptiler_cloud.shared.logging_setup import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

CUSTOM_TILESET_NAME = 'custom'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='maptiler-tile',
        description='Fetch map tiles from MapTiler Cloud',
    )
    parser.add_argument('--config', type=Path, default=None, help='TOML config file')
    parser.add_argument('--log-level', default=None, help='Override log level')
    sub = parser.add_subparsers(dest='command', required=True)

    fetch = sub.add_parser('fetch', help='Download one tile')
    fetch.add_argument(
        'tileset',
        help=f"Tileset name or endpoint, or '{CUSTOM_TILESET_NAME}'",
    )
    fetch.add_argument('x', type=int)
    fetch.add_argument('y', type=int)
    fetch.add_argument('zoom', type=int)
    fetch.add_argument('-o', '--output', type=Path, default=None)
    fetch.add_argument('--endpoint', default=None, help='Custom tileset endpoint')
    fetch.add_argument('--extension', default=None, help='Custom tileset extension')

    sub.add_parser('list', help='List built-in tilesets')
    return parser


def resolve_tileset(
    name: str,
    endpoint: str | None = None,
    extension: str | None = None,
) -> AnyTileSet:
    if name.strip().lower() == CUSTOM_TILESET_NAME:
        if not endpoint or not extension:
            msg = 'custom tileset requires --endpoint and --extension'
            raise ValueError(msg)
        return CustomTileSet(endpoint=endpoint, extension=extension)
    return parse_tileset(name)


def default_output_path(request: TileRequest, output_dir: Path) -> Path:
    ts = request.tileset
    name = f'{ts.endpoint}_{request.zoom}_{request.x}_{request.y}.{ts.file_extension}'
    return output_dir / name


def format_catalog() -> str:
    header = f'{"name":<28}{"endpoint":<26}{"ext":<20}zoom'
    lines = [header]
    for ts in TileSet:
        lines.append(
            f'{ts.value.lower():<28}{ts.endpoint:<26}{ts.file_extension:<20}'
            f'{ts.min_zoom}-{ts.max_zoom}'
        )
    return '\n'.join(lines)


async def fetch_tile(
    settings: ClientSettings,
    tileset: AnyTileSet,
    x: int,
    y: int,
    zoom: int,
    output: Path | None,
) -> Path:
    tile_request = TileRequest.new(tileset, x, y, zoom)
    maptiler = Maptiler(require_api_key(settings))
    data = await maptiler.create_request(tile_request).execute()
    out = output or default_output_path(tile_request, settings.output_dir)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(data)
    logger.info('Saved %s (%d bytes) to %s', tileset, len(data), out)
    return out


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigurationError as e:
        setup_logging()
        logger.error('%s', e)
        return EXIT_FAILURE
    setup_logging(args.log_level or settings.log_level)

    if args.command == 'list':
        print(format_catalog())
        return EXIT_OK

    try:
        tileset = resolve_tileset(args.tileset, args.endpoint, args.extension)
        asyncio.run(
            fetch_tile(settings, tileset, args.x, args.y, args.zoom, args.output)
        )
    except (ArgumentError, ValueError) as e:
        logger.error('Invalid request: %s', e)
        return EXIT_USAGE
    except (ConfigurationError, RequestError) as e:
        logger.error('%s', e)
        return EXIT_FAILURE
    except OSError as e:
        logger.error('Cannot write tile: %s', e)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
