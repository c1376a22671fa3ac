"""Exception hierarchy.

Argument errors are raised locally while a request is being built, before any
network I/O. Request errors come out of the HTTP call. The two families never
overlap; both derive from ``MaptilerError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from maptiler_cloud.domain.tilesets import AnyTileSet


class MaptilerError(Exception):
    """Base exception for the MapTiler Cloud client."""


class ConfigurationError(MaptilerError):
    """Missing API key or unreadable configuration."""


class ArgumentError(MaptilerError, ValueError):
    """A request argument is out of bounds for its tileset or zoom level.

    Instances compare equal when they have the same type and arguments, so
    tests and callers can match on the exact failure.
    """

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args  # type: ignore[union-attr]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class ZoomTooLarge(ArgumentError):
    def __init__(self, zoom: int, tileset: AnyTileSet, max_zoom: int) -> None:
        super().__init__(zoom, tileset, max_zoom)
        self.zoom = zoom
        self.tileset = tileset
        self.max_zoom = max_zoom

    def __str__(self) -> str:
        return (
            f'Zoom level {self.zoom} is too large for the tileset '
            f'{self.tileset} (max: {self.max_zoom})'
        )


class ZoomTooSmall(ArgumentError):
    def __init__(self, zoom: int, tileset: AnyTileSet, min_zoom: int) -> None:
        super().__init__(zoom, tileset, min_zoom)
        self.zoom = zoom
        self.tileset = tileset
        self.min_zoom = min_zoom

    def __str__(self) -> str:
        return (
            f'Zoom level {self.zoom} is too small for the tileset '
            f'{self.tileset} (min: {self.min_zoom})'
        )


class XTooLarge(ArgumentError):
    def __init__(self, x: int, zoom: int, max_x: int) -> None:
        super().__init__(x, zoom, max_x)
        self.x = x
        self.zoom = zoom
        self.max_x = max_x

    def __str__(self) -> str:
        return (
            f'X coordinate {self.x} is too large for the zoom level '
            f'{self.zoom} (max X: {self.max_x})'
        )


class YTooLarge(ArgumentError):
    def __init__(self, y: int, zoom: int, max_y: int) -> None:
        super().__init__(y, zoom, max_y)
        self.y = y
        self.zoom = zoom
        self.max_y = max_y

    def __str__(self) -> str:
        return (
            f'Y coordinate {self.y} is too large for the zoom level '
            f'{self.zoom} (max Y: {self.max_y})'
        )


class NegativeValue(ArgumentError):
    def __init__(self, name: str, value: int) -> None:
        super().__init__(name, value)
        self.name = name
        self.value = value

    def __str__(self) -> str:
        return f'{self.name} must be non-negative, got {self.value}'


class RequestError(MaptilerError):
    """The HTTP call to MapTiler Cloud failed."""


class TransportError(RequestError):
    """Connection, TLS, timeout or payload failure reported by aiohttp.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f'Server request failed: {self.reason}'


class HttpStatusError(RequestError):
    """The server answered with anything other than 200."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status

    def __str__(self) -> str:
        return f'Server returned HTTP error code: {self.status}'
