"""HTTP client infrastructure."""
from maptiler_cloud.infrastructure.http.client import (
    build_tile_url,
    fetch_bytes,
    make_http_session,
)

__all__ = [
    'build_tile_url',
    'fetch_bytes',
    'make_http_session',
]
