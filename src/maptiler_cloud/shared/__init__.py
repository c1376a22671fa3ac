"""Shared constants and helpers."""
from maptiler_cloud.shared.logging_setup import mask_api_key, setup_logging

__all__ = [
    'mask_api_key',
    'setup_logging',
]
