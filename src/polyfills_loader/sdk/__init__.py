"""Programmatic interface for loading configs and building polyfills."""

from polyfills_loader.sdk.builder import (
    ConfigLoader,
    PolyfillsBuilder,
    create_polyfills_data,
    write_polyfill_files,
)
from polyfills_loader.sdk.errors import ConfigLoadError

__all__ = [
    "ConfigLoadError",
    "ConfigLoader",
    "PolyfillsBuilder",
    "create_polyfills_data",
    "write_polyfill_files",
]
