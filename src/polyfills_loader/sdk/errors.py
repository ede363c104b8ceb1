"""SDK error types."""

from __future__ import annotations

from polyfills_loader.core.errors import PolyfillsLoaderError


class ConfigLoadError(PolyfillsLoaderError):
    """Raised when a polyfills config file fails parsing or validation."""
