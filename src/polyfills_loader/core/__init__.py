"""Polyfill resolution and bundling engine."""

from polyfills_loader.core.errors import (
    MinificationError,
    PolyfillConfigurationError,
    PolyfillReadError,
    PolyfillResolutionError,
    PolyfillsLoaderError,
    PolyfillValidationError,
    SourceNotFoundError,
)
from polyfills_loader.core.interpreter import resolve_polyfill_configs, validate_flags
from polyfills_loader.core.locator import NodeModulesLocator, SourceLocator
from polyfills_loader.core.materializer import ContentMaterializer
from polyfills_loader.core.models import (
    EntrypointFile,
    FileType,
    LegacyEntrypoint,
    ModernEntrypoint,
    PolyfillConfig,
    PolyfillFile,
    PolyfillsLoaderConfig,
    PolyfillsSettings,
)
from polyfills_loader.core.rules import POLYFILL_RULES, PolyfillRule

__all__ = [
    "POLYFILL_RULES",
    "ContentMaterializer",
    "EntrypointFile",
    "FileType",
    "LegacyEntrypoint",
    "MinificationError",
    "ModernEntrypoint",
    "NodeModulesLocator",
    "PolyfillConfig",
    "PolyfillConfigurationError",
    "PolyfillFile",
    "PolyfillReadError",
    "PolyfillResolutionError",
    "PolyfillRule",
    "PolyfillValidationError",
    "PolyfillsLoaderConfig",
    "PolyfillsLoaderError",
    "PolyfillsSettings",
    "SourceLocator",
    "SourceNotFoundError",
    "resolve_polyfill_configs",
    "validate_flags",
]
