"""Resolve, bundle and hash browser polyfills."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from polyfills_loader.sdk.builder import PolyfillsBuilder as PolyfillsBuilder
    from polyfills_loader.sdk.builder import create_polyfills_data as create_polyfills_data

_SDK_EXPORTS = {
    "PolyfillsBuilder": "polyfills_loader.sdk.builder",
    "create_polyfills_data": "polyfills_loader.sdk.builder",
}


def __getattr__(name: str) -> object:
    module_path = _SDK_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'polyfills_loader' has no attribute {name!r}")
