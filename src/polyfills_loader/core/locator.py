"""Source locators — map package-style specifiers to files on disk.

A specifier is ``<package>[/<subpath>]`` where ``<package>`` may be scoped
(``@webcomponents/webcomponentsjs``). ``NodeModulesLocator`` follows the
usual ``node_modules`` lookup: the root directory and each of its ancestors
are searched in turn.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from polyfills_loader.core.errors import SourceNotFoundError

logger = logging.getLogger(__name__)


class SourceLocator(Protocol):
    """Resolve a package-style specifier to an absolute file path."""

    def resolve(self, specifier: str) -> Path:
        """Return the file for *specifier* or raise :class:`SourceNotFoundError`."""
        ...


def split_specifier(specifier: str) -> tuple[str, str]:
    """Split *specifier* into ``(package, subpath)``.

    >>> split_specifier("@scope/pkg/dist/a.js")
    ('@scope/pkg', 'dist/a.js')
    """
    parts = specifier.split("/")
    count = 2 if specifier.startswith("@") else 1
    if len(parts) < count or not all(parts[:count]):
        raise SourceNotFoundError(specifier)
    return "/".join(parts[:count]), "/".join(parts[count:])


class NodeModulesLocator:
    """Resolve specifiers against ``node_modules`` directories."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or Path.cwd()).resolve()

    def resolve(self, specifier: str) -> Path:
        package, subpath = split_specifier(specifier)

        for base in (self.root, *self.root.parents):
            package_dir = base / "node_modules" / package
            if not package_dir.is_dir():
                continue
            found = self._resolve_in_package(package_dir, subpath)
            if found is not None:
                logger.debug("Resolved %s to %s", specifier, found)
                return found

        raise SourceNotFoundError(specifier)

    def _resolve_in_package(self, package_dir: Path, subpath: str) -> Path | None:
        if subpath:
            return _first_file(package_dir / subpath)
        return _first_file(package_dir / _package_main(package_dir))


def _package_main(package_dir: Path) -> str:
    manifest = package_dir / "package.json"
    if not manifest.is_file():
        return "index.js"
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning("Ignoring unreadable package manifest %s", manifest)
        return "index.js"
    main = data.get("main") if isinstance(data, dict) else None
    return main if isinstance(main, str) and main else "index.js"


def _first_file(candidate: Path) -> Path | None:
    for path in (candidate, candidate.with_name(candidate.name + ".js"), candidate / "index.js"):
        if path.is_file():
            return path
    return None
