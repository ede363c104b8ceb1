"""Turn polyfill configs into finished files.

Each config is read, concatenated, optionally minified and hashed
independently. Entries are processed concurrently with file reads and
minification in worker threads; the result keeps the input order.
"""

from __future__ import annotations

import asyncio
import logging
import posixpath
from pathlib import Path
from typing import TYPE_CHECKING

from polyfills_loader.core.errors import (
    MinificationError,
    PolyfillReadError,
    PolyfillValidationError,
)
from polyfills_loader.core.hashing import md5_content_hash
from polyfills_loader.core.minifier import RJSMinifier
from polyfills_loader.core.models import PolyfillFile
from polyfills_loader.utils.telemetry import (
    ATTR_POLYFILL_COUNT,
    ATTR_POLYFILL_MINIFY,
    ATTR_POLYFILL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from polyfills_loader.core.hashing import ContentHasher
    from polyfills_loader.core.minifier import Minifier
    from polyfills_loader.core.models import PolyfillConfig

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

SOURCE_MAP_DIRECTIVE = "//# sourceMappingURL"


def strip_source_map(content: str) -> str:
    """Blank out source map directive lines, keeping the line structure."""
    lines = content.split("\n")
    return "\n".join("" if line.startswith(SOURCE_MAP_DIRECTIVE) else line for line in lines)


def read_source(path: Path) -> str:
    """Read a polyfill source file without its source map directive.

    Raises:
        PolyfillReadError: If *path* is not a readable file.
    """
    if not path.is_file():
        raise PolyfillReadError(str(path))
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PolyfillReadError(str(path), str(exc)) from exc
    return strip_source_map(content)


class ContentMaterializer:
    """Build :class:`PolyfillFile` artifacts from :class:`PolyfillConfig` entries."""

    def __init__(
        self,
        *,
        polyfills_dir: str = "polyfills",
        hash_enabled: bool = True,
        minifier: Minifier | None = None,
        hasher: ContentHasher | None = None,
        base_dir: Path | None = None,
    ) -> None:
        self.polyfills_dir = polyfills_dir
        self.hash_enabled = hash_enabled
        self._minifier = minifier or RJSMinifier()
        self._hasher = hasher or md5_content_hash
        self.base_dir = base_dir or Path.cwd()

    async def materialize(self, configs: Sequence[PolyfillConfig]) -> list[PolyfillFile]:
        """Materialize every config.

        The first failure cancels the remaining entries and is re-raised.
        """
        with _tracer.start_as_current_span("polyfills.materialize") as span:
            span.set_attribute(ATTR_POLYFILL_COUNT, len(configs))
            tasks = [asyncio.ensure_future(self.materialize_one(c)) for c in configs]
            try:
                files = await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                # collect the outcome of every task so none is left unretrieved
                await asyncio.gather(*tasks, return_exceptions=True)
                raise
        return list(files)

    async def materialize_one(self, config: PolyfillConfig) -> PolyfillFile:
        """Read, concatenate, minify and name a single polyfill."""
        if not config.name or not config.sources or not all(s.strip() for s in config.sources):
            raise PolyfillValidationError(f"name={config.name!r}, sources={config.sources!r}")
        name = config.name

        with _tracer.start_as_current_span("polyfills.materialize.file") as span:
            span.set_attribute(ATTR_POLYFILL_NAME, name)
            span.set_attribute(ATTR_POLYFILL_MINIFY, config.minify)

            contents = [await asyncio.to_thread(read_source, self._source_path(s)) for s in config.sources]
            content = "".join(contents)

            if config.minify:
                content = await asyncio.to_thread(self._minify, name, content)

        path = self.output_path(name, content)
        logger.debug("Materialized polyfill %s -> %s (%d bytes)", name, path, len(content))
        return PolyfillFile(
            name=name,
            type=config.file_type,
            path=path,
            content=content,
            test=config.test,
            initializer=config.initializer,
        )

    def output_path(self, name: str, content: str) -> str:
        """Return ``<polyfills_dir>/<name>[.<hash>].js`` for *content*."""
        stem = f"{name}.{self._hasher(content)}" if self.hash_enabled else name
        return posixpath.join(self.polyfills_dir, f"{stem}.js")

    def _source_path(self, source: str) -> Path:
        path = Path(source)
        return path if path.is_absolute() else self.base_dir / path

    def _minify(self, name: str, content: str) -> str:
        try:
            return self._minifier.minify(content)
        except Exception as exc:
            raise MinificationError(name, str(exc)) from exc
