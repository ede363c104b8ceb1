"""Config loading and end-to-end polyfill builds."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from polyfills_loader.core.interpreter import resolve_polyfill_configs
from polyfills_loader.core.locator import NodeModulesLocator
from polyfills_loader.core.materializer import ContentMaterializer
from polyfills_loader.core.models import PolyfillsLoaderConfig
from polyfills_loader.sdk.errors import ConfigLoadError

if TYPE_CHECKING:
    from polyfills_loader.core.hashing import ContentHasher
    from polyfills_loader.core.locator import SourceLocator
    from polyfills_loader.core.minifier import Minifier
    from polyfills_loader.core.models import PolyfillFile

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load and validate a YAML config file into a :class:`PolyfillsLoaderConfig`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> PolyfillsLoaderConfig:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        with :func:`os.path.expandvars` in file locations only (``polyfillsDir``
        and custom sources). Test and initializer expressions are JavaScript and
        are kept verbatim. An empty file yields the default config (no polyfills).

        Raises:
            ConfigLoadError: On read errors, YAML parse errors or schema validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigLoadError(f"Cannot read {self._path}: {exc}") from exc

        try:
            data: Any = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ConfigLoadError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigLoadError("Polyfills config YAML must be a mapping")

        try:
            config = PolyfillsLoaderConfig.model_validate(data)
        except ValidationError as exc:
            raise ConfigLoadError(str(exc)) from exc

        config.polyfills_dir = os.path.expandvars(config.polyfills_dir)
        for custom in config.polyfills.custom:
            custom.sources = [os.path.expandvars(s) for s in custom.sources]
        return config


class PolyfillsBuilder:
    """Resolve and materialize the polyfills for a :class:`PolyfillsLoaderConfig`.

    Package sources are looked up in ``node_modules`` starting at
    ``base_dir``; relative custom sources are read relative to it.
    """

    def __init__(
        self,
        config: PolyfillsLoaderConfig,
        *,
        base_dir: Path | None = None,
        locator: SourceLocator | None = None,
        minifier: Minifier | None = None,
        hasher: ContentHasher | None = None,
    ) -> None:
        self.config = config
        self.base_dir = base_dir or Path.cwd()
        self.locator = locator or NodeModulesLocator(self.base_dir)
        self.materializer = ContentMaterializer(
            polyfills_dir=config.polyfills_dir,
            hash_enabled=config.polyfills.hash,
            minifier=minifier,
            hasher=hasher,
            base_dir=self.base_dir,
        )

    @classmethod
    def from_yaml(cls, path: str | Path, **kwargs: Any) -> PolyfillsBuilder:
        """Load a config YAML and return a builder rooted at its directory."""
        p = Path(path)
        config = ConfigLoader(p).load()
        return cls(config, base_dir=p.parent, **kwargs)

    async def build(self) -> list[PolyfillFile]:
        """Return the ordered polyfill files for the config.

        Raises:
            PolyfillsLoaderError: Any resolution, validation, read or minify failure.
        """
        configs = resolve_polyfill_configs(self.config, self.locator)
        files = await self.materializer.materialize(configs)
        logger.info("Built %d polyfill file(s) into %s", len(files), self.config.polyfills_dir)
        return files


async def create_polyfills_data(
    config: PolyfillsLoaderConfig,
    **kwargs: Any,
) -> list[PolyfillFile]:
    """Resolve and materialize *config* in one call.

    Keyword arguments are forwarded to :class:`PolyfillsBuilder`.
    """
    return await PolyfillsBuilder(config, **kwargs).build()


def write_polyfill_files(files: list[PolyfillFile], out_dir: Path) -> list[Path]:
    """Write each file's content to ``out_dir / file.path``; return the written paths."""
    written: list[Path] = []
    for polyfill in files:
        target = out_dir / polyfill.path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(polyfill.content, encoding="utf-8")
        logger.debug("Wrote %s", target)
        written.append(target)
    return written
