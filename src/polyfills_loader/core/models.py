"""Pydantic models for polyfill configuration and build artifacts.

Field names are snake_case in Python and camelCase in config files
(``coreJs``, ``polyfillsDir``, ``fileType`` ...).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class FileType(str, Enum):
    """Logical category of a loaded file."""

    SCRIPT = "script"
    MODULE = "module"
    MODULE_SHIM = "module-shim"
    SYSTEMJS = "systemjs"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class PolyfillConfig(_CamelModel):
    """A polyfill to package: one or more sources plus how the browser loads it.

    ``name`` and ``sources`` are optional here so that malformed user entries
    survive until materialization, which rejects them.
    """

    name: str | None = None
    sources: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("sources", "path"),
        description="File locations, concatenated in order.",
    )
    test: str | None = Field(default=None, description="Feature detection expression; None loads always.")
    initializer: str | None = Field(default=None, description="Script run after the polyfill loads.")
    minify: bool = False
    file_type: FileType = FileType.SCRIPT

    @field_validator("sources", mode="before")
    @classmethod
    def _coerce_sources(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


class PolyfillFile(BaseModel):
    """A finished polyfill artifact ready to be written and injected."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: FileType = FileType.SCRIPT
    path: str
    content: str
    test: str | None = None
    initializer: str | None = None


class EntrypointFile(_CamelModel):
    """An application file the page loads, described by its type."""

    type: FileType = FileType.SCRIPT
    path: str


class ModernEntrypoint(_CamelModel):
    """Files loaded by browsers that need no legacy handling."""

    files: list[EntrypointFile] = Field(default_factory=list)


class LegacyEntrypoint(_CamelModel):
    """Files loaded when ``test`` evaluates true in the browser."""

    test: str
    files: list[EntrypointFile] = Field(default_factory=list)


AlwaysFlag = bool | Literal["always"]


class PolyfillsSettings(_CamelModel):
    """Which polyfills to include."""

    core_js: bool = False
    url_pattern: bool = Field(default=False, alias="URLPattern")
    es_module_shims: AlwaysFlag = False
    constructible_stylesheets: bool = False
    regenerator_runtime: AlwaysFlag = False
    fetch: bool = False
    abort_controller: bool = False
    systemjs: bool = False
    systemjs_extended: bool = False
    dynamic_import: bool = False
    intersection_observer: bool = False
    resize_observer: bool = False
    scoped_custom_element_registry: bool = False
    webcomponents: bool = False
    shady_css_custom_style: bool = False
    hash: bool = Field(default=True, description="Add a content hash to output file names.")
    custom: list[PolyfillConfig] = Field(default_factory=list)


class PolyfillsLoaderConfig(_CamelModel):
    """Top-level configuration consumed by the resolution engine."""

    polyfills: PolyfillsSettings = Field(default_factory=PolyfillsSettings)
    polyfills_dir: str = "polyfills"
    modern: ModernEntrypoint | None = None
    legacy: list[LegacyEntrypoint] | None = None


def has_file_of_type(config: PolyfillsLoaderConfig, file_type: FileType) -> bool:
    """Return True if any modern or legacy entrypoint file has *file_type*."""
    if config.modern and any(f.type == file_type for f in config.modern.files):
        return True
    return any(f.type == file_type for entry in config.legacy or [] for f in entry.files)
