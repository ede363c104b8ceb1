"""The polyfill rule table.

Each rule pairs an inclusion predicate with a builder that produces the
polyfill configs for that rule. ``POLYFILL_RULES`` is ordered: browsers
execute the emitted polyfills in this order and some depend on it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from polyfills_loader.core import feature_tests as ft
from polyfills_loader.core.models import (
    FileType,
    PolyfillConfig,
    PolyfillsLoaderConfig,
    has_file_of_type,
)

# resolve(polyfill_name, specifier) -> absolute source path
Resolve = Callable[[str, str], str]


@dataclass(frozen=True)
class PolyfillRule:
    """A named inclusion rule."""

    name: str
    applies: Callable[[PolyfillsLoaderConfig], bool]
    build: Callable[[PolyfillsLoaderConfig, Resolve], list[PolyfillConfig]]


def _single(
    name: str,
    specifier: str,
    test: str | None = None,
    *,
    minify: bool = False,
) -> Callable[[PolyfillsLoaderConfig, Resolve], list[PolyfillConfig]]:
    """Builder for the common case of one source and a fixed test."""

    def build(config: PolyfillsLoaderConfig, resolve: Resolve) -> list[PolyfillConfig]:
        return [
            PolyfillConfig(name=name, sources=[resolve(name, specifier)], test=test, minify=minify)
        ]

    return build


def _build_es_module_shims(config: PolyfillsLoaderConfig, resolve: Resolve) -> list[PolyfillConfig]:
    # Loaded unconditionally whether or not the flag is "always"; the shim
    # detects native import map support itself.
    name = "es-module-shims"
    return [PolyfillConfig(name=name, sources=[resolve(name, "es-module-shims")])]


def _build_regenerator_runtime(config: PolyfillsLoaderConfig, resolve: Resolve) -> list[PolyfillConfig]:
    name = "regenerator-runtime"
    always = config.polyfills.regenerator_runtime == "always"
    return [
        PolyfillConfig(
            name=name,
            sources=[resolve(name, "regenerator-runtime/runtime")],
            test=None if always else ft.NO_MODULE_SUPPORT_TEST,
        )
    ]


def _build_fetch(config: PolyfillsLoaderConfig, resolve: Resolve) -> list[PolyfillConfig]:
    name = "fetch"
    sources = [resolve(name, "whatwg-fetch/dist/fetch.umd.js")]
    test = ft.FETCH_TEST
    if config.polyfills.abort_controller:
        sources.append(resolve(name, "abortcontroller-polyfill/dist/umd-polyfill.js"))
        test = f"{test} || {ft.ABORT_CONTROLLER_TEST}"
    return [PolyfillConfig(name=name, sources=sources, test=test, minify=True)]


def _wants_systemjs(config: PolyfillsLoaderConfig) -> bool:
    polyfills = config.polyfills
    if polyfills.systemjs or polyfills.systemjs_extended:
        return True
    has_custom_systemjs = any(c.name == "systemjs" for c in polyfills.custom)
    return not has_custom_systemjs and has_file_of_type(config, FileType.SYSTEMJS)


def systemjs_test(config: PolyfillsLoaderConfig) -> str | None:
    """Return the test gating systemjs, or None when it must always load.

    SystemJS is needed by every legacy entrypoint, so it loads whenever any
    of their tests pass. Modern systemjs files need it on every browser.
    """
    always = config.modern is not None and any(
        f.type == FileType.SYSTEMJS for f in config.modern.files
    )
    if always or not config.legacy:
        return None
    return " || ".join(entry.test for entry in config.legacy)


def _build_systemjs(config: PolyfillsLoaderConfig, resolve: Resolve) -> list[PolyfillConfig]:
    name = "systemjs"
    # The extended build adds the import maps polyfill.
    specifier = (
        "systemjs/dist/system.min.js" if config.polyfills.systemjs_extended else "systemjs/dist/s.min.js"
    )
    return [PolyfillConfig(name=name, sources=[resolve(name, specifier)], test=systemjs_test(config))]


def _build_dynamic_import(config: PolyfillsLoaderConfig, resolve: Resolve) -> list[PolyfillConfig]:
    name = "dynamic-import"
    return [
        PolyfillConfig(
            name=name,
            sources=[resolve(name, "dynamic-import-polyfill/dist/dynamic-import-polyfill.umd.js")],
            test=ft.DYNAMIC_IMPORT_TEST,
            initializer=ft.DYNAMIC_IMPORT_INITIALIZER,
        )
    ]


def _build_webcomponents(config: PolyfillsLoaderConfig, resolve: Resolve) -> list[PolyfillConfig]:
    adapter = "custom-elements-es5-adapter"
    return [
        PolyfillConfig(
            name="webcomponents",
            sources=[resolve("webcomponents", "@webcomponents/webcomponentsjs/webcomponents-bundle.js")],
            test=ft.WEBCOMPONENTS_TEST,
        ),
        PolyfillConfig(
            name=adapter,
            sources=[resolve(adapter, "@webcomponents/webcomponentsjs/custom-elements-es5-adapter.js")],
            test=ft.CUSTOM_ELEMENTS_ES5_ADAPTER_TEST,
        ),
    ]


def _build_webcomponents_shady_css(config: PolyfillsLoaderConfig, resolve: Resolve) -> list[PolyfillConfig]:
    # custom-style-interface only works when loaded after the webcomponents
    # bundle, so the three sources ship as one file in this order.
    name = "webcomponents-shady-css-custom-style"
    return [
        PolyfillConfig(
            name=name,
            sources=[
                resolve(name, "@webcomponents/webcomponentsjs/webcomponents-bundle.js"),
                resolve(name, "@webcomponents/shadycss/custom-style-interface.min.js"),
                resolve(name, "shady-css-scoped-element/shady-css-scoped-element.min.js"),
            ],
            test=ft.SHADOW_DOM_TEST,
        )
    ]


POLYFILL_RULES: tuple[PolyfillRule, ...] = (
    PolyfillRule(
        "core-js",
        lambda c: c.polyfills.core_js,
        _single("core-js", "core-js-bundle/minified.js", ft.NO_MODULE_SUPPORT_TEST),
    ),
    PolyfillRule(
        "urlpattern-polyfill",
        lambda c: c.polyfills.url_pattern,
        _single("urlpattern-polyfill", "urlpattern-polyfill", ft.URL_PATTERN_TEST),
    ),
    PolyfillRule(
        "es-module-shims",
        lambda c: bool(c.polyfills.es_module_shims),
        _build_es_module_shims,
    ),
    PolyfillRule(
        "constructible-style-sheets-polyfill",
        lambda c: c.polyfills.constructible_stylesheets,
        _single(
            "constructible-style-sheets-polyfill",
            "construct-style-sheets-polyfill",
            ft.CONSTRUCTIBLE_STYLESHEETS_TEST,
        ),
    ),
    PolyfillRule(
        "regenerator-runtime",
        lambda c: bool(c.polyfills.regenerator_runtime),
        _build_regenerator_runtime,
    ),
    PolyfillRule("fetch", lambda c: c.polyfills.fetch, _build_fetch),
    PolyfillRule("systemjs", _wants_systemjs, _build_systemjs),
    PolyfillRule("dynamic-import", lambda c: c.polyfills.dynamic_import, _build_dynamic_import),
    PolyfillRule(
        "intersection-observer",
        lambda c: c.polyfills.intersection_observer,
        _single(
            "intersection-observer",
            "intersection-observer/intersection-observer.js",
            ft.INTERSECTION_OBSERVER_TEST,
            minify=True,
        ),
    ),
    PolyfillRule(
        "resize-observer",
        lambda c: c.polyfills.resize_observer,
        _single(
            "resize-observer",
            "resize-observer-polyfill/dist/ResizeObserver.global.js",
            ft.RESIZE_OBSERVER_TEST,
            minify=True,
        ),
    ),
    PolyfillRule(
        "scoped-custom-element-registry",
        lambda c: c.polyfills.scoped_custom_element_registry,
        _single(
            "scoped-custom-element-registry",
            "@webcomponents/scoped-custom-element-registry/scoped-custom-element-registry.min.js",
            ft.SCOPED_CUSTOM_ELEMENT_REGISTRY_TEST,
        ),
    ),
    PolyfillRule(
        "webcomponents",
        lambda c: c.polyfills.webcomponents and not c.polyfills.shady_css_custom_style,
        _build_webcomponents,
    ),
    PolyfillRule(
        "webcomponents-shady-css-custom-style",
        lambda c: c.polyfills.webcomponents and c.polyfills.shady_css_custom_style,
        _build_webcomponents_shady_css,
    ),
)
