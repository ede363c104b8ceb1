"""Shared fixtures: a project directory with a fake ``node_modules`` tree."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

# Every file the built-in rules reference, keyed by specifier.
PACKAGE_FILES: dict[str, str] = {
    "core-js-bundle/minified.js": "window.coreJs = true;\n",
    "urlpattern-polyfill/index.js": "window.URLPattern = function () {};\n",
    "es-module-shims/dist/es-module-shims.js": "window.importShim = function () {};\n",
    "construct-style-sheets-polyfill/dist/adoptedStyleSheets.js": "document.adoptedStyleSheets = [];\n",
    "regenerator-runtime/runtime.js": "window.regeneratorRuntime = {};\n",
    "whatwg-fetch/dist/fetch.umd.js": (
        "/* fetch polyfill */\nwindow.fetchPolyfill = true;\n//# sourceMappingURL=fetch.umd.js.map\n"
    ),
    "abortcontroller-polyfill/dist/umd-polyfill.js": "/* abort */\nwindow.abortPolyfill = true;\n",
    "systemjs/dist/s.min.js": "window.System = 's';\n",
    "systemjs/dist/system.min.js": "window.System = 'system';\n",
    "dynamic-import-polyfill/dist/dynamic-import-polyfill.umd.js": "window.dynamicImportPolyfill = {};\n",
    "intersection-observer/intersection-observer.js": "window.IntersectionObserver = function () {};\n",
    "resize-observer-polyfill/dist/ResizeObserver.global.js": "window.ResizeObserver = function () {};\n",
    "@webcomponents/scoped-custom-element-registry/scoped-custom-element-registry.min.js": (
        "window.scopedRegistry = true;\n"
    ),
    "@webcomponents/webcomponentsjs/webcomponents-bundle.js": (
        "window.WebComponents = {};\n//# sourceMappingURL=webcomponents-bundle.js.map\n"
    ),
    "@webcomponents/webcomponentsjs/custom-elements-es5-adapter.js": "window.es5Adapter = true;\n",
    "@webcomponents/shadycss/custom-style-interface.min.js": "window.customStyleInterface = true;\n",
    "shady-css-scoped-element/shady-css-scoped-element.min.js": "window.shadyScoped = true;\n",
}

# Packages resolved through package.json "main".
PACKAGE_MAINS: dict[str, str] = {
    "es-module-shims": "dist/es-module-shims.js",
    "construct-style-sheets-polyfill": "./dist/adoptedStyleSheets.js",
}


def write_node_modules(root: Path) -> Path:
    """Populate ``root / node_modules`` and return *root*."""
    node_modules = root / "node_modules"
    for specifier, content in PACKAGE_FILES.items():
        target = node_modules / specifier
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    for package, main in PACKAGE_MAINS.items():
        (node_modules / package / "package.json").write_text(
            json.dumps({"name": package, "main": main}), encoding="utf-8"
        )
    return root


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A directory whose ``node_modules`` holds every built-in polyfill."""
    return write_node_modules(tmp_path)
