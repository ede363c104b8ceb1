"""Tests for NodeModulesLocator."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from polyfills_loader.core.errors import SourceNotFoundError
from polyfills_loader.core.locator import NodeModulesLocator, split_specifier

if TYPE_CHECKING:
    from pathlib import Path


class TestSplitSpecifier:
    def test_plain_package(self) -> None:
        assert split_specifier("es-module-shims") == ("es-module-shims", "")

    def test_subpath(self) -> None:
        assert split_specifier("whatwg-fetch/dist/fetch.umd.js") == ("whatwg-fetch", "dist/fetch.umd.js")

    def test_scoped(self) -> None:
        assert split_specifier("@webcomponents/shadycss/a.js") == ("@webcomponents/shadycss", "a.js")

    def test_incomplete_scope(self) -> None:
        with pytest.raises(SourceNotFoundError):
            split_specifier("@webcomponents")


class TestNodeModulesLocator:
    def test_exact_file(self, project_dir: Path) -> None:
        path = NodeModulesLocator(project_dir).resolve("whatwg-fetch/dist/fetch.umd.js")
        assert path == (project_dir / "node_modules/whatwg-fetch/dist/fetch.umd.js").resolve()

    def test_js_extension_added(self, project_dir: Path) -> None:
        path = NodeModulesLocator(project_dir).resolve("regenerator-runtime/runtime")
        assert path.name == "runtime.js"

    def test_package_main(self, project_dir: Path) -> None:
        path = NodeModulesLocator(project_dir).resolve("es-module-shims")
        assert path.name == "es-module-shims.js"

    def test_default_index(self, project_dir: Path) -> None:
        path = NodeModulesLocator(project_dir).resolve("urlpattern-polyfill")
        assert path.name == "index.js"

    def test_scoped_package(self, project_dir: Path) -> None:
        path = NodeModulesLocator(project_dir).resolve(
            "@webcomponents/webcomponentsjs/webcomponents-bundle.js"
        )
        assert path.is_file()

    def test_searches_ancestors(self, project_dir: Path) -> None:
        nested = project_dir / "packages" / "app"
        nested.mkdir(parents=True)
        path = NodeModulesLocator(nested).resolve("core-js-bundle/minified.js")
        assert path.is_file()

    def test_missing_package(self, tmp_path: Path) -> None:
        with pytest.raises(SourceNotFoundError) as exc_info:
            NodeModulesLocator(tmp_path).resolve("not-a-package/x.js")
        assert exc_info.value.specifier == "not-a-package/x.js"

    def test_missing_file_in_package(self, project_dir: Path) -> None:
        with pytest.raises(SourceNotFoundError):
            NodeModulesLocator(project_dir).resolve("whatwg-fetch/dist/missing.js")

    def test_broken_package_json_falls_back_to_index(self, tmp_path: Path) -> None:
        pkg = tmp_path / "node_modules" / "broken"
        pkg.mkdir(parents=True)
        (pkg / "package.json").write_text("{not json")
        (pkg / "index.js").write_text("x")
        assert NodeModulesLocator(tmp_path).resolve("broken").name == "index.js"

    def test_main_without_extension(self, tmp_path: Path) -> None:
        pkg = tmp_path / "node_modules" / "lib"
        (pkg / "dist").mkdir(parents=True)
        (pkg / "package.json").write_text(json.dumps({"main": "dist/lib"}))
        (pkg / "dist" / "lib.js").write_text("x")
        assert NodeModulesLocator(tmp_path).resolve("lib").name == "lib.js"
