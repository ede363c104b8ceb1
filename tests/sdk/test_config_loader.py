"""Tests for ConfigLoader."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

from polyfills_loader.core.models import FileType
from polyfills_loader.sdk.builder import ConfigLoader
from polyfills_loader.sdk.errors import ConfigLoadError

_VALID_YAML = """\
polyfillsDir: shims
polyfills:
  coreJs: true
  fetch: true
  esModuleShims: always
  hash: false
  custom:
    - name: my-polyfill
      path: vendor/my-polyfill.js
      test: "!('myFeature' in window)"
modern:
  files:
    - type: module
      path: app.js
legacy:
  - test: "!('noModule' in HTMLScriptElement.prototype)"
    files:
      - type: systemjs
        path: legacy/app.js
"""


class TestConfigLoader:
    def test_load_valid(self, tmp_path: Path) -> None:
        f = tmp_path / "polyfills.yaml"
        f.write_text(_VALID_YAML)
        cfg = ConfigLoader(f).load()
        assert cfg.polyfills_dir == "shims"
        assert cfg.polyfills.core_js is True
        assert cfg.polyfills.es_module_shims == "always"
        assert cfg.polyfills.hash is False
        assert cfg.polyfills.custom[0].sources == ["vendor/my-polyfill.js"]
        assert cfg.legacy is not None
        assert cfg.legacy[0].files[0].type == FileType.SYSTEMJS

    def test_empty_file_is_default(self, tmp_path: Path) -> None:
        f = tmp_path / "empty.yaml"
        f.write_text("")
        cfg = ConfigLoader(f).load()
        assert cfg.polyfills.custom == []

    def test_env_var_interpolation(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("POLYFILLS_DIR", "from-env")
        f = tmp_path / "polyfills.yaml"
        f.write_text("polyfillsDir: ${POLYFILLS_DIR}\n")
        assert ConfigLoader(f).load().polyfills_dir == "from-env"

    def test_env_vars_expanded_in_custom_sources(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("VENDOR_DIR", "third_party")
        f = tmp_path / "polyfills.yaml"
        f.write_text("polyfills:\n  custom:\n    - name: mine\n      path: ${VENDOR_DIR}/mine.js\n")
        assert ConfigLoader(f).load().polyfills.custom[0].sources == ["third_party/mine.js"]

    def test_javascript_expressions_not_expanded(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("jQuery", "OOPS")
        f = tmp_path / "polyfills.yaml"
        f.write_text(
            "polyfills:\n"
            "  custom:\n"
            "    - name: mine\n"
            "      path: mine.js\n"
            "      test: \"!window.$jQuery\"\n"
            "      initializer: \"${jQuery}.init()\"\n"
            "legacy:\n"
            "  - test: \"!window.$jQuery\"\n"
        )
        cfg = ConfigLoader(f).load()
        custom = cfg.polyfills.custom[0]
        assert custom.test == "!window.$jQuery"
        assert custom.initializer == "${jQuery}.init()"
        assert cfg.legacy is not None
        assert cfg.legacy[0].test == "!window.$jQuery"

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="Cannot read"):
            ConfigLoader(tmp_path / "missing.yaml").load()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        f = tmp_path / "bad.yaml"
        f.write_text("{{{{invalid")
        with pytest.raises(ConfigLoadError, match="YAML parse error"):
            ConfigLoader(f).load()

    def test_yaml_not_mapping(self, tmp_path: Path) -> None:
        f = tmp_path / "list.yaml"
        f.write_text("- coreJs\n- fetch\n")
        with pytest.raises(ConfigLoadError, match="must be a mapping"):
            ConfigLoader(f).load()

    def test_unknown_flag(self, tmp_path: Path) -> None:
        f = tmp_path / "typo.yaml"
        f.write_text("polyfills:\n  coreJS: true\n")
        with pytest.raises(ConfigLoadError):
            ConfigLoader(f).load()
