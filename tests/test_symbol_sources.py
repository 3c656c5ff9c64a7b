"""Tests for symbol sources and the catalog factory."""

from __future__ import annotations

import json
import logging
import sys
import textwrap
from pathlib import Path

import pytest

from icon_search.config.settings import Settings
from icon_search.core.catalog import IconCatalog, is_icon_symbol
from icon_search.core.manifest_source import BUNDLED_MANIFEST_PATH, ManifestSymbolSource
from icon_search.core.module_source import ModuleSymbolSource
from icon_search.core.static_source import StaticSymbolSource
from icon_search.core.symbol_source import (
    SymbolSourceConfig,
    SymbolSourceError,
    SymbolSourceType,
    create_symbol_source,
)
from icon_search.models.libraries import ICON_LIBRARIES
from icon_search.repository.catalog import create_catalog

FAKE_PACKAGE = "fake_react_icons"


@pytest.fixture
def icon_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """A throwaway package with one module per library."""
    package_dir = tmp_path / FAKE_PACKAGE
    package_dir.mkdir()
    (package_dir / "__init__.py").write_text("")
    (package_dir / "fa.py").write_text(
        textwrap.dedent(
            """
            import os

            def FaUser():
                return "user"

            def FaHome():
                return "home"

            FaCog = object()
            someUtil = object()
            _private = object()
            """
        )
    )
    (package_dir / "md.py").write_text(
        textwrap.dedent(
            """
            __all__ = ["MdHome", "MdPerson"]

            MdHome = object()
            MdPerson = object()
            MdHidden = object()
            """
        )
    )
    (package_dir / "ai.py").write_text(
        textwrap.dedent(
            """
            __all__ = ["AiFillHome", "AiOutlineGhost"]

            AiFillHome = object()
            """
        )
    )
    (package_dir / "bs.py").write_text('raise RuntimeError("broken build")\n')
    (package_dir / "bi.py").write_text("import not_a_real_dependency_for_icons\n")

    monkeypatch.syspath_prepend(str(tmp_path))
    yield FAKE_PACKAGE

    for name in list(sys.modules):
        if name == FAKE_PACKAGE or name.startswith(f"{FAKE_PACKAGE}."):
            del sys.modules[name]


def _module_source(package: str) -> ModuleSymbolSource:
    return ModuleSymbolSource(SymbolSourceConfig(source_type="module", module_package=package))


# ---------------------------------------------------------------------------
# Static
# ---------------------------------------------------------------------------


def test_static_source_from_names() -> None:
    source = StaticSymbolSource(symbols={"fa": ["FaUser", "FaHome"]})

    assert list(source.get_symbols("fa")) == ["FaUser", "FaHome"]
    assert source.get_symbols("md") is None


def test_static_source_from_mapping() -> None:
    marker = object()
    source = StaticSymbolSource(symbols={"fa": {"FaUser": marker}})

    assert source.get_symbols("fa")["FaUser"] is marker


def test_static_source_from_config() -> None:
    source = create_symbol_source(
        SymbolSourceConfig(source_type="static", symbols={"md": ["MdHome"]})
    )

    assert isinstance(source, StaticSymbolSource)
    assert list(source.get_symbols("md")) == ["MdHome"]


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------


def test_bundled_manifest_exists() -> None:
    assert BUNDLED_MANIFEST_PATH.is_file()


def test_bundled_manifest_source() -> None:
    source = ManifestSymbolSource(SymbolSourceConfig())

    assert "FaUser" in source.get_symbols("fa")
    assert source.get_symbols("unknown") is None


def test_bundled_manifest_names_follow_library_stems() -> None:
    with open(BUNDLED_MANIFEST_PATH, encoding="utf-8") as f:
        manifest = json.load(f)

    known = {lib.prefix for lib in ICON_LIBRARIES}
    assert set(manifest) <= known
    for prefix, names in manifest.items():
        assert names, prefix
        assert all(is_icon_symbol(prefix, name) for name in names), prefix


def test_manifest_source_custom_file(tmp_path: Path) -> None:
    path = tmp_path / "icons.json"
    path.write_text(json.dumps({"fa": ["FaUser", "someUtil"]}), encoding="utf-8")
    source = ManifestSymbolSource(SymbolSourceConfig(manifest_path=str(path)))

    assert list(source.get_symbols("fa")) == ["FaUser", "someUtil"]


def test_manifest_source_loads_once(tmp_path: Path) -> None:
    path = tmp_path / "icons.json"
    path.write_text(json.dumps({"fa": ["FaUser"]}), encoding="utf-8")
    source = ManifestSymbolSource(SymbolSourceConfig(manifest_path=str(path)))

    source.get_symbols("fa")
    path.unlink()

    assert list(source.get_symbols("fa")) == ["FaUser"]


def test_manifest_source_missing_file(tmp_path: Path) -> None:
    source = ManifestSymbolSource(SymbolSourceConfig(manifest_path=str(tmp_path / "missing.json")))

    with pytest.raises(SymbolSourceError) as exc_info:
        source.get_symbols("fa")
    assert exc_info.value.prefix == "fa"


def test_manifest_source_remembers_failed_load(tmp_path: Path) -> None:
    path = tmp_path / "icons.json"
    source = ManifestSymbolSource(SymbolSourceConfig(manifest_path=str(path)))

    with pytest.raises(SymbolSourceError) as first:
        source.get_symbols("fa")
    assert first.value.repeated is False

    # the file is never reopened, so a late manifest does not heal the source
    path.write_text(json.dumps({"fa": ["FaUser"]}), encoding="utf-8")

    with pytest.raises(SymbolSourceError) as again:
        source.get_symbols("md")
    assert again.value.repeated is True
    assert again.value.prefix == "md"
    assert again.value.message == first.value.message


def test_catalog_logs_manifest_failure_once(tmp_path: Path) -> None:
    class _Collect(logging.Handler):
        def __init__(self) -> None:
            super().__init__(level=logging.DEBUG)
            self.records: list[logging.LogRecord] = []

        def emit(self, record: logging.LogRecord) -> None:
            self.records.append(record)

    source = ManifestSymbolSource(SymbolSourceConfig(manifest_path=str(tmp_path / "missing.json")))
    catalog = IconCatalog(ICON_LIBRARIES, source)
    handler = _Collect()
    catalog_logger = logging.getLogger("icon_search.core.catalog")
    catalog_logger.addHandler(handler)
    try:
        assert catalog.search("home") == []
    finally:
        catalog_logger.removeHandler(handler)

    errors = [r for r in handler.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert errors[0].exc_info is not None


@pytest.mark.parametrize(
    "content",
    ["{not json", json.dumps(["FaUser"]), json.dumps({"fa": "FaUser"}), json.dumps({"fa": [1, 2]})],
)
def test_manifest_source_malformed_file(tmp_path: Path, content: str) -> None:
    path = tmp_path / "icons.json"
    path.write_text(content, encoding="utf-8")
    source = ManifestSymbolSource(SymbolSourceConfig(manifest_path=str(path)))

    with pytest.raises(SymbolSourceError):
        source.get_symbols("fa")


# ---------------------------------------------------------------------------
# Module
# ---------------------------------------------------------------------------


def test_module_source_lists_public_names(icon_package: str) -> None:
    symbols = _module_source(icon_package).get_symbols("fa")

    assert list(symbols) == ["FaUser", "FaHome", "FaCog", "someUtil"]


def test_module_source_honours_all(icon_package: str) -> None:
    assert list(_module_source(icon_package).get_symbols("md")) == ["MdHome", "MdPerson"]


def test_module_source_skips_undefined_all_entries(icon_package: str) -> None:
    symbols = _module_source(icon_package).get_symbols("ai")

    assert list(symbols) == ["AiFillHome"]
    assert symbols["AiFillHome"] is not None


def test_catalog_ignores_undefined_all_entries(icon_package: str) -> None:
    catalog = IconCatalog(ICON_LIBRARIES, _module_source(icon_package))

    assert [r.icon_name for r in catalog.list_icons("ai")] == ["AiFillHome"]
    assert catalog.get_icon_details("ai", "AiOutlineGhost") is None
    assert catalog.search("ghost") == []


def test_module_source_unknown_library(icon_package: str) -> None:
    assert _module_source(icon_package).get_symbols("wi") is None


def test_module_source_unknown_package() -> None:
    assert _module_source("no_such_icon_package_anywhere").get_symbols("fa") is None


def test_module_source_broken_module(icon_package: str) -> None:
    with pytest.raises(SymbolSourceError, match="broken build"):
        _module_source(icon_package).get_symbols("bs")


def test_module_source_missing_dependency(icon_package: str) -> None:
    with pytest.raises(SymbolSourceError):
        _module_source(icon_package).get_symbols("bi")


def test_module_source_requires_package() -> None:
    with pytest.raises(ValueError):
        create_symbol_source(SymbolSourceConfig(source_type=SymbolSourceType.module))


def test_catalog_over_module_source(icon_package: str) -> None:
    catalog = IconCatalog(ICON_LIBRARIES, _module_source(icon_package))

    assert [r.icon_name for r in catalog.list_icons("fa")] == ["FaUser", "FaHome", "FaCog"]
    assert catalog.get_icon_details("fa", "someUtil") is not None
    assert catalog.get_icon_details("md", "MdHidden") is None
    # broken library degrades to empty
    assert catalog.list_icons("bs") == []
    assert [r.icon_name for r in catalog.search("home")] == ["FaHome", "MdHome", "AiFillHome"]


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def test_create_symbol_source_types() -> None:
    assert isinstance(create_symbol_source(SymbolSourceConfig()), ManifestSymbolSource)
    assert isinstance(
        create_symbol_source(SymbolSourceConfig(source_type="module", module_package="x")),
        ModuleSymbolSource,
    )


def test_create_catalog_from_settings() -> None:
    catalog = create_catalog(Settings(symbol_source_type="manifest", search_result_cap=5))

    assert catalog.result_cap == 5
    assert isinstance(catalog.symbol_source, ManifestSymbolSource)
    assert [r.icon_name for r in catalog.search("fa:user", limit=None)][:1] == ["FaUser"]
    assert len(catalog.search("o", limit=None)) == 5


def test_bundled_catalog_indexes_every_manifest_name() -> None:
    catalog = create_catalog(Settings(symbol_source_type="manifest"))
    source = catalog.symbol_source

    for library in catalog.list_libraries():
        symbols = source.get_symbols(library.prefix) or {}
        assert len(catalog.list_icons(library.prefix)) == len(symbols), library.prefix
