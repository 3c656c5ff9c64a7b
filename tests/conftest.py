"""Shared test fixtures for icon search tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from icon_search.core.catalog import IconCatalog
from icon_search.core.static_source import StaticSymbolSource
from icon_search.core.symbol_source import SymbolSource, SymbolSourceConfig, SymbolSourceError
from icon_search.models.libraries import ICON_LIBRARIES

FAKE_SYMBOLS: dict[str, list[str]] = {
    "fa": ["FaUser", "FaHome", "FaCog", "someUtil"],
    "md": ["MdHome", "MdSettings", "MdPerson"],
    "bs": ["BsArrowUp", "BsArrowDown"],
    "fa6": ["FaUser", "FaHouse", "IconContext"],
}


class CountingSymbolSource(SymbolSource):
    """Static table that records every lookup"""

    def __init__(self, symbols: Mapping[str, list[str]]):
        super().__init__(SymbolSourceConfig(source_type="static"))
        self._inner = StaticSymbolSource(symbols=symbols)
        self.calls: list[str] = []

    def get_symbols(self, prefix: str) -> Mapping[str, Any] | None:
        self.calls.append(prefix)
        return self._inner.get_symbols(prefix)


class FailingSymbolSource(SymbolSource):
    """Fails for the first `failures` lookups, then serves `symbols`"""

    def __init__(self, symbols: Mapping[str, list[str]], failures: int = 1_000_000):
        super().__init__(SymbolSourceConfig(source_type="static"))
        self._inner = StaticSymbolSource(symbols=symbols)
        self.failures = failures

    def get_symbols(self, prefix: str) -> Mapping[str, Any] | None:
        if self.failures > 0:
            self.failures -= 1
            raise SymbolSourceError(prefix, "registry unavailable")
        return self._inner.get_symbols(prefix)


@pytest.fixture
def symbol_source() -> CountingSymbolSource:
    """Symbol source exposing a handful of fake libraries."""
    return CountingSymbolSource(FAKE_SYMBOLS)


@pytest.fixture
def catalog(symbol_source: CountingSymbolSource) -> IconCatalog:
    """Catalog over the seed libraries and the fake symbol source."""
    return IconCatalog(ICON_LIBRARIES, symbol_source)
