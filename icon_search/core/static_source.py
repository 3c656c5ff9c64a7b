"""In-Memory Symbol Source

Serves exported names from a table held in memory. Used by tests and for
embedding a fixed catalog.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .symbol_source import SymbolSource, SymbolSourceConfig


class StaticSymbolSource(SymbolSource):
    """Symbol source backed by an in-memory table"""

    def __init__(
        self,
        config: SymbolSourceConfig | None = None,
        symbols: Mapping[str, Iterable[str] | Mapping[str, Any]] | None = None,
    ):
        super().__init__(config or SymbolSourceConfig(source_type="static"))
        table = symbols if symbols is not None else self.config.symbols
        self._table: dict[str, dict[str, Any]] = {
            prefix: _as_mapping(names) for prefix, names in table.items()
        }

    def get_symbols(self, prefix: str) -> Mapping[str, Any] | None:
        return self._table.get(prefix)


def _as_mapping(names: Iterable[str] | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(names, Mapping):
        return dict(names)
    # Bare names carry no value; keep declaration order
    return {name: name for name in names}
