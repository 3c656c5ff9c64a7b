"""Icon Catalog

Read-only lookup and substring search over the icon libraries of the catalog
and the icon symbols their symbol source exports.

Icon names of a library are recognized by their *stem*: the library prefix
without trailing version digits, capitalized (``fa`` and ``fa6`` -> ``Fa``,
``io5`` -> ``Io``, ``lia`` -> ``Lia``). Exported names that do not start with
the stem (helpers, contexts) are not indexed, but `get_icon_details` still
resolves them because it checks the raw exported names.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional

from icon_search.models.entities import IconRecord, LibraryInfo
from icon_search.utils.logger import get_logger

from .symbol_source import SymbolSource, SymbolSourceError

logger = get_logger(__name__)

DEFAULT_RESULT_CAP = 100
DEFAULT_SEARCH_LIMIT = 20
DEFAULT_PRIORITY_PREFIXES: tuple[str, ...] = ("fa", "md", "ai", "bs", "hi", "io5", "fi")

SCOPED_QUERY_PATTERN = re.compile(r"^([a-z0-9]+):(.*)$", re.DOTALL)
_VERSION_SUFFIX = re.compile(r"\d+$")


def icon_stem(prefix: str) -> str:
    """Leading part shared by every icon name of a library"""
    stem = _VERSION_SUFFIX.sub("", prefix)
    return stem[:1].upper() + stem[1:].lower()


def is_icon_symbol(prefix: str, name: str) -> bool:
    """Whether an exported name is an icon of the library `prefix`"""
    stem = icon_stem(prefix)
    return bool(stem) and name.startswith(stem)


class IconCatalog:
    """Catalog of icon libraries and their icons

    Every instance owns its icon cache; nothing is shared between catalogs.
    """

    def __init__(
        self,
        libraries: Iterable[LibraryInfo],
        symbol_source: SymbolSource,
        *,
        priority_prefixes: Sequence[str] = DEFAULT_PRIORITY_PREFIXES,
        result_cap: int = DEFAULT_RESULT_CAP,
    ):
        self._libraries: tuple[LibraryInfo, ...] = tuple(libraries)
        self._by_prefix: dict[str, LibraryInfo] = {}
        for library in self._libraries:
            if library.prefix in self._by_prefix:
                raise ValueError(f"Duplicate library prefix: {library.prefix}")
            self._by_prefix[library.prefix] = library

        self.symbol_source = symbol_source
        self.priority_prefixes = tuple(priority_prefixes)
        self.result_cap = result_cap
        self._icon_cache: dict[str, list[IconRecord]] = {}

    def list_libraries(self) -> list[LibraryInfo]:
        return list(self._libraries)

    def get_library(self, prefix: str) -> Optional[LibraryInfo]:
        return self._by_prefix.get(prefix)

    def _raw_symbols(self, prefix: str) -> Mapping[str, Any] | None:
        """Exported names of a library, or None when unavailable"""
        try:
            return self.symbol_source.get_symbols(prefix)
        except SymbolSourceError as e:
            if e.repeated:
                logger.debug(f"Symbol source still unavailable for library '{prefix}': {e.message}")
            else:
                logger.exception(f"Symbol source failed for library '{prefix}'")
            return None

    def list_icons(self, prefix: str) -> list[IconRecord]:
        """Icons of one library in the order the symbol source declares them"""
        cached = self._icon_cache.get(prefix)
        if cached is not None:
            return list(cached)

        if prefix not in self._by_prefix:
            return []

        symbols = self._raw_symbols(prefix)
        if not symbols:
            return []

        icons = [
            IconRecord(package_name=prefix, icon_name=name)
            for name in symbols
            if is_icon_symbol(prefix, name)
        ]
        self._icon_cache[prefix] = icons
        logger.debug(f"Indexed {len(icons)} icons for library '{prefix}'")
        return list(icons)

    def search_order(self) -> list[str]:
        """Library prefixes in the order an unscoped search scans them"""
        order: list[str] = []
        for prefix in self.priority_prefixes:
            if prefix in self._by_prefix and prefix not in order:
                order.append(prefix)
        for library in self._libraries:
            if library.prefix not in order:
                order.append(library.prefix)
        return order

    def search(self, query: str, limit: Optional[int] = DEFAULT_SEARCH_LIMIT) -> list[IconRecord]:
        """Substring search over icon names

        `prefix:term` restricts the search to one library when the prefix is
        known; otherwise the whole query is the search term. Both forms are
        bounded by `result_cap`, then truncated to `limit` (None = no limit).
        """
        normalized = query.lower()

        results: Optional[list[IconRecord]] = None
        scoped = SCOPED_QUERY_PATTERN.match(normalized)
        if scoped:
            prefix, term = scoped.group(1), scoped.group(2).strip()
            if self.get_library(prefix) is not None:
                results = [
                    icon for icon in self.list_icons(prefix) if term in icon.icon_name.lower()
                ][: self.result_cap]

        if results is None:
            results = []
            for prefix in self.search_order():
                results.extend(
                    icon for icon in self.list_icons(prefix) if normalized in icon.icon_name.lower()
                )
                if len(results) >= self.result_cap:
                    break
            results = results[: self.result_cap]

        if limit is not None:
            results = results[: max(limit, 0)]
        return results

    def get_icon_details(self, package_name: str, icon_name: str) -> Optional[IconRecord]:
        """Resolve one exported symbol by its exact name"""
        if package_name not in self._by_prefix:
            return None

        symbols = self._raw_symbols(package_name)
        if not symbols or icon_name not in symbols:
            return None

        return IconRecord(package_name=package_name, icon_name=icon_name)
