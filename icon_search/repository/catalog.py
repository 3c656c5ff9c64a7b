"""Catalog factory.

Builds the process-wide IconCatalog from settings. The HTTP API and the MCP
server both resolve the catalog through `get_catalog` so tests can swap it.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from icon_search.config.settings import Settings, settings
from icon_search.core.catalog import IconCatalog
from icon_search.core.symbol_source import SymbolSourceConfig, create_symbol_source
from icon_search.models.libraries import ICON_LIBRARIES


def symbol_source_config(config: Settings) -> SymbolSourceConfig:
    return SymbolSourceConfig(
        source_type=config.symbol_source_type,
        manifest_path=config.symbol_manifest_path or None,
        module_package=config.symbol_module_package or None,
    )


def create_catalog(config: Optional[Settings] = None) -> IconCatalog:
    config = config or settings
    return IconCatalog(
        ICON_LIBRARIES,
        create_symbol_source(symbol_source_config(config)),
        priority_prefixes=config.priority_prefixes,
        result_cap=config.search_result_cap,
    )


@lru_cache(maxsize=1)
def get_catalog() -> IconCatalog:
    return create_catalog()
