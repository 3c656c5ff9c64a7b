"""Core package for Icon Search Service

Holds the icon catalog and the symbol source abstraction it reads from.
"""

from .catalog import IconCatalog, icon_stem, is_icon_symbol
from .symbol_source import (
    SymbolSource,
    SymbolSourceConfig,
    SymbolSourceError,
    SymbolSourceType,
    create_symbol_source,
)

__all__ = [
    # Catalog
    "IconCatalog",
    "icon_stem",
    "is_icon_symbol",
    # Symbol Source
    "SymbolSource",
    "SymbolSourceConfig",
    "SymbolSourceError",
    "SymbolSourceType",
    "create_symbol_source",
]
