"""Symbol Source Abstraction Layer

A symbol source answers one question: given a library prefix, which names
does that library export? The catalog is agnostic of where the answer comes
from (a bundled manifest, a Python package, or an in-memory table).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class SymbolSourceType(str, Enum):
    """Symbol source type"""

    manifest = "manifest"
    module = "module"
    static = "static"


class SymbolSourceError(Exception):
    """The symbol source failed, as opposed to not knowing the prefix.

    `repeated` marks a failure the source already raised once and is now
    replaying without retrying, so callers can avoid reporting it again.
    """

    def __init__(self, prefix: str, message: str, *, repeated: bool = False):
        super().__init__(f"{message} (library: {prefix})")
        self.prefix = prefix
        self.message = message
        self.repeated = repeated


class SymbolSourceConfig(BaseModel):
    """Symbol source settings"""

    source_type: SymbolSourceType = SymbolSourceType.manifest

    # Manifest
    manifest_path: Optional[str] = None  # None = bundled manifest

    # Module
    module_package: Optional[str] = None

    # Static
    symbols: dict[str, list[str]] = {}


class SymbolSource(ABC):
    """Symbol source abstract class"""

    def __init__(self, config: SymbolSourceConfig):
        self.config = config

    @abstractmethod
    def get_symbols(self, prefix: str) -> Mapping[str, Any] | None:
        """Raw exported-name mapping of one library.

        Returns:
            Mapping of exported name -> opaque value in declaration order,
            or None when the source does not know the prefix.

        Raises:
            SymbolSourceError: the source itself failed
        """
        pass


def create_symbol_source(config: SymbolSourceConfig) -> SymbolSource:
    """Symbol source factory

    Args:
        config: symbol source settings

    Returns:
        SymbolSource instance
    """
    source_type = config.source_type

    if source_type == SymbolSourceType.manifest:
        from .manifest_source import ManifestSymbolSource

        return ManifestSymbolSource(config)
    elif source_type == SymbolSourceType.module:
        from .module_source import ModuleSymbolSource

        return ModuleSymbolSource(config)
    elif source_type == SymbolSourceType.static:
        from .static_source import StaticSymbolSource

        return StaticSymbolSource(config)
    else:
        raise ValueError(f"Unsupported symbol source type: {source_type}")
