"""Module Symbol Source

Discovers exported icon names by importing one Python module per library,
``{module_package}.{prefix}``, and enumerating its public names.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from types import ModuleType
from typing import Any

from icon_search.utils.logger import get_logger

from .symbol_source import SymbolSource, SymbolSourceConfig, SymbolSourceError

logger = get_logger(__name__)


class ModuleSymbolSource(SymbolSource):
    """Symbol source backed by dynamic module introspection"""

    def __init__(self, config: SymbolSourceConfig):
        super().__init__(config)
        if not config.module_package:
            raise ValueError("module_package is required for the module symbol source")
        self.package = config.module_package

    def _import(self, prefix: str) -> ModuleType | None:
        module_name = f"{self.package}.{prefix}"
        try:
            return importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            # Only a missing library module means "unknown prefix"; a missing
            # dependency inside it is a failure.
            if e.name in (module_name, self.package):
                logger.debug(f"No symbol module for library '{prefix}': {module_name}")
                return None
            raise SymbolSourceError(prefix, f"Cannot import {module_name}: {e}") from e
        except Exception as e:
            raise SymbolSourceError(prefix, f"Cannot import {module_name}: {e}") from e

    def get_symbols(self, prefix: str) -> Mapping[str, Any] | None:
        module = self._import(prefix)
        if module is None:
            return None

        exported = getattr(module, "__all__", None)
        if exported is not None:
            # __all__ may list names the module never defines
            return {name: getattr(module, name) for name in exported if hasattr(module, name)}

        return {
            name: value
            for name, value in vars(module).items()
            if not name.startswith("_") and not isinstance(value, ModuleType)
        }
