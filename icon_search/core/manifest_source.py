"""Manifest Symbol Source

Reads exported icon names from a JSON manifest of the form
``{"fa": ["FaUser", "FaHome", ...], "md": [...]}``.

The manifest is loaded on first access and kept for the lifetime of the
instance. A failed load is kept too: the file is not read again and later
lookups replay the same error.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from icon_search.utils.logger import get_logger

from .symbol_source import SymbolSource, SymbolSourceConfig, SymbolSourceError

logger = get_logger(__name__)

BUNDLED_MANIFEST_PATH = Path(__file__).resolve().parent.parent / "data" / "icons_manifest.json"


class ManifestSymbolSource(SymbolSource):
    """Symbol source backed by a JSON manifest file"""

    def __init__(self, config: SymbolSourceConfig):
        super().__init__(config)
        self.manifest_path = Path(config.manifest_path) if config.manifest_path else BUNDLED_MANIFEST_PATH
        self._manifest: dict[str, dict[str, Any]] | None = None
        self._load_error: str | None = None

    def _load(self, prefix: str) -> dict[str, dict[str, Any]]:
        """Parse the manifest file"""
        try:
            with open(self.manifest_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise SymbolSourceError(prefix, f"Cannot read manifest {self.manifest_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SymbolSourceError(prefix, f"Malformed manifest {self.manifest_path}: {e}") from e

        if not isinstance(data, dict):
            raise SymbolSourceError(prefix, f"Manifest {self.manifest_path} must be a JSON object")

        manifest: dict[str, dict[str, Any]] = {}
        for lib_prefix, names in data.items():
            if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
                raise SymbolSourceError(
                    prefix,
                    f"Manifest entry '{lib_prefix}' must be a list of names",
                )
            manifest[lib_prefix] = {name: name for name in names}

        logger.info(f"Loaded icon manifest {self.manifest_path} ({len(manifest)} libraries)")
        return manifest

    def get_symbols(self, prefix: str) -> Mapping[str, Any] | None:
        if self._manifest is None:
            if self._load_error is not None:
                raise SymbolSourceError(prefix, self._load_error, repeated=True)
            try:
                self._manifest = self._load(prefix)
            except SymbolSourceError as e:
                self._load_error = e.message
                raise
        return self._manifest.get(prefix)
