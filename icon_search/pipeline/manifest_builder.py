"""Build the icon manifest from an installed react-icons package.

react-icons ships one directory per library, each with an ``index.d.ts``
that declares every exported icon::

    export declare const FaUser: IconType;

The manifest keeps those names per library prefix, in declaration order,
which is the order the catalog lists and searches them in.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from icon_search.models.entities import LibraryInfo
from icon_search.models.libraries import ICON_LIBRARIES
from icon_search.utils.logger import get_logger

logger = get_logger(__name__)

DECLARATION_FILE = "index.d.ts"
EXPORT_PATTERN = re.compile(r"^\s*export\s+declare\s+const\s+([A-Za-z_$][\w$]*)\b", re.MULTILINE)


def read_declared_exports(path: Path) -> list[str]:
    """Exported constant names of one declaration file, first occurrence wins"""
    text = path.read_text(encoding="utf-8")
    return list(dict.fromkeys(EXPORT_PATTERN.findall(text)))


def collect_manifest(
    react_icons_dir: Path,
    libraries: Optional[Iterable[LibraryInfo]] = None,
) -> dict[str, list[str]]:
    """Names per library prefix for every library installed under `react_icons_dir`

    Libraries without a declaration file are skipped with a warning, so the
    manifest only lists what the installed react-icons version provides.
    """
    root = Path(react_icons_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"react-icons directory not found: {root}")

    manifest: dict[str, list[str]] = {}
    for library in libraries if libraries is not None else ICON_LIBRARIES:
        path = root / library.prefix / DECLARATION_FILE
        if not path.is_file():
            logger.warning(f"No {DECLARATION_FILE} for library '{library.prefix}' under {root}")
            continue

        names = read_declared_exports(path)
        if not names:
            logger.warning(f"{path} declares no exports")
            continue

        manifest[library.prefix] = names
        logger.info(f"{library.prefix}: {len(names)} icons (seed table says {library.total_icons})")

    return manifest


def dump_manifest(manifest: dict[str, list[str]]) -> str:
    """JSON text with one library per line"""
    lines = [f"  {json.dumps(prefix)}: {json.dumps(names)}" for prefix, names in manifest.items()]
    return "{\n" + ",\n".join(lines) + "\n}\n"


def write_manifest(manifest: dict[str, list[str]], path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_manifest(manifest), encoding="utf-8")
    logger.info(f"Wrote {path} ({len(manifest)} libraries)")
