"""Regenerate the bundled icon manifest from an installed react-icons package.

Usage examples
  # 1) From a local install (npm install react-icons)
  python3 scripts/build_manifest.py --react-icons node_modules/react-icons

  # 2) Write somewhere else and point SYMBOL_MANIFEST_PATH at it
  python3 scripts/build_manifest.py --react-icons node_modules/react-icons --output /tmp/icons.json

  # 3) Only some libraries
  python3 scripts/build_manifest.py --react-icons node_modules/react-icons --prefix fa --prefix md
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from icon_search.core.manifest_source import BUNDLED_MANIFEST_PATH
from icon_search.models.libraries import ICON_LIBRARIES
from icon_search.pipeline.manifest_builder import collect_manifest, write_manifest


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build the icon manifest from react-icons declaration files")
    p.add_argument(
        "--react-icons",
        type=Path,
        default=Path("node_modules/react-icons"),
        help="react-icons package directory (default: node_modules/react-icons)",
    )
    p.add_argument(
        "--output",
        type=Path,
        default=BUNDLED_MANIFEST_PATH,
        help="manifest file to write (default: the bundled manifest)",
    )
    p.add_argument(
        "--prefix",
        action="append",
        dest="prefixes",
        help="library prefix to include (repeatable; default: every known library)",
    )
    return p.parse_args()


def main() -> int:
    args = _parse_args()

    libraries = ICON_LIBRARIES
    if args.prefixes:
        unknown = set(args.prefixes) - {lib.prefix for lib in ICON_LIBRARIES}
        if unknown:
            print(f"Unknown library prefixes: {', '.join(sorted(unknown))}")
            return 2
        libraries = tuple(lib for lib in ICON_LIBRARIES if lib.prefix in args.prefixes)

    try:
        manifest = collect_manifest(args.react_icons, libraries)
    except FileNotFoundError as e:
        print(f"❌ {e}")
        return 1

    if not manifest:
        print(f"❌ No icon declarations found under {args.react_icons}")
        return 1

    write_manifest(manifest, args.output)
    print(f"✅ Wrote {sum(len(n) for n in manifest.values())} icons in {len(manifest)} libraries to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
