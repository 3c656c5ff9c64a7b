"""Catalog entities.

Both records are immutable. `IconRecord.full_name` is computed from the
package and icon names on every access so it can never drift from them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field


class LibraryInfo(BaseModel):
    """One icon library of the catalog"""

    model_config = ConfigDict(frozen=True)

    prefix: str
    name: str
    description: str
    total_icons: int
    license: str
    url: str


class IconRecord(BaseModel):
    """One icon symbol exported by a library"""

    model_config = ConfigDict(frozen=True)

    package_name: str
    icon_name: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def full_name(self) -> str:
        return f"{self.package_name}/{self.icon_name}"
