from .entities import IconRecord, LibraryInfo
from .libraries import ICON_LIBRARIES

__all__ = ["IconRecord", "LibraryInfo", "ICON_LIBRARIES"]
