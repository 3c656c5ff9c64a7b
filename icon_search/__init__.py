"""Icon Search Service

Lookup and search over icon-library metadata and the icon symbols those
libraries export.
"""

__version__ = "0.1.0"
