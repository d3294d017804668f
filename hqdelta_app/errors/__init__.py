"""
Error classification for report scanning and quote fetching.

Structural problems with the workbook and failed remote batches abort the
run; a single symbol missing from a quote response only degrades it.
"""

from .sheet_structure import (
    SheetStructureError,
    HeaderNotFoundError,
    SheetNotFoundError,
    WorkbookLoadError,
)
from .remote import (
    RemoteBatchError,
    SymbolUnavailableError,
)
from .configuration import ConfigurationError

__all__ = [
    # Sheet structure errors
    "SheetStructureError",
    "HeaderNotFoundError",
    "SheetNotFoundError",
    "WorkbookLoadError",
    # Remote quote errors
    "RemoteBatchError",
    "SymbolUnavailableError",
    # Configuration
    "ConfigurationError",
]
