"""
Workbook structure error classifications.

These exceptions represent a report that does not have the shape the scanner
needs. They are raised before any quote is fetched and are not recoverable.
"""

from typing import Optional, Dict, Any


class SheetStructureError(Exception):
    """Base class for workbook and sheet layout failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class HeaderNotFoundError(SheetStructureError):
    """A required column header is not present in the scanned header range."""

    def __init__(self, message: str, label: Optional[str] = None,
                 match_mode: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.label = label
        self.match_mode = match_mode


class SheetNotFoundError(SheetStructureError):
    """The workbook has no sheet with the configured name."""

    def __init__(self, message: str, sheet_name: Optional[str] = None,
                 available_sheets: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.sheet_name = sheet_name
        self.available_sheets = available_sheets or []


class WorkbookLoadError(SheetStructureError):
    """The workbook file is missing or cannot be parsed."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
