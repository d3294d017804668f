"""
Spreadsheet access: typed cell values, grid accessor, workbook loading and
header-based column lookup.
"""

from .accessor import SheetAccessor
from .headers import HEADER_SCAN_LIMIT, MatchMode, resolve_column
from .models import Absent, Cell, CellValue, Number, Text, ABSENT

__all__ = [
    "SheetAccessor",
    "HEADER_SCAN_LIMIT",
    "MatchMode",
    "resolve_column",
    "Absent",
    "ABSENT",
    "Cell",
    "CellValue",
    "Number",
    "Text",
]
