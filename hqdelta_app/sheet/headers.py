"""
Header-based column lookup.

Report layouts drift between editions, so columns are located by their
header text in row 0 instead of by fixed position.
"""

from enum import Enum

from ..errors import HeaderNotFoundError
from .accessor import SheetAccessor
from .models import Text

# Widest header row that is scanned
HEADER_SCAN_LIMIT = 100

HEADER_ROW = 0


class MatchMode(Enum):
    """How a header cell is compared with the requested label."""
    EXACT = "exact"
    CONTAINS = "contains"


def header_matches(header: str, label: str, match_mode: MatchMode) -> bool:
    if match_mode is MatchMode.EXACT:
        return header == label
    return label in header


def resolve_column(sheet: SheetAccessor, label: str, match_mode: MatchMode = MatchMode.EXACT) -> int:
    """
    Find the index of the first header column matching ``label``.

    Columns ``0..HEADER_SCAN_LIMIT-1`` of the header row are scanned in order;
    only text cells are considered.

    Raises:
        HeaderNotFoundError: no header in range matches
    """
    for column in range(HEADER_SCAN_LIMIT):
        value = sheet.value_at(HEADER_ROW, column)
        if isinstance(value, Text) and header_matches(value.value, label, match_mode):
            return column

    raise HeaderNotFoundError(
        f"cell value '{label}' not found in header",
        label=label,
        match_mode=match_mode.value,
        context={"sheet": sheet.name, "scan_limit": HEADER_SCAN_LIMIT},
    )
