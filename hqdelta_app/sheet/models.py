"""
Typed cell values read from a report sheet.

Raw workbook values arrive untyped; they are classified once on the way in so
callers can match on ``Absent``, ``Text`` or ``Number`` instead of probing
Python types at every use site.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Absent:
    """Empty or missing cell."""


@dataclass(frozen=True)
class Text:
    """String cell."""
    value: str


@dataclass(frozen=True)
class Number:
    """Numeric cell."""
    value: float


CellValue = Union[Absent, Text, Number]

ABSENT = Absent()


def classify(raw: Any) -> CellValue:
    """Convert a raw workbook value into a typed cell value.

    ``None`` is absent, ints and floats are numbers (booleans are not) and
    strings are text. Anything else (dates, booleans) is kept as its text form.
    """
    if raw is None:
        return ABSENT
    if isinstance(raw, bool):
        return Text(str(raw))
    if isinstance(raw, (int, float)):
        return Number(float(raw))
    if isinstance(raw, str):
        return Text(raw)
    return Text(str(raw))


def as_number(value: CellValue) -> Optional[float]:
    """Numeric reading of a cell: numbers as-is, numeric text parsed."""
    if isinstance(value, Number):
        return value.value
    if isinstance(value, Text):
        cleaned = value.value.strip().replace(",", "").lstrip("$")
        try:
            number = float(cleaned)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


@dataclass(frozen=True)
class Cell:
    """Cell coordinate (0-based) with its typed value."""
    row: int
    column: int
    value: CellValue

    @property
    def is_absent(self) -> bool:
        return isinstance(self.value, Absent)
