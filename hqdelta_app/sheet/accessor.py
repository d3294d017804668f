"""
Read-only accessor over a 2-D grid of report cells.
"""

from typing import Any, Iterable, Optional

from openpyxl.worksheet.worksheet import Worksheet

from .models import ABSENT, Cell, CellValue, classify


class SheetAccessor:
    """
    Immutable snapshot of a sheet with coordinate lookup.

    Coordinates are 0-based; row 0 is the header row. Coordinates outside the
    grid resolve to ``Absent`` rather than raising, since scans routinely probe
    past the last populated row or column.
    """

    def __init__(self, grid: tuple[tuple[CellValue, ...], ...], name: Optional[str] = None) -> None:
        self._grid = grid
        self.name = name

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]], name: Optional[str] = None) -> "SheetAccessor":
        """Build an accessor from raw row values (``None`` for empty cells)."""
        grid = tuple(tuple(classify(raw) for raw in row) for row in rows)
        return cls(grid, name=name)

    @classmethod
    def from_worksheet(cls, worksheet: Worksheet) -> "SheetAccessor":
        """Snapshot an openpyxl worksheet (cached values, not formulas)."""
        return cls.from_rows(worksheet.iter_rows(values_only=True), name=worksheet.title)

    @property
    def n_rows(self) -> int:
        return len(self._grid)

    @property
    def n_columns(self) -> int:
        return max((len(row) for row in self._grid), default=0)

    def value_at(self, row: int, column: int) -> CellValue:
        """Typed value at (row, column), ``Absent`` when out of range."""
        if row < 0 or column < 0 or row >= len(self._grid):
            return ABSENT
        cells = self._grid[row]
        if column >= len(cells):
            return ABSENT
        return cells[column]

    def cell(self, row: int, column: int) -> Cell:
        return Cell(row=row, column=column, value=self.value_at(row, column))

    def __repr__(self) -> str:
        return f"SheetAccessor(name={self.name!r}, rows={self.n_rows}, columns={self.n_columns})"
