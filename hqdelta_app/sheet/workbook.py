"""Workbook loading via openpyxl."""

from pathlib import Path
from typing import Union
from zipfile import BadZipFile

import openpyxl
import structlog
from openpyxl.utils.exceptions import InvalidFileException

from ..errors import SheetNotFoundError, WorkbookLoadError
from .accessor import SheetAccessor

logger = structlog.get_logger(__name__)


def load_sheet(path: Union[str, Path], sheet_name: str) -> SheetAccessor:
    """
    Load one sheet of an ``.xlsx`` workbook into a ``SheetAccessor``.

    Formula cells yield their cached values. The workbook is closed once the
    sheet has been copied into memory.

    Raises:
        WorkbookLoadError: the file is missing or not a readable workbook
        SheetNotFoundError: the workbook has no sheet named ``sheet_name``
    """
    path = Path(path)
    if not path.is_file():
        raise WorkbookLoadError(f"Workbook not found: {path}", path=str(path))

    try:
        workbook = openpyxl.load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, OSError) as e:
        raise WorkbookLoadError(f"Could not read workbook {path}: {e}", path=str(path)) from e

    try:
        if sheet_name not in workbook.sheetnames:
            raise SheetNotFoundError(
                f"Sheet '{sheet_name}' not found in {path.name}",
                sheet_name=sheet_name,
                available_sheets=list(workbook.sheetnames),
                context={"path": str(path)},
            )
        sheet = SheetAccessor.from_worksheet(workbook[sheet_name])
    finally:
        workbook.close()

    logger.info(
        "Report sheet loaded",
        path=str(path),
        sheet_name=sheet_name,
        rows=sheet.n_rows,
        columns=sheet.n_columns,
    )
    return sheet
