"""
Qualifying row extraction from the stock report sheet.

Walks the data rows below the header until the symbol column runs out and
collects the report price of every undervalued stock that meets the short
interest criteria threshold.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from ..config.defaults import ReportColumns, SelectionCriteria
from ..models import PriceList, freeze_prices
from ..sheet.accessor import SheetAccessor
from ..sheet.headers import MatchMode, resolve_column
from ..sheet.models import Absent, Text, as_number

logger = structlog.get_logger(__name__)

FIRST_DATA_ROW = 1


@dataclass(frozen=True)
class ColumnLayout:
    """Resolved column indices for one report sheet."""
    symbol: int
    share_price: int
    undervalued: int
    si_criteria: int


def resolve_layout(sheet: SheetAccessor, columns: Optional[ReportColumns] = None) -> ColumnLayout:
    """Locate all required report columns; any missing header aborts."""
    columns = columns or ReportColumns()
    return ColumnLayout(
        symbol=resolve_column(sheet, columns.symbol, MatchMode.EXACT),
        share_price=resolve_column(sheet, columns.share_price, MatchMode.EXACT),
        undervalued=resolve_column(sheet, columns.undervalued, MatchMode.CONTAINS),
        si_criteria=resolve_column(sheet, columns.si_criteria, MatchMode.CONTAINS),
    )


def describe_criteria(criteria: SelectionCriteria) -> str:
    """One-line summary of the selection criteria for the console."""
    threshold = criteria.min_si_criteria
    if isinstance(threshold, float) and threshold.is_integer():
        threshold = int(threshold)
    return f"High Quality Stocks Criteria: UNDERVALUED, {threshold}+ SI CRITERIA"


def extract_qualifying_prices(
    sheet: SheetAccessor,
    criteria: SelectionCriteria,
    columns: Optional[ReportColumns] = None
) -> PriceList:
    """
    Collect ``symbol -> report price`` for every qualifying row.

    A row qualifies when its symbol cell is text, its undervalued flag equals
    ``criteria.undervalued_flag`` exactly and its SI criteria value is at least
    ``criteria.min_si_criteria``. Rows missing a price, flag or criteria cell
    are skipped. The scan stops at the first row whose symbol cell is empty.
    A symbol that qualifies on several rows keeps the price of the last one.

    Raises:
        HeaderNotFoundError: a required column header is missing
    """
    layout = resolve_layout(sheet, columns)
    prices: dict[str, float] = {}

    row = FIRST_DATA_ROW
    while not isinstance(sheet.value_at(row, layout.symbol), Absent):
        symbol_value = sheet.value_at(row, layout.symbol)
        price_value = sheet.value_at(row, layout.share_price)
        flag_value = sheet.value_at(row, layout.undervalued)
        criteria_value = sheet.value_at(row, layout.si_criteria)

        if any(isinstance(v, Absent) for v in (price_value, flag_value, criteria_value)):
            logger.debug("Skipping incomplete report row", row=row)
        elif _qualifies(symbol_value, flag_value, criteria_value, criteria):
            symbol = symbol_value.value
            price = as_number(price_value)
            if price is None:
                logger.warning(
                    "Skipping qualifying row with unreadable share price",
                    row=row,
                    symbol=symbol,
                    share_price=getattr(price_value, "value", None),
                )
            else:
                if symbol in prices:
                    logger.debug(
                        "Duplicate symbol in report, later row wins",
                        row=row,
                        symbol=symbol,
                        previous_price=prices[symbol],
                        price=price,
                    )
                prices[symbol] = price

        row += 1

    logger.info(
        "Report rows scanned",
        rows_scanned=row - FIRST_DATA_ROW,
        qualifying_symbols=len(prices),
    )
    return freeze_prices(prices)


def _qualifies(symbol_value, flag_value, criteria_value, criteria: SelectionCriteria) -> bool:
    if not isinstance(symbol_value, Text):
        return False
    if not (isinstance(flag_value, Text) and flag_value.value == criteria.undervalued_flag):
        return False
    si_criteria = as_number(criteria_value)
    return si_criteria is not None and si_criteria >= criteria.min_si_criteria
