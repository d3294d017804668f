"""
Report price vs. current price delta table.
"""

import sys
from typing import Optional, Sequence, TextIO

from ..models import DeltaRow, PriceList

REPORT_HEADER = "High Quality Stock Price Deltas:"
CHEAPER_MARKER = "**CHEAPER**"
NO_PRICE = "n/a"
NO_DATA_MARKER = "(no current data)"
ARROW = "->"
COLUMN_SEPARATOR = "  "
LEFT_MARGIN = "  "


def percent_delta(report_price: float, current_price: Optional[float]) -> Optional[float]:
    """Signed percentage move from report price to current price.

    Negative when the stock is cheaper now. ``None`` when there is no current
    price or the report price is zero.
    """
    if current_price is None or report_price == 0:
        return None
    return (current_price - report_price) / report_price * 100


def build_delta_rows(report_prices: PriceList, current_prices: PriceList) -> list[DeltaRow]:
    """Pair every report symbol with its current price, in report order."""
    rows = []
    for symbol, report_price in report_prices.items():
        current_price = current_prices.get(symbol)
        rows.append(DeltaRow(
            symbol=symbol,
            report_price=report_price,
            current_price=current_price,
            percent_delta=percent_delta(report_price, current_price),
        ))
    return rows


def format_delta_row(row: DeltaRow, currency: str = "$") -> tuple[str, ...]:
    """Render one delta row as its six table cells."""
    if row.current_price is None:
        current, delta = NO_PRICE, NO_DATA_MARKER
    else:
        current = f"{currency}{row.current_price:.2f}"
        if row.percent_delta is None:
            delta = f"({NO_PRICE})"
        else:
            sign = "+" if row.percent_delta >= 0 else ""
            delta = f"({sign}{row.percent_delta:.2f}%)"

    return (
        row.symbol,
        f"{currency}{row.report_price:.2f}",
        ARROW,
        current,
        delta,
        CHEAPER_MARKER if row.cheaper_now else "",
    )


def align_columns(rows: Sequence[Sequence[str]]) -> list[str]:
    """Pad each column to its widest cell and join with two spaces."""
    if not rows:
        return []

    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    return [
        LEFT_MARGIN + COLUMN_SEPARATOR.join(cell.ljust(width) for cell, width in zip(row, widths))
        for row in rows
    ]


def render_deltas(report_prices: PriceList, current_prices: PriceList, currency: str = "$") -> list[str]:
    """Full console block: blank line, header, aligned rows, blank line."""
    cells = [format_delta_row(row, currency) for row in build_delta_rows(report_prices, current_prices)]
    return ["", REPORT_HEADER, *align_columns(cells), ""]


def print_deltas(
    report_prices: PriceList,
    current_prices: PriceList,
    currency: str = "$",
    stream: Optional[TextIO] = None
) -> None:
    """Print the delta block to ``stream`` (stdout by default)."""
    stream = stream or sys.stdout
    for line in render_deltas(report_prices, current_prices, currency):
        print(line, file=stream, flush=True)
