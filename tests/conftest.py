"""Pytest configuration and shared fixtures."""

import threading
from typing import Any, Dict, List, Optional, Sequence

import pytest

from hqdelta_app.config.defaults import (
    DefaultConfig,
    QuoteApiParams,
    ReportColumns,
    ReportParams,
    SelectionCriteria,
    SheetParams,
)
from hqdelta_app.errors import RemoteBatchError
from hqdelta_app.sheet.accessor import SheetAccessor


REPORT_HEADER = ["Symbol", "Share Price", "% undervalued", "SI Criteria"]


class FakeQuoteClient:
    """In-memory stand-in for the batch quote client.

    ``quotes`` maps symbol -> latest price; symbols not in it are left out of
    the response. A batch containing any symbol in ``fail_on`` raises.
    """

    def __init__(self, quotes: Optional[Dict[str, Any]] = None, fail_on: Sequence[str] = ()):
        self.quotes = quotes or {}
        self.fail_on = set(fail_on)
        self.calls: List[tuple] = []
        self._lock = threading.Lock()

    def fetch_batch(self, symbols: Sequence[str]) -> Dict[str, Any]:
        with self._lock:
            self.calls.append(tuple(symbols))
        if self.fail_on.intersection(symbols):
            raise RemoteBatchError("Network error: connection reset", symbols=symbols)
        return {
            symbol: {"quote": {"symbol": symbol, "latestPrice": self.quotes[symbol]}}
            for symbol in symbols
            if symbol in self.quotes
        }


@pytest.fixture
def report_rows() -> List[list]:
    """Report grid: header plus mixed qualifying and non-qualifying rows."""
    return [
        REPORT_HEADER,
        ["AAA", 50.0, "U", 10],
        ["BBB", 20.0, "O", 9],
        ["CCC", 12.5, "U", 8],
        ["DDD", 30.0, "U", 7],
        ["EEE", None, "U", 12],
    ]


@pytest.fixture
def report_sheet(report_rows) -> SheetAccessor:
    """Report rows wrapped in a sheet accessor."""
    return SheetAccessor.from_rows(report_rows, name="USA Stocks")


@pytest.fixture
def criteria() -> SelectionCriteria:
    """Default selection criteria (flag 'U', SI criteria >= 8)."""
    return SelectionCriteria()


@pytest.fixture
def app_config(tmp_path) -> DefaultConfig:
    """Complete configuration pointing at a workbook under tmp_path."""
    return DefaultConfig(
        selection=SelectionCriteria(),
        columns=ReportColumns(),
        sheet=SheetParams(xlsx_path=str(tmp_path / "report.xlsx")),
        quotes=QuoteApiParams(token="test-token"),
        report=ReportParams(),
    )


@pytest.fixture
def fake_client_factory():
    """Build FakeQuoteClient instances."""
    return FakeQuoteClient
