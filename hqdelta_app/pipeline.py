"""
Main price delta pipeline coordinator.

Runs the stages in order: report sheet scan, batched current price fetch,
delta table output.
"""

import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

import structlog

from .config.defaults import DefaultConfig
from .errors import WorkbookLoadError
from .models import DeltaRow, FetchResult, PriceList
from .quotes.client import IexQuoteClient
from .quotes.fetcher import BatchedPriceFetcher
from .report.deltas import build_delta_rows, render_deltas
from .report.extractor import describe_criteria, extract_qualifying_prices
from .sheet.accessor import SheetAccessor
from .sheet.workbook import load_sheet

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Outputs of one pipeline run."""
    report_prices: PriceList
    fetch: FetchResult
    rows: list[DeltaRow] = field(default_factory=list)


class PriceDeltaPipeline:
    """
    Coordinator for the report price delta check.

    Report Sheet -> Qualifying Rows -> Batched Quotes -> Delta Table
    """

    def __init__(
        self,
        config: DefaultConfig,
        client: Optional[IexQuoteClient] = None,
        stream: Optional[TextIO] = None
    ) -> None:
        self.config = config
        self.client = client or IexQuoteClient(config.quotes)
        self.fetcher = BatchedPriceFetcher(
            self.client,
            batch_size=config.quotes.batch_size,
            max_concurrency=config.quotes.max_concurrency,
        )
        self.stream = stream or sys.stdout

    def run(self, sheet: Optional[SheetAccessor] = None) -> PipelineResult:
        """
        Run all stages and print the delta table.

        ``sheet`` replaces loading the configured workbook.

        Raises:
            SheetStructureError: the workbook or a required header is missing
            RemoteBatchError: a quote batch failed
        """
        self._echo(describe_criteria(self.config.selection))

        self._echo("Fetching Report Prices from XLSX File...")
        if sheet is None:
            if not self.config.sheet.xlsx_path:
                raise WorkbookLoadError("No workbook path configured")
            sheet = load_sheet(self.config.sheet.xlsx_path, self.config.sheet.sheet_name)
        report_prices = extract_qualifying_prices(sheet, self.config.selection, self.config.columns)

        self._echo("Fetching Current Prices...")
        fetch = self.fetcher.fetch_current_prices(list(report_prices))

        for line in render_deltas(report_prices, fetch.prices, self.config.report.currency):
            self._echo(line)

        rows = build_delta_rows(report_prices, fetch.prices)
        logger.info(
            "Price delta check complete",
            report_symbols=len(report_prices),
            current_prices=len(fetch.prices),
            cheaper=sum(1 for row in rows if row.cheaper_now),
            without_current_data=sum(1 for row in rows if not row.has_current_price),
        )
        return PipelineResult(report_prices=report_prices, fetch=fetch, rows=rows)

    def _echo(self, line: str) -> None:
        print(line, file=self.stream, flush=True)
