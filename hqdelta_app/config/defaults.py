"""Default configuration parameters for the report price delta check."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SelectionCriteria:
    """Row qualification thresholds for the report scan."""
    min_si_criteria: float = 8                       # Inclusive lower bound on the SI criteria column
    undervalued_flag: str = "U"                      # Exact value marking an undervalued row


@dataclass(frozen=True)
class ReportColumns:
    """Header labels used to locate the report columns."""
    symbol: str = "Symbol"                           # Exact match
    share_price: str = "Share Price"                 # Exact match
    undervalued: str = "undervalued"                 # Substring match
    si_criteria: str = "SI Criteria"                 # Substring match


@dataclass(frozen=True)
class SheetParams:
    """Workbook location parameters."""
    xlsx_path: Optional[str] = None
    sheet_name: str = "USA Stocks"


@dataclass(frozen=True)
class QuoteApiParams:
    """Remote batch quote API parameters."""
    base_url: str = "https://sandbox.iexapis.com/stable"
    token: Optional[str] = None
    batch_size: int = 100
    max_concurrency: int = 4
    timeout_seconds: Optional[float] = 30.0


@dataclass(frozen=True)
class ReportParams:
    """Console report parameters."""
    currency: str = "$"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    selection: SelectionCriteria
    columns: ReportColumns
    sheet: SheetParams
    quotes: QuoteApiParams
    report: ReportParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        selection=SelectionCriteria(),
        columns=ReportColumns(),
        sheet=SheetParams(),
        quotes=QuoteApiParams(),
        report=ReportParams(),
    )
