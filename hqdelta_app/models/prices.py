"""Data models for report and current prices"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

# Ticker symbol (case-sensitive) -> price, in insertion order
PriceList = Mapping[str, float]


def freeze_prices(prices: dict[str, float]) -> PriceList:
    """Wrap a finished price dict in a read-only view."""
    return MappingProxyType(dict(prices))


@dataclass(frozen=True)
class FetchResult:
    """Merged current prices plus the symbols no quote was returned for"""
    prices: PriceList = field(default_factory=lambda: freeze_prices({}))
    unavailable: tuple[str, ...] = ()
    batch_count: int = 0


@dataclass(frozen=True)
class DeltaRow:
    """Report price against current price for one symbol"""
    symbol: str
    report_price: float
    current_price: Optional[float] = None
    percent_delta: Optional[float] = None  # None when there is nothing to compare

    @property
    def has_current_price(self) -> bool:
        return self.current_price is not None

    @property
    def cheaper_now(self) -> bool:
        """True when the stock trades below its report price"""
        return self.current_price is not None and self.current_price < self.report_price
