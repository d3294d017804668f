"""
Data models shared across stages.

Price lists and delta rows are built once and then treated as immutable.
"""

from .prices import DeltaRow, FetchResult, PriceList, freeze_prices

__all__ = ["DeltaRow", "FetchResult", "PriceList", "freeze_prices"]
