"""Batched current price lookup against the remote quote API."""

from .batching import BatchPlan, plan_batches
from .client import IexQuoteClient
from .fetcher import BatchedPriceFetcher, fetch_current_prices

__all__ = [
    "BatchPlan",
    "plan_batches",
    "IexQuoteClient",
    "BatchedPriceFetcher",
    "fetch_current_prices",
]
