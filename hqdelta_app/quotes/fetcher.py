"""
Batched current price fetching.

Symbols are split into batches, every batch is requested concurrently on a
bounded thread pool, and the per-batch prices are merged once all batches
have settled. A symbol missing from its batch response is dropped with a
warning; a batch that fails outright fails the whole fetch.
"""

import math
from concurrent.futures import ALL_COMPLETED, ThreadPoolExecutor, wait
from typing import Any, Sequence

from ..errors import RemoteBatchError, SymbolUnavailableError
from ..logging.config import get_fetch_logger, log_symbol_unavailable
from ..models import FetchResult, freeze_prices
from .batching import DEFAULT_BATCH_SIZE, plan_batches
from .client import IexQuoteClient

logger = get_fetch_logger(__name__)

DEFAULT_MAX_CONCURRENCY = 4


def quote_price(response: dict[str, Any], symbol: str, batch_index: int = 0) -> float:
    """
    Latest price for ``symbol`` from a batch quote response.

    Raises:
        SymbolUnavailableError: no record, no quote or no usable latest price
    """
    record = response.get(symbol)
    quote = record.get("quote") if isinstance(record, dict) else None
    if not isinstance(quote, dict):
        raise SymbolUnavailableError("no quote in response", symbol=symbol, batch_index=batch_index)

    price = quote.get("latestPrice")
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise SymbolUnavailableError("quote has no latest price", symbol=symbol, batch_index=batch_index)
    if not math.isfinite(price) or price < 0:
        raise SymbolUnavailableError(f"invalid latest price {price!r}", symbol=symbol, batch_index=batch_index)

    return float(price)


def extract_batch_prices(
    response: dict[str, Any],
    symbols: Sequence[str],
    batch_index: int = 0
) -> tuple[dict[str, float], list[str]]:
    """Prices for the requested symbols of one batch, plus those without a quote."""
    prices: dict[str, float] = {}
    unavailable: list[str] = []

    for symbol in symbols:
        try:
            prices[symbol] = quote_price(response, symbol, batch_index)
        except SymbolUnavailableError as e:
            log_symbol_unavailable(logger, symbol, batch_index, str(e))
            unavailable.append(symbol)

    return prices, unavailable


class BatchedPriceFetcher:
    """
    Fan-out/fan-in current price lookup.

    ``max_concurrency`` caps the number of batch requests in flight.
    """

    def __init__(
        self,
        client: IexQuoteClient,
        batch_size: int = DEFAULT_BATCH_SIZE,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    ) -> None:
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be positive, got {max_concurrency}")
        self.client = client
        self.batch_size = batch_size
        self.max_concurrency = max_concurrency

    def fetch_current_prices(self, symbols: Sequence[str]) -> FetchResult:
        """
        Fetch current prices for ``symbols``.

        Returns only after every batch has completed.

        Raises:
            RemoteBatchError: at least one batch request failed
        """
        plan = plan_batches(symbols, self.batch_size)
        if not plan:
            return FetchResult()

        logger.info(
            "Fetching current prices",
            symbols=len(symbols),
            batches=len(plan),
            max_concurrency=self.max_concurrency,
        )

        workers = min(self.max_concurrency, len(plan))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="quote-batch") as executor:
            futures = [
                executor.submit(self._fetch_batch, index, batch)
                for index, batch in enumerate(plan)
            ]
            wait(futures, return_when=ALL_COMPLETED)

        failures = [future.exception() for future in futures if future.exception() is not None]
        if failures:
            first = failures[0]
            logger.error(
                "Quote batch failed",
                failed_batches=len(failures),
                batches=len(plan),
                batch_index=first.batch_index,
                error=str(first),
            )
            raise RemoteBatchError(
                f"{len(failures)} of {len(plan)} quote batches failed; first failure: {first}",
                symbols=first.symbols,
                batch_index=first.batch_index,
                failed_batches=len(failures),
                context=first.context,
            ) from first

        prices: dict[str, float] = {}
        unavailable: list[str] = []
        for future in futures:
            batch_prices, batch_unavailable = future.result()
            prices.update(batch_prices)
            unavailable.extend(batch_unavailable)

        logger.info(
            "Current prices fetched",
            fetched=len(prices),
            unavailable=len(unavailable),
        )
        return FetchResult(
            prices=freeze_prices(prices),
            unavailable=tuple(unavailable),
            batch_count=len(plan),
        )

    def _fetch_batch(self, batch_index: int, symbols: tuple[str, ...]) -> tuple[dict[str, float], list[str]]:
        try:
            response = self.client.fetch_batch(symbols)
        except RemoteBatchError as e:
            e.batch_index = batch_index
            raise
        except Exception as e:
            raise RemoteBatchError(
                f"Quote batch {batch_index} failed: {e}",
                symbols=symbols,
                batch_index=batch_index
            ) from e

        if not isinstance(response, dict):
            raise RemoteBatchError(
                f"Quote batch {batch_index} returned {type(response).__name__}, expected an object",
                symbols=symbols,
                batch_index=batch_index
            )

        return extract_batch_prices(response, symbols, batch_index)


def fetch_current_prices(
    symbols: Sequence[str],
    client: IexQuoteClient,
    batch_size: int = DEFAULT_BATCH_SIZE,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
) -> FetchResult:
    """Convenience wrapper around ``BatchedPriceFetcher``."""
    fetcher = BatchedPriceFetcher(client, batch_size=batch_size, max_concurrency=max_concurrency)
    return fetcher.fetch_current_prices(symbols)
