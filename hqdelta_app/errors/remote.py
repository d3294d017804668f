"""
Remote quote lookup error classifications.
"""

from typing import Optional, Dict, Any, Sequence


class RemoteBatchError(Exception):
    """A batch quote request failed at the transport or payload level.

    Any failed batch aborts the whole fetch; no partial price list is returned.
    """

    def __init__(self, message: str, symbols: Optional[Sequence[str]] = None,
                 batch_index: Optional[int] = None, failed_batches: int = 1,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.symbols = tuple(symbols or ())
        self.batch_index = batch_index
        self.failed_batches = failed_batches
        self.context = context or {}
        self.recoverable = False


class SymbolUnavailableError(Exception):
    """A requested symbol has no usable quote in its batch response.

    Handled inside the batch: the symbol is left out of the current prices
    and the run continues.
    """

    def __init__(self, message: str, symbol: Optional[str] = None,
                 batch_index: Optional[int] = None):
        super().__init__(message)
        self.symbol = symbol
        self.batch_index = batch_index
        self.recoverable = True
        self.allows_degradation = True
