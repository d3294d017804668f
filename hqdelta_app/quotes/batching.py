"""Symbol batch planning."""

from typing import Sequence

# Largest symbol list the batch quote endpoint accepts
DEFAULT_BATCH_SIZE = 100

BatchPlan = tuple[tuple[str, ...], ...]


def plan_batches(symbols: Sequence[str], batch_size: int = DEFAULT_BATCH_SIZE) -> BatchPlan:
    """Split symbols into consecutive groups of at most ``batch_size``, keeping order."""
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")

    symbols = tuple(symbols)
    return tuple(
        symbols[start:start + batch_size]
        for start in range(0, len(symbols), batch_size)
    )
