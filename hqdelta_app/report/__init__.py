"""Report extraction and price delta rendering."""

from .deltas import build_delta_rows, print_deltas, render_deltas
from .extractor import describe_criteria, extract_qualifying_prices

__all__ = [
    "build_delta_rows",
    "print_deltas",
    "render_deltas",
    "describe_criteria",
    "extract_qualifying_prices",
]
