"""
HQ Delta - High Quality Stock Price Delta Checker

Scans a spreadsheet stock report for undervalued, high short-interest
candidates, fetches their current quotes in batches and reports how far
each price has moved since the report was published.
"""

__version__ = "0.1.0"
__author__ = "HQ Delta Team"
