"""
Logging configuration and utilities for HQ Delta.
"""
from .config import configure_logging, get_fetch_logger, get_logger, log_symbol_unavailable

__all__ = ["configure_logging", "get_logger", "get_fetch_logger", "log_symbol_unavailable"]
