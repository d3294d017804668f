"""Configuration error raised when settings fail validation."""

from typing import Any, Optional


class ConfigurationError(Exception):
    """Settings are missing or invalid; the run cannot start."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None):
        super().__init__(message)
        self.errors = errors or []
        self.recoverable = False
