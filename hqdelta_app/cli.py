"""
Command line entry point.

Usage:
    hqdelta [--config PATH] [--xlsx PATH] [--sheet NAME] [--token TOKEN]

Settings are layered: defaults, YAML config file, environment variables
(``XLSX_PATH``, ``IEX_CLOUD_BATCH_API_KEY``, ...) and finally the flags given
here.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

import structlog

from . import __version__
from .config.loader import ConfigLoader
from .errors import ConfigurationError, RemoteBatchError, SheetStructureError
from .logging.config import configure_logging
from .pipeline import PriceDeltaPipeline

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_SHEET_ERROR = 2
EXIT_REMOTE_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hqdelta",
        description="Compare report prices of undervalued, high SI criteria stocks with current quotes.",
    )
    parser.add_argument("--config", type=Path, help="YAML config file")
    parser.add_argument("--xlsx", help="Report workbook path (overrides XLSX_PATH)")
    parser.add_argument("--sheet", help="Report sheet name")
    parser.add_argument("--token", help="Quote API token (overrides IEX_CLOUD_BATCH_API_KEY)")
    parser.add_argument("--min-si-criteria", type=float, help="Minimum SI criteria score (inclusive)")
    parser.add_argument("--max-concurrency", type=int, help="Maximum quote batches in flight")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Translate command line flags into a config override mapping."""
    overrides: dict[str, dict[str, Any]] = {}

    def put(section: str, key: str, value: Any) -> None:
        if value is not None:
            overrides.setdefault(section, {})[key] = value

    put("sheet", "xlsx_path", args.xlsx)
    put("sheet", "sheet_name", args.sheet)
    put("quotes", "token", args.token)
    put("quotes", "max_concurrency", args.max_concurrency)
    put("selection", "min_si_criteria", args.min_si_criteria)
    return overrides


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.log_json)

    try:
        config = ConfigLoader.create(args.config).build_config(overrides_from_args(args))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        PriceDeltaPipeline(config).run()
    except SheetStructureError as e:
        logger.error("Report sheet is not usable", error=str(e), **e.context)
        print(f"Report error: {e}", file=sys.stderr)
        return EXIT_SHEET_ERROR
    except RemoteBatchError as e:
        logger.error("Current price fetch failed", error=str(e), failed_batches=e.failed_batches)
        print(f"Quote fetch error: {e}", file=sys.stderr)
        return EXIT_REMOTE_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
