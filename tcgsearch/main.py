"""
tcgsearch — Application Entrypoint

Parses CLI flags, configures structlog, runs one card search and prints the
result as JSON on stdout. Diagnostics go to stderr.

Run via:
    tcgsearch --limit 5 --query 'name:pikachu'
    python -m tcgsearch
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, get_args

import structlog

from tcgsearch.config import LogLevel, settings
from tcgsearch.errors import CardSearchError
from tcgsearch.pipeline.pokemontcg import SearchParams, render_result, search_cards
from tcgsearch.utils.timing import timed

LOG_LEVELS = get_args(LogLevel)


# ---------------------------------------------------------------------------
# Structlog Configuration
# ---------------------------------------------------------------------------


def _configure_logging(log_level: str = "INFO") -> None:
    """
    Set up structured logging with JSON output on stderr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """
    level = getattr(logging, log_level.upper())

    # Configure stdlib logging first (for third-party libraries)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tcgsearch",
        description="Search the pokemontcg.io cards API and print the matches as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tcgsearch
  tcgsearch --limit 5 --query 'name:charizard' --order-by '-set.releaseDate'
""",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=settings.POKEMONTCG_BASE_URL,
        help="Base URL including protocol, without a trailing slash, that queries are made against.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=settings.DEFAULT_LIMIT,
        help=f"Number of results to return from the API (default: {settings.DEFAULT_LIMIT}).",
    )
    parser.add_argument(
        "--query",
        type=str,
        default=settings.DEFAULT_QUERY,
        help="Valid query string for the pokemontcg.io cards API.",
    )
    parser.add_argument(
        "--order-by",
        type=str,
        default=settings.DEFAULT_ORDER_BY,
        help=f"Valid sort parameter for the pokemontcg.io API (default: {settings.DEFAULT_ORDER_BY}).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=settings.LOG_LEVEL,
        choices=LOG_LEVELS,
        help="Diagnostic log level written to stderr (default: %(default)s).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run one search end to end.

    Returns:
        Process exit code: 0 on success, 1 on any pipeline failure.
    """
    args = parse_args(argv)
    _configure_logging(log_level=args.log_level)
    logger = structlog.get_logger(__name__)

    params = SearchParams(
        base_url=args.base_url,
        limit=args.limit,
        query=args.query,
        order_by=args.order_by,
    )

    with timed("main"):
        try:
            result = search_cards(params)
            output = render_result(result)
        except CardSearchError as e:
            logger.error(
                "tcgsearch_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return 1

    print(output)
    logger.info("tcgsearch_complete", card_count=len(result.data))
    return 0


def run() -> None:
    """Console-script entrypoint."""
    sys.exit(main())


if __name__ == "__main__":
    run()
