"""CLI entry point for mockevm.

Usage::

    python -m mockevm --csv public/assets/CandidateNameData.csv
    python -m mockevm --search Laurea
    python -m mockevm --export candidates_tidy.csv
"""

from __future__ import annotations

import argparse
import logging
import sys

import orjson

from mockevm.cache import TimedCache
from mockevm.errors import DataUnavailable
from mockevm.export import export_candidates
from mockevm.lookup import LookupService
from mockevm.models import CACHE_TTL_S, CANDIDATES_CSV, DEFAULT_HOST, DEFAULT_PORT
from mockevm.store import CandidateStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the mockevm CLI."""
    parser = argparse.ArgumentParser(
        prog="mockevm",
        description="Serve and inspect candidate data for the mock voting machine.",
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=CANDIDATES_CSV,
        help=f"Candidate source file (default: {CANDIDATES_CSV})",
    )
    parser.add_argument(
        "--ttl",
        type=float,
        default=CACHE_TTL_S,
        help=f"Cache freshness window in seconds (default: {CACHE_TTL_S:.0f})",
    )
    parser.add_argument("--host", type=str, default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--search",
        type=str,
        default=None,
        help="Print matching candidates as JSON and exit",
    )
    mode.add_argument(
        "--export",
        type=str,
        default=None,
        metavar="OUT",
        help="Write the parsed candidate set to a tidy CSV and exit",
    )
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and run the requested mode.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    store = CandidateStore(args.csv, TimedCache(ttl_s=args.ttl))
    service = LookupService(store)

    try:
        if args.search is not None:
            result = service.list(args.search)
            sys.stdout.write(
                orjson.dumps(result.to_dict(), option=orjson.OPT_INDENT_2).decode()
            )
            sys.stdout.write("\n")
            return 0
        if args.export is not None:
            records, _ = store.get_candidates()
            export_candidates(records, args.export)
            return 0
    except DataUnavailable as exc:
        logger.error("%s", exc)
        return 1

    from mockevm.web import create_app

    create_app(service).run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
