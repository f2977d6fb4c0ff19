from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from pubsync.adapters.zotero import ZoteroFetcher
from pubsync.app import sync_publications
from pubsync.common.logging import configure_logging
from pubsync.config import get_paths_config, get_zotero_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid integer: {value}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"Must be a positive integer: {value}")
    return parsed


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export Zotero publications listed in the reference list",
    )
    parser.add_argument(
        "--input",
        type=str,
        help="Reference list CSV with a reportNumber column (defaults to config)",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Destination CSV for the publications export (defaults to config)",
    )
    parser.add_argument(
        "--group-id",
        type=str,
        help="Zotero group library id (defaults to config)",
    )
    parser.add_argument(
        "--collection-id",
        type=str,
        help="Optional Zotero collection id to restrict the fetch to",
    )
    parser.add_argument(
        "--limit",
        type=_positive_int,
        help="Maximum number of items to request (Zotero caps this at 100)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(list(argv))


def _build_fetcher(args: argparse.Namespace) -> ZoteroFetcher:
    config = get_zotero_config(
        group_id=args.group_id,
        collection_id=args.collection_id,
        fetch_limit=args.limit,
    )
    return ZoteroFetcher(config=config)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        paths = get_paths_config(input_file=parsed_args.input, output_file=parsed_args.output)
        source = _build_fetcher(parsed_args)
        sync_publications(paths=paths, source=source)
    except Exception:
        log.exception("Fatal error during publications sync")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
