"""
Command-line interface for pad2feed.

Usage:
    pad2feed                                   # Current episode from the index pad
    pad2feed -l https://pad.ccc-p.org/CiR_2024-03-12
    pad2feed -o ""                             # Print the record instead of appending
    pad2feed -o ../site/content.yaml -v        # Debug logging
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from pad2feed.config import RunOptions, get_config
from pad2feed.errors import Pad2FeedError
from pad2feed.output.writer import write_record
from pad2feed.pipeline import run_pipeline

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser(default_output: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pad2feed",
        description="Create a podcast feed entry from a Chaos im Radio episode pad",
    )
    parser.add_argument(
        "-o",
        dest="output",
        default=default_output,
        help="YAML file to append the entry to; empty prints to stdout "
             f"(default: {default_output})",
    )
    parser.add_argument(
        "-l",
        dest="link",
        default="",
        help="Link to the pad entry to parse (default: first link on the index pad)",
    )
    parser.add_argument(
        "-v",
        dest="verbose",
        action="store_true",
        default=False,
        help="Verbose output",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: wait indefinitely)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = get_config()
    except Pad2FeedError as exc:
        _fail(exc)

    args = build_parser(config.output_path).parse_args(argv)

    options = RunOptions(
        output_path=Path(args.output) if args.output else None,
        episode_url=args.link or None,
        verbose=args.verbose,
    )
    setup_logging(options.verbose)

    if args.timeout is not None:
        config = config.model_copy(update={"request_timeout": args.timeout})

    try:
        record = run_pipeline(options, config)
        write_record(record, options.output_path)
    except Pad2FeedError as exc:
        _fail(exc)

    return 0


def _fail(exc: Pad2FeedError) -> NoReturn:
    logger.debug("Run failed", exc_info=True)
    print(f"ERROR: {exc}", file=sys.stderr)
    sys.exit(1)


if __name__ == "__main__":
    main()
