"""Command-line entry point: ``basicstats <filename>``."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from basicstats.config import CLI_LOG_LEVEL
from basicstats.errors import AllocationError, EmptyInputError
from basicstats.observability.logging import setup_logging
from basicstats.report import format_report
from basicstats.services.ingest import read_values
from basicstats.services.stats import summarize

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="basicstats",
        usage="%(prog)s <filename>",
        description=(
            "Print mean, median, mode, population standard deviation and harmonic "
            "mean of the whitespace-separated numbers in a file."
        ),
    )
    parser.add_argument(
        "filename",
        help="Text file of numbers; reading stops at the first token that is not a number",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the file named on the command line and print its statistics.

    Returns the process exit status. A wrong argument count makes argparse
    print the usage line to stderr and exit with status 2.
    """
    args = build_parser().parse_args(argv)
    setup_logging(stream=sys.stderr, level=CLI_LOG_LEVEL)

    try:
        buffer = read_values(args.filename)
    except AllocationError:
        print("Memory allocation failed for data array.", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error opening file: {exc.strerror or exc}", file=sys.stderr)
        return 1

    try:
        buffer.sort()
        summary = summarize(buffer)
    except EmptyInputError:
        print(f"No numeric values found in {args.filename}.", file=sys.stderr)
        return 1

    logger.info("Summarized %d values from %s", summary["count"], args.filename)
    sys.stdout.write(format_report(summary))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
