"""Command-line entry point."""

import logging
import os
import sys
from typing import List

from dotenv import load_dotenv

from .config import parse_config
from .exceptions import GitReportCardError
from .output import OutputFormatter
from .report import build_summary


def configure_logging():
    """Configure root logging from LOG_LEVEL (default WARNING)."""
    log_level = os.environ.get('LOG_LEVEL', 'WARNING').upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p'
    )


def main(argv: List[str] = None) -> int:
    """Main entry point for the script.

    Returns:
        Process exit code (0 on success, 1 on a fatal report error)
    """
    # Load LOG_LEVEL from a .env file if it exists
    load_dotenv()
    configure_logging()

    config = parse_config(argv)
    logging.info(f"Building report for author: {config.author}")

    try:
        summary = build_summary(config)
    except GitReportCardError as e:
        logging.debug("Report aborted", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    OutputFormatter(color=config.color).print_summary(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
