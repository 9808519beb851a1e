"""Command-line entry point for articleflow."""

import argparse
import asyncio

from articleflow import __version__
from articleflow.approaches import APPROACHES
from articleflow.config import get_settings
from articleflow.models import Article
from articleflow.utils.logging import get_logger, setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="articleflow",
        description="Save a markdown article to a mock store using one of six async approaches.",
    )
    parser.add_argument(
        "approach",
        nargs="?",
        choices=list(APPROACHES),
        help="Approach to run. Without one, the available approaches are listed.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(approach: str) -> Article | None:
    """Run a single approach to completion on a fresh event loop."""
    return asyncio.run(APPROACHES[approach]())


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Failures are reported in the log only; the exit status is always 0.
    """
    args = create_parser().parse_args(argv)

    if args.approach is None:
        print("Pick an approach to run:")
        for name in APPROACHES:
            print(f"  {name}")
        return 0

    settings = get_settings()
    setup_logging(settings.log_level, json_logs=settings.json_logs)
    logger = get_logger(__name__)
    logger.info("articleflow starting", version=__version__, approach=args.approach)

    run(args.approach)
    return 0
