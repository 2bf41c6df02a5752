"""Command-line interface for magazine-catalog."""

import argparse
import logging
import sys
from datetime import datetime

from magazine_catalog.demo import Demo, DemoReport
from schemas import ModelError
from schemas.records import MagazineRecord

DEFAULT_CIRCULATION = 5000
DEFAULT_RATING_THRESHOLD = 4.0
DEFAULT_TITLE_KEYWORD = "Article"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def print_report(report: DemoReport, threshold: float, keyword: str) -> None:
    """Write a human-readable demo report to stdout."""
    edition, twin = report.edition, report.twin
    print(f"edition1 is edition2: {edition is twin}")
    print(f"edition1 equals edition2: {edition == twin}")
    print(f"Hash edition1: {hash(edition)}")
    print(f"Hash edition2: {hash(twin)}")
    if report.rejected_circulation is not None:
        print(f"Exception: {report.rejected_circulation}")

    print("\nMagazine Data:")
    print(report.magazine_data)

    print(f"\nQuality of Magazine (Edition): {report.quality}")

    print("\nOriginal Magazine Data:")
    print(report.magazine)
    print("\nDeep Copy of Magazine Data:")
    print(report.copy)

    sections = [
        (f"Articles with Rating > {threshold}:", report.rated_articles),
        (f"Articles with Title containing '{keyword}':", report.matching_articles),
        ("Articles by Editors:", report.articles_by_editors),
    ]
    for heading, articles in sections:
        print(f"\n{heading}")
        for article in articles:
            print(f"{article.title} ({article.rating})")

    for heading, editors in [
        ("Editors with Articles:", report.editors_with_articles),
        ("Editors without Articles:", report.editors_without_articles),
    ]:
        print(f"\n{heading}")
        for editor in editors:
            print(editor.name)


def run_demo(args: argparse.Namespace) -> int:
    """Execute the demo command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    config = {
        "circulation": args.circulation,
        "rating_threshold": args.threshold,
        "title_keyword": args.keyword,
    }
    if args.release_date is not None:
        config["release_date"] = args.release_date

    try:
        report = Demo(config).run()
    except ModelError as e:
        logger.error(f"Demo failed: {e.message}")
        return 1

    if args.json:
        print(MagazineRecord.from_magazine(report.copy).model_dump_json(indent=2))
    else:
        print_report(report, args.threshold, args.keyword)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="magazine-catalog",
        description="Exercise the edition, magazine and article model",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    demo_parser = subparsers.add_parser(
        "demo",
        help="Run the demonstration scenario",
        description="Build editions and a magazine, deep-copy it and run every filter query.",
    )
    demo_parser.add_argument(
        "--circulation",
        type=int,
        default=DEFAULT_CIRCULATION,
        help=f"Initial magazine circulation (default: {DEFAULT_CIRCULATION})",
    )
    demo_parser.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_RATING_THRESHOLD,
        help=f"Exclusive minimum article rating (default: {DEFAULT_RATING_THRESHOLD})",
    )
    demo_parser.add_argument(
        "--keyword",
        type=str,
        default=DEFAULT_TITLE_KEYWORD,
        help=f"Substring to search in article titles (default: {DEFAULT_TITLE_KEYWORD})",
    )
    demo_parser.add_argument(
        "--release-date",
        type=datetime.fromisoformat,
        default=None,
        help="Release date for all editions (ISO format; default: now)",
    )
    demo_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the copied magazine as a JSON record",
    )
    demo_parser.set_defaults(func=run_demo)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
