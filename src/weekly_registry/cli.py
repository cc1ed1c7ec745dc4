"""Command-line interface for weekly-registry."""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from weekly_registry.config_store import ConfigStore
from weekly_registry.exceptions import WeeklyNotFoundError
from weekly_registry.registry import add_or_update, mark_published, rescan
from weekly_registry.settings import DEFAULT_SETTINGS

DEFAULT_ROOT = Path(".")
DEFAULT_CONFIG_NAME = "weekly-config.json"

COMMANDS = ("add", "scan", "publish")

# Global options that consume the following token.
VALUE_OPTIONS = ("--config", "--root")

EPILOG = """\
examples:
  weekly-registry add 2025-10-01 2025-10-07 "第8期" "十月第一周AI圈精彩内容" 15 8 4
  weekly-registry scan
  weekly-registry publish weeklies/20251001-20251007issue-report.html
"""


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _store(args: argparse.Namespace) -> ConfigStore:
    return ConfigStore(args.config or args.root / DEFAULT_CONFIG_NAME)


def add_weekly(args: argparse.Namespace) -> int:
    """Execute the add command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    store = _store(args)
    config = store.load()
    weekly = add_or_update(
        config,
        args.start,
        args.end,
        args.title,
        args.summary,
        news_count=args.news_count,
        tool_count=args.tool_count,
        tech_count=args.tech_count,
        root=args.root,
        settings=DEFAULT_SETTINGS,
    )

    if not store.save(config):
        return 1

    logger.info(f"Added/updated weekly: {weekly.filename}")
    logger.info(
        f"  Stats: {weekly.news_count} news, {weekly.tool_count} tools, "
        f"{weekly.tech_count} releases"
    )
    return 0


def scan_weeklies(args: argparse.Namespace) -> int:
    """Execute the scan command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    logger.info(f"Scanning {args.root / DEFAULT_SETTINGS.weekly_dir}")
    store = _store(args)
    config = store.load()
    result = rescan(config, args.root, DEFAULT_SETTINGS)

    if not result.changed:
        logger.info("Scan complete: no new files found")
        return 0

    if not store.save(config):
        return 1

    logger.info(
        f"Scan complete: {result.added} new, {result.updated} updated"
    )
    logger.info(f"  Renumbered {len(config.weeklies)} weeklies")
    return 0


def publish_weekly(args: argparse.Namespace) -> int:
    """Execute the publish command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 unless the registry could not be written)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    store = _store(args)
    config = store.load()
    try:
        weekly = mark_published(config, args.filename)
    except WeeklyNotFoundError as e:
        logger.error(e.message)
        return 0

    if not store.save(config):
        return 1

    logger.info(f"Marked as published: {weekly.filename}")
    return 0


def _command_of(argv: list[str]) -> str | None:
    """Return the first positional token, skipping global options."""
    tokens = iter(argv)
    for token in tokens:
        if token in VALUE_OPTIONS:
            next(tokens, None)
        elif not token.startswith("-"):
            return token
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weekly-registry",
        description="Maintain the JSON index of newsletter weeklies",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=DEFAULT_ROOT,
        help="Project root containing the weeklies directory (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Registry file (default: <root>/{DEFAULT_CONFIG_NAME})",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    add_parser = subparsers.add_parser(
        "add",
        help="Add a weekly or update an existing one",
        description="Add a weekly to the registry, or overwrite the record for the same date range.",
    )
    add_parser.add_argument(
        "start",
        type=date.fromisoformat,
        help="Start date (ISO format: YYYY-MM-DD)",
    )
    add_parser.add_argument(
        "end",
        type=date.fromisoformat,
        help="End date (ISO format: YYYY-MM-DD)",
    )
    add_parser.add_argument(
        "title",
        help=f'Title; prefixed with "{DEFAULT_SETTINGS.product_name}" unless it contains "{DEFAULT_SETTINGS.issue_marker}"',
    )
    add_parser.add_argument("summary", help="Short description")
    add_parser.add_argument(
        "news_count", type=int, nargs="?", default=0,
        help="Number of news items (default: 0)",
    )
    add_parser.add_argument(
        "tool_count", type=int, nargs="?", default=0,
        help="Number of tools (default: 0)",
    )
    add_parser.add_argument(
        "tech_count", type=int, nargs="?", default=0,
        help="Number of releases (default: 0)",
    )
    add_parser.set_defaults(func=add_weekly)

    scan_parser = subparsers.add_parser(
        "scan",
        help="Scan the weeklies directory for new or changed issues",
        description="Add records for new issue files, refresh statistics and images, and renumber all weeklies by date.",
    )
    scan_parser.set_defaults(func=scan_weeklies)

    publish_parser = subparsers.add_parser(
        "publish",
        help="Mark a weekly as published",
        description="Set the published flag on the record with the given filename.",
    )
    publish_parser.add_argument(
        "filename",
        help="Canonical filename, e.g. weeklies/20251001-20251007issue-report.html",
    )
    publish_parser.set_defaults(func=publish_weekly)

    subparsers.add_parser("help", help="Show this help message")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()

    if _command_of(argv) not in COMMANDS:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
