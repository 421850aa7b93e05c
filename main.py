# main.py

"""Entry point for the product catalog (TUI or headless commands)."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("catalog.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="catalog",
        description="Product catalog renderer with remote/local fallback.",
        epilog=f"Category order: {', '.join(Settings.CATEGORY_ORDER)}",
    )
    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--build",
        action="store_true",
        help="Render one catalog page per category into the output directory.",
    )
    action.add_argument(
        "--list",
        action="store_true",
        dest="list_products",
        help="Print the grouped catalog to stdout.",
    )
    action.add_argument(
        "--health",
        action="store_true",
        help="Probe every configured catalog source.",
    )
    parser.add_argument(
        "-c",
        "--category",
        default=None,
        help="Only list this category (exact name; --list only).",
    )
    parser.add_argument(
        "-q",
        "--search",
        default=None,
        help="Free-text search over title, note and category.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="table",
        dest="output_format",
        help="Output format for --list (default: table).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        dest="output_dir",
        help="Output directory for --build (default: public/).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also log INFO messages to the console.",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import CatalogApp

    try:
        app = CatalogApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("catalog TUI shutting down")


def _run_build(args: argparse.Namespace) -> None:
    from src.cli.runner import build_page

    exit_code = asyncio.run(
        build_page(
            search=args.search,
            output_dir=args.output_dir,
        )
    )
    sys.exit(exit_code)


def _run_list(args: argparse.Namespace) -> None:
    from src.cli.runner import list_catalog

    exit_code = asyncio.run(
        list_catalog(
            category=args.category,
            search=args.search,
            output_format=args.output_format,
        )
    )
    sys.exit(exit_code)


def _run_health_check() -> None:
    from src.cli.runner import run_health_check

    exit_code = asyncio.run(run_health_check())
    sys.exit(exit_code)


def main() -> None:
    """Route to the TUI (no action flag) or a headless command."""
    parser = _build_parser()
    args = parser.parse_args()
    if args.build and args.category:
        parser.error("--build writes every category page; drop --category")

    log_file = setup_logging(verbose=args.verbose)
    logger.info("catalog starting — log file: %s", log_file)

    if args.build:
        _run_build(args)
    elif args.list_products:
        _run_list(args)
    elif args.health:
        _run_health_check()
    else:
        _run_tui()


if __name__ == "__main__":
    main()
