# main.py

"""Entry point for ring_catalog (TUI, HTTP API or headless listing)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("ring_catalog.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="ring_catalog",
        description="Gold-priced engagement ring catalog.",
        epilog="Run without arguments to launch the interactive TUI.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--serve",
        action="store_true",
        default=False,
        help="Run the HTTP API server.",
    )
    mode.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="list_products",
        help="Print the priced catalog and exit.",
    )
    mode.add_argument(
        "--gold-price",
        action="store_true",
        default=False,
        dest="gold_price",
        help="Print the current gold price quote and exit.",
    )
    parser.add_argument(
        "--host",
        default=Settings.HOST,
        help=f"Bind address for --serve (default: {Settings.HOST}).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Settings.PORT,
        help=f"Port for --serve (default: {Settings.PORT}).",
    )
    for flag, dest, label in (
        ("--min-price", "min_price", "Minimum price"),
        ("--max-price", "max_price", "Maximum price"),
        ("--min-popularity", "min_popularity", "Minimum popularity (0-1)"),
        ("--max-popularity", "max_popularity", "Maximum popularity (0-1)"),
    ):
        parser.add_argument(
            flag, dest=dest, default=None, help=f"{label} for --list."
        )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format for --list (default: json).",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual catalog browser."""
    from src.ui.app import CatalogBrowserApp

    try:
        app = CatalogBrowserApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("ring_catalog TUI shutting down")


def _run_server(args: argparse.Namespace) -> None:
    """Serve the HTTP API until interrupted."""
    from src.api.server import run_server

    run_server(host=args.host, port=args.port)


def _run_list(args: argparse.Namespace) -> None:
    """Print the priced catalog and exit."""
    from src.cli.runner import cli_list
    from src.filters.criteria_parser import parse_filter_params

    criteria = parse_filter_params(
        {
            "minPrice": args.min_price,
            "maxPrice": args.max_price,
            "minPopularity": args.min_popularity,
            "maxPopularity": args.max_popularity,
        }
    )
    sys.exit(cli_list(criteria, output_format=args.output_format))


def _run_gold_price() -> None:
    """Print the current gold price quote and exit."""
    from src.cli.runner import run_gold_price

    sys.exit(run_gold_price())


def main() -> None:
    """Route to the server, a headless command, or the TUI."""
    parser = _build_parser()
    args = parser.parse_args()

    log_file = setup_logging(
        console_level=logging.INFO if args.serve else logging.WARNING
    )
    logger.info("ring_catalog starting — log file: %s", log_file)

    if args.serve:
        _run_server(args)
    elif args.list_products:
        _run_list(args)
    elif args.gold_price:
        _run_gold_price()
    else:
        _run_tui()


if __name__ == "__main__":
    main()
