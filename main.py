# main.py

"""Entry point for the storefront (TUI or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="storefront",
        description="Browse a product catalog and keep a local cart.",
        epilog=f"Catalog: {Settings.CATALOG_BASE_URL}",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Search text for a headless listing. Omit to launch the TUI.",
    )
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        default=False,
        dest="list_all",
        help="List products headlessly even without a query.",
    )
    parser.add_argument(
        "-p",
        "--max-price",
        type=float,
        default=None,
        dest="max_price",
        help="Inclusive price ceiling (default: no limit).",
    )
    parser.add_argument(
        "--cart",
        action="store_true",
        default=False,
        dest="cart_view",
        help="Only show products that are in the cart.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--product",
        type=int,
        default=None,
        metavar="ID",
        help="Open the TUI on this product's detail view.",
    )
    parser.add_argument(
        "--toggle",
        type=int,
        default=None,
        metavar="ID",
        help="Add or remove a product id from the cart and exit.",
    )
    return parser


def _run_tui(product_id: int | None) -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import StorefrontApp

    try:
        app = StorefrontApp(initial_product_id=product_id)
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("storefront TUI shutting down")


def _run_list(args: argparse.Namespace) -> None:
    """Run a headless listing and exit."""
    from src.cli.runner import build_criteria, cli_list

    criteria = build_criteria(args.query, args.max_price, args.cart_view)
    exit_code = asyncio.run(cli_list(criteria, args.output_format))
    sys.exit(exit_code)


def _run_toggle(product_id: int) -> None:
    """Toggle one product's cart membership and exit."""
    from src.cli.runner import run_toggle

    sys.exit(run_toggle(product_id))


def main() -> None:
    """Route to the TUI (no query) or a headless command."""
    parser = _build_parser()
    args = parser.parse_args()

    headless = (
        args.toggle is not None
        or args.query is not None
        or args.list_all
    )
    log_file = setup_logging(console=headless)
    logger.info("storefront starting, log file: %s", log_file)

    if args.toggle is not None:
        _run_toggle(args.toggle)
    elif args.query is not None or args.list_all:
        _run_list(args)
    else:
        _run_tui(args.product)


if __name__ == "__main__":
    main()
