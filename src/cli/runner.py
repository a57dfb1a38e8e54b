# src/cli/runner.py

"""Headless storefront commands: list products and toggle the cart."""

import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from src.filters.product_filter import ProductFilter
from src.models.filter_criteria import FilterCriteria, ViewMode
from src.models.product import Product
from src.services.catalog_client import CatalogClient
from src.services.catalog_loader import load_products
from src.storage.cart_store import CartStore
from src.ui.formatting import cart_badge, price_text, rating_summary

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_table(
    products: list[Product], cart_ids: frozenset[int]
) -> None:
    """Render a Rich table of products to stdout, in catalog order."""
    table = Table(
        title="Products",
        show_lines=True,
        title_style="bold dark_orange",
    )
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Title", max_width=50)
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right", style="dark_orange")
    table.add_column("Rating")
    table.add_column("Cart", justify="center")

    for p in products:
        table.add_row(
            str(p.id),
            p.title,
            p.category,
            price_text(p.price),
            rating_summary(p) or "—",
            "✓" if p.id in cart_ids else "",
        )

    Console().print(table)


async def cli_list(
    criteria: FilterCriteria,
    output_format: str,
    client: CatalogClient | None = None,
    cart: CartStore | None = None,
) -> int:
    """Fetch, filter and print the catalog; 0 if anything matched."""
    client = client or CatalogClient()
    cart = cart or CartStore()

    _err.print(
        f"[bold]Catalog:[/bold] {client.base_url}  "
        f"[dim]search='{criteria.search_term}' "
        f"max_price={criteria.max_price} "
        f"view={criteria.view_mode.value}[/dim]"
    )

    products = await load_products(client)
    cart_ids = cart.items()
    displayed = ProductFilter.apply(products, criteria, cart_ids)

    categories = ProductFilter.derive_categories(products)
    if categories:
        _err.print(f"[dim]Categories: {', '.join(categories)}[/dim]")

    if not displayed:
        _err.print("[yellow]No products found.[/yellow]")
        return 1

    _err.print(
        f"[green]✓ {len(displayed)} of {len(products)} products[/green]"
    )

    if output_format == "table":
        _print_table(displayed, cart_ids)
    else:
        json.dump(
            [p.to_dict() for p in displayed],
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")
    return 0


def run_toggle(product_id: int, cart: CartStore | None = None) -> int:
    """Flip cart membership for *product_id* and report the result."""
    cart = cart or CartStore()
    in_cart = cart.toggle(product_id)
    count = cart.count()
    verb = "Added" if in_cart else "Removed"
    _err.print(
        f"[green]{verb} product {product_id}[/green] "
        f"[dim]cart: {cart_badge(count) or 0} item(s)[/dim]"
    )
    json.dump(
        {"id": product_id, "in_cart": in_cart, "count": count},
        sys.stdout,
    )
    sys.stdout.write("\n")
    return 0


def build_criteria(
    query: str | None, max_price: float | None, cart_view: bool
) -> FilterCriteria:
    """Assemble list criteria from command-line values."""
    criteria = FilterCriteria(
        search_term=query or "",
        view_mode=ViewMode.CART if cart_view else ViewMode.EXPLORE,
    )
    if max_price is not None:
        criteria.max_price = max_price
    return criteria
