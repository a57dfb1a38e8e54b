# src/ui/product_list.py

"""List view: product grid with search, category, price and cart filters."""

import logging
import math
from typing import cast

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    LoadingIndicator,
    Static,
)

from src.config.settings import Settings
from src.filters.product_filter import ProductFilter
from src.models.filter_criteria import FilterCriteria, ViewMode
from src.models.product import Product
from src.services.cart_events import Subscription
from src.services.catalog_client import CatalogClient
from src.services.catalog_loader import StaleGuard, load_products
from src.storage.cart_store import CartStore
from src.ui.formatting import cart_badge, price_text, star_text
from src.ui.product_details import ProductDetailsScreen

logger = logging.getLogger("storefront.ui")

NO_PRODUCTS = "No products found."
LOADING_PRODUCTS = "Loading products..."


def _price_field(max_price: float) -> str:
    """Text for the price box; empty while the ceiling is unbounded."""
    return "" if math.isinf(max_price) else str(int(max_price))


class ProductListScreen(Screen[None]):
    """Browsable catalog grid and cart view."""

    BINDINGS = [
        Binding("a", "toggle_cart", "Add/Remove"),
        Binding("e", "view_explore", "Explore"),
        Binding("c", "view_cart", "Cart"),
        Binding("left_square_bracket", "price_down", "Price -"),
        Binding("right_square_bracket", "price_up", "Price +"),
        Binding("slash", "focus_search", "Search", show=False),
    ]

    def __init__(self, client: CatalogClient, cart: CartStore) -> None:
        super().__init__()
        self.settings = Settings()
        self.client = client
        self.cart = cart
        self.criteria = FilterCriteria()
        self.products: list[Product] = []
        self.displayed: list[Product] = []
        self.categories: list[str] = []
        self.is_loading = True
        self.status_message = LOADING_PRODUCTS
        self._guard = StaleGuard()
        self._cart_subscription: Subscription | None = None

    def compose(self) -> ComposeResult:
        """Build the widget tree for the list view."""
        yield Header()
        yield Container(
            Horizontal(
                Input(
                    placeholder="Search products...",
                    id="search_input",
                ),
                Input(
                    value=_price_field(self.criteria.max_price),
                    placeholder="any",
                    type="integer",
                    id="price_input",
                ),
                Button("Explore", variant="warning", id="explore_btn"),
                Button("Cart", id="cart_btn"),
                id="search_bar",
            ),
            Horizontal(id="category_bar"),
            Static(LOADING_PRODUCTS, id="status"),
            LoadingIndicator(id="loader"),
            cast(
                DataTable[str | Text],
                DataTable(
                    id="results_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Set up the table, subscribe to cart changes, start the fetch."""
        self._table().add_columns(
            "Title", "Category", "Price", "Rating", "Cart"
        )
        self._cart_subscription = self.cart.events.subscribe(
            self._on_cart_changed
        )
        self._update_cart_badge()
        self.run_worker(
            self.load_catalog(), exclusive=True, group="catalog"
        )

    def on_unmount(self) -> None:
        """Drop the cart subscription and any in-flight result."""
        self._guard.invalidate()
        if self._cart_subscription is not None:
            self._cart_subscription.unsubscribe()
            self._cart_subscription = None

    # ── Loading ──────────────────────────────────────────

    async def load_catalog(self) -> None:
        """Fetch the catalog and render it."""
        token = self._guard.begin()
        self.is_loading = True
        self.query_one("#loader", LoadingIndicator).display = True
        self.status_message = LOADING_PRODUCTS
        self.query_one("#status", Static).update(self.status_message)

        products = await load_products(self.client)

        if not self._guard.is_current(token):
            logger.debug(
                "Discarding stale catalog result (%d products)",
                len(products),
            )
            return

        self.products = products
        self.is_loading = False
        self.query_one("#loader", LoadingIndicator).display = False
        self.refresh_view()

    # ── Rendering ────────────────────────────────────────

    def _table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#results_table", DataTable),
        )

    def refresh_view(self) -> None:
        """Re-derive categories and the displayed subset, then redraw."""
        categories = ProductFilter.derive_categories(self.products)
        if categories != self.categories:
            self.categories = categories
            self._render_categories()
        self._highlight_category()

        table = self._table()
        row = table.cursor_row
        selected = (
            self.displayed[row].id
            if 0 <= row < len(self.displayed)
            else None
        )

        cart_ids = self.cart.items()
        self.displayed = ProductFilter.apply(
            self.products, self.criteria, cart_ids
        )
        self._populate_table(cart_ids)
        self._restore_cursor(selected, row)
        self._update_cart_badge(len(cart_ids))

        if self.is_loading:
            self.status_message = LOADING_PRODUCTS
        elif not self.displayed:
            self.status_message = NO_PRODUCTS
        else:
            self.status_message = (
                f"Showing {len(self.displayed)} of "
                f"{len(self.products)} products"
            )
        self.query_one("#status", Static).update(self.status_message)

    def _render_categories(self) -> None:
        bar = self.query_one("#category_bar", Horizontal)
        bar.remove_children()
        bar.mount(
            *[
                Button(category, name=category, classes="category")
                for category in self.categories
            ]
        )

    def _highlight_category(self) -> None:
        for button in self.query(".category").results(Button):
            selected = button.name == self.criteria.search_term.strip()
            button.variant = "warning" if selected else "default"

    def _populate_table(self, cart_ids: frozenset[int]) -> None:
        table = self._table()
        table.clear()
        for p in self.displayed:
            table.add_row(
                p.title[:60],
                p.category,
                Text(price_text(p.price), style="bold dark_orange"),
                star_text(p),
                Text("✓", style="bold red") if p.id in cart_ids else "",
                key=str(p.id),
            )

    def _restore_cursor(self, product_id: int | None, row: int) -> None:
        """Keep the highlight on the same product across a rebuild."""
        table = self._table()
        if not self.displayed:
            return
        ids = [p.id for p in self.displayed]
        if product_id in ids:
            row = ids.index(product_id)
        table.move_cursor(row=min(max(row, 0), len(ids) - 1))

    def _update_cart_badge(self, count: int | None = None) -> None:
        if count is None:
            count = self.cart.count()
        badge = cart_badge(count)
        button = self.query_one("#cart_btn", Button)
        button.label = f"Cart ({badge})" if badge else "Cart"

    def _on_cart_changed(self) -> None:
        self.refresh_view()

    # ── Events ───────────────────────────────────────────

    def on_input_changed(self, event: Input.Changed) -> None:
        """Apply search and price edits as the user types."""
        if event.input.id == "search_input":
            self.criteria.search_term = event.value
            self.refresh_view()
        elif event.input.id == "price_input":
            if not event.value.strip():
                self.criteria.max_price = self.settings.DEFAULT_MAX_PRICE
                self.refresh_view()
                return
            try:
                value = int(event.value)
            except ValueError:
                return
            self.criteria.max_price = min(
                max(value, self.settings.PRICE_MIN),
                self.settings.PRICE_MAX,
            )
            self.refresh_view()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle view toggles and category shortcuts."""
        button = event.button
        if button.id == "explore_btn":
            self.action_view_explore()
        elif button.id == "cart_btn":
            self.action_view_cart()
        elif button.has_class("category") and button.name:
            self.query_one("#search_input", Input).value = button.name

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Open the detail view for the selected product."""
        if 0 <= event.cursor_row < len(self.displayed):
            self.open_product(self.displayed[event.cursor_row].id)

    def open_product(self, product_id: int) -> None:
        """Navigate to the detail view for *product_id*."""
        logger.info("Opening product %d", product_id)
        self.app.push_screen(
            ProductDetailsScreen(product_id, self.client, self.cart)
        )

    # ── Actions ──────────────────────────────────────────

    def _set_view_mode(self, mode: ViewMode) -> None:
        self.criteria.view_mode = mode
        explore = self.query_one("#explore_btn", Button)
        cart = self.query_one("#cart_btn", Button)
        explore.variant = "warning" if mode is ViewMode.EXPLORE else "default"
        cart.variant = "warning" if mode is ViewMode.CART else "default"
        self.refresh_view()

    def action_view_explore(self) -> None:
        """Show every product that matches the filters."""
        self._set_view_mode(ViewMode.EXPLORE)

    def action_view_cart(self) -> None:
        """Show only products in the cart."""
        self._set_view_mode(ViewMode.CART)

    def action_toggle_cart(self) -> None:
        """Add or remove the highlighted product."""
        row = self._table().cursor_row
        if not 0 <= row < len(self.displayed):
            self.app.notify("No product selected", severity="warning")
            return
        product = self.displayed[row]
        in_cart = self.cart.toggle(product.id)
        self.app.notify(
            f"{'Added' if in_cart else 'Removed'}: {product.title[:40]}"
        )

    def _step_price(self, delta: int) -> None:
        current = self.criteria.max_price
        if math.isinf(current):
            if delta > 0:
                return
            current = self.settings.PRICE_MAX
        value = min(
            max(
                int(current) + delta,
                self.settings.PRICE_MIN,
            ),
            self.settings.PRICE_MAX,
        )
        self.criteria.max_price = value
        self.query_one("#price_input", Input).value = str(value)

    def action_price_down(self) -> None:
        """Lower the price ceiling by one step."""
        self._step_price(-self.settings.PRICE_STEP)

    def action_price_up(self) -> None:
        """Raise the price ceiling by one step."""
        self._step_price(self.settings.PRICE_STEP)

    def action_focus_search(self) -> None:
        """Move focus to the search box."""
        self.query_one("#search_input", Input).focus()
