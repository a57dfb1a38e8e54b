# src/ui/product_details.py

"""Detail view for a single product."""

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, LoadingIndicator, Static

from src.models.product import Product
from src.services.cart_events import Subscription
from src.services.catalog_client import CatalogClient
from src.services.catalog_loader import StaleGuard, load_product
from src.storage.cart_store import CartStore
from src.ui.formatting import (
    cart_button_label,
    price_text,
    rating_summary,
    star_text,
)

logger = logging.getLogger("storefront.ui")

PRODUCT_NOT_FOUND = "Product not found"
LOADING_DETAILS = "Loading product details..."


class ProductDetailsScreen(Screen[None]):
    """One product with its cart toggle, fetched by id on mount."""

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("a", "toggle_cart", "Add/Remove"),
    ]

    def __init__(
        self,
        product_id: int,
        client: CatalogClient,
        cart: CartStore,
    ) -> None:
        super().__init__()
        self.product_id = product_id
        self.client = client
        self.cart = cart
        self.product: Product | None = None
        self.is_loading = True
        self.status_message = LOADING_DETAILS
        self._guard = StaleGuard()
        self._cart_subscription: Subscription | None = None

    def compose(self) -> ComposeResult:
        """Build the widget tree for the detail view."""
        yield Header()
        yield VerticalScroll(
            Static(LOADING_DETAILS, id="detail_status"),
            LoadingIndicator(id="detail_loader"),
            Vertical(
                Static(id="detail_title"),
                Static(id="detail_category"),
                Static(id="detail_rating"),
                Static(id="detail_price"),
                Static("Description", id="detail_description_heading"),
                Static(id="detail_description"),
                Button(
                    cart_button_label(False),
                    variant="warning",
                    id="detail_cart_btn",
                ),
                id="detail_body",
            ),
            id="detail_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Hide the body, subscribe to cart changes, start the fetch."""
        self.query_one("#detail_body", Vertical).display = False
        self._cart_subscription = self.cart.events.subscribe(
            self._on_cart_changed
        )
        self.run_worker(
            self.load_details(), exclusive=True, group="details"
        )

    def on_unmount(self) -> None:
        """Drop the cart subscription and any in-flight result."""
        self._guard.invalidate()
        if self._cart_subscription is not None:
            self._cart_subscription.unsubscribe()
            self._cart_subscription = None

    async def load_details(self) -> None:
        """Fetch the product and render it, or the not-found state."""
        token = self._guard.begin()
        self.is_loading = True

        product = await load_product(self.client, self.product_id)

        if not self._guard.is_current(token):
            logger.debug(
                "Discarding stale result for product %s",
                self.product_id,
            )
            return

        self.product = product
        self.is_loading = False
        self.query_one("#detail_loader", LoadingIndicator).display = False
        self.render_product()

    def render_product(self) -> None:
        """Draw the current product, or the not-found message."""
        status = self.query_one("#detail_status", Static)
        body = self.query_one("#detail_body", Vertical)
        product = self.product
        if product is None:
            self.status_message = PRODUCT_NOT_FOUND
            status.update(self.status_message)
            status.display = True
            body.display = False
            return

        self.status_message = ""
        status.display = False
        body.display = True
        self.query_one("#detail_title", Static).update(
            Text(product.title, style="bold")
        )
        self.query_one("#detail_category", Static).update(
            product.category.upper()
        )

        rating = self.query_one("#detail_rating", Static)
        if product.rating is not None:
            line = star_text(product)
            line.append(f"  {rating_summary(product)}")
            rating.update(line)
            rating.display = True
        else:
            rating.display = False

        self.query_one("#detail_price", Static).update(
            Text(price_text(product.price), style="bold dark_orange")
        )
        self.query_one("#detail_description", Static).update(
            product.description
        )
        self._refresh_cart_button()

    def _refresh_cart_button(self) -> None:
        in_cart = self.cart.is_in_cart(self.product_id)
        button = self.query_one("#detail_cart_btn", Button)
        button.label = cart_button_label(in_cart)
        button.variant = "error" if in_cart else "warning"

    def _on_cart_changed(self) -> None:
        if self.product is not None:
            self._refresh_cart_button()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Toggle cart membership from the detail button."""
        if event.button.id == "detail_cart_btn":
            self.action_toggle_cart()

    def action_toggle_cart(self) -> None:
        """Add or remove this product from the cart."""
        if self.product is None:
            return
        in_cart = self.cart.toggle(self.product_id)
        self.app.notify(
            f"{'Added' if in_cart else 'Removed'}: "
            f"{self.product.title[:40]}"
        )

    def action_back(self) -> None:
        """Return to the list view."""
        self.app.pop_screen()
