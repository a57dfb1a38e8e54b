# src/ui/app.py

"""Terminal UI for the storefront."""

from textual.app import App
from textual.binding import Binding

from src.config.settings import Settings
from src.services.catalog_client import CatalogClient
from src.storage.cart_store import CartStore
from src.ui.product_list import ProductListScreen


class StorefrontApp(App[object]):
    """Hosts the list view and routes to the detail view by product id.

    The catalog client and cart store are shared by every screen so
    that a toggle in one view is seen by the other.
    """

    CSS_PATH = "styles.css"
    TITLE = "Storefront"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        client: CatalogClient | None = None,
        cart: CartStore | None = None,
        initial_product_id: int | None = None,
    ) -> None:
        super().__init__()
        self.settings = Settings()
        self.client = client or CatalogClient()
        self.cart = cart or CartStore()
        self.initial_product_id = initial_product_id
        self.list_screen = ProductListScreen(self.client, self.cart)

    def on_mount(self) -> None:
        """Show the list view, then the requested product if any."""
        self.sub_title = self.settings.CATALOG_BASE_URL
        self.push_screen(self.list_screen)
        if self.initial_product_id is not None:
            self.open_product(self.initial_product_id)

    def open_product(self, product_id: int) -> None:
        """Navigate to the detail view for *product_id*."""
        self.list_screen.open_product(product_id)
