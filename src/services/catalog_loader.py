# src/services/catalog_loader.py

"""Async catalog loading for views, with stale-result protection."""

import asyncio
import logging

from src.models.errors import NetworkError
from src.models.product import Product
from src.services.catalog_client import CatalogClient

logger = logging.getLogger("storefront.loader")


class StaleGuard:
    """Tracks which in-flight request a view still cares about.

    ``begin()`` returns a token; the token stops being current as soon
    as a newer request begins or the owning view calls
    ``invalidate()`` on dismissal.
    """

    def __init__(self) -> None:
        self._generation = 0
        self._active = True

    def begin(self) -> int:
        """Start a new request and return its token."""
        self._generation += 1
        self._active = True
        return self._generation

    def is_current(self, token: int) -> bool:
        """True if results for *token* may still be applied."""
        return self._active and token == self._generation

    def invalidate(self) -> None:
        """Mark every outstanding token stale (view dismissed)."""
        self._active = False


async def load_products(client: CatalogClient) -> list[Product]:
    """Fetch the full catalog off the event loop.

    A failed fetch is logged and reported as an empty catalog.
    """
    try:
        return await asyncio.to_thread(client.fetch_all_products)
    except NetworkError as exc:
        logger.error(
            "Failed to load products from %s: %s",
            exc.url or client.base_url,
            exc,
            exc_info=True,
        )
        return []


async def load_product(
    client: CatalogClient, product_id: int
) -> Product | None:
    """Fetch one product off the event loop; None if missing or failed."""
    try:
        return await asyncio.to_thread(
            client.fetch_product_by_id, product_id
        )
    except NetworkError as exc:
        logger.error(
            "Failed to load product %s: %s",
            product_id,
            exc,
            exc_info=True,
        )
        return None
