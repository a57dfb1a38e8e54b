# src/storage/cart_store.py

"""Persisted cart: a set of product ids in one local-storage slot."""

import json
import logging

from src.config.settings import Settings
from src.models.errors import MalformedPersistedState
from src.services.cart_events import CartEvents
from src.storage.local_storage import LocalStorage

logger = logging.getLogger("storefront.cart")


def decode_cart(key: str, raw: str | None) -> frozenset[int]:
    """Decode a persisted cart value into a set of ids.

    Raises:
        MalformedPersistedState: The value is not a JSON list of
            integers.
    """
    if raw is None:
        return frozenset()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedPersistedState(key, f"not JSON ({exc})") from exc
    # Browser code stored `null` for a cleared cart
    if data is None:
        return frozenset()
    if not isinstance(data, list):
        raise MalformedPersistedState(
            key, f"expected a list, got {type(data).__name__}"
        )
    for item in data:
        if isinstance(item, bool) or not isinstance(item, int):
            raise MalformedPersistedState(
                key, f"non-integer entry {item!r}"
            )
    return frozenset(data)


class CartStore:
    """Single access point for reading and toggling cart membership.

    All reads tolerate a missing or malformed slot by treating it as
    an empty cart.  Every toggle rewrites the slot as a sorted,
    duplicate-free list, so a corrupt value heals on the next write.
    """

    def __init__(
        self,
        storage: LocalStorage | None = None,
        events: CartEvents | None = None,
        key: str = Settings.CART_STORAGE_KEY,
    ) -> None:
        self.storage = storage or LocalStorage()
        self.events = events or CartEvents()
        self.key = key

    def items(self) -> frozenset[int]:
        """The distinct product ids currently in the cart."""
        raw = self.storage.get_item(self.key)
        try:
            return decode_cart(self.key, raw)
        except MalformedPersistedState as exc:
            logger.warning("%s; treating cart as empty", exc)
            return frozenset()

    def is_in_cart(self, product_id: int) -> bool:
        """Whether *product_id* is in the cart."""
        return product_id in self.items()

    def count(self) -> int:
        """Exact number of distinct ids in the cart."""
        return len(self.items())

    def toggle(self, product_id: int) -> bool:
        """Add *product_id* if absent, remove it if present.

        Returns the new membership state and notifies subscribers.
        """
        current = set(self.items())
        if product_id in current:
            current.discard(product_id)
            now_in_cart = False
        else:
            current.add(product_id)
            now_in_cart = True

        self.storage.set_item(self.key, json.dumps(sorted(current)))
        logger.info(
            "%s product %d %s cart (%d items)",
            "Added" if now_in_cart else "Removed",
            product_id,
            "to" if now_in_cart else "from",
            len(current),
        )
        self.events.emit()
        return now_in_cart
