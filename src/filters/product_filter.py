# src/filters/product_filter.py

"""Client-side product filtering for the list view."""

import logging
from collections.abc import Iterable

from src.models.filter_criteria import FilterCriteria, ViewMode
from src.models.product import Product

logger = logging.getLogger("storefront.filters")


class ProductFilter:
    """Derive the displayed subset and category list from a catalog."""

    @staticmethod
    def normalise_search(search_term: str | None) -> str:
        """Trim and case-fold free-text search input."""
        if not search_term:
            return ""
        return search_term.strip().casefold()

    @staticmethod
    def matches(
        product: Product,
        normalised_term: str,
        max_price: float,
    ) -> bool:
        """Check one product against an already-normalised search term.

        Text matches on title, description or category; the price
        bound is inclusive.
        """
        if product.price > max_price:
            return False
        if not normalised_term:
            return True
        return any(
            normalised_term in field.casefold()
            for field in (
                product.title,
                product.description,
                product.category,
            )
        )

    @staticmethod
    def filter_products(
        products: list[Product],
        search_term: str,
        max_price: float,
        view_mode: ViewMode = ViewMode.EXPLORE,
        cart_ids: Iterable[int] = (),
    ) -> list[Product]:
        """Return the products to display, in catalog order.

        In cart view only products whose id is in ``cart_ids`` survive.
        """
        term = ProductFilter.normalise_search(search_term)
        kept = [
            p
            for p in products
            if ProductFilter.matches(p, term, max_price)
        ]

        if view_mode is ViewMode.CART:
            in_cart = frozenset(cart_ids)
            kept = [p for p in kept if p.id in in_cart]

        logger.debug(
            "Filter '%s' <= %s (%s) kept %d of %d products",
            term,
            max_price,
            view_mode.value,
            len(kept),
            len(products),
        )
        return kept

    @staticmethod
    def apply(
        products: list[Product],
        criteria: FilterCriteria,
        cart_ids: Iterable[int] = (),
    ) -> list[Product]:
        """Filter using a :class:`FilterCriteria` bundle."""
        return ProductFilter.filter_products(
            products,
            criteria.search_term,
            criteria.max_price,
            criteria.view_mode,
            cart_ids,
        )

    @staticmethod
    def derive_categories(products: list[Product]) -> list[str]:
        """Distinct categories of the unfiltered list, first-seen order."""
        return list(dict.fromkeys(p.category for p in products))
