# src/services/catalog_client.py

"""Read-only client for the remote product catalog API."""

import logging
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.models.errors import NetworkError
from src.models.product import Product

logger = logging.getLogger("storefront.catalog")


class CatalogClient:
    """Fetch products from ``GET /products`` and ``GET /products/{id}``.

    One request per call: no retries and no caching.  Every failure is
    raised as :class:`NetworkError`; callers decide how to render it.
    """

    def __init__(self, base_url: str | None = None) -> None:
        self.settings = Settings()
        self.base_url = (base_url or self.settings.CATALOG_BASE_URL).rstrip(
            "/"
        )
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )

    def _get(self, url: str) -> curl_requests.Response:
        """Issue one GET, wrapping transport errors."""
        try:
            resp = self.session.get(
                url, headers=self.settings.DEFAULT_HEADERS
            )
        except Exception as exc:
            raise NetworkError(f"Request failed: {exc}", url) from exc
        logger.debug("GET %s -> HTTP %d", url, resp.status_code)
        return resp

    @staticmethod
    def _decode(resp: curl_requests.Response, url: str) -> Any:
        """Parse a JSON body; an empty body decodes to None."""
        if not resp.text.strip():
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise NetworkError(f"Response is not JSON: {exc}", url) from exc

    def fetch_all_products(self) -> list[Product]:
        """Fetch the full catalog.

        Raises:
            NetworkError: Transport failure, non-200 status, or a body
                that is not a list of product objects.
        """
        url = f"{self.base_url}/products"
        resp = self._get(url)
        if resp.status_code != 200:
            raise NetworkError(f"HTTP {resp.status_code}", url)

        payload = self._decode(resp, url)
        if not isinstance(payload, list):
            raise NetworkError(
                f"Expected a product list, got {type(payload).__name__}",
                url,
            )

        products = [Product.from_dict(item) for item in payload]
        logger.info("Fetched %d products from %s", len(products), url)
        return products

    def fetch_product_by_id(self, product_id: int) -> Product | None:
        """Fetch one product, or None when the catalog has no such id.

        Raises:
            NetworkError: Transport failure, unexpected status, or an
                unparsable body.
        """
        url = f"{self.base_url}/products/{product_id}"
        resp = self._get(url)
        if resp.status_code == 404:
            logger.info("Product %s not found (HTTP 404)", product_id)
            return None
        if resp.status_code != 200:
            raise NetworkError(f"HTTP {resp.status_code}", url)

        # The public API answers unknown ids with an empty 200
        payload = self._decode(resp, url)
        if payload is None:
            logger.info("Product %s not found (empty body)", product_id)
            return None

        product = Product.from_dict(payload)
        logger.info("Fetched product %d from %s", product.id, url)
        return product

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.session.close()
