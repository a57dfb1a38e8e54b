# tests/test_product_model.py

"""Tests for the Product dataclass and catalog parsing."""

import unittest
from typing import Any

from src.models.errors import NetworkError
from src.models.product import Product, Rating


def _payload(**overrides: Any) -> dict[str, Any]:
    """A catalog product object as the API returns it."""
    data: dict[str, Any] = {
        "id": 1,
        "title": "Fjallraven Backpack",
        "price": 109.95,
        "description": "Your perfect pack for everyday use",
        "category": "men's clothing",
        "image": "https://example.com/img/1.jpg",
        "rating": {"rate": 3.9, "count": 120},
    }
    data.update(overrides)
    return data


class TestProductFromDict(unittest.TestCase):
    """Product.from_dict parsing behaviour."""

    def test_full_payload(self) -> None:
        """All fields are copied across."""
        product = Product.from_dict(_payload())
        self.assertEqual(product.id, 1)
        self.assertEqual(product.title, "Fjallraven Backpack")
        self.assertEqual(product.price, 109.95)
        self.assertEqual(product.category, "men's clothing")
        self.assertEqual(
            product.image, "https://example.com/img/1.jpg"
        )
        self.assertEqual(product.rating, Rating(rate=3.9, count=120))

    def test_integer_price_becomes_float(self) -> None:
        """Whole-number prices are stored as floats."""
        product = Product.from_dict(_payload(price=10))
        self.assertIsInstance(product.price, float)
        self.assertEqual(product.price, 10.0)

    def test_missing_rating_is_none(self) -> None:
        """A product without rating data parses with rating=None."""
        payload = _payload()
        del payload["rating"]
        product = Product.from_dict(payload)
        self.assertIsNone(product.rating)

    def test_partial_rating_fills_zero(self) -> None:
        """A rating with only a rate gets count 0."""
        product = Product.from_dict(_payload(rating={"rate": 4.5}))
        self.assertEqual(product.rating, Rating(rate=4.5, count=0))

    def test_non_object_rating_is_none(self) -> None:
        """A rating that is not an object is ignored."""
        product = Product.from_dict(_payload(rating="great"))
        self.assertIsNone(product.rating)

    def test_missing_text_fields_default_empty(self) -> None:
        """Missing description/category/image become empty strings."""
        product = Product.from_dict(
            {"id": 2, "title": "Bare", "price": 1}
        )
        self.assertEqual(product.description, "")
        self.assertEqual(product.category, "")
        self.assertEqual(product.image, "")

    def test_missing_id_raises(self) -> None:
        """A product without an id is unparsable."""
        payload = _payload()
        del payload["id"]
        with self.assertRaises(NetworkError):
            Product.from_dict(payload)

    def test_boolean_id_raises(self) -> None:
        """Booleans are not accepted as ids."""
        with self.assertRaises(NetworkError):
            Product.from_dict(_payload(id=True))

    def test_bad_price_raises(self) -> None:
        """A non-numeric price is unparsable."""
        with self.assertRaises(NetworkError):
            Product.from_dict(_payload(price="cheap"))

    def test_negative_price_raises(self) -> None:
        """Prices must be non-negative."""
        with self.assertRaises(NetworkError):
            Product.from_dict(_payload(price=-1))

    def test_non_finite_price_raises(self) -> None:
        """NaN and infinite prices are unparsable."""
        for price in (float("nan"), float("inf")):
            with self.subTest(price=price):
                with self.assertRaises(NetworkError):
                    Product.from_dict(_payload(price=price))

    def test_overflowing_rating_count_is_none(self) -> None:
        """A count too large for an int drops the rating, not the product."""
        product = Product.from_dict(
            _payload(rating={"rate": 4, "count": float("inf")})
        )
        self.assertIsNone(product.rating)

    def test_nan_rate_is_none(self) -> None:
        """A NaN rate drops the rating so stars still render."""
        product = Product.from_dict(
            _payload(rating={"rate": float("nan"), "count": 3})
        )
        self.assertIsNone(product.rating)
        self.assertEqual(product.star_count(), 0)

    def test_non_dict_raises(self) -> None:
        """A list or scalar is not a product."""
        with self.assertRaises(NetworkError):
            Product.from_dict([1, 2, 3])


class TestProductHelpers(unittest.TestCase):
    """star_count and to_dict."""

    def test_star_count_rounds(self) -> None:
        """3.9 rounds to four filled stars."""
        self.assertEqual(Product.from_dict(_payload()).star_count(), 4)

    def test_star_count_unrated(self) -> None:
        """Unrated products show no filled stars."""
        product = Product(id=1, title="X", price=1.0)
        self.assertEqual(product.star_count(), 0)

    def test_star_count_clamped(self) -> None:
        """Out-of-range rates are clamped on parse."""
        product = Product.from_dict(_payload(rating={"rate": 9}))
        self.assertEqual(product.star_count(), 5)

    def test_to_dict_round_trips(self) -> None:
        """to_dict produces a payload from_dict accepts unchanged."""
        product = Product.from_dict(_payload())
        self.assertEqual(Product.from_dict(product.to_dict()), product)

    def test_to_dict_omits_missing_rating(self) -> None:
        """No rating key is written for unrated products."""
        product = Product(id=1, title="X", price=1.0)
        self.assertNotIn("rating", product.to_dict())

    def test_products_are_immutable(self) -> None:
        """Fetched products cannot be modified."""
        product = Product(id=1, title="X", price=1.0)
        with self.assertRaises(AttributeError):
            product.price = 2.0  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
