# src/models/product.py

"""Product data model for catalog entries."""

import math
from dataclasses import dataclass
from typing import Any

from src.models.errors import NetworkError

MAX_STARS = 5


@dataclass(frozen=True)
class Rating:
    """Aggregate customer rating attached to a product."""

    rate: float = 0.0
    count: int = 0


def _parse_rating(raw: Any) -> Rating | None:
    """Build a Rating from partial catalog data, or None if absent."""
    if not isinstance(raw, dict):
        return None
    try:
        rate = float(raw.get("rate") or 0.0)
        count = int(raw.get("count") or 0)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(rate):
        return None
    return Rating(
        rate=min(max(rate, 0.0), float(MAX_STARS)),
        count=max(count, 0),
    )


@dataclass(frozen=True)
class Product:
    """A single catalog product, read-only once fetched."""

    id: int
    title: str
    price: float
    description: str = ""
    category: str = ""
    image: str = ""
    rating: Rating | None = None

    @classmethod
    def from_dict(cls, payload: Any) -> "Product":
        """Parse one product object from the catalog API.

        Raises:
            NetworkError: The payload is missing ``id``, ``title`` or
                ``price``, or they have the wrong type.
        """
        if not isinstance(payload, dict):
            raise NetworkError(
                f"Expected a product object, got {type(payload).__name__}"
            )

        raw_id = payload.get("id")
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise NetworkError(f"Product has no integer id: {raw_id!r}")

        title = payload.get("title")
        if not isinstance(title, str):
            raise NetworkError(f"Product {raw_id} has no title")

        try:
            price = float(payload["price"])
        except (KeyError, TypeError, ValueError) as exc:
            raise NetworkError(
                f"Product {raw_id} has no usable price"
            ) from exc
        if not math.isfinite(price):
            raise NetworkError(f"Product {raw_id} has a non-finite price")
        if price < 0:
            raise NetworkError(f"Product {raw_id} has a negative price")

        return cls(
            id=raw_id,
            title=title,
            price=price,
            description=str(payload.get("description") or ""),
            category=str(payload.get("category") or ""),
            image=str(payload.get("image") or ""),
            rating=_parse_rating(payload.get("rating")),
        )

    def star_count(self) -> int:
        """Filled stars out of five; zero when unrated."""
        if self.rating is None:
            return 0
        return min(max(round(self.rating.rate), 0), MAX_STARS)

    def to_dict(self) -> dict[str, Any]:
        """Serialise back to the catalog's JSON shape."""
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "category": self.category,
            "image": self.image,
        }
        if self.rating is not None:
            data["rating"] = {
                "rate": self.rating.rate,
                "count": self.rating.count,
            }
        return data
