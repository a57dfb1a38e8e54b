# src/ui/formatting.py

"""Display helpers shared by the list and detail views."""

from rich.text import Text

from src.config.settings import Settings
from src.models.product import MAX_STARS, Product

_STAR_STYLE = "dark_orange"
_EMPTY_STAR_STYLE = "grey50"


def star_text(product: Product) -> Text:
    """Five-star bar for *product*; all grey when unrated."""
    filled = product.star_count()
    text = Text("★" * filled, style=_STAR_STYLE)
    text.append("★" * (MAX_STARS - filled), style=_EMPTY_STAR_STYLE)
    return text


def rating_summary(product: Product) -> str:
    """'4.1 out of 5 (259 reviews)', or '' when there is no rating."""
    if product.rating is None:
        return ""
    return (
        f"{product.rating.rate} out of 5 "
        f"({product.rating.count} reviews)"
    )


def price_text(price: float) -> str:
    """Dollar price as the catalog reports it."""
    return f"${price:,.2f}"


def cart_badge(count: int) -> str:
    """Badge label for the cart button; empty when the cart is empty."""
    if count <= 0:
        return ""
    if count > Settings.CART_BADGE_LIMIT:
        return f"{Settings.CART_BADGE_LIMIT}+"
    return str(count)


def cart_button_label(in_cart: bool) -> str:
    """Label for a product's cart toggle."""
    return "Remove from Cart" if in_cart else "Add to Cart"
