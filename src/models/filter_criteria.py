# src/models/filter_criteria.py

"""List-view filter state: search text, price ceiling and view mode."""

from dataclasses import dataclass
from enum import Enum

from src.config.settings import Settings


class ViewMode(str, Enum):
    """Which subset of the catalog the list view shows."""

    EXPLORE = "explore"
    CART = "cart"


@dataclass
class FilterCriteria:
    """Ephemeral filter state owned by the list view. Never persisted."""

    search_term: str = ""
    max_price: float = Settings.DEFAULT_MAX_PRICE
    view_mode: ViewMode = ViewMode.EXPLORE
