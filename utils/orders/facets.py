# utils/orders/facets.py
"""
Filter facets derived from the order collection
Recomputed from the collection on every read; nothing is cached

Version: 1.0.0
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from .filters import FilterCriteria
from .models import Order

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderFacets:
    product_names: Tuple[str, ...]
    min_amount: float
    max_amount: float

    @property
    def price_bounds(self) -> Tuple[float, float]:
        return self.min_amount, self.max_amount


def derive_facets(orders: Sequence[Order]) -> OrderFacets:
    """
    Distinct item names and total amount bounds across all orders

    Returns (0, 0) bounds for an empty collection.
    """
    names = {item.name for order in orders for item in order.items}

    if not orders:
        return OrderFacets(product_names=(), min_amount=0, max_amount=0)

    amounts = [order.total_amount for order in orders]
    return OrderFacets(
        product_names=tuple(sorted(names)),
        min_amount=min(amounts),
        max_amount=max(amounts),
    )


def seed_price_range(criteria: FilterCriteria, facets: OrderFacets) -> FilterCriteria:
    """
    Reset the price filter to the full [min, max] span after a data reload

    Applied whenever max > 0, even if the user had picked a narrower range.
    """
    if facets.max_amount > 0:
        return criteria.replace(price_range=facets.price_bounds)
    return criteria
