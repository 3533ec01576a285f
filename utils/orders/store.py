# utils/orders/store.py
"""
Order Store - in-memory order collection for one Orders screen session

Version: 1.0.0
"""

import logging
from typing import List, Optional, Tuple

from .facets import OrderFacets, derive_facets
from .models import Order
from .queries import OrderQueries
from ..api import ApiError

logger = logging.getLogger(__name__)


class OrderError(Exception):
    """Base exception for order operations"""
    pass


class OrderFetchError(OrderError):
    """Orders could not be loaded"""
    pass


class OrderStatusError(OrderError):
    """Status change was not acknowledged by the backend"""
    pass


class OrderStore:
    """
    Holds the full set of orders fetched once per screen session

    The collection is replaced wholesale by reload() and patched one field at
    a time by apply_status(). Facets are derived from it on every read.
    """

    def __init__(self, queries: Optional[OrderQueries] = None,
                 orders: Optional[List[Order]] = None):
        self.queries = queries
        self._orders: Tuple[Order, ...] = tuple(orders or ())
        self.version = 0
        self.loaded = orders is not None

    @property
    def orders(self) -> Tuple[Order, ...]:
        return self._orders

    @property
    def facets(self) -> OrderFacets:
        return derive_facets(self._orders)

    def __len__(self) -> int:
        return len(self._orders)

    def get(self, order_id: str) -> Optional[Order]:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def reload(self) -> int:
        """
        Replace the collection with a fresh fetch

        Returns:
            Number of orders loaded

        Raises:
            OrderFetchError: previous contents are kept
        """
        if self.queries is None:
            self.queries = OrderQueries()

        try:
            fresh = self.queries.fetch_orders()
        except ApiError as e:
            logger.error(f"❌ Failed to load orders: {e}")
            raise OrderFetchError(str(e)) from e

        self._orders = tuple(fresh)
        self.version += 1
        self.loaded = True
        return len(self._orders)

    def apply_status(self, order_id: str, status: str) -> bool:
        """
        Set the status of the single order with this id

        Returns:
            False when no order has this id (collection unchanged)
        """
        updated = []
        found = False
        for order in self._orders:
            if order.id == order_id:
                order = order.with_status(status)
                found = True
            updated.append(order)

        if not found:
            logger.warning(f"Order {order_id} not in store; status not applied")
            return False

        self._orders = tuple(updated)
        return True
