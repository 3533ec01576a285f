# utils/orders/manager.py
"""
Order Manager - Business logic for order status changes

Version: 1.0.0
"""

import logging
from typing import Optional

from ..api import ApiError
from .common import OrderStatus
from .queries import OrderQueries
from .store import OrderStatusError, OrderStore

logger = logging.getLogger(__name__)


class OrderManager:
    """Status mutations, reconciled into the OrderStore after acknowledgment"""

    def __init__(self, store: OrderStore, queries: Optional[OrderQueries] = None):
        self.store = store
        self.queries = queries or store.queries or OrderQueries()

    def change_status(self, order_id: str, new_status: str) -> bool:
        """
        Change the status of one order

        The store is only touched after the backend acknowledges the change,
        so a failure leaves displayed and server state consistent.

        Args:
            order_id: Order to update
            new_status: One of OrderStatus values

        Returns:
            True if successful

        Raises:
            ValueError: status is not a known order status (nothing is sent)
            OrderStatusError: backend failure; store unchanged
        """
        if not OrderStatus.is_valid(new_status):
            raise ValueError(f"Unknown order status: {new_status}")

        try:
            self.queries.set_order_status(order_id, new_status)
        except ApiError as e:
            logger.error(f"❌ Error updating status of order {order_id}: {e}")
            raise OrderStatusError(f"Failed to update status: {e}") from e

        self.store.apply_status(order_id, new_status)
        logger.info(f"✅ Order {order_id} status -> {new_status}")
        return True
