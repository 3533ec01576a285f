# utils/orders/queries.py
"""
Backend queries for Orders domain
All order endpoints are centralized here

Version: 1.0.0
"""

import logging
from typing import List, Optional

from ..api import ApiClient, ApiError, get_api_client
from .models import Order

logger = logging.getLogger(__name__)


class OrderQueries:
    """Backend calls for order management"""

    LIST_PATH = "/api/order/list"
    STATUS_PATH = "/api/order/status"

    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or get_api_client()
        self._last_error: Optional[str] = None

    def get_last_error(self) -> Optional[str]:
        """Get last backend error message"""
        return self._last_error

    def fetch_orders(self) -> List[Order]:
        """
        Fetch all orders, most recent first

        The backend returns orders oldest first; the list is reversed here.

        Raises:
            ApiError: if the backend call fails
        """
        try:
            data = self.client.post(self.LIST_PATH, json={})
        except ApiError as e:
            self._last_error = str(e)
            raise

        self._last_error = None
        raw_orders = data.get("orders") or []
        orders = [Order.from_api(doc) for doc in reversed(raw_orders)]
        logger.info(f"Fetched {len(orders)} orders")
        return orders

    def set_order_status(self, order_id: str, status: str) -> bool:
        """
        Send a status change for one order

        Returns:
            True when the backend acknowledged the change

        Raises:
            ApiError: if the backend call fails or is rejected
        """
        try:
            self.client.post(self.STATUS_PATH, json={"orderId": order_id, "status": status})
        except ApiError as e:
            self._last_error = str(e)
            raise

        self._last_error = None
        return True
