# utils/products/queries.py
"""
Backend queries for Products domain

Version: 1.0.0
"""

import json
import logging
from typing import Any, Dict, List, Optional

from ..api import ApiClient, get_api_client
from ..config import APP_CONFIG
from .common import ProductConstants
from .models import ProductSummary

logger = logging.getLogger(__name__)


class ProductQueries:
    """Backend calls for the product catalog"""

    LIST_PATH = "/api/product/list"
    REMOVE_PATH = "/api/product/remove"
    UPDATE_PATH = "/api/product/update/{product_id}"

    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or get_api_client()

    def get_products(self, limit: Optional[int] = None) -> List[ProductSummary]:
        """
        Fetch product summaries

        Args:
            limit: Max products to fetch (PRODUCT_LIST_LIMIT when omitted)

        Raises:
            ApiError: if the backend call fails
        """
        limit = limit or APP_CONFIG["PRODUCT_LIST_LIMIT"]
        data = self.client.get(self.LIST_PATH, params={"limit": limit}, auth=False)
        products = [ProductSummary.from_api(p) for p in data.get("products") or []]
        logger.info(f"Fetched {len(products)} products")
        return products

    def remove_product(self, product_id: str) -> str:
        """Delete a product; returns the backend message"""
        data = self.client.post(self.REMOVE_PATH, json={"id": product_id})
        return data.get("message") or "Product removed"

    def update_product(self, product_id: str, fields: Dict[str, Any]) -> str:
        """
        Update editable product fields (no images)

        Array fields are JSON-encoded, matching the multipart form contract.
        """
        form = {}
        for key, value in fields.items():
            if value is None:
                continue
            if key in ProductConstants.ARRAY_FIELDS or isinstance(value, (list, tuple)):
                form[key] = json.dumps(list(value))
            elif isinstance(value, bool):
                form[key] = "true" if value else "false"
            else:
                form[key] = str(value)

        path = self.UPDATE_PATH.format(product_id=product_id)
        data = self.client.patch(path, data=form)
        return data.get("message") or "Product updated"
