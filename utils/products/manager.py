# utils/products/manager.py
"""
Product Manager - edit and remove catalog products

Version: 1.0.0
"""

import logging
from typing import Any, Dict, List, Optional

from ..api import ApiError
from .common import validate_product_update
from .models import ProductSummary
from .queries import ProductQueries

logger = logging.getLogger(__name__)


class ProductError(Exception):
    """Base exception for product operations"""
    pass


class ProductValidationError(ProductError):
    """Form values rejected before any backend call"""

    def __init__(self, results):
        self.results = results
        super().__init__("; ".join(r.message for r in results.blocks))


class ProductManager:
    """Product list state plus edit/remove operations"""

    def __init__(self, queries: Optional[ProductQueries] = None):
        self.queries = queries or ProductQueries()
        self.products: List[ProductSummary] = []

    def reload(self) -> int:
        """
        Raises:
            ProductError: previous list is kept
        """
        try:
            self.products = self.queries.get_products()
        except ApiError as e:
            logger.error(f"❌ Failed to load products: {e}")
            raise ProductError(f"Failed to fetch products: {e}") from e
        return len(self.products)

    def update_product(self, product_id: str, fields: Dict[str, Any]) -> str:
        results = validate_product_update(fields)
        if results.has_blocks:
            raise ProductValidationError(results)

        try:
            message = self.queries.update_product(product_id, fields)
        except ApiError as e:
            logger.error(f"❌ Error updating product {product_id}: {e}")
            raise ProductError(f"Failed to update product: {e}") from e

        logger.info(f"✅ Updated product {product_id}: {list(fields)}")
        self._reload_quietly()
        return message

    def remove_product(self, product_id: str) -> str:
        try:
            message = self.queries.remove_product(product_id)
        except ApiError as e:
            logger.error(f"❌ Error removing product {product_id}: {e}")
            raise ProductError(f"Failed to remove product: {e}") from e

        logger.info(f"✅ Removed product {product_id}")
        self._reload_quietly()
        return message

    def _reload_quietly(self):
        """Refresh after a successful mutation; a failed refresh keeps the old list"""
        try:
            self.reload()
        except ProductError as e:
            logger.warning(f"⚠️ Product list not refreshed: {e}")
