# utils/products/common.py
"""
Common utilities for Products domain
Catalog constants and form validation

Version: 1.0.0
"""

import logging
from typing import Any, Dict

from ..validation import ValidationResults

logger = logging.getLogger(__name__)


class ProductConstants:
    CATEGORIES = ["Men", "Women", "Kids"]
    SUB_CATEGORIES = ["Topwear", "Bottomwear", "Winterwear"]
    SIZES = ["S", "M", "L", "XL", "XXL"]

    # Fields sent as JSON-encoded arrays in form updates
    ARRAY_FIELDS = ("colors", "sizes", "tags")


def create_category_indicator(category: str) -> str:
    icons = {
        "Men": "👨 Men",
        "Women": "👩 Women",
        "Kids": "🧒 Kids",
    }
    return icons.get(category, category or "")


def validate_product_update(fields: Dict[str, Any]) -> ValidationResults:
    """
    Validate the editable product fields

    Rules:
    - P1: name required
    - P2: price must be 0 or higher
    - P3: unknown size values (warning)
    """
    results = ValidationResults()

    if "name" in fields and not str(fields.get("name") or "").strip():
        results.add_block("P1", "Product name is required")

    price = fields.get("price")
    if price is not None and float(price) < 0:
        results.add_block("P2", "Price must be 0 or higher", price=price)

    unknown_sizes = [s for s in fields.get("sizes") or [] if s not in ProductConstants.SIZES]
    if unknown_sizes:
        results.add_warning("P3", f"Unknown sizes: {', '.join(unknown_sizes)}", sizes=unknown_sizes)

    return results
