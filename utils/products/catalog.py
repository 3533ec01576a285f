# utils/products/catalog.py
"""
Product catalog helpers for the section product picker

Version: 1.0.0
"""

from typing import Dict, List, Optional, Sequence

from .models import ProductSummary


def _distinct(values) -> List[str]:
    """Distinct non-empty values in first-seen order"""
    seen = {}
    for v in values:
        if v and v not in seen:
            seen[v] = True
    return list(seen)


def distinct_options(products: Sequence[ProductSummary]) -> Dict[str, List[str]]:
    """Categories, sub categories and tags present in the catalog"""
    return {
        "categories": _distinct(p.category for p in products),
        "sub_categories": _distinct(p.sub_category for p in products),
        "tags": _distinct(tag for p in products for tag in p.tags),
    }


def filter_products(products: Sequence[ProductSummary],
                    category: Optional[str] = None,
                    sub_category: Optional[str] = None,
                    tag: Optional[str] = None) -> List[ProductSummary]:
    """Products matching every selected picker filter"""
    return [
        p for p in products
        if (not category or p.category == category)
        and (not sub_category or p.sub_category == sub_category)
        and (not tag or tag in p.tags)
    ]


def product_lookup(products: Sequence[ProductSummary]) -> Dict[str, ProductSummary]:
    return {p.id: p for p in products}


def format_product_option(product: ProductSummary) -> str:
    """Picker label: NAME | Cat: X | Sub: Y | Tags: a, b"""
    parts = [product.name]
    if product.category:
        parts.append(f"Cat: {product.category}")
    if product.sub_category:
        parts.append(f"Sub: {product.sub_category}")
    if product.tags:
        parts.append(f"Tags: {', '.join(product.tags)}")
    return " | ".join(parts)
