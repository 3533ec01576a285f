# utils/products/__init__.py
"""
Products domain - catalog list, edit and remove

Version: 1.0.0
"""

from .catalog import distinct_options, filter_products, format_product_option, product_lookup
from .manager import ProductError, ProductManager, ProductValidationError
from .models import ProductSummary
from .queries import ProductQueries

__all__ = [
    'ProductSummary',
    'ProductQueries',
    'ProductManager',
    'ProductError',
    'ProductValidationError',
    'distinct_options',
    'filter_products',
    'format_product_option',
    'product_lookup',
]
