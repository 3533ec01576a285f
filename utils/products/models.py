# utils/products/models.py
"""
Product summary model
Catalog fields used by the product list and the section product picker

Version: 1.0.0
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..orders.common import parse_timestamp


def _tuple(value: Any) -> Tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value if v)


@dataclass(frozen=True)
class ProductSummary:
    id: str
    name: str
    category: Optional[str] = None
    sub_category: Optional[str] = None
    tags: Tuple[str, ...] = ()
    price: float = 0
    brand: Optional[str] = None
    colors: Tuple[str, ...] = ()
    sizes: Tuple[str, ...] = ()
    description: Optional[str] = None
    best_seller: bool = False
    in_stock: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ProductSummary":
        return cls(
            id=str(data.get("_id") or data.get("id") or ""),
            name=data.get("name") or "",
            category=data.get("category") or None,
            sub_category=data.get("subCategory") or None,
            tags=_tuple(data.get("tags")),
            price=data.get("price") or 0,
            brand=data.get("brand") or None,
            colors=_tuple(data.get("color")),
            sizes=_tuple(data.get("sizes")),
            description=data.get("description") or None,
            best_seller=bool(data.get("bestSeller")),
            in_stock=bool(data.get("inStock", True)),
            created_at=parse_timestamp(data.get("createdAt")),
            updated_at=parse_timestamp(data.get("updatedAt")),
        )
