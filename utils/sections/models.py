# utils/sections/models.py
"""
Landing page section model

Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple


def unique_ids(values: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    """Ordered set of product ids (first occurrence wins)"""
    seen = {}
    for v in values or ():
        key = str(v)
        if key not in seen:
            seen[key] = True
    return tuple(seen)


@dataclass(frozen=True)
class Section:
    title: str
    order: int
    id: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    product_ids: Tuple[str, ...] = ()
    image: Optional[str] = None
    active: bool = False

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Section":
        order = data.get("order")
        return cls(
            id=str(data["_id"]) if data.get("_id") else data.get("id"),
            title=data.get("title") or "",
            slug=data.get("slug") or None,
            description=data.get("description") or None,
            product_ids=unique_ids(data.get("productIds")),
            image=data.get("image") or None,
            order=int(order) if order is not None else 0,
            active=bool(data.get("active")),
        )

    def to_form_values(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description or "",
            "product_ids": list(self.product_ids),
            "image": self.image or "",
            "order": self.order,
            "active": self.active,
        }


def build_upsert_payload(values: Dict[str, Any], editing_id: Optional[str] = None) -> Dict[str, Any]:
    """Backend payload for /api/section/upsert; id only when editing"""
    payload = {
        "title": (values.get("title") or "").strip(),
        "description": values.get("description") or "",
        "productIds": list(unique_ids(values.get("product_ids"))),
        "image": values.get("image") or "",
        "order": int(values["order"]),
        "active": bool(values.get("active")),
    }
    if editing_id:
        payload["id"] = editing_id
    return payload
