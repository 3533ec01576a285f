# utils/sections/validators.py
"""
Section order validation
Every section holds a distinct `order` value (gaps are allowed)

Version: 1.0.0

Rules:
- S1: title required
- S2: order required
- S3: order must be 0 or higher
- S4: order already used by another section
- S5: inactive section with no products (warning)
- S6: order is not a whole number

The live warning shown while editing and the check run on submit both call
used_orders(), so they can never disagree.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Set

from ..validation import ValidationResults
from .models import Section

logger = logging.getLogger(__name__)

DUPLICATE_ORDER_MESSAGE = "That order number is already used by another section!"


@dataclass(frozen=True)
class SectionOrderCheck:
    ok: bool
    message: str = ""

    @property
    def conflict(self) -> bool:
        return not self.ok


def used_orders(sections: Sequence[Section], editing_id: Optional[str] = None) -> Set[int]:
    """Orders held by every section except the one being edited"""
    return {s.order for s in sections if not editing_id or s.id != editing_id}


def validate_section_order(candidate: Optional[int],
                           sections: Sequence[Section],
                           editing_id: Optional[str] = None) -> SectionOrderCheck:
    """ok unless another section already holds `candidate`"""
    if candidate is None:
        return SectionOrderCheck(ok=True)
    if int(candidate) in used_orders(sections, editing_id):
        return SectionOrderCheck(ok=False, message=DUPLICATE_ORDER_MESSAGE)
    return SectionOrderCheck(ok=True)


def next_default_order(sections: Sequence[Section]) -> int:
    """max(existing orders, default 0) + 1"""
    return max((s.order or 0 for s in sections), default=0) + 1


def coerce_order(value: Any) -> Optional[int]:
    """Whole-number order from form input; None when it is not one"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def validate_section_form(values: Dict[str, Any],
                          sections: Sequence[Section],
                          editing_id: Optional[str] = None) -> ValidationResults:
    """Authoritative pre-submit validation; blocks never reach the backend"""
    results = ValidationResults()

    if not str(values.get("title") or "").strip():
        results.add_block("S1", "Section title is required")

    raw_order = values.get("order")
    order = coerce_order(raw_order)
    if raw_order is None or str(raw_order).strip() == "":
        results.add_block("S2", "Section order is required")
    elif order is None:
        results.add_block("S6", "Order must be a whole number", order=raw_order)
    elif order < 0:
        results.add_block("S3", "Order must be 0 or higher", order=order)
    else:
        check = validate_section_order(order, sections, editing_id)
        if check.conflict:
            results.add_block("S4", check.message, order=order)

    if not values.get("active") and not values.get("product_ids"):
        results.add_warning("S5", "Section is inactive and has no products")

    return results
