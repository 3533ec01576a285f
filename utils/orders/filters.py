# utils/orders/filters.py
"""
Order filter engine
Conjunctive predicate evaluation over the in-memory order collection

Version: 1.0.0

Every criterion is optional; an absent or empty value means "no constraint".
String matching is case-insensitive substring matching.
"""

import logging
from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from .common import APP_TIMEZONE, PaymentState, day_bounds, format_amount
from .models import Order

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterCriteria:
    """Current filter selection for the Orders screen"""
    search: Optional[str] = None
    order_id: Optional[str] = None
    customer: Optional[str] = None
    products: FrozenSet[str] = field(default_factory=frozenset)
    price_range: Optional[Tuple[float, float]] = None
    status: Optional[str] = None
    payment: Optional[str] = None
    date_range: Optional[Tuple[datetime, datetime]] = None

    def replace(self, **changes) -> "FilterCriteria":
        if "products" in changes:
            changes["products"] = frozenset(changes["products"] or ())
        return replace(self, **changes)

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))


# ==================== Predicates ====================

def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle in (haystack or "").lower()


def _match_search(order: Order, text: str) -> bool:
    return (
        _contains(order.id, text)
        or _contains(order.customer.name, text)
        or any(_contains(name, text) for name in order.item_names)
        or text in format_amount(order.total_amount)
    )


def _normalize_range(value) -> Optional[Tuple]:
    """Accept 2-sequences only; anything else is no constraint"""
    if not value:
        return None
    try:
        lo, hi = value
    except (TypeError, ValueError):
        return None
    if lo is None or hi is None:
        return None
    return lo, hi


def _normalize_date_range(value) -> Optional[Tuple[datetime, datetime]]:
    bounds = _normalize_range(value)
    if bounds is None:
        return None
    lo, hi = bounds
    # Plain dates cover whole days
    if not isinstance(lo, datetime) and isinstance(lo, date):
        lo = day_bounds(lo, lo)[0]
    if not isinstance(hi, datetime) and isinstance(hi, date):
        hi = day_bounds(hi, hi)[1]
    if not isinstance(lo, datetime) or not isinstance(hi, datetime):
        return None
    # Naive bounds are local wall-clock times
    if lo.tzinfo is None:
        lo = lo.replace(tzinfo=APP_TIMEZONE)
    if hi.tzinfo is None:
        hi = hi.replace(tzinfo=APP_TIMEZONE)
    return lo, hi


def build_predicates(criteria: FilterCriteria) -> List[Callable[[Order], bool]]:
    """Translate criteria into the list of active predicates"""
    predicates: List[Callable[[Order], bool]] = []

    if criteria.search:
        text = criteria.search.lower()
        predicates.append(lambda o: _match_search(o, text))

    if criteria.order_id:
        order_id = criteria.order_id.lower()
        predicates.append(lambda o: _contains(o.id, order_id))

    if criteria.customer:
        customer = criteria.customer.lower()
        predicates.append(lambda o: _contains(o.customer.name, customer))

    if criteria.products:
        products = frozenset(criteria.products)
        predicates.append(lambda o: any(name in products for name in o.item_names))

    price_range = _normalize_range(criteria.price_range)
    if price_range:
        lo, hi = price_range
        predicates.append(lambda o: lo <= o.total_amount <= hi)

    if criteria.status:
        status = criteria.status
        predicates.append(lambda o: o.status == status)

    if criteria.payment == PaymentState.PAID.value:
        predicates.append(lambda o: o.is_paid)
    elif criteria.payment == PaymentState.PENDING.value:
        predicates.append(lambda o: not o.is_paid)

    date_range = _normalize_date_range(criteria.date_range)
    if date_range:
        start, end = date_range
        predicates.append(
            lambda o: o.created_at is not None and start <= o.created_at <= end
        )

    return predicates


def filter_orders(orders: Sequence[Order], criteria: Optional[FilterCriteria]) -> List[Order]:
    """
    Return the orders matching every active criterion

    Pure function: the result is a subsequence of `orders` in the original
    relative order. Empty criteria return the input unchanged.
    """
    if criteria is None:
        return list(orders)

    predicates = build_predicates(criteria)
    if not predicates:
        return list(orders)

    return [o for o in orders if all(p(o) for p in predicates)]


def count_active_filters(criteria: FilterCriteria, full_price_range: Optional[Iterable] = None) -> int:
    """Number of criteria narrowing the view (a full-span price range does not count)"""
    count = 0
    for f in fields(criteria):
        value = getattr(criteria, f.name)
        if not value:
            continue
        if f.name == "price_range" and full_price_range is not None \
                and tuple(value) == tuple(full_price_range):
            continue
        count += 1
    return count
