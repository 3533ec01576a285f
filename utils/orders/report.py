# utils/orders/report.py
"""
Order report rows
One canonical order -> flat record transform shared by every export format

Version: 1.0.0

The PDF, Excel and Word generators all consume a ReportSnapshot built here,
so the three files always carry identical cell text.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence, Tuple
from zoneinfo import ZoneInfo

import pandas as pd

from ..config import APP_CONFIG
from .common import OrderConstants, format_currency, format_datetime_local, now_local
from .models import Order, OrderItem, ShippingAddress

logger = logging.getLogger(__name__)

REPORT_COLUMNS: Tuple[str, ...] = (
    "Order ID",
    "Customer",
    "Email",
    "Address",
    "Items",
    "Total",
    "Status",
    "Paid",
    "Date",
)


def format_address(address: ShippingAddress) -> str:
    """
    Single-line address:
    full name, line1[, line2], city, state-postal, country[, phone]
    """
    parts = [address.full_name, address.line1]
    if address.line2:
        parts.append(address.line2)
    parts.extend([
        address.city,
        f"{address.state}-{address.postal_code}",
        address.country,
    ])
    if address.phone:
        parts.append(address.phone)
    return ", ".join(parts)


def format_item(item: OrderItem) -> str:
    """name xQty (Size: s[, Color: c])"""
    details = f"Size: {item.selected_size}"
    if item.selected_color:
        details += f", Color: {item.selected_color}"
    return f"{item.name} x{item.quantity} ({details})"


def format_items(items: Sequence[OrderItem]) -> str:
    return OrderConstants.ITEM_SEPARATOR.join(format_item(it) for it in items)


def shape_row(order: Order,
              currency: Optional[str] = None,
              tz: Optional[ZoneInfo] = None,
              date_format: Optional[str] = None) -> Tuple[str, ...]:
    """Flatten one order into the report columns (all cells are text)"""
    return (
        order.id,
        order.customer.name,
        order.customer.email,
        format_address(order.shipping_address),
        format_items(order.items),
        format_currency(order.total_amount, currency),
        order.status,
        "Yes" if order.is_paid else "No",
        format_datetime_local(order.created_at, date_format, tz),
    )


@dataclass(frozen=True)
class ReportSnapshot:
    """Immutable row-shaped copy of a filtered projection"""
    rows: Tuple[Tuple[str, ...], ...]
    columns: Tuple[str, ...] = REPORT_COLUMNS
    generated_at: datetime = field(default_factory=now_local)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def is_empty(self) -> bool:
        return not self.rows

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(list(self.rows), columns=list(self.columns))


def build_report(orders: Sequence[Order],
                 currency: Optional[str] = None,
                 tz: Optional[ZoneInfo] = None,
                 date_format: Optional[str] = None) -> ReportSnapshot:
    """Shape every order once; the result is shared by all encoders"""
    currency = APP_CONFIG["CURRENCY"] if currency is None else currency
    rows = tuple(shape_row(o, currency, tz, date_format) for o in orders)
    logger.debug(f"Report snapshot built with {len(rows)} rows")
    return ReportSnapshot(rows=rows)
