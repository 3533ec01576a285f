# utils/orders/common.py
"""
Common utilities for Orders domain
Status constants, payment states, formatting and timezone helpers

Version: 1.0.0
"""

import logging
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Optional, Union
from zoneinfo import ZoneInfo

from ..config import APP_CONFIG

logger = logging.getLogger(__name__)

APP_TIMEZONE = ZoneInfo(APP_CONFIG["TIMEZONE"])


# ==================== Constants ====================

class OrderStatus(str, Enum):
    """Order lifecycle statuses (values are the backend wire strings)"""
    ORDER_PLACED = "Order Placed"
    PACKING = "Packing"
    SHIPPED = "Shipped"
    OUT_FOR_DELIVERY = "Out for delivery"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @property
    def label(self) -> str:
        if self is OrderStatus.OUT_FOR_DELIVERY:
            return "Out for Delivery"
        return self.value

    @classmethod
    def values(cls):
        return [s.value for s in cls]

    @classmethod
    def is_valid(cls, value: Optional[str]) -> bool:
        return value in cls.values()


class PaymentState(str, Enum):
    PAID = "paid"
    PENDING = "pending"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class OrderConstants:
    """Order-specific constants"""
    COD_METHOD = "COD"
    EXPORT_FILE_PREFIX = "orders"
    ITEM_SEPARATOR = "; "


# ==================== Status Indicators ====================

def create_status_indicator(status: str) -> str:
    """Create status indicator with emoji"""
    status_icons = {
        OrderStatus.ORDER_PLACED.value: '🔵 Order Placed',
        OrderStatus.PACKING.value: '📦 Packing',
        OrderStatus.SHIPPED.value: '🚚 Shipped',
        OrderStatus.OUT_FOR_DELIVERY.value: '🟠 Out for Delivery',
        OrderStatus.DELIVERED.value: '✅ Delivered',
        OrderStatus.CANCELLED.value: '❌ Cancelled',
    }
    return status_icons.get(status, f"⚪ {status}")


def create_payment_indicator(paid: bool) -> str:
    return "✅ Paid" if paid else "⏳ Pending"


# ==================== Number Formatting ====================

def format_amount(value: Union[int, float, None]) -> str:
    """
    Stringify an amount the way the storefront shows it:
    integral values without a trailing '.0', others unchanged

    Examples:
        100.0 -> "100"
        49.5  -> "49.5"
    """
    if value is None:
        return "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_currency(value: Union[int, float, None],
                    currency: Optional[str] = None) -> str:
    """Prefix the configured currency symbol"""
    symbol = APP_CONFIG["CURRENCY"] if currency is None else currency
    return f"{symbol}{format_amount(value)}"


# ==================== Date Helpers ====================

def parse_timestamp(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Parse backend ISO timestamps ('2024-05-01T10:20:30.000Z') to aware UTC

    Naive datetimes are assumed to be UTC.
    """
    if value is None or value == "":
        return None

    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            logger.warning(f"Unparseable timestamp: {value!r}")
            return None

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_datetime_local(dt: Optional[datetime],
                          fmt: Optional[str] = None,
                          tz: Optional[ZoneInfo] = None) -> str:
    """Format a timestamp in the configured timezone"""
    if dt is None:
        return ""
    tz = tz or APP_TIMEZONE
    return dt.astimezone(tz).strftime(fmt or APP_CONFIG["DATE_FORMAT"])


def day_bounds(from_day: date, to_day: date,
               tz: Optional[ZoneInfo] = None) -> tuple:
    """
    Convert an inclusive day range into aware datetimes covering whole days

    Returns:
        (start_of_from_day, end_of_to_day) in the given timezone
    """
    tz = tz or APP_TIMEZONE
    start = datetime.combine(from_day, time.min, tzinfo=tz)
    end = datetime.combine(to_day, time.max, tzinfo=tz)
    return start, end


def now_local() -> datetime:
    return datetime.now(APP_TIMEZONE)
