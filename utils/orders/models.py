# utils/orders/models.py
"""
Order data model
Typed view over the order documents returned by the backend

Version: 1.0.0
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from .common import OrderConstants, parse_timestamp


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_text(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _number(value: Any) -> float:
    if value is None or value == "":
        return 0
    if isinstance(value, (int, float)):
        return value
    return float(value)


@dataclass(frozen=True)
class Customer:
    name: str
    email: str

    @classmethod
    def from_api(cls, data: Optional[Dict[str, Any]]) -> "Customer":
        data = data or {}
        return cls(name=_text(data.get("name")), email=_text(data.get("email")))


@dataclass(frozen=True)
class OrderItem:
    name: str
    quantity: int
    selected_size: str
    selected_color: Optional[str] = None
    unit_price: float = 0
    total_price: float = 0
    product_snapshot: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "OrderItem":
        return cls(
            name=_text(data.get("name")),
            quantity=int(data.get("quantity") or 0),
            selected_size=_text(data.get("selectedSize")),
            selected_color=_optional_text(data.get("selectedColor")),
            unit_price=_number(data.get("unitPrice")),
            total_price=_number(data.get("totalPrice")),
            product_snapshot=data.get("productSnapshot") or {},
        )


@dataclass(frozen=True)
class ShippingAddress:
    full_name: str
    line1: str
    city: str
    state: str
    postal_code: str
    country: str
    line2: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_api(cls, data: Optional[Dict[str, Any]]) -> "ShippingAddress":
        data = data or {}
        return cls(
            full_name=_text(data.get("fullName")),
            line1=_text(data.get("line1")),
            line2=_optional_text(data.get("line2")),
            city=_text(data.get("city")),
            state=_text(data.get("state")),
            postal_code=_text(data.get("postalCode")),
            country=_text(data.get("country")),
            phone=_optional_text(data.get("phone")),
        )


@dataclass(frozen=True)
class PaymentDetail:
    method: str
    transaction_id: Optional[str] = None

    @property
    def is_paid(self) -> bool:
        """Paid when a transaction id exists or the method is not cash on delivery"""
        return bool(self.transaction_id) or self.method != OrderConstants.COD_METHOD

    @classmethod
    def from_api(cls, data: Optional[Dict[str, Any]]) -> "PaymentDetail":
        data = data or {}
        return cls(
            method=_text(data.get("method")),
            transaction_id=_optional_text(data.get("transactionId")),
        )


@dataclass(frozen=True)
class Order:
    id: str
    customer: Customer
    items: Tuple[OrderItem, ...]
    shipping_address: ShippingAddress
    payment_detail: PaymentDetail
    status: str
    total_amount: float
    created_at: Optional[datetime]

    @property
    def is_paid(self) -> bool:
        return self.payment_detail.is_paid

    @property
    def item_names(self) -> Tuple[str, ...]:
        return tuple(item.name for item in self.items)

    def with_status(self, status: str) -> "Order":
        return replace(self, status=status)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Order":
        """Build an Order from the backend JSON document"""
        return cls(
            id=_text(data.get("_id") or data.get("id")),
            customer=Customer.from_api(data.get("user")),
            items=tuple(OrderItem.from_api(it) for it in data.get("items") or []),
            shipping_address=ShippingAddress.from_api(data.get("shippingAddress")),
            payment_detail=PaymentDetail.from_api(data.get("paymentDetail")),
            status=_text(data.get("status")),
            total_amount=_number(data.get("totalAmount")),
            created_at=parse_timestamp(data.get("createdAt")),
        )
