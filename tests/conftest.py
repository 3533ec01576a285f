"""Shared fixtures for the storefront admin tests."""

import itertools

import pytest

from utils.orders.models import Order

_ids = itertools.count(1)


def _order_doc(order_id=None, total=100, status="Order Placed", customer="Asha Rao",
               email="asha@example.com", items=None, method="COD", transaction_id=None,
               created_at="2024-05-01T10:00:00.000Z"):
    if items is None:
        items = [("Cotton Tee", 1, "M", None)]
    return {
        "_id": order_id or f"ord{next(_ids):04d}",
        "user": {"name": customer, "email": email},
        "items": [
            {
                "name": name,
                "quantity": qty,
                "selectedSize": size,
                "selectedColor": color,
                "unitPrice": total,
                "totalPrice": total,
            }
            for name, qty, size, color in items
        ],
        "shippingAddress": {
            "fullName": customer,
            "line1": "12 MG Road",
            "city": "Pune",
            "state": "MH",
            "postalCode": "411001",
            "country": "India",
            "phone": "9800000000",
        },
        "paymentDetail": {"method": method, "transactionId": transaction_id},
        "status": status,
        "totalAmount": total,
        "createdAt": created_at,
    }


@pytest.fixture
def order_doc():
    """Factory for raw backend order documents."""
    return _order_doc


@pytest.fixture
def make_order():
    """Factory for Order objects built through Order.from_api."""
    def factory(**kwargs):
        return Order.from_api(_order_doc(**kwargs))
    return factory


@pytest.fixture
def sample_orders(make_order):
    """Four orders covering every filter dimension."""
    return [
        make_order(order_id="A100", total=100, status="Delivered", customer="Asha Rao",
                   items=[("Cotton Tee", 2, "M", "Blue")], method="Stripe", transaction_id="tx_1",
                   created_at="2024-05-01T10:00:00.000Z"),
        make_order(order_id="B200", total=50, status="Cancelled", customer="Vikram Shah",
                   items=[("Denim Jeans", 1, "L", None)],
                   created_at="2024-05-03T10:00:00.000Z"),
        make_order(order_id="C300", total=250.5, status="Shipped", customer="Meera Iyer",
                   items=[("Cotton Tee", 1, "S", None), ("Wool Scarf", 1, "M", "Red")],
                   method="Razorpay", created_at="2024-05-05T10:00:00.000Z"),
        make_order(order_id="D400", total=75, status="Order Placed", customer="asha kapoor",
                   items=[("Linen Shirt", 3, "XL", None)],
                   created_at="2024-05-07T10:00:00.000Z"),
    ]
