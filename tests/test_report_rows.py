"""Tests for the shared order -> report row transform."""

from zoneinfo import ZoneInfo

from utils.orders.models import OrderItem, ShippingAddress
from utils.orders.report import (
    REPORT_COLUMNS, build_report, format_address, format_item, format_items, shape_row
)

UTC = ZoneInfo("UTC")


def test_address_with_optional_parts():
    address = ShippingAddress(
        full_name="Asha Rao", line1="12 MG Road", line2="Flat 4", city="Pune",
        state="MH", postal_code="411001", country="India", phone="9800000000",
    )
    assert format_address(address) == "Asha Rao, 12 MG Road, Flat 4, Pune, MH-411001, India, 9800000000"


def test_address_without_line2_or_phone():
    address = ShippingAddress(
        full_name="Asha Rao", line1="12 MG Road", city="Pune",
        state="MH", postal_code="411001", country="India",
    )
    assert format_address(address) == "Asha Rao, 12 MG Road, Pune, MH-411001, India"


def test_item_color_is_optional():
    assert format_item(OrderItem("Tee", 2, "M", "Blue")) == "Tee x2 (Size: M, Color: Blue)"
    assert format_item(OrderItem("Tee", 1, "S")) == "Tee x1 (Size: S)"


def test_items_joined_with_semicolons():
    items = [OrderItem("Tee", 2, "M"), OrderItem("Scarf", 1, "L", "Red")]
    assert format_items(items) == "Tee x2 (Size: M); Scarf x1 (Size: L, Color: Red)"


def test_shape_row_matches_columns(sample_orders):
    row = shape_row(sample_orders[0], currency="₹", tz=UTC, date_format="%Y-%m-%d %H:%M")

    assert len(row) == len(REPORT_COLUMNS)
    assert dict(zip(REPORT_COLUMNS, row)) == {
        "Order ID": "A100",
        "Customer": "Asha Rao",
        "Email": "asha@example.com",
        "Address": "Asha Rao, 12 MG Road, Pune, MH-411001, India, 9800000000",
        "Items": "Cotton Tee x2 (Size: M, Color: Blue)",
        "Total": "₹100",
        "Status": "Delivered",
        "Paid": "Yes",
        "Date": "2024-05-01 10:00",
    }


def test_paid_column_follows_payment_not_status(make_order):
    delivered_cod = make_order(status="Delivered", method="COD")
    placed_card = make_order(status="Order Placed", method="Stripe")

    assert shape_row(delivered_cod)[7] == "No"
    assert shape_row(placed_card)[7] == "Yes"


def test_fractional_total_keeps_decimals(make_order):
    assert shape_row(make_order(total=250.5), currency="$")[5] == "$250.5"


def test_build_report_shapes_each_order_once(sample_orders):
    snapshot = build_report(sample_orders, currency="₹")

    assert snapshot.row_count == len(sample_orders)
    assert [r[0] for r in snapshot.rows] == [o.id for o in sample_orders]
    assert list(snapshot.to_dataframe().columns) == list(REPORT_COLUMNS)


def test_empty_report_keeps_columns():
    snapshot = build_report([])
    assert snapshot.is_empty()
    assert snapshot.to_dataframe().empty
    assert snapshot.columns == REPORT_COLUMNS
