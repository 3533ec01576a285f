"""Tests for the Orders screen."""

from unittest.mock import patch

from streamlit.testing.v1 import AppTest

EXPORT_KEYS = {"orders_export_pdf", "orders_export_excel", "orders_export_word"}


def orders_screen():
    from utils.orders.page import render_orders_page
    render_orders_page()


def run_screen(sample_orders, search=None):
    with patch("utils.orders.store.OrderQueries") as store_queries, \
            patch("utils.orders.manager.OrderQueries"):
        store_queries.return_value.fetch_orders.return_value = list(sample_orders)

        at = AppTest.from_function(orders_screen)
        at.run(timeout=30)
        if search is not None:
            at.text_input(key="orders_filter_search").set_value(search)
            at.run(timeout=30)
    return at


def test_export_buttons_shown_with_orders(sample_orders):
    at = run_screen(sample_orders)

    assert not at.exception
    assert EXPORT_KEYS <= {b.key for b in at.button}


def test_export_buttons_shown_when_nothing_matches(sample_orders):
    at = run_screen(sample_orders, search="no-such-order")

    assert not at.exception
    assert any("No orders found" in info.value for info in at.info)
    assert EXPORT_KEYS <= {b.key for b in at.button}
    assert "orders_status_btn" not in {b.key for b in at.button}
