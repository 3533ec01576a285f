# utils/orders/page.py
"""
Main UI orchestrator for Orders domain
Renders the Orders screen with filters, metrics, list, status changes and exports

Version: 1.0.0
"""

import logging
from typing import List, Optional

import pandas as pd
import streamlit as st

from ..session import ScreenSession, enter_screen
from .common import (
    OrderStatus, PaymentState, create_payment_indicator, create_status_indicator,
    format_currency, format_datetime_local
)
from .dialogs import show_detail_dialog
from .export import ExportError, ExportResult, OrderReportExporter
from .facets import OrderFacets, seed_price_range
from .filters import FilterCriteria, count_active_filters, filter_orders
from .manager import OrderManager
from .models import Order
from .report import format_items
from .store import OrderFetchError, OrderStatusError, OrderStore

logger = logging.getLogger(__name__)

SCREEN = "orders"

FILTER_KEYS = [
    'orders_filter_search', 'orders_filter_id', 'orders_filter_customer',
    'orders_filter_products', 'orders_filter_price', 'orders_filter_status',
    'orders_filter_payment', 'orders_filter_dates',
]


# ==================== Session State ====================

def _reload(session: ScreenSession, store: OrderStore) -> bool:
    """Fetch orders and reset the price filter to the full span"""
    try:
        count = store.reload()
    except OrderFetchError as e:
        st.error(f"🔌 **Backend Connection Error**\n\n{e}")
        return False

    criteria = seed_price_range(session.get("criteria", FilterCriteria()), store.facets)
    session.set("criteria", criteria)
    if criteria.price_range:
        st.session_state['orders_filter_price'] = tuple(float(v) for v in criteria.price_range)
    logger.info(f"Orders screen loaded {count} orders")
    return True


def _init_screen(session: ScreenSession) -> OrderStore:
    store = session.get("store")
    if store is None:
        store = OrderStore()
        session.set("store", store)
        session.set("manager", OrderManager(store))
        session.set("exporter", OrderReportExporter())
        for key in FILTER_KEYS:
            st.session_state.pop(key, None)
        _reload(session, store)
    return store


# ==================== Filter Bar ====================

def _render_filter_bar(facets: OrderFacets) -> FilterCriteria:
    """Render filter widgets and return the resulting criteria"""
    with st.expander("🔍 Filters", expanded=True):
        col1, col2, col3 = st.columns([2, 1, 1])
        with col1:
            search = st.text_input(
                "🔍 Search",
                placeholder="Order ID, customer, product, amount...",
                key="orders_filter_search",
            )
        with col2:
            order_id = st.text_input("Order ID", key="orders_filter_id")
        with col3:
            customer = st.text_input("Customer", key="orders_filter_customer")

        col1, col2 = st.columns([2, 2])
        with col1:
            products = st.multiselect(
                "Products", options=list(facets.product_names), key="orders_filter_products"
            )
        with col2:
            price_range = None
            lo, hi = facets.price_bounds
            if hi > lo:
                if "orders_filter_price" not in st.session_state:
                    st.session_state["orders_filter_price"] = (float(lo), float(hi))
                price_range = st.slider(
                    "Price range",
                    min_value=float(lo),
                    max_value=float(hi),
                    key="orders_filter_price",
                )

        col1, col2, col3 = st.columns(3)
        with col1:
            statuses = ["All"] + OrderStatus.values()
            status = st.selectbox(
                "Status", options=statuses,
                format_func=lambda s: s if s == "All" else OrderStatus(s).label,
                key="orders_filter_status",
            )
        with col2:
            payments = ["All"] + [p.value for p in PaymentState]
            payment = st.selectbox(
                "Payment", options=payments,
                format_func=lambda p: p if p == "All" else PaymentState(p).label,
                key="orders_filter_payment",
            )
        with col3:
            dates = st.date_input("Date range", value=[], key="orders_filter_dates")

    return FilterCriteria(
        search=search.strip() or None,
        order_id=order_id.strip() or None,
        customer=customer.strip() or None,
        products=frozenset(products),
        price_range=tuple(price_range) if price_range else None,
        status=None if status == "All" else status,
        payment=None if payment == "All" else payment,
        date_range=tuple(dates) if dates and len(dates) == 2 else None,
    )


# ==================== Metrics ====================

def _render_metrics(store: OrderStore, filtered: List[Order], criteria: FilterCriteria):
    active = count_active_filters(criteria, store.facets.price_bounds)
    revenue = sum(o.total_amount for o in filtered)
    paid = sum(1 for o in filtered if o.is_paid)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Orders", f"{len(filtered)} / {len(store)}")
    with col2:
        st.metric("Revenue", format_currency(revenue))
    with col3:
        st.metric("Paid", paid, delta=f"{len(filtered) - paid} pending", delta_color="off")
    with col4:
        st.metric("Active Filters", active)


# ==================== Order List ====================

def _to_dataframe(orders: List[Order]) -> pd.DataFrame:
    return pd.DataFrame([
        {
            'Order ID': o.id,
            'Date': format_datetime_local(o.created_at),
            'Customer': o.customer.name,
            'Items': format_items(o.items),
            'Total': format_currency(o.total_amount),
            'Payment': f"{o.payment_detail.method} · {create_payment_indicator(o.is_paid)}",
            'Status': create_status_indicator(o.status),
        }
        for o in orders
    ])


def _render_order_actions(session: ScreenSession, filtered: List[Order]):
    """Detail view and status change for one selected order"""
    manager: OrderManager = session.get("manager")
    labels = {o.id: f"{o.id} · {o.customer.name} · {format_currency(o.total_amount)}" for o in filtered}

    selected_id = st.selectbox(
        "Select order", options=list(labels),
        format_func=lambda oid: labels[oid], key="orders_selected",
    )
    order: Optional[Order] = manager.store.get(selected_id)
    if order is None:
        return

    col1, col2, col3 = st.columns([1, 2, 1])
    with col1:
        if st.button("👁️ Details", use_container_width=True, key="orders_detail_btn"):
            show_detail_dialog(order)
    with col2:
        statuses = OrderStatus.values()
        new_status = st.selectbox(
            "Status", options=statuses,
            index=statuses.index(order.status) if order.status in statuses else 0,
            format_func=lambda s: OrderStatus(s).label,
            key=f"orders_status_{order.id}",
            label_visibility="collapsed",
        )
    with col3:
        if st.button("🔄 Update Status", type="primary", use_container_width=True,
                     disabled=new_status == order.status, key="orders_status_btn"):
            try:
                manager.change_status(order.id, new_status)
                st.success(f"✅ Status updated to {OrderStatus(new_status).label}")
                st.rerun()
            except (ValueError, OrderStatusError) as e:
                st.error(f"❌ {e}")


# ==================== Export ====================

def _render_export(session: ScreenSession, filtered: List[Order]):
    exporter: OrderReportExporter = session.get("exporter")

    st.markdown("##### 📥 Export")
    cols = st.columns(len(exporter.formats))
    for col, key in zip(cols, exporter.formats):
        encoder = exporter.get_encoder(key)
        with col:
            if st.button(f"📄 {encoder.label}", use_container_width=True, key=f"orders_export_{key}"):
                result = _run_export(session, exporter, key, filtered)
                if result is not None:
                    session.set("export_result", result)

    result: Optional[ExportResult] = session.get("export_result")
    if result is not None:
        st.download_button(
            label=f"⬇️ Download {result.label} ({result.row_count} orders)",
            data=result.data,
            file_name=result.filename,
            mime=result.mime,
            use_container_width=True,
            key="orders_export_download",
        )


def _run_export(session: ScreenSession, exporter: OrderReportExporter,
                key: str, filtered: List[Order]) -> Optional[ExportResult]:
    try:
        with st.spinner("Generating report..."):
            if key == "word":
                job = exporter.export_async(key, filtered, owner=session)
                return job.wait()
            return exporter.export(key, filtered)
    except ExportError as e:
        st.error(f"❌ {e}")
        return None


# ==================== Main ====================

def render_orders_page():
    """Render the Orders screen"""
    session = enter_screen(SCREEN)
    store = _init_screen(session)

    col_title, col_reset, col_refresh = st.columns([4, 1, 1])
    with col_title:
        st.subheader("📦 Orders")
    with col_reset:
        if st.button("✖️ Clear Filters", use_container_width=True, key="orders_clear"):
            for key in FILTER_KEYS:
                st.session_state.pop(key, None)
            session.set("criteria", seed_price_range(FilterCriteria(), store.facets))
            st.rerun()
    with col_refresh:
        if st.button("🔄 Refresh", use_container_width=True, key="orders_refresh"):
            _reload(session, store)

    facets = store.facets
    criteria = _render_filter_bar(facets)
    session.set("criteria", criteria)

    filtered = filter_orders(store.orders, criteria)
    _render_metrics(store, filtered, criteria)

    if filtered:
        st.dataframe(_to_dataframe(filtered), use_container_width=True, hide_index=True)
        st.markdown("---")
        _render_order_actions(session, filtered)
    else:
        st.info("📭 No orders found matching the filters")

    st.markdown("---")
    _render_export(session, filtered)
