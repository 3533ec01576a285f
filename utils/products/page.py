# utils/products/page.py
"""
Main UI orchestrator for Products domain
Catalog list with category filter and edit/remove actions

Version: 1.0.0
"""

import logging
from typing import List

import pandas as pd
import streamlit as st

from ..config import APP_CONFIG
from ..orders.common import format_currency, format_datetime_local
from ..session import ScreenSession, enter_screen
from .catalog import distinct_options, filter_products
from .common import create_category_indicator
from .dialogs import show_edit_dialog, show_remove_dialog
from .manager import ProductError, ProductManager
from .models import ProductSummary

logger = logging.getLogger(__name__)

SCREEN = "products"


def _get_manager(session: ScreenSession) -> ProductManager:
    manager = session.get("manager")
    if manager is None:
        manager = ProductManager()
        session.set("manager", manager)
        try:
            manager.reload()
        except ProductError as e:
            st.error(f"🔌 **Backend Connection Error**\n\n{e}")
    return manager


def _render_filter_bar(products: List[ProductSummary]) -> List[ProductSummary]:
    options = distinct_options(products)

    col1, col2, col3 = st.columns(3)
    with col1:
        category = st.selectbox("Category", ["All"] + options["categories"], key="products_filter_category")
    with col2:
        sub_category = st.selectbox("Sub Category", ["All"] + options["sub_categories"],
                                    key="products_filter_sub")
    with col3:
        search = st.text_input("🔍 Search", placeholder="Product name...", key="products_filter_search")

    filtered = filter_products(
        products,
        category=None if category == "All" else category,
        sub_category=None if sub_category == "All" else sub_category,
    )
    if search:
        needle = search.strip().lower()
        filtered = [p for p in filtered if needle in p.name.lower()]
    return filtered


def _to_dataframe(products: List[ProductSummary]) -> pd.DataFrame:
    currency = APP_CONFIG["CURRENCY"]
    return pd.DataFrame([
        {
            'Name': p.name,
            'Category': create_category_indicator(p.category),
            'Sub Category': p.sub_category or '',
            'Price': format_currency(p.price, currency),
            'Sizes': ", ".join(p.sizes),
            'Tags': ", ".join(p.tags),
            'Best Seller': '⭐' if p.best_seller else '',
            'In Stock': '✅' if p.in_stock else '❌',
            'Updated': format_datetime_local(p.updated_at) if p.updated_at else '',
        }
        for p in products
    ])


def render_products_page():
    """Render the Products screen"""
    session = enter_screen(SCREEN)
    manager = _get_manager(session)

    col_title, col_refresh = st.columns([5, 1])
    with col_title:
        st.subheader("🛍️ Products")
    with col_refresh:
        if st.button("🔄 Refresh", use_container_width=True, key="products_refresh"):
            try:
                manager.reload()
            except ProductError as e:
                st.error(f"❌ {e}")

    filtered = _render_filter_bar(manager.products)

    if not filtered:
        st.info("📭 No products found")
        return

    st.caption(f"Showing {len(filtered)} of {len(manager.products)} products")
    st.dataframe(_to_dataframe(filtered), use_container_width=True, hide_index=True)

    st.markdown("---")
    labels = {p.id: f"{p.name} ({p.category or '-'})" for p in filtered}
    selected_id = st.selectbox(
        "Select product",
        options=list(labels),
        format_func=lambda pid: labels[pid],
        key="products_selected",
    )
    selected = next((p for p in filtered if p.id == selected_id), None)
    if selected is None:
        return

    col1, col2 = st.columns(2)
    with col1:
        if st.button("✏️ Edit", use_container_width=True, key="products_edit_btn"):
            show_edit_dialog(manager, selected)
    with col2:
        if st.button("🗑️ Remove", use_container_width=True, key="products_remove_btn"):
            show_remove_dialog(manager, selected)
