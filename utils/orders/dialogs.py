# utils/orders/dialogs.py
"""
Dialog components for Orders domain
Order detail dialog with items, address and payment

Version: 1.0.0
"""

import logging

import pandas as pd
import streamlit as st

from .common import (
    create_payment_indicator, create_status_indicator, format_currency,
    format_datetime_local
)
from .models import Order
from .report import format_address

logger = logging.getLogger(__name__)


@st.dialog("📋 Order Details", width="large")
def show_detail_dialog(order: Order):
    """Read-only view of one order"""
    st.markdown(f"### Order `{order.id}`")

    col1, col2 = st.columns(2)
    with col1:
        st.write(f"**Customer:** {order.customer.name}")
        st.write(f"**Email:** {order.customer.email}")
        st.write(f"**Date:** {format_datetime_local(order.created_at)}")
    with col2:
        st.write(f"**Status:** {create_status_indicator(order.status)}")
        st.write(f"**Payment:** {order.payment_detail.method} · {create_payment_indicator(order.is_paid)}")
        if order.payment_detail.transaction_id:
            st.write(f"**Transaction:** `{order.payment_detail.transaction_id}`")

    st.markdown("---")
    st.markdown("**📍 Shipping Address**")
    st.write(format_address(order.shipping_address))

    st.markdown("**🛒 Items**")
    items_df = pd.DataFrame([
        {
            'Product': item.name,
            'Qty': item.quantity,
            'Size': item.selected_size,
            'Color': item.selected_color or '',
            'Unit Price': format_currency(item.unit_price),
            'Total': format_currency(item.total_price),
        }
        for item in order.items
    ])
    if items_df.empty:
        st.info("No items")
    else:
        st.dataframe(items_df, use_container_width=True, hide_index=True)

    st.markdown(f"#### Total: {format_currency(order.total_amount)}")

    if st.button("Close", use_container_width=True, key=f"order_detail_close_{order.id}"):
        st.rerun()
