# utils/sections/dialogs.py
"""
Dialog components for Sections domain
Add/Edit dialog with product picker and Delete confirmation

Version: 1.0.0
"""

import logging
import time
from typing import List, Sequence

import streamlit as st

from ..orders.common import format_currency
from ..products.catalog import (
    distinct_options, filter_products, format_product_option, product_lookup
)
from ..products.models import ProductSummary
from ..session import ScreenSession
from .manager import SectionManager
from .models import Section
from .store import SectionEditor, SectionSaveError, SectionValidationError
from .validators import validate_section_order

logger = logging.getLogger(__name__)


# ==================== Product Picker ====================

def _render_product_picker(editor: SectionEditor, products: Sequence[ProductSummary]) -> List[str]:
    """Filterable multi-select of product ids; selection survives filter changes"""
    options = distinct_options(products)
    prefix = f"sec_{editor.key}"

    col1, col2, col3 = st.columns(3)
    with col1:
        category = st.selectbox("Category", ["All"] + options["categories"], key=f"{prefix}_cat")
    with col2:
        sub_category = st.selectbox("Sub Category", ["All"] + options["sub_categories"], key=f"{prefix}_sub")
    with col3:
        tag = st.selectbox("Tag", ["All"] + options["tags"], key=f"{prefix}_tag")

    visible = filter_products(
        products,
        category=None if category == "All" else category,
        sub_category=None if sub_category == "All" else sub_category,
        tag=None if tag == "All" else tag,
    )

    lookup = product_lookup(products)
    selection_key = f"{prefix}_products"
    if selection_key not in st.session_state:
        st.session_state[selection_key] = list(editor.initial_values.get("product_ids") or [])

    current = st.session_state[selection_key]
    option_ids = [p.id for p in visible] + [pid for pid in current if pid not in {p.id for p in visible}]

    selected = st.multiselect(
        "Products",
        options=option_ids,
        format_func=lambda pid: format_product_option(lookup[pid]) if pid in lookup else pid,
        key=selection_key,
    )

    if selected:
        st.caption(f"Preview ({len(selected)} products)")
        for pid in selected:
            product = lookup.get(pid)
            if product is None:
                st.write(f"- ⚠️ Unknown product `{pid}`")
            else:
                st.write(f"- **{product.name}** · {product.category or '-'} / "
                         f"{product.sub_category or '-'} · {format_currency(product.price)}")
    return selected


# ==================== Add/Edit Section Dialog ====================

@st.dialog("🗂️ Section", width="large")
def show_section_dialog(session: ScreenSession, editor: SectionEditor):
    """
    Add or edit a section

    The default order comes from the editor snapshot taken when the dialog
    was opened.
    """
    manager: SectionManager = session.get("manager")
    products = session.get("catalog") or []
    values = editor.initial_values
    prefix = f"sec_{editor.key}"

    st.markdown("### ➕ New Section" if editor.is_new else f"### ✏️ Edit: {values.get('title')}")

    title = st.text_input("Title", value=values.get("title", ""), key=f"{prefix}_title")
    description = st.text_area("Description", value=values.get("description", ""), key=f"{prefix}_desc")
    image = st.text_input("Image URL", value=values.get("image", ""), key=f"{prefix}_image")

    col1, col2 = st.columns(2)
    with col1:
        order = st.number_input(
            "Order", min_value=0, step=1,
            value=int(values.get("order", editor.default_order)),
            key=f"{prefix}_order",
        )
    with col2:
        active = st.checkbox("Active", value=bool(values.get("active")), key=f"{prefix}_active")

    check = validate_section_order(order, manager.store.sections, editor.editing_id)
    if check.conflict:
        st.warning(f"⚠️ {check.message}")

    st.markdown("---")
    product_ids = _render_product_picker(editor, products)

    st.markdown("---")
    col1, col2 = st.columns(2)

    with col1:
        if st.button("💾 Save", type="primary", use_container_width=True, key=f"{prefix}_save"):
            form = {
                "title": title,
                "description": description,
                "product_ids": product_ids,
                "image": image,
                "order": order,
                "active": active,
            }
            try:
                results = manager.save(form, editor.editing_id)
                for warning in results.warnings:
                    st.warning(f"⚠️ {warning.message}")
                st.success("✅ Section saved")
                time.sleep(1)
                st.rerun()
            except SectionValidationError as e:
                for block in e.results.blocks:
                    st.error(f"❌ {block.message}")
            except SectionSaveError as e:
                st.error(f"❌ {e}")

    with col2:
        if st.button("❌ Cancel", use_container_width=True, key=f"{prefix}_cancel"):
            st.rerun()


# ==================== Delete Section Dialog ====================

@st.dialog("🗑️ Delete Section")
def show_delete_dialog(session: ScreenSession, section: Section):
    manager: SectionManager = session.get("manager")

    st.warning("⚠️ **Warning: This action cannot be undone!**")
    st.write(f"**Title:** {section.title}")
    st.write(f"**Order:** {section.order}")
    st.write(f"**Products:** {len(section.product_ids)}")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("🗑️ Delete", type="primary", use_container_width=True, key=f"sec_delete_{section.id}"):
            try:
                manager.delete(section.id)
                st.success("✅ Section deleted")
                time.sleep(1)
                st.rerun()
            except SectionSaveError as e:
                st.error(f"❌ {e}")

    with col2:
        if st.button("Cancel", use_container_width=True, key=f"sec_delete_cancel_{section.id}"):
            st.rerun()
