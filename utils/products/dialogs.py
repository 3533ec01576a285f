# utils/products/dialogs.py
"""
Dialog components for Products domain
Edit and Remove dialogs

Version: 1.0.0
"""

import logging
import time

import streamlit as st

from .common import ProductConstants
from .manager import ProductError, ProductManager, ProductValidationError
from .models import ProductSummary

logger = logging.getLogger(__name__)


def _split_csv(value: str):
    return [v.strip() for v in (value or "").split(",") if v.strip()]


# ==================== Edit Product Dialog ====================

@st.dialog("✏️ Edit Product", width="large")
def show_edit_dialog(manager: ProductManager, product: ProductSummary):
    """Edit scalar and list fields of a product (images are not editable here)"""
    st.markdown(f"### {product.name}")

    col1, col2 = st.columns(2)
    with col1:
        name = st.text_input("Product Name", value=product.name, key=f"pe_name_{product.id}")
        categories = ProductConstants.CATEGORIES
        category = st.selectbox(
            "Category", options=categories,
            index=categories.index(product.category) if product.category in categories else 0,
            key=f"pe_category_{product.id}"
        )
        sub_categories = ProductConstants.SUB_CATEGORIES
        sub_category = st.selectbox(
            "Sub Category", options=sub_categories,
            index=sub_categories.index(product.sub_category) if product.sub_category in sub_categories else 0,
            key=f"pe_sub_{product.id}"
        )
        price = st.number_input(
            "Price", value=float(product.price or 0), step=1.0, key=f"pe_price_{product.id}"
        )
    with col2:
        brand = st.text_input("Brand", value=product.brand or "", key=f"pe_brand_{product.id}")
        sizes = st.multiselect(
            "Sizes", options=ProductConstants.SIZES,
            default=[s for s in product.sizes if s in ProductConstants.SIZES],
            key=f"pe_sizes_{product.id}"
        )
        colors = st.text_input("Colors (comma separated)", value=", ".join(product.colors),
                               key=f"pe_colors_{product.id}")
        tags = st.text_input("Tags (comma separated)", value=", ".join(product.tags),
                             key=f"pe_tags_{product.id}")

    description = st.text_area("Description", value=product.description or "",
                               key=f"pe_desc_{product.id}")

    flag_col1, flag_col2 = st.columns(2)
    with flag_col1:
        best_seller = st.checkbox("Best Seller", value=product.best_seller, key=f"pe_best_{product.id}")
    with flag_col2:
        in_stock = st.checkbox("In Stock", value=product.in_stock, key=f"pe_stock_{product.id}")

    st.markdown("---")
    col1, col2 = st.columns(2)

    with col1:
        if st.button("💾 Save", type="primary", use_container_width=True, key=f"pe_save_{product.id}"):
            fields = {
                "name": name.strip(),
                "description": description,
                "category": category,
                "subCategory": sub_category,
                "price": price,
                "brand": brand,
                "sizes": sizes,
                "colors": _split_csv(colors),
                "tags": _split_csv(tags),
                "bestSeller": best_seller,
                "inStock": in_stock,
            }
            try:
                message = manager.update_product(product.id, fields)
                st.success(f"✅ {message}")
                time.sleep(1)
                st.rerun()
            except ProductValidationError as e:
                for block in e.results.blocks:
                    st.error(f"❌ {block.message}")
            except ProductError as e:
                st.error(f"❌ {e}")

    with col2:
        if st.button("❌ Cancel", use_container_width=True, key=f"pe_cancel_{product.id}"):
            st.rerun()


# ==================== Remove Product Dialog ====================

@st.dialog("🗑️ Remove Product")
def show_remove_dialog(manager: ProductManager, product: ProductSummary):
    st.warning("⚠️ **Warning: This action cannot be undone!**")
    st.write(f"**Product:** {product.name}")
    st.write(f"**Category:** {product.category or '-'} / {product.sub_category or '-'}")

    confirmed = st.checkbox("✓ Remove this product from the catalog", key=f"pr_confirm_{product.id}")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("🗑️ Remove", type="primary", use_container_width=True,
                     disabled=not confirmed, key=f"pr_remove_{product.id}"):
            try:
                message = manager.remove_product(product.id)
                st.success(f"✅ {message}")
                time.sleep(1)
                st.rerun()
            except ProductError as e:
                st.error(f"❌ {e}")

    with col2:
        if st.button("Cancel", use_container_width=True, key=f"pr_cancel_{product.id}"):
            st.rerun()
