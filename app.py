# app.py - Storefront Admin Main Entry Point
import logging

import streamlit as st

from utils.config import API_CONFIG, APP_CONFIG

# Configure logging
logging.basicConfig(level=APP_CONFIG["LOG_LEVEL"])
logger = logging.getLogger(__name__)

# Page configuration
st.set_page_config(
    page_title="Storefront Admin",
    page_icon="🛒",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        margin-bottom: 1rem;
        color: #1f77b4;
    }
    .info-box {
        padding: 1rem;
        border-radius: 0.5rem;
        background-color: #f0f2f6;
        margin-bottom: 1rem;
    }
    .stButton>button {
        width: 100%;
    }
</style>
""", unsafe_allow_html=True)

st.markdown('<p class="main-header">🛒 Storefront Admin</p>', unsafe_allow_html=True)

# Backend info in sidebar
with st.sidebar:
    st.markdown("### 🔌 Backend")
    st.markdown(f"`{API_CONFIG['base_url']}`")
    if not API_CONFIG["token"]:
        st.warning("⚠️ ADMIN_TOKEN is not set; admin calls will be rejected")

# Quick actions
st.markdown("### 🚀 Quick Actions")
col1, col2, col3 = st.columns(3)

with col1:
    st.markdown('<div class="info-box">', unsafe_allow_html=True)
    st.markdown("#### 📦 Orders")
    st.markdown("Filter orders, update their status and export PDF, Excel or Word reports")
    if st.button("Go to Orders →", key="btn_orders"):
        st.switch_page("pages/1_📦_Orders.py")
    st.markdown('</div>', unsafe_allow_html=True)

with col2:
    st.markdown('<div class="info-box">', unsafe_allow_html=True)
    st.markdown("#### 🗂️ Sections")
    st.markdown("Curate landing page sections, their products and display order")
    if st.button("Manage Sections →", key="btn_sections"):
        st.switch_page("pages/2_🗂️_Sections.py")
    st.markdown('</div>', unsafe_allow_html=True)

with col3:
    st.markdown('<div class="info-box">', unsafe_allow_html=True)
    st.markdown("#### 🛍️ Products")
    st.markdown("Browse the catalog, edit product details or remove products")
    if st.button("View Products →", key="btn_products"):
        st.switch_page("pages/3_🛍️_Products.py")
    st.markdown('</div>', unsafe_allow_html=True)

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #888;'>
    Storefront Admin v1.0
    </div>
    """,
    unsafe_allow_html=True
)
