# utils/sections/page.py
"""
Main UI orchestrator for Sections domain
Sections table with add, edit and delete actions

Version: 1.0.0
"""

import logging
from typing import Sequence

import pandas as pd
import streamlit as st

from ..api import ApiError
from ..products.queries import ProductQueries
from ..session import ScreenSession, enter_screen
from .dialogs import show_delete_dialog, show_section_dialog
from .manager import SectionManager
from .models import Section
from .store import SectionEditor, SectionFetchError, SectionStore

logger = logging.getLogger(__name__)

SCREEN = "sections"


def _init_screen(session: ScreenSession) -> SectionManager:
    """Create the store, manager and product catalog once per screen session"""
    manager = session.get("manager")
    if manager is not None:
        return manager

    store = SectionStore()
    manager = SectionManager(store)
    session.set("manager", manager)

    try:
        store.reload()
    except SectionFetchError as e:
        st.error(f"🔌 **Backend Connection Error**\n\n{e}")

    try:
        session.set("catalog", ProductQueries().get_products())
    except ApiError as e:
        logger.warning(f"⚠️ Product catalog unavailable for picker: {e}")
        session.set("catalog", [])

    return manager


def _to_dataframe(sections: Sequence[Section]) -> pd.DataFrame:
    return pd.DataFrame([
        {
            'Order': s.order,
            'Title': s.title,
            'Slug': s.slug or '',
            'Products': len(s.product_ids),
            'Active': '✅' if s.active else '⏸️',
        }
        for s in sorted(sections, key=lambda s: s.order)
    ])


def render_sections_page():
    """Render the Sections screen"""
    session = enter_screen(SCREEN)
    manager = _init_screen(session)
    store = manager.store

    col_title, col_add, col_refresh = st.columns([4, 1, 1])
    with col_title:
        st.subheader("🗂️ Landing Page Sections")
    with col_add:
        if st.button("➕ Add Section", type="primary", use_container_width=True, key="sections_add"):
            show_section_dialog(session, SectionEditor.open(store))
    with col_refresh:
        if st.button("🔄 Refresh", use_container_width=True, key="sections_refresh"):
            try:
                store.reload()
            except SectionFetchError as e:
                st.error(f"❌ {e}")

    sections = store.sections
    if not sections:
        st.info("📭 No sections yet")
    else:
        st.dataframe(_to_dataframe(sections), use_container_width=True, hide_index=True)

        labels = {s.id: f"#{s.order} · {s.title}" for s in sorted(sections, key=lambda s: s.order)}
        selected_id = st.selectbox(
            "Select section",
            options=list(labels),
            format_func=lambda sid: labels[sid],
            key="sections_selected",
        )
        selected = store.get(selected_id)

        col1, col2 = st.columns(2)
        with col1:
            if st.button("✏️ Edit", use_container_width=True, key="sections_edit_btn") and selected:
                show_section_dialog(session, SectionEditor.open(store, selected))
        with col2:
            if st.button("🗑️ Delete", use_container_width=True, key="sections_delete_btn") and selected:
                show_delete_dialog(session, selected)
