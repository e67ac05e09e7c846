"""Sidebar navigation and data source selection."""

from __future__ import annotations

import streamlit as st

from config import DEFAULT_DATA_SOURCE, PAGES
from ui.common import get_view_session


def _on_page_change() -> None:
    # Tear down the old page before the new one renders; late results for it are dropped
    get_view_session().deactivate()


def sidebar_controls() -> str:
    """Render navigation; returns the selected page name."""
    st.sidebar.markdown("<div class='nav-title'>Kickbase Analysis</div>", unsafe_allow_html=True)

    page = st.sidebar.radio(
        "Navigation",
        PAGES,
        key="page",
        label_visibility="collapsed",
        on_change=_on_page_change,
    )

    st.sidebar.markdown("---")
    st.sidebar.text_input(
        "Data source",
        key="data_source",
        help="Directory or base URL serving the exported CSV files.",
    )
    if not st.session_state.data_source:
        st.sidebar.caption(f"Empty source, falling back to `{DEFAULT_DATA_SOURCE}`.")

    return page


def current_source() -> str:
    return st.session_state.get("data_source") or DEFAULT_DATA_SOURCE
