from __future__ import annotations

import logging

import streamlit as st

from config import DEFAULT_DATA_SOURCE, LOG_LEVEL
from styling import inject_css
from ui.calculator_view import render_calculator_view
from ui.common import get_view_session
from ui.liquidity_view import render_liquidity_view
from ui.player_view import render_player_view
from ui.sidebar import sidebar_controls

PAGE_RENDERERS = {
    "Search Player": render_player_view,
    "Calculator": render_calculator_view,
    "Manager Liquidity": render_liquidity_view,
}


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(levelname)s - %(name)s - %(message)s",
    )


def init_session() -> None:
    """Initialize Streamlit session_state with shared objects."""
    if "data_source" not in st.session_state:
        st.session_state.data_source = DEFAULT_DATA_SOURCE
    get_view_session()


def main() -> None:
    st.set_page_config(
        page_title="Kickbase Analysis",
        page_icon="⚽",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    configure_logging()
    inject_css()
    init_session()
    page = sidebar_controls()

    PAGE_RENDERERS[page]()


if __name__ == "__main__":
    main()
