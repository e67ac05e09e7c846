"""Helpers shared by the three pages."""

from __future__ import annotations

import html
import logging
from typing import Any, Callable, Dict, List, Optional

import pandas as pd
import streamlit as st

from core.view_state import ViewSession, ViewState
from errors import DashboardError

logger = logging.getLogger(__name__)


def get_view_session() -> ViewSession:
    if "view_session" not in st.session_state:
        st.session_state.view_session = ViewSession()
    return st.session_state.view_session


def activate_and_load(
    view_key: str,
    load_fn: Callable[[], Any],
    loading_text: str,
    on_activate: Optional[Callable[[], None]] = None,
) -> ViewState:
    """
    Make `view_key` the active view and run its loader once per activation.

    DashboardError from the loader puts the view into its error state; anything
    else propagates.
    """
    session = get_view_session()
    state = session.ensure_active(view_key)
    if not state.is_loading:
        return state

    if on_activate is not None:
        on_activate()

    token = state.token
    with st.spinner(loading_text):
        try:
            data = load_fn()
        except DashboardError as e:
            logger.warning("Loading %s failed: %s", view_key, e)
            session.complete(token, error=str(e))
        else:
            session.complete(token, data=data)
    return state


def esc(value: Any) -> str:
    return html.escape("" if value is None else str(value))


def signed_span(text: str, non_negative: bool) -> str:
    css = "value-positive" if non_negative else "value-negative"
    return f"<span class='{css}'>{esc(text)}</span>"


def render_html_table(rows: List[Dict[str, str]], columns: List[str]) -> None:
    """Rows hold pre-escaped HTML per column label."""
    df = pd.DataFrame(rows, columns=columns)
    st.markdown(
        df.to_html(escape=False, index=False, classes="data-table", border=0),
        unsafe_allow_html=True,
    )
