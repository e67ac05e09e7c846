"""Search Player page: filterable, sortable player table."""

from __future__ import annotations

from typing import Dict, List, Sequence

import streamlit as st

from config import MAX_MV_LIMIT, MIN_MV_LIMIT, MV_STEP, PLAYER_COLUMNS, POSITIONS, POSITION_LABELS
from core.formatting import (
    PLACEHOLDER,
    column_label,
    format_cell_currency,
    format_millions,
    format_number,
    format_percentage,
    position_label,
)
from core.players import PlayerFilter, SortState, filter_and_sort, next_sort_state
from core.view_state import ViewStatus
from data_loader import load_players
from models import PlayerRecord
from ui.common import activate_and_load, esc, render_html_table, signed_span
from ui.sidebar import current_source

CURRENCY_COLUMNS = {"mv", "fair_market_value", "mv_diff"}
NUMBER_COLUMNS = {"ap", "smc", "tp"}


def _reset_player_controls() -> None:
    st.session_state.player_search = ""
    st.session_state.player_position = "all"
    st.session_state.player_min_mv = MIN_MV_LIMIT
    st.session_state.player_sort = SortState()


def _on_sort_click(column: str) -> None:
    st.session_state.player_sort = next_sort_state(st.session_state.player_sort, column)


def format_player_cell(player: PlayerRecord, col: str) -> str:
    """HTML for a single table cell."""
    value = player.get(col)
    if col in CURRENCY_COLUMNS:
        return esc(format_cell_currency(value))
    if col == "mv_diff_pct":
        text, non_negative = format_percentage(value)
        return signed_span(text, non_negative)
    if col == "pos":
        return esc(position_label(value) or PLACEHOLDER)
    if col in NUMBER_COLUMNS:
        return esc(format_number(value))
    return esc(value or PLACEHOLDER)


def build_player_rows(players: Sequence[PlayerRecord], columns: List[str]) -> List[Dict[str, str]]:
    return [
        {column_label(col): format_player_cell(p, col) for col in columns}
        for p in players
    ]


def render_player_view() -> None:
    source = current_source()
    state = activate_and_load(
        f"players@{source}",
        lambda: load_players(source),
        "Loading player data...",
        on_activate=_reset_player_controls,
    )

    st.markdown("# Search Player")

    if state.status is ViewStatus.ERROR:
        st.error(f"Could not load player data: {state.error}")
        return
    if state.status is not ViewStatus.READY:
        st.info("Loading player data...")
        return

    players: Sequence[PlayerRecord] = state.data
    count_placeholder = st.empty()

    st.text_input(
        "Search",
        key="player_search",
        placeholder="Search by name, team, or position...",
        label_visibility="collapsed",
    )

    col_slider, col_readout = st.columns([4, 1])
    with col_slider:
        st.slider(
            "Min Market Value",
            min_value=MIN_MV_LIMIT,
            max_value=MAX_MV_LIMIT,
            step=MV_STEP,
            key="player_min_mv",
            format="%d",
        )
    with col_readout:
        st.metric("Min Market Value", format_millions(st.session_state.player_min_mv))

    st.radio(
        "Position",
        POSITIONS,
        key="player_position",
        format_func=lambda p: "Alle" if p == "all" else POSITION_LABELS[p],
        horizontal=True,
    )

    criteria = PlayerFilter(
        search=st.session_state.player_search,
        position=st.session_state.player_position,
        min_market_value=st.session_state.player_min_mv,
    )
    sort: SortState = st.session_state.player_sort
    shown = filter_and_sort(players, criteria, sort)

    count_placeholder.markdown(
        f"<div class='page-subtitle'>{len(shown)} of {len(players)} players</div>",
        unsafe_allow_html=True,
    )

    st.caption("Sort by")
    sort_cols = st.columns(len(PLAYER_COLUMNS))
    for col, slot in zip(PLAYER_COLUMNS, sort_cols):
        label = f"{column_label(col)} {sort.indicator(col)}".strip()
        slot.button(
            label,
            key=f"player_sort_{col}",
            on_click=_on_sort_click,
            args=(col,),
            use_container_width=True,
        )

    if not shown:
        st.info("No players found matching your search.")
        return

    render_html_table(
        build_player_rows(shown, PLAYER_COLUMNS),
        [column_label(col) for col in PLAYER_COLUMNS],
    )
