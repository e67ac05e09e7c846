"""Manager Liquidity page."""

from __future__ import annotations

from typing import Dict, List, Sequence

import streamlit as st

from config import LIQUIDITY_COLUMNS, LIQUIDITY_LABELS
from core.formatting import format_currency, parse_number
from core.liquidity import LiquiditySort, has_discrepancy, sort_managers, summarize, toggle_sort
from core.view_state import ViewStatus
from data_loader import load_managers
from models import ManagerRecord
from ui.common import activate_and_load, esc, render_html_table
from ui.sidebar import current_source


def _reset_liquidity_controls() -> None:
    st.session_state.liquidity_sort = LiquiditySort()


def _on_sort_click(column: str) -> None:
    st.session_state.liquidity_sort = toggle_sort(st.session_state.liquidity_sort, column)


def _balance_cell(value: str) -> str:
    num = parse_number(value)
    css = "value-positive" if num is not None and num >= 0 else "value-negative"
    return f"<span class='{css}'>{esc(format_currency(value))}</span>"


def build_manager_row(manager: ManagerRecord) -> Dict[str, str]:
    name_html = (
        f"<div>{esc(manager.get('manager_name'))}</div>"
        f"<div class='cell-sub'>ID: {esc(manager.get('manager_id'))}</div>"
    )
    team_value_html = f"<div>{esc(format_currency(manager.get('team_value_dashboard')))}</div>"
    if has_discrepancy(manager):
        team_value_html += (
            "<div class='value-warning'>⚠️ Calc: "
            f"{esc(format_currency(manager.get('team_value_calculated')))}</div>"
        )

    return {
        LIQUIDITY_LABELS["manager_name"]: name_html,
        LIQUIDITY_LABELS["team_value_dashboard"]: team_value_html,
        LIQUIDITY_LABELS["profit_taken"]: esc(format_currency(manager.get("profit_taken"))),
        LIQUIDITY_LABELS["unrealized_profit_loss"]: esc(
            format_currency(manager.get("unrealized_profit_loss"))
        ),
        LIQUIDITY_LABELS["bank_balance"]: _balance_cell(manager.get("bank_balance")),
        LIQUIDITY_LABELS["available_liquidity"]: _balance_cell(manager.get("available_liquidity")),
    }


def render_summary(managers: Sequence[ManagerRecord]) -> None:
    summary = summarize(managers)
    cards = [
        ("Total Managers", str(summary.manager_count)),
        ("Avg Bank Balance", format_currency(summary.avg_bank_balance)),
        ("Avg Available Liquidity", format_currency(summary.avg_available_liquidity)),
        ("Total Team Value", format_currency(summary.total_team_value)),
    ]

    st.markdown('<div class="section-title">Summary Statistics</div>', unsafe_allow_html=True)
    for (label, value), col in zip(cards, st.columns(len(cards))):
        col.markdown(
            f"""
            <div class="metric-card">
                <div class="metric-label">{esc(label)}</div>
                <div class="metric-value">{esc(value)}</div>
            </div>
            """,
            unsafe_allow_html=True,
        )


def render_liquidity_view() -> None:
    source = current_source()
    state = activate_and_load(
        f"managers@{source}",
        lambda: load_managers(source),
        "Loading managers...",
        on_activate=_reset_liquidity_controls,
    )

    st.markdown("# Manager Liquidity")

    if state.status is ViewStatus.ERROR:
        st.error(state.error)
        return
    if state.status is not ViewStatus.READY:
        st.info("Loading managers...")
        return

    st.markdown(
        "<div class='page-subtitle'>View bank balance and available liquidity "
        "for all managers in the league.</div>",
        unsafe_allow_html=True,
    )

    managers: Sequence[ManagerRecord] = state.data
    if not managers:
        st.warning("No manager data found.")
        return

    sort: LiquiditySort = st.session_state.liquidity_sort
    st.caption("Sort by")
    for col, slot in zip(LIQUIDITY_COLUMNS, st.columns(len(LIQUIDITY_COLUMNS))):
        label = f"{LIQUIDITY_LABELS[col]} {sort.indicator(col)}".strip()
        slot.button(
            label,
            key=f"liquidity_sort_{col}",
            on_click=_on_sort_click,
            args=(col,),
            use_container_width=True,
        )

    rows: List[Dict[str, str]] = [build_manager_row(m) for m in sort_managers(managers, sort)]
    render_html_table(rows, [LIQUIDITY_LABELS[col] for col in LIQUIDITY_COLUMNS])

    st.markdown("")
    render_summary(managers)
