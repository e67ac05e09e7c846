"""Fair Market Value calculator page."""

from __future__ import annotations

from typing import Optional

import altair as alt
import pandas as pd
import streamlit as st

from config import CURVE_MAX_TP, FMV_A, FMV_TP0
from core.fmv import (
    FmvParams,
    calculation_text,
    curve_points,
    example_values,
    fair_market_value,
    format_points,
    params_from_metrics,
)
from core.formatting import format_currency
from core.view_state import ViewStatus
from data_loader import load_regression_metrics
from ui.common import activate_and_load, esc
from ui.sidebar import current_source


def _load_params(source: str) -> FmvParams:
    # Never raises a DashboardError: missing/malformed metrics mean defaults
    return params_from_metrics(load_regression_metrics(source))


def _reset_calculator_controls() -> None:
    st.session_state.pop("fmv_total_points", None)


def curve_frame(params: FmvParams) -> pd.DataFrame:
    """Curve samples plus tooltip labels (FMV rounded to the nearest thousand)."""
    points = curve_points(params)
    df = pd.DataFrame(points, columns=["tp", "fmv"])
    df["fmv_label"] = [format_currency(round(v / 1000) * 1000) for v in df["fmv"]]
    df["tp_label"] = [f"{round(v):,}" for v in df["tp"]]
    return df


def shows_reference_rule(current_tp: Optional[float]) -> bool:
    """The input marker is only drawn where the curve is plotted."""
    return current_tp is not None and FMV_TP0 < current_tp <= CURVE_MAX_TP


def build_fmv_chart(params: FmvParams, current_tp: Optional[float] = None) -> alt.LayerChart:
    df = curve_frame(params)
    line = (
        alt.Chart(df)
        .mark_line(color="#2563eb", strokeWidth=3)
        .encode(
            x=alt.X(
                "tp:Q",
                title="Total Points (TP)",
                scale=alt.Scale(domain=(FMV_TP0, CURVE_MAX_TP)),
            ),
            y=alt.Y(
                "fmv:Q",
                title="Fair Market Value",
                axis=alt.Axis(labelExpr="'€' + format(datum.value / 1000000, '.2f') + 'M'"),
            ),
            tooltip=[
                alt.Tooltip("tp_label:N", title="Total Points"),
                alt.Tooltip("fmv_label:N", title="Fair Market Value"),
            ],
        )
    )
    layers = [line]
    if shows_reference_rule(current_tp):
        rule = (
            alt.Chart(pd.DataFrame({"tp": [current_tp]}))
            .mark_rule(color="#ef4444", strokeDash=[5, 5])
            .encode(x="tp:Q")
        )
        layers.append(rule)
    return alt.layer(*layers)


def render_formula_card(params: FmvParams) -> None:
    st.markdown("### Formula")
    st.markdown(
        """
        <div class="formula-box">
            FMV = A + B · (TP − TP₀)^α<br/>
            <span style="font-size:12px; color:#6b7280;">Where TP = Total Points</span>
        </div>
        """,
        unsafe_allow_html=True,
    )
    col_a, col_tp0, col_b, col_alpha = st.columns(4)
    col_a.metric("A (Baseline)", format_currency(FMV_A))
    col_tp0.metric("TP₀ (Points Baseline)", f"{FMV_TP0:g}")
    col_b.metric("B (Scaling)", f"{params.B:,g}")
    col_alpha.metric("α (Exponent)", f"{params.alpha:.3f}")
    if not params.from_metrics:
        st.caption("regression_metrics.csv not available, using default coefficients.")


def render_calculator_view() -> None:
    source = current_source()
    state = activate_and_load(
        f"calculator@{source}",
        lambda: _load_params(source),
        "Loading calculator...",
        on_activate=_reset_calculator_controls,
    )

    st.markdown("# Fair Market Value Calculator")

    if state.status is ViewStatus.ERROR:
        st.error(state.error)
        return
    if state.status is not ViewStatus.READY:
        st.info("Loading calculator...")
        return

    params: FmvParams = state.data
    st.markdown(
        "<div class='page-subtitle'>Calculate the fair market value based on total points "
        "using our regression model.</div>",
        unsafe_allow_html=True,
    )

    render_formula_card(params)

    st.markdown("### Calculate FMV")
    total_points = st.number_input(
        "Total Points (TP)",
        min_value=0.0,
        value=None,
        step=1.0,
        key="fmv_total_points",
        placeholder="Enter total points",
        help=f"Values ≤ {FMV_TP0:g} return the baseline value.",
    )

    fmv: Optional[float] = None
    if total_points is not None:
        fmv = fair_market_value(total_points, params.B, params.alpha)
        st.markdown(
            f"""
            <div class="fmv-result">
                <div class="metric-label">Fair Market Value</div>
                <div class="fmv-result-value">{esc(format_currency(fmv))}</div>
                <div class="cell-sub" style="margin-top:10px;">
                    Calculation: <code>{esc(calculation_text(total_points, params))}</code><br/>
                    Result: <code>{fmv:,.2f}</code>
                </div>
            </div>
            """,
            unsafe_allow_html=True,
        )
        if total_points <= FMV_TP0:
            st.warning(
                f"⚠️ Points are at or below the baseline ({FMV_TP0:g}). The FMV will be set "
                f"to the baseline value of {format_currency(FMV_A)}."
            )

    st.markdown("### FMV Function Graph")
    st.caption("Visual representation of how Fair Market Value changes with Total Points")
    st.altair_chart(build_fmv_chart(params, total_points), use_container_width=True)
    if shows_reference_rule(total_points) and fmv is not None:
        st.caption(
            f"Red dashed line shows your input: {format_points(total_points)} points "
            f"= {format_currency(fmv)}"
        )

    st.markdown("### Example Calculations")
    for points, value in example_values(params):
        col_pts, col_val = st.columns([3, 1])
        col_pts.write(f"{points} points")
        col_val.write(f"**{format_currency(value)}**")
