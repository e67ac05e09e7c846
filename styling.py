from __future__ import annotations

import streamlit as st


def inject_css() -> None:
    st.markdown(
        """
        <style>
        .block-container {
            padding-top: 1.6rem;
            padding-bottom: 3rem;
            max-width: 1280px;
        }

        h1, h2, h3, h4 {
            font-family: system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
            letter-spacing: 0.01em;
        }

        .page-subtitle {
            font-size: 14px;
            color: #6b7280;
            margin-bottom: 12px;
        }

        .nav-title {
            font-size: 20px;
            font-weight: 700;
            margin-bottom: 8px;
        }

        .metric-card {
            border-radius: 12px;
            padding: 14px 18px;
            background: #ffffff;
            border: 1px solid #e5e7eb;
            box-shadow: 0 1px 3px rgba(15, 23, 42, 0.08);
        }

        .metric-label {
            font-size: 12px;
            color: #6b7280;
        }

        .metric-value {
            font-size: 24px;
            font-weight: 700;
            color: #111827;
        }

        .formula-box {
            border-radius: 10px;
            padding: 14px 16px;
            background: #f9fafb;
            font-family: ui-monospace, SFMono-Regular, Menlo, monospace;
            font-size: 14px;
            margin-bottom: 12px;
        }

        .fmv-result {
            border-radius: 12px;
            padding: 18px 22px;
            background: #eff6ff;
            border: 2px solid #bfdbfe;
        }

        .fmv-result-value {
            font-size: 36px;
            font-weight: 700;
            color: #1d4ed8;
        }

        .value-positive {
            color: #16a34a;
            font-weight: 600;
        }

        .value-negative {
            color: #dc2626;
            font-weight: 600;
        }

        .value-warning {
            font-size: 11px;
            color: #ca8a04;
        }

        .cell-sub {
            font-size: 11px;
            color: #6b7280;
        }

        .data-table {
            width: 100%;
            border-collapse: collapse;
            font-size: 13px;
        }

        .data-table th,
        .data-table td {
            padding: 8px 10px;
            border-bottom: 1px solid #e5e7eb;
            vertical-align: middle;
            white-space: nowrap;
            text-align: left;
        }

        .data-table th {
            font-size: 11px;
            text-transform: uppercase;
            color: #374151;
            letter-spacing: 0.06em;
            background: #f3f4f6;
        }

        .data-table tr:hover td {
            background: #f9fafb;
        }

        .section-title {
            font-size: 15px;
            font-weight: 600;
            margin-bottom: 8px;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
