"""Life Metrics Tracker Streamlit entrypoint."""

from __future__ import annotations

import json

import streamlit as st

from aggregation import build_series
from calendar_weeks import WEEKS
from dashboard_views import (
    render_metric_guide,
    render_metric_selector,
    render_trend_chart,
    render_view_toggle,
    render_week_grid,
)
from metric_store import MetricStore
from tracker_config import DEFAULT_METRIC_COLORS, REFERENCE_YEAR, parse_color_overrides
from view_state import ViewMode, ViewState, chart_metric_names

st.set_page_config(page_title="Life Metrics Tracker", page_icon="\U0001f4c8", layout="wide")


def _inject_styles() -> None:
    st.markdown(
        """
        <style>
        .hero {
            margin-bottom: 0.6rem;
            padding: 1rem 1.2rem;
            border: 1px solid rgba(30, 80, 145, 0.23);
            border-radius: 14px;
            background: rgba(255,255,255,0.82);
        }
        .hero h1 {
            margin: 0;
        }
        .hero p {
            margin: 0.35rem 0 0 0;
            color: #244674;
        }
        div[data-testid="stCaptionContainer"] {
            text-align: center;
            white-space: nowrap;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def _render_header() -> None:
    st.markdown(
        """
        <div class="hero">
          <h1>Life Metrics Tracker</h1>
          <p>Mark each week up, flat or down per life area and watch the trend build over the year.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _init_session() -> tuple[MetricStore, ViewState]:
    if "metric_store" not in st.session_state:
        st.session_state["metric_store"] = MetricStore.default(week_count=len(WEEKS))
    store: MetricStore = st.session_state["metric_store"]

    if "view_state" not in st.session_state:
        st.session_state["view_state"] = ViewState(metric_count=len(store), week_count=len(WEEKS))
    return store, st.session_state["view_state"]


def _apply_color_settings(store: MetricStore) -> None:
    with st.sidebar.expander("Metric colors (JSON)", expanded=False):
        color_json = st.text_area(
            "Color per metric",
            value=json.dumps(DEFAULT_METRIC_COLORS, indent=2),
            key="color_json",
            height=220,
            help="Only the seven tracked metrics are recognised; values must be #rrggbb.",
        )
    colors, ok = parse_color_overrides(color_json, DEFAULT_METRIC_COLORS)
    if not ok:
        st.sidebar.warning("Could not parse metric colors, using defaults.")
    store.recolor(colors)


def main() -> None:
    _inject_styles()
    _render_header()

    store, state = _init_session()
    _apply_color_settings(store)

    render_view_toggle(state)
    render_metric_selector(store, state)

    if state.view_mode is ViewMode.SINGLE:
        render_week_grid(store, state, WEEKS)

    # Derived series are rebuilt from the store on every rerun.
    rows = build_series(store.metrics, WEEKS, state.view_mode)
    render_trend_chart(store, state, rows, chart_metric_names(state, store.metrics), REFERENCE_YEAR)

    render_metric_guide()


if __name__ == "__main__":
    main()
