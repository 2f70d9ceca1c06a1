"""Streamlit renderers for the life metrics tracker page."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from aggregation import SeriesRow, series_frame
from calendar_weeks import WeekDescriptor
from metric_guide import METRIC_GUIDE
from metric_store import MetricStore, Signal, format_score
from view_state import ViewMode, ViewState

_ARROWS = [
    (Signal.UP, "↑"),
    (Signal.FLAT, "→"),
    (Signal.DOWN, "↓"),
]
_VIEW_BUTTONS = [
    (ViewMode.SINGLE, "\U0001f4c8 Single"),
    (ViewMode.ALL, "▦ All"),
    (ViewMode.MONTHLY, "\U0001f4c5 Monthly"),
]


def _fmt_signed(value: float) -> str:
    if pd.isna(value):
        return ""
    return format_score(int(value))


def _toggle_signal(
    store: MetricStore, state: ViewState, metric_index: int, week_index: int, direction: Signal
) -> None:
    state.end_note_edit()
    store.toggle_signal(metric_index, week_index, direction)


def _hover_note(note: object) -> str:
    text = str(note)
    if not text:
        return ""
    return "<br>" + text.replace("\n", "<br>")


def _commit_note(
    store: MetricStore, state: ViewState, metric_index: int, week_index: int, widget_key: str
) -> None:
    store.set_note(metric_index, week_index, st.session_state.get(widget_key, ""))
    state.end_note_edit()


def render_view_toggle(state: ViewState) -> None:
    cols = st.columns(len(_VIEW_BUTTONS))
    for col, (mode, label) in zip(cols, _VIEW_BUTTONS):
        col.button(
            label,
            key=f"view_{mode.value}",
            type="primary" if state.view_mode is mode else "secondary",
            on_click=state.set_view_mode,
            args=(mode,),
            use_container_width=True,
        )


def render_metric_selector(store: MetricStore, state: ViewState) -> None:
    cols = st.columns(len(store.metrics))
    scores = store.scores()
    for idx, (col, metric) in enumerate(zip(cols, store.metrics)):
        active = idx == state.selected_metric_index and state.view_mode is ViewMode.SINGLE
        col.markdown(
            f"<div style='height:4px;border-radius:2px;background:{metric.color}'></div>",
            unsafe_allow_html=True,
        )
        col.button(
            f"{metric.name} {format_score(scores[metric.name])}",
            key=f"metric_{idx}",
            type="primary" if active else "secondary",
            on_click=state.select_metric,
            args=(idx,),
            use_container_width=True,
        )


def render_week_grid(store: MetricStore, state: ViewState, weeks: list[WeekDescriptor]) -> None:
    """Arrow and note controls for the visible 12-week window."""
    metric_index = state.selected_metric_index
    metric = store.metrics[metric_index]

    left, grid, right = st.columns([1, 24, 1])
    left.button(
        "‹",
        key="scroll_left",
        disabled=not state.can_scroll_left,
        on_click=state.scroll,
        args=(-1,),
    )
    right.button(
        "›",
        key="scroll_right",
        disabled=not state.can_scroll_right,
        on_click=state.scroll,
        args=(1,),
    )

    visible = state.visible_week_indices()
    with grid:
        cols = st.columns(len(visible))
        for col, week_index in zip(cols, visible):
            week = weeks[week_index]
            current = metric.weekly_signal[week_index]
            note = metric.weekly_note[week_index]
            with col:
                st.caption(week.display_label)
                for direction, arrow in _ARROWS:
                    st.button(
                        arrow,
                        key=f"arrow_{metric_index}_{week_index}_{direction.value}",
                        type="primary" if current is direction else "secondary",
                        on_click=_toggle_signal,
                        args=(store, state, metric_index, week_index, direction),
                        use_container_width=True,
                    )

                if state.active_note_edit_index == week_index:
                    widget_key = f"note_{metric_index}_{week_index}"
                    st.text_input(
                        "Note",
                        value=note,
                        key=widget_key,
                        placeholder="Add note...",
                        label_visibility="collapsed",
                        on_change=_commit_note,
                        args=(store, state, metric_index, week_index, widget_key),
                    )
                else:
                    st.button(
                        "\U0001f4ac" if note else "…",
                        key=f"note_btn_{metric_index}_{week_index}",
                        help=note or "Add note",
                        on_click=state.begin_note_edit,
                        args=(week_index,),
                        use_container_width=True,
                    )


def build_trend_figure(
    frame: pd.DataFrame,
    metric_names: list[str],
    colors: dict[str, str],
    title: str,
    monthly: bool = False,
) -> go.Figure:
    """Line chart with one trace per metric, bridging gaps between marked weeks."""
    fig = go.Figure()
    for name in metric_names:
        values = frame[name] if name in frame.columns else pd.Series(dtype=float)
        notes = frame.get(f"{name}_note", pd.Series([""] * len(frame), index=frame.index))
        fig.add_trace(
            go.Scatter(
                x=list(frame.index),
                y=values,
                mode="lines+markers",
                name=name,
                line={"color": colors.get(name), "shape": "spline"},
                connectgaps=True,
                text=[_fmt_signed(value) for value in values],
                customdata=[_hover_note(note) for note in notes],
                hovertemplate="%{fullData.name}: %{text}%{customdata}<extra></extra>",
            )
        )

    fig.update_layout(
        title=title,
        xaxis_title="Month" if monthly else "Week",
        yaxis_title="Net change" if monthly else "Running total",
        hovermode="x unified",
        template="plotly_white",
        xaxis={"tickangle": -45, "type": "category"},
        height=420,
        uirevision="life_metrics_chart",
    )
    return fig


def monthly_notes_table(rows: list[SeriesRow], metric_names: list[str]) -> pd.DataFrame:
    records = []
    for row in rows:
        for name in metric_names:
            for note in row.notes.get(name, []):
                records.append(
                    {
                        "Month": row.category,
                        "Metric": name,
                        "NetChange": format_score(int(row.series.get(name) or 0)),
                        "Note": note,
                    }
                )
    return pd.DataFrame(records, columns=["Month", "Metric", "NetChange", "Note"])


def render_trend_chart(
    store: MetricStore,
    state: ViewState,
    rows: list[SeriesRow],
    metric_names: list[str],
    reference_year: int,
) -> None:
    monthly = state.view_mode is ViewMode.MONTHLY
    if not rows:
        if monthly:
            st.info("No month has a net change yet. Mark some weeks up or down to see monthly trends.")
        else:
            st.info("No weeks marked yet. Use the arrows in Single view to start tracking.")
        return

    colors = {metric.name: metric.color for metric in store.metrics}
    frame = series_frame(rows, metric_names)
    st.plotly_chart(
        build_trend_figure(frame, metric_names, colors, title=str(reference_year), monthly=monthly),
        use_container_width=True,
    )

    if monthly:
        notes = monthly_notes_table(rows, metric_names)
        st.markdown("### Monthly notes")
        if notes.empty:
            st.caption("No notes recorded in these months.")
        else:
            st.dataframe(notes, use_container_width=True, hide_index=True)

    table = frame.reset_index()
    st.download_button(
        "Download chart data (.csv)",
        data=table.to_csv(index=False).encode("utf-8"),
        file_name=f"life_metrics_{state.view_mode.value}.csv",
        mime="text/csv",
    )


def render_metric_guide() -> None:
    with st.expander("How tracking works", expanded=False):
        st.dataframe(pd.DataFrame(METRIC_GUIDE), use_container_width=True, hide_index=True)
