from aggregation import monthly_net_series, series_frame, weekly_running_series
from calendar_weeks import generate_weeks
from dashboard_views import _toggle_signal, build_trend_figure, monthly_notes_table
from metric_store import MetricStore, Signal
from view_state import ViewState

WEEKS = generate_weeks(2025)


def test_build_trend_figure_connects_gaps_and_signs_values() -> None:
    store = MetricStore.default()
    store.toggle_signal(0, 0, Signal.UP)
    store.toggle_signal(1, 1, Signal.DOWN)
    store.toggle_signal(0, 2, Signal.UP)
    store.set_note(0, 2, "hike")
    names = ["Free Time", "Loving Relationships"]
    colors = {metric.name: metric.color for metric in store.metrics}

    frame = series_frame(weekly_running_series(store.metrics, WEEKS), names)
    fig = build_trend_figure(frame, names, colors, title="2025")

    assert len(fig.data) == 2
    free_time = fig.data[0]
    assert free_time.name == "Free Time"
    assert free_time.connectgaps is True
    assert free_time.line.color == "#059669"
    assert list(free_time.text) == ["+1", "", "+2"]
    assert list(free_time.customdata) == ["", "", "<br>hike"]
    assert free_time.hovertemplate == "%{fullData.name}: %{text}%{customdata}<extra></extra>"
    assert list(fig.data[1].text) == ["", "-1", ""]
    assert fig.layout.title.text == "2025"
    assert fig.layout.xaxis.tickangle == -45


def test_build_trend_figure_monthly_axis_titles() -> None:
    store = MetricStore.default()
    store.toggle_signal(4, 0, Signal.UP)
    frame = series_frame(monthly_net_series(store.metrics, WEEKS), ["Creativity"])

    fig = build_trend_figure(frame, ["Creativity"], {"Creativity": "#2563eb"}, title="2025", monthly=True)

    assert fig.layout.xaxis.title.text == "Month"
    assert list(fig.data[0].x) == ["January"]


def test_monthly_notes_table_lists_notes_with_net_change() -> None:
    store = MetricStore.default()
    store.toggle_signal(4, 0, Signal.UP)
    store.set_note(4, 0, "painted")
    store.set_note(4, 1, "sketched")
    rows = monthly_net_series(store.metrics, WEEKS)

    table = monthly_notes_table(rows, store.names())

    assert list(table["Note"]) == ["Week 1: painted", "Week 2: sketched"]
    assert set(table["NetChange"]) == {"+1"}
    assert set(table["Month"]) == {"January"}


def test_monthly_notes_table_empty() -> None:
    table = monthly_notes_table([], ["Creativity"])

    assert table.empty
    assert list(table.columns) == ["Month", "Metric", "NetChange", "Note"]


def test_arrow_click_closes_open_note_editor() -> None:
    store = MetricStore.default()
    state = ViewState(metric_count=len(store))
    state.begin_note_edit(0)

    _toggle_signal(store, state, 0, 1, Signal.UP)

    assert state.active_note_edit_index is None
    assert store.metrics[0].weekly_signal[1] is Signal.UP


def test_multiline_notes_render_as_separate_hover_lines() -> None:
    store = MetricStore.default()
    store.toggle_signal(0, 0, Signal.UP)
    store.set_note(0, 0, "a")
    store.set_note(0, 1, "b")
    frame = series_frame(monthly_net_series(store.metrics, WEEKS), ["Free Time"])

    fig = build_trend_figure(frame, ["Free Time"], {}, title="2025", monthly=True)

    assert list(fig.data[0].customdata) == ["<br>Week 1: a<br>Week 2: b"]
