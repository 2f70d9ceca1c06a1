"""Chart series built from weekly metric signals."""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from calendar_weeks import WeekDescriptor, month_order
from metric_store import Metric
from view_state import ViewMode


@dataclass
class SeriesRow:
    category: str
    series: dict[str, int | None] = field(default_factory=dict)
    notes: dict[str, list[str]] = field(default_factory=dict)


def weekly_running_series(metrics: list[Metric], weeks: list[WeekDescriptor]) -> list[SeriesRow]:
    """Running totals per metric, only for weeks where some metric has a signal.

    A metric without a signal in an included week gets ``None`` so the renderer
    can bridge the gap; its running total carries over untouched.
    """
    running: dict[str, int | None] = {metric.name: None for metric in metrics}
    rows: list[SeriesRow] = []

    for idx, week in enumerate(weeks):
        if not any(metric.has_signal(idx) for metric in metrics):
            continue

        row = SeriesRow(category=week.display_label)
        for metric in metrics:
            if metric.has_signal(idx):
                running[metric.name] = (running[metric.name] or 0) + metric.weekly_signal[idx].delta
                row.series[metric.name] = running[metric.name]
            else:
                row.series[metric.name] = None
            note = metric.weekly_note[idx]
            if note:
                row.notes[metric.name] = [note]
        rows.append(row)

    return rows


def monthly_net_series(metrics: list[Metric], weeks: list[WeekDescriptor]) -> list[SeriesRow]:
    """Net change per metric and month; months with no net movement are dropped."""
    by_month = {
        month: SeriesRow(
            category=month,
            series={metric.name: 0 for metric in metrics},
            notes={metric.name: [] for metric in metrics},
        )
        for month in month_order(weeks)
    }

    for idx, week in enumerate(weeks):
        row = by_month[week.month]
        for metric in metrics:
            row.series[metric.name] += metric.weekly_signal[idx].delta
            note = metric.weekly_note[idx]
            if note:
                row.notes[metric.name].append(f"Week {week.sequence_number}: {note}")

    return [row for row in by_month.values() if any(value != 0 for value in row.series.values())]


def build_series(
    metrics: list[Metric], weeks: list[WeekDescriptor], view_mode: ViewMode | str
) -> list[SeriesRow]:
    """Dispatch to the per-week or monthly aggregation for the active view."""
    if ViewMode(view_mode) is ViewMode.MONTHLY:
        return monthly_net_series(metrics, weeks)
    return weekly_running_series(metrics, weeks)


def series_frame(rows: list[SeriesRow], metric_names: list[str]) -> pd.DataFrame:
    """Flatten series rows into a chart/export table indexed by category.

    Metric columns are floats with NaN for gaps; ``<name>_note`` columns hold
    newline-joined notes.
    """
    records = []
    for row in rows:
        record: dict[str, object] = {"Category": row.category}
        for name in metric_names:
            value = row.series.get(name)
            record[name] = float("nan") if value is None else float(value)
        for name in metric_names:
            record[f"{name}_note"] = "\n".join(row.notes.get(name, []))
        records.append(record)

    columns = ["Category"] + list(metric_names) + [f"{name}_note" for name in metric_names]
    frame = pd.DataFrame(records, columns=columns)
    return frame.set_index("Category")
