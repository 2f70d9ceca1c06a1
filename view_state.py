"""Transient UI state for the tracker page."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from metric_store import Metric
from tracker_config import SCROLL_STEP, VISIBLE_WEEKS, WEEK_COUNT


class ViewMode(str, Enum):
    SINGLE = "single"
    ALL = "all"
    MONTHLY = "monthly"


@dataclass
class ViewState:
    metric_count: int
    selected_metric_index: int = 0
    active_note_edit_index: int | None = None
    view_mode: ViewMode = ViewMode.SINGLE
    window_start: int = 0
    week_count: int = WEEK_COUNT
    window_size: int = VISIBLE_WEEKS
    scroll_step: int = SCROLL_STEP

    @property
    def max_window_start(self) -> int:
        return max(0, self.week_count - self.window_size)

    @property
    def can_scroll_left(self) -> bool:
        return self.window_start > 0

    @property
    def can_scroll_right(self) -> bool:
        return self.window_start + self.window_size < self.week_count

    def select_metric(self, metric_index: int) -> None:
        if not 0 <= metric_index < self.metric_count:
            raise IndexError(f"Metric index out of range: {metric_index}")
        self.selected_metric_index = metric_index
        self.end_note_edit()

    def set_view_mode(self, mode: ViewMode | str) -> None:
        self.view_mode = ViewMode(mode)
        self.end_note_edit()

    def scroll(self, direction: int) -> int:
        """Move the week window by one step left (-1) or right (+1), clamped."""
        target = self.window_start + direction * self.scroll_step
        self.window_start = max(0, min(self.max_window_start, target))
        self.end_note_edit()
        return self.window_start

    def begin_note_edit(self, week_index: int) -> None:
        if not 0 <= week_index < self.week_count:
            raise IndexError(f"Week index out of range: {week_index}")
        self.active_note_edit_index = week_index

    def end_note_edit(self) -> None:
        self.active_note_edit_index = None

    def visible_week_indices(self) -> list[int]:
        end = min(self.week_count, self.window_start + self.window_size)
        return list(range(self.window_start, end))


def chart_metric_names(state: ViewState, metrics: list[Metric]) -> list[str]:
    """Lines to draw: only the selected metric in single view, otherwise all."""
    if state.view_mode is ViewMode.SINGLE:
        return [metrics[state.selected_metric_index].name]
    return [metric.name for metric in metrics]
