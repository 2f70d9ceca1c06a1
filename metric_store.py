"""In-memory life metrics with weekly trend signals and notes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from loguru import logger

from tracker_config import DEFAULT_METRIC_COLORS, WEEK_COUNT


class Signal(str, Enum):
    NONE = "none"
    UP = "up"
    FLAT = "flat"
    DOWN = "down"

    @property
    def delta(self) -> int:
        if self is Signal.UP:
            return 1
        if self is Signal.DOWN:
            return -1
        return 0


@dataclass
class Metric:
    name: str
    color: str
    weekly_signal: list[Signal] = field(default_factory=lambda: [Signal.NONE] * WEEK_COUNT)
    weekly_note: list[str] = field(default_factory=lambda: [""] * WEEK_COUNT)
    cumulative_score: int = 0

    def recompute_score(self) -> None:
        self.cumulative_score = sum(signal.delta for signal in self.weekly_signal)

    def has_signal(self, week_index: int) -> bool:
        return self.weekly_signal[week_index] is not Signal.NONE


def format_score(value: int) -> str:
    """Sign-prefix positive scores for labels and tooltips."""
    if value > 0:
        return f"+{value}"
    return f"{value}"


class MetricStore:
    """Owns the metric collection; every mutation goes through this class."""

    def __init__(self, metrics: list[Metric], week_count: int = WEEK_COUNT) -> None:
        names = [metric.name for metric in metrics]
        if len(set(names)) != len(names):
            raise ValueError(f"Metric names must be unique: {names}")
        self.metrics = metrics
        self.week_count = week_count

    @classmethod
    def default(cls, colors: dict[str, str] | None = None, week_count: int = WEEK_COUNT) -> "MetricStore":
        palette = dict(DEFAULT_METRIC_COLORS)
        if colors:
            palette.update({name: color for name, color in colors.items() if name in palette})
        metrics = [
            Metric(
                name=name,
                color=color,
                weekly_signal=[Signal.NONE] * week_count,
                weekly_note=[""] * week_count,
            )
            for name, color in palette.items()
        ]
        return cls(metrics, week_count=week_count)

    def __len__(self) -> int:
        return len(self.metrics)

    def _check_indices(self, metric_index: int, week_index: int) -> Metric:
        if not 0 <= metric_index < len(self.metrics):
            raise IndexError(f"Metric index out of range: {metric_index}")
        if not 0 <= week_index < self.week_count:
            raise IndexError(f"Week index out of range: {week_index}")
        return self.metrics[metric_index]

    def toggle_signal(self, metric_index: int, week_index: int, direction: Signal | str) -> Signal:
        """Set the week's signal, or clear it when it already matches."""
        direction = Signal(direction)
        if direction is Signal.NONE:
            raise ValueError("Toggle direction must be up, flat or down")
        metric = self._check_indices(metric_index, week_index)

        current = metric.weekly_signal[week_index]
        updated = Signal.NONE if current is direction else direction
        metric.weekly_signal[week_index] = updated
        metric.recompute_score()

        logger.debug(
            "Signal toggled metric={} week={} {} -> {} score={}",
            metric.name,
            week_index + 1,
            current.value,
            updated.value,
            metric.cumulative_score,
        )
        return updated

    def set_note(self, metric_index: int, week_index: int, text: str) -> None:
        metric = self._check_indices(metric_index, week_index)
        metric.weekly_note[week_index] = text
        logger.debug("Note updated metric={} week={} chars={}", metric.name, week_index + 1, len(text))

    def recolor(self, colors: dict[str, str]) -> None:
        for metric in self.metrics:
            if metric.name in colors:
                metric.color = colors[metric.name]

    def scores(self) -> dict[str, int]:
        return {metric.name: metric.cumulative_score for metric in self.metrics}

    def names(self) -> list[str]:
        return [metric.name for metric in self.metrics]
