"""Fixed tracker settings and user-editable colour overrides."""

from __future__ import annotations

import json
import re
from typing import Any

from loguru import logger

REFERENCE_YEAR = 2025
WEEK_COUNT = 52
VISIBLE_WEEKS = 12
SCROLL_STEP = 4

DEFAULT_METRIC_COLORS = {
    "Free Time": "#059669",
    "Loving Relationships": "#dc2626",
    "Strength and Energy": "#d97706",
    "Fun and Joy": "#7c3aed",
    "Creativity": "#2563eb",
    "Mental Wellbeing": "#db2777",
    "Money Moves": "#854d0e",
}

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")

# Rejected texts that have already been warned about.
_reported_bad_json: set[str] = set()


def _normalize_colors(raw: Any, allowed: dict[str, str]) -> dict[str, str]:
    if not isinstance(raw, dict):
        return {}
    out: dict[str, str] = {}
    for key, value in raw.items():
        name = str(key).strip()
        color = str(value).strip()
        if name in allowed and _HEX_COLOR.match(color):
            out[name] = color.lower()
    return out


def _warn_once(json_text: str, message: str) -> None:
    key = str(json_text)
    if key in _reported_bad_json:
        return
    _reported_bad_json.add(key)
    logger.warning(message)


def parse_color_overrides(json_text: str, fallback: dict[str, str] | None = None) -> tuple[dict[str, str], bool]:
    """Merge a JSON colour map onto the defaults.

    Returns the merged map and whether the text could be used. Unknown metric
    names and values that are not ``#rrggbb`` are dropped silently; malformed
    JSON returns the fallback unchanged.
    """
    base = dict(fallback or DEFAULT_METRIC_COLORS)
    try:
        parsed = json.loads(json_text)
    except (TypeError, ValueError):
        _warn_once(json_text, "Ignoring malformed metric color JSON")
        return base, False
    if not isinstance(parsed, dict):
        _warn_once(json_text, f"Metric color JSON must be an object, got {type(parsed).__name__}")
        return base, False

    base.update(_normalize_colors(parsed, base))
    return base, True
