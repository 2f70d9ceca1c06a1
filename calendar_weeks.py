"""Week calendar for the tracked reference year."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from tracker_config import REFERENCE_YEAR, WEEK_COUNT

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


@dataclass(frozen=True)
class WeekDescriptor:
    display_label: str
    month: str
    sequence_number: int
    start_date: datetime.date
    end_date: datetime.date


def _short_date(value: datetime.date) -> str:
    return f"{value.month}/{value.day}"


def first_monday(reference_year: int) -> datetime.date:
    """Monday on or before January 1 of the given year."""
    jan_first = datetime.date(reference_year, 1, 1)
    # date.weekday() is Monday=0, which equals (sunday_based_day + 6) % 7.
    return jan_first - datetime.timedelta(days=jan_first.weekday())


def generate_weeks(reference_year: int = REFERENCE_YEAR, week_count: int = WEEK_COUNT) -> list[WeekDescriptor]:
    """Build consecutive Monday-Sunday weeks starting at the first Monday.

    Each week is attributed to the month of its end date, so a week spanning a
    month boundary counts towards the later month.
    """
    start = first_monday(reference_year)
    weeks: list[WeekDescriptor] = []
    for idx in range(week_count):
        week_start = start + datetime.timedelta(days=7 * idx)
        week_end = week_start + datetime.timedelta(days=6)
        weeks.append(
            WeekDescriptor(
                display_label=f"{_short_date(week_start)} - {_short_date(week_end)}",
                month=MONTH_NAMES[week_end.month - 1],
                sequence_number=idx + 1,
                start_date=week_start,
                end_date=week_end,
            )
        )
    return weeks


def month_order(weeks: list[WeekDescriptor]) -> list[str]:
    """Month names in the order they first appear."""
    seen: list[str] = []
    for week in weeks:
        if week.month not in seen:
            seen.append(week.month)
    return seen


WEEKS = generate_weeks()
