"""Human-readable definitions for the tracker's signals and views."""

METRIC_GUIDE = [
    {
        "Term": "Up arrow",
        "Meaning": "The metric improved this week.",
        "Effect": "+1 to the running total",
    },
    {
        "Term": "Flat arrow",
        "Meaning": "The metric held steady this week.",
        "Effect": "0, but the week still appears on the chart",
    },
    {
        "Term": "Down arrow",
        "Meaning": "The metric slipped this week.",
        "Effect": "-1 to the running total",
    },
    {
        "Term": "Clicking the same arrow again",
        "Meaning": "Clears the week's marker.",
        "Effect": "Week contributes nothing",
    },
    {
        "Term": "Score",
        "Meaning": "Shown next to each metric name.",
        "Effect": "count(up) - count(down) across the year",
    },
    {
        "Term": "Single view",
        "Meaning": "Running total of the selected metric, plus the 12-week entry grid.",
        "Effect": "cumsum(weekly delta) over marked weeks",
    },
    {
        "Term": "All view",
        "Meaning": "Running totals of every metric on one chart.",
        "Effect": "Weeks with no marker on any metric are skipped",
    },
    {
        "Term": "Monthly view",
        "Meaning": "Net change per month, independent from other months.",
        "Effect": "sum(weekly delta) per month; months with no net change are hidden",
    },
    {
        "Term": "Month of a week",
        "Meaning": "A week spanning two months belongs to the month it ends in.",
        "Effect": "month(week end date)",
    },
]
