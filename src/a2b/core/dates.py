#!/usr/bin/env python3
"""
Period Bucketing for Dates

Maps due dates onto the month or ISO-week periods used by cash flow analytics.
Period keys are zero-padded and fixed-width so they sort lexicographically.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, NamedTuple

# Locale-independent month abbreviations (index 0 unused)
MONTH_ABBREVIATIONS = (
    "",
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


class Granularity(Enum):
    """Bucketing scale for cash flow periods."""

    MONTH = "month"
    WEEK = "week"

    @property
    def title(self) -> str:
        """Human-readable name, as shown in the scale selector."""
        return self.value.capitalize()

    @classmethod
    def from_title(cls, title: str) -> "Granularity":
        """
        Parse a granularity from its title or value, case-insensitively.

        Raises:
            ValueError: If the title names no known granularity
        """
        normalized = title.strip().lower()
        for granularity in cls:
            if granularity.value == normalized:
                return granularity
        raise ValueError(f"Unknown granularity: {title!r} (expected one of: month, week)")


class PeriodInfo(NamedTuple):
    """Year, sort key and label of the period a date falls into."""

    year: int
    period_key: str
    display_string: str


EMPTY_PERIOD = PeriodInfo(0, "", "")


def period_info(day: date, granularity: Granularity) -> PeriodInfo:
    """
    Compute the period a date belongs to.

    Month periods use the calendar year ("2024-01", "Jan 2024"). Week periods use
    the ISO-8601 week-numbering year, so 2024-12-30 falls in "2025-W01".

    Args:
        day: Date to bucket
        granularity: Month or week bucketing

    Returns:
        PeriodInfo; (0, "", "") when the date's components cannot be extracted
    """
    try:
        if granularity is Granularity.WEEK:
            iso_year, week, _ = day.isocalendar()
            key = f"{iso_year:04d}-W{week:02d}"
            return PeriodInfo(iso_year, key, key)

        year, month = day.year, day.month
        first_of_month = date(year, month, 1)
    except (AttributeError, TypeError, ValueError):
        return EMPTY_PERIOD

    display = f"{MONTH_ABBREVIATIONS[first_of_month.month]} {first_of_month.year:04d}"
    return PeriodInfo(year, f"{year:04d}-{month:02d}", display)


def parse_iso_date(value: Any) -> date | None:
    """
    Coerce a due date value to a date.

    Args:
        value: date, datetime, ISO "YYYY-MM-DD" string, or None/empty

    Returns:
        date, or None when no value is given

    Raises:
        ValueError: If a string is not a valid ISO date
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
