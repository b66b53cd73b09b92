"""
Small Claims Date Arithmetic

Calendar helpers for the incident lookback window.
"""
from __future__ import annotations

from datetime import date, timedelta


def subtract_years(d: date, years: int) -> date:
    """
    Move a date back by whole calendar years, keeping month and day.

    February 29 in a year that is not a leap year overflows to March 1,
    the same day a calendar rollover would give.

    Examples:
        >>> subtract_years(date(2026, 10, 19), 6)
        datetime.date(2020, 10, 19)
        >>> subtract_years(date(2024, 2, 29), 6)
        datetime.date(2018, 3, 1)
    """
    try:
        return d.replace(year=d.year - years)
    except ValueError:
        return d.replace(year=d.year - years, day=28) + timedelta(days=1)


def lookback_cutoff(today: date, years: int) -> date:
    """Earliest incident date still inside a lookback window of `years`."""
    return subtract_years(today, years)


_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_long_date(d: date) -> str:
    """Render as "Mon Jan 01 2018" for user-facing messages (locale independent)."""
    return f"{_WEEKDAYS[d.weekday()]} {_MONTHS[d.month - 1]} {d.day:02d} {d.year}"
