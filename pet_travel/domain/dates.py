"""Whole-day date helpers and pt-BR display formatting."""

from __future__ import annotations

import datetime as dt

DISPLAY_DATE_FORMAT = "%d/%m/%Y"

# Rule offsets reach 60 days back and 90 days forward, and the NY winter
# window needs the following year, so dates stay inside years 2..9998.
MIN_SUPPORTED_DATE = dt.date(2, 1, 1)
MAX_SUPPORTED_DATE = dt.date(9998, 12, 31)


def add_days(value: dt.date, days: int) -> dt.date:
    return value + dt.timedelta(days=days)


def days_between(later: dt.date, earlier: dt.date) -> int:
    """Signed calendar-day difference ``later - earlier``."""
    return (later - earlier).days


def format_date(value: dt.date) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT)


def format_weight(value: float) -> str:
    # Integral weights print without a decimal part, as the form showed them.
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def is_supported_date(value: dt.date) -> bool:
    return MIN_SUPPORTED_DATE <= value <= MAX_SUPPORTED_DATE


def parse_date(value: str) -> dt.date:
    """Parse ``yyyy-mm-dd`` or ``dd/mm/yyyy``; raises ValueError otherwise."""
    text = str(value).strip()
    if "/" in text:
        return dt.datetime.strptime(text, DISPLAY_DATE_FORMAT).date()
    return dt.date.fromisoformat(text)


__all__ = [
    "DISPLAY_DATE_FORMAT",
    "MAX_SUPPORTED_DATE",
    "MIN_SUPPORTED_DATE",
    "add_days",
    "days_between",
    "format_date",
    "format_weight",
    "is_supported_date",
    "parse_date",
]
