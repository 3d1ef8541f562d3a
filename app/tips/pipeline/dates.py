"""
Receipt date/time extraction.

Patterns are tried from most to least specific. The first match of a pattern
is parsed; if it does not make a valid date the next pattern is tried.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

# Two-digit years below the pivot land in 2000-2049, the rest in 1950-1999.
TWO_DIGIT_YEAR_PIVOT = 50

MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

_WEEKDAY = r"(?:mon|tue|wed|thu|fri|sat|sun)[a-z]*\.?,?"
_NUMERIC_DATE = r"(\d{1,2})/(\d{1,2})/(\d{4})"
_CLOCK = r"(\d{1,2}):(\d{2})\s*([ap]\.?m\.?)"


def _expand_year(year: str) -> int:
    value = int(year)
    if len(year) == 2:
        value += 2000 if value < TWO_DIGIT_YEAR_PIVOT else 1900
    return value


def _normalize_meridiem(marker: str) -> str:
    """'pm', 'p.m.', 'Pm' -> 'PM'."""
    return marker.replace(".", "").upper()


def _date_and_clock(m: re.Match, now: datetime) -> datetime:
    month, day, year, hour, minute, meridiem = m.groups()
    stamp = "%s/%s/%d %s:%s %s" % (
        month, day, _expand_year(year), hour, minute, _normalize_meridiem(meridiem)
    )
    return datetime.strptime(stamp, "%m/%d/%Y %I:%M %p")


def _date_only(m: re.Match, now: datetime) -> datetime:
    month, day, year = m.groups()
    parsed = date(_expand_year(year), int(month), int(day))
    return _at_time_of(parsed, now)


def _month_name(m: re.Match, now: datetime) -> datetime:
    name, day, year = m.groups()
    parsed = date(int(year), MONTHS[name[:3].lower()], int(day))
    return _at_time_of(parsed, now)


def _at_time_of(day: date, now: datetime) -> datetime:
    # receipts without a printed time take the current clock time, not midnight
    return datetime.combine(day, now.time())


@dataclass(frozen=True)
class DatePattern:
    name: str
    regex: re.Pattern
    parse: Callable[[re.Match, datetime], datetime]


DATE_PATTERNS: list[DatePattern] = [
    DatePattern(
        name="weekday_date_time",
        regex=re.compile(rf"\b{_WEEKDAY}\s+{_NUMERIC_DATE}\s+{_CLOCK}", re.IGNORECASE),
        parse=_date_and_clock,
    ),
    DatePattern(
        name="date_time",
        regex=re.compile(rf"\b{_NUMERIC_DATE}\s+{_CLOCK}", re.IGNORECASE),
        parse=_date_and_clock,
    ),
    DatePattern(
        name="numeric_date",
        regex=re.compile(r"\b(\d{1,2})/(\d{1,2})/(\d{4}|\d{2})\b"),
        parse=_date_only,
    ),
    DatePattern(
        name="month_name_date",
        regex=re.compile(
            r"\b(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?\s+(\d{1,2}),?\s+(\d{4})\b",
            re.IGNORECASE,
        ),
        parse=_month_name,
    ),
]


def find_occurred_at(section: str, now: datetime) -> Optional[datetime]:
    """Return the receipt timestamp in *section*, or ``None``.

    *now* supplies the clock time when the receipt only prints a date.
    """
    for pattern in DATE_PATTERNS:
        m = pattern.regex.search(section)
        if m is None:
            continue
        try:
            return pattern.parse(m, now)
        except (ValueError, KeyError, OverflowError):
            continue
    return None
