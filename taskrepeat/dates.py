# dates.py
"""
Calendar helpers and the YYYYMMDD text format.

Public API:
  - is_leap_year(year) -> bool
  - last_day_of_month(year, month) -> int
  - parse_date(text) -> date | raises FormatError
  - format_date(d) -> str
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from .errors import FormatError

_DATE_RE = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})")

def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

def last_day_of_month(year: int, month: int) -> int:
    # day 0 of the next month; relativedelta folds December into year + 1
    first_of_next = date(year, month, 1) + relativedelta(months=1)
    return (first_of_next - timedelta(days=1)).day

def parse_date(text: str) -> date:
    m = _DATE_RE.fullmatch(text) if isinstance(text, str) else None
    if not m:
        raise FormatError(f"Invalid date: {text!r} (expected YYYYMMDD)", token=text, text=text)
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        raise FormatError(f"Invalid date: {text!r} (no such calendar day)", token=text, text=text)

def format_date(d: date) -> str:
    return f"{d.year:04d}{d.month:02d}{d.day:02d}"

def as_datetime(d: date) -> datetime:
    return datetime(d.year, d.month, d.day)
