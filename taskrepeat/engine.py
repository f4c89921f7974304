# engine.py
"""
Rule -> engine (next occurrence)

Depends on:
  - parser.py (rule text -> Rule)
  - dates.py (calendar helpers, YYYYMMDD format)

Public API:
  - advance(rule, anchor, reference) -> date
  - next_date(reference, anchor_text, rule_text) -> str | raises TaskRepeatError
  - compute_next_date(reference, anchor_text, rule_text) -> str | TaskRepeatError
  - validate(rule_text) -> None | raises InvalidRuleError

Every variant searches strictly after max(anchor, reference): the anchor's own
slot is consumed, and a rule matching on the reference date yields the next
match after it.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Union

from dateutil.rrule import DAILY, MONTHLY, rrule

from .dates import as_datetime, format_date, is_leap_year, last_day_of_month, parse_date
from .errors import InvalidMonthDayError, OutOfRangeError, TaskRepeatError
from .parser import parse_rule
from .rules import DailyRule, MonthlyRule, Rule, WeeklyRule, YearlyRule

_LOGGER = logging.getLogger(__name__)

# longest month length per month number, Feb counted in a leap year
_MAX_MONTH_LENGTH = {m: last_day_of_month(2000, m) for m in range(1, 13)}

def _after(rr: rrule, start: date, rule: Rule) -> date:
    found = rr.after(as_datetime(start))
    if found is None:
        raise OutOfRangeError(f"No date after {start} fits in the calendar for rule {rule}", text=str(rule))
    return found.date()

def _next_daily(rule: DailyRule, anchor: date, start: date) -> date:
    rr = rrule(DAILY, interval=rule.interval, dtstart=as_datetime(anchor))
    return _after(rr, start, rule)

def _next_yearly(rule: YearlyRule, anchor: date, start: date) -> date:
    d = anchor
    while d <= start:
        year = d.year + 1
        if year > date.max.year:
            raise OutOfRangeError(f"No date after {start} fits in the calendar for rule {rule}", text=str(rule))
        if d.month == 2 and d.day == 29 and not is_leap_year(year):
            # folded occurrences stay on March 1 afterwards
            d = date(year, 3, 1)
        else:
            d = d.replace(year=year)
    return d

def _next_weekly(rule: WeeklyRule, start: date) -> date:
    # rrule weekdays: 0=Monday .. 6=Sunday
    byweekday = sorted(day - 1 for day in rule.days)
    rr = rrule(DAILY, byweekday=byweekday, dtstart=as_datetime(start))
    return _after(rr, start, rule)

def _check_reachable(rule: MonthlyRule) -> None:
    """Reject month restrictions none of the configured days can ever land in."""
    for month in range(1, 13):
        if rule.allows_month(month) and any(abs(day) <= _MAX_MONTH_LENGTH[month] for day in rule.days):
            return
    raise InvalidMonthDayError(
        f"Invalid 'm' rule: no configured day exists in the selected months ({rule})",
        token=",".join(str(day) for day in rule.days),
        text=str(rule),
    )

def _next_monthly(rule: MonthlyRule, start: date) -> date:
    _check_reachable(rule)
    rr = rrule(
        MONTHLY,
        dtstart=as_datetime(start.replace(day=1)),
        bymonthday=sorted(set(rule.days)),
        bymonth=sorted(rule.months) if rule.months else None,
    )
    return _after(rr, start, rule)

def advance(rule: Rule, anchor: date, reference: date) -> date:
    start = max(anchor, reference)

    if isinstance(rule, DailyRule):
        result = _next_daily(rule, anchor, start)
    elif isinstance(rule, YearlyRule):
        result = _next_yearly(rule, anchor, start)
    elif isinstance(rule, WeeklyRule):
        result = _next_weekly(rule, start)
    elif isinstance(rule, MonthlyRule):
        result = _next_monthly(rule, start)
    else:
        raise TypeError(f"Unknown rule type: {type(rule).__name__}")

    _LOGGER.debug("next date for %r from anchor=%s reference=%s: %s", str(rule), anchor, reference, result)
    return result

def next_date(reference: date, anchor_text: str, rule_text: str) -> str:
    rule = parse_rule(rule_text)
    anchor = parse_date(anchor_text)
    return format_date(advance(rule, anchor, reference))

def compute_next_date(reference: date, anchor_text: str, rule_text: str) -> Union[str, TaskRepeatError]:
    try:
        return next_date(reference, anchor_text, rule_text)
    except TaskRepeatError as e:
        _LOGGER.debug("next date rejected (%s): %s", e.kind, e)
        return e

def validate(rule_text: str) -> None:
    rule = parse_rule(rule_text)
    if isinstance(rule, MonthlyRule):
        _check_reachable(rule)
