import logging

from .dates import format_date, is_leap_year, last_day_of_month, parse_date
from .engine import advance, compute_next_date, next_date, validate
from .errors import (
    EmptyDayListError,
    EmptyRuleError,
    FormatError,
    InvalidIntervalError,
    InvalidMonthDayError,
    InvalidMonthError,
    InvalidRuleError,
    InvalidWeekdayError,
    OutOfRangeError,
    TaskRepeatError,
    TaskValidationError,
    UnsupportedRuleError,
)
from .parser import parse_rule, tokenize
from .rules import DailyRule, MonthlyRule, Rule, WeeklyRule, YearlyRule
from .tasks import Task, complete_task, prepare_task, search_date_key

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DailyRule",
    "EmptyDayListError",
    "EmptyRuleError",
    "FormatError",
    "InvalidIntervalError",
    "InvalidMonthDayError",
    "InvalidMonthError",
    "InvalidRuleError",
    "InvalidWeekdayError",
    "MonthlyRule",
    "OutOfRangeError",
    "Rule",
    "Task",
    "TaskRepeatError",
    "TaskValidationError",
    "UnsupportedRuleError",
    "WeeklyRule",
    "YearlyRule",
    "advance",
    "complete_task",
    "compute_next_date",
    "format_date",
    "is_leap_year",
    "last_day_of_month",
    "next_date",
    "parse_date",
    "parse_rule",
    "prepare_task",
    "search_date_key",
    "tokenize",
    "validate",
]
