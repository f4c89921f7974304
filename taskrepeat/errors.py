# errors.py
"""
Error hierarchy shared by the parser, the engine and the task helpers.

Every error carries:
  - kind: stable machine-readable name (used by callers to pick a message)
  - token: the offending token, when there is one
  - text: the input the error was raised for
"""

from __future__ import annotations

from typing import Optional

class TaskRepeatError(ValueError):
    kind = "error"

    def __init__(self, message: str, token: Optional[str] = None, text: Optional[str] = None) -> None:
        super().__init__(message)
        self.token = token
        self.text = text

class FormatError(TaskRepeatError):
    kind = "format"

class InvalidRuleError(TaskRepeatError):
    kind = "rule"

class EmptyRuleError(InvalidRuleError):
    kind = "empty_rule"

class UnsupportedRuleError(InvalidRuleError):
    kind = "unsupported_rule"

class InvalidIntervalError(InvalidRuleError):
    kind = "invalid_interval"

class InvalidWeekdayError(InvalidRuleError):
    kind = "invalid_weekday"

class InvalidMonthDayError(InvalidRuleError):
    kind = "invalid_month_day"

class InvalidMonthError(InvalidRuleError):
    kind = "invalid_month"

class EmptyDayListError(InvalidRuleError):
    kind = "empty_day_list"

class TaskValidationError(TaskRepeatError):
    kind = "task"

class OutOfRangeError(TaskRepeatError):
    kind = "out_of_range"
