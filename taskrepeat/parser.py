# parser.py
"""
Rule text -> Rule (tokenizer + parser)

Public API:
  - tokenize(text) -> List[Token]
  - parse_rule(text) -> Rule | raises InvalidRuleError

Notes:
- Tokens are ITEM (anything but whitespace/comma), COMMA and SEP (a whitespace
  run that separates two groups). Whitespace touching a comma is dropped, so
  "w 1, 3" and "w 1 ,3" read as a single group.
- The first item names the rule kind; the remaining groups are its arguments.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .errors import (
    EmptyDayListError,
    EmptyRuleError,
    InvalidIntervalError,
    InvalidMonthDayError,
    InvalidMonthError,
    InvalidWeekdayError,
    UnsupportedRuleError,
)
from .rules import (
    MAX_DAILY_INTERVAL,
    MAX_MONTH_DAY,
    DailyRule,
    MonthlyRule,
    Rule,
    WeeklyRule,
    YearlyRule,
)

ITEM = "item"
COMMA = "comma"
SEP = "sep"

_TOKEN_RE = re.compile(r"(?P<sep>\s+)|(?P<comma>,)|(?P<item>[^\s,]+)")
_INT_RE = re.compile(r"[+-]?[0-9]+")

@dataclass(frozen=True)
class Token:
    kind: str
    value: str
    pos: int

def tokenize(text: str) -> List[Token]:
    raw = [Token(m.lastgroup, m.group(), m.start()) for m in _TOKEN_RE.finditer(text)]

    tokens: List[Token] = []
    for i, tok in enumerate(raw):
        if tok.kind == SEP:
            prev_kind = raw[i - 1].kind if i > 0 else None
            next_kind = raw[i + 1].kind if i + 1 < len(raw) else None
            if prev_kind != ITEM or next_kind != ITEM:
                continue
        tokens.append(tok)
    return tokens

def _split_groups(tokens: List[Token]) -> List[List[str]]:
    """Group ITEM values; two adjacent commas (or a dangling one) give an empty item."""
    groups: List[List[str]] = []
    current: List[str] = []
    expect_item = True

    for tok in tokens:
        if tok.kind == SEP:
            groups.append(current)
            current = []
            expect_item = True
        elif tok.kind == COMMA:
            if expect_item:
                current.append("")
            expect_item = True
        else:
            current.append(tok.value)
            expect_item = False

    if tokens and tokens[-1].kind == COMMA:
        current.append("")
    if tokens:
        groups.append(current)
    return groups

def _parse_int(token: str) -> Optional[int]:
    if not _INT_RE.fullmatch(token):
        return None
    return int(token)

class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._kind = ""
        self._args: List[List[str]] = []

    def parse(self) -> Rule:
        if not self._text.strip():
            raise EmptyRuleError("Empty repeat rule", text=self._text)

        groups = _split_groups(tokenize(self._text))
        head = groups[0]
        if len(head) != 1:
            raise self._unsupported()
        self._kind = head[0]
        self._args = groups[1:]

        handler = _HANDLERS.get(self._kind)
        if handler is None:
            raise self._unsupported()
        return handler(self)

    def _unsupported(self) -> UnsupportedRuleError:
        return UnsupportedRuleError(
            f"Unsupported repeat rule: {self._text!r}", token=self._kind or None, text=self._text
        )

    def _yearly(self) -> Rule:
        if self._args:
            raise self._unsupported()
        return YearlyRule()

    def _daily(self) -> Rule:
        if len(self._args) > 1:
            raise self._unsupported()
        items = self._args[0] if self._args else []
        if len(items) != 1:
            raise InvalidIntervalError(
                f"Invalid 'd' rule: expected one interval in days, got {self._text!r}",
                token=",".join(items) or None,
                text=self._text,
            )
        n = _parse_int(items[0])
        if n is None or n < 1 or n > MAX_DAILY_INTERVAL:
            raise InvalidIntervalError(
                f"Invalid 'd' rule: interval {items[0]!r} must be between 1 and {MAX_DAILY_INTERVAL}",
                token=items[0],
                text=self._text,
            )
        return DailyRule(interval=n)

    def _weekly(self) -> Rule:
        if len(self._args) > 1:
            raise self._unsupported()
        items = self._args[0] if self._args else []
        if not items:
            raise EmptyDayListError("Invalid 'w' rule: no weekdays given", text=self._text)

        days = set()
        for item in items:
            day = _parse_int(item)
            if day is None or not (1 <= day <= 7):
                raise InvalidWeekdayError(
                    f"Invalid 'w' rule: bad weekday {item!r} (expected 1..7)", token=item, text=self._text
                )
            days.add(day)
        return WeeklyRule(days=frozenset(days))

    def _monthly(self) -> Rule:
        if len(self._args) > 2:
            raise self._unsupported()
        if not self._args or not self._args[0]:
            raise EmptyDayListError("Invalid 'm' rule: no days given", text=self._text)

        days: List[int] = []
        for item in self._args[0]:
            day = _parse_int(item)
            if day is None or day == 0 or abs(day) > MAX_MONTH_DAY:
                raise InvalidMonthDayError(
                    f"Invalid 'm' rule: bad day {item!r} (expected 1..31 or -31..-1)",
                    token=item,
                    text=self._text,
                )
            days.append(day)

        months = None
        if len(self._args) == 2:
            months = set()
            for item in self._args[1]:
                month = _parse_int(item)
                if month is None or not (1 <= month <= 12):
                    raise InvalidMonthError(
                        f"Invalid 'm' rule: bad month {item!r} (expected 1..12)", token=item, text=self._text
                    )
                months.add(month)
            months = frozenset(months)

        return MonthlyRule(days=tuple(days), months=months)

_HANDLERS: Dict[str, Callable[[_Parser], Rule]] = {
    "d": _Parser._daily,
    "y": _Parser._yearly,
    "w": _Parser._weekly,
    "m": _Parser._monthly,
}

def parse_rule(text: str) -> Rule:
    return _Parser(text).parse()
