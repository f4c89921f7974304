# rules.py
"""
Parsed repetition rules (the IR consumed by the engine).

  d <N>                      DailyRule(interval=N)
  y                          YearlyRule()
  w <d1,d2,...>              WeeklyRule(days={...})        1=Monday .. 7=Sunday
  m <d1,d2,...> [<m1,...>]   MonthlyRule(days=(...), months={...} | None)

str(rule) gives the canonical rule text; it parses back to an equal rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple, Union

MAX_DAILY_INTERVAL = 400
MAX_MONTH_DAY = 31

def _join(values) -> str:
    return ",".join(str(v) for v in values)

@dataclass(frozen=True)
class DailyRule:
    interval: int

    def __str__(self) -> str:
        return f"d {self.interval}"

@dataclass(frozen=True)
class YearlyRule:
    def __str__(self) -> str:
        return "y"

@dataclass(frozen=True)
class WeeklyRule:
    days: FrozenSet[int]

    def __str__(self) -> str:
        return f"w {_join(sorted(self.days))}"

@dataclass(frozen=True)
class MonthlyRule:
    # negative days count from the end of the month: -1 is the last day
    days: Tuple[int, ...]
    months: Optional[FrozenSet[int]] = None

    def __str__(self) -> str:
        out = f"m {_join(self.days)}"
        if self.months:
            out += f" {_join(sorted(self.months))}"
        return out

    def allows_month(self, month: int) -> bool:
        return self.months is None or month in self.months

Rule = Union[DailyRule, YearlyRule, WeeklyRule, MonthlyRule]
