# tasks.py
"""
Task-level date handling used by the scheduler service around the engine.

Public API:
  - prepare_task(task, today) -> Task | raises TaskRepeatError
  - complete_task(task, today) -> Optional[Task]
  - search_date_key(text) -> Optional[str]
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

from .dates import format_date, parse_date
from .engine import next_date, validate
from .errors import TaskValidationError

_LOGGER = logging.getLogger(__name__)

SEARCH_DATE_FORMAT = "%d.%m.%Y"
_SEARCH_DATE_RE = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}")

@dataclass(frozen=True)
class Task:
    date: str
    title: str
    comment: str = ""
    repeat: str = ""
    id: Optional[str] = None

def prepare_task(task: Task, today: date) -> Task:
    """Validate a task before it is stored and move a past date forward.

    An empty date means today. A date before today becomes today for a
    one-off task, or the next occurrence after today for a repeating one.
    """
    if not task.title.strip():
        _LOGGER.warning("rejected task %s: missing title", task.id)
        raise TaskValidationError("Task title is required", text=task.title)

    task_date = parse_date(task.date) if task.date else today
    if task.repeat:
        validate(task.repeat)

    if task_date < today:
        if task.repeat:
            return replace(task, date=next_date(today, format_date(task_date), task.repeat))
        task_date = today

    return replace(task, date=format_date(task_date))

def complete_task(task: Task, today: date) -> Optional[Task]:
    """Return the task moved to its next occurrence, or None when it does not repeat."""
    if not task.repeat:
        return None
    return replace(task, date=next_date(today, task.date, task.repeat))

def search_date_key(text: str) -> Optional[str]:
    text = text.strip()
    if not _SEARCH_DATE_RE.fullmatch(text):
        return None
    try:
        d = datetime.strptime(text, SEARCH_DATE_FORMAT).date()
    except ValueError:
        return None
    return format_date(d)
