"""Command line: print the next date of a repeating task.

    taskrepeat [--now YYYYMMDD] DATE RULE
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import List, Optional

from .dates import parse_date
from .engine import next_date
from .errors import TaskRepeatError

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="taskrepeat", description="Compute the next date of a repeating task.")
    p.add_argument("date", help="task date, YYYYMMDD")
    p.add_argument("rule", help='repeat rule, e.g. "d 7", "y", "w 1,3,5", "m 1,-1 1,7"')
    p.add_argument("--now", help="reference date, YYYYMMDD (default: today)")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        now = parse_date(args.now) if args.now else date.today()
        print(next_date(now, args.date, args.rule))
    except TaskRepeatError as e:
        print(f"error ({e.kind}): {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
