from __future__ import annotations

import re
from collections import defaultdict
from typing import Dict, List, Sequence

from ..models.week import SCHOOL_DAYS


HHMM = re.compile(r"^([01]?\d|2[0-3]):[0-5]\d$")


class ScheduleDataError(ValueError):
    def __init__(self, problems: Dict[str, List[str]]):
        self.problems = problems
        flat = [f"{rule}: {msg}" for rule, msgs in problems.items() for msg in msgs]
        super().__init__("invalid schedule data: " + "; ".join(flat))


def _minutes(hhmm: str) -> int:
    h, m = hhmm.split(":")
    return int(h) * 60 + int(m)


def check_slots(slot_times: Sequence[Sequence[str]]) -> Dict[str, List[str]]:
    problems: Dict[str, List[str]] = defaultdict(list)
    if not slot_times:
        problems["slot_count"].append("at least one slot is required")
        return dict(problems)
    parsed: List[tuple[int, int] | None] = []
    for i, pair in enumerate(slot_times):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            problems["slot_shape"].append(f"slot {i}: expected [start, end], got {pair!r}")
            parsed.append(None)
            continue
        start, end = pair
        bad = [v for v in (start, end) if not isinstance(v, str) or not HHMM.match(v)]
        if bad:
            problems["slot_time_format"].append(f"slot {i}: unparseable time {bad[0]!r}")
            parsed.append(None)
            continue
        s, e = _minutes(start), _minutes(end)
        if s >= e:
            problems["slot_order"].append(f"slot {i}: start {start} is not before end {end}")
        parsed.append((s, e))
    # Consecutive slots must not overlap; touching is allowed (zero-length break)
    for i in range(1, len(parsed)):
        prev, cur = parsed[i - 1], parsed[i]
        if prev is None or cur is None:
            continue
        if cur[0] < prev[1]:
            problems["slot_overlap"].append(f"slot {i} starts before slot {i - 1} ends")
    return dict(problems)


def check_week(rows: object, slot_count: int) -> Dict[str, List[str]]:
    problems: Dict[str, List[str]] = defaultdict(list)
    if not isinstance(rows, list):
        problems["week_shape"].append(f"expected a list of day rows, got {type(rows).__name__}")
        return dict(problems)
    if len(rows) != SCHOOL_DAYS:
        problems["week_days"].append(f"expected {SCHOOL_DAYS} day rows, got {len(rows)}")
    for d, row in enumerate(rows):
        if not isinstance(row, list):
            problems["week_shape"].append(f"day {d}: expected a list of codes")
            continue
        if len(row) != slot_count:
            problems["week_row_length"].append(f"day {d}: expected {slot_count} codes, got {len(row)}")
        for i, code in enumerate(row):
            if not isinstance(code, str):
                problems["week_code_type"].append(f"day {d} slot {i}: code {code!r} is not a string")
    return dict(problems)


def ensure_valid(*reports: Dict[str, List[str]]) -> None:
    merged: Dict[str, List[str]] = defaultdict(list)
    for report in reports:
        for rule, msgs in report.items():
            merged[rule].extend(msgs)
    if merged:
        raise ScheduleDataError(dict(merged))
