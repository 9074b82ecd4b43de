from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from ..models.period import SlotDefinition
from ..models.week import SCHOOL_DAYS, WeekTable
from .resolve import LAST_SCHOOL_DAY, day_index


SATURDAY, SUNDAY = 5, 6


@dataclass(frozen=True)
class LessonCount:
    total: int
    remaining: int


def percent(fraction: float) -> int:
    # Round half up, used for every displayed percentage
    return int(math.floor(fraction * 100 + 0.5))


def day_progress(now: datetime, slots: SlotDefinition) -> int:
    if day_index(now) > LAST_SCHOOL_DAY:
        return 0
    day_start = slots.first.start_on(now)
    day_end = slots.last.end_on(now)
    if now < day_start:
        return 0
    if now >= day_end:
        return 100
    return percent((now - day_start) / (day_end - day_start))


def week_progress(now: datetime, day: int, slots: SlotDefinition) -> int:
    # Saturday and Sunday report a finished week
    if day in (SATURDAY, SUNDAY):
        return 100
    if day < 0 or day > LAST_SCHOOL_DAY:
        return 0
    today = day_progress(now, slots) / 100
    return percent((day + today) / SCHOOL_DAYS)


def count_lessons(now: datetime, week: WeekTable, day: int, slots: SlotDefinition) -> LessonCount:
    if day < 0 or day > LAST_SCHOOL_DAY:
        return LessonCount(0, 0)
    total = remaining = 0
    for i in week.lessons_on(day):
        total += 1
        if now < slots[i].end_on(now):
            remaining += 1
    return LessonCount(total, remaining)
