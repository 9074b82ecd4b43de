from __future__ import annotations

from datetime import datetime

from ..models.period import SlotDefinition
from ..models.state import FREE_PERIOD, Break, Lesson, NoActivity, ResolvedState, Weekend
from ..models.week import WeekTable


LAST_SCHOOL_DAY = 4  # Friday


def day_index(now: datetime) -> int:
    # Sunday-based weekday (Sunday=0) shifted so Monday=0 .. Sunday=6
    sunday_based = now.isoweekday() % 7
    return (sunday_based + 6) % 7


def resolve(now: datetime, week: WeekTable, slots: SlotDefinition) -> ResolvedState:
    """Work out what is happening at ``now``.

    Slots and breaks are half-open: a slot covers ``start <= now < end`` and
    the break after it begins at the slot's end instant.
    """
    d = day_index(now)
    if d > LAST_SCHOOL_DAY:
        return Weekend()

    for slot in slots:
        start, end = slot.start_on(now), slot.end_on(now)
        if start <= now < end:
            return Lesson(slot.index, start, end, week.code(d, slot.index) or FREE_PERIOD)

    for prev, nxt in zip(slots.slots, slots.slots[1:]):
        gap_start, gap_end = prev.end_on(now), nxt.start_on(now)
        if gap_start <= now < gap_end:
            return Break(prev.index, gap_end, week.code(d, nxt.index))

    return NoActivity()
