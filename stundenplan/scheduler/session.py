from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from ..data.subjects import SubjectDirectory
from ..models.period import SlotDefinition
from ..models.settings import UserSettings
from ..models.state import ResolvedState
from ..models.week import WeekTable
from ..validate.checks import check_week, ensure_valid
from .progress import LessonCount, count_lessons, day_progress, week_progress
from .resolve import day_index, resolve


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    now: datetime
    day: int
    state: ResolvedState
    day_percent: int
    week_percent: int
    lessons: LessonCount


def compute_snapshot(now: datetime, week: WeekTable, slots: SlotDefinition) -> Snapshot:
    d = day_index(now)
    return Snapshot(
        now=now,
        day=d,
        state=resolve(now, week, slots),
        day_percent=day_progress(now, slots),
        week_percent=week_progress(now, d, slots),
        lessons=count_lessons(now, week, d, slots),
    )


class DashboardSession:
    """Holds the settings for one session and recomputes state per tick.

    The week table is only ever swapped as a whole; a tick reads it once.
    """

    def __init__(self, settings: UserSettings, slots: SlotDefinition, subjects: SubjectDirectory):
        self.settings = settings
        self.slots = slots
        self.subjects = subjects
        self._last_state: ResolvedState | None = None

    def replace_week(self, week: WeekTable) -> None:
        # A rejected table leaves the current one in place
        ensure_valid(check_week(week.as_lists(), len(self.slots)))
        self.settings = self.settings.with_week(week)
        logger.info("Week table replaced")

    def tick(self, now: datetime) -> Snapshot:
        snap = compute_snapshot(now, self.settings.week, self.slots)
        if snap.state != self._last_state:
            logger.info(f"State -> {type(snap.state).__name__} at {now:%H:%M:%S}")
        self._last_state = snap.state
        return snap


def run_ticker(
    session: DashboardSession,
    on_tick: Callable[[Snapshot], None],
    *,
    interval: float = 1.0,
    clock: Callable[[], datetime] = datetime.now,
    sleep: Callable[[float], None] = time.sleep,
    max_ticks: int | None = None,
) -> int:
    # Every tick reads the wall clock afresh, so a paused loop needs no catch-up
    ticks = 0
    while max_ticks is None or ticks < max_ticks:
        on_tick(session.tick(clock()))
        ticks += 1
        if max_ticks is not None and ticks >= max_ticks:
            break
        sleep(interval)
    return ticks
