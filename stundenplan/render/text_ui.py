from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import List

from ..data.subjects import SubjectDirectory
from ..models.period import SlotDefinition
from ..models.state import Break, Lesson, ResolvedState, Weekend
from ..models.week import WeekTable
from ..scheduler.resolve import LAST_SCHOOL_DAY
from ..scheduler.session import Snapshot


DASH = "—"
WARNING_SECONDS = 60


@dataclass(frozen=True)
class StatusView:
    timer: str
    pill: str
    meta: str
    warning: bool = False


def format_clock(now: datetime, show_seconds: bool) -> str:
    return f"{now:%H:%M:%S}" if show_seconds else f"{now:%H:%M}"


def format_countdown(seconds: int) -> str:
    seconds = max(0, seconds)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def seconds_until(end: datetime, now: datetime) -> int:
    return math.floor((end - now).total_seconds())


def describe_state(
    state: ResolvedState, now: datetime, slots: SlotDefinition, subjects: SubjectDirectory
) -> StatusView:
    if isinstance(state, Lesson):
        left = seconds_until(state.end, now)
        slot = slots[state.slot_index]
        return StatusView(
            timer=format_countdown(left),
            pill=subjects.display_name(state.subject_code),
            meta=f"{slot.start:%H:%M} {DASH} {slot.end:%H:%M}",
            warning=left <= WARNING_SECONDS,
        )
    if isinstance(state, Break):
        nxt = state.next_subject_code
        return StatusView(
            timer=format_countdown(seconds_until(state.end, now)),
            pill="Pause",
            meta=f"Nächste: {subjects.display_name(nxt)}" if nxt else "Pause",
        )
    if isinstance(state, Weekend):
        return StatusView(timer=DASH, pill="Wochenende", meta="Geniesse deine freie Zeit")
    return StatusView(
        timer=DASH, pill="Keine Lektion", meta="Schultag vorbei oder noch nicht gestartet"
    )


def schedule_lines(
    week: WeekTable,
    day: int,
    slots: SlotDefinition,
    subjects: SubjectDirectory,
    current: ResolvedState,
) -> List[str]:
    if day < 0 or day > LAST_SCHOOL_DAY:
        return []
    active = current.slot_index if isinstance(current, Lesson) else None
    lines: List[str] = []
    for i in week.lessons_on(day):
        code = week.code(day, i)
        marker = ">" if i == active else " "
        slot = slots[i]
        lines.append(
            f"{marker} {slot.start:%H:%M}–{slot.end:%H:%M}  {code:<4} {subjects.display_name(code)}"
        )
    return lines


def render_dashboard(
    snap: Snapshot,
    week: WeekTable,
    slots: SlotDefinition,
    subjects: SubjectDirectory,
    *,
    show_seconds: bool = False,
) -> str:
    view = describe_state(snap.state, snap.now, slots, subjects)
    timer = f"{view.timer} !" if view.warning else view.timer
    lines = [
        format_clock(snap.now, show_seconds),
        f"{view.pill}  {timer}",
        view.meta,
        f"Tag: {snap.day_percent}%  Woche: {snap.week_percent}%",
        f"Lektionen: {snap.lessons.remaining}/{snap.lessons.total}",
    ]
    today = schedule_lines(week, snap.day, slots, subjects, snap.state)
    if today:
        lines.append("")
        lines.extend(today)
    elif isinstance(snap.state, Weekend):
        lines.extend(["", "Wochenende!"])
    return "\n".join(lines)
