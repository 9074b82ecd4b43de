from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from stundenplan.data.subjects import SubjectDirectory
from stundenplan.models import Break, Lesson, SlotDefinition, UserSettings, WeekTable, Weekend
from stundenplan.scheduler import LessonCount
from stundenplan.scheduler.session import DashboardSession, compute_snapshot, run_ticker
from stundenplan.validate.checks import ScheduleDataError


SLOTS = SlotDefinition.from_pairs([["07:30", "08:15"], ["08:20", "09:05"]])
WEEK = WeekTable.from_rows([["MA", "D"]] + [["", ""]] * 4)
SUBJECTS = SubjectDirectory({"names": {}})


def make_session() -> DashboardSession:
    return DashboardSession(UserSettings(week=WEEK), SLOTS, SUBJECTS)


def test_snapshot_on_sunday() -> None:
    snap = compute_snapshot(datetime(2024, 1, 7, 10, 0), WEEK, SLOTS)
    assert snap.day == 6
    assert snap.state == Weekend()
    assert snap.day_percent == 0
    assert snap.week_percent == 100
    assert snap.lessons == LessonCount(0, 0)


def test_snapshot_during_lesson() -> None:
    snap = compute_snapshot(datetime(2024, 1, 1, 8, 30), WEEK, SLOTS)
    assert isinstance(snap.state, Lesson) and snap.state.subject_code == "D"
    assert 0 < snap.day_percent < 100
    assert snap.lessons == LessonCount(2, 1)


def test_replaced_week_is_used_on_next_tick() -> None:
    session = make_session()
    now = datetime(2024, 1, 1, 8, 16)
    assert session.tick(now).state == Break(0, datetime(2024, 1, 1, 8, 20), "D")
    session.replace_week(WeekTable.from_rows([["MA", "E"]] + [["", ""]] * 4))
    assert session.tick(now).state == Break(0, datetime(2024, 1, 1, 8, 20), "E")
    assert session.settings.week.code(0, 1) == "E"


def test_ticker_reads_the_clock_every_tick() -> None:
    session = make_session()
    start = datetime(2024, 1, 1, 8, 14, 58)
    times = iter(start + timedelta(seconds=i) for i in range(10))
    sleeps: list[float] = []
    seen = []
    ticks = run_ticker(
        session,
        seen.append,
        interval=1.0,
        clock=lambda: next(times),
        sleep=sleeps.append,
        max_ticks=3,
    )
    assert ticks == 3
    assert sleeps == [1.0, 1.0]
    assert [type(s.state) for s in seen] == [Lesson, Lesson, Break]


def test_malformed_replacement_is_rejected() -> None:
    session = make_session()
    with pytest.raises(ScheduleDataError):
        session.replace_week(WeekTable.from_rows([["MA"] * 13] * 5))
    with pytest.raises(ScheduleDataError):
        session.replace_week(WeekTable.from_rows([["MA", "D"]] * 4))
    assert session.settings.week == WEEK
    assert isinstance(session.tick(datetime(2024, 1, 1, 8, 0)).state, Lesson)
