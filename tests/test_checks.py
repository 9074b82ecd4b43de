from __future__ import annotations

import pytest

from stundenplan.data.loader import build_slots, build_week
from stundenplan.models import SlotDefinition
from stundenplan.validate.checks import ScheduleDataError, check_slots, check_week, ensure_valid
from stundenplan.validate.report import format_validation_report, write_validation_report


SLOT_TIMES = [["07:30", "08:15"], ["08:20", "09:05"]]


def test_valid_slots_have_no_problems() -> None:
    assert check_slots(SLOT_TIMES) == {}
    assert check_slots([["7:30", "8:15"], ["8:15", "9:00"]]) == {}


def test_slot_problems_are_reported_by_rule() -> None:
    problems = check_slots([["08:00", "08:45"], ["08:30", "09:15"], ["10:00", "09:50"], ["ab:cd", "11:00"]])
    assert set(problems) == {"slot_overlap", "slot_order", "slot_time_format"}
    assert check_slots([]) == {"slot_count": ["at least one slot is required"]}
    assert "slot_shape" in check_slots([["07:30"]])


def test_week_problems_are_reported_by_rule() -> None:
    assert check_week([["MA", "D"]] * 5, 2) == {}
    assert "week_days" in check_week([["MA", "D"]] * 4, 2)
    assert "week_row_length" in check_week([["MA"]] + [["MA", "D"]] * 4, 2)
    assert "week_code_type" in check_week([["MA", None]] + [["MA", "D"]] * 4, 2)
    assert "week_shape" in check_week({"week": []}, 2)


def test_ensure_valid_merges_reports() -> None:
    ensure_valid({}, {})
    with pytest.raises(ScheduleDataError) as exc:
        ensure_valid({"week_days": ["a"]}, {"week_days": ["b"], "slot_order": ["c"]})
    assert exc.value.problems == {"week_days": ["a", "b"], "slot_order": ["c"]}
    assert "slot_order: c" in str(exc.value)


def test_builders_fail_fast() -> None:
    with pytest.raises(ScheduleDataError):
        build_slots([["08:00", "09:00"], ["08:30", "09:30"]])
    slots = build_slots(SLOT_TIMES)
    assert isinstance(slots, SlotDefinition) and len(slots) == 2
    with pytest.raises(ScheduleDataError):
        build_week([["MA", "D", "E"]] * 5, slots)


def test_report_formatting(tmp_path) -> None:
    assert format_validation_report({}) == "schedule data: ok"
    text = format_validation_report({"week_days": ["expected 5 day rows, got 4"]})
    assert "1 problem(s)" in text
    assert "week_days: 1" in text
    path = write_validation_report({}, tmp_path)
    assert path.read_text(encoding="utf-8").startswith("{")
