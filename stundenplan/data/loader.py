from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from ..models.period import SlotDefinition
from ..models.week import WeekTable
from ..validate.checks import check_slots, check_week, ensure_valid
from .subjects import SubjectDirectory


logger = logging.getLogger(__name__)


@dataclass
class LoadedData:
    days: List[str]
    slots: SlotDefinition
    default_week: WeekTable
    subjects: SubjectDirectory


def load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def build_slots(slot_times: List[List[str]]) -> SlotDefinition:
    ensure_valid(check_slots(slot_times))
    return SlotDefinition.from_pairs(slot_times)


def build_week(rows: object, slots: SlotDefinition) -> WeekTable:
    ensure_valid(check_week(rows, len(slots)))
    return WeekTable.from_rows(rows)  # type: ignore[arg-type]


def load_data(root: Path) -> LoadedData:
    data_dir = root / "data"
    structure = load_json(data_dir / "structure.json")
    slots = build_slots(structure["slot_times"])
    week = build_week(load_json(data_dir / "week.json")["week"], slots)
    subjects = SubjectDirectory(load_json(data_dir / "subjects.json"))
    logger.info(f"Loaded {len(slots)} slots and {len(subjects)} subject names from {data_dir}")
    return LoadedData(
        days=list(structure["days"]),
        slots=slots,
        default_week=week,
        subjects=subjects,
    )
