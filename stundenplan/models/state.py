from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union


FREE_PERIOD = "frei"


@dataclass(frozen=True)
class Lesson:
    slot_index: int
    start: datetime
    end: datetime
    subject_code: str  # FREE_PERIOD when the cell is empty


@dataclass(frozen=True)
class Break:
    after_slot_index: int
    end: datetime
    next_subject_code: str


@dataclass(frozen=True)
class Weekend:
    pass


@dataclass(frozen=True)
class NoActivity:
    pass


ResolvedState = Union[Lesson, Break, Weekend, NoActivity]
