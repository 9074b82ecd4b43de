from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple


SCHOOL_DAYS = 5


@dataclass(frozen=True)
class WeekTable:
    # rows[day][slot], Monday=0 .. Friday=4; "" means no lesson
    rows: Tuple[Tuple[str, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> "WeekTable":
        return cls(tuple(tuple(row) for row in rows))

    def day(self, day_index: int) -> Tuple[str, ...]:
        return self.rows[day_index]

    def code(self, day_index: int, slot_index: int) -> str:
        row = self.rows[day_index]
        if slot_index >= len(row):
            return ""
        return row[slot_index] or ""

    def lessons_on(self, day_index: int) -> List[int]:
        return [i for i, code in enumerate(self.rows[day_index]) if code]

    def as_lists(self) -> List[List[str]]:
        return [list(row) for row in self.rows]
