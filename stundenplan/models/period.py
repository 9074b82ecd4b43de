from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Iterable, Iterator, Sequence, Tuple


def parse_hhmm(value: str) -> time:
    hours, minutes = value.split(":")
    return time(int(hours), int(minutes))


@dataclass(frozen=True)
class TimeSlot:
    index: int
    start: time
    end: time

    def start_on(self, day: datetime) -> datetime:
        return datetime.combine(day.date(), self.start, tzinfo=day.tzinfo)

    def end_on(self, day: datetime) -> datetime:
        return datetime.combine(day.date(), self.end, tzinfo=day.tzinfo)


@dataclass(frozen=True)
class SlotDefinition:
    """Daily lesson slots, identical for every school day.

    Gaps between consecutive slots are breaks. Ordering and overlap are
    checked by ``validate.checks`` before a definition is built from data.
    """

    slots: Tuple[TimeSlot, ...]

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[str]]) -> "SlotDefinition":
        return cls(
            tuple(
                TimeSlot(i, parse_hhmm(start), parse_hhmm(end))
                for i, (start, end) in enumerate(pairs)
            )
        )

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self) -> Iterator[TimeSlot]:
        return iter(self.slots)

    def __getitem__(self, i: int) -> TimeSlot:
        return self.slots[i]

    @property
    def first(self) -> TimeSlot:
        return self.slots[0]

    @property
    def last(self) -> TimeSlot:
        return self.slots[-1]

