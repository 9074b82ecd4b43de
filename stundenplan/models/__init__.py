# Re-export common types
from .period import SlotDefinition, TimeSlot
from .settings import UserSettings
from .state import Break, Lesson, NoActivity, ResolvedState, Weekend
from .week import WeekTable

__all__ = [
    "TimeSlot",
    "SlotDefinition",
    "WeekTable",
    "UserSettings",
    "Lesson",
    "Break",
    "Weekend",
    "NoActivity",
    "ResolvedState",
]
