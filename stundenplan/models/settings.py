from __future__ import annotations

from dataclasses import dataclass, replace

from .week import WeekTable


@dataclass(frozen=True)
class UserSettings:
    week: WeekTable
    sound_enabled: bool = True
    theme: str = "light"  # light, dark
    show_seconds: bool = False
    notifications_enabled: bool = False

    @property
    def dark_mode(self) -> bool:
        return self.theme == "dark"

    def with_week(self, week: WeekTable) -> "UserSettings":
        return replace(self, week=week)
