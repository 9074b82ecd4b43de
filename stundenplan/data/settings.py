from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping

from ..models.period import SlotDefinition
from ..models.settings import UserSettings
from ..models.week import WeekTable
from .loader import build_week


logger = logging.getLogger(__name__)


def _schedule_rows(raw: object) -> object | None:
    """Extract the week rows from a stored ``schedule_data`` value.

    The service stores the blob as a JSON string (``{"week": [...]}``); a
    null column or a blob without a week means "use the default week".
    """
    if raw is None:
        return None
    data = json.loads(raw) if isinstance(raw, str) else raw
    if not isinstance(data, dict):
        return None
    return data.get("week")


def settings_from_record(
    record: Mapping[str, Any], default_week: WeekTable, slots: SlotDefinition
) -> UserSettings:
    rows = _schedule_rows(record.get("schedule_data"))
    if rows is None:
        logger.info("Settings record has no schedule; using default week")
        week = default_week
    else:
        week = build_week(rows, slots)
    return UserSettings(
        week=week,
        sound_enabled=bool(record.get("sound_enabled", 1)),
        theme="dark" if record.get("theme") == "dark" else "light",
        show_seconds=bool(record.get("show_seconds", 0)),
        notifications_enabled=bool(record.get("notifications_enabled", 0)),
    )


def settings_to_payload(settings: UserSettings) -> Dict[str, Any]:
    return {
        "soundEnabled": settings.sound_enabled,
        "theme": "dark" if settings.dark_mode else "light",
        "showSeconds": settings.show_seconds,
        "notificationsEnabled": settings.notifications_enabled,
        "scheduleData": {"week": settings.week.as_lists()},
    }
