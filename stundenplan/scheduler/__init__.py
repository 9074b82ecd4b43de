from .progress import LessonCount, count_lessons, day_progress, week_progress
from .resolve import day_index, resolve

__all__ = [
    "day_index",
    "resolve",
    "day_progress",
    "week_progress",
    "count_lessons",
    "LessonCount",
]
