from enum import Enum


class RowClass(str, Enum):
    ABSENT = "absent"
    WARNING = "warning"
    SUNDAY = "sunday"
    NEUTRAL = "neutral"
