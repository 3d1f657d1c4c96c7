"""
Normalization of the time and duration fields found in attendance rows.

The spreadsheet mixes several encodings for durations ("8.5", "8:30",
"8 hr 30 min") and records break boundaries as 12-hour clock times
("11:00 AM"). Every public function here is total: a value that cannot be
understood is rendered as the placeholder glyph (or passed through), never
raised to the caller. The ``parse_*`` helpers return ``None`` on failure so
callers can see when that happened.
"""

import math
import re
from typing import NamedTuple, Optional

from attendance_lookup.constants import PLACEHOLDER

UNIT_MARKERS = ("hr", "min")
MERIDIEMS = ("AM", "PM")
MINUTES_PER_HOUR = 60
DECIMAL_HOURS_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


class Duration(NamedTuple):
    hours: int
    minutes: int

    @classmethod
    def from_minutes(cls, total_minutes: int) -> "Duration":
        return cls(total_minutes // MINUTES_PER_HOUR, total_minutes % MINUTES_PER_HOUR)

    def render(self) -> str:
        if self.hours == 0:
            return f"{self.minutes} min"
        if self.minutes == 0:
            return f"{self.hours} hr"
        return f"{self.hours} hr {self.minutes} min"


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def parse_decimal_hours(value: str) -> Optional[Duration]:
    """Parse "1.5" style decimal hours into whole hours and rounded minutes."""
    value = value.strip()
    if not DECIMAL_HOURS_PATTERN.fullmatch(value):
        return None

    decimal_hours = float(value)

    hours = math.floor(decimal_hours)
    minutes = round_half_up((decimal_hours - hours) * MINUTES_PER_HOUR)
    return Duration(hours, minutes)


def parse_hours_minutes(value: str) -> Optional[Duration]:
    """Parse "HH:MM" as a duration (not a time of day)."""
    parts = value.split(":")
    if len(parts) < 2:
        return None

    try:
        return Duration(int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def format_time_duration(value: Optional[str]) -> str:
    if not value:
        return PLACEHOLDER

    if not isinstance(value, str):
        value = str(value)

    # Already rendered upstream
    if any(marker in value for marker in UNIT_MARKERS):
        return value

    duration = parse_decimal_hours(value) or parse_hours_minutes(value)
    if duration is None:
        return value

    return duration.render()


def parse_clock_minutes(value: str) -> Optional[int]:
    """
    Convert a 12-hour clock time such as "4:05 PM" to minutes since midnight.

    Returns None when the value does not look like "H:MM AM|PM".
    """
    parts = value.strip().upper().split(" ")
    if len(parts) != 2:
        return None

    time_part, meridiem = parts
    if meridiem not in MERIDIEMS:
        return None

    components = time_part.split(":")
    if len(components) < 2:
        return None

    try:
        hours = int(components[0])
        minutes = int(components[1])
    except ValueError:
        return None

    if meridiem == "PM" and hours != 12:
        hours += 12
    elif meridiem == "AM" and hours == 12:
        hours = 0

    return hours * MINUTES_PER_HOUR + minutes


def calculate_break_duration(break_out: Optional[str], break_in: Optional[str]) -> str:
    if not break_out or not break_in:
        return PLACEHOLDER

    if not isinstance(break_out, str) or not isinstance(break_in, str):
        return PLACEHOLDER

    break_out_minutes = parse_clock_minutes(break_out)
    break_in_minutes = parse_clock_minutes(break_in)

    # 0 is treated as unparseable as well, so a 12:00 AM boundary is rejected.
    if not break_out_minutes or not break_in_minutes:
        return PLACEHOLDER

    # Overnight breaks are not supported
    if break_out_minutes >= break_in_minutes:
        return PLACEHOLDER

    return Duration.from_minutes(break_in_minutes - break_out_minutes).render()
