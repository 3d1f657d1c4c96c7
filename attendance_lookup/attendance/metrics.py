import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

from attendance_lookup.attendance.formatting import round_half_up
from attendance_lookup.enums.row_class import RowClass
from attendance_lookup.schemas.attendance import AttendanceData, AttendanceRow, AttendanceSummary

# First match wins
REMARK_CLASSES = [
    ("absent", RowClass.ABSENT),
    ("warning", RowClass.WARNING),
    ("sunday", RowClass.SUNDAY),
]


@dataclass(frozen=True)
class AttendanceMetrics:
    working_days: int
    total_days: int
    working_days_percentage: int
    final_hours: str


def _is_filled(value) -> bool:
    return isinstance(value, str) and value != ""


def count_working_days(rows: Optional[list[AttendanceRow]]) -> int:
    """A working day is a row with both a duty-in and a duty-out time."""
    if not rows:
        return 0

    return sum(1 for row in rows if _is_filled(row.duty_in) and _is_filled(row.duty_out))


def calculate_percentage(part: int, total: int) -> int:
    if total <= 0:
        return 0
    return round_half_up(part / total * 100)


HUNDREDTHS = Decimal("0.01")
# Any finite float fits at cent scale
CENTS_CONTEXT = Context(prec=320)


def _parse_hours(value) -> float:
    try:
        hours = float(value)
    except (TypeError, ValueError):
        return 0.0
    return hours if math.isfinite(hours) else 0.0


def calculate_final_hours(summary: AttendanceSummary) -> str:
    """
    Total hours less the warning deduction, never below zero.

    The upstream ``warning`` value is a count of warnings, but it is
    subtracted here as a number of hours.
    """
    total_hours = _parse_hours(summary.total_hours)
    warning_deduction = summary.warning or 0
    final_hours = Decimal(max(0.0, total_hours - warning_deduction))
    return str(final_hours.quantize(HUNDREDTHS, rounding=ROUND_HALF_UP, context=CENTS_CONTEXT))


def compute_metrics(data: AttendanceData) -> AttendanceMetrics:
    rows = data.rows or []
    working_days = count_working_days(rows)
    total_days = len(rows)

    return AttendanceMetrics(
        working_days=working_days,
        total_days=total_days,
        working_days_percentage=calculate_percentage(working_days, total_days),
        final_hours=calculate_final_hours(data.summary),
    )


def classify_row(remarks: Optional[str]) -> RowClass:
    remarks_lower = str(remarks or "").lower()
    for needle, row_class in REMARK_CLASSES:
        if needle in remarks_lower:
            return row_class
    return RowClass.NEUTRAL
