from typing import NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from attendance_lookup.constants import ROW_LENGTH

Count = Union[int, float]


class AttendanceRow(NamedTuple):
    """One day of attendance, in the column order the spreadsheet script sends."""

    date: Optional[str] = None
    location: Optional[str] = None
    duty_in: Optional[str] = None
    break_out: Optional[str] = None
    break_in: Optional[str] = None
    duty_out: Optional[str] = None
    total_hours: Optional[str] = None
    basic_hours: Optional[str] = None
    overtime: Optional[str] = None
    less_basic: Optional[str] = None
    remarks: Optional[str] = None


def _cell_to_text(cell) -> Optional[str]:
    if cell is None or isinstance(cell, str):
        return cell
    return str(cell)


def normalize_row(cells: list) -> AttendanceRow:
    """Pad short rows with None and drop cells past the last known column."""
    if not isinstance(cells, (list, tuple)):
        raise ValueError("Attendance row must be a list of cells")
    cells = [_cell_to_text(cell) for cell in list(cells)[:ROW_LENGTH]]
    cells.extend([None] * (ROW_LENGTH - len(cells)))
    return AttendanceRow(*cells)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AttendanceSummary(CamelModel):
    total_hours: str = "0"
    total_overtime: str = "0"
    absent: Count = 0
    sunday: Count = 0
    # Displayed as a count but also subtracted from total hours as if it were hours.
    warning: Count = 0

    @field_validator("total_hours", "total_overtime", mode="before")
    @classmethod
    def _stringify_hours(cls, value):
        if value is None:
            return "0"
        return value if isinstance(value, str) else str(value)

    @field_validator("absent", "sunday", "warning", mode="before")
    @classmethod
    def _empty_count_is_zero(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return value


class AttendanceData(CamelModel):
    worker_id: Optional[str] = None
    worker_name: Optional[str] = None
    summary: AttendanceSummary = Field(default_factory=AttendanceSummary)
    rows: list[AttendanceRow] = Field(default_factory=list)

    @field_validator("worker_id", "worker_name", mode="before")
    @classmethod
    def _stringify_worker(cls, value):
        return _cell_to_text(value)

    @field_validator("rows", mode="before")
    @classmethod
    def _normalize_rows(cls, value):
        if value is None:
            return []
        return [normalize_row(row) for row in value]
