from typing import Optional, Union

from attendance_lookup.enums.row_class import RowClass
from attendance_lookup.schemas.attendance import CamelModel


class MetricsResponse(CamelModel):
    working_days: int
    total_days: int
    working_days_percentage: int
    final_hours: str


class SummaryItem(CamelModel):
    key: str
    value: Union[int, float, str]
    tone: Optional[str] = None


class ReportRow(CamelModel):
    date: str
    location: str
    location_preview: str
    duty_in: str
    break_out: str
    break_in: str
    duty_out: str
    total_hours: str
    total_break: str
    basic_hours: str
    overtime: str
    less_basic: str
    remarks: str
    row_class: RowClass


class AttendanceReport(CamelModel):
    worker_id: str
    worker_name: str
    language: str
    direction: str
    metrics: MetricsResponse
    summary_items: list[SummaryItem]
    rows: list[ReportRow]
