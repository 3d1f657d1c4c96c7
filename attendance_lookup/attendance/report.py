"""
Builds the render-ready view of one attendance lookup: metrics, summary
cards and one display row per attendance row.
"""

from typing import Optional

from attendance_lookup.attendance.formatting import calculate_break_duration, format_time_duration
from attendance_lookup.attendance.metrics import AttendanceMetrics, classify_row, compute_metrics
from attendance_lookup.constants import LOCATION_PREVIEW_LENGTH, PLACEHOLDER
from attendance_lookup.enums.language import Language
from attendance_lookup.schemas.attendance import AttendanceData, AttendanceRow
from attendance_lookup.schemas.report import AttendanceReport, MetricsResponse, ReportRow, SummaryItem
from attendance_lookup.translation.resolver import TranslationResolver


def _display(value: Optional[str]) -> str:
    return value or PLACEHOLDER


def _location_preview(location: Optional[str]) -> str:
    if not location:
        return PLACEHOLDER
    if len(location) > LOCATION_PREVIEW_LENGTH:
        return location[:LOCATION_PREVIEW_LENGTH] + "…"
    return location


def build_summary_items(data: AttendanceData, metrics: AttendanceMetrics) -> list[SummaryItem]:
    summary = data.summary
    working_days = f"{metrics.working_days}/{metrics.total_days} ({metrics.working_days_percentage}%)"

    return [
        SummaryItem(key="summary-total-hours", value=summary.total_hours),
        SummaryItem(key="summary-total-overtime", value=summary.total_overtime),
        SummaryItem(key="summary-working-days", value=working_days, tone="green"),
        SummaryItem(key="summary-absent", value=summary.absent, tone="red"),
        SummaryItem(key="summary-sunday", value=summary.sunday, tone="blue"),
        SummaryItem(key="summary-warning", value=summary.warning, tone="yellow"),
    ]


def translate_remarks(
    rows: list[AttendanceRow], language: Language, resolver: Optional[TranslationResolver]
) -> dict[str, str]:
    """Maps each distinct remark to its display text in ``language``."""
    if resolver is None or language == Language.ENGLISH:
        return {}

    translated = {}
    for row in rows:
        remarks = row.remarks
        if remarks and remarks not in translated:
            translated[remarks] = resolver.resolve(remarks, language.value)
    return translated


def build_report_row(row: AttendanceRow, remarks_translations: dict[str, str]) -> ReportRow:
    remarks = remarks_translations.get(row.remarks, row.remarks) if row.remarks else None

    return ReportRow(
        date=_display(row.date),
        location=_display(row.location),
        location_preview=_location_preview(row.location),
        duty_in=_display(row.duty_in),
        break_out=_display(row.break_out),
        break_in=_display(row.break_in),
        duty_out=_display(row.duty_out),
        total_hours=format_time_duration(row.total_hours),
        total_break=calculate_break_duration(row.break_out, row.break_in),
        basic_hours=format_time_duration(row.basic_hours),
        overtime=format_time_duration(row.overtime),
        less_basic=format_time_duration(row.less_basic),
        remarks=_display(remarks),
        # Classified on the untranslated remark
        row_class=classify_row(row.remarks),
    )


def build_attendance_report(
    data: AttendanceData,
    language: Language = Language.ENGLISH,
    resolver: Optional[TranslationResolver] = None,
) -> AttendanceReport:
    metrics = compute_metrics(data)
    remarks_translations = translate_remarks(data.rows, language, resolver)

    return AttendanceReport(
        worker_id=_display(data.worker_id),
        worker_name=_display(data.worker_name),
        language=language.value,
        direction="rtl" if language.is_rtl else "ltr",
        metrics=MetricsResponse(
            working_days=metrics.working_days,
            total_days=metrics.total_days,
            working_days_percentage=metrics.working_days_percentage,
            final_hours=metrics.final_hours,
        ),
        summary_items=build_summary_items(data, metrics),
        rows=[build_report_row(row, remarks_translations) for row in data.rows],
    )
