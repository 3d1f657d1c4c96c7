from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from attendance_lookup.attendance.report import build_attendance_report
from attendance_lookup.constants import UPSTREAM_ERROR_MESSAGE
from attendance_lookup.enums.language import Language
from attendance_lookup.exceptions import UpstreamDataException, UpstreamUnavailableException
from attendance_lookup.schemas.attendance import AttendanceData
from attendance_lookup.schemas.lookup import AttendanceLookupRequest
from attendance_lookup.utils.date_utils import get_month_options, get_month_range
from attendance_lookup.utils.device import describe_device, get_client_ip
from attendance_lookup.utils.preferences import get_saved_language, save_language, save_mobile

bp = Blueprint("attendance", __name__, url_prefix="/api")


def _resolve_language(requested) -> Language:
    if requested is not None:
        return requested

    saved = get_saved_language()
    try:
        return Language(saved) if saved else Language.ENGLISH
    except ValueError:
        return Language.ENGLISH


def fetch_attendance(lookup: AttendanceLookupRequest) -> AttendanceData:
    """
    Raises:
        UpstreamUnavailableException: If the script could not be reached.
        UpstreamDataException: If the script answered with an error or an unusable payload.
    """
    start, end = get_month_range(lookup.month)

    payload = current_app.attendance_client.get_attendance_by_mobile(
        mobile=lookup.mobile,
        start_iso=start.isoformat(),
        end_iso=end.isoformat(),
        ip_address=get_client_ip(request),
        device_details=describe_device(request.headers.get("User-Agent")),
    )

    if not isinstance(payload, dict):
        current_app.logger.error(f"Attendance script returned unexpected payload type: {type(payload).__name__}")
        raise UpstreamDataException("Unexpected attendance data from external service")

    if payload.get("error"):
        raise UpstreamDataException(str(payload["error"]))

    try:
        return AttendanceData.model_validate(payload)
    except ValidationError as e:
        current_app.logger.error(f"Attendance payload failed validation: {e}")
        raise UpstreamDataException("Unexpected attendance data from external service") from e


@bp.get("/attendance")
def attendance():
    try:
        lookup = AttendanceLookupRequest.model_validate(request.args.to_dict())
    except ValidationError as e:
        return jsonify({"error": e.errors(include_url=False, include_context=False)}), 400

    language = _resolve_language(lookup.lang)

    try:
        data = fetch_attendance(lookup)
    except UpstreamUnavailableException as e:
        current_app.logger.error(f"Attendance lookup failed: {e}")
        return jsonify({"error": UPSTREAM_ERROR_MESSAGE}), 502
    except UpstreamDataException as e:
        current_app.logger.warning(f"Attendance lookup rejected by upstream: {e}")
        return jsonify({"error": str(e)}), 502

    report = build_attendance_report(data, language, current_app.translation_resolver)

    save_mobile(lookup.mobile)
    save_language(language.value)

    return jsonify(report.model_dump(by_alias=True, mode="json"))


@bp.get("/months")
def months():
    try:
        language = Language(request.args.get("lang", Language.ENGLISH.value))
    except ValueError:
        return jsonify({"error": "Unsupported language"}), 400

    return jsonify({"months": [option.model_dump() for option in get_month_options(language)]})
