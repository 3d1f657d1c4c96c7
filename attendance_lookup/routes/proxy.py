from flask import Blueprint, current_app, jsonify, request

from attendance_lookup.constants import UPSTREAM_ERROR_MESSAGE
from attendance_lookup.exceptions import UpstreamUnavailableException

bp = Blueprint("proxy", __name__, url_prefix="/api")


@bp.get("/proxy")
def proxy():
    """Forward an attendance lookup to the spreadsheet script and return its answer unchanged."""
    mobile = request.args.get("mobile")
    start_iso = request.args.get("startISO")
    end_iso = request.args.get("endISO")

    if not mobile or not start_iso or not end_iso:
        return jsonify({"error": "Missing required parameters"}), 400

    try:
        data = current_app.attendance_client.get_attendance_by_mobile(
            mobile=mobile,
            start_iso=start_iso,
            end_iso=end_iso,
            ip_address=request.args.get("ipAddress"),
            device_details=request.args.get("deviceDetails"),
        )
    except UpstreamUnavailableException as e:
        current_app.logger.error(f"Proxy error: {e}")
        return jsonify({"error": UPSTREAM_ERROR_MESSAGE}), 500

    return jsonify(data)
