from flask import Blueprint, current_app, jsonify

bp = Blueprint("main", __name__)


# Health check endpoint
@bp.route("/health")
def health():
    upstream_status = "not configured"
    if getattr(current_app, "attendance_client", None) is not None and current_app.attendance_client.is_configured:
        upstream_status = "configured"

    return (
        jsonify(
            {
                "status": "healthy",
                "message": "Attendance lookup backend is running",
                "attendance_script": upstream_status,
                "translation_endpoints": len(current_app.translation_service.endpoints),
                "version": current_app.config.get("APP_VERSION", "unknown"),
                "environment": current_app.config.get("FLASK_ENV", "unknown"),
            }
        ),
        200,
    )


# Basic route
@bp.route("/")
def index():
    return jsonify(
        {
            "message": "Attendance lookup API",
            "version": current_app.config.get("APP_VERSION", "unknown"),
        }
    )
