from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from attendance_lookup.schemas.lookup import PreferencesUpdate
from attendance_lookup.utils.preferences import (
    clear_all_saved_data,
    get_saved_language,
    get_saved_mobile,
    save_language,
    save_mobile,
)

bp = Blueprint("preferences", __name__, url_prefix="/api/preferences")


@bp.get("")
def get_preferences():
    return jsonify({"language": get_saved_language(), "mobile": get_saved_mobile()})


@bp.put("")
def update_preferences():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({"error": "Missing or invalid JSON body"}), 400

    try:
        data = PreferencesUpdate(**body)
    except ValidationError as e:
        return jsonify({"error": e.errors(include_url=False, include_context=False)}), 400

    saved = {}
    if data.language is not None:
        saved["language"] = save_language(data.language.value)
    if data.mobile is not None:
        saved["mobile"] = save_mobile(data.mobile)

    return jsonify({"saved": saved})


@bp.delete("")
def clear_preferences():
    clear_all_saved_data()
    return jsonify({"message": "Preferences cleared"})
