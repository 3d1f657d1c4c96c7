from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from attendance_lookup.constants import SOURCE_LANGUAGE, UNKNOWN_LANGUAGE
from attendance_lookup.exceptions import TranslationUnavailableException
from attendance_lookup.schemas.lookup import TranslateRequest

bp = Blueprint("translate", __name__, url_prefix="/api")

MISSING_PARAMETERS = "Missing required parameters: text and targetLanguage"


@bp.post("/translate")
def translate():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({"error": "Missing or invalid JSON body"}), 400

    try:
        data = TranslateRequest(**body)
    except ValidationError:
        return jsonify({"error": MISSING_PARAMETERS}), 400

    if not data.text or not data.target_language:
        return jsonify({"error": MISSING_PARAMETERS}), 400

    if data.target_language == SOURCE_LANGUAGE:
        return jsonify({"translatedText": data.text, "detectedLanguage": SOURCE_LANGUAGE})

    try:
        result = current_app.translation_service.translate(data.text, data.target_language, data.source_language)
    except TranslationUnavailableException:
        current_app.logger.warning("All translation endpoints failed, returning original text")
        return jsonify({"translatedText": data.text, "detectedLanguage": UNKNOWN_LANGUAGE})

    return jsonify({"translatedText": result.translated_text, "detectedLanguage": result.detected_language})
