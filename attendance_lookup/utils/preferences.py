"""
Best-effort storage of the user's language and mobile number.

Values live in the signed session cookie. Storage may be unavailable
(no request context, no secret key); reads then return None and writes
return False instead of raising.
"""

from typing import Optional

from flask import current_app, session

STORAGE_KEYS = {
    "language": "attendance-language",
    "mobile": "attendance-mobile",
}


def get_from_storage(key: str) -> Optional[str]:
    try:
        return session.get(key)
    except RuntimeError as e:
        current_app.logger.warning(f"Failed to get {key} from storage: {e}")
        return None


def set_to_storage(key: str, value: str) -> bool:
    try:
        session[key] = value
        return True
    except RuntimeError as e:
        current_app.logger.warning(f"Failed to set {key} in storage: {e}")
        return False


def remove_from_storage(key: str) -> bool:
    try:
        session.pop(key, None)
        return True
    except RuntimeError as e:
        current_app.logger.warning(f"Failed to remove {key} from storage: {e}")
        return False


def get_saved_language() -> Optional[str]:
    return get_from_storage(STORAGE_KEYS["language"])


def save_language(language: str) -> bool:
    return set_to_storage(STORAGE_KEYS["language"], language)


def get_saved_mobile() -> Optional[str]:
    return get_from_storage(STORAGE_KEYS["mobile"])


def save_mobile(mobile: str) -> bool:
    return set_to_storage(STORAGE_KEYS["mobile"], mobile)


def clear_all_saved_data():
    for key in STORAGE_KEYS.values():
        remove_from_storage(key)
