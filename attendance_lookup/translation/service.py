from dataclasses import dataclass
from typing import Optional

import requests
from flask import current_app

from attendance_lookup.constants import AUTO_DETECT
from attendance_lookup.exceptions import TranslationUnavailableException


@dataclass(frozen=True)
class TranslationResult:
    translated_text: str
    detected_language: str


class TranslationService:
    """
    Translates text through a fixed list of LibreTranslate-compatible providers.

    Each call tries every provider at most once, starting with the one that
    answered last. A failing provider moves the cursor on to the next one.
    """

    def __init__(self, endpoints: list[str], timeout: Optional[float] = None):
        self.endpoints = list(endpoints)
        self.timeout = timeout
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def _advance(self):
        self._cursor = (self._cursor + 1) % len(self.endpoints)

    def _post(self, url: str, text: str, target_language: str, source_language: str) -> dict:
        payload = {
            "q": text,
            "source": source_language,
            "target": target_language,
            "format": "text",
        }
        response = requests.post(url, json=payload, timeout=self.timeout)
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected response body from {url}")
        return data

    def translate(self, text: str, target_language: str, source_language: str = AUTO_DETECT) -> TranslationResult:
        """
        Raises:
            TranslationUnavailableException: If no provider returned a usable answer.
        """
        logger = current_app.logger

        for attempt in range(len(self.endpoints)):
            url = self.endpoints[self._cursor]
            try:
                data = self._post(url, text, target_language, source_language)
            except (requests.exceptions.RequestException, ValueError) as e:
                logger.warning(f"Translation attempt {attempt + 1} ({url}) failed: {e}")
                self._advance()
                continue

            detected = data.get("detectedLanguage") or {}
            if isinstance(detected, dict) and detected.get("confidence"):
                detected_language = detected.get("language") or source_language
            else:
                detected_language = source_language

            return TranslationResult(
                translated_text=data.get("translatedText") or text,
                detected_language=detected_language,
            )

        logger.warning("All translation endpoints failed")
        raise TranslationUnavailableException(f"No translation provider could translate to '{target_language}'")
