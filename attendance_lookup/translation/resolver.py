from datetime import datetime, timedelta

from flask import current_app

from attendance_lookup.constants import AUTO_DETECT, SOURCE_LANGUAGE, UNKNOWN_LANGUAGE
from attendance_lookup.exceptions import TranslationUnavailableException
from attendance_lookup.translation.fallback import get_fallback_translation
from attendance_lookup.translation.service import TranslationResult, TranslationService
from attendance_lookup.utils.cache import LRUCache


class TranslationResolver:
    """
    Best-effort translation of free text such as attendance remarks.

    Provider answers and dictionary fallbacks are cached per
    (text, target, source). When neither produces anything the original
    text comes back with an "unknown" detected language. Never raises.

    When every provider fails, remote lookups are skipped for
    ``retry_after`` seconds and only the dictionary is consulted.
    """

    def __init__(self, service: TranslationService, cache_size=1024, retry_after=60):
        self._service = service
        self._cache = LRUCache(cache_size)
        self.retry_after = retry_after
        self._remote_retry_at = None

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self):
        self._cache.clear()
        self._remote_retry_at = None

    @property
    def remote_available(self) -> bool:
        return self._remote_retry_at is None or datetime.now() >= self._remote_retry_at

    def _translate_remotely(self, text, target_language, source_language):
        if not self.remote_available:
            return None

        try:
            result = self._service.translate(text, target_language, source_language)
        except TranslationUnavailableException as e:
            self._remote_retry_at = datetime.now() + timedelta(seconds=self.retry_after)
            current_app.logger.warning(f"Falling back to dictionary translation for {self.retry_after}s: {e}")
            return None

        self._remote_retry_at = None
        return result

    def resolve(self, text: str, target_language: str, source_language: str = AUTO_DETECT) -> str:
        return self.resolve_detailed(text, target_language, source_language).translated_text

    def resolve_detailed(
        self, text: str, target_language: str, source_language: str = AUTO_DETECT
    ) -> TranslationResult:
        if not text or not text.strip():
            return TranslationResult(text, source_language)

        if target_language == SOURCE_LANGUAGE:
            return TranslationResult(text, SOURCE_LANGUAGE)

        cache_key = (text, target_language, source_language)
        try:
            return self._cache.get(cache_key)
        except LRUCache.NotFound:
            pass

        result = self._translate_remotely(text, target_language, source_language)
        if result is not None:
            self._cache.set(cache_key, result)
            return result

        fallback = get_fallback_translation(text, target_language)
        if fallback:
            result = TranslationResult(fallback, SOURCE_LANGUAGE)
            self._cache.set(cache_key, result)
            return result

        return TranslationResult(text, UNKNOWN_LANGUAGE)
