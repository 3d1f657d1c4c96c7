import pytest

from attendance_lookup.exceptions import TranslationUnavailableException
from attendance_lookup.translation.fallback import FALLBACK_TRANSLATIONS
from attendance_lookup.translation.resolver import TranslationResolver
from attendance_lookup.translation.service import TranslationResult, TranslationService


@pytest.fixture
def service(mocker):
    service = mocker.Mock(spec=TranslationService)
    service.translate.return_value = TranslationResult("ছুটি নেওয়া হয়েছে", "en")
    return service


@pytest.mark.parametrize("text", ["Absent", "", "  ", "anything at all"])
def test_english_target_returns_text_unchanged(app, service, text):
    resolver = TranslationResolver(service)

    assert resolver.resolve(text, "en") == text
    service.translate.assert_not_called()


def test_blank_text_is_returned_immediately(app, service):
    resolver = TranslationResolver(service)

    assert resolver.resolve("   ", "bn") == "   "
    service.translate.assert_not_called()


def test_successful_translation_is_cached(app, service):
    resolver = TranslationResolver(service)

    first = resolver.resolve("Leave taken", "bn")
    second = resolver.resolve("Leave taken", "bn")

    assert first == second == "ছুটি নেওয়া হয়েছে"
    service.translate.assert_called_once_with("Leave taken", "bn", "auto")
    assert resolver.cache_size == 1


def test_cache_key_includes_language(app, service):
    resolver = TranslationResolver(service)

    resolver.resolve("Leave taken", "bn")
    resolver.resolve("Leave taken", "hi")
    resolver.resolve("Leave taken", "hi", "en")

    assert service.translate.call_count == 3


def test_fallback_dictionary_when_providers_fail(app, service):
    service.translate.side_effect = TranslationUnavailableException("offline")
    resolver = TranslationResolver(service)

    result = resolver.resolve_detailed("Absent", "bn")

    assert result.translated_text == FALLBACK_TRANSLATIONS["absent"]["bn"]
    assert result.detected_language == "en"
    # Fallback answers are cached as well
    resolver.resolve("Absent", "bn")
    service.translate.assert_called_once()


def test_original_text_when_nothing_matches(app, service):
    service.translate.side_effect = TranslationUnavailableException("offline")
    resolver = TranslationResolver(service)

    result = resolver.resolve_detailed("Site visit", "bn")

    assert result == TranslationResult("Site visit", "unknown")
    assert resolver.cache_size == 0


def test_offline_app_resolver_uses_dictionary(app):
    # requests is patched to raise ConnectionError for every test
    assert app.translation_resolver.resolve("Absent", "bn") == FALLBACK_TRANSLATIONS["absent"]["bn"]


def test_cache_is_bounded(app, service):
    resolver = TranslationResolver(service, cache_size=2)

    for text in ["one", "two", "three"]:
        resolver.resolve(text, "bn")
    resolver.resolve("one", "bn")

    assert resolver.cache_size == 2
    assert service.translate.call_count == 4


def test_clear_cache(app, service):
    resolver = TranslationResolver(service)
    resolver.resolve("Leave taken", "bn")

    resolver.clear_cache()
    resolver.resolve("Leave taken", "bn")

    assert service.translate.call_count == 2


def test_failed_providers_are_not_retried_for_every_remark(app, service):
    service.translate.side_effect = TranslationUnavailableException("offline")
    resolver = TranslationResolver(service, retry_after=300)

    assert resolver.resolve("Site visit", "bn") == "Site visit"
    assert resolver.resolve("Site visit", "bn") == "Site visit"
    assert resolver.resolve("Absent", "bn") == FALLBACK_TRANSLATIONS["absent"]["bn"]

    service.translate.assert_called_once()
    assert not resolver.remote_available


def test_providers_are_retried_after_the_wait(app, service):
    service.translate.side_effect = [
        TranslationUnavailableException("offline"),
        TranslationResult("সাইট পরিদর্শন", "en"),
    ]
    resolver = TranslationResolver(service, retry_after=0)

    assert resolver.resolve("Site visit", "bn") == "Site visit"
    assert resolver.resolve("Site visit", "bn") == "সাইট পরিদর্শন"
    assert service.translate.call_count == 2
    assert resolver.remote_available


def test_clear_cache_resets_the_wait(app, service):
    service.translate.side_effect = [
        TranslationUnavailableException("offline"),
        TranslationResult("সাইট পরিদর্শন", "en"),
    ]
    resolver = TranslationResolver(service, retry_after=300)
    resolver.resolve("Site visit", "bn")

    resolver.clear_cache()

    assert resolver.resolve("Site visit", "bn") == "সাইট পরিদর্শন"
