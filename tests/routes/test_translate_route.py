import pytest

from attendance_lookup.exceptions import TranslationUnavailableException
from attendance_lookup.translation.service import TranslationResult


@pytest.fixture
def mock_translate(mocker, app):
    return mocker.patch.object(
        app.translation_service, "translate", return_value=TranslationResult("অনুপস্থিত", "en")
    )


def test_translate(client, mock_translate):
    response = client.post("/api/translate", json={"text": "Absent", "targetLanguage": "bn"})

    assert response.status_code == 200
    assert response.json == {"translatedText": "অনুপস্থিত", "detectedLanguage": "en"}
    mock_translate.assert_called_once_with("Absent", "bn", "auto")


def test_translate_to_english_is_a_no_op(client, mock_translate):
    response = client.post("/api/translate", json={"text": "Absent", "targetLanguage": "en"})

    assert response.json == {"translatedText": "Absent", "detectedLanguage": "en"}
    mock_translate.assert_not_called()


def test_translate_all_providers_failed(client, mock_translate):
    mock_translate.side_effect = TranslationUnavailableException("offline")

    response = client.post(
        "/api/translate", json={"text": "Absent", "targetLanguage": "bn", "sourceLanguage": "en"}
    )

    assert response.status_code == 200
    assert response.json == {"translatedText": "Absent", "detectedLanguage": "unknown"}


@pytest.mark.parametrize(
    "body",
    [
        {"targetLanguage": "bn"},
        {"text": "Absent"},
        {"text": "", "targetLanguage": "bn"},
    ],
)
def test_translate_missing_parameters(client, mock_translate, body):
    response = client.post("/api/translate", json=body)

    assert response.status_code == 400
    assert response.json == {"error": "Missing required parameters: text and targetLanguage"}


def test_translate_invalid_body(client):
    response = client.post("/api/translate", data="not json", content_type="application/json")

    assert response.status_code == 400
