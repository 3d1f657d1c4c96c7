from attendance_lookup.exceptions import UpstreamUnavailableException
from attendance_lookup.translation.fallback import FALLBACK_TRANSLATIONS

WINDOWS_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"


def test_attendance_report(client, mock_get_attendance):
    response = client.get(
        "/api/attendance?mobile=0501234567&month=2026-10",
        headers={"User-Agent": WINDOWS_UA, "X-Forwarded-For": "203.0.113.7"},
    )

    assert response.status_code == 200
    mock_get_attendance.assert_called_once_with(
        mobile="0501234567",
        start_iso="2026-10-01",
        end_iso="2026-10-31",
        ip_address="203.0.113.7",
        device_details="Windows Desktop",
    )

    report = response.json
    assert report["workerId"] == "W-1042"
    assert report["language"] == "en"
    assert report["direction"] == "ltr"
    assert report["metrics"] == {
        "workingDays": 2,
        "totalDays": 5,
        "workingDaysPercentage": 40,
        "finalHours": "178.50",
    }
    assert report["summaryItems"][2] == {"key": "summary-working-days", "value": "2/5 (40%)", "tone": "green"}

    first, second, absent, sunday, warning = report["rows"]
    assert first["totalHours"] == "9 hr"
    assert first["totalBreak"] == "2 hr"
    assert first["lessBasic"] == "—"
    assert first["remarks"] == "—"
    assert first["locationPreview"] == "Dubai Marina To…"
    assert second["totalHours"] == "8 hr 30 min"
    assert second["totalBreak"] == "45 min"
    assert second["remarks"] == "Late"
    assert absent["rowClass"] == "absent"
    assert absent["dutyIn"] == "—"
    assert sunday["rowClass"] == "sunday"
    assert warning["rowClass"] == "warning"
    assert warning["totalHours"] == "8 hr 15 min"
    assert warning["lessBasic"] == "15 min"


def test_attendance_report_translates_remarks(client, mock_get_attendance):
    # Providers are unreachable in tests, so the dictionary answers
    response = client.get("/api/attendance?mobile=0501234567&month=2026-10&lang=ar")

    report = response.json
    assert report["direction"] == "rtl"
    assert report["rows"][2]["remarks"] == FALLBACK_TRANSLATIONS["absent"]["ar"]
    assert report["rows"][2]["rowClass"] == "absent"


def test_attendance_report_uses_saved_language(client, mock_get_attendance):
    client.put("/api/preferences", json={"language": "hi"})

    response = client.get("/api/attendance?mobile=0501234567&month=2026-10")

    assert response.json["language"] == "hi"


def test_attendance_saves_preferences(client, mock_get_attendance):
    client.get("/api/attendance?mobile=0501234567&month=2026-10&lang=bn")

    response = client.get("/api/preferences")

    assert response.json == {"language": "bn", "mobile": "0501234567"}


def test_attendance_invalid_mobile(client, mock_get_attendance):
    response = client.get("/api/attendance?mobile=501234567&month=2026-10")

    assert response.status_code == 400
    assert response.json["error"][0]["loc"] == ["mobile"]
    mock_get_attendance.assert_not_called()


def test_attendance_invalid_month(client, mock_get_attendance):
    response = client.get("/api/attendance?mobile=0501234567&month=2026-13")

    assert response.status_code == 400
    assert response.json["error"][0]["loc"] == ["month"]


def test_attendance_upstream_unavailable(client, mock_get_attendance):
    mock_get_attendance.side_effect = UpstreamUnavailableException("timeout")

    response = client.get("/api/attendance?mobile=0501234567&month=2026-10")

    assert response.status_code == 502
    assert response.json == {"error": "Failed to fetch data from external service"}


def test_attendance_upstream_error_message(client, mock_get_attendance):
    mock_get_attendance.return_value = {"error": "Mobile number not registered"}

    response = client.get("/api/attendance?mobile=0501234567&month=2026-10")

    assert response.status_code == 502
    assert response.json == {"error": "Mobile number not registered"}


def test_attendance_unusable_payload(client, mock_get_attendance):
    mock_get_attendance.return_value = {"rows": "garbage"}

    response = client.get("/api/attendance?mobile=0501234567&month=2026-10")

    assert response.status_code == 502


def test_attendance_non_object_payload(client, mock_get_attendance):
    mock_get_attendance.return_value = [1, 2]

    response = client.get("/api/attendance?mobile=0501234567&month=2026-10")

    assert response.status_code == 502
    assert response.json == {"error": "Unexpected attendance data from external service"}


def test_months(client):
    response = client.get("/api/months?lang=ar")

    assert response.status_code == 200
    assert len(response.json["months"]) == 3


def test_months_unsupported_language(client):
    response = client.get("/api/months?lang=fr")

    assert response.status_code == 400
