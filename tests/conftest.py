import pytest
import requests
from pytest_mock import MockerFixture

from attendance_lookup import create_app
from attendance_lookup.config import TestingConfig


@pytest.fixture(autouse=True)
def block_outbound_http(mocker: MockerFixture):
    # Every test runs offline unless it patches requests itself
    offline = requests.exceptions.ConnectionError("network disabled in tests")
    return {
        "get": mocker.patch("requests.get", side_effect=offline),
        "post": mocker.patch("requests.post", side_effect=offline),
    }


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    app.config.update(
        {
            "TESTING": True,
        }
    )

    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def attendance_payload():
    return {
        "workerId": "W-1042",
        "workerName": "Rahim Uddin",
        "summary": {
            "totalHours": "180.50",
            "totalOvertime": "12.5",
            "absent": 1,
            "sunday": 4,
            "warning": 2,
        },
        "rows": [
            ["01-Oct-2026", "Dubai Marina Tower B", "7:00 AM", "11:00 AM", "1:00 PM", "6:00 PM", "9", "8", "1", None, None],
            ["02-Oct-2026", "Site A", "7:05 AM", "12:00 PM", "12:45 PM", "5:00 PM", "8.5", "8", "0.5", "", "Late"],
            ["03-Oct-2026", None, None, None, None, None, None, None, None, None, "Absent"],
            ["04-Oct-2026", None, None, None, None, None, None, None, None, None, "Sunday"],
            ["05-Oct-2026", "Site A", "7:00 AM", None, None, "", "8:15", "8:00", None, "0.25", "Warning - no helmet"],
        ],
    }


@pytest.fixture
def mock_get_attendance(mocker: MockerFixture, app, attendance_payload):
    return mocker.patch.object(app.attendance_client, "get_attendance_by_mobile", return_value=attendance_payload)
