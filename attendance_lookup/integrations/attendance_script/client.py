from typing import Optional

import requests
import sentry_sdk
from flask import current_app

from attendance_lookup.exceptions import UpstreamUnavailableException


class AttendanceScriptClient:
    """A client for the spreadsheet-backed attendance script."""

    def __init__(self, config):
        self.base_url = config["ATTENDANCE_SCRIPT_BASE_URL"]
        self.script_id = config["ATTENDANCE_SCRIPT_ID"]
        self.action = config["ATTENDANCE_SCRIPT_ACTION"]
        self.timeout = config.get("UPSTREAM_TIMEOUT_SECONDS")

    @property
    def is_configured(self) -> bool:
        return bool(self.script_id)

    def _mask_mobile(self, params):
        """Returns a copy of the query params with the mobile number masked for logging."""
        masked = dict(params)
        mobile = masked.get("mobile")
        if isinstance(mobile, str) and len(mobile) > 4:
            masked["mobile"] = f"{mobile[:2]}***{mobile[-2:]}"
        return masked

    def _report_error(self, e, error_context):
        with sentry_sdk.push_scope() as scope:
            scope.set_context("attendance_script_error", error_context)
            scope.set_tag("attendance_script_action", self.action)
            if "status_code" in error_context:
                scope.set_tag("attendance_script_status", error_context["status_code"])
            sentry_sdk.capture_exception(e)

    def _request(self, params):
        """
        Calls the script's exec endpoint and returns the decoded JSON body.

        Args:
            params (dict): Query parameters; entries whose value is None are dropped.

        Returns:
            The decoded JSON response from the script, whatever its shape.

        Raises:
            UpstreamUnavailableException: If the script is not configured, unreachable,
                answers with a non-2xx status or with a body that is not JSON.
        """
        if not self.is_configured:
            current_app.logger.error("ATTENDANCE_SCRIPT_ID is not configured.")
            raise UpstreamUnavailableException("Attendance script is not configured.")

        url = f"{self.base_url}/{self.script_id}/exec"
        params = {key: value for key, value in params.items() if value is not None}
        logger = current_app.logger

        try:
            logger.info(f"Attendance script request: GET {url} params={self._mask_mobile(params)}")

            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.HTTPError as e:
            error_context = {
                "url": url,
                "status_code": e.response.status_code,
                "response_body": e.response.text,
                "params": self._mask_mobile(params),
            }
            logger.error(
                f"Attendance script HTTP Error: {e.response.status_code}\n" f"Request Context: {error_context}"
            )
            self._report_error(e, error_context)
            raise UpstreamUnavailableException(f"HTTP error! Status: {e.response.status_code}") from e
        except requests.exceptions.RequestException as e:
            error_context = {
                "url": url,
                "error_type": type(e).__name__,
                "params": self._mask_mobile(params),
            }
            logger.error(f"Attendance script request failed: {e}\n" f"Request Context: {error_context}")
            self._report_error(e, error_context)
            raise UpstreamUnavailableException(str(e)) from e
        except ValueError as e:
            logger.error(f"Attendance script returned invalid JSON: {e}")
            self._report_error(e, {"url": url, "error_type": "invalid_json"})
            raise UpstreamUnavailableException("Invalid JSON from attendance script") from e

        return data

    def get_attendance_by_mobile(
        self,
        mobile: str,
        start_iso: str,
        end_iso: str,
        ip_address: Optional[str] = None,
        device_details: Optional[str] = None,
    ):
        """
        Fetches attendance for a worker between two ISO dates (inclusive).

        The response is either the attendance payload or ``{"error": ...}``.
        """
        return self._request(
            {
                "action": self.action,
                "mobile": mobile,
                "startISO": start_iso,
                "endISO": end_iso,
                "deviceDetails": device_details,
                "ipAddress": ip_address,
            }
        )
