"""HTTP client for the Rieno API.

Mirrors what the web frontend does: cookie-based session, every call
returns an ``ApiResponse`` instead of raising.
"""
from dataclasses import dataclass
from typing import Any, Optional

import requests

from rieno.utils.logging_utils import get_logger

logger = get_logger("client")


@dataclass
class ApiResponse:
    success: bool
    data: Any = None
    message: Optional[str] = None
    error: Optional[str] = None


class RienoClient:
    def __init__(self, base_url="http://localhost:5000", session=None, timeout=10):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.user = None

    def _request(self, method, endpoint, **kwargs):
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"API request failed: {method} {endpoint}: {e}")
            return ApiResponse(success=False, error="Network error occurred")

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            error = body.get("error") or body.get("message") or f"HTTP error! status: {response.status_code}"
            logger.error(f"API request failed: {method} {endpoint}: {error}")
            return ApiResponse(success=False, error=error)

        if "application/json" not in response.headers.get("content-type", ""):
            return ApiResponse(success=True, data=response.text)
        try:
            body = response.json()
        except ValueError:
            return ApiResponse(success=True, data=response.text)
        if not isinstance(body, dict):
            return ApiResponse(success=True, data=body)
        return ApiResponse(success=True, data=body.get("data"), message=body.get("message"))

    # Authentication endpoints
    def login(self, email, password):
        result = self._request("POST", "/auth/login", json={"email": email, "password": password})
        if result.success:
            self.user = result.data["user"]
        return result

    def signup(self, email, password, first_name=None, last_name=None):
        payload = {"email": email, "password": password}
        if first_name:
            payload["firstName"] = first_name
        if last_name:
            payload["lastName"] = last_name
        result = self._request("POST", "/auth/signup", json=payload)
        if result.success:
            self.user = result.data["user"]
        return result

    def logout(self):
        result = self._request("POST", "/auth/logout")
        # local state goes even when the server could not be reached
        self.session.cookies.clear()
        self.user = None
        return result

    def get_current_user(self):
        result = self._request("GET", "/auth/me")
        if result.success:
            self.user = result.data
        return result

    # Profile endpoints
    def get_profile(self):
        return self._request("GET", "/api/profile")

    # Debts and credits
    def get_transactions(self, type=None, status="all", search=""):
        params = {"status": status}
        if type:
            params["type"] = type
        if search:
            params["search"] = search
        return self._request("GET", "/api/transactions", params=params)

    def get_entries(self):
        return self._request("GET", "/api/entries")

    def add_entry(self, entry):
        return self._request("POST", "/api/entries", json=entry)

    def get_categories(self):
        return self._request("GET", "/api/categories")

    def get_reports(self, period="6months"):
        return self._request("GET", "/api/reports", params={"period": period})

    def export_report(self, period="6months"):
        return self._request("GET", "/api/reports/export", params={"period": period})

    def get_dashboard(self):
        return self._request("GET", "/api/dashboard")
