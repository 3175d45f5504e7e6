import requests

from rieno.errors import (
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    ConflictError,
    NotFoundError,
    RemoteServiceError,
)
from rieno.utils.logging_utils import get_logger, log_supabase_call

TIMEOUT = 10

logger = get_logger("supabase")


def _error_message(response):
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP error! status: {response.status_code}"
    if isinstance(body, dict):
        for key in ("error_description", "msg", "message", "error"):
            if body.get(key):
                return str(body[key])
    return f"HTTP error! status: {response.status_code}"


class SupabaseStore:
    """Auth and row access against a Supabase project (GoTrue + PostgREST).

    Every operation is a single HTTP call. Rows are always filtered by
    ``user_id`` because the service role key bypasses row level security.
    """

    demo = False

    def __init__(self, settings, session=None):
        self.settings = settings
        self.session = session or requests.Session()

    @property
    def base_url(self):
        if not self.settings.supabase_configured:
            raise ConfigurationError()
        return self.settings.supabase_url.rstrip("/")

    def _headers(self, service=True, extra=None):
        key = self.settings.supabase_service_role_key
        if not service and self.settings.supabase_anon_key:
            key = self.settings.supabase_anon_key
        headers = {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Content-Type": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers

    def _request(self, method, path, endpoint_name, service=True, headers=None, **kwargs):
        url = f"{self.base_url}{path}"
        log_supabase_call(endpoint_name, kwargs.get("params") or "")
        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(service=service, extra=headers),
                timeout=TIMEOUT,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.error(f"Supabase request failed: {endpoint_name}: {e}")
            raise RemoteServiceError("Network error. Please check your connection and try again")
        return response

    # Auth
    def sign_in(self, email, password):
        response = self._request(
            "POST", "/auth/v1/token", "auth.token",
            service=False,
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        if response.status_code in (400, 401, 422):
            raise AuthenticationError(_error_message(response))
        if not response.ok:
            raise RemoteServiceError(_error_message(response), response.status_code)
        return _user_fields(response.json()["user"])

    def sign_up(self, email, password, first_name=None, last_name=None):
        payload = {"email": email, "password": password}
        metadata = {k: v for k, v in (("first_name", first_name), ("last_name", last_name)) if v}
        if metadata:
            payload["data"] = metadata
        response = self._request("POST", "/auth/v1/signup", "auth.signup", service=False, json=payload)
        if not response.ok:
            message = _error_message(response)
            if "already registered" in message.lower():
                raise ConflictError("User already registered")
            if response.status_code in (400, 422):
                raise BadRequestError(message)
            raise RemoteServiceError(message, response.status_code)
        body = response.json()
        # with email confirmation on, the user comes back without a session
        return _user_fields(body.get("user") or body)

    def get_user(self, user_id):
        response = self._request("GET", f"/auth/v1/admin/users/{user_id}", "auth.admin.get_user")
        if response.status_code == 404:
            raise NotFoundError("User not found")
        if not response.ok:
            raise RemoteServiceError(_error_message(response), response.status_code)
        return _user_fields(response.json())

    def sign_out(self, user_id):
        # sessions are relay cookies; nothing to revoke remotely
        log_supabase_call("auth.sign_out", f"user_id={user_id} (local only)")

    # Rows
    def list_rows(self, table, user_id, order=None, descending=False):
        params = {"select": "*", "user_id": f"eq.{user_id}"}
        if order:
            params["order"] = f"{order}.{'desc' if descending else 'asc'}"
        response = self._request("GET", f"/rest/v1/{table}", f"{table}.select", params=params)
        _raise_for_rows(response)
        return response.json()

    def insert_row(self, table, user_id, values):
        row = dict(values, user_id=user_id)
        response = self._request(
            "POST", f"/rest/v1/{table}", f"{table}.insert",
            headers={"Prefer": "return=representation"},
            json=[row],
        )
        _raise_for_rows(response)
        return response.json()[0]

    def update_row(self, table, user_id, row_id, values):
        params = {"id": f"eq.{row_id}", "user_id": f"eq.{user_id}"}
        response = self._request(
            "PATCH", f"/rest/v1/{table}", f"{table}.update",
            headers={"Prefer": "return=representation"},
            params=params,
            json=values,
        )
        _raise_for_rows(response)
        rows = response.json()
        if not rows:
            raise NotFoundError(f"{_label(table)} not found")
        return rows[0]

    def delete_row(self, table, user_id, row_id):
        params = {"id": f"eq.{row_id}", "user_id": f"eq.{user_id}"}
        response = self._request(
            "DELETE", f"/rest/v1/{table}", f"{table}.delete",
            headers={"Prefer": "return=representation"},
            params=params,
        )
        _raise_for_rows(response)
        if not response.json():
            raise NotFoundError(f"{_label(table)} not found")


def _user_fields(user):
    return {
        "id": user["id"],
        "email": user.get("email"),
        "created_at": user.get("created_at"),
    }


def _raise_for_rows(response):
    if not response.ok:
        raise RemoteServiceError(_error_message(response), response.status_code)


def _label(table):
    return {
        "entries": "Entry",
        "categories": "Category",
        "debts_credits": "Debt or credit",
    }.get(table, "Row")
