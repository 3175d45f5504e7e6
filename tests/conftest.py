import pytest
from fastapi.testclient import TestClient

from rieno.config import Settings
from rieno.main import create_app
from rieno.services.demo_store import DemoStore


class FakeResponse:
    def __init__(self, status_code=200, body=None, headers=None, text=""):
        self.status_code = status_code
        self._body = body
        self.headers = headers or {"content-type": "application/json"}
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("no json body")
        return self._body


class FakeCookies(dict):
    pass


class FakeSession:
    """Stands in for requests.Session: records calls, replays queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.cookies = FakeCookies()

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def demo_settings():
    return Settings(demo_mode=True, jwt_secret="test-secret")


@pytest.fixture
def live_settings():
    return Settings(
        supabase_url="https://project.supabase.co/",
        supabase_anon_key="anon-key",
        supabase_service_role_key="service-key",
        jwt_secret="test-secret",
    )


@pytest.fixture
def demo_store(demo_settings):
    return DemoStore(demo_settings)


@pytest.fixture
def client(demo_settings, demo_store):
    app = create_app(settings=demo_settings, store=demo_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def logged_in(client):
    response = client.post("/auth/login", json={"email": "demo@rieno.app", "password": "secret"})
    assert response.status_code == 200
    return client
