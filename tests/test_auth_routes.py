from fastapi.testclient import TestClient

from rieno.errors import RemoteServiceError
from rieno.main import create_app
from rieno.utils.tokens import create_session_token, decode_session_token


class SpyStore:
    demo = False

    def __init__(self, fail_sign_out=False):
        self.calls = []
        self.fail_sign_out = fail_sign_out

    def sign_in(self, email, password):
        self.calls.append(("sign_in", email))
        return {"id": "u-1", "email": email, "created_at": "2024-05-01T10:00:00Z"}

    def sign_up(self, email, password, first_name=None, last_name=None):
        self.calls.append(("sign_up", email, first_name))
        return {"id": "u-2", "email": email, "created_at": "2024-05-02T10:00:00Z"}

    def sign_out(self, user_id):
        self.calls.append(("sign_out", user_id))
        if self.fail_sign_out:
            raise RemoteServiceError("boom")


def spy_client(settings, store):
    return TestClient(create_app(settings=settings, store=store))


def test_login_sets_http_only_strict_cookie(client, demo_settings):
    response = client.post("/auth/login", json={"email": " demo@rieno.app ", "password": "whatever"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["user"]["id"] == "demo_user_id"
    assert body["data"]["user"]["email"] == "demo@rieno.app"

    name_value, *attributes = [part.strip().lower() for part in response.headers["set-cookie"].split(";")]
    assert name_value.startswith("auth_token=")
    assert "httponly" in attributes
    assert "samesite=strict" in attributes
    assert "max-age=604800" in attributes
    assert "path=/" in attributes
    assert "secure" not in attributes

    session = decode_session_token(response.cookies["auth_token"], demo_settings)
    assert session.user_id == "demo_user_id"
    assert session.email == "demo@rieno.app"


def test_cookie_is_secure_in_production(demo_settings, demo_store):
    settings = demo_settings.model_copy(update={"environment": "production"})
    client = TestClient(create_app(settings=settings, store=demo_store))

    response = client.post("/auth/login", json={"email": "demo@rieno.app", "password": "x"})

    attributes = [part.strip().lower() for part in response.headers["set-cookie"].split(";")]
    assert "secure" in attributes


def test_login_missing_password_is_rejected_before_store_call(demo_settings):
    store = SpyStore()
    client = spy_client(demo_settings, store)

    response = client.post("/auth/login", json={"email": "someone@example.com"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "password is required"}
    assert store.calls == []


def test_login_malformed_email_is_rejected(demo_settings):
    store = SpyStore()
    client = spy_client(demo_settings, store)

    response = client.post("/auth/login", json={"email": "not-an-email", "password": "pw"})

    assert response.status_code == 400
    assert response.json()["error"] == "Please enter a valid email address"
    assert store.calls == []


def test_login_without_body_is_a_validation_error(demo_settings):
    store = SpyStore()
    response = spy_client(demo_settings, store).post("/auth/login")
    assert response.status_code == 400
    assert store.calls == []


def test_demo_login_rejects_other_emails(client):
    response = client.post("/auth/login", json={"email": "someone@example.com", "password": "pw"})

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Invalid demo credentials"}
    assert "set-cookie" not in response.headers


def test_signup_requires_six_character_password(demo_settings):
    store = SpyStore()
    response = spy_client(demo_settings, store).post("/auth/signup", json={"email": "a@b.co", "password": "123"})

    assert response.status_code == 400
    assert response.json()["error"] == "Password must be at least 6 characters long"
    assert store.calls == []


def test_signup_passes_names_and_starts_session(demo_settings):
    store = SpyStore()
    client = spy_client(demo_settings, store)

    response = client.post("/auth/signup", json={"email": "a@b.co", "password": "123456", "firstName": "Ada"})

    assert response.status_code == 201
    assert response.json()["data"]["user"] == {"id": "u-2", "email": "a@b.co", "createdAt": "2024-05-02T10:00:00Z"}
    assert store.calls == [("sign_up", "a@b.co", "Ada")]
    assert "auth_token" in response.cookies


def test_me_requires_cookie(client):
    response = client.get("/auth/me")
    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Access token required"}


def test_me_rejects_bad_token(client):
    client.cookies.set("auth_token", "garbage")
    response = client.get("/auth/me")
    assert response.status_code == 403
    assert response.json() == {"success": False, "error": "Invalid or expired token"}


def test_me_returns_profile(logged_in):
    response = logged_in.get("/auth/me")

    assert response.status_code == 200
    assert response.json()["data"] == {
        "id": "demo_user_id",
        "email": "demo@rieno.app",
        "createdAt": "2024-01-01T00:00:00",
    }


def test_me_for_unknown_user_is_404(client, demo_settings):
    client.cookies.set("auth_token", create_session_token("ghost", "ghost@x.io", demo_settings))
    response = client.get("/auth/me")
    assert response.status_code == 404
    assert response.json()["error"] == "User not found"


def test_logout_clears_cookie(logged_in):
    response = logged_in.post("/auth/logout")

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert 'auth_token=""' in response.headers["set-cookie"]
    assert logged_in.get("/auth/me").status_code == 401


def test_logout_succeeds_when_remote_sign_out_fails(demo_settings):
    store = SpyStore(fail_sign_out=True)
    client = spy_client(demo_settings, store)
    client.cookies.set("auth_token", create_session_token("u-1", "a@b.co", demo_settings))

    response = client.post("/auth/logout")

    assert response.status_code == 200
    assert ("sign_out", "u-1") in store.calls
    assert "max-age=0" in response.headers["set-cookie"].lower()


def test_logout_without_session_is_fine(client):
    assert client.post("/auth/logout").status_code == 200


def test_root(client):
    assert client.get("/").json() == {"message": "Welcome to Rieno API", "status": "running"}
