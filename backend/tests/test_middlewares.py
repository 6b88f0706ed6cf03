from fastapi import status
from fastapi.testclient import TestClient

from staff_api.core.config import Settings
from staff_api.core.deps import get_role_directory
from staff_api.db.session import get_db
from staff_api.main import create_app


def test_staff_responses_carry_headers(client):
    resp = client.get("/staff")
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"
    assert resp.headers["Cache-Control"] == "no-store"
    assert resp.headers["X-Request-ID"]


def test_request_id_is_echoed(client):
    resp = client.get("/staff", headers={"X-Request-ID": "abc-123"})
    assert resp.headers["X-Request-ID"] == "abc-123"


def test_login_is_rate_limited(db_session, roles):
    app = create_app(Settings(LOGIN_RATE_LIMIT=2, LOGIN_RATE_WINDOW_SEC=60))

    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_role_directory] = lambda: roles

    with TestClient(app) as client:
        body = {"email": "a@x.com", "password": "password1"}
        assert client.post("/staff/login", json=body).status_code == status.HTTP_401_UNAUTHORIZED
        assert client.post("/staff/login", json=body).status_code == status.HTTP_401_UNAUTHORIZED

        blocked = client.post("/staff/login", json=body)
        assert blocked.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert blocked.headers["Retry-After"] == "60"

        # other routes are not throttled
        assert client.get("/staff").status_code == status.HTTP_200_OK
