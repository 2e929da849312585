"""Tests for route protection and the login/logout endpoints."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.login_logic import LoginError, add_login_routes
from src.mount_gradio_app import (
    add_login_redirect,
    add_middleware_redirect,
    install_session_middleware,
    matches_protected_path,
)


def test_matches_protected_path():
    assert matches_protected_path("/skill", "/skill")
    assert matches_protected_path("/skill", "/skill/")
    assert matches_protected_path("/skill", "/skill/gradio_api/x")
    assert not matches_protected_path("/skill", "/skill-type/")
    assert not matches_protected_path("/", "/anything")


def _app():
    app = FastAPI()

    @app.get("/")
    def root():
        return {"page": "login"}

    @app.get("/app/")
    def dashboard():
        return {"page": "dashboard"}

    add_middleware_redirect(app, "/app")
    add_login_routes(app)
    add_login_redirect(app, target="/app/")
    install_session_middleware(app, "test-secret")
    return app


def test_protected_page_redirects_without_session():
    client = TestClient(_app())
    response = client.get("/app/", follow_redirects=False)
    assert response.status_code in (302, 307)
    assert response.headers["location"] == "/"


def test_login_stores_token_and_unlocks_pages(monkeypatch):
    monkeypatch.setattr("src.login_logic.login", lambda username, password: "h.p.s")
    client = TestClient(_app())

    response = client.post(
        "/auth/login", data={"username": "ana", "password": "x"}, follow_redirects=False
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/app/"

    assert client.get("/app/").json() == {"page": "dashboard"}
    # Authenticated users skip the login page.
    redirect = client.get("/", follow_redirects=False)
    assert redirect.headers["location"] == "/app/"

    client.get("/logout", follow_redirects=False)
    assert client.get("/app/", follow_redirects=False).headers["location"] == "/"


def test_failed_login_returns_to_login_with_error(monkeypatch):
    def reject(username, password):
        raise LoginError("Credenciales inválidas")

    monkeypatch.setattr("src.login_logic.login", reject)
    client = TestClient(_app())

    response = client.post(
        "/auth/login", data={"username": "ana", "password": "x"}, follow_redirects=False
    )
    assert response.status_code == 303
    assert response.headers["location"].startswith("/?error=Credenciales")
