import logging

from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError

from resume_builder.app.core.config import Settings
from resume_builder.app.core.exceptions import ResumeValidationError
from resume_builder.app.main import create_app


def test_health_check(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "OK",
        "message": "Resume Builder API is running",
    }


def test_create_app_registers_routes():
    app = create_app()

    paths = set(app.openapi()["paths"])

    assert {
        "/api/health",
        "/api/auth/signup",
        "/api/auth/login",
        "/api/auth/me",
        "/api/resume",
        "/api/resume/{resume_id}",
        "/api/resume/{resume_id}/set-default",
        "/api/resume/{resume_id}/duplicate",
        "/api/resume/{resume_id}/toggle-public",
        "/api/public/resume/{slug}",
    } <= paths


def test_cors_allows_frontend_origin(client):
    response = client.options(
        "/api/health",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_exception_handlers(caplog):
    app = create_app()

    @app.get("/invalid")
    def invalid():
        raise ResumeValidationError([{"field": "title", "message": "Title is required"}])

    @app.get("/broken")
    def broken():
        raise SQLAlchemyError("connection lost")

    client = TestClient(app)

    response = client.get("/invalid")
    assert response.status_code == 400
    assert response.json() == {
        "message": "Validation failed",
        "errors": [{"field": "title", "message": "Title is required"}],
    }

    with caplog.at_level(logging.ERROR):
        response = client.get("/broken")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert "connection lost" not in response.text
    assert "Database error while handling GET /broken" in caplog.text


def test_http_errors_use_message_envelope(client):
    response = client.get("/api/no-such-route")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_unauthenticated_request_keeps_bearer_challenge(client):
    response = client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json() == {"message": "Not authenticated"}
    assert response.headers["www-authenticate"] == "Bearer"


def test_rate_limit_exceeded(monkeypatch):
    settings = Settings(_env_file=None, RATE_LIMIT="3 per 15 minutes")
    monkeypatch.setattr("resume_builder.app.main.get_settings", lambda: settings)
    client = TestClient(create_app())

    statuses = [client.get("/api/health").status_code for _ in range(3)]
    response = client.get("/api/health")

    assert statuses == [200, 200, 200]
    assert response.status_code == 429
    assert response.json() == {
        "message": "Too many requests from this IP, please try again later.",
    }
    assert int(response.headers["retry-after"]) > 0


def test_rate_limit_counts_every_route(monkeypatch):
    settings = Settings(_env_file=None, RATE_LIMIT="2 per 15 minutes")
    monkeypatch.setattr("resume_builder.app.main.get_settings", lambda: settings)
    client = TestClient(create_app())

    first = client.get("/api/health")
    second = client.get("/api/auth/me")
    response = client.get("/api/health")

    assert first.status_code == 200
    assert second.status_code == 401
    assert response.status_code == 429


def test_rate_limit_disabled(monkeypatch):
    settings = Settings(
        _env_file=None,
        RATE_LIMIT="1 per 15 minutes",
        RATE_LIMIT_ENABLED="false",
    )
    monkeypatch.setattr("resume_builder.app.main.get_settings", lambda: settings)
    client = TestClient(create_app())

    responses = [client.get("/api/health") for _ in range(3)]

    assert all(r.status_code == 200 for r in responses)
