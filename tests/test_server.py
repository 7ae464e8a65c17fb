"""
Server tests: frontend serving, error handlers, request logging, config.
"""

import logging

import pytest
import requests_mock

from matchdb import create_app, format_request_log, should_log_path

from conftest import INDEX_HTML, UPSTREAM


# ============================================================================
# Frontend
# ============================================================================

def test_root_serves_index(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.get_data(as_text=True) == INDEX_HTML


def test_existing_asset_is_served(client):
    response = client.get("/assets/app.js")

    assert response.status_code == 200
    assert "matchdb" in response.get_data(as_text=True)


@pytest.mark.parametrize("path", ["/dashboard", "/admin/users", "/does-not-exist"])
def test_client_routes_fall_back_to_index(client, path):
    response = client.get(path)

    assert response.status_code == 200
    assert response.get_data(as_text=True) == INDEX_HTML


def test_path_traversal_falls_back_to_index(client):
    response = client.get("/../conftest.py")

    assert response.get_data(as_text=True) == INDEX_HTML


def test_production_requires_build_directory(tmp_path):
    with pytest.raises(RuntimeError, match="build directory"):
        create_app({"APP_ENV": "production", "FRONTEND_DIST": str(tmp_path / "missing")})


def test_development_serves_source_directory(tmp_path):
    (tmp_path / "index.html").write_text("<p>dev</p>", encoding="utf-8")
    app = create_app({
        "TESTING": True,
        "APP_ENV": "development",
        "FRONTEND_DEV_DIR": str(tmp_path),
        "FRONTEND_DIST": str(tmp_path / "missing"),
    })

    response = app.test_client().get("/jobs")

    assert app.config["SEND_FILE_MAX_AGE_DEFAULT"] == 0
    assert response.get_data(as_text=True) == "<p>dev</p>"


def test_defaults(app):
    assert app.config["HOST"] == "0.0.0.0"
    assert isinstance(app.config["PORT"], int)


# ============================================================================
# Error handling
# ============================================================================

def test_http_errors_are_json(client):
    response = client.post("/dashboard")

    assert response.status_code == 405
    assert "message" in response.get_json()


def test_unexpected_errors_are_json(app):
    @app.route("/boom")
    def boom():
        raise ValueError("kapot")

    response = app.test_client().get("/boom")

    assert response.status_code == 500
    assert response.get_json() == {"message": "Internal Server Error"}


# ============================================================================
# Request logging
# ============================================================================

def test_request_is_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="matchdb"):
        client.get("/jobs", buffered=True)

    assert any(record.getMessage().startswith("GET /jobs 200 in ") for record in caplog.records)


def test_streamed_response_is_logged_when_finished(client, caplog):
    with requests_mock.Mocker() as m:
        m.get(f"{UPSTREAM}/api/jobs", json=[], headers={"Content-Type": "application/json"})

        with caplog.at_level(logging.INFO, logger="matchdb"):
            response = client.get("/api/jobs")
            response.get_data()
            logged_before_close = [r for r in caplog.records if r.getMessage().startswith("GET /api/jobs")]
            response.close()

    assert logged_before_close == []
    assert any(record.getMessage().startswith("GET /api/jobs 200 in ") for record in caplog.records)


def test_long_log_lines_are_truncated():
    line = format_request_log("GET", "/" + "x" * 120, 200, 12)

    assert len(line) == 80
    assert line.endswith("…")


def test_short_log_lines_are_kept():
    assert format_request_log("POST", "/api/jobs", 201, 5) == "POST /api/jobs 201 in 5ms"


@pytest.mark.parametrize("path,expected", [
    ("/@vite/client", False),
    ("/node_modules/.vite/deps/react.js", False),
    ("/api/jobs", True),
])
def test_dev_asset_paths_are_not_logged(path, expected):
    assert should_log_path(path) is expected


def test_create_app_does_not_reload_dotenv(monkeypatch, frontend_dist):
    calls = []
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: calls.append(args))

    create_app({"TESTING": True, "APP_ENV": "production", "FRONTEND_DIST": str(frontend_dist)})

    assert calls == []
