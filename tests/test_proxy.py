"""
Edge proxy tests: /api wordt 1-op-1 naar de upstream doorgestuurd.
"""

import io
import logging

import pytest
import requests
import requests_mock
from werkzeug.test import EnvironBuilder, run_wsgi_app

from conftest import UPSTREAM

JSON_HEADERS = {"Content-Type": "application/json"}


class DroppedConnection(io.BytesIO):
    """Upstream body die na de eerste read de verbinding verliest."""

    def __init__(self, data):
        super().__init__(data)
        self.reads = 0

    def read(self, *args, **kwargs):
        self.reads += 1
        if self.reads > 1:
            raise ConnectionResetError("Connection reset by peer")
        return super().read(*args, **kwargs)


def test_forwards_path_and_query_unchanged(client):
    """Test path + query string gaan ongewijzigd naar de upstream."""
    with requests_mock.Mocker() as m:
        m.get(
            f"{UPSTREAM}/api/jobs?location=Remote",
            status_code=200,
            json=[{"id": "job-1"}],
            headers=JSON_HEADERS,
        )

        response = client.get("/api/jobs?location=Remote")

        assert m.call_count == 1
        assert m.last_request.url == f"{UPSTREAM}/api/jobs?location=Remote"
        assert response.status_code == 200
        assert response.get_json() == [{"id": "job-1"}]


@pytest.mark.parametrize("path", ["/api/jobs/a%2Fb", "/api/profiles/x%3By"])
def test_encoded_characters_stay_encoded(client, path):
    with requests_mock.Mocker() as m:
        m.get(requests_mock.ANY, json={}, headers=JSON_HEADERS)

        client.get(path)

        assert m.last_request.url == f"{UPSTREAM}{path}"


def test_copies_status_and_headers(client):
    with requests_mock.Mocker() as m:
        m.get(
            f"{UPSTREAM}/api/users/me",
            status_code=401,
            json={"message": "Unauthorized"},
            headers={"X-Request-Id": "abc123", "Connection": "keep-alive", **JSON_HEADERS},
        )

        response = client.get("/api/users/me")

        assert response.status_code == 401
        assert response.get_json() == {"message": "Unauthorized"}
        assert response.headers["X-Request-Id"] == "abc123"
        assert "Connection" not in response.headers


def test_missing_content_type_is_not_added(app):
    # ruwe WSGI headers: de test client vult zelf een default content-type in
    environ = EnvironBuilder(path="/api/jobs/job-1/pdf").get_environ()

    with requests_mock.Mocker() as m:
        m.get(f"{UPSTREAM}/api/jobs/job-1/pdf", content=b"%PDF", headers={"X-Id": "1"})

        app_iter, status, headers = run_wsgi_app(app, environ, buffered=True)

    assert status.startswith("200")
    assert b"".join(app_iter) == b"%PDF"
    assert headers["X-Id"] == "1"
    assert "Content-Type" not in headers


def test_rewrites_host_and_keeps_other_headers(client):
    with requests_mock.Mocker() as m:
        m.get(f"{UPSTREAM}/api/profiles/me", json={"id": "p-1"}, headers=JSON_HEADERS)

        client.get("/api/profiles/me", headers={"Authorization": "Bearer tok-1"})

        sent = m.last_request.headers
        assert sent["Host"] == "localhost:4000"
        assert sent["Authorization"] == "Bearer tok-1"


def test_forwards_body_for_mutating_methods(client):
    with requests_mock.Mocker() as m:
        m.post(f"{UPSTREAM}/api/auth/login", status_code=201, json={"access_token": "tok-1"}, headers=JSON_HEADERS)

        response = client.post("/api/auth/login", json={"email": "a@b.test", "password": "secret"})

        assert response.status_code == 201
        assert m.last_request.method == "POST"
        assert m.last_request.json() == {"email": "a@b.test", "password": "secret"}


def test_get_request_has_no_body(client):
    with requests_mock.Mocker() as m:
        m.get(f"{UPSTREAM}/api/menu/public", json=[], headers=JSON_HEADERS)

        client.get("/api/menu/public")

        assert not m.last_request.body


def test_delete_is_forwarded(client):
    with requests_mock.Mocker() as m:
        m.delete(f"{UPSTREAM}/api/jobs/job-1", status_code=204)

        response = client.delete("/api/jobs/job-1")

        assert response.status_code == 204
        assert m.last_request.method == "DELETE"


def test_upstream_unreachable_returns_500(client):
    """Test connection refused -> vaste 500 met een error veld."""
    with requests_mock.Mocker() as m:
        m.get(
            f"{UPSTREAM}/api/jobs",
            exc=requests.exceptions.ConnectionError("Connection refused"),
        )

        response = client.get("/api/jobs")

    assert response.status_code == 500
    body = response.get_json()
    assert body["message"] == "Backend API unavailable"
    assert "Connection refused" in body["error"]


def test_broken_stream_keeps_status_and_logs(client, caplog):
    """Test verbinding valt weg tijdens de body: status blijft, fout wordt gelogd."""
    with requests_mock.Mocker() as m:
        m.get(
            f"{UPSTREAM}/api/jobs",
            status_code=200,
            body=DroppedConnection(b'[{"id": "job-1"'),
            headers=JSON_HEADERS,
        )

        with caplog.at_level(logging.ERROR, logger="matchdb.proxy"):
            response = client.get("/api/jobs")
            data = response.get_data()

    assert response.status_code == 200
    assert b"Backend API unavailable" not in data
    assert any("Proxy error while streaming" in record.getMessage() for record in caplog.records)


def test_bare_api_prefix_is_proxied(client):
    with requests_mock.Mocker() as m:
        m.get(f"{UPSTREAM}/api", json={"status": "ok"}, headers=JSON_HEADERS)

        response = client.get("/api")

        assert response.get_json() == {"status": "ok"}
