"""
Integration tests for middleware.

Tests cover:
- X-Request-ID generation and propagation
- X-Process-Time header
- CORS preflight for configured origins
"""

import uuid


def test_request_id_is_generated(client):
    response = client.get("/live")

    request_id = response.headers["x-request-id"]
    assert uuid.UUID(request_id)


def test_request_id_is_propagated(client):
    response = client.get("/live", headers={"X-Request-ID": "trace-abc-123"})

    assert response.headers["x-request-id"] == "trace-abc-123"


def test_process_time_header(client):
    response = client.get("/reference/glossary")

    assert float(response.headers["x-process-time"]) >= 0


def test_headers_on_error_responses(client):
    response = client.get("/auth/me")

    assert response.status_code == 401
    assert "x-request-id" in response.headers


def test_cors_preflight(client):
    response = client.options(
        "/items",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_cors_rejects_unknown_origin(client):
    response = client.options(
        "/items",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert "access-control-allow-origin" not in response.headers
