"""
Integration tests for the user directory.

Tests cover:
- Pagination of /users
- Lookup by UUID (unknown, malformed)
- Profile updates via PATCH /users/me
"""

import uuid


def test_list_users_is_paginated(client, register_user, auth_headers):
    register_user(email="carol@example.com")
    register_user(email="bob@example.com")

    response = client.get("/users", params={"page": 1, "per_page": 2}, headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert [user["email"] for user in body["data"]] == ["alice@example.com", "bob@example.com"]
    assert body["pagination"] == {"page": 1, "per_page": 2, "total": 3, "total_pages": 2}

    second = client.get("/users", params={"page": 2, "per_page": 2}, headers=auth_headers).json()
    assert [user["email"] for user in second["data"]] == ["carol@example.com"]


def test_list_users_requires_auth(client):
    assert client.get("/users").status_code == 401


def test_pagination_bounds(client, auth_headers):
    assert client.get("/users", params={"page": 0}, headers=auth_headers).status_code == 422
    assert client.get("/users", params={"per_page": 0}, headers=auth_headers).status_code == 422
    assert client.get("/users", params={"per_page": 101}, headers=auth_headers).status_code == 422


def test_get_user_by_id(client, register_user, auth_headers):
    bob = register_user(email="bob@example.com")["user"]

    response = client.get(f"/users/{bob['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["email"] == "bob@example.com"


def test_unknown_user(client, auth_headers):
    response = client.get(f"/users/{uuid.uuid4()}", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_malformed_user_id(client, auth_headers):
    assert client.get("/users/not-a-uuid", headers=auth_headers).status_code == 422


def test_update_profile(client, auth_headers):
    response = client.patch("/users/me", json={"full_name": "Alice Liddell"}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["full_name"] == "Alice Liddell"
    assert client.get("/auth/me", headers=auth_headers).json()["full_name"] == "Alice Liddell"
