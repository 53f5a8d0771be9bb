"""
Integration tests for the items resource.

Tests cover:
- Create with validation and computed price_with_tax
- Ownership: other users' items look missing
- Search, filters, sorting and pagination
- PUT replacement vs PATCH partial update
- Delete
"""

import uuid

import pytest


FOO = {
    "name": "Foo",
    "description": "A very nice Item",
    "price": 35.4,
    "tax": 3.2,
    "tags": ["tools", " garden ", "tools"],
}


@pytest.fixture
def create_item(client, auth_headers):
    def _create(headers=None, **fields):
        payload = {**FOO, **fields}
        response = client.post("/items", json=payload, headers=headers or auth_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


# ============================================================================
# CREATE / READ
# ============================================================================


class TestCreateAndRead:
    """POST /items, GET /items/{id}"""

    def test_create(self, client, auth_headers, create_item):
        item = create_item()

        assert item["name"] == "Foo"
        assert item["tags"] == ["tools", "garden"]
        assert item["is_offer"] is False
        assert item["price_with_tax"] == 38.6
        me = client.get("/auth/me", headers=auth_headers).json()
        assert item["owner_id"] == me["id"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "Foo", "price": 0},
            {"name": "", "price": 10},
            {"price": 10},
            {"name": "Foo", "price": "cheap"},
        ],
    )
    def test_invalid_payload(self, client, auth_headers, payload):
        response = client.post("/items", json=payload, headers=auth_headers)

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"]["errors"]

    def test_requires_auth(self, client):
        assert client.post("/items", json=FOO).status_code == 401

    def test_get(self, client, auth_headers, create_item):
        item = create_item()

        response = client.get(f"/items/{item['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == item

    def test_get_unknown(self, client, auth_headers):
        assert client.get(f"/items/{uuid.uuid4()}", headers=auth_headers).status_code == 404

    def test_other_users_item_is_not_found(self, client, create_item, other_headers):
        item = create_item()

        assert client.get(f"/items/{item['id']}", headers=other_headers).status_code == 404
        assert client.delete(f"/items/{item['id']}", headers=other_headers).status_code == 404


# ============================================================================
# LIST
# ============================================================================


class TestList:
    """GET /items"""

    @pytest.fixture
    def catalogue(self, create_item):
        create_item(name="Hammer", description="Claw hammer", price=12.5, tags=["tools"])
        create_item(name="Rake", description="Garden rake", price=20.0, is_offer=True)
        create_item(name="Shovel", description="Steel garden shovel", price=30.0)
        create_item(name="Gloves", description=None, price=5.0, is_offer=True)

    def _names(self, response):
        return [item["name"] for item in response.json()["data"]]

    def test_search_is_case_insensitive_over_name_and_description(self, client, auth_headers, catalogue):
        response = client.get("/items", params={"q": "GARDEN", "sort_by": "name", "sort_order": "asc"}, headers=auth_headers)

        assert response.status_code == 200
        assert self._names(response) == ["Rake", "Shovel"]

    @pytest.mark.parametrize(
        "q, expected",
        [
            ("a_b", ["a_b"]),
            ("%", ["50% off"]),
        ],
    )
    def test_search_treats_wildcards_literally(self, client, auth_headers, create_item, q, expected):
        create_item(name="a_b", description=None)
        create_item(name="axb", description=None)
        create_item(name="50% off", description=None)
        create_item(name="plain", description=None)

        response = client.get("/items", params={"q": q}, headers=auth_headers)

        assert response.status_code == 200
        assert self._names(response) == expected

    def test_price_bounds_are_inclusive(self, client, auth_headers, catalogue):
        response = client.get(
            "/items",
            params={"min_price": 12.5, "max_price": 20, "sort_by": "price", "sort_order": "asc"},
            headers=auth_headers,
        )

        assert self._names(response) == ["Hammer", "Rake"]

    def test_offer_filter(self, client, auth_headers, catalogue):
        response = client.get(
            "/items",
            params={"is_offer": "true", "sort_by": "price", "sort_order": "desc"},
            headers=auth_headers,
        )

        assert self._names(response) == ["Rake", "Gloves"]

    def test_pagination(self, client, auth_headers, catalogue):
        response = client.get(
            "/items",
            params={"sort_by": "price", "sort_order": "asc", "page": 2, "per_page": 3},
            headers=auth_headers,
        )

        body = response.json()
        assert [item["name"] for item in body["data"]] == ["Shovel"]
        assert body["pagination"] == {"page": 2, "per_page": 3, "total": 4, "total_pages": 2}

    def test_only_own_items_are_listed(self, client, catalogue, other_headers):
        response = client.get("/items", headers=other_headers)

        assert response.json()["data"] == []
        assert response.json()["pagination"]["total"] == 0

    def test_unknown_sort_field(self, client, auth_headers):
        response = client.get("/items", params={"sort_by": "owner_id"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"]["details"]["allowed"] == ["created_at", "name", "price"]

    def test_min_price_above_max_price(self, client, auth_headers):
        response = client.get("/items", params={"min_price": 50, "max_price": 10}, headers=auth_headers)

        assert response.status_code == 400

    def test_invalid_sort_order(self, client, auth_headers):
        response = client.get("/items", params={"sort_order": "sideways"}, headers=auth_headers)

        assert response.status_code == 422


# ============================================================================
# UPDATE / DELETE
# ============================================================================


class TestUpdateAndDelete:
    """PUT, PATCH and DELETE /items/{id}"""

    def test_put_replaces_every_field(self, client, auth_headers, create_item):
        item = create_item(is_offer=True)

        response = client.put(
            f"/items/{item['id']}",
            json={"name": "Bar", "price": 10},
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Bar"
        assert body["price"] == 10
        assert body["description"] is None
        assert body["tax"] is None
        assert body["tags"] == []
        assert body["is_offer"] is False
        assert body["price_with_tax"] == 10

    def test_put_requires_full_representation(self, client, auth_headers, create_item):
        item = create_item()

        response = client.put(f"/items/{item['id']}", json={"price": 10}, headers=auth_headers)

        assert response.status_code == 422

    def test_patch_changes_only_sent_fields(self, client, auth_headers, create_item):
        item = create_item()

        response = client.patch(f"/items/{item['id']}", json={"price": 40}, headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["price"] == 40
        assert body["name"] == "Foo"
        assert body["description"] == "A very nice Item"
        assert body["tags"] == ["tools", "garden"]
        assert body["price_with_tax"] == 43.2

    def test_patch_can_clear_optional_fields(self, client, auth_headers, create_item):
        item = create_item()

        response = client.patch(
            f"/items/{item['id']}",
            json={"description": None, "tax": None},
            headers=auth_headers,
        )

        assert response.json()["description"] is None
        assert response.json()["tax"] is None

    def test_patch_cannot_clear_required_fields(self, client, auth_headers, create_item):
        item = create_item()

        response = client.patch(f"/items/{item['id']}", json={"name": None}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"]["details"]["fields"] == ["name"]

    def test_empty_patch_is_a_no_op(self, client, auth_headers, create_item):
        item = create_item()

        response = client.patch(f"/items/{item['id']}", json={}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["name"] == "Foo"

    def test_delete(self, client, auth_headers, create_item):
        item = create_item()

        response = client.delete(f"/items/{item['id']}", headers=auth_headers)

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/items/{item['id']}", headers=auth_headers).status_code == 404
