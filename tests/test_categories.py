"""Tests for Category API endpoints."""


def test_create_and_get_category(client):
    """Test a created category round-trips through get by ID."""
    payload = {"name": "Beverages", "description": "Hot and cold drinks"}
    create_response = client.post("/api/categories/", json=payload)

    assert create_response.status_code == 201
    created = create_response.json()
    assert created["id"] > 0

    response = client.get(f"/api/categories/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {**payload, "id": created["id"]}


def test_create_category_without_description(client):
    """Test description defaults to an empty string."""
    response = client.post("/api/categories/", json={"name": "Snacks"})

    assert response.status_code == 201
    assert response.json()["description"] == ""


def test_create_category_invalid_body(client):
    """Test a body without a name is rejected as a bad request."""
    response = client.post("/api/categories/", json={"description": "no name"})

    assert response.status_code == 400


def test_list_categories_in_insertion_order(client):
    """Test listing returns every category in creation order."""
    for name in ["Food", "Drinks", "Household"]:
        client.post("/api/categories/", json={"name": name})

    response = client.get("/api/categories/")

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Food", "Drinks", "Household"]


def test_list_categories_empty(client):
    """Test listing with no categories returns an empty list."""
    response = client.get("/api/categories/")

    assert response.status_code == 200
    assert response.json() == []


def test_get_category_not_found(client):
    """Test getting non-existent category returns 404."""
    response = client.get("/api/categories/9999")

    assert response.status_code == 404


def test_get_category_malformed_id(client):
    """Test a non-numeric ID is a bad request."""
    response = client.get("/api/categories/abc")

    assert response.status_code == 400


def test_update_category(client):
    """Test updating a category replaces name and description."""
    category_id = client.post(
        "/api/categories/",
        json={"name": "Old", "description": "old description"}
    ).json()["id"]

    response = client.put(
        f"/api/categories/{category_id}",
        json={"name": "New", "description": "new description"}
    )

    assert response.status_code == 200
    assert response.json() == {"id": category_id, "name": "New", "description": "new description"}
    assert client.get(f"/api/categories/{category_id}").json()["name"] == "New"


def test_update_category_not_found(client):
    """Test updating a missing category returns 404."""
    response = client.put("/api/categories/9999", json={"name": "Ghost"})

    assert response.status_code == 404


def test_update_category_without_id(client):
    """Test PUT on the collection requires an ID."""
    response = client.put("/api/categories/", json={"name": "No ID"})

    assert response.status_code == 400


def test_delete_category(client):
    """Test deleting a category."""
    category_id = client.post("/api/categories/", json={"name": "Temporary"}).json()["id"]

    response = client.delete(f"/api/categories/{category_id}")

    assert response.status_code == 200
    assert "message" in response.json()
    assert client.get(f"/api/categories/{category_id}").status_code == 404


def test_delete_category_not_found_leaves_catalog_unchanged(client):
    """Test deleting a missing category returns 404 and changes nothing."""
    client.post("/api/categories/", json={"name": "Keep Me"})
    before = client.get("/api/categories/").json()

    response = client.delete("/api/categories/9999")

    assert response.status_code == 404
    assert client.get("/api/categories/").json() == before


def test_delete_category_malformed_id(client):
    """Test deleting with a malformed ID is a bad request."""
    response = client.delete("/api/categories/not-a-number")

    assert response.status_code == 400


def test_delete_category_without_id(client):
    """Test DELETE on the collection requires an ID."""
    response = client.delete("/api/categories/")

    assert response.status_code == 400
