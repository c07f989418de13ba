def test_list_foods_ordered_by_name(client, auth_headers):
    r = client.get("/api/foods", headers=auth_headers)
    assert r.status_code == 200
    assert [f["name"] for f in r.get_json()["items"]] == ["Apple (red)", "Banana"]


def test_get_food(client, auth_headers, foods):
    r = client.get(f"/api/foods/{foods['Apple (red)']}", headers=auth_headers)
    assert r.status_code == 200
    data = r.get_json()
    assert data["glycemic_index"] == 38
    assert data["carbs_per_100g"] == 14.5
    assert data["data_source"] == "USDA"
    assert client.get("/api/foods/9999", headers=auth_headers).status_code == 404


def test_search_foods(client, auth_headers):
    r = client.get("/api/foods/search?name=nan", headers=auth_headers)
    assert r.status_code == 200
    assert [f["name"] for f in r.get_json()["items"]] == ["Banana"]

    assert client.get("/api/foods/search?name=%20", headers=auth_headers).status_code == 400


def test_create_food(client, auth_headers):
    r = client.post("/api/foods", headers=auth_headers, json={
        "name": "Lentils, boiled", "glycemic_index": 32, "carbs_per_100g": 20.1,
    })
    assert r.status_code == 201, r.data
    data = r.get_json()
    assert data["name"] == "Lentils, boiled"
    assert data["data_source"] is None
    assert r.headers["Location"].endswith(f"/api/foods/{data['id']}")


def test_create_food_validation(client, auth_headers):
    bad_bodies = [
        {"name": "", "glycemic_index": 10, "carbs_per_100g": 5},
        {"name": "   ", "glycemic_index": 10, "carbs_per_100g": 5},
        {"name": "Rice", "glycemic_index": -1, "carbs_per_100g": 5},
        {"name": "Rice", "glycemic_index": 10, "carbs_per_100g": -0.5},
        {"glycemic_index": 10, "carbs_per_100g": 5},
    ]
    for body in bad_bodies:
        r = client.post("/api/foods", headers=auth_headers, json=body)
        assert r.status_code == 400, body
        assert r.get_json()["error"]["code"] == "VALIDATION_ERROR"


def test_update_food(client, auth_headers, foods):
    banana = foods["Banana"]
    r = client.put(f"/api/foods/{banana}", headers=auth_headers, json={
        "id": banana, "glycemic_index": 62, "data_source": "Sydney GI database",
    })
    assert r.status_code == 200, r.data
    data = r.get_json()
    assert data["glycemic_index"] == 62
    assert data["carbs_per_100g"] == 23.0
    assert data["data_source"] == "Sydney GI database"


def test_update_food_errors(client, auth_headers, foods):
    banana = foods["Banana"]
    r = client.put(f"/api/foods/{banana}", headers=auth_headers, json={"id": banana + 1, "name": "X"})
    assert r.status_code == 400
    r = client.put(f"/api/foods/{banana}", headers=auth_headers, json={"carbs_per_100g": -3})
    assert r.status_code == 400
    r = client.put("/api/foods/9999", headers=auth_headers, json={"name": "Ghost"})
    assert r.status_code == 404


def test_delete_food(client, auth_headers, foods):
    r = client.delete(f"/api/foods/{foods['Apple (red)']}", headers=auth_headers)
    assert r.status_code == 200
    assert client.get(f"/api/foods/{foods['Apple (red)']}", headers=auth_headers).status_code == 404
    assert client.delete(f"/api/foods/{foods['Apple (red)']}", headers=auth_headers).status_code == 404


def test_home_and_health(client):
    assert client.get("/").status_code == 200
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json()["database"] == "healthy"
