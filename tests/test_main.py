def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to Trackify API"}


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["service"] == "Trackify"


def test_missing_body_is_bad_request(client, register_user):
    _, headers = register_user("alice@trackify.io")
    response = client.post("/api/categories", headers=headers)
    assert response.status_code == 400


def test_invalid_json_is_bad_request(client, register_user):
    _, headers = register_user("alice@trackify.io")
    response = client.post(
        "/api/categories",
        content=b"{not json",
        headers={**headers, "Content-Type": "application/json"},
    )
    assert response.status_code == 400
