def test_create_and_list_categories(client, register_user, create_category):
    user, headers = register_user("alice@trackify.io")

    created = create_category(headers, "Transport")
    assert created["name"] == "Transport"
    assert created["userId"] == user["id"]
    assert isinstance(created["id"], int)

    create_category(headers, "apple")
    create_category(headers, "Food")

    response = client.get("/api/categories", headers=headers)
    assert response.status_code == 200
    categories = response.json()
    # Case-sensitive ordering: upper case sorts before lower case
    assert [c["name"] for c in categories] == ["Food", "Transport", "apple"]
    assert categories[1] == created


def test_duplicate_category_names_are_allowed(client, register_user, create_category):
    _, headers = register_user("alice@trackify.io")
    first = create_category(headers, "Food")
    second = create_category(headers, "Food")
    assert first["id"] != second["id"]

    names = [c["name"] for c in client.get("/api/categories", headers=headers).json()]
    assert names == ["Food", "Food"]


def test_category_name_is_required(client, register_user):
    _, headers = register_user("alice@trackify.io")

    missing = client.post("/api/categories", json={}, headers=headers)
    assert missing.status_code == 400
    assert missing.json()["errors"][0]["field"] == "name"

    blank = client.post("/api/categories", json={"name": "   "}, headers=headers)
    assert blank.status_code == 400
    assert blank.json()["errors"] == [{"field": "name", "message": "name should not be empty"}]

    not_an_object = client.post("/api/categories", json=["Food"], headers=headers)
    assert not_an_object.status_code == 400


def test_categories_are_scoped_to_owner(client, register_user, create_category):
    _, alice = register_user("alice@trackify.io")
    _, bob = register_user("bob@trackify.io")

    create_category(alice, "Food")
    create_category(alice, "Rent")
    create_category(bob, "Food")

    alice_categories = client.get("/api/categories", headers=alice).json()
    bob_categories = client.get("/api/categories", headers=bob).json()

    assert [c["name"] for c in alice_categories] == ["Food", "Rent"]
    assert [c["name"] for c in bob_categories] == ["Food"]
    assert not {c["id"] for c in alice_categories} & {c["id"] for c in bob_categories}
