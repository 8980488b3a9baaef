from conftest import read_document, write_document

WINE_LIST = {
    "categories": [{"id": "red", "name": {"es": "Tintos", "en": "Red wines"}, "slug": "red"}],
    "items": [
        {"id": "priorat", "name": "Priorat 2019", "description": {"es": "Garnacha", "en": "Grenache"},
         "price": "32 €", "categoryId": "red"},
    ],
}

def test_create_initial_document_once(admin_client, data_dir):
    response = admin_client.post("/api/drinks", json=WINE_LIST)
    assert response.status_code == 201
    assert read_document(data_dir, "beverages") == WINE_LIST

    again = admin_client.post("/api/drinks", json={"categories": [], "items": []})
    assert again.status_code == 400
    assert read_document(data_dir, "beverages") == WINE_LIST

def test_create_validates_category_references(admin_client, data_dir):
    payload = {"categories": [], "items": [{"id": "x", "name": "X", "categoryId": "red"}]}
    response = admin_client.post("/api/drinks", json=payload)
    assert response.status_code == 400
    assert response.json()["invalidItems"] == ["x"]
    assert not (data_dir / "beverages.json").exists()

def test_get_and_replace_drinks(admin_client, data_dir):
    write_document(data_dir, "beverages", WINE_LIST)
    assert admin_client.get("/api/drinks").json() == WINE_LIST

    updated = {
        "categories": WINE_LIST["categories"] + [{"id": "white", "name": "Blancos"}],
        "items": WINE_LIST["items"] + [{"id": "albarino", "name": "Albariño", "categoryId": "white"}],
    }
    response = admin_client.put("/api/drinks", json=updated)
    assert response.status_code == 200
    assert admin_client.get("/api/drinks").json() == updated

def test_public_beverages_are_localized(client, data_dir):
    write_document(data_dir, "beverages", WINE_LIST)
    body = client.get("/api/beverages", params={"locale": "en"}).json()
    assert body["success"] is True
    assert body["data"]["categories"][0]["name"] == "Red wines"
    assert body["data"]["items"][0]["description"] == "Grenache"

def test_public_beverages_fall_back_to_english_then_blank(client, data_dir):
    write_document(data_dir, "beverages", WINE_LIST)
    items = client.get("/api/beverages", params={"locale": "de", "type": "items"}).json()["data"]
    assert items[0]["description"] == "Grenache"

def test_public_beverages_use_language_cookie(client, data_dir):
    write_document(data_dir, "beverages", WINE_LIST)
    client.cookies.set("language", "en")
    body = client.get("/api/beverages", params={"type": "categories"}).json()
    assert body["data"][0]["name"] == "Red wines"

def test_admin_beverage_editor(admin_client, data_dir):
    write_document(data_dir, "beverages", WINE_LIST)
    response = admin_client.post("/api/admin/beverages", json={
        "type": "item", "name": "Cava", "price": "25 €", "categoryId": "red",
        "image": {"url": "/images/cava.jpg", "width": 400, "height": 900},
    })
    assert response.status_code == 201
    stored = read_document(data_dir, "beverages")
    assert stored["items"][-1]["image"] == {"url": "/images/cava.jpg", "width": 400, "height": 900}
