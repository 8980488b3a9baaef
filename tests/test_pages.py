from conftest import read_document, write_document

ABOUT = {
    "title": {"es": "Sobre nosotros", "en": "About us"},
    "slug": "about",
    "content": {"blocks": [{"type": "text", "value": "Since 1998"}]},
    "seo": {"title": {"es": "Nosotros", "en": "About"}, "description": "Our story", "keywords": ["history"]},
}

def create_page(admin_client, **overrides):
    response = admin_client.post("/api/admin/pages", json={**ABOUT, **overrides})
    assert response.status_code == 201, response.json()
    return response.json()

def test_create_and_fetch_page_by_slug(admin_client):
    page = create_page(admin_client)
    assert page["id"]
    assert page["updatedAt"]

    public = admin_client.get("/api/pages/about", params={"locale": "en"}).json()
    assert public["title"] == "About us"
    assert public["seo"] == {"title": "About", "description": "Our story", "keywords": ["history"]}
    assert public["content"] == ABOUT["content"]

def test_duplicate_slug_is_a_validation_error(admin_client):
    create_page(admin_client)
    response = admin_client.post("/api/admin/pages", json={**ABOUT, "title": "Other"})
    assert response.status_code == 400
    assert response.json()["errors"] == {"slug": ["Slug already in use"]}

def test_create_requires_title_and_valid_slug(admin_client):
    response = admin_client.post("/api/admin/pages", json={"slug": "Bad Slug"})
    assert response.status_code == 400
    errors = response.json()["errors"]
    assert "title" in errors
    assert "slug" in errors

def test_string_title_is_stored_under_the_given_locale(admin_client, data_dir):
    create_page(admin_client, title="Qui som", slug="qui-som", locale="ca")
    stored = read_document(data_dir, "pages")
    assert stored[0]["title"] == {"ca": "Qui som"}

def test_update_merges_title_and_checks_slug(admin_client):
    page = create_page(admin_client)
    create_page(admin_client, title="Contact", slug="contact")

    response = admin_client.put("/api/admin/pages", json={"id": page["id"], "title": "À propos", "locale": "fr"})
    assert response.status_code == 200
    assert response.json()["title"] == {"es": "Sobre nosotros", "en": "About us", "fr": "À propos"}

    clash = admin_client.put("/api/admin/pages", json={"id": page["id"], "slug": "contact"})
    assert clash.status_code == 400

    renamed = admin_client.put("/api/admin/pages", json={"id": page["id"], "slug": "our-story"})
    assert renamed.status_code == 200
    assert admin_client.get("/api/pages/our-story").status_code == 200
    assert admin_client.get("/api/pages/about").status_code == 404

def test_update_unknown_page_is_not_found(admin_client):
    response = admin_client.put("/api/admin/pages", json={"id": "missing", "title": "x"})
    assert response.status_code == 404

def test_update_requires_id(admin_client):
    response = admin_client.put("/api/admin/pages", json={"title": "x"})
    assert response.status_code == 400
    assert "id" in response.json()["errors"]

def test_deleted_page_is_not_found_by_slug(admin_client):
    page = create_page(admin_client)
    assert admin_client.get("/api/pages/about").status_code == 200

    response = admin_client.delete("/api/admin/pages", params={"id": page["id"]})
    assert response.status_code == 200

    missing = admin_client.get("/api/pages/about")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Page not found"
    assert admin_client.delete("/api/admin/pages", params={"id": page["id"]}).status_code == 404

def test_admin_lookup_by_slug(admin_client):
    create_page(admin_client)
    raw = admin_client.get("/api/admin/pages", params={"slug": "about"}).json()
    assert raw["title"] == ABOUT["title"]
    localized = admin_client.get("/api/admin/pages", params={"slug": "about", "locale": "es"}).json()
    assert localized["title"] == "Sobre nosotros"
    assert admin_client.get("/api/admin/pages", params={"slug": "nope"}).status_code == 404

def test_public_listing_and_legacy_layout(client, data_dir):
    write_document(data_dir, "pages", {
        "home": {"id": "1", "title": {"es": "Inicio", "en": "Home"}},
        "contact": {"id": "2", "title": "Contacto", "slug": "contact"},
    })
    pages = client.get("/api/pages", params={"locale": "en"}).json()
    assert {p["slug"]: p["title"] for p in pages} == {"home": "Home", "contact": "Contacto"}
    assert client.get("/api/pages/home").json()["title"] == "Inicio"
