from pathlib import Path
import pytest
from unittest.mock import AsyncMock, MagicMock
from pymongo.errors import PyMongoError
from fastapi.testclient import TestClient
from db.db_operation import create_indexes, mongo_conn
from conftest import make_image_bytes
from main import app
from models.page import PageCreate
from services import page_service, translation_service
from settings.config import settings

@pytest.mark.asyncio
async def test_pages_round_trip_through_remote_rows(fake_mongo, data_dir):
    page = await page_service.create_page(PageCreate(title={"es": "Carta"}, slug="carta"))
    assert fake_mongo.pages_collection.docs[0]["slug"] == "carta"
    # nothing written to the JSON documents
    assert not (data_dir / "pages.json").exists()

    found = await page_service.get_page_by_slug("carta")
    assert found["id"] == page["id"]
    assert "_id" not in found

    await page_service.delete_page(page["id"])
    assert await page_service.get_page_by_slug("carta") is None
    with pytest.raises(ValueError):
        await page_service.delete_page(page["id"])

@pytest.mark.asyncio
async def test_translations_are_rows_per_key(fake_mongo):
    await translation_service.upsert_translations("en", {"nav.home": "Home", "promo": "Offer"})
    await translation_service.upsert_translations("es", {"promo": "Oferta"})
    await translation_service.upsert_translations("en", {"nav.home": "Start"})

    assert await translation_service.get_translations("en") == {"nav.home": "Start", "promo": "Offer"}
    # no Italian rows: English fallback
    assert await translation_service.get_translations("it") == {"nav.home": "Start", "promo": "Offer"}
    assert sorted(await translation_service.list_locales()) == ["en", "es"]

    assert await translation_service.delete_key("promo") == 2
    assert await translation_service.get_translations("es") == {"nav.home": "Start"}

def test_endpoints_use_remote_backend(fake_mongo, admin_credentials):
    client = TestClient(app)
    client.post("/api/admin/login", json={"username": admin_credentials[0], "password": admin_credentials[1]})

    response = client.put("/api/admin/settings", json={"id": "restaurant", "name": "Casa Mar"})
    assert response.status_code == 200
    assert fake_mongo.settings_collection.docs[0]["name"] == {"es": "Casa Mar"}
    assert client.get("/api/settings").json()["name"] == "Casa Mar"

    created = client.post("/api/admin/pages", json={"title": "Carta", "slug": "carta"})
    assert created.status_code == 201
    duplicate = client.post("/api/admin/pages", json={"title": "Otra", "slug": "carta"})
    assert duplicate.status_code == 400
    assert client.get("/api/pages/carta").json()["title"] == "Carta"

def test_database_errors_become_generic_500(fake_mongo):
    fake_mongo.pages_collection.find_one = AsyncMock(side_effect=PyMongoError("connection reset"))
    client = TestClient(app)
    response = client.get("/api/pages/carta")
    assert response.status_code == 500
    assert "connection reset" not in response.text

@pytest.mark.asyncio
async def test_indexes_only_created_for_remote_backend(data_dir, monkeypatch):
    fake_db = MagicMock()
    for name in ("pages_collection", "gallery_collection", "translations_collection"):
        setattr(fake_db, name, MagicMock(create_index=AsyncMock()))
    monkeypatch.setattr("db.db_operation.mongo_conn", fake_db)

    await create_indexes()
    fake_db.pages_collection.create_index.assert_not_called()

    monkeypatch.setattr(settings, "CONTENT_BACKEND", "mongo")
    await create_indexes()
    fake_db.pages_collection.create_index.assert_any_call("slug", unique=True)
    fake_db.translations_collection.create_index.assert_called_once()

def test_mongo_connection_is_lazy(client):
    assert client.get("/").json()["status"] == "ok"
    # the JSON backend never touches the motor client
    assert mongo_conn._client is None

def test_failed_remote_insert_removes_stored_file(fake_mongo, admin_credentials):
    fake_mongo.gallery_collection.insert_one = AsyncMock(side_effect=PyMongoError("write concern"))
    client = TestClient(app)
    client.post("/api/admin/login", json={"username": admin_credentials[0], "password": admin_credentials[1]})
    response = client.post(
        "/api/admin/gallery",
        data={"title": "Terraza"},
        files={"file": ("photo.png", make_image_bytes(16, 16), "image/png")},
    )
    assert response.status_code == 500
    gallery_dir = Path(settings.UPLOAD_DIR) / "gallery"
    assert not gallery_dir.exists() or list(gallery_dir.iterdir()) == []
