import json
from io import BytesIO
from types import SimpleNamespace
import pytest
from fastapi.testclient import TestClient
from PIL import Image
from pymongo.errors import DuplicateKeyError
from db import remote_store
from main import app
from settings.config import settings

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"

@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    directory = tmp_path / "data"
    directory.mkdir()
    monkeypatch.setattr(settings, "DATA_DIR", str(directory))
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path / "uploads"))
    monkeypatch.setattr(settings, "CONTENT_BACKEND", "json")
    return directory

def write_document(data_dir, name, value):
    path = data_dir / f"{name}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(value), encoding="utf-8")
    return path

def read_document(data_dir, name):
    return json.loads((data_dir / f"{name}.json").read_text(encoding="utf-8"))

@pytest.fixture
def client(data_dir):
    return TestClient(app)

@pytest.fixture
def admin_credentials(data_dir):
    write_document(data_dir, "admin", {"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    return ADMIN_USERNAME, ADMIN_PASSWORD

@pytest.fixture
def admin_client(client, admin_credentials):
    response = client.post("/api/admin/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client

@pytest.fixture
def sample_menu():
    return {
        "categories": [
            {"id": "starters", "name": {"es": "Entrantes", "en": "Starters"}, "slug": "starters"},
            {"id": "mains", "name": {"es": "Principales", "en": "Mains"}, "slug": "mains"},
        ],
        "items": [
            {"id": "croquetas", "name": {"es": "Croquetas", "en": "Croquettes"}, "price": "9,50 €", "categoryId": "starters"},
            {"id": "arroz", "name": "Arroz negro", "price": "18,00 €", "categoryId": "mains", "image": "/images/arroz.jpg"},
        ],
    }

def make_image_bytes(width=64, height=32, fmt="PNG", color=(200, 30, 30)):
    buf = BytesIO()
    Image.new("RGB", (width, height), color).save(buf, format=fmt)
    return buf.getvalue()

# In-memory stand-in for the motor collections used by db.remote_store

def _matches(doc, query):
    for key, expected in (query or {}).items():
        value = doc.get(key)
        if isinstance(value, list) and not isinstance(expected, list):
            if expected not in value:
                return False
        elif value != expected:
            return False
    return True

def _public(doc):
    return {k: v for k, v in doc.items() if k != "_id"}

class FakeCursor:
    def __init__(self, docs):
        self.docs = docs

    def sort(self, key, direction=1):
        self.docs = sorted(self.docs, key=lambda d: d.get(key) or "", reverse=direction == -1)
        return self

    async def to_list(self, length=None):
        return self.docs if length is None else self.docs[:length]

class FakeCollection:
    def __init__(self, unique=()):
        self.docs = []
        self.unique = unique

    def _check_unique(self, doc, ignore=None):
        for fields in self.unique:
            for other in self.docs:
                if other is ignore:
                    continue
                if all(other.get(f) == doc.get(f) for f in fields):
                    raise DuplicateKeyError(f"duplicate key on {fields}")

    async def find_one(self, query=None, projection=None):
        doc = next((d for d in self.docs if _matches(d, query)), None)
        return _public(doc) if doc else None

    def find(self, query=None, projection=None):
        return FakeCursor([_public(d) for d in self.docs if _matches(d, query)])

    async def insert_one(self, doc):
        self._check_unique(doc)
        self.docs.append({**doc, "_id": len(self.docs) + 1})
        return SimpleNamespace(inserted_id=len(self.docs))

    async def replace_one(self, query, doc, upsert=False):
        current = next((d for d in self.docs if _matches(d, query)), None)
        if current is None:
            if upsert:
                await self.insert_one(doc)
            return SimpleNamespace(matched_count=0)
        self._check_unique(doc, ignore=current)
        self.docs[self.docs.index(current)] = {**doc, "_id": current["_id"]}
        return SimpleNamespace(matched_count=1)

    async def update_one(self, query, update, upsert=False):
        current = next((d for d in self.docs if _matches(d, query)), None)
        if current is None:
            if upsert:
                await self.insert_one({**query, **update.get("$set", {})})
            return SimpleNamespace(matched_count=0)
        current.update(update.get("$set", {}))
        return SimpleNamespace(matched_count=1)

    async def delete_one(self, query):
        current = next((d for d in self.docs if _matches(d, query)), None)
        if current is None:
            return SimpleNamespace(deleted_count=0)
        self.docs.remove(current)
        return SimpleNamespace(deleted_count=1)

    async def delete_many(self, query):
        matched = [d for d in self.docs if _matches(d, query)]
        for d in matched:
            self.docs.remove(d)
        return SimpleNamespace(deleted_count=len(matched))

    async def distinct(self, key):
        return list({d.get(key) for d in self.docs if key in d})

@pytest.fixture
def fake_mongo(data_dir, monkeypatch):
    conn = SimpleNamespace(
        pages_collection=FakeCollection(unique=[("id",), ("slug",)]),
        settings_collection=FakeCollection(unique=[("id",)]),
        gallery_collection=FakeCollection(unique=[("id",)]),
        translations_collection=FakeCollection(unique=[("locale", "key")]),
    )
    monkeypatch.setattr(remote_store, "mongo_conn", conn)
    monkeypatch.setattr(settings, "CONTENT_BACKEND", "mongo")
    return conn
