import json
import logging
from concurrent.futures import ThreadPoolExecutor
import pytest
from settings.config import settings
from utils.documents import document_exists, document_path, get_data, list_documents, save_data

def test_save_then_get_round_trips_structured_content(data_dir):
    value = {
        "categories": [{"id": "c1", "name": {"es": "Cócteles", "en": "Cocktails"}}],
        "items": [{"id": "i1", "price": "7,00 €", "categoryId": "c1", "tags": [], "flag": None}],
    }
    assert save_data("beverages", value) is True
    assert get_data("beverages") == value

def test_saved_file_is_indented_utf8_json(data_dir):
    save_data("settings", {"name": "Café"})
    text = (data_dir / "settings.json").read_text(encoding="utf-8")
    assert "Café" in text
    assert text.startswith("{\n  ")

def test_missing_document_returns_its_empty_shape(data_dir):
    assert get_data("menu") == {"categories": [], "items": []}
    assert get_data("pages") == []
    assert get_data("translations/fr") == {}
    assert get_data("settings", default={"id": None}) == {"id": None}

def test_default_shapes_are_fresh_copies(data_dir):
    first = get_data("menu")
    first["items"].append({"id": "x"})
    assert get_data("menu") == {"categories": [], "items": []}

def test_corrupt_document_falls_back_and_logs(data_dir, caplog):
    (data_dir / "menu.json").write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="DOCUMENTS"):
        assert get_data("menu") == {"categories": [], "items": []}
    assert "Error reading document 'menu'" in caplog.text

def test_save_failure_returns_false_instead_of_raising(tmp_path, monkeypatch):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("occupied")
    monkeypatch.setattr(settings, "DATA_DIR", str(blocker))
    assert save_data("menu", {"categories": [], "items": []}) is False

def test_last_write_wins(data_dir):
    save_data("gallery", [{"id": "first"}])
    save_data("gallery", [{"id": "second"}])
    assert get_data("gallery") == [{"id": "second"}]
    leftovers = [p.name for p in data_dir.iterdir() if p.suffix == ".tmp"]
    assert leftovers == []

def test_concurrent_writes_leave_one_whole_document(data_dir):
    values = [[{"id": f"image-{n}", "tags": ["x"] * n}] for n in range(16)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda v: save_data("gallery", v), values))
    assert all(results)
    assert get_data("gallery") in values
    leftovers = [p.name for p in data_dir.iterdir() if p.suffix == ".tmp"]
    assert leftovers == []

def test_nested_document_names_and_listing(data_dir):
    save_data("translations/es", {"hello": "hola"})
    save_data("translations/en", {"hello": "hello"})
    assert document_exists("translations/es")
    assert not document_exists("translations/de")
    assert list_documents("translations") == ["translations/en", "translations/es"]
    assert json.loads((data_dir / "translations" / "es.json").read_text(encoding="utf-8")) == {"hello": "hola"}

@pytest.mark.parametrize("name", ["../secrets", "menu.json", "Menu", "a/b/c", ""])
def test_document_names_cannot_escape_data_dir(data_dir, name):
    with pytest.raises(ValueError):
        document_path(name)
