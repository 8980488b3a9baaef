# services/catalog_service.py
"""
Menu and beverage catalogs.
Both live in a JSON document shaped {"categories": [...], "items": [...]} and
share the same rules: every item's categoryId must name a category of the same
document, and writes always replace the whole document.
"""
import copy
from datetime import datetime
from typing import List, Optional
from uuid import uuid4
from pydantic import ValidationError
from core.exceptions import AppException, format_validation_errors, invalid_items_error, storage_error, validation_error
from core.i18n import get_localized_value, merge_localized
from models.menu import CatalogDocument, CategoryCreate, CategoryUpdate, ItemCreate, ItemUpdate
from settings.config import settings
from utils.documents import document_exists, get_data, save_data
from utils.logger import get_logger

logger = get_logger("Catalog_Service")

CATALOGS = ("menu", "beverages")
DEFAULT_IMAGE_SIZE = {"width": 800, "height": 600}

def _check_catalog(name: str):
    if name not in CATALOGS:
        raise ValueError(f"Unknown catalog: {name}")

def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"

def find_invalid_items(categories: List[dict], items: List[dict]) -> List[str]:
    """Ids of items whose categoryId is not one of the given categories."""
    category_ids = {c.get("id") for c in categories}
    return [item.get("id") for item in items if item.get("categoryId") not in category_ids]

def _load(name: str) -> dict:
    _check_catalog(name)
    doc = get_data(name)
    if not isinstance(doc, dict):
        logger.error(f"Catalog '{name}' has an unexpected shape, treating it as empty")
        return {"categories": [], "items": []}
    doc.setdefault("categories", [])
    doc.setdefault("items", [])
    return doc

def _store(name: str, doc: dict):
    if not save_data(name, doc):
        raise storage_error(name)

# Whole-document operations

async def get_catalog(name: str) -> dict:
    return _load(name)

def _validated_document(body: dict) -> dict:
    """
    Check the shape and the category references, then hand back the body as sent
    so unknown keys, nulls and number types survive the round trip.
    """
    try:
        CatalogDocument.model_validate(body)
    except ValidationError as e:
        raise validation_error(format_validation_errors(e.errors()))
    doc = copy.deepcopy(body)
    invalid = find_invalid_items(doc["categories"], doc["items"])
    if invalid:
        logger.warning(f"Rejected catalog update, items with unknown categories: {invalid}")
        raise invalid_items_error(invalid)
    return doc

async def replace_catalog(name: str, body: dict) -> dict:
    """Bulk update: validate the category references, then overwrite the document."""
    _check_catalog(name)
    doc = _validated_document(body)
    _store(name, doc)
    logger.info(f"Catalog '{name}' replaced: {len(doc['categories'])} categories, {len(doc['items'])} items")
    return doc

async def create_catalog(name: str, body: dict) -> dict:
    """Write the initial document; refuses to overwrite an existing one."""
    _check_catalog(name)
    if document_exists(name):
        raise AppException(400, f"The {name} document already exists")
    doc = _validated_document(body)
    _store(name, doc)
    logger.info(f"Catalog '{name}' created")
    return doc

# Localized read model

def _localized_image(image) -> Optional[dict]:
    if not image:
        return None
    if isinstance(image, str):
        return {"url": image, **DEFAULT_IMAGE_SIZE}
    return {
        "url": image.get("url", ""),
        "width": image.get("width") or DEFAULT_IMAGE_SIZE["width"],
        "height": image.get("height") or DEFAULT_IMAGE_SIZE["height"],
    }

def localize_category(category: dict, locale: str) -> dict:
    return {
        "id": category.get("id"),
        "name": get_localized_value(category.get("name"), locale),
        "slug": category.get("slug"),
        "description": get_localized_value(category.get("description"), locale) or None,
    }

def localize_item(item: dict, locale: str) -> dict:
    return {
        "id": item.get("id"),
        "name": get_localized_value(item.get("name"), locale),
        "description": get_localized_value(item.get("description"), locale) or None,
        "price": item.get("price"),
        "categoryId": item.get("categoryId"),
        "image": _localized_image(item.get("image")),
    }

async def get_localized_catalog(name: str, locale: str, type_: Optional[str] = None, category_id: Optional[str] = None):
    doc = _load(name)
    categories = [localize_category(c, locale) for c in doc["categories"]]
    items = [localize_item(i, locale) for i in doc["items"]
             if not category_id or i.get("categoryId") == category_id]
    if type_ == "categories":
        return categories
    if type_ == "items":
        return items
    return {"categories": categories, "items": items}

# Entity operations used by the admin editor

def _find(entries: List[dict], entry_id: str) -> Optional[dict]:
    return next((e for e in entries if e.get("id") == entry_id), None)

async def add_category(name: str, payload: CategoryCreate) -> dict:
    doc = _load(name)
    locale = payload.locale or settings.DEFAULT_LOCALE
    if any(c.get("slug") == payload.slug for c in doc["categories"]):
        raise validation_error({"slug": ["Slug already in use"]})
    category = {
        "id": _new_id("category"),
        "name": {locale: payload.name},
        "slug": payload.slug,
    }
    if payload.description:
        category["description"] = {locale: payload.description}
    doc["categories"].append(category)
    _store(name, doc)
    logger.info(f"Category {category['id']} added to '{name}'")
    return category

async def add_item(name: str, payload: ItemCreate) -> dict:
    doc = _load(name)
    locale = payload.locale or settings.DEFAULT_LOCALE
    if not _find(doc["categories"], payload.categoryId):
        raise validation_error({"categoryId": ["Unknown category"]})
    item = {
        "id": _new_id("item"),
        "name": {locale: payload.name},
        "price": payload.price,
        "categoryId": payload.categoryId,
    }
    if payload.description:
        item["description"] = {locale: payload.description}
    if payload.image is not None:
        item["image"] = payload.image if isinstance(payload.image, str) else payload.image.model_dump(exclude_none=True)
    doc["items"].append(item)
    _store(name, doc)
    logger.info(f"Item {item['id']} added to '{name}'")
    return item

async def update_category(name: str, payload: CategoryUpdate) -> dict:
    doc = _load(name)
    category = _find(doc["categories"], payload.id)
    if category is None:
        raise ValueError("Category not found")
    locale = payload.locale or settings.DEFAULT_LOCALE
    if payload.slug is not None:
        if any(c.get("slug") == payload.slug and c.get("id") != payload.id for c in doc["categories"]):
            raise validation_error({"slug": ["Slug already in use"]})
        category["slug"] = payload.slug
    if payload.name is not None:
        category["name"] = merge_localized(category.get("name"), locale, payload.name)
    if payload.description is not None:
        category["description"] = merge_localized(category.get("description"), locale, payload.description)
    category["updatedAt"] = datetime.utcnow().isoformat()
    _store(name, doc)
    logger.info(f"Category {payload.id} updated in '{name}'")
    return category

async def update_item(name: str, payload: ItemUpdate) -> dict:
    doc = _load(name)
    item = _find(doc["items"], payload.id)
    if item is None:
        raise ValueError("Item not found")
    locale = payload.locale or settings.DEFAULT_LOCALE
    if payload.categoryId is not None:
        if not _find(doc["categories"], payload.categoryId):
            raise validation_error({"categoryId": ["Unknown category"]})
        item["categoryId"] = payload.categoryId
    if payload.name is not None:
        item["name"] = merge_localized(item.get("name"), locale, payload.name)
    if payload.description is not None:
        item["description"] = merge_localized(item.get("description"), locale, payload.description)
    if payload.price is not None:
        item["price"] = payload.price
    if payload.image is not None:
        item["image"] = payload.image if isinstance(payload.image, str) else payload.image.model_dump(exclude_none=True)
    item["updatedAt"] = datetime.utcnow().isoformat()
    _store(name, doc)
    logger.info(f"Item {payload.id} updated in '{name}'")
    return item

async def delete_category(name: str, category_id: str) -> dict:
    doc = _load(name)
    if not _find(doc["categories"], category_id):
        raise ValueError("Category not found")
    dependents = [i.get("id") for i in doc["items"] if i.get("categoryId") == category_id]
    if dependents:
        raise invalid_items_error(dependents, detail="Category still has items")
    doc["categories"] = [c for c in doc["categories"] if c.get("id") != category_id]
    _store(name, doc)
    logger.info(f"Category {category_id} deleted from '{name}'")
    return {"message": "deleted", "id": category_id}

async def delete_item(name: str, item_id: str) -> dict:
    doc = _load(name)
    if not _find(doc["items"], item_id):
        raise ValueError("Item not found")
    doc["items"] = [i for i in doc["items"] if i.get("id") != item_id]
    _store(name, doc)
    logger.info(f"Item {item_id} deleted from '{name}'")
    return {"message": "deleted", "id": item_id}
