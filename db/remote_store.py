# db/remote_store.py
"""
Remote table accessors for the content backend.
Each function is a pass-through to one motor collection and returns plain
dicts with the Mongo `_id` stripped, so services can treat rows exactly like
entries of the JSON documents.
"""
from datetime import datetime
from typing import Dict, List, Optional
from db.db_operation import mongo_conn
from utils.logger import get_logger

logger = get_logger("Remote_Store")

NO_ID = {"_id": 0}

# Pages

async def list_pages() -> List[dict]:
    cursor = mongo_conn.pages_collection.find({}, NO_ID).sort("slug", 1)
    return await cursor.to_list(length=None)

async def find_page(query: dict) -> Optional[dict]:
    return await mongo_conn.pages_collection.find_one(query, NO_ID)

async def insert_page(doc: dict) -> dict:
    await mongo_conn.pages_collection.insert_one(dict(doc))
    logger.info(f"Page row inserted: {doc['id']}")
    return doc

async def replace_page(page_id: str, doc: dict) -> bool:
    result = await mongo_conn.pages_collection.replace_one({"id": page_id}, dict(doc))
    return result.matched_count > 0

async def delete_page(page_id: str) -> bool:
    result = await mongo_conn.pages_collection.delete_one({"id": page_id})
    return result.deleted_count > 0

# Settings (singleton row)

async def get_settings() -> Optional[dict]:
    return await mongo_conn.settings_collection.find_one({}, NO_ID)

async def upsert_settings(doc: dict) -> dict:
    await mongo_conn.settings_collection.replace_one({"id": doc["id"]}, dict(doc), upsert=True)
    logger.info(f"Settings row upserted: {doc['id']}")
    return doc

# Gallery

async def list_gallery_images(tag: Optional[str] = None) -> List[dict]:
    query = {"tags": tag} if tag else {}
    cursor = mongo_conn.gallery_collection.find(query, NO_ID).sort("createdAt", -1)
    return await cursor.to_list(length=None)

async def find_gallery_image(image_id: str) -> Optional[dict]:
    return await mongo_conn.gallery_collection.find_one({"id": image_id}, NO_ID)

async def insert_gallery_image(doc: dict) -> dict:
    await mongo_conn.gallery_collection.insert_one(dict(doc))
    logger.info(f"Gallery row inserted: {doc['id']}")
    return doc

async def delete_gallery_image(image_id: str) -> bool:
    result = await mongo_conn.gallery_collection.delete_one({"id": image_id})
    return result.deleted_count > 0

# Translations: one row per (locale, key)

async def get_translations(locale: str) -> Dict[str, str]:
    cursor = mongo_conn.translations_collection.find({"locale": locale}, NO_ID)
    rows = await cursor.to_list(length=None)
    return {row["key"]: row["value"] for row in rows}

async def upsert_translations(locale: str, mapping: Dict[str, str]) -> int:
    now = datetime.utcnow()
    for key, value in mapping.items():
        await mongo_conn.translations_collection.update_one(
            {"locale": locale, "key": key},
            {"$set": {"value": value, "updatedAt": now}},
            upsert=True,
        )
    logger.info(f"Upserted {len(mapping)} translation rows for locale {locale}")
    return len(mapping)

async def delete_translation_key(key: str) -> int:
    result = await mongo_conn.translations_collection.delete_many({"key": key})
    return result.deleted_count

async def list_translation_locales() -> List[str]:
    return sorted(await mongo_conn.translations_collection.distinct("locale"))
