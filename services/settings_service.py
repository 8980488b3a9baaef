from datetime import datetime
from typing import Optional
from core.exceptions import storage_error
from core.i18n import get_localized_value, merge_localized
from db import remote_store
from models.settings import SettingsUpdate
from settings.config import settings
from utils.documents import get_data, save_data
from utils.logger import get_logger

logger = get_logger("Settings_Service")

DOCUMENT = "settings"
LOCALIZED_FIELDS = ("name", "description")
NESTED_FIELDS = ("contactInfo", "openingHours", "socialMedia")

async def get_settings() -> Optional[dict]:
    if settings.remote_enabled:
        return await remote_store.get_settings()
    doc = get_data(DOCUMENT)
    return doc or None

def _merge(existing: dict, payload: SettingsUpdate) -> dict:
    """
    Fold the fields the client sent into the stored record. An explicit null
    clears the field (or the nested key).
    """
    changes = payload.model_dump(mode="json", exclude_unset=True, exclude={"locale"})
    locale = payload.locale or settings.DEFAULT_LOCALE
    merged = dict(existing)
    for field, value in changes.items():
        if value is None:
            merged.pop(field, None)
        elif field in LOCALIZED_FIELDS and isinstance(value, str):
            merged[field] = merge_localized(existing.get(field), locale, value)
        elif field in NESTED_FIELDS and isinstance(value, dict):
            old = existing.get(field) if isinstance(existing.get(field), dict) else {}
            merged[field] = {k: v for k, v in {**old, **value}.items() if v is not None}
        else:
            merged[field] = value
    contact = changes.get("contactInfo")
    if isinstance(contact, dict) and isinstance(contact.get("address"), str):
        old_contact = existing.get("contactInfo") if isinstance(existing.get("contactInfo"), dict) else {}
        merged["contactInfo"]["address"] = merge_localized(old_contact.get("address"), locale, contact["address"])
    merged["updatedAt"] = datetime.utcnow().isoformat()
    return merged

async def update_settings(payload: SettingsUpdate) -> dict:
    """
    Merge the provided fields into the settings singleton and write it back whole.
    Raises ValueError when the payload targets a different settings record.
    """
    existing = await get_settings() or {}
    if existing.get("id") and existing["id"] != payload.id:
        raise ValueError("Settings not found")

    merged = _merge(existing, payload)
    if settings.remote_enabled:
        await remote_store.upsert_settings(merged)
    elif not save_data(DOCUMENT, merged):
        raise storage_error(DOCUMENT)
    logger.info(f"Settings updated: {payload.id}")
    return merged

def localize_settings(doc: dict, locale: str) -> dict:
    contact = dict(doc.get("contactInfo") or {})
    if "address" in contact:
        contact["address"] = get_localized_value(contact["address"], locale)
    return {
        "id": doc.get("id"),
        "name": get_localized_value(doc.get("name"), locale),
        "description": get_localized_value(doc.get("description"), locale),
        "contactInfo": contact,
        "openingHours": doc.get("openingHours") or {},
        "socialMedia": doc.get("socialMedia") or {},
    }
