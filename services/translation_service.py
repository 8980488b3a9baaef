from typing import Dict, List
from core.exceptions import storage_error
from core.i18n import is_valid_locale
from db import remote_store
from settings.config import settings
from utils.documents import document_exists, get_data, list_documents, save_data
from utils.logger import get_logger

logger = get_logger("Translation_Service")

PREFIX = "translations"

def _document(locale: str) -> str:
    if not is_valid_locale(locale):
        raise ValueError(f"Invalid locale: {locale}")
    return f"{PREFIX}/{locale}"

def _load_table(name: str) -> Dict[str, str]:
    table = get_data(name, default={})
    if not isinstance(table, dict):
        logger.error(f"Translation document '{name}' has an unexpected shape, treating it as empty")
        return {}
    return table

async def get_locale_table(locale: str) -> Dict[str, str]:
    """Exact table stored for `locale`, empty when there is none."""
    if settings.remote_enabled:
        return await remote_store.get_translations(locale)
    return _load_table(_document(locale))

async def has_locale(locale: str) -> bool:
    if settings.remote_enabled:
        return bool(await remote_store.get_translations(locale))
    return document_exists(_document(locale))

async def get_translations(locale: str) -> Dict[str, str]:
    """
    Table for `locale`, falling back to the fallback locale's table and then
    to an empty mapping.
    """
    if await has_locale(locale):
        return await get_locale_table(locale)
    if locale != settings.FALLBACK_LOCALE and await has_locale(settings.FALLBACK_LOCALE):
        logger.info(f"No translations for {locale}, using {settings.FALLBACK_LOCALE}")
        return await get_locale_table(settings.FALLBACK_LOCALE)
    logger.warning(f"No translations for {locale} or {settings.FALLBACK_LOCALE}")
    return {}

async def list_locales() -> List[str]:
    if settings.remote_enabled:
        return await remote_store.list_translation_locales()
    return [name.split("/", 1)[1] for name in list_documents(PREFIX)]

async def upsert_translations(locale: str, translations: Dict[str, str]) -> Dict[str, str]:
    """Merge the given keys into the locale's table; other keys are kept."""
    if settings.remote_enabled:
        await remote_store.upsert_translations(locale, translations)
        return await remote_store.get_translations(locale)
    name = _document(locale)
    table = _load_table(name)
    table.update(translations)
    if not save_data(name, table):
        raise storage_error(name)
    logger.info(f"Upserted {len(translations)} keys for locale {locale}")
    return table

async def delete_key(key: str) -> int:
    """Remove `key` from every locale. Returns how many tables contained it."""
    if settings.remote_enabled:
        removed = await remote_store.delete_translation_key(key)
        logger.info(f"Translation key '{key}' removed from {removed} locales")
        return removed
    removed = 0
    for name in list_documents(PREFIX):
        table = _load_table(name)
        if key not in table:
            continue
        del table[key]
        if not save_data(name, table):
            raise storage_error(name)
        removed += 1
    logger.info(f"Translation key '{key}' removed from {removed} locales")
    return removed
