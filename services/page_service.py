from datetime import datetime
from typing import List, Optional
from uuid import uuid4
from pymongo.errors import DuplicateKeyError
from core.exceptions import storage_error, validation_error
from core.i18n import get_localized_value, merge_localized
from db import remote_store
from models.page import PageCreate, PageUpdate
from settings.config import settings
from utils.documents import get_data, save_data
from utils.logger import get_logger

logger = get_logger("Page_Service")

DOCUMENT = "pages"

def _slug_taken():
    return validation_error({"slug": ["Slug already in use"]})

def _load_pages() -> List[dict]:
    doc = get_data(DOCUMENT)
    if isinstance(doc, dict):
        # older layout: {"<slug>": {...page...}}
        return [{**page, "slug": page.get("slug", slug)} for slug, page in doc.items()]
    return doc

def _save_pages(pages: List[dict]):
    if not save_data(DOCUMENT, pages):
        raise storage_error(DOCUMENT)

def _seo_dict(seo) -> dict:
    return seo.model_dump(mode="json", exclude_none=True) if seo is not None else {}

async def list_pages() -> List[dict]:
    if settings.remote_enabled:
        return await remote_store.list_pages()
    return _load_pages()

async def get_page_by_slug(slug: str) -> Optional[dict]:
    if settings.remote_enabled:
        return await remote_store.find_page({"slug": slug})
    return next((p for p in _load_pages() if p.get("slug") == slug), None)

async def get_page_by_id(page_id: str) -> Optional[dict]:
    if settings.remote_enabled:
        return await remote_store.find_page({"id": page_id})
    return next((p for p in _load_pages() if p.get("id") == page_id), None)

async def create_page(payload: PageCreate) -> dict:
    locale = payload.locale or settings.DEFAULT_LOCALE
    title = payload.title if isinstance(payload.title, dict) else {locale: payload.title}
    page = {
        "id": str(uuid4()),
        "title": title,
        "slug": payload.slug,
        "content": payload.content,
        "seo": _seo_dict(payload.seo),
        "updatedAt": datetime.utcnow().isoformat(),
    }
    if settings.remote_enabled:
        if await remote_store.find_page({"slug": payload.slug}):
            raise _slug_taken()
        try:
            await remote_store.insert_page(page)
        except DuplicateKeyError:
            raise _slug_taken()
    else:
        pages = _load_pages()
        if any(p.get("slug") == payload.slug for p in pages):
            raise _slug_taken()
        pages.append(page)
        _save_pages(pages)
    logger.info(f"Page created: {page['id']} ({page['slug']})")
    return page

async def update_page(payload: PageUpdate) -> dict:
    """
    Apply the provided fields to an existing page.
    A plain-string title is written into the per-locale title map.
    Raises ValueError if the page does not exist.
    """
    existing = await get_page_by_id(payload.id)
    if existing is None:
        raise ValueError("Page not found")

    if payload.slug is not None and payload.slug != existing.get("slug"):
        other = await get_page_by_slug(payload.slug)
        if other is not None and other.get("id") != payload.id:
            raise _slug_taken()

    locale = payload.locale or settings.DEFAULT_LOCALE
    page = dict(existing)
    if payload.title is not None:
        if isinstance(payload.title, dict):
            page["title"] = payload.title
        else:
            page["title"] = merge_localized(existing.get("title"), locale, payload.title)
    if payload.slug is not None:
        page["slug"] = payload.slug
    if payload.content is not None:
        page["content"] = payload.content
    if payload.seo is not None:
        page["seo"] = _seo_dict(payload.seo)
    page["updatedAt"] = datetime.utcnow().isoformat()

    if settings.remote_enabled:
        try:
            replaced = await remote_store.replace_page(payload.id, page)
        except DuplicateKeyError:
            raise _slug_taken()
        if not replaced:
            raise ValueError("Page not found")
    else:
        pages = [page if p.get("id") == payload.id else p for p in _load_pages()]
        _save_pages(pages)
    logger.info(f"Page updated: {payload.id}")
    return page

async def delete_page(page_id: str) -> dict:
    if settings.remote_enabled:
        if not await remote_store.delete_page(page_id):
            raise ValueError("Page not found")
    else:
        pages = _load_pages()
        remaining = [p for p in pages if p.get("id") != page_id]
        if len(remaining) == len(pages):
            raise ValueError("Page not found")
        _save_pages(remaining)
    logger.info(f"Page deleted: {page_id}")
    return {"message": "deleted", "id": page_id}

def localize_page(page: dict, locale: str) -> dict:
    seo = page.get("seo") or {}
    return {
        "id": page.get("id"),
        "title": get_localized_value(page.get("title"), locale),
        "slug": page.get("slug"),
        "content": page.get("content"),
        "seo": {
            "title": get_localized_value(seo.get("title"), locale),
            "description": get_localized_value(seo.get("description"), locale),
            "keywords": seo.get("keywords", []),
        },
        "updatedAt": page.get("updatedAt"),
    }

def page_summary(page: dict, locale: str) -> dict:
    return {
        "id": page.get("id"),
        "title": get_localized_value(page.get("title"), locale),
        "slug": page.get("slug"),
        "updatedAt": page.get("updatedAt"),
    }
