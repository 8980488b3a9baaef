# services/gallery_service.py
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from uuid import uuid4
from core.exceptions import storage_error, validation_error
from core.i18n import get_localized_value
from db import remote_store
from settings.config import settings
from utils.documents import get_data, save_data
from utils.images import process_image, write_file
from utils.logger import get_logger

logger = get_logger("Gallery_Service")

DOCUMENT = "gallery"
GALLERY_SUBDIR = "gallery"

def _load_images() -> List[dict]:
    doc = get_data(DOCUMENT)
    if isinstance(doc, dict):
        # older layout: {"images": [...]}
        return list(doc.get("images", []))
    return doc

def _save_images(images: List[dict]):
    if not save_data(DOCUMENT, images):
        raise storage_error(DOCUMENT)

def parse_tags(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [t.strip().lower() for t in raw.split(",") if t.strip()]

async def list_images(tag: Optional[str] = None) -> List[dict]:
    tag = tag.strip().lower() if tag else None
    if settings.remote_enabled:
        return await remote_store.list_gallery_images(tag)
    images = _load_images()
    if tag:
        images = [img for img in images if tag in (img.get("tags") or [])]
    return sorted(images, key=lambda img: img.get("createdAt") or "", reverse=True)

def check_upload(content_type: Optional[str], content: bytes):
    """Raises a 400 validation error for uploads we won't store."""
    if content_type not in settings.ALLOWED_IMAGE_TYPES:
        raise validation_error({"file": [f"Unsupported file type: {content_type}"]})
    if not content:
        raise validation_error({"file": ["File is empty"]})
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise validation_error({"file": [f"File exceeds {settings.MAX_UPLOAD_SIZE} bytes"]})

async def add_image(
    content: bytes,
    content_type: Optional[str],
    title: str,
    description: Optional[str] = None,
    tags: Optional[str] = None,
    locale: Optional[str] = None,
) -> dict:
    check_upload(content_type, content)
    try:
        processed = process_image(content, settings.MAX_IMAGE_WIDTH)
    except ValueError as e:
        raise validation_error({"file": [str(e)]})

    locale = locale or settings.DEFAULT_LOCALE
    image_id = str(uuid4())
    filename = f"{image_id}.{processed.extension}"
    stored_path = write_file(Path(settings.UPLOAD_DIR) / GALLERY_SUBDIR, filename, processed.content)

    record = {
        "id": image_id,
        "title": {locale: title},
        "description": {locale: description} if description else {},
        "image_url": f"{settings.UPLOAD_URL_PREFIX}/{GALLERY_SUBDIR}/{filename}",
        "width": processed.width,
        "height": processed.height,
        "tags": parse_tags(tags),
        "createdAt": datetime.utcnow().isoformat(),
    }
    try:
        if settings.remote_enabled:
            await remote_store.insert_gallery_image(record)
        else:
            images = _load_images()
            images.append(record)
            _save_images(images)
    except Exception:
        logger.error(f"Could not record gallery image {image_id}, removing {stored_path}")
        stored_path.unlink(missing_ok=True)
        raise
    logger.info(f"Gallery image added: {image_id} ({processed.width}x{processed.height})")
    return record

def _remove_stored_file(image_url: Optional[str]):
    prefix = f"{settings.UPLOAD_URL_PREFIX}/"
    if not image_url or not image_url.startswith(prefix):
        return
    upload_root = Path(settings.UPLOAD_DIR).resolve()
    path = (upload_root / image_url[len(prefix):]).resolve()
    if upload_root not in path.parents:
        logger.warning(f"Refusing to delete file outside the upload dir: {image_url}")
        return
    try:
        path.unlink()
    except FileNotFoundError:
        logger.info(f"Stored file already gone: {path}")

async def delete_image(image_id: str) -> dict:
    if settings.remote_enabled:
        record = await remote_store.find_gallery_image(image_id)
        if record is None or not await remote_store.delete_gallery_image(image_id):
            raise ValueError("Image not found")
    else:
        images = _load_images()
        record = next((img for img in images if img.get("id") == image_id), None)
        if record is None:
            raise ValueError("Image not found")
        _save_images([img for img in images if img.get("id") != image_id])
    _remove_stored_file(record.get("image_url"))
    logger.info(f"Gallery image deleted: {image_id}")
    return {"message": "deleted", "id": image_id}

def localize_image(record: dict, locale: str) -> dict:
    return {
        "id": record.get("id"),
        "title": get_localized_value(record.get("title"), locale),
        "description": get_localized_value(record.get("description"), locale),
        "image_url": record.get("image_url") or record.get("image"),
        "width": record.get("width"),
        "height": record.get("height"),
        "tags": record.get("tags") or [],
    }
