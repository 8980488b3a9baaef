from typing import Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from core.dependencies import get_translation_context, require_admin
from core.exceptions import validation_error
from core.i18n import TranslationContext, is_valid_locale
from models.translation import TranslationUpdate
from services import translation_service
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("Translation_Route")

router = APIRouter(prefix="/api/translations", tags=["Translations"])
admin_router = APIRouter(prefix="/api/admin/translations", tags=["Admin Translations"], dependencies=[Depends(require_admin)])

def _checked_locale(locale: Optional[str]) -> str:
    locale = locale or settings.DEFAULT_LOCALE
    if not is_valid_locale(locale):
        raise validation_error({"locale": ["Invalid locale code"]})
    return locale

@router.get("")
async def api_get_translations(locale: Optional[str] = Query(None)):
    locale = _checked_locale(locale)
    try:
        return await translation_service.get_translations(locale)
    except Exception:
        logger.exception(f"Error loading translations for {locale}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

@router.get("/lookup")
async def api_lookup_translation(
    key: str = Query(..., min_length=1),
    context: TranslationContext = Depends(get_translation_context),
):
    return {"key": key, "value": context.t(key), "locale": context.locale}

@admin_router.get("")
async def api_admin_get_translations(locale: Optional[str] = Query(None)):
    locale = _checked_locale(locale)
    try:
        return {
            "locale": locale,
            "locales": await translation_service.list_locales(),
            "translations": await translation_service.get_locale_table(locale),
        }
    except Exception:
        logger.exception(f"Error loading translations for {locale}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

@admin_router.put("")
async def api_admin_upsert_translations(payload: TranslationUpdate = Body(...)):
    logger.info(f"Upserting {len(payload.translations)} keys for {payload.locale}")
    try:
        table = await translation_service.upsert_translations(payload.locale, payload.translations)
        return {"success": True, "message": "Translations updated successfully", "count": len(table)}
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error updating translations")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

@admin_router.delete("")
async def api_admin_delete_translation(key: str = Query(..., min_length=1)):
    logger.info(f"Deleting translation key {key}")
    try:
        removed = await translation_service.delete_key(key)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error deleting translation key")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")
    if removed == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Translation key not found")
    return {"success": True, "key": key, "locales": removed}
