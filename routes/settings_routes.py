from fastapi import APIRouter, Body, Depends, HTTPException, status
from core.dependencies import require_admin
from core.i18n import get_request_locale
from models.settings import SettingsUpdate
from services.settings_service import get_settings, localize_settings, update_settings
from utils.logger import get_logger

logger = get_logger("Settings_Route")

router = APIRouter(prefix="/api/settings", tags=["Settings"])
admin_router = APIRouter(prefix="/api/admin/settings", tags=["Admin Settings"], dependencies=[Depends(require_admin)])

async def _require_settings() -> dict:
    try:
        doc = await get_settings()
    except Exception:
        logger.exception("Error reading settings")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")
    if not doc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Settings not found")
    return doc

@router.get("")
async def api_get_settings(locale: str = Depends(get_request_locale)):
    return localize_settings(await _require_settings(), locale)

@admin_router.get("")
async def api_admin_get_settings():
    return await _require_settings()

@admin_router.put("")
async def api_admin_update_settings(payload: SettingsUpdate = Body(...)):
    logger.info(f"Updating settings {payload.id}")
    try:
        updated = await update_settings(payload)
        return {"success": True, "data": updated}
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error updating settings")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")
