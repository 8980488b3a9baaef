from typing import Literal, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from core.dependencies import require_admin
from core.i18n import resolve_locale
from routes.catalog_routes import build_admin_catalog_router
from services.catalog_service import get_catalog, get_localized_catalog, replace_catalog
from utils.logger import get_logger

logger = get_logger("Menu_Route")
router = APIRouter(prefix="/api/menu", tags=["Menu"])
admin_router = build_admin_catalog_router("menu", "/api/admin/menu", "Admin Menu")

# Public: the whole menu document, or the localized view when a locale is asked for
@router.get("")
async def api_get_menu(
    locale: Optional[str] = Query(None),
    type: Optional[Literal["categories", "items"]] = Query(None),
    categoryId: Optional[str] = Query(None),
):
    try:
        if locale is None and type is None and categoryId is None:
            return await get_catalog("menu")
        return await get_localized_catalog("menu", resolve_locale(locale), type, categoryId)
    except Exception:
        logger.exception("Error reading menu")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

# Admin: bulk replace of categories and items
@router.put("", dependencies=[Depends(require_admin)])
async def api_replace_menu(body: dict = Body(...)):
    logger.info("Menu bulk update requested")
    try:
        await replace_catalog("menu", body)
        return {"success": True, "message": "Menu updated successfully"}
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error updating menu")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")
