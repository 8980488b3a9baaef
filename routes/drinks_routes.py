from typing import Literal, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from core.dependencies import require_admin
from core.i18n import get_request_locale
from routes.catalog_routes import build_admin_catalog_router
from services.catalog_service import create_catalog, get_catalog, get_localized_catalog, replace_catalog
from utils.logger import get_logger

logger = get_logger("Drinks_Route")

CATALOG = "beverages"

router = APIRouter(prefix="/api/drinks", tags=["Beverages"])
public_router = APIRouter(prefix="/api/beverages", tags=["Beverages"])
admin_router = build_admin_catalog_router(CATALOG, "/api/admin/beverages", "Admin Beverages")

@router.get("")
async def api_get_drinks():
    try:
        return await get_catalog(CATALOG)
    except Exception:
        logger.exception("Error reading beverages")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

@router.put("", dependencies=[Depends(require_admin)])
async def api_replace_drinks(body: dict = Body(...)):
    logger.info("Beverages bulk update requested")
    try:
        await replace_catalog(CATALOG, body)
        return {"success": True, "message": "Beverages updated successfully"}
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error updating beverages")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

# Admin: write the initial beverages document
@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_admin)])
async def api_create_drinks(body: dict = Body(...)):
    try:
        await create_catalog(CATALOG, body)
        return {"success": True, "message": "Beverages created successfully"}
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error creating beverages")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

# Public: localized beverage list for the wine/drinks page
@public_router.get("")
async def api_list_beverages(
    type: Optional[Literal["categories", "items"]] = Query(None),
    categoryId: Optional[str] = Query(None),
    locale: str = Depends(get_request_locale),
):
    try:
        data = await get_localized_catalog(CATALOG, locale, type, categoryId)
        return {"success": True, "data": data}
    except Exception:
        logger.exception("Error listing beverages")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")
