from typing import Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, status
from core.dependencies import require_admin
from core.i18n import get_request_locale, resolve_locale
from models.page import PageCreate, PageUpdate
from services import page_service
from utils.logger import get_logger

logger = get_logger("Page_Route")

router = APIRouter(prefix="/api/pages", tags=["Pages"])
admin_router = APIRouter(prefix="/api/admin/pages", tags=["Admin Pages"], dependencies=[Depends(require_admin)])

PAGE_NOT_FOUND = "Page not found"

# Public

@router.get("")
async def api_list_pages(locale: str = Depends(get_request_locale)):
    try:
        pages = await page_service.list_pages()
        return [page_service.page_summary(p, locale) for p in pages]
    except Exception:
        logger.exception("Error listing pages")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

@router.get("/{slug}")
async def api_get_page(slug: str = Path(...), locale: str = Depends(get_request_locale)):
    try:
        page = await page_service.get_page_by_slug(slug)
    except Exception:
        logger.exception(f"Error fetching page {slug}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")
    if page is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PAGE_NOT_FOUND)
    return page_service.localize_page(page, locale)

# Admin

@admin_router.get("")
async def api_admin_get_pages(slug: Optional[str] = Query(None), locale: Optional[str] = Query(None)):
    """All pages, or the page with `slug`. Raw per-locale fields unless `locale` is given."""
    try:
        if slug:
            page = await page_service.get_page_by_slug(slug)
            if page is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PAGE_NOT_FOUND)
            return page_service.localize_page(page, resolve_locale(locale)) if locale else page
        pages = await page_service.list_pages()
        if locale:
            return [page_service.localize_page(p, resolve_locale(locale)) for p in pages]
        return pages
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error fetching pages")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

@admin_router.post("", status_code=status.HTTP_201_CREATED)
async def api_admin_create_page(payload: PageCreate = Body(...)):
    logger.info(f"Creating page {payload.slug}")
    try:
        return await page_service.create_page(payload)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error creating page")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

@admin_router.put("")
async def api_admin_update_page(payload: PageUpdate = Body(...)):
    logger.info(f"Updating page {payload.id}")
    try:
        return await page_service.update_page(payload)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error updating page")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

@admin_router.delete("")
async def api_admin_delete_page(id: str = Query(..., min_length=1)):
    logger.info(f"Deleting page {id}")
    try:
        res = await page_service.delete_page(id)
        return {"success": True, **res}
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error deleting page")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")
