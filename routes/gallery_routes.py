from typing import Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from core.dependencies import require_admin
from core.i18n import get_request_locale
from services import gallery_service
from utils.logger import get_logger

logger = get_logger("Gallery_Route")

router = APIRouter(prefix="/api/gallery", tags=["Gallery"])
admin_router = APIRouter(prefix="/api/admin/gallery", tags=["Admin Gallery"], dependencies=[Depends(require_admin)])

@router.get("")
async def api_list_gallery(tag: Optional[str] = Query(None), locale: str = Depends(get_request_locale)):
    try:
        images = await gallery_service.list_images(tag)
        return [gallery_service.localize_image(img, locale) for img in images]
    except Exception:
        logger.exception("Error listing gallery")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

@admin_router.get("")
async def api_admin_list_gallery(tag: Optional[str] = Query(None)):
    try:
        return await gallery_service.list_images(tag)
    except Exception:
        logger.exception("Error listing gallery")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

@admin_router.post("", status_code=status.HTTP_201_CREATED)
async def api_admin_upload_image(
    file: UploadFile = File(...),
    title: str = Form(..., min_length=1),
    description: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    locale: Optional[str] = Form(None),
):
    logger.info(f"Gallery upload: {file.filename} ({file.content_type})")
    try:
        content = await file.read()
        record = await gallery_service.add_image(content, file.content_type, title, description, tags, locale)
        return {"success": True, "data": record}
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error uploading gallery image")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")
    finally:
        await file.close()

@admin_router.delete("")
async def api_admin_delete_image(id: str = Query(..., min_length=1)):
    try:
        res = await gallery_service.delete_image(id)
        return {"success": True, **res}
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error deleting gallery image")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")
