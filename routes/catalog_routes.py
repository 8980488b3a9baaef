from typing import Literal, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from pydantic import TypeAdapter, ValidationError
from core.dependencies import require_admin
from core.exceptions import format_validation_errors, validation_error
from core.i18n import resolve_locale
from models.menu import CatalogEntityCreate, CatalogEntityUpdate, CategoryCreate, CategoryUpdate
from services import catalog_service
from utils.logger import get_logger

logger = get_logger("Catalog_Route")

LISTS = {"category": "categories", "item": "items"}

create_adapter = TypeAdapter(CatalogEntityCreate)
update_adapter = TypeAdapter(CatalogEntityUpdate)

def _parse(adapter: TypeAdapter, body: dict):
    try:
        return adapter.validate_python(body)
    except ValidationError as e:
        raise validation_error(format_validation_errors(e.errors()))

def build_admin_catalog_router(catalog: str, prefix: str, tag: str) -> APIRouter:
    """
    Entity-level editor for one catalog document (menu or beverages).
    `type` selects categories or items: in the body for POST/PUT, in the query for GET/DELETE.
    """
    router = APIRouter(prefix=prefix, tags=[tag], dependencies=[Depends(require_admin)])

    @router.get("")
    async def api_admin_get_catalog(
        type: Optional[Literal["category", "item"]] = Query(None),
        categoryId: Optional[str] = Query(None),
        locale: Optional[str] = Query(None),
    ):
        logger.info(f"Admin {catalog} fetch type={type} categoryId={categoryId}")
        try:
            data = await catalog_service.get_localized_catalog(
                catalog, resolve_locale(locale), LISTS.get(type), categoryId
            )
            return {"success": True, "data": data}
        except Exception:
            logger.exception(f"Error fetching {catalog}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def api_admin_create_entry(body: dict = Body(...)):
        payload = _parse(create_adapter, body)
        try:
            if isinstance(payload, CategoryCreate):
                entry = await catalog_service.add_category(catalog, payload)
            else:
                entry = await catalog_service.add_item(catalog, payload)
            return {"success": True, "data": entry}
        except HTTPException:
            raise
        except Exception:
            logger.exception(f"Error creating {catalog} {payload.type}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

    @router.put("")
    async def api_admin_update_entry(body: dict = Body(...)):
        payload = _parse(update_adapter, body)
        try:
            if isinstance(payload, CategoryUpdate):
                entry = await catalog_service.update_category(catalog, payload)
            else:
                entry = await catalog_service.update_item(catalog, payload)
            return {"success": True, "data": entry}
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        except HTTPException:
            raise
        except Exception:
            logger.exception(f"Error updating {catalog} {payload.type}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

    @router.delete("")
    async def api_admin_delete_entry(
        id: str = Query(..., min_length=1),
        type: Literal["category", "item"] = Query(...),
    ):
        try:
            if type == "category":
                res = await catalog_service.delete_category(catalog, id)
            else:
                res = await catalog_service.delete_item(catalog, id)
            return {"success": True, **res}
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        except HTTPException:
            raise
        except Exception:
            logger.exception(f"Error deleting {catalog} {type}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")

    return router
