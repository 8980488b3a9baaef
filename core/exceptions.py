from typing import Dict, List, Optional
from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from utils.logger import get_logger

logger = get_logger("Global_Exception")

GENERIC_ERROR = "Internal server error"

class AppException(HTTPException):
    """HTTPException carrying extra top-level keys for the JSON body."""
    def __init__(self, status_code: int, detail: str, extra: Optional[dict] = None):
        super().__init__(status_code=status_code, detail=detail)
        self.extra = extra or {}

def validation_error(errors: Dict[str, List[str]]) -> AppException:
    return AppException(status.HTTP_400_BAD_REQUEST, "Validation error", extra={"errors": errors})

def invalid_items_error(item_ids: List[str], detail: str = "Items reference unknown categories") -> AppException:
    return AppException(status.HTTP_400_BAD_REQUEST, detail, extra={"invalidItems": item_ids})

def storage_error(name: str) -> AppException:
    # save_data already logged the cause
    return AppException(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to save {name}")

def format_validation_errors(errors) -> Dict[str, List[str]]:
    """Collapse pydantic error dicts into {"field.path": [messages]}."""
    report: Dict[str, List[str]] = {}
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path", "form")]
        field = ".".join(loc) or "__root__"
        report.setdefault(field, []).append(err.get("msg", "Invalid value"))
    return report

async def app_exception_handler(request: Request, exc: AppException):
    if exc.status_code >= 500:
        logger.error(f"{exc.detail} on {request.method} {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail, **exc.extra})

async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = format_validation_errors(exc.errors())
    logger.warning(f"Validation error on {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation error", "errors": errors}
    )

async def database_exception_handler(request: Request, exc: PyMongoError):
    logger.exception(
        "Database error",
        extra={"path": request.url.path}
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": GENERIC_ERROR}
    )

async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled exception",
        extra={"path": request.url.path}
    )
    return JSONResponse(
        status_code=500,
        content={"detail": GENERIC_ERROR}
    )
