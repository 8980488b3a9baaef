from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pymongo.errors import PyMongoError
from settings.config import settings
from db.db_operation import create_indexes
from utils.logger import get_logger
from routes import auth, drinks_routes, gallery_routes, menu_routes, page_routes, settings_routes, translation_routes
from core.exceptions import (
    AppException,
    app_exception_handler,
    database_exception_handler,
    global_exception_handler,
    request_validation_exception_handler,
)
from core.middleware import RequestContextMiddleware

logger = get_logger("main")

app = FastAPI(title=settings.PROJECT_NAME, version="1.0.0")

@app.get("/")
async def health_check():
    logger.info("Health check is successful")
    return {
        "status": "ok",
        "app": settings.PROJECT_NAME,
        "message": "FastAPI is running"
    }

@app.on_event("startup")
async def startup_event():
    logger.info(f"Content backend: {settings.CONTENT_BACKEND}, data dir: {settings.DATA_DIR}")
    await create_indexes()

app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
app.add_exception_handler(PyMongoError, database_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.include_router(auth.router)
app.include_router(menu_routes.router)
app.include_router(menu_routes.admin_router)
app.include_router(drinks_routes.router)
app.include_router(drinks_routes.public_router)
app.include_router(drinks_routes.admin_router)
app.include_router(page_routes.router)
app.include_router(page_routes.admin_router)
app.include_router(settings_routes.router)
app.include_router(settings_routes.admin_router)
app.include_router(gallery_routes.router)
app.include_router(gallery_routes.admin_router)
app.include_router(translation_routes.router)
app.include_router(translation_routes.admin_router)

app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")
