import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from settings.config import settings
from utils.logger import get_logger

logger =  get_logger("Middleware")

LANGUAGE_COOKIE_MAX_AGE = 60 * 60 * 24 * 365

class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Logs every request with its status and duration, and gives first-time
    visitors a language cookie holding the default locale.
    """
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")

        if settings.LANGUAGE_COOKIE_NAME not in request.cookies:
            response.set_cookie(
                key=settings.LANGUAGE_COOKIE_NAME,
                value=settings.DEFAULT_LOCALE,
                max_age=LANGUAGE_COOKIE_MAX_AGE,
                path="/",
                samesite="lax",
            )
        return response
