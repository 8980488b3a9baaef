from fastapi import Depends, HTTPException, Request, status
from core.i18n import TranslationContext, get_request_locale
from core.security import get_admin_username
from services.translation_service import get_translations
from settings.config import settings
from utils.jwt_handler import decode_session_token
from utils.logger import get_logger

logger = get_logger("Dependencies")

def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized"
    )

async def require_admin(request: Request) -> str:
    """
    Gate for admin endpoints.
    Reads the session cookie, validates the signed token and checks that its
    subject is still the configured admin. Returns the admin username.
    """
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        logger.info(f"No session cookie on {request.method} {request.url.path}")
        raise _unauthorized()
    try:
        payload = decode_session_token(token)
    except ValueError:
        raise _unauthorized()

    username = payload["sub"]
    if username != get_admin_username():
        logger.warning("Session subject no longer matches the stored admin")
        raise _unauthorized()
    return username

async def get_translation_context(locale: str = Depends(get_request_locale)) -> TranslationContext:
    translations = await get_translations(locale)
    logger.debug(f"Translation context built for {locale} with {len(translations)} keys")
    return TranslationContext(locale, translations)
