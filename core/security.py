import secrets
from typing import Optional
from fastapi import Response
from settings.config import settings
from utils.documents import get_data
from utils.hash import verify_password
from utils.logger import get_logger

logger = get_logger("Security_Utils")

ADMIN_DOCUMENT = "admin"

def _same(a: str, b: str) -> bool:
    return secrets.compare_digest(a.encode("utf-8"), b.encode("utf-8"))

def _load_credentials() -> dict:
    credentials = get_data(ADMIN_DOCUMENT, default={})
    if not isinstance(credentials, dict):
        logger.error("Admin credentials document has an unexpected shape")
        return {}
    return credentials

def get_admin_username() -> Optional[str]:
    username = _load_credentials().get("username")
    return username if isinstance(username, str) and username else None

def authenticate_admin(username: str, password: str) -> bool:
    """
    Compare submitted credentials with the stored admin pair.
    A `password_hash` (bcrypt) is preferred; a legacy plaintext `password`
    is still accepted but flagged in the log.
    """
    credentials = _load_credentials()
    stored_username = get_admin_username()
    if not stored_username:
        logger.error("Admin credentials are not configured")
        return False
    if not _same(username, stored_username):
        logger.warning("Login failed: unknown username")
        return False

    password_hash = credentials.get("password_hash")
    if isinstance(password_hash, str) and password_hash:
        return verify_password(password, password_hash)

    stored_password = credentials.get("password")
    if not isinstance(stored_password, str) or not stored_password:
        logger.error("Admin credentials have no password set")
        return False
    logger.warning("Admin password is stored in plaintext, run scripts.seed_admin to hash it")
    return _same(password, stored_password)

def set_session_cookie(response: Response, token: str) -> None:
    max_age = settings.SESSION_EXPIRE_HOURS * 3600
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=max_age,
        expires=max_age,
        path="/",
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
    )

def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
    )
