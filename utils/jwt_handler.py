from datetime import datetime, timedelta
from jose import JWTError, jwt
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("JWT_HANDLER")

SESSION_PURPOSE = "admin_session"

def create_session_token(username: str) -> str:
    """
    Creates the signed admin session token stored in the session cookie.
    Lifetime is fixed; there is no refresh.
    """
    logger.info("Session token creation requested")
    now = datetime.utcnow()
    expire = now + timedelta(hours=settings.SESSION_EXPIRE_HOURS)
    to_encode = {"sub": username, "purpose": SESSION_PURPOSE, "iat": now, "exp": expire}
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    logger.info(f"Session token created successfully with expiry {expire}")
    return encoded_jwt

def decode_session_token(token: str) -> dict:
    """
    Decode the session token and return its payload.
    Raises ValueError if it is invalid, expired or not a session token.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning(f"Session token rejected: {e}")
        raise ValueError("Invalid token")
    if payload.get("purpose") != SESSION_PURPOSE or not payload.get("sub"):
        logger.warning("Session token rejected: wrong purpose or missing subject")
        raise ValueError("Invalid token")
    return payload
