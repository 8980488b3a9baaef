from fastapi import APIRouter, HTTPException, Request, Response, status
from core.dependencies import require_admin
from core.security import authenticate_admin, clear_session_cookie, set_session_cookie
from models.admin import AdminLogin, SessionStatus
from utils.jwt_handler import create_session_token
from utils.logger import get_logger

logger = get_logger("AUTH_ROUTE")

router = APIRouter(prefix="/api/admin", tags=["Authentication"])

@router.post("/login")
async def login(credentials: AdminLogin, response: Response):
    logger.info(f"Login attempt for: {credentials.username}")
    if not authenticate_admin(credentials.username, credentials.password):
        logger.warning(f"Login failed for: {credentials.username}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")

    token = create_session_token(credentials.username)
    set_session_cookie(response, token)
    logger.info(f"Login successful: {credentials.username}")
    return {"success": True}

@router.post("/logout")
async def logout(response: Response):
    clear_session_cookie(response)
    logger.info("Admin logged out")
    return {"success": True}

@router.get("/session", response_model=SessionStatus)
async def session_status(request: Request):
    try:
        username = await require_admin(request)
    except HTTPException:
        return SessionStatus(authenticated=False)
    return SessionStatus(authenticated=True, username=username)
