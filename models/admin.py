# models/admin.py
from pydantic import BaseModel, Field

# Request payload for the admin login form
class AdminLogin(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

# Response for GET /api/admin/session
class SessionStatus(BaseModel):
    authenticated: bool
    username: str | None = None
