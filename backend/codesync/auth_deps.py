from __future__ import annotations
import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from codesync.config import settings
from codesync.db import Store, get_store
from codesync.security import decode_token
from codesync.models.user import User

security = HTTPBearer(auto_error=False)

def require_auth_enabled() -> None:
    if not settings.auth_enabled:
        raise HTTPException(status_code=501, detail="Auth not available in demo mode")

async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    store: Store = Depends(get_store),
) -> User:
    require_auth_enabled()
    if credentials is None:
        raise HTTPException(status_code=401, detail="Missing token")
    try:
        data = decode_token(credentials.credentials)
    except jwt.PyJWTError:
        raise HTTPException(status_code=401, detail="Invalid token")
    if data.get("type") != "access":
        raise HTTPException(status_code=401, detail="Wrong token type")
    user = store.get_user(data.get("sub"))
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user
