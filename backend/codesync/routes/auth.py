from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException
import structlog
from codesync.auth_deps import get_current_user, require_auth_enabled
from codesync.db import Store, get_store
from codesync.models.user import User
from codesync.schemas.auth import SignupRequest, LoginRequest, UserPublic, AuthPayload
from codesync.schemas.common import ApiResponse
from codesync.security import hash_password, verify_password, make_access_token

router = APIRouter(prefix="/api/auth", tags=["auth"])
log = structlog.get_logger()

def _auth_payload(user: User) -> AuthPayload:
    return AuthPayload(
        token=make_access_token(user.id, user.username, user.email),
        user=UserPublic(id=user.id, username=user.username, email=user.email),
    )

@router.post("/signup", status_code=201, response_model=ApiResponse[AuthPayload],
             dependencies=[Depends(require_auth_enabled)])
async def signup(payload: SignupRequest, store: Store = Depends(get_store)):
    if store.find_user_by_email(payload.email):
        raise HTTPException(status_code=409, detail="Email already registered")
    user = User(username=payload.username, email=payload.email, password_hash=hash_password(payload.password))
    store.users.append(user)
    log.info("signup", user_id=user.id)
    return ApiResponse(data=_auth_payload(user))

@router.post("/login", response_model=ApiResponse[AuthPayload], dependencies=[Depends(require_auth_enabled)])
async def login(payload: LoginRequest, store: Store = Depends(get_store)):
    user = store.find_user_by_email(payload.email)
    if not user or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return ApiResponse(data=_auth_payload(user))

@router.get("/me", response_model=ApiResponse[UserPublic])
async def me(user: User = Depends(get_current_user)):
    return ApiResponse(data=UserPublic(id=user.id, username=user.username, email=user.email))
