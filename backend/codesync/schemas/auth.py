from __future__ import annotations
from pydantic import BaseModel, EmailStr, Field

class SignupRequest(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)

class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

class UserPublic(BaseModel):
    id: str
    username: str
    email: EmailStr

class AuthPayload(BaseModel):
    token: str
    user: UserPublic
