import httpx
from httpx import AsyncClient
from fastapi import status
from codesync.config import settings
from codesync.main import app
from codesync.security import decode_token, JWT_SECRET, JWT_ALG
import jwt
import uuid

import pytest

@pytest.mark.asyncio
async def test_signup_login_me():
    # Use unique email and username for each test run
    unique_email = f"test-{uuid.uuid4()}@example.com"
    unique_username = f"user_{uuid.uuid4().hex[:8]}"

    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        # signup
        r = await ac.post("/api/auth/signup", json={"username": unique_username, "email": unique_email, "password": "supersecret"})
        assert r.status_code == status.HTTP_201_CREATED
        body = r.json()
        assert body["success"] is True
        signup_token = body["data"]["token"]
        user = body["data"]["user"]
        assert user["username"] == unique_username
        assert "passwordHash" not in user and "password_hash" not in user
        # login
        r = await ac.post("/api/auth/login", json={"email": unique_email, "password": "supersecret"})
        assert r.status_code == 200
        login_token = r.json()["data"]["token"]
        # both tokens name the same user
        assert decode_token(signup_token)["sub"] == decode_token(login_token)["sub"] == user["id"]
        # me with access token
        me = await ac.get("/api/auth/me", headers={"Authorization": f"Bearer {login_token}"})
        assert me.status_code == 200
        assert me.json()["data"]["email"] == unique_email

@pytest.mark.asyncio
async def test_login_is_case_insensitive_on_email():
    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.post("/api/auth/signup", json={"username": "casey", "email": "Casey@Example.com", "password": "pw"})
        assert r.status_code == 201
        r = await ac.post("/api/auth/login", json={"email": "casey@example.com", "password": "pw"})
        assert r.status_code == 200

@pytest.mark.asyncio
async def test_duplicate_email():
    email = f"duplicate-{uuid.uuid4().hex[:8]}@example.com"
    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        r1 = await ac.post("/api/auth/signup", json={"username": "one", "email": email, "password": "password1"})
        assert r1.status_code == status.HTTP_201_CREATED
        r2 = await ac.post("/api/auth/signup", json={"username": "two", "email": email.upper(), "password": "password2"})
        assert r2.status_code == 409
        body = r2.json()
        assert body["success"] is False
        assert "email" in body["message"].lower()

@pytest.mark.asyncio
async def test_signup_missing_fields():
    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.post("/api/auth/signup", json={"email": "x@example.com"})
        assert r.status_code == 400
        assert r.json() == {"success": False, "message": "Missing required fields"}

@pytest.mark.asyncio
async def test_bad_credentials():
    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.post("/api/auth/login", json={"email": "demo@demo.com", "password": "wrong"})
        assert r.status_code == 401
        r = await ac.post("/api/auth/login", json={"email": "nobody@example.com", "password": "demo123"})
        assert r.status_code == 401

@pytest.mark.asyncio
async def test_seeded_demo_user_can_login():
    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.post("/api/auth/login", json={"email": "demo@demo.com", "password": "demo123"})
        assert r.status_code == 200
        assert r.json()["data"]["user"]["id"] == "user-demo"

@pytest.mark.asyncio
async def test_missing_and_invalid_token():
    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.get("/api/auth/me")
        assert r.status_code == 401
        r = await ac.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert r.status_code == 401
        assert r.json()["message"] == "Invalid token"

@pytest.mark.asyncio
async def test_auth_disabled_returns_501(monkeypatch):
    monkeypatch.setattr(settings, "auth_enabled", False)
    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.post("/api/auth/signup", json={"username": "u", "email": "u@example.com", "password": "pw"})
        assert r.status_code == 501
        r = await ac.post("/api/contests/contest-demo/join")
        assert r.status_code == 501
        assert r.json()["success"] is False
        # public reads keep working
        r = await ac.get("/api/contests")
        assert r.status_code == 200

@pytest.mark.asyncio
async def test_non_access_token_rejected():
    token = jwt.encode({"sub": "user-demo", "type": "refresh"}, JWT_SECRET, algorithm=JWT_ALG)
    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert r.status_code == 401
        assert r.json() == {"success": False, "message": "Wrong token type"}
