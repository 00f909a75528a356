from __future__ import annotations
import os
from pydantic import BaseModel

class Settings(BaseModel):
    environment: str = os.getenv("ENVIRONMENT", "dev")
    app_name: str = os.getenv("APP_NAME", "codesync-api")
    app_display_name: str = os.getenv("APP_DISPLAY_NAME", "CodeSync Arena")
    app_version: str = os.getenv("APP_VERSION", "0.1.0")
    git_sha: str = os.getenv("GIT_SHA", "dev")
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "5000"))
    cors_origins: list[str] = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Auth can be switched off for a demo deployment; protected routes then answer 501
    auth_enabled: bool = os.getenv("AUTH_ENABLED", "1") == "1"

    # In-memory store bootstrap
    seed_demo: bool = os.getenv("SEED_DEMO", "1") == "1"

settings = Settings()
