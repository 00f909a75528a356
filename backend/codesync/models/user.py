from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone as dt_tz


def new_user_id() -> str:
    return f"user-{uuid.uuid4().hex[:12]}"


@dataclass
class User:
    username: str
    email: str
    password_hash: str
    id: str = field(default_factory=new_user_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(dt_tz.utc))
