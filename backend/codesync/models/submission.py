from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone as dt_tz


@dataclass
class Submission:
    contest_id: str
    problem_id: str
    user_id: str
    username: str
    code: str
    language: str
    status: str  # 'accepted' | 'wrong_answer'
    score: int
    time_taken: int  # minutes into the contest (simulated)
    test_cases_passed: int
    total_test_cases: int
    execution_time: int  # ms (simulated)
    id: str = field(default_factory=lambda: f"sub-{uuid.uuid4().hex[:12]}")
    submitted_at: datetime = field(default_factory=lambda: datetime.now(dt_tz.utc))
