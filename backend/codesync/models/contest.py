from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone as dt_tz


@dataclass
class Contest:
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    duration: int  # minutes
    max_participants: int
    id: str = field(default_factory=lambda: f"contest-{uuid.uuid4().hex[:12]}")
    current_participants: int = 0
    problems: list[str] = field(default_factory=list)  # problem ids
    created_by: str = "system"
    created_at: datetime = field(default_factory=lambda: datetime.now(dt_tz.utc))
    # user ids that joined through the API; seeded counts have no backing ids
    participant_ids: set[str] = field(default_factory=set)


@dataclass
class TestCase:
    __test__ = False  # keep pytest from collecting this

    input: str
    output: str
    is_hidden: bool = False


@dataclass
class Problem:
    contest_id: str
    title: str
    description: str
    id: str = field(default_factory=lambda: f"prob-{uuid.uuid4().hex[:12]}")
    input_format: str = ""
    output_format: str = ""
    sample_input: str = ""
    sample_output: str = ""
    time_limit: int = 1000  # ms
    memory_limit: int = 256  # MB
    difficulty: str = "Easy"  # Easy|Medium|Hard
    points: int = 100
    test_cases: list[TestCase] = field(default_factory=list)
