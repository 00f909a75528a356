from __future__ import annotations
from datetime import datetime, timezone as dt_tz
from typing import List, Literal
from pydantic import Field, field_validator
from codesync.schemas.common import CamelModel
from codesync.services.contest_status import ContestStatus

Difficulty = Literal["Easy", "Medium", "Hard"]

class ContestCreate(CamelModel):
    title: str = Field(min_length=1, max_length=120)
    description: str = Field(min_length=1)
    duration: int = Field(gt=0, description="minutes")
    max_participants: int = Field(gt=0)
    start_time: datetime
    end_time: datetime
    problems: List[str] = Field(default_factory=list, description="problem ids")
    created_by: str | None = None

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, v: str):
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("start_time", "end_time")
    @classmethod
    def assume_utc(cls, v: datetime):
        # naive timestamps from the browser are UTC
        return v.replace(tzinfo=dt_tz.utc) if v.tzinfo is None else v

class ContestPublic(CamelModel):
    id: str
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    duration: int
    status: ContestStatus
    max_participants: int
    current_participants: int
    problems: List[str]
    created_by: str
    created_at: datetime

class JoinResult(CamelModel):
    user_id: str
    contest_id: str
    current_participants: int

class TestCasePublic(CamelModel):
    input: str
    output: str
    is_hidden: bool = False

class ProblemPublic(CamelModel):
    id: str
    contest_id: str
    title: str
    description: str
    input_format: str
    output_format: str
    sample_input: str
    sample_output: str
    time_limit: int
    memory_limit: int
    difficulty: Difficulty
    points: int
    test_cases: List[TestCasePublic]
