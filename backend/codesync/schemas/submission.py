from __future__ import annotations
from datetime import datetime
from typing import Any, Literal
from pydantic import BaseModel, ConfigDict, Field
from codesync.schemas.common import CamelModel

SubmissionStatus = Literal["accepted", "wrong_answer"]


class SubmissionCreate(CamelModel):
    contest_id: str = Field(min_length=1)
    problem_id: str = Field(min_length=1)
    code: str = Field(min_length=1)
    language: str = Field(min_length=1)


class SubmissionPublic(CamelModel):
    id: str
    contest_id: str
    problem_id: str
    user_id: str
    username: str
    code: str
    language: str
    status: SubmissionStatus
    score: int
    time_taken: int
    submitted_at: datetime
    test_cases_passed: int
    total_test_cases: int
    execution_time: int


class LeaderboardRow(CamelModel):
    rank: int
    user_id: str
    username: str
    total_score: int
    total_time: int
    problems_solved: int


class JudgeEchoRequest(BaseModel):
    # the browser forwards a Judge0-shaped body; only stdin matters here
    model_config = ConfigDict(extra="allow")

    stdin: Any = None


class JudgeEchoResponse(BaseModel):
    stdout: str
