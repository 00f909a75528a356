from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException
import structlog
from codesync.auth_deps import get_current_user
from codesync.db import Store, get_store
from codesync.models.submission import Submission
from codesync.models.user import User
from codesync.routes.contests import submission_public
from codesync.schemas.common import ApiResponse
from codesync.schemas.submission import SubmissionCreate, SubmissionPublic, JudgeEchoRequest, JudgeEchoResponse
from codesync.services.judge import judge_code, simulated_timings

router = APIRouter(prefix="/api", tags=["submissions"])
log = structlog.get_logger()

@router.post("/submissions", response_model=ApiResponse[SubmissionPublic], status_code=201)
async def create_submission(
    payload: SubmissionCreate,
    store: Store = Depends(get_store),
    user: User = Depends(get_current_user),
):
    if not store.get_contest(payload.contest_id):
        raise HTTPException(status_code=404, detail="Contest not found")
    problem = store.get_problem(payload.problem_id)
    if not problem:
        raise HTTPException(status_code=404, detail="Problem not found")
    if problem.contest_id != payload.contest_id:
        raise HTTPException(status_code=400, detail="Problem does not belong to this contest")

    verdict = judge_code(payload.code, problem)
    time_taken, execution_time = simulated_timings()
    submission = Submission(
        contest_id=payload.contest_id,
        problem_id=problem.id,
        user_id=user.id,
        username=user.username,
        code=payload.code,
        language=payload.language,
        status=verdict.status,
        score=verdict.score,
        time_taken=time_taken,
        test_cases_passed=verdict.test_cases_passed,
        total_test_cases=verdict.total_test_cases,
        execution_time=execution_time,
    )
    store.submissions.append(submission)
    log.info(
        "submission_judged",
        submission_id=submission.id, contest_id=submission.contest_id, problem_id=problem.id,
        user_id=user.id, status=verdict.status, score=verdict.score,
    )
    return ApiResponse(data=submission_public(submission))

# Stand-in for the remote execution service: echoes stdin back as stdout
@router.post("/judge0/submit", response_model=JudgeEchoResponse)
async def judge_echo(payload: JudgeEchoRequest | None = None):
    stdin = payload.stdin if payload else None
    return JudgeEchoResponse(stdout=str(stdin or ""))
