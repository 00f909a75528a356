from __future__ import annotations
from datetime import datetime, timezone as dt_tz
from fastapi import APIRouter, Depends, HTTPException
import structlog
from codesync.auth_deps import get_current_user
from codesync.db import Store, get_store
from codesync.models.contest import Contest, Problem
from codesync.models.submission import Submission
from codesync.models.user import User
from codesync.schemas.common import ApiResponse
from codesync.schemas.contest import ContestCreate, ContestPublic, JoinResult, ProblemPublic, TestCasePublic
from codesync.schemas.submission import SubmissionPublic, LeaderboardRow
from codesync.services.contest_status import compute_status
from codesync.services.leaderboard import build_leaderboard

router = APIRouter(prefix="/api/contests", tags=["contests"])
log = structlog.get_logger()

def to_public(c: Contest, now: datetime | None = None) -> ContestPublic:
    now = now or datetime.now(dt_tz.utc)
    return ContestPublic(
        id=c.id, title=c.title, description=c.description,
        start_time=c.start_time, end_time=c.end_time, duration=c.duration,
        status=compute_status(now, c.start_time, c.end_time),
        max_participants=c.max_participants, current_participants=c.current_participants,
        problems=list(c.problems), created_by=c.created_by, created_at=c.created_at,
    )

def problem_public(p: Problem) -> ProblemPublic:
    return ProblemPublic(
        id=p.id, contest_id=p.contest_id, title=p.title, description=p.description,
        input_format=p.input_format, output_format=p.output_format,
        sample_input=p.sample_input, sample_output=p.sample_output,
        time_limit=p.time_limit, memory_limit=p.memory_limit,
        difficulty=p.difficulty, points=p.points,
        test_cases=[TestCasePublic(input=tc.input, output=tc.output, is_hidden=tc.is_hidden) for tc in p.test_cases],
    )

def submission_public(s: Submission) -> SubmissionPublic:
    return SubmissionPublic(
        id=s.id, contest_id=s.contest_id, problem_id=s.problem_id,
        user_id=s.user_id, username=s.username, code=s.code, language=s.language,
        status=s.status, score=s.score, time_taken=s.time_taken, submitted_at=s.submitted_at,
        test_cases_passed=s.test_cases_passed, total_test_cases=s.total_test_cases,
        execution_time=s.execution_time,
    )

@router.get("", response_model=ApiResponse[list[ContestPublic]])
async def list_contests(store: Store = Depends(get_store)):
    now = datetime.now(dt_tz.utc)
    return ApiResponse(data=[to_public(c, now) for c in store.contests])

@router.get("/{contest_id}", response_model=ApiResponse[ContestPublic])
async def get_contest(contest_id: str, store: Store = Depends(get_store)):
    contest = store.get_contest(contest_id)
    if not contest:
        raise HTTPException(status_code=404, detail="Contest not found")
    return ApiResponse(data=to_public(contest))

@router.post("", response_model=ApiResponse[ContestPublic], status_code=201)
async def create_contest(
    payload: ContestCreate,
    store: Store = Depends(get_store),
    user: User = Depends(get_current_user),
):
    if payload.end_time <= payload.start_time:
        raise HTTPException(status_code=400, detail="endTime must be after startTime")
    contest = Contest(
        title=payload.title,
        description=payload.description,
        duration=payload.duration,
        max_participants=payload.max_participants,
        start_time=payload.start_time,
        end_time=payload.end_time,
        problems=list(payload.problems),
        created_by=user.username or payload.created_by or "system",
    )
    store.contests.append(contest)
    log.info("contest_created", contest_id=contest.id, created_by=contest.created_by)
    return ApiResponse(data=to_public(contest))

@router.post("/{contest_id}/join", response_model=ApiResponse[JoinResult])
async def join_contest(
    contest_id: str,
    store: Store = Depends(get_store),
    user: User = Depends(get_current_user),
):
    contest = store.get_contest(contest_id)
    if not contest:
        raise HTTPException(status_code=404, detail="Contest not found")
    if compute_status(datetime.now(dt_tz.utc), contest.start_time, contest.end_time) == "finished":
        raise HTTPException(status_code=400, detail="Contest finished")

    result = JoinResult(user_id=user.id, contest_id=contest.id, current_participants=contest.current_participants)
    if user.id in contest.participant_ids:
        return ApiResponse(message="Already joined contest", data=result)
    if contest.current_participants >= contest.max_participants:
        raise HTTPException(status_code=400, detail="Contest is full")

    contest.participant_ids.add(user.id)
    contest.current_participants += 1
    result.current_participants = contest.current_participants
    log.info("contest_joined", contest_id=contest.id, user_id=user.id, participants=contest.current_participants)
    return ApiResponse(message="Successfully joined contest", data=result)

@router.get("/{contest_id}/problems", response_model=ApiResponse[list[ProblemPublic]])
async def list_problems(contest_id: str, store: Store = Depends(get_store)):
    return ApiResponse(data=[problem_public(p) for p in store.problems_for(contest_id)])

@router.get("/{contest_id}/submissions", response_model=ApiResponse[list[SubmissionPublic]])
async def list_submissions(contest_id: str, store: Store = Depends(get_store)):
    return ApiResponse(data=[submission_public(s) for s in store.submissions_for(contest_id)])

@router.get("/{contest_id}/users/{user_id}/submissions", response_model=ApiResponse[list[SubmissionPublic]])
async def list_user_submissions(contest_id: str, user_id: str, store: Store = Depends(get_store)):
    return ApiResponse(data=[submission_public(s) for s in store.submissions_for(contest_id, user_id)])

@router.get("/{contest_id}/leaderboard", response_model=ApiResponse[list[LeaderboardRow]])
async def leaderboard(contest_id: str, store: Store = Depends(get_store)):
    return ApiResponse(data=build_leaderboard(store.submissions_for(contest_id)))
