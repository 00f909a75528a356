from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException
from codesync.db import Store, get_store
from codesync.routes.contests import problem_public
from codesync.schemas.common import ApiResponse
from codesync.schemas.contest import ProblemPublic

router = APIRouter(prefix="/api/problems", tags=["problems"])

@router.get("/{problem_id}", response_model=ApiResponse[ProblemPublic])
async def get_problem(problem_id: str, store: Store = Depends(get_store)):
    problem = store.get_problem(problem_id)
    if not problem:
        raise HTTPException(status_code=404, detail="Problem not found")
    return ApiResponse(data=problem_public(problem))
